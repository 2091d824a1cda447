# -*- coding: utf-8 -*-
"""
Value function iteration for the log-utility growth model.

Each sweep rebuilds a piecewise-linear interpolant of the current guess and,
at every grid point, maximises

    log(c) + β w(k^α - c)

over consumption with scipy's bounded Brent minimiser.
"""

#==============================================================================
# Recursive Methods - Optimal Growth
#==============================================================================

import logging
import numbers
from dataclasses import dataclass, field

import numpy as np
from scipy.optimize import fminbound

from optgrowth.exceptions import InfeasibleState, InvalidParameter, NonConvergence

logger = logging.getLogger(__name__)

EPS = 1e-8


@dataclass
class VFIResult:
    """
    Output of solve_optgrowth.

    Attributes:
        v: Value function on the grid (last iterate).
        kprime: Next period capital chosen at each grid point.
        consumption: Optimal consumption at each grid point.
        grid: The capital grid the arrays are aligned with.
        iterations: Number of Bellman sweeps performed.
        distance: Sup-norm distance between the last two iterates.
        converged: Whether distance fell below tol within max_iter.
        history: Sup-norm distance after every sweep.
    """

    v: np.ndarray
    kprime: np.ndarray
    consumption: np.ndarray
    grid: np.ndarray
    iterations: int
    distance: float
    converged: bool
    history: list = field(default_factory=list)


def consumption_bounds(y, model, eps=EPS):
    """
    Interval for consumption at output y that keeps log(c) finite and the
    continuation capital y - c inside [kmin, kmax].
    """
    lo = max(eps, y - model.kmax)
    hi = min(y - eps, y - model.kmin)
    return lo, hi


def objective(c, y, w_func, β):
    " Negated right hand side of the Bellman equation "
    return -np.log(c) - β * w_func(y - c)


def bellman_operator(w, model, Tw=None, compute_policy=False, eps=EPS, xtol=1e-5):
    """
    Apply the Bellman operator to the value array w.

    The interpolant is built from w only; Tw must not alias w.

    Returns Tw, or (Tw, kprime, consumption) when compute_policy is set.

    Raises InfeasibleState if some grid point has an empty consumption
    interval or produces a non-finite value.
    """
    grid, β = model.kgrid, model.β

    # === Apply linear interpolation to w === #
    w_func = lambda x: np.interp(x, grid, w)

    # == Initialize Tw if necessary == #
    if Tw is None:
        Tw = np.empty_like(w)
    elif Tw is w:
        raise ValueError("Tw must be a separate buffer from w")

    if compute_policy:
        σ = np.empty_like(w)
        c_opt = np.empty_like(w)

    # == set Tw[i] = max_c { u(c) + β w(f(k) - c) } == #
    for i, k in enumerate(grid):
        y = model.f(k)
        lo, hi = consumption_bounds(y, model, eps)
        if not hi > lo:
            raise InfeasibleState(i, k, y, lo, hi)

        c_star = fminbound(objective, lo, hi, args=(y, w_func, β), xtol=xtol)
        Tw[i] = -objective(c_star, y, w_func, β)
        if not np.isfinite(Tw[i]):
            raise InfeasibleState(i, k, y, lo, hi)

        if compute_policy:
            σ[i] = y - c_star  # k_(t+1) as a function of k_t
            c_opt[i] = c_star

    if compute_policy:
        return Tw, σ, c_opt
    return Tw


def _check_solver_args(tol, max_iter, eps, report_every):
    if not tol > 0:
        raise InvalidParameter(f"tol must be positive, got {tol}")
    if isinstance(max_iter, bool) or not isinstance(max_iter, numbers.Integral) or max_iter < 1:
        raise InvalidParameter(f"max_iter must be a positive integer, got {max_iter!r}")
    if not eps > 0:
        raise InvalidParameter(f"eps must be positive, got {eps}")
    if report_every < 0:
        raise InvalidParameter(f"report_every must be non-negative, got {report_every}")


def solve_optgrowth(model, tol=1e-6, max_iter=500, eps=EPS, xtol=1e-5,
                    strict=False, report_every=50):
    """
    Iterate the Bellman operator from a zero initial guess until the sup-norm
    distance between successive iterates is below tol.

    Args:
        model: LogGrowthModel.
        tol: Convergence tolerance on the sup-norm distance.
        max_iter: Iteration budget.
        eps: Floor on consumption and on the distance of c from output.
        xtol: Tolerance passed to fminbound.
        strict: Raise NonConvergence instead of returning an unconverged result.
        report_every: Log progress every this many iterations (0 disables).

    Returns:
        VFIResult. If max_iter is exhausted, converged is False and a warning
        is logged.
    """
    _check_solver_args(tol, max_iter, eps, report_every)

    w = np.zeros(model.nk)  # Set initial condition
    # == Spare buffer for bellman_operator; swapped with w after each sweep == #
    Tw = np.empty(model.nk)

    error = tol + 1
    i = 0
    history = []

    # Iterate to find solution
    while error >= tol and i < max_iter:
        bellman_operator(w, model, Tw, eps=eps, xtol=xtol)
        error = float(np.max(np.abs(Tw - w)))
        w, Tw = Tw, w
        i += 1
        history.append(error)
        if report_every and i % report_every == 0:
            logger.info("Iteration %d, error is %.3e", i, error)

    converged = error < tol
    if converged:
        logger.info("VFI converged in %d iterations (error=%.2e).", i, error)

    # Computes policy
    _, kprime, consumption = bellman_operator(
        w, model, Tw, compute_policy=True, eps=eps, xtol=xtol
    )

    result = VFIResult(
        v=w,
        kprime=kprime,
        consumption=consumption,
        grid=model.kgrid,
        iterations=i,
        distance=error,
        converged=converged,
        history=history,
    )

    if not converged:
        if strict:
            raise NonConvergence(result)
        logger.warning(
            "VFI did not converge after %d iterations (error=%.2e).", i, error
        )
    return result
