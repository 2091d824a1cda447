# -*- coding: utf-8 -*-
"""
Closed-form solution of the log-utility / Cobb-Douglas growth model with full
depreciation. Used as an oracle for the numerical solver.

    V(k)  = c1 + c2 log(k)
    k'(k) = αβ k^α
    c(k)  = (1 - αβ) k^α
"""

import numpy as np

from optgrowth.exceptions import DomainError


def _check_capital(k):
    k = np.asarray(k, dtype=float)
    if np.any(~(k > 0)):
        raise DomainError(f"Capital must be strictly positive, got {k}")
    return k


def _unwrap(x):
    return float(x) if np.ndim(x) == 0 else x


def value_coefficients(model):
    """Return (c1, c2) such that V(k) = c1 + c2 log(k)."""
    α, β = model.α, model.β
    ab = α * β
    c1 = np.log(1 - ab) / (1 - β) + (np.log(ab) * ab) / ((1 - ab) * (1 - β))
    c2 = α / (1 - ab)
    return c1, c2


def closed_form_value(model, k):
    """
    True value function at capital k (scalar or array).

    Raises DomainError if any k <= 0.
    """
    k = _check_capital(k)
    c1, c2 = value_coefficients(model)
    return _unwrap(c1 + c2 * np.log(k))


def closed_form_policy(model, k):
    " Next period capital as a function of k "
    k = _check_capital(k)
    return _unwrap(model.α * model.β * model.f(k))


def closed_form_consumption(model, k):
    " Optimal consumption as a function of k "
    k = _check_capital(k)
    return _unwrap((1 - model.α * model.β) * model.f(k))
