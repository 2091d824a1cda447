# -*- coding: utf-8 -*-
"""
Exceptions raised by optgrowth.

Hierarchy
---------
OptGrowthError (base)
├── InvalidParameter - bad model or solver arguments
├── DomainError      - non-positive capital in the closed-form formulas
├── InfeasibleState  - grid point with no interior consumption choice
└── NonConvergence   - iteration budget exhausted before reaching tol
"""


class OptGrowthError(Exception):
    """Base class for every optgrowth error."""
    pass


class InvalidParameter(OptGrowthError, ValueError):
    """
    Invalid model or solver parameters.

    Raised at construction time, e.g. a capital share outside (0, 1) or a
    grid with fewer than two points. Never reaches the solver.
    """
    pass


class DomainError(OptGrowthError, ValueError):
    """Capital passed to an analytical formula is not strictly positive."""
    pass


class InfeasibleState(OptGrowthError):
    """
    Production at a grid point is too small to leave an interior
    consumption interval. Aborts the whole solve.
    """

    def __init__(self, index, k, y, lo, hi):
        self.index, self.k, self.y, self.lo, self.hi = index, k, y, lo, hi
        super().__init__(
            f"Empty consumption interval at grid index {index} "
            f"(k={k:.3e}, y={y:.3e}): lo={lo:.3e} >= hi={hi:.3e}. "
            f"Raise kmin or lower α."
        )


class NonConvergence(OptGrowthError):
    """
    Value-function iteration hit max_iter before the sup-norm distance
    fell below tol. The best available estimate is kept on ``result``.
    """

    def __init__(self, result):
        self.result = result
        super().__init__(
            f"No convergence after {result.iterations} iterations "
            f"(distance={result.distance:.3e})"
        )
