# -*- coding: utf-8 -*-
"""
optgrowth - value function iteration for the deterministic optimal growth
model with log utility and Cobb-Douglas production.
"""

from optgrowth.analytical import (
    closed_form_consumption,
    closed_form_policy,
    closed_form_value,
)
from optgrowth.exceptions import (
    DomainError,
    InfeasibleState,
    InvalidParameter,
    NonConvergence,
    OptGrowthError,
)
from optgrowth.model import LogGrowthModel, load_model, make_model
from optgrowth.vfi import VFIResult, bellman_operator, solve_optgrowth

__version__ = "0.1.0"
