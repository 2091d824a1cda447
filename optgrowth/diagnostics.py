# -*- coding: utf-8 -*-
"""
Tables for checking a VFI solution against the closed form.
"""

import numpy as np
import pandas as pd

from optgrowth.analytical import closed_form_value


def compare_with_closed_form(model, v):
    """
    Grid-by-grid comparison of an approximate value function with the true one.

    Returns a DataFrame with columns k, v_approx, v_true, abs_error.
    """
    v = np.asarray(v, dtype=float)
    if v.shape != model.kgrid.shape:
        raise ValueError(
            f"Value array has shape {v.shape}, expected {model.kgrid.shape}"
        )
    v_true = closed_form_value(model, model.kgrid)
    return pd.DataFrame({
        "k": model.kgrid,
        "v_approx": v,
        "v_true": v_true,
        "abs_error": np.abs(v - v_true),
    })


def sup_norm_error(model, v):
    " Largest absolute gap to the closed-form value function "
    return float(compare_with_closed_form(model, v)["abs_error"].max())


def convergence_table(result):
    """Distance after each iteration, indexed from 1."""
    return pd.DataFrame({
        "iteration": np.arange(1, len(result.history) + 1),
        "distance": result.history,
    })


#==============================================================================
# Finding steady state
#==============================================================================

def find_steady_state(grid, kprime):
    """
    Grid point closest to a fixed point of the capital policy.

    Returns (index, k_ss).
    """
    ss = np.absolute(np.asarray(grid) - np.asarray(kprime))
    ss = pd.Series(ss)
    index_min = int(ss.idxmin())
    return index_min, float(grid[index_min])


def closed_form_steady_state(model):
    " k = αβ k^α "
    return (model.α * model.β) ** (1 / (1 - model.α))
