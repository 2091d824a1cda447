# -*- coding: utf-8 -*-
"""
Plots of the approximate solution against the closed form.
"""

import matplotlib.pyplot as plt

from optgrowth.analytical import closed_form_policy, closed_form_value


def plot_value_function(model, result, ax=None):
    if ax is None:
        fig, ax = plt.subplots(figsize=(9, 5))
    grid = result.grid
    ax.plot(grid, result.v, lw=2, alpha=0.6, label='approximate value function')
    ax.plot(grid, closed_form_value(model, grid), lw=2, alpha=0.6,
            label='true value function')
    ax.set_xlabel('k')
    ax.set_ylabel('v')
    ax.legend(loc='lower right')
    return ax


def plot_policy_function(model, result, ax=None):
    if ax is None:
        fig, ax = plt.subplots(figsize=(9, 5))
    grid = result.grid
    ax.plot(grid, result.kprime, lw=2, alpha=0.6, label='approximate policy function')
    ax.plot(grid, closed_form_policy(model, grid), lw=2, alpha=0.6,
            label='true policy function')

    # 45° line
    ax.plot(grid, grid, lw=2, alpha=0.6, label='45 degrees line')

    ax.set_xlabel('k_t')
    ax.set_ylabel('k_(t+1)')
    ax.legend(loc='lower right')
    return ax
