"""Shared fixtures for the optgrowth test suite."""

import matplotlib

matplotlib.use("Agg")

import pytest

from optgrowth.model import LogGrowthModel, make_model
from optgrowth.vfi import solve_optgrowth


@pytest.fixture
def default_model() -> LogGrowthModel:
    """α=0.65, β=0.95, k in [0.01, 2.0], 150 points."""
    return LogGrowthModel()


@pytest.fixture
def small_model() -> LogGrowthModel:
    """Coarse grid that solves in well under a second."""
    return make_model(nk=20)


@pytest.fixture(scope="session")
def default_solution():
    """Solve the default model once and share across tests."""
    model = LogGrowthModel()
    return model, solve_optgrowth(model)
