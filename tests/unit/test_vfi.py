"""Unit tests for the Bellman operator and solve_optgrowth."""

import logging

import numpy as np
import pytest

from optgrowth.analytical import closed_form_value
from optgrowth.exceptions import InfeasibleState, InvalidParameter, NonConvergence
from optgrowth.model import make_model
from optgrowth.vfi import (
    EPS,
    VFIResult,
    bellman_operator,
    consumption_bounds,
    objective,
    solve_optgrowth,
)


class TestConsumptionBounds:

    def test_non_degenerate_on_default_grid(self, default_model):
        for k in default_model.kgrid:
            lo, hi = consumption_bounds(default_model.f(k), default_model)
            assert hi > lo

    def test_continuation_stays_on_grid(self, default_model):
        model = default_model
        for k in model.kgrid:
            y = model.f(k)
            lo, hi = consumption_bounds(y, model)
            assert y - hi >= model.kmin - 1e-12
            assert y - lo <= model.kmax + 1e-12

    def test_lower_bound_when_output_exceeds_kmax(self):
        model = make_model(α=0.9, kmin=0.1, kmax=1.0)
        y = model.f(1.0) + 0.5
        lo, hi = consumption_bounds(y, model)
        assert lo == pytest.approx(y - model.kmax)
        assert hi == pytest.approx(y - model.kmin)

    def test_floor_and_ceiling(self, default_model):
        lo, hi = consumption_bounds(0.5, default_model, eps=0.1)
        assert lo == pytest.approx(0.1)
        assert hi == pytest.approx(0.4)


class TestObjective:

    def test_negated_bellman_rhs(self):
        w_func = lambda x: 2.0 * x
        value = objective(0.5, 1.5, w_func, 0.9)
        assert value == pytest.approx(-(np.log(0.5) + 0.9 * 2.0))

    def test_pure(self):
        w_func = lambda x: np.sqrt(x)
        assert objective(0.2, 1.0, w_func, 0.95) == objective(0.2, 1.0, w_func, 0.95)


class TestBellmanOperator:

    def test_zero_guess_gives_log_of_max_consumption(self, small_model):
        """With w = 0 the best choice is to consume everything allowed."""
        w = np.zeros(small_model.nk)
        Tw = bellman_operator(w, small_model)
        y = small_model.f(small_model.kgrid)
        np.testing.assert_allclose(Tw, np.log(y - small_model.kmin), atol=5e-3)
        assert np.all(Tw <= np.log(y - small_model.kmin) + 1e-12)

    def test_does_not_modify_input(self, small_model):
        w = np.linspace(-5.0, 0.0, small_model.nk)
        w_before = w.copy()
        bellman_operator(w, small_model)
        np.testing.assert_array_equal(w, w_before)

    def test_writes_into_buffer(self, small_model):
        w = np.zeros(small_model.nk)
        Tw = np.empty(small_model.nk)
        out = bellman_operator(w, small_model, Tw)
        assert out is Tw

    def test_rejects_aliased_buffer(self, small_model):
        w = np.zeros(small_model.nk)
        with pytest.raises(ValueError):
            bellman_operator(w, small_model, w)

    def test_policy_arrays(self, small_model):
        w = closed_form_value(small_model, small_model.kgrid)
        Tw, kprime, c = bellman_operator(w, small_model, compute_policy=True)
        y = small_model.f(small_model.kgrid)
        np.testing.assert_allclose(kprime + c, y)
        assert np.all(kprime >= small_model.kmin - 1e-12)
        assert np.all(kprime <= small_model.kmax + 1e-12)
        assert np.all(c > 0)

    def test_closed_form_is_near_fixed_point(self, default_model):
        """Linear interpolation of a concave V lies below it, so T(V) <= V."""
        v_true = closed_form_value(default_model, default_model.kgrid)
        Tv = bellman_operator(v_true, default_model)
        assert np.all(Tv <= v_true + 1e-8)
        assert np.max(np.abs(Tv - v_true)) < 0.1

    def test_monotone_in_capital(self, small_model):
        Tw = bellman_operator(np.zeros(small_model.nk), small_model)
        assert np.all(np.diff(Tw) > 0)

    def test_infeasible_state(self):
        model = make_model(α=0.99, kmin=1e-9, kmax=1.0, nk=5)
        with pytest.raises(InfeasibleState) as excinfo:
            bellman_operator(np.zeros(model.nk), model)
        assert excinfo.value.index == 0
        assert excinfo.value.hi <= excinfo.value.lo


class TestSolveOptgrowth:

    def test_result_shapes(self, small_model):
        result = solve_optgrowth(small_model, tol=1e-3)
        assert isinstance(result, VFIResult)
        for arr in (result.v, result.kprime, result.consumption, result.grid):
            assert arr.shape == (small_model.nk,)
        assert result.converged
        assert result.distance < 1e-3
        assert len(result.history) == result.iterations

    def test_value_increasing(self, small_model):
        result = solve_optgrowth(small_model, tol=1e-3)
        assert np.all(np.diff(result.v) > 0)
        assert np.all(np.isfinite(result.v))

    def test_idempotent(self, small_model):
        first = solve_optgrowth(small_model, tol=1e-3)
        second = solve_optgrowth(small_model, tol=1e-3)
        np.testing.assert_array_equal(first.v, second.v)
        np.testing.assert_array_equal(first.kprime, second.kprime)
        assert first.iterations == second.iterations

    def test_distance_shrinks(self, small_model):
        result = solve_optgrowth(small_model, tol=1e-3)
        assert result.history[-1] < result.history[0]

    def test_non_convergence_flagged(self, small_model, caplog):
        with caplog.at_level(logging.WARNING, logger="optgrowth.vfi"):
            result = solve_optgrowth(small_model, max_iter=5)
        assert not result.converged
        assert result.iterations == 5
        assert result.distance >= 1e-6
        assert "did not converge" in caplog.text

    def test_non_convergence_strict(self, small_model):
        with pytest.raises(NonConvergence) as excinfo:
            solve_optgrowth(small_model, max_iter=3, strict=True)
        assert excinfo.value.result.iterations == 3
        assert excinfo.value.result.v.shape == (small_model.nk,)

    def test_progress_logged(self, small_model, caplog):
        with caplog.at_level(logging.INFO, logger="optgrowth.vfi"):
            solve_optgrowth(small_model, max_iter=10, report_every=5)
        assert "Iteration 5" in caplog.text
        assert "Iteration 10" in caplog.text

    def test_infeasible_aborts_solve(self):
        model = make_model(α=0.99, kmin=1e-9, kmax=1.0, nk=5)
        with pytest.raises(InfeasibleState):
            solve_optgrowth(model)

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"tol": 0.0},
            {"tol": -1e-6},
            {"max_iter": 0},
            {"max_iter": 2.5},
            {"eps": 0.0},
            {"report_every": -1},
        ],
    )
    def test_invalid_arguments(self, small_model, kwargs):
        with pytest.raises(InvalidParameter):
            solve_optgrowth(small_model, **kwargs)

    def test_default_eps(self):
        assert EPS == 1e-8
