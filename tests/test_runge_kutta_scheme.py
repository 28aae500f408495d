"""Tests for the stage computation of the TVD Runge-Kutta schemes."""

import numpy as np
import pytest

from rktvd.butcher_tableaux import (
    explicit_euler,
    ssp_runge_kutta_five_stages,
    ssp_runge_kutta_three_stages,
    ssp_runge_kutta_two_stages,
)
from rktvd.errors import DimensionMismatchError, NotInitializedError
from rktvd.integrand import Integrand
from rktvd.odes.array_integrand import ArrayIntegrand
from rktvd.runge_kutta_scheme import RungeKuttaScheme

from .odes import RecordingResidual, ScalarIntegrand

ALL_TABLEAUX = [
    explicit_euler,
    ssp_runge_kutta_two_stages,
    ssp_runge_kutta_three_stages,
    ssp_runge_kutta_five_stages,
]


def test_ssp_runge_kutta_two_stages_step():
    """U' = -U, U(0) = 1, one step of size 0.1."""
    scheme = RungeKuttaScheme(ssp_runge_kutta_two_stages)
    state = ArrayIntegrand(np.array([1.0]), lambda time, values: -values)
    stage = [None, None]
    result = scheme.integrate(state, stage, 0.1, 0.0)
    assert stage[0].values[0] == pytest.approx(-1.0)
    assert stage[1].values[0] == pytest.approx(-0.9)
    assert result.values[0] == pytest.approx(0.905)


def test_forward_euler():
    residual = RecordingResidual(rate=-2.0, forcing=np.sin)
    old_values = np.array([0.7, -1.3])
    scheme = RungeKuttaScheme(explicit_euler)
    state = ArrayIntegrand(old_values.copy(), residual)
    result = scheme.integrate(state, [None], 0.01, 0.3)
    expected = old_values + 0.01 * (-2.0 * old_values + np.sin(0.3))
    assert result.values == pytest.approx(expected, rel=1e-15)


@pytest.mark.parametrize("butcher_tableau", ALL_TABLEAUX)
@pytest.mark.parametrize("time, delta_t", [(0.0, 0.1), (2.5, 0.01)])
def test_one_residual_evaluation_per_stage(butcher_tableau, time, delta_t):
    residual = RecordingResidual()
    scheme = RungeKuttaScheme(butcher_tableau)
    state = ArrayIntegrand(np.ones(3), residual)
    scheme.integrate(state, [None] * butcher_tableau.stages, delta_t, time)
    assert residual.evaluations == butcher_tableau.stages
    assert residual.times == pytest.approx(
        list(time + butcher_tableau.butcher_time_stages * delta_t)
    )


@pytest.mark.parametrize("butcher_tableau", ALL_TABLEAUX)
def test_state_is_updated_in_place(butcher_tableau):
    scheme = RungeKuttaScheme(butcher_tableau)
    state = ArrayIntegrand(np.ones(2), RecordingResidual())
    values = state.values
    result = scheme.integrate(state, [None] * butcher_tableau.stages, 0.1, 0.0)
    assert result is state
    assert result.values is values
    assert np.all(values < 1.0)


@pytest.mark.parametrize("butcher_tableau", ALL_TABLEAUX)
def test_value_type_integrand(butcher_tableau):
    """Integrands without in-place addition are rebound, not mutated."""
    scheme = RungeKuttaScheme(butcher_tableau)
    state = ScalarIntegrand(1.0, lambda time, value: -value)
    stage = [None] * butcher_tableau.stages
    result = scheme.integrate(state, stage, 0.1, 0.0)
    reference = scheme.integrate(
        ArrayIntegrand(np.array([1.0]), lambda time, values: -values),
        [None] * butcher_tableau.stages,
        0.1,
        0.0,
    )
    assert state.value == 1.0
    assert result.value == pytest.approx(reference.values[0], rel=1e-15)
    assert all(isinstance(entry, ScalarIntegrand) for entry in stage)


@pytest.mark.parametrize(
    "butcher_tableau, stability_polynomial",
    [
        (explicit_euler, lambda z: 1 + z),
        (ssp_runge_kutta_two_stages, lambda z: 1 + z + z**2 / 2),
        (ssp_runge_kutta_three_stages, lambda z: 1 + z + z**2 / 2 + z**3 / 6),
    ],
)
@pytest.mark.parametrize("z", [-0.5, -0.1, 0.2])
def test_linear_stability_polynomial(butcher_tableau, stability_polynomial, z):
    scheme = RungeKuttaScheme(butcher_tableau)
    state = ArrayIntegrand(np.array([1.0]), lambda time, values: z * values)
    result = scheme.integrate(state, [None] * butcher_tableau.stages, 1.0, 0.0)
    assert result.values[0] == pytest.approx(stability_polynomial(z), rel=1e-14)


@pytest.mark.parametrize("butcher_tableau", ALL_TABLEAUX)
def test_local_error_order(butcher_tableau):
    """The error of one step of U' = -U is O(h^(p+1))."""
    errors = []
    step_sizes = [0.05, 0.025]
    for delta_t in step_sizes:
        scheme = RungeKuttaScheme(butcher_tableau)
        state = ArrayIntegrand(np.array([1.0]), lambda time, values: -values)
        result = scheme.integrate(state, [None] * butcher_tableau.stages, delta_t, 0.0)
        errors.append(abs(result.values[0] - np.exp(-delta_t)))
    observed_order = np.log2(errors[0] / errors[1])
    assert observed_order == pytest.approx(butcher_tableau.p + 1, abs=0.2)


def test_stage_buffer_is_reused():
    scheme = RungeKuttaScheme(ssp_runge_kutta_three_stages)
    stage = [None] * 3
    state = ArrayIntegrand(np.array([1.0]), lambda time, values: -values)
    for step in range(10):
        state = scheme.integrate(state, stage, 0.1, 0.1 * step)
    assert len(stage) == 3
    assert state.values[0] == pytest.approx(np.exp(-1.0), rel=1e-4)


def test_uninitialized_scheme():
    scheme = RungeKuttaScheme(None)
    assert scheme.stages == 0
    assert scheme.butcher_tableau is None
    with pytest.raises(NotInitializedError):
        scheme.integrate(
            ArrayIntegrand(np.ones(1), RecordingResidual()), [], 0.1, 0.0
        )


@pytest.mark.parametrize("slots", [0, 2, 4])
def test_stage_field_mismatch(slots):
    residual = RecordingResidual()
    scheme = RungeKuttaScheme(ssp_runge_kutta_three_stages)
    stage = [None] * slots
    with pytest.raises(DimensionMismatchError):
        scheme.integrate(ArrayIntegrand(np.ones(1), residual), stage, 0.1, 0.0)
    assert stage == [None] * slots
    assert residual.evaluations == 0


def test_integrands_satisfy_protocol():
    assert isinstance(ArrayIntegrand(np.ones(1), RecordingResidual()), Integrand)
    assert isinstance(ScalarIntegrand(1.0, RecordingResidual()), Integrand)
    assert not isinstance(np.ones(1), Integrand)


def test_array_integrand_time_stamps():
    """Stages carry the time of their residual evaluation, the advanced state keeps
    the stamp it was created with."""
    scheme = RungeKuttaScheme(ssp_runge_kutta_three_stages)
    state = ArrayIntegrand(np.array([1.0]), lambda time, values: -values)
    stage = [None] * 3
    result = scheme.integrate(state, stage, 0.1, 0.0)
    assert result is state
    assert state.time == 0.0
    assert [entry.time for entry in stage] == pytest.approx(
        list(ssp_runge_kutta_three_stages.butcher_time_stages * 0.1)
    )
    assert (state + stage[2]).time == 0.0
    assert (stage[2] * 2.0).time == pytest.approx(0.05)
