# pylint: disable=missing-module-docstring

from __future__ import annotations

from copy import copy
from typing import MutableSequence

from rktvd.butcher_tableau import ButcherTableau
from rktvd.errors import DimensionMismatchError, NotInitializedError
from rktvd.integrand import Integrand


class RungeKuttaScheme:
    """Applies an explicit Runge-Kutta method given by its Butcher tableau to an
    integrand. The residual of the ODE is only ever evaluated through the
    `at_time` capability of the integrand, once per stage.

    The stages are stored in a stage field provided by the caller. It has to have
    exactly one slot per stage, which get overwritten; the field itself is never
    resized.

    Parameters
    ----------
    butcher_tableau: ButcherTableau or None
        The explicit butcher tableau to apply the Runge-Kutta method to. Without a
        tableau the scheme has zero stages and refuses to integrate.
    """

    def __init__(self, butcher_tableau: ButcherTableau | None):
        self.butcher_tableau = butcher_tableau

    @property
    def stages(self) -> int:
        if self.butcher_tableau is None:
            return 0
        return self.butcher_tableau.stages

    def check_stage_field(self, stage_field: MutableSequence[Integrand]):
        """Raises if the scheme is uninitialized or the stage field has the wrong
        size."""
        if self.stages == 0:
            raise NotInitializedError(
                "Runge-Kutta coefficients are not initialized, call init first"
            )
        if len(stage_field) != self.stages:
            raise DimensionMismatchError(
                f"Stage field has {len(stage_field)} slots, but the scheme has "
                f"{self.stages} stages"
            )

    def compute_stage(
        self,
        stage: int,
        delta_t: float,
        old_time: float,
        old_state: Integrand,
        stage_field: MutableSequence[Integrand],
    ) -> Integrand:
        """Computes the residual at the given stage from the previous stages and
        stores it in the stage field."""
        stage_field[stage] = copy(old_state)
        for previous in range(stage):
            stage_field[stage] = stage_field[stage] + stage_field[previous] * (
                delta_t * self.butcher_tableau.butcher_matrix[stage, previous]
            )
        stage_time = (
            old_time + self.butcher_tableau.butcher_time_stages[stage] * delta_t
        )
        stage_field[stage] = stage_field[stage].at_time(stage_time)
        return stage_field[stage]

    def compute_step(
        self,
        delta_t: float,
        old_state: Integrand,
        stage_field: MutableSequence[Integrand],
    ) -> Integrand:
        """Adds the weighted stages to the state. States supporting `+=` are updated
        in place."""
        for stage in range(self.stages):
            old_state += stage_field[stage] * (
                delta_t * self.butcher_tableau.butcher_weight_vector[stage]
            )
        return old_state

    def integrate(
        self,
        state: Integrand,
        stage_field: MutableSequence[Integrand],
        delta_t: float,
        time: float,
    ) -> Integrand:
        """
        Advances the state by one step.

        Parameters
        ----------
        state: Integrand
            State at `time`.
        stage_field: MutableSequence[Integrand]
            Caller-owned buffer with one slot per stage. Holds the stages afterwards.
        delta_t: float
            Time step.
        time: float
            Current time.

        Returns
        -------
        Integrand
            The state at `time + delta_t`.
        """
        self.check_stage_field(stage_field)
        # stages depend on all previous ones, strictly in order
        for stage in range(self.stages):
            self.compute_stage(stage, delta_t, time, state, stage_field)
        return self.compute_step(delta_t, state, stage_field)
