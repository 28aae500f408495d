"""
Integrator providing an explicit class of TVD or SSP Runge-Kutta schemes, from 1st to
4th order accurate.

For the ODE system U_t = R(t, U) the schemes read

    U^{n+1} = U^n + dt sum_{s=1}^{Ns} beta^s K^s,
    K^s = R(t^n + gamma^s dt, U^n + dt sum_{i=1}^{s-1} alpha^{s,i} K^i),

with gamma^s = sum_i alpha^{s,i}. The scheme is selected by its number of stages,
see `rktvd.butcher_tableaux`. The time step has to be provided, it is not computed by
the integrator.
"""

from __future__ import annotations

import logging
from copy import copy
from typing import MutableSequence

from rktvd import butcher_tableaux
from rktvd.butcher_tableau import ButcherTableau
from rktvd.errors import BadStagesNumberError
from rktvd.integrand import Integrand
from rktvd.runge_kutta_scheme import RungeKuttaScheme

_logger = logging.getLogger(__name__)


class TVDRungeKuttaIntegrator:
    """
    Explicit TVD/SSP Runge-Kutta integrator.

    The integrator has to be initialized (i.e. the Butcher coefficients selected)
    before it is used. An integrator with zero stages is uninitialized and refuses to
    integrate.

    Parameters
    ----------
    stages: int, optional
        If given, the integrator is initialized with this number of stages.
    stop_on_fail: bool, optional
        Passed on to `init` if `stages` is given.

    Attributes
    ----------
    error: BadStagesNumberError or None
        The error of the last failed initialization, None otherwise.
    """

    def __init__(self, stages: int | None = None, stop_on_fail: bool = True):
        self._scheme = RungeKuttaScheme(None)
        self.error: BadStagesNumberError | None = None
        if stages is not None:
            self.init(stages, stop_on_fail)

    @property
    def butcher_tableau(self) -> ButcherTableau | None:
        return self._scheme.butcher_tableau

    @property
    def stages(self) -> int:
        return self._scheme.stages

    @property
    def is_initialized(self) -> bool:
        return self.stages > 0

    @staticmethod
    def is_supported(stages: int) -> bool:
        """Checks if the queried number of stages is supported or not."""
        return butcher_tableaux.is_supported(stages)

    @staticmethod
    def min_stages() -> int:
        return butcher_tableaux.min_stages()

    @staticmethod
    def max_stages() -> int:
        return butcher_tableaux.max_stages()

    def describe(self, prefix: str = "") -> str:
        """Returns a pretty-formatted description of the integrator class."""
        return (
            f"{prefix}TVD Runge-Kutta multi-stage schemes class\n"
            f"{prefix}  Supported stages numbers: [{butcher_tableaux.SUPPORTED_STAGES}]"
        )

    def init(
        self, stages: int, stop_on_fail: bool = True
    ) -> ButcherTableau | BadStagesNumberError:
        """
        Initializes the Butcher coefficients of the integrator.

        Parameters
        ----------
        stages: int
            Number of stages used.
        stop_on_fail: bool, optional
            Whether an unsupported number of stages raises. Otherwise the error is
            returned (and stored in `error`) and the caller decides how to go on.

        Returns
        -------
        ButcherTableau or BadStagesNumberError
            The selected tableau, or the error if the initialization failed and
            `stop_on_fail` is False. In the latter case the integrator is left
            uninitialized.

        Raises
        ------
        BadStagesNumberError
            If the number of stages is not supported and `stop_on_fail` is True.
        """
        self.destroy()
        try:
            butcher_tableau = butcher_tableaux.tvd_runge_kutta_tableau(stages)
        except BadStagesNumberError as error:
            self.error = error
            if stop_on_fail:
                _logger.error("%s", error)
                raise
            _logger.warning("%s", error)
            return error
        self._scheme = RungeKuttaScheme(butcher_tableau)
        _logger.debug("Initialized %s with %d stages", butcher_tableau.name, stages)
        return butcher_tableau

    def destroy(self):
        """Destroys the integrator. Calling it repeatedly is harmless."""
        if self.is_initialized:
            _logger.debug("Destroying %s", self.butcher_tableau.name)
        self._scheme = RungeKuttaScheme(None)
        self.error = None

    def set(self, other: TVDRungeKuttaIntegrator):
        """
        Sets this integrator to the contents of `other`. The tableau is shared, it is
        read-only.
        """
        self._scheme = RungeKuttaScheme(other.butcher_tableau)
        self.error = other.error

    def allocate_stages(self, integrand: Integrand) -> list:
        """Returns a new stage buffer holding one copy of `integrand` per stage. This
        is a convenience for callers, `integrate` never allocates."""
        return [copy(integrand) for _ in range(self.stages)]

    def integrate(
        self,
        state: Integrand,
        stage: MutableSequence[Integrand],
        delta_t: float,
        time: float,
    ) -> Integrand:
        """
        Integrates the state with the explicit TVD (or SSP) Runge-Kutta scheme.

        Parameters
        ----------
        state: Integrand
            Field to be integrated. Updated in place if it supports `+=`.
        stage: MutableSequence[Integrand]
            Runge-Kutta stages, one slot per stage. Overwritten.
        delta_t: float
            Time step.
        time: float
            Time.

        Returns
        -------
        Integrand
            The state at `time + delta_t`.

        Raises
        ------
        NotInitializedError
            If the integrator is not initialized.
        DimensionMismatchError
            If `stage` does not have one slot per stage.
        """
        return self._scheme.integrate(state, stage, delta_t, time)

    def __eq__(self, other):
        if not isinstance(other, TVDRungeKuttaIntegrator):
            return NotImplemented
        if not (self.is_initialized or other.is_initialized):
            return True
        return self.butcher_tableau == other.butcher_tableau

    __hash__ = None

    def __repr__(self):
        return f"TVDRungeKuttaIntegrator(stages={self.stages})"
