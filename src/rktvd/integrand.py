"""Capability set a state has to provide to be integrated by the TVD Runge-Kutta
schemes."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Integrand(Protocol):
    """
    Protocol for the states that are advanced in time.

    Any type providing these operations can be integrated, no inheritance is
    required. Copies are made with `copy.copy`, so types holding mutable data should
    implement `__copy__`. The final combination of the stages uses `+=`; types
    implementing `__iadd__` are therefore updated in place.
    """

    def __add__(self, other: Integrand) -> Integrand:
        """Sum of two states."""

    def __mul__(self, scalar: float) -> Integrand:
        """State scaled by a real number."""

    def at_time(self, time: float) -> Integrand:
        """
        Evaluates the residual R(time, U) of the ODE U_t = R(t, U) at this state.

        Parameters
        ----------
        time: float
            Time at which the residual is evaluated.

        Returns
        -------
        Integrand
            The residual, stamped with `time`.
        """
