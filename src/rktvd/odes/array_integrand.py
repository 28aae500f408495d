"""Integrand backed by a numpy array."""

from __future__ import annotations

from typing import Callable

import numpy as np


class ArrayIntegrand:
    """
    State of an ODE system U_t = R(t, U) stored in a numpy array.

    Parameters
    ----------
    values: np.ndarray
        The state variables.
    residual: Callable[[float, np.ndarray], np.ndarray]
        The residual R(t, U) of the ODE.
    time: float, optional
        Time of the last residual evaluation, i.e. the stamp set by `at_time`.
        Arithmetic keeps the stamp of the left operand, so a state advanced by the
        integrator still carries the stamp it was created with. The integrator never
        reads it.
    """

    def __init__(
        self,
        values,
        residual: Callable[[float, np.ndarray], np.ndarray],
        time: float = 0.0,
    ):
        self.values = np.asarray(values, dtype=float)
        self.residual = residual
        self.time = time

    def __add__(self, other: ArrayIntegrand) -> ArrayIntegrand:
        return ArrayIntegrand(self.values + other.values, self.residual, self.time)

    def __iadd__(self, other: ArrayIntegrand) -> ArrayIntegrand:
        self.values += other.values
        return self

    def __mul__(self, scalar: float) -> ArrayIntegrand:
        return ArrayIntegrand(self.values * scalar, self.residual, self.time)

    __rmul__ = __mul__

    def __copy__(self) -> ArrayIntegrand:
        return ArrayIntegrand(self.values.copy(), self.residual, self.time)

    def at_time(self, time: float) -> ArrayIntegrand:
        return ArrayIntegrand(
            np.asarray(self.residual(time, self.values), dtype=float),
            self.residual,
            time,
        )

    def __repr__(self):
        return f"ArrayIntegrand(values={self.values!r}, time={self.time})"
