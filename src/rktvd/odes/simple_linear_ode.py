import numpy as np

from rktvd.odes.array_integrand import ArrayIntegrand


class SimpleLinearODE:
    """ODE y' = lambda * y , y(0) = 1 (by default, with lambda = -1)"""

    def __init__(self, lambda_: float = -1.0):
        self.lambda_ = lambda_

    def residual(self, time: float, values: np.ndarray) -> np.ndarray:
        return self.lambda_ * values

    @staticmethod
    def get_initial_values():
        """Initial values for the ODE"""
        return np.array([1.0])

    def initial_integrand(self, initial_time=0.0) -> ArrayIntegrand:
        return ArrayIntegrand(
            self.solution(initial_time), self.residual, initial_time
        )

    def solution(
        self,
        time: float,
        initial_values=None,
        initial_time=0.0,
    ):
        """Analytical solution to y' = lambda * y"""
        if initial_values is None:
            initial_values = self.get_initial_values()
        return initial_values * np.exp(self.lambda_ * (time - initial_time))
