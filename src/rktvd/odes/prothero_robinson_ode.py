import numpy as np

from rktvd.odes.array_integrand import ArrayIntegrand


class ProtheroRobinsonODE:
    """
    Using ODE from Springer https://doi.org/10.1007/978-3-030-39647-3_36:
    1) x' = lambda * (x - Phi(t)) + dPhi(t)/dt
    2) Phi(t) = sin(pi/4+t)
    3) x(0) = sin(pi/4)
    Analytical Solution x = (cos(t) + sin(t)) * 2^-(1/2)

    The explicit schemes are only stable for moderate lambda*dt, hence the default
    lambda = -1.0 instead of the stiff -1.0e+2.
    """

    def __init__(self, lambda_: float = -1.0):
        self.lambda_ = lambda_

    @staticmethod
    def phi(time: float):
        """
        Calculate Phi(t) = sin(t + pi/4)
        """
        return np.sin(time + np.pi / 4)

    @staticmethod
    def d_phi(time: float):
        """
        Calculate derivative of Phi'(t)= cos(t + pi/4)
        """
        return np.cos(time + np.pi / 4)

    def residual(self, time: float, values: np.ndarray) -> np.ndarray:
        return self.lambda_ * (values - self.phi(time)) + self.d_phi(time)

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
        """
        Analytical solution of the ODE through (initial_time, initial_values),
        x(t) = Phi(t) + (x_0 - Phi(t_0)) exp(lambda (t - t_0)). Without initial values
        x_0 = Phi(t_0), i.e. x = (cos(t) + sin(t)) * 2^-(1/2).
        """
        if initial_values is None:
            return np.array([self.phi(time)])
        deviation = np.asarray(initial_values, dtype=float) - self.phi(initial_time)
        return self.phi(time) + deviation * np.exp(self.lambda_ * (time - initial_time))
