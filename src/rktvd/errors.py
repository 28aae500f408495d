"""Error classes for the TVD Runge-Kutta part of the code."""


class RungeKuttaError(Exception):
    """Base class for exceptions in the Runge-Kutta part of the code"""


class BadStagesNumberError(RungeKuttaError, ValueError):
    """Exception for the case that an unsupported number of Runge-Kutta stages is
    requested from the coefficient catalogue."""

    def __init__(self, stages, supported_stages):
        self.stages = stages
        self.supported_stages = supported_stages
        super().__init__(
            f"bad (unsupported) number of Runge-Kutta stages: {stages}, "
            f"supported are [{supported_stages}]"
        )


class NotInitializedError(RungeKuttaError, RuntimeError):
    """Exception for the case that an integration is attempted before the Butcher
    coefficients are initialized (or after they were destroyed)."""


class DimensionMismatchError(RungeKuttaError, ValueError):
    """Exception for the case that the stage buffer handed to the integrator does not
    have one slot per stage."""
