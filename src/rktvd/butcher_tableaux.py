"""
The Butcher tableaux of the explicit TVD/SSP Runge-Kutta schemes. The schemes are
selected by their number of stages:

1 stage: Explicit Forward Euler, 1st order.
2 stages: optimal SSPRK(2,2), 2nd order.
3 stages: optimal SSPRK(3,3), 3rd order.
5 stages: optimal SSPRK(5,4), 4th order.

There is no 4 stage scheme.

The SSP schemes are given without low-storage algorithm, see
Gottlieb, S., Ketcheson, D. I., Shu, C.W.. "High Order Strong Stability Preserving
Time Discretizations." Journal of Scientific Computing 38 (2009), pp. 251-289.
"""

# All tableaux in here are plain data.
# pylint: disable=missing-function-docstring

import operator

import numpy as np

from rktvd.butcher_tableau import ButcherTableau
from rktvd.errors import BadStagesNumberError
from rktvd.utils.admissible import is_admissible

__all__ = [
    "SUPPORTED_STAGES",
    "MIN_STAGES",
    "MAX_STAGES",
    "explicit_euler",
    "ssp_runge_kutta_two_stages",
    "ssp_runge_kutta_three_stages",
    "ssp_runge_kutta_five_stages",
    "is_supported",
    "min_stages",
    "max_stages",
    "tvd_runge_kutta_tableau",
]

SUPPORTED_STAGES = "1-3,5"
MIN_STAGES = 1
MAX_STAGES = 5

# one stage method
explicit_euler = ButcherTableau(
    np.array([[0.0]]), np.array([1.0]), np.array([0.0]), p=1, name="Explicit Euler"
)

# two stage method
ssp_runge_kutta_two_stages = ButcherTableau(
    np.array(
        [
            [0.0, 0.0],
            [1.0, 0.0],
        ]
    ),
    np.array([0.5, 0.5]),
    np.array([0.0, 1.0]),
    p=2,
    name="SSPRK(2,2)",
)

# three stage method
ssp_runge_kutta_three_stages = ButcherTableau(
    np.array(
        [
            [0.0, 0.0, 0.0],
            [1.0, 0.0, 0.0],
            [0.25, 0.25, 0.0],
        ]
    ),
    np.array([1.0 / 6.0, 1.0 / 6.0, 2.0 / 3.0]),
    np.array([0.0, 1.0, 0.5]),
    p=3,
    name="SSPRK(3,3)",
)

# five stage method
ssp_runge_kutta_five_stages = ButcherTableau(
    np.array(
        [
            [0.0, 0.0, 0.0, 0.0, 0.0],
            [0.39175222700392, 0.0, 0.0, 0.0, 0.0],
            [0.21766909633821, 0.36841059262959, 0.0, 0.0, 0.0],
            [0.08269208670950, 0.13995850206999, 0.25189177424738, 0.0, 0.0],
            [
                0.06796628370320,
                0.11503469844438,
                0.20703489864929,
                0.54497475021237,
                0.0,
            ],
        ]
    ),
    np.array(
        [
            0.14681187618661,
            0.24848290924556,
            0.10425883036650,
            0.27443890091960,
            0.22600748319395,
        ]
    ),
    np.array(
        [
            0.0,
            0.39175222700392,
            0.58607968896780,
            0.47454236302687,
            0.93501063100924,
        ]
    ),
    p=4,
    name="SSPRK(5,4)",
)

_TABLEAUX_BY_STAGES = {
    1: explicit_euler,
    2: ssp_runge_kutta_two_stages,
    3: ssp_runge_kutta_three_stages,
    5: ssp_runge_kutta_five_stages,
}


def is_supported(stages: int) -> bool:
    """Only integers count as stage numbers, booleans and floats are rejected."""
    if isinstance(stages, bool):
        return False
    try:
        stages = operator.index(stages)
    except TypeError:
        return False
    return is_admissible(stages, SUPPORTED_STAGES)


def min_stages() -> int:
    return MIN_STAGES


def max_stages() -> int:
    return MAX_STAGES


def tvd_runge_kutta_tableau(stages: int) -> ButcherTableau:
    """
    Returns the tableau of the TVD/SSP scheme with the given number of stages.

    Parameters
    ----------
    stages: int
        Number of stages, one of 1, 2, 3 and 5.

    Returns
    -------
    ButcherTableau
        The (shared, read-only) tableau of the scheme.

    Raises
    ------
    BadStagesNumberError
        If no scheme with `stages` stages is available.
    """
    if not is_supported(stages):
        raise BadStagesNumberError(stages, SUPPORTED_STAGES)
    return _TABLEAUX_BY_STAGES[operator.index(stages)]
