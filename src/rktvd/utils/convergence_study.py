"""Runs ODEs with known solution through the TVD Runge-Kutta schemes to assess their
order."""

from __future__ import annotations

import logging
from typing import Iterable

import numpy as np
import scipy.stats
import matplotlib.pyplot as plt

from rktvd.integrand import Integrand
from rktvd.runge_kutta_integrator import TVDRungeKuttaIntegrator

_logger = logging.getLogger(__name__)


def integrate_fixed_steps(
    integrator: TVDRungeKuttaIntegrator,
    integrand: Integrand,
    delta_t: float,
    num_steps: int,
    initial_time: float = 0.0,
) -> Integrand:
    """Does `num_steps` steps of size `delta_t`, reusing one stage buffer."""
    stage = integrator.allocate_stages(integrand)
    time = initial_time
    for _ in range(num_steps):
        integrand = integrator.integrate(integrand, stage, delta_t, time)
        time += delta_t
    return integrand


def compute_convergence_errors(
    stages: int,
    ode,
    step_nums: Iterable[int],
    final_time: float = 1.0,
    initial_time: float = 0.0,
) -> tuple[np.ndarray, np.ndarray]:
    """
    Integrates `ode` from `initial_time` to `final_time` with increasing numbers of
    steps.

    Parameters
    ----------
    stages: int
        Number of stages of the TVD Runge-Kutta scheme.
    ode:
        Test ODE, providing `initial_integrand(initial_time)` and `solution(time)`.
    step_nums: Iterable[int]
        Numbers of steps to use.
    final_time: float, optional
        End of the integration interval.
    initial_time: float, optional
        Start of the integration interval.

    Returns
    -------
    tuple[np.ndarray, np.ndarray]
        The step sizes and the max-norm errors at `final_time`.
    """
    integrator = TVDRungeKuttaIntegrator(stages)
    step_nums = np.asarray(list(step_nums))
    delta_t = (final_time - initial_time) / step_nums
    errors = np.zeros(step_nums.size)
    exact_solution = ode.solution(final_time)
    for i, num_steps in enumerate(step_nums):
        result = integrate_fixed_steps(
            integrator,
            ode.initial_integrand(initial_time),
            delta_t[i],
            int(num_steps),
            initial_time,
        )
        errors[i] = np.max(np.abs(result.values - exact_solution))
        _logger.info(
            "%s, %d steps: error %.3e",
            integrator.butcher_tableau.name,
            num_steps,
            errors[i],
        )
    return delta_t, errors


def estimate_order(delta_t: np.ndarray, errors: np.ndarray) -> float:
    """Slope of the least-squares fit of log(error) over log(delta_t)."""
    return scipy.stats.linregress(np.log(delta_t), np.log(errors)).slope


def plot_convergence(
    delta_t: np.ndarray, errors_by_name: dict, file_name: str | None = None
):
    """
    Log-log plot of the errors over the step sizes, with reference lines of order 1
    to 4.

    Parameters
    ----------
    delta_t: np.ndarray
        Step sizes, shared by all error curves.
    errors_by_name: dict
        Maps a label to the errors of one scheme.
    file_name: str, optional
        If given, the figure is saved there.

    Returns
    -------
    matplotlib.figure.Figure
        The figure.
    """
    fig, ax = plt.subplots()
    ax.set_xlabel("step size")
    ax.set_ylabel("max error")
    for name, errors in errors_by_name.items():
        ax.loglog(delta_t, errors, "o-", label=name)
    for order in range(1, 5):
        ax.loglog(delta_t, delta_t**order, "k--", linewidth=0.5)
    ax.legend(loc="lower right")
    fig.tight_layout()
    if file_name is not None:
        fig.savefig(file_name)
        _logger.info("Saved convergence plot to %s", file_name)
    return fig
