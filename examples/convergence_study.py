"""Plots the convergence of all TVD Runge-Kutta schemes for y' = -y."""

import logging

import numpy as np

from rktvd.butcher_tableaux import tvd_runge_kutta_tableau
from rktvd.odes.simple_linear_ode import SimpleLinearODE
from rktvd.utils.convergence_study import (
    compute_convergence_errors,
    estimate_order,
    plot_convergence,
)

logging.basicConfig(level=logging.INFO)

step_nums = np.array([4, 8, 16, 32])
errors_by_name = {}
for stages in [1, 2, 3, 5]:
    name = tvd_runge_kutta_tableau(stages).name
    delta_t, errors = compute_convergence_errors(stages, SimpleLinearODE(), step_nums)
    errors_by_name[name] = errors
    print(f"{name}: observed order {estimate_order(delta_t, errors):.2f}")

plot_convergence(delta_t, errors_by_name, file_name="convergence.pdf")
