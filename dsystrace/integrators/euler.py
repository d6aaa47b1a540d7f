# dsystrace/integrators/euler.py
"""
Explicit (forward) Euler step.

x_{i+1} = x_i + dt * u(t_i, x_i, y_i)
y_{i+1} = y_i + dt * v(t_i, x_i, y_i)
"""

from __future__ import annotations
from typing import Tuple
import numpy as np

from ..fields import FieldLike
from .base import check_step_buffers


def euler_step(
    x: np.ndarray,
    y: np.ndarray,
    i: int,
    t: float,
    dt: float,
    field: FieldLike,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Forward Euler step for every particle, in place.

    Parameters
    ----------
    x, y : np.ndarray
        Position buffers, shape (N, capacity). Column i is read and
        column i + 1 is written.
    i : int
        Current time index
    t : float
        Time at index i
    dt : float
        Step size
    field : FieldLike
        Velocity field, evaluated once per particle

    Returns
    -------
    tuple of np.ndarray
        (u, v) evaluated at index i, each shape (N,)
    """
    check_step_buffers(x, y, i)
    n_particles = x.shape[0]
    u_n = np.empty(n_particles, dtype=np.float64)
    v_n = np.empty(n_particles, dtype=np.float64)

    for n in range(n_particles):
        xi = float(x[n, i])
        yi = float(y[n, i])
        u_n[n], v_n[n] = field.evaluate(t, xi, yi)

        x[n, i + 1] = xi + dt * u_n[n]
        y[n, i + 1] = yi + dt * v_n[n]

    return u_n, v_n
