# dsystrace/integrators/adams_bashforth.py
"""
Two-step explicit Adams-Bashforth step.

x_{i+1} = x_i + dt * (3/2 u_i - 1/2 u_{i-1})

The first step has no velocity history and falls back to forward Euler.
"""

from __future__ import annotations
from typing import Optional, Tuple
import numpy as np

from ..fields import FieldLike
from .base import check_step_buffers
from .euler import euler_step

AB2_CURRENT_WEIGHT = 3.0 / 2.0
AB2_PREVIOUS_WEIGHT = 1.0 / 2.0


def ab2_step(
    x: np.ndarray,
    y: np.ndarray,
    i: int,
    t: float,
    dt: float,
    field: FieldLike,
    u_prev: Optional[np.ndarray] = None,
    v_prev: Optional[np.ndarray] = None,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Adams-Bashforth 2 step for every particle, in place.

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
    u_prev, v_prev : np.ndarray, optional
        Velocities from index i - 1, shape (N,). When omitted (first step)
        an Euler step is taken instead. When given they are overwritten
        with the velocities at index i, particle by particle.

    Returns
    -------
    tuple of np.ndarray
        (u, v) evaluated at index i, each shape (N,)
    """
    if u_prev is None or v_prev is None:
        u_n, v_n = euler_step(x, y, i, t, dt, field)
        if u_prev is not None:
            u_prev[:] = u_n
        if v_prev is not None:
            v_prev[:] = v_n
        return u_n, v_n

    check_step_buffers(x, y, i)
    n_particles = x.shape[0]
    if u_prev.shape != (n_particles,) or v_prev.shape != (n_particles,):
        raise ValueError(
            f"Velocity history must have shape ({n_particles},), "
            f"got {u_prev.shape} and {v_prev.shape}"
        )

    u_n = np.empty(n_particles, dtype=np.float64)
    v_n = np.empty(n_particles, dtype=np.float64)

    for n in range(n_particles):
        xi = float(x[n, i])
        yi = float(y[n, i])
        u_n[n], v_n[n] = field.evaluate(t, xi, yi)

        x[n, i + 1] = xi + dt * (AB2_CURRENT_WEIGHT * u_n[n] - AB2_PREVIOUS_WEIGHT * u_prev[n])
        y[n, i + 1] = yi + dt * (AB2_CURRENT_WEIGHT * v_n[n] - AB2_PREVIOUS_WEIGHT * v_prev[n])

        u_prev[n] = u_n[n]
        v_prev[n] = v_n[n]

    return u_n, v_n
