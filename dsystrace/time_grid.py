# dsystrace/time_grid.py
"""
Discrete time grid for explicit time marching.

The grid is built from a step size and an end time and always starts at
t = 0 with uniformly spaced points t_i = i * dt.
"""

from __future__ import annotations
import math
from typing import Optional
import numpy as np


def compute_step_count(dt: float, tmax: float) -> int:
    """Number of grid points, floor(tmax / dt) + 1."""
    return int(tmax / dt) + 1


def _validate_time_params(dt: float, tmax: float) -> tuple:
    dt = float(dt)
    tmax = float(tmax)
    if not math.isfinite(dt) or dt <= 0.0:
        raise ValueError(f"Step size dt must be positive and finite, got {dt}")
    if not math.isfinite(tmax) or tmax < 0.0:
        raise ValueError(f"End time tmax must be non-negative and finite, got {tmax}")
    return dt, tmax


class TimeGrid:
    """
    Uniform time grid t_i = i * dt for i in [0, step_count).

    Attributes
    ----------
    dt : float
        Step size
    tmax : float
        End time
    step_count : int
        Number of grid points, floor(tmax / dt) + 1
    times : np.ndarray
        Grid points, shape (step_count,), float64
    """

    def __init__(self, dt: Optional[float] = None, tmax: Optional[float] = None):
        self.dt: float = 0.0
        self.tmax: float = 0.0
        self.step_count: int = 0
        self.times: np.ndarray = np.zeros(0, dtype=np.float64)
        self._ready = False

        if dt is not None and tmax is not None:
            self.configure(dt, tmax)

    def configure(self, dt: float, tmax: float) -> int:
        """
        (Re)build the grid from step size and end time.

        Parameters
        ----------
        dt : float
            Step size, must be > 0
        tmax : float
            End time, must be >= 0. tmax < dt gives a single point at t = 0.

        Returns
        -------
        int
            The new step count
        """
        dt, tmax = _validate_time_params(dt, tmax)

        step_count = compute_step_count(dt, tmax)
        # i * dt per point, not a running sum
        times = np.arange(step_count, dtype=np.float64) * dt

        self.dt = dt
        self.tmax = tmax
        self.step_count = step_count
        self.times = times
        self._ready = True
        return step_count

    @property
    def ready(self) -> bool:
        return self._ready

    @property
    def capacity(self) -> int:
        """Buffer length needed per particle: one slot past the last grid time."""
        return self.step_count + 1

    def __len__(self) -> int:
        return self.step_count

    def __repr__(self) -> str:
        if not self._ready:
            return "TimeGrid(unconfigured)"
        return f"TimeGrid(dt={self.dt}, tmax={self.tmax}, step_count={self.step_count})"
