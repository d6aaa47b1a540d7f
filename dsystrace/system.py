# dsystrace/system.py
"""
Trajectory system: time grid, particle store, velocity field and marching.

Configuration is a two-phase join. The time grid and the initial conditions
may be set in either order; particle buffers are sized to step_count + 1
every time the system enters FULLY_CONFIGURED, including re-entry from
itself when either side is reconfigured.
"""

from __future__ import annotations
from contextlib import nullcontext
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Sequence, TextIO, Union
import sys
import numpy as np

from .fields import ComponentFn, FieldLike, as_field
from .integrators import euler_step, ab2_step
from .io.json_io import export_json
from .particles import Particle, ParticleStore
from .time_grid import TimeGrid
from .utils.config import get_config
from .utils.logging import Timer, create_progress_callback


class ConfigState(Enum):
    """Configuration state of a TrajectorySystem."""
    EMPTY = "empty"
    TIME_READY = "time_ready"
    IC_READY = "ic_ready"
    FULLY_CONFIGURED = "fully_configured"


# Registry mapping scheme names to TrajectorySystem march methods
SchemeRegistry = Dict[str, Callable[..., None]]


class TrajectorySystem:
    """
    Two-dimensional particle marching through a velocity field.

    Parameters
    ----------
    dt, tmax : float, optional
        Time grid step and end time; the grid is configured when both are given
    x0, y0 : sequence of float, optional
        Initial positions; set when both are given
    u, v : callable, optional
        Velocity components u(t, x, y), v(t, x, y). u may also be an object
        with evaluate(t, x, y) -> (u, v) when v is omitted.

    Example
    -------
    >>> system = TrajectorySystem(0.1, 1.0, [0.0], [0.0],
    ...                           lambda t, x, y: 1.0, lambda t, x, y: 0.0)
    >>> system.march_ee()
    >>> system.print_trajectory(0)
    """

    def __init__(
        self,
        dt: Optional[float] = None,
        tmax: Optional[float] = None,
        x0: Optional[Sequence[float]] = None,
        y0: Optional[Sequence[float]] = None,
        u: Optional[Union[ComponentFn, FieldLike]] = None,
        v: Optional[ComponentFn] = None,
    ):
        self.grid = TimeGrid()
        self.store = ParticleStore()
        self._field: Optional[FieldLike] = None

        if dt is not None and tmax is not None:
            self.set_time(dt, tmax)
        if x0 is not None and y0 is not None:
            self.set_initial_conditions(x0, y0)
        if u is not None:
            self.set_velocity_field(u, v)

    # ------------------------ Configuration ------------------------

    @property
    def state(self) -> ConfigState:
        if self.grid.ready and self.store.ready:
            return ConfigState.FULLY_CONFIGURED
        if self.grid.ready:
            return ConfigState.TIME_READY
        if self.store.ready:
            return ConfigState.IC_READY
        return ConfigState.EMPTY

    def set_time(self, dt: float, tmax: float) -> int:
        """
        Configure the time grid.

        Returns the new step count. Raises ValueError for dt <= 0 or
        tmax < 0 without changing the current grid.
        """
        step_count = self.grid.configure(dt, tmax)
        self._on_configured()
        return step_count

    def set_initial_conditions(self, x0: Sequence[float], y0: Sequence[float]) -> int:
        """
        Replace all particles with new initial positions.

        Returns the particle count. Raises ValueError for mismatched lengths
        without changing the current particles.
        """
        count = self.store.configure(x0, y0)
        self._on_configured()
        return count

    def set_velocity_field(
        self,
        u: Union[ComponentFn, FieldLike],
        v: Optional[ComponentFn] = None,
    ) -> None:
        """Set or replace the velocity field. The field is kept by reference."""
        self._field = as_field(u, v)

    def _on_configured(self) -> None:
        if self.state is ConfigState.FULLY_CONFIGURED:
            self.store.resize(self.grid.capacity)

    def _require(self, state: ConfigState, action: str) -> None:
        if self.state is not state:
            raise RuntimeError(
                f"Cannot {action}: system is {self.state.value}, "
                f"set both the time grid and initial conditions first"
            )

    # ------------------------ Accessors ------------------------

    @property
    def field(self) -> Optional[FieldLike]:
        return self._field

    @property
    def dt(self) -> float:
        return self.grid.dt

    @property
    def tmax(self) -> float:
        return self.grid.tmax

    @property
    def times(self) -> np.ndarray:
        return self.grid.times

    @property
    def step_count(self) -> int:
        return self.grid.step_count

    @property
    def num_particles(self) -> int:
        return len(self.store)

    def particle(self, n: int) -> Particle:
        """Particle n with views over its x/y buffers."""
        return self.store[n]

    @property
    def positions(self) -> np.ndarray:
        """Positions on the time grid, shape (step_count, N, 2)."""
        self._require(ConfigState.FULLY_CONFIGURED, "read positions")
        T = self.step_count
        return np.stack([self.store.x[:, :T].T, self.store.y[:, :T].T], axis=-1)

    def summary(self) -> Dict[str, Any]:
        """Configuration and size information."""
        return {
            "state": self.state.value,
            "dt": self.grid.dt,
            "tmax": self.grid.tmax,
            "step_count": self.grid.step_count,
            "num_particles": len(self.store),
            "capacity": self.store.capacity,
            "has_field": self._field is not None,
        }

    # ------------------------ Marching ------------------------

    def march(self, scheme: str = "ee", progress_callback: Optional[Callable] = None) -> None:
        """
        March with a scheme chosen by name.

        scheme: 'ee' / 'euler' or 'ab' / 'ab2' / 'adams_bashforth'
        """
        key = scheme.lower() if isinstance(scheme, str) else None
        if key not in SCHEMES:
            raise ValueError(f"Unknown scheme: {scheme!r}. Available: {list(SCHEMES.keys())}")
        SCHEMES[key](self, progress_callback=progress_callback)

    def march_ee(self, progress_callback: Optional[Callable] = None) -> None:
        """
        March all particles with the explicit Euler scheme.

        Every time index is completed for all particles before the next
        one starts. Exceptions from the velocity field propagate.
        """
        field, progress = self._prepare_march("EE", progress_callback)
        x, y = self.store.x, self.store.y
        times, dt = self.grid.times, self.grid.dt
        total = self.grid.step_count

        with self._timer("march_ee"):
            for i in range(total):
                euler_step(x, y, i, float(times[i]), dt, field)
                if progress is not None:
                    progress(i + 1, total)

    def march_ab(self, progress_callback: Optional[Callable] = None) -> None:
        """
        March all particles with the two-step Adams-Bashforth scheme.

        The first step is an Euler step. Re-running after march_ee (or
        vice versa) re-integrates from the initial conditions.
        """
        field, progress = self._prepare_march("AB2", progress_callback)
        x, y = self.store.x, self.store.y
        times, dt = self.grid.times, self.grid.dt
        total = self.grid.step_count

        n_particles = len(self.store)
        u_prev = np.zeros(n_particles, dtype=np.float64)
        v_prev = np.zeros(n_particles, dtype=np.float64)

        with self._timer("march_ab"):
            for i in range(total):
                t = float(times[i])
                if i == 0:
                    u_n, v_n = euler_step(x, y, i, t, dt, field)
                    u_prev[:] = u_n
                    v_prev[:] = v_n
                else:
                    ab2_step(x, y, i, t, dt, field, u_prev, v_prev)
                if progress is not None:
                    progress(i + 1, total)

    def _prepare_march(self, name: str, progress_callback: Optional[Callable]):
        self._require(ConfigState.FULLY_CONFIGURED, f"march ({name})")
        if self._field is None:
            raise RuntimeError("Cannot march: no velocity field set")

        if progress_callback is None and get_config().show_progress:
            progress_callback = create_progress_callback(
                f"March {name}", update_every=get_config().progress_update_every
            )
        return self._field, progress_callback

    def _timer(self, name: str):
        if get_config().verbose:
            return Timer(name, track_memory=True)
        return nullcontext()

    # ------------------------ Inspection & Export ------------------------

    def print_trajectory(self, n: int, file: Optional[TextIO] = None) -> None:
        """
        Print particle n's trajectory as fixed-width t / x / y columns.

        Raises IndexError for an invalid particle index before writing anything.
        """
        particle = self.store[n]
        self._require(ConfigState.FULLY_CONFIGURED, "print trajectory")
        out = sys.stdout if file is None else file

        config = get_config()
        w, p = config.print_width, config.print_precision
        lines = [f"{'t':>{w}}{'x':>{w}}{'y':>{w}}"]
        for i in range(self.grid.step_count):
            lines.append(
                f"{self.grid.times[i]:{w}.{p}f}{particle.x[i]:{w}.{p}f}{particle.y[i]:{w}.{p}f}"
            )
        out.write("\n".join(lines) + "\n")

    def export_data(self, path: Union[str, Path]) -> Path:
        """
        Export the time grid and all particle buffers to a JSON file.

        Raises OSError if the path cannot be written.
        """
        self._require(ConfigState.FULLY_CONFIGURED, "export data")
        return export_json(
            path,
            self.grid.times,
            self.store.x,
            self.store.y,
            indent=get_config().export_indent,
        )

    def __repr__(self) -> str:
        return (
            f"TrajectorySystem(state={self.state.value}, step_count={self.grid.step_count}, "
            f"num_particles={len(self.store)})"
        )


SCHEMES: SchemeRegistry = {
    "ee": TrajectorySystem.march_ee,
    "euler": TrajectorySystem.march_ee,
    "ab": TrajectorySystem.march_ab,
    "ab2": TrajectorySystem.march_ab,
    "adams_bashforth": TrajectorySystem.march_ab,
}
