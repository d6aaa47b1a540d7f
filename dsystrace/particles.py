# dsystrace/particles.py
"""
Particle position storage with fixed-capacity buffers.

All particles share one (N, capacity) array per coordinate so that a march
step is an O(1) indexed write. Particles are identified by their row index,
fixed when the initial conditions are set.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, Sequence, Tuple
import numpy as np

from .utils.config import get_config


def _as_initial_vector(values: Sequence[float], name: str) -> np.ndarray:
    arr = np.asarray(values, dtype=np.float64)
    if arr.ndim != 1:
        raise ValueError(f"{name} must be a 1D sequence, got shape {arr.shape}")
    return arr


@dataclass
class Particle:
    """
    Position history of a single particle.

    Attributes
    ----------
    index : int
        Row of this particle in the store
    x, y : np.ndarray
        Views into the store buffers, shape (capacity,). x[0], y[0] hold
        the initial condition.
    """
    index: int
    x: np.ndarray
    y: np.ndarray

    @property
    def initial_condition(self) -> Tuple[float, float]:
        return float(self.x[0]), float(self.y[0])

    def __len__(self) -> int:
        return self.x.shape[0]


class ParticleStore:
    """
    Per-particle x/y buffers aligned to a time grid.

    Before a time grid is known every particle holds a single sample (its
    initial condition). resize() grows or shrinks all buffers at once,
    keeping leading samples and zero-filling new slots.
    """

    def __init__(self):
        dtype = get_config().dtype
        self._x = np.zeros((0, 1), dtype=dtype)
        self._y = np.zeros((0, 1), dtype=dtype)
        self._ready = False

    def configure(self, x0: Sequence[float], y0: Sequence[float]) -> int:
        """
        Replace all particles with new initial conditions.

        Parameters
        ----------
        x0, y0 : sequence of float
            Initial coordinates, equal lengths

        Returns
        -------
        int
            Number of particles

        Raises
        ------
        ValueError
            If x0 and y0 differ in length or are not 1D. The store is left
            unchanged.
        """
        x0_arr = _as_initial_vector(x0, "x0")
        y0_arr = _as_initial_vector(y0, "y0")
        if x0_arr.shape[0] != y0_arr.shape[0]:
            raise ValueError(
                f"Mismatched initial condition vectors: len(x0)={x0_arr.shape[0]}, "
                f"len(y0)={y0_arr.shape[0]}"
            )

        dtype = get_config().dtype
        self._x = x0_arr.astype(dtype).reshape(-1, 1)
        self._y = y0_arr.astype(dtype).reshape(-1, 1)
        self._ready = True
        return self._x.shape[0]

    def resize(self, capacity: int) -> None:
        """
        Reallocate every particle's buffers to `capacity` samples.

        Samples 0 .. min(old, new) - 1 are preserved, trailing slots are
        zero-filled.
        """
        capacity = int(capacity)
        if capacity < 1:
            raise ValueError(f"Capacity must be at least 1, got {capacity}")

        config = get_config()
        n = self._x.shape[0]
        config.check_buffer_size(2 * n * capacity * config.itemsize())

        keep = min(self.capacity, capacity)
        new_x = np.zeros((n, capacity), dtype=self._x.dtype)
        new_y = np.zeros((n, capacity), dtype=self._y.dtype)
        new_x[:, :keep] = self._x[:, :keep]
        new_y[:, :keep] = self._y[:, :keep]
        self._x = new_x
        self._y = new_y

    # ---------- Core accessors ----------

    @property
    def ready(self) -> bool:
        return self._ready

    @property
    def capacity(self) -> int:
        """Samples per particle."""
        return self._x.shape[1]

    @property
    def x(self) -> np.ndarray:
        """x buffers, shape (N, capacity)."""
        return self._x

    @property
    def y(self) -> np.ndarray:
        """y buffers, shape (N, capacity)."""
        return self._y

    def __len__(self) -> int:
        return self._x.shape[0]

    def __getitem__(self, n: int) -> Particle:
        n = self.check_index(n)
        return Particle(index=n, x=self._x[n], y=self._y[n])

    def __iter__(self) -> Iterator[Particle]:
        for n in range(len(self)):
            yield Particle(index=n, x=self._x[n], y=self._y[n])

    def check_index(self, n: int) -> int:
        """Return n as int, or raise IndexError if it is not a particle index."""
        count = len(self)
        if isinstance(n, (bool, np.bool_)) or not isinstance(n, (int, np.integer)):
            raise IndexError(f"Particle index must be an integer, got {n!r}")
        if n < 0 or n >= count:
            raise IndexError(f"Particle index {n} out of range for {count} particles")
        return int(n)

    def __repr__(self) -> str:
        return f"ParticleStore(num_particles={len(self)}, capacity={self.capacity})"
