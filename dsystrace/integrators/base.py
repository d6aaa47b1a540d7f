# dsystrace/integrators/base.py

from __future__ import annotations
import numpy as np


def check_step_buffers(x: np.ndarray, y: np.ndarray, i: int) -> None:
    """Validate buffer shapes for a step reading column i and writing i + 1."""
    if x.shape != y.shape or x.ndim != 2:
        raise ValueError(f"x and y buffers must share a 2D shape, got {x.shape} and {y.shape}")
    if not 0 <= i < x.shape[1] - 1:
        raise IndexError(f"Step index {i} out of range for buffer capacity {x.shape[1]}")
