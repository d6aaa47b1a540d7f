# dsystrace/visualization/static.py
from __future__ import annotations
from typing import Any, Optional, Sequence, Tuple
import numpy as np
import matplotlib.pyplot as plt


def _as_positions(source: Any) -> Tuple[np.ndarray, Optional[np.ndarray]]:
    # TrajectorySystem, TrajectoryData or a raw (T,N,2) array
    if hasattr(source, "positions") and hasattr(source, "times"):
        return np.asarray(source.positions), np.asarray(source.times)
    return np.asarray(source), None


def _infer_bounds(points2d: np.ndarray, margin: float = 0.02) -> Tuple[Tuple[float, float], Tuple[float, float]]:
    xmin, ymin = np.min(points2d, axis=0)
    xmax, ymax = np.max(points2d, axis=0)
    dx = (xmax - xmin) * margin or margin
    dy = (ymax - ymin) * margin or margin
    return (xmin - dx, xmax + dx), (ymin - dy, ymax + dy)


def plot_trajectories(
    source: Any,
    particles: Optional[Sequence[int]] = None,
    bounds: Optional[Tuple[Tuple[float, float], Tuple[float, float]]] = None,
    linewidth: float = 1.0,
    alpha: float = 0.9,
    mark_start: bool = True,
    title: Optional[str] = None,
    equal: bool = True,
    ax: Optional["plt.Axes"] = None,
    show: bool = False,
    save_path: Optional[str] = None,
):
    """
    Plot particle paths in the x-y plane.

    source: TrajectorySystem, TrajectoryData, or (T,N,2) positions
    particles: indices to draw; all particles if None
    bounds: ((xmin,xmax),(ymin,ymax)) or None to infer
    mark_start: scatter the initial positions
    """
    pos, times = _as_positions(source)
    if pos.ndim != 3 or pos.shape[-1] != 2:
        raise ValueError(f"positions must have shape (T,N,2), got {pos.shape}")

    n_particles = pos.shape[1]
    idx = np.arange(n_particles) if particles is None else np.asarray(particles, dtype=int)
    if idx.size and (idx.min() < 0 or idx.max() >= n_particles):
        raise IndexError(f"particle indices must be in [0, {n_particles})")

    if ax is None:
        fig, ax = plt.subplots(figsize=(6, 5), dpi=120)
    else:
        fig = ax.figure

    for n in idx:
        ax.plot(pos[:, n, 0], pos[:, n, 1], linewidth=linewidth, alpha=alpha, label=f"particle {n}")
    if mark_start and idx.size:
        ax.scatter(pos[0, idx, 0], pos[0, idx, 1], s=12, c="k", marker="x", zorder=3)

    ax.set_xlabel("x"); ax.set_ylabel("y")
    if bounds is None and idx.size:
        (xmin, xmax), (ymin, ymax) = _infer_bounds(pos[:, idx, :].reshape(-1, 2))
    elif bounds is not None:
        (xmin, xmax), (ymin, ymax) = bounds
    if idx.size or bounds is not None:
        ax.set_xlim(xmin, xmax); ax.set_ylim(ymin, ymax)
    if equal:
        ax.set_aspect("equal", adjustable="box")
    if title is None and times is not None and times.size:
        title = f"Trajectories, t = 0 .. {float(times[-1]):.3f}"
    if title:
        ax.set_title(title)
    fig.tight_layout()
    if save_path is not None:
        fig.savefig(save_path, bbox_inches="tight")
    if show:
        plt.show()
    return fig, ax
