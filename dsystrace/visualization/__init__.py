"""
Plotting for dsystrace trajectories.
"""

from .static import plot_trajectories

__all__ = [
    "plot_trajectories",
]
