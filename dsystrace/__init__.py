"""
dsystrace: 2D particle trajectory marching through a velocity field.

Explicit time marching of particle positions with:
- Uniform time grids built from step size and end time
- Preallocated per-particle position buffers
- Explicit Euler and two-step Adams-Bashforth schemes
- Console printing, JSON export and plotting of trajectories

Core workflow:
1. Configure time grid and initial positions → TrajectorySystem
2. Set the velocity field u(t, x, y), v(t, x, y)
3. March → march_ee / march_ab
4. Inspect → print_trajectory, export_data, plot_trajectories
"""

from __future__ import annotations

# Version info
__version__ = "0.1.0"
__author__ = "dsystrace Contributors"

from .time_grid import TimeGrid, compute_step_count
from .particles import Particle, ParticleStore
from .fields import FieldLike, VelocityField, as_field
from .integrators import euler_step, ab2_step
from .system import ConfigState, TrajectorySystem, SCHEMES
from .io import TrajectoryData, export_json, load_json
from .visualization import plot_trajectories
from .utils.config import configure, get_config, reset_config

__all__ = [
    # Version
    "__version__",
    # Time grid and particles
    "TimeGrid",
    "compute_step_count",
    "Particle",
    "ParticleStore",
    # Fields
    "FieldLike",
    "VelocityField",
    "as_field",
    # Integrators
    "euler_step",
    "ab2_step",
    # System
    "ConfigState",
    "TrajectorySystem",
    "SCHEMES",
    # I/O
    "TrajectoryData",
    "export_json",
    "load_json",
    # Visualization
    "plot_trajectories",
    # Configuration
    "configure",
    "get_config",
    "reset_config",
]
