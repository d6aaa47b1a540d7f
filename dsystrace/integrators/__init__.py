"""
dsystrace Integrators

Explicit time-stepping schemes for 2D particle marching. Each stepper follows
the signature:

    u_i, v_i = step(x, y, i, t, dt, field)

where:
- x, y: (N, capacity) position buffers; column i is read, column i + 1 written
- i: time index
- t: time at index i
- dt: step size
- field: object with evaluate(t, x, y) -> (u, v)
"""

from .base import check_step_buffers
from .euler import euler_step
from .adams_bashforth import ab2_step

__all__ = [
    "check_step_buffers",
    "euler_step",
    "ab2_step",
]
