# dsystrace/fields.py
"""
Velocity field protocols and the callable-pair field.

A velocity field maps (t, x, y) to the two velocity components. It is held
by reference and must stay valid for as long as a march call uses it.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Optional, Protocol, Tuple, Union, runtime_checkable

# Velocity component signature: (t, x, y) -> value
ComponentFn = Callable[[float, float, float], float]


@runtime_checkable
class FieldLike(Protocol):
    """
    Protocol for velocity fields.

    Any object with an evaluate method works, so fields may carry state
    or captured parameters.
    """

    def evaluate(self, t: float, x: float, y: float) -> Tuple[float, float]:
        """
        Velocity at a point.

        Parameters
        ----------
        t : float
            Time
        x, y : float
            Position

        Returns
        -------
        tuple of float
            (u, v) velocity components
        """
        ...


@dataclass(frozen=True)
class VelocityField:
    """Velocity field given as two component callables u(t, x, y), v(t, x, y)."""
    u: ComponentFn
    v: ComponentFn

    def __post_init__(self):
        if not callable(self.u):
            raise TypeError("u must be callable: u(t, x, y) -> float")
        if not callable(self.v):
            raise TypeError("v must be callable: v(t, x, y) -> float")

    def evaluate(self, t: float, x: float, y: float) -> Tuple[float, float]:
        return self.u(t, x, y), self.v(t, x, y)


def as_field(
    u: Union[FieldLike, ComponentFn],
    v: Optional[ComponentFn] = None,
) -> FieldLike:
    """
    Normalize a velocity field specification.

    Accepts a (u, v) pair of callables or a single object implementing
    FieldLike (including VelocityField).
    """
    if v is not None:
        return VelocityField(u, v)
    if isinstance(u, FieldLike):
        return u
    raise TypeError(
        "velocity field must be a (u, v) pair of callables or an object "
        "with evaluate(t, x, y) -> (u, v)"
    )
