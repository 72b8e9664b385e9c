# core/ray.py
import math
from functools import cached_property
from core.vector import Vector3


def ieee_reciprocal(x: float) -> float:
    """
    1/x with IEEE-754 semantics: a signed zero maps to a signed infinity
    instead of raising ZeroDivisionError.
    """
    if x == 0.0:
        return math.copysign(math.inf, x)
    return 1.0 / x


class Ray:
    """
    Represents a ray in 3D space with an origin, direction and a time in [0, 1)
    used for motion blur.
    """
    def __init__(self, origin: Vector3, direction: Vector3, time: float = 0.0):
        self.origin = origin
        self.direction = direction
        self.time = time

    def at(self, t: float) -> Vector3:
        """
        Returns the point along the ray at parameter t.
        """
        return self.origin + self.direction * t

    @cached_property
    def inv_direction(self):
        """Per-axis reciprocal of the direction, reused by every slab test."""
        d = self.direction
        return (ieee_reciprocal(d.x), ieee_reciprocal(d.y), ieee_reciprocal(d.z))

    def __repr__(self) -> str:
        return f"Ray({self.origin!r}, {self.direction!r}, time={self.time})"
