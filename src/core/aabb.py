# src/core/aabb.py
from typing import Iterator
from core.interval import Interval, EMPTY
from core.ray import Ray
from core.vector import Vector3

# Minimum extent along any axis; flat geometry (quads) would otherwise
# produce boxes the slab test cannot hit reliably.
MIN_THICKNESS = 0.0001


class AABB:
    """
    Axis-aligned bounding box stored as one interval per axis.
    """
    def __init__(self, x: Interval = EMPTY, y: Interval = EMPTY, z: Interval = EMPTY):
        self.x = x
        self.y = y
        self.z = z
        self._pad_to_minimums()

    @staticmethod
    def from_points(a: Vector3, b: Vector3) -> "AABB":
        """Box with a and b as opposite corners, in any order."""
        return AABB(
            Interval(min(a.x, b.x), max(a.x, b.x)),
            Interval(min(a.y, b.y), max(a.y, b.y)),
            Interval(min(a.z, b.z), max(a.z, b.z))
        )

    @staticmethod
    def surrounding_box(box0: "AABB", box1: "AABB") -> "AABB":
        return AABB(
            Interval.enclosing(box0.x, box1.x),
            Interval.enclosing(box0.y, box1.y),
            Interval.enclosing(box0.z, box1.z)
        )

    def _pad_to_minimums(self):
        if self.x.size() < MIN_THICKNESS:
            self.x = self.x.expand(MIN_THICKNESS)
        if self.y.size() < MIN_THICKNESS:
            self.y = self.y.expand(MIN_THICKNESS)
        if self.z.size() < MIN_THICKNESS:
            self.z = self.z.expand(MIN_THICKNESS)

    def axis_interval(self, n: int) -> Interval:
        if n == 1:
            return self.y
        if n == 2:
            return self.z
        return self.x

    def is_empty(self) -> bool:
        return self.x.is_empty() or self.y.is_empty() or self.z.is_empty()

    def contains_point(self, p: Vector3) -> bool:
        return self.x.contains(p.x) and self.y.contains(p.y) and self.z.contains(p.z)

    def corners(self) -> Iterator[Vector3]:
        for x in (self.x.min, self.x.max):
            for y in (self.y.min, self.y.max):
                for z in (self.z.min, self.z.max):
                    yield Vector3(x, y, z)

    def hit(self, ray: Ray, ray_t: Interval) -> bool:
        # Slab method: for each axis, find intersection intervals.
        # The caller's interval is not modified.
        t_min = ray_t.min
        t_max = ray_t.max
        origin = ray.origin
        inv_direction = ray.inv_direction
        for a in range(3):
            ax = self.axis_interval(a)
            invD = inv_direction[a]
            orig = origin[a]
            t0 = (ax.min - orig) * invD
            t1 = (ax.max - orig) * invD
            if invD < 0:
                t0, t1 = t1, t0
            t_min = t0 if t0 > t_min else t_min
            t_max = t1 if t1 < t_max else t_max
            if t_max <= t_min:
                return False
        return True

    def __repr__(self) -> str:
        return f"AABB({self.x!r}, {self.y!r}, {self.z!r})"


AABB.EMPTY = AABB(EMPTY, EMPTY, EMPTY)
