# geometry/transform.py
import math
from typing import Optional
from core.aabb import AABB
from core.interval import Interval
from core.ray import Ray
from core.utils import degrees_to_radians
from core.vector import Vector3
from geometry.hittable import Hittable, HitRecord


def _enclosing_box(points) -> AABB:
    lo = [math.inf, math.inf, math.inf]
    hi = [-math.inf, -math.inf, -math.inf]
    for p in points:
        for a in range(3):
            lo[a] = min(lo[a], p[a])
            hi[a] = max(hi[a], p[a])
    return AABB.from_points(Vector3(*lo), Vector3(*hi))


class Translate(Hittable):
    """
    Instance of another hittable moved by a fixed offset.
    """
    def __init__(self, obj: Hittable, offset: Vector3):
        self.object = obj
        self.offset = offset
        self.box = _enclosing_box(c + offset for c in obj.bounding_box().corners())

    def hit(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        # Move the ray into object space, then the hit point back out.
        offset_ray = Ray(ray.origin - self.offset, ray.direction, ray.time)
        rec = self.object.hit(offset_ray, ray_t)
        if rec is None:
            return None
        rec.p = rec.p + self.offset
        return rec

    def bounding_box(self) -> AABB:
        return self.box


class RotateY(Hittable):
    """
    Instance of another hittable rotated about the Y axis by angle degrees.
    """
    def __init__(self, obj: Hittable, angle: float):
        self.object = obj
        radians = degrees_to_radians(angle)
        self.sin_theta = math.sin(radians)
        self.cos_theta = math.cos(radians)
        self.box = _enclosing_box(self._to_world(c) for c in obj.bounding_box().corners())

    def _to_object(self, v: Vector3) -> Vector3:
        return Vector3(self.cos_theta * v.x - self.sin_theta * v.z,
                       v.y,
                       self.sin_theta * v.x + self.cos_theta * v.z)

    def _to_world(self, v: Vector3) -> Vector3:
        return Vector3(self.cos_theta * v.x + self.sin_theta * v.z,
                       v.y,
                       -self.sin_theta * v.x + self.cos_theta * v.z)

    def hit(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        rotated = Ray(self._to_object(ray.origin), self._to_object(ray.direction), ray.time)
        rec = self.object.hit(rotated, ray_t)
        if rec is None:
            return None
        rec.p = self._to_world(rec.p)
        rec.normal = self._to_world(rec.normal)
        return rec

    def bounding_box(self) -> AABB:
        return self.box
