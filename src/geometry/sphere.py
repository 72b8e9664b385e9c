# geometry/sphere.py
import math
from typing import Optional, Tuple
from core.aabb import AABB
from core.interval import Interval
from core.vector import Vector3
from core.ray import Ray
from geometry.hittable import Hittable, HitRecord


def get_sphere_uv(p: Vector3) -> Tuple[float, float]:
    """
    Texture coordinates for a point p on the unit sphere centered at the origin.
    u is the angle around the Y axis from X=-1, v the angle from Y=-1 to Y=+1,
    both normalized to [0, 1].
    """
    theta = math.acos(max(-1.0, min(1.0, -p.y)))
    phi = math.atan2(-p.z, p.x)
    return phi / (2 * math.pi) + 0.5, theta / math.pi


class Sphere(Hittable):
    """
    Represents a sphere defined by its center, radius, and material.
    """
    def __init__(self, center: Vector3, radius: float, material):
        if not radius > 0:
            raise ValueError(f"Sphere radius must be positive, got {radius}")
        self.center = center
        self.radius = radius
        self.material = material
        offset = Vector3(radius, radius, radius)
        self.box = AABB.from_points(center - offset, center + offset)

    def center_at(self, time: float) -> Vector3:
        return self.center

    def hit(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        center = self.center_at(ray.time)
        oc = ray.origin - center
        a = ray.direction.length_squared()
        half_b = oc.dot(ray.direction)
        c = oc.length_squared() - self.radius * self.radius
        discriminant = half_b * half_b - a * c

        if discriminant < 0:
            return None

        sqrt_disc = math.sqrt(discriminant)
        # Find the nearest root that lies in the acceptable range
        root = (-half_b - sqrt_disc) / a
        if not ray_t.surrounds(root):
            root = (-half_b + sqrt_disc) / a
            if not ray_t.surrounds(root):
                return None

        rec = HitRecord()
        rec.t = root
        rec.p = ray.at(rec.t)
        outward_normal = (rec.p - center) / self.radius
        rec.set_face_normal(ray, outward_normal)
        rec.u, rec.v = get_sphere_uv(outward_normal)
        rec.material = self.material
        return rec

    def bounding_box(self) -> AABB:
        return self.box


class MovingSphere(Sphere):
    """
    Sphere whose center moves linearly from center1 (time 0) to center2 (time 1).
    """
    def __init__(self, center1: Vector3, center2: Vector3, radius: float, material):
        super().__init__(center1, radius, material)
        self.center_vec = center2 - center1
        offset = Vector3(radius, radius, radius)
        box2 = AABB.from_points(center2 - offset, center2 + offset)
        self.box = AABB.surrounding_box(self.box, box2)

    def center_at(self, time: float) -> Vector3:
        return self.center + self.center_vec * time
