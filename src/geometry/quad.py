# geometry/quad.py
from typing import Optional
from core.aabb import AABB
from core.interval import Interval
from core.vector import Vector3, Point3
from core.ray import Ray
from geometry.hittable import Hittable, HitRecord
from geometry.world import HittableList

# Rays more parallel to the plane than this are treated as misses.
PARALLEL_EPSILON = 1e-8


class Quad(Hittable):
    """
    Planar parallelogram with corner Q and edge vectors u and v.
    """
    def __init__(self, Q: Point3, u: Vector3, v: Vector3, material):
        n = u.cross(v)
        if n.length_squared() == 0:
            raise ValueError(f"Quad edges must be non-zero and non-parallel, got u={u!r}, v={v!r}")
        self.Q = Q
        self.u = u
        self.v = v
        self.material = material
        self.normal = n.normalize()
        self.D = self.normal.dot(Q)
        # Basis vector used to recover planar coordinates of a hit point.
        self.w = n / n.dot(n)
        # Both diagonals, so sheared quads are fully enclosed.
        self.box = AABB.surrounding_box(
            AABB.from_points(Q, Q + u + v),
            AABB.from_points(Q + u, Q + v)
        )

    def bounding_box(self) -> AABB:
        return self.box

    def hit(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        denom = self.normal.dot(ray.direction)
        if abs(denom) < PARALLEL_EPSILON:
            return None

        t = (self.D - self.normal.dot(ray.origin)) / denom
        if not ray_t.contains(t):
            return None

        # Planar coordinates of the hit; inside the quad when both lie in [0, 1].
        intersection = ray.at(t)
        planar_hitpt_vector = intersection - self.Q
        alpha = self.w.dot(planar_hitpt_vector.cross(self.v))
        beta = self.w.dot(self.u.cross(planar_hitpt_vector))
        if not (0.0 <= alpha <= 1.0 and 0.0 <= beta <= 1.0):
            return None

        rec = HitRecord()
        rec.t = t
        rec.p = intersection
        rec.u = alpha
        rec.v = beta
        rec.material = self.material
        rec.set_face_normal(ray, self.normal)
        return rec


def make_box(a: Point3, b: Point3, material) -> HittableList:
    """
    Returns the six sides of the box with opposite vertices a and b.
    """
    sides = HittableList()

    lo = Point3(min(a.x, b.x), min(a.y, b.y), min(a.z, b.z))
    hi = Point3(max(a.x, b.x), max(a.y, b.y), max(a.z, b.z))

    dx = Vector3(hi.x - lo.x, 0, 0)
    dy = Vector3(0, hi.y - lo.y, 0)
    dz = Vector3(0, 0, hi.z - lo.z)

    sides.add(Quad(Point3(lo.x, lo.y, hi.z), dx, dy, material))   # front
    sides.add(Quad(Point3(hi.x, lo.y, hi.z), -dz, dy, material))  # right
    sides.add(Quad(Point3(hi.x, lo.y, lo.z), -dx, dy, material))  # back
    sides.add(Quad(Point3(lo.x, lo.y, lo.z), dz, dy, material))   # left
    sides.add(Quad(Point3(lo.x, hi.y, hi.z), dx, -dz, material))  # top
    sides.add(Quad(Point3(lo.x, lo.y, lo.z), dx, dz, material))   # bottom

    return sides
