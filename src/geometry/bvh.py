# src/geometry/bvh.py
from typing import List, Optional
from core.aabb import AABB
from core.interval import Interval
from core.ray import Ray
from core.utils import RandomSource, get_rng
from geometry.hittable import Hittable, HitRecord


class BVHNode(Hittable):
    """
    Binary bounding-volume hierarchy built by median split along a randomly
    chosen axis. Each build over n objects has depth ceil(log2 n); its shape
    varies with the random source, its hit results do not.
    """
    def __init__(self, objects: List[Hittable], start: int = 0, end: Optional[int] = None,
                 rng: Optional[RandomSource] = None):
        if end is None:
            end = len(objects)
        object_span = end - start
        if object_span <= 0:
            raise ValueError(f"Cannot build a BVH over an empty range [{start}, {end})")
        rng = get_rng(rng)

        axis = rng.random_int(0, 2)

        def key(obj: Hittable) -> float:
            return obj.bounding_box().axis_interval(axis).min

        if object_span == 1:
            # Degenerate leaf: both children are the same primitive.
            self.left = self.right = objects[start]
        elif object_span == 2:
            if key(objects[start]) < key(objects[start + 1]):
                self.left = objects[start]
                self.right = objects[start + 1]
            else:
                self.left = objects[start + 1]
                self.right = objects[start]
        else:
            # sorted() is stable, so ties keep their input order.
            objects[start:end] = sorted(objects[start:end], key=key)
            mid = start + object_span // 2
            self.left = BVHNode(objects, start, mid, rng)
            self.right = BVHNode(objects, mid, end, rng)

        self.box = AABB.surrounding_box(self.left.bounding_box(), self.right.bounding_box())

    @staticmethod
    def from_list(hittables, rng: Optional[RandomSource] = None) -> "BVHNode":
        """Build over a copy of the objects held by a HittableList."""
        objects = list(hittables.objects)
        return BVHNode(objects, 0, len(objects), rng)

    def is_leaf(self) -> bool:
        return not isinstance(self.left, BVHNode) and not isinstance(self.right, BVHNode)

    def depth(self) -> int:
        """Number of BVHNode levels from this node down to the deepest leaf."""
        left = self.left.depth() if isinstance(self.left, BVHNode) else 0
        right = self.right.depth() if isinstance(self.right, BVHNode) else 0
        return 1 + max(left, right)

    def hit(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        if not self.box.hit(ray, ray_t):
            return None

        hit_left = self.left.hit(ray, ray_t)

        # Search the right subtree only up to the left hit, if any.
        hit_right = self.right.hit(
            ray, Interval(ray_t.min, hit_left.t if hit_left is not None else ray_t.max))

        return hit_right if hit_right is not None else hit_left

    def bounding_box(self) -> AABB:
        return self.box
