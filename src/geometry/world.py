# src/geometry/world.py
import logging
from typing import Iterator, List, Optional
from core.aabb import AABB
from core.interval import Interval
from core.ray import Ray
from geometry.hittable import Hittable, HitRecord
from geometry.bvh import BVHNode

logger = logging.getLogger(__name__)

class HittableList(Hittable):
    """
    An ordered collection of Hittable objects. hit() scans every child and
    returns the closest intersection; use build_bvh() for large scenes.
    The cached box tracks add() and clear() only, so modify objects through
    those rather than the list itself.
    """
    def __init__(self, objects: Optional[List[Hittable]] = None):
        self.objects: List[Hittable] = []
        self.box = AABB.EMPTY
        for obj in objects or ():
            self.add(obj)

    def add(self, obj: Hittable):
        self.objects.append(obj)
        self.box = AABB.surrounding_box(self.box, obj.bounding_box())

    def clear(self):
        self.objects.clear()
        self.box = AABB.EMPTY

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self) -> Iterator[Hittable]:
        return iter(self.objects)

    def build_bvh(self, rng=None) -> BVHNode:
        """
        Build a bounding-volume hierarchy over the current objects. The list
        itself is left untouched; the returned tree is immutable.
        """
        root = BVHNode.from_list(self, rng)
        logger.debug("Built BVH over %d objects, depth %d", len(self.objects), root.depth())
        return root

    def hit(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        hit_record = None
        closest_so_far = ray_t.max
        for obj in self.objects:
            rec = obj.hit(ray, Interval(ray_t.min, closest_so_far))
            if rec is not None:
                closest_so_far = rec.t
                hit_record = rec
        return hit_record

    def bounding_box(self) -> AABB:
        return self.box
