"""Ray-intersectable shapes, aggregates, instance transforms and the BVH."""
from geometry.hittable import HitRecord, Hittable
from geometry.bvh import BVHNode
from geometry.world import HittableList
from geometry.sphere import MovingSphere, Sphere
from geometry.quad import Quad, make_box
from geometry.transform import RotateY, Translate

__all__ = [
    "BVHNode",
    "HitRecord",
    "Hittable",
    "HittableList",
    "MovingSphere",
    "Quad",
    "RotateY",
    "Sphere",
    "Translate",
    "make_box",
]
