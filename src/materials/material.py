# materials/material.py
from typing import Optional, Tuple
from core.ray import Ray
from core.utils import RandomSource
from core.vector import Color
from geometry.hittable import HitRecord

class Material:
    """
    Abstract material class. Subclasses must implement scatter().
    Materials are shared between primitives and never mutated after construction.
    """
    def scatter(self, ray_in: Ray, rec: HitRecord,
                rng: RandomSource) -> Optional[Tuple[Color, Ray]]:
        """
        Computes the attenuation and scattered ray.
        Returns a tuple (attenuation, scattered_ray) or None if the ray is absorbed.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")
