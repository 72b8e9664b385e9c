# materials/metal.py
from typing import Optional, Tuple
from core.ray import Ray
from core.vector import Color
from core.utils import RandomSource, reflect, random_unit_vector
from geometry.hittable import HitRecord
from materials.material import Material

class Metal(Material):
    """
    Metal material: mirror reflection perturbed by fuzz in [0, 1].
    """
    def __init__(self, albedo: Color, fuzz: float = 0.0):
        if fuzz < 0:
            raise ValueError(f"Metal fuzz must be non-negative, got {fuzz}")
        self.albedo = albedo
        self.fuzz = min(fuzz, 1)

    def scatter(self, ray_in: Ray, rec: HitRecord,
                rng: RandomSource) -> Optional[Tuple[Color, Ray]]:
        reflected = reflect(ray_in.direction.normalize(), rec.normal)
        # Fuzzed rays that end up below the surface are still returned.
        scattered = Ray(rec.p, reflected + random_unit_vector(rng) * self.fuzz, ray_in.time)
        return self.albedo, scattered
