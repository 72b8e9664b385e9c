# src/materials/dielectric.py
import math
from typing import Optional, Tuple
from core.ray import Ray
from core.vector import Color
from core.utils import RandomSource, reflect, refract
from geometry.hittable import HitRecord
from materials.material import Material

class Dielectric(Material):
    """
    Clear refractive material (glass, water) with no absorption.
    """
    def __init__(self, refraction_index: float):
        if not refraction_index > 0:
            raise ValueError(f"Refraction index must be positive, got {refraction_index}")
        self.refraction_index = refraction_index

    def scatter(self, ray_in: Ray, rec: HitRecord,
                rng: RandomSource) -> Optional[Tuple[Color, Ray]]:
        attenuation = Color(1.0, 1.0, 1.0)  # Glass doesn't absorb light

        # Determine if we're entering or exiting the material
        refraction_ratio = 1.0 / self.refraction_index if rec.front_face else self.refraction_index

        unit_direction = ray_in.direction.normalize()
        cos_theta = min(-unit_direction.dot(rec.normal), 1.0)
        sin_theta = math.sqrt(1.0 - cos_theta * cos_theta)

        # Total internal reflection, or a Fresnel reflection chosen at random.
        cannot_refract = refraction_ratio * sin_theta > 1.0
        if cannot_refract or reflectance(cos_theta, refraction_ratio) > rng.random():
            direction = reflect(unit_direction, rec.normal)
        else:
            direction = refract(unit_direction, rec.normal, refraction_ratio)

        return attenuation, Ray(rec.p, direction, ray_in.time)

def reflectance(cosine: float, ref_idx: float) -> float:
    """
    Schlick's approximation of the Fresnel reflectance.
    """
    r0 = (1.0 - ref_idx) / (1.0 + ref_idx)
    r0 = r0 * r0
    return r0 + (1.0 - r0) * math.pow((1.0 - cosine), 5)
