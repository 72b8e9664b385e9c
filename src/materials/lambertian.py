# materials/lambertian.py
import logging
from typing import Tuple, Union
from core.ray import Ray
from core.vector import Color, Vector3
from core.utils import RandomSource, random_unit_vector
from geometry.hittable import HitRecord
from materials.material import Material
from materials.textures import Texture, SolidColor

logger = logging.getLogger(__name__)

class Lambertian(Material):
    """
    Lambertian diffuse material with texture support.
    """

    def __init__(self, albedo: Union[Vector3, Texture]):
        # Store either a solid color or a texture.
        if isinstance(albedo, Vector3):
            self.texture = SolidColor(albedo)
        else:
            self.texture = albedo

    def scatter(self, ray_in: Ray, rec: HitRecord, rng: RandomSource) -> Tuple[Color, Ray]:
        """
        Scatter a ray according to a Lambertian reflection model.
        Returns (attenuation, scattered_ray); diffuse surfaces never absorb.
        """
        # Pick a random scatter direction by adding a random vector to the normal.
        scatter_direction = rec.normal + random_unit_vector(rng)

        # If scatter_direction is degenerate (very small), just use the normal.
        if scatter_direction.near_zero():
            logger.debug("Degenerate diffuse direction at %r, using the normal", rec.p)
            scatter_direction = rec.normal

        scattered = Ray(rec.p, scatter_direction, ray_in.time)
        attenuation = self.texture.value(rec.u, rec.v, rec.p)
        return attenuation, scattered
