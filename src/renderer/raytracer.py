# renderer/raytracer.py
import logging
import time
from typing import Optional
import numpy as np
from camera.camera import Camera
from core.interval import Interval, INFINITY
from core.ray import Ray
from core.utils import RandomSource, get_rng
from core.vector import Color
from geometry.hittable import Hittable
from renderer.settings import RenderSettings

logger = logging.getLogger(__name__)

# Lower bound of every scene query; avoids re-hitting the surface a ray
# starts on ("shadow acne").
T_MIN = 0.001

BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)
SKY_BLUE = Color(0.5, 0.7, 1.0)


def sky_gradient(ray: Ray) -> Color:
    """White at the horizon blending to sky blue straight up."""
    unit_direction = ray.direction.normalize()
    a = 0.5 * (unit_direction.y + 1.0)
    return WHITE * (1.0 - a) + SKY_BLUE * a


def ray_color(ray: Ray, depth: int, world: Hittable, rng: Optional[RandomSource] = None,
              background: Optional[Color] = None) -> Color:
    """
    Radiance arriving along ray, following at most depth scatter events.
    Rays that escape see background, or the sky gradient when it is None.
    """
    if depth <= 0:
        return BLACK

    rng = get_rng(rng)
    rec = world.hit(ray, Interval(T_MIN, INFINITY))
    if rec is None:
        return sky_gradient(ray) if background is None else background

    scatter = rec.material.scatter(ray, rec, rng)
    if scatter is None:
        return BLACK
    attenuation, scattered = scatter
    return attenuation * ray_color(scattered, depth - 1, world, rng, background)


def normal_color(ray: Ray, world: Hittable) -> Color:
    """
    Deterministic shading that maps the facing normal of the closest hit to a
    color; misses show the sky gradient.
    """
    rec = world.hit(ray, Interval(0.0, INFINITY))
    if rec is None:
        return sky_gradient(ray)
    return (rec.normal + WHITE) * 0.5


def render_normals(camera: Camera, world: Hittable) -> np.ndarray:
    """
    Normal-visualization image of shape (height, width, 3), one pixel-center
    ray per pixel, so repeated calls produce identical output.
    """
    image = np.zeros((camera.image_height, camera.image_width, 3), dtype=np.float64)
    for j in range(camera.image_height):
        for i in range(camera.image_width):
            c = normal_color(camera.get_center_ray(i, j), world)
            image[j, i] = (c.x, c.y, c.z)
    return image


class Renderer:
    """
    Accumulates linear radiance samples per pixel. Encoding the result
    (gamma, clamping, file output) is left to the caller.
    """
    def __init__(self, camera: Camera, settings: Optional[RenderSettings] = None):
        self.camera = camera
        self.settings = settings if settings is not None else RenderSettings()
        self.width = camera.image_width
        self.height = camera.image_height
        self.reset_accumulation()

    def reset_accumulation(self):
        self.accumulation_buffer = np.zeros((self.height, self.width, 3), dtype=np.float64)
        self.samples = 0

    def render_pass(self, world: Hittable, rng: Optional[RandomSource] = None):
        """Add one sample to every pixel."""
        rng = get_rng(rng)
        max_depth = self.settings.max_depth
        background = self.settings.background
        for j in range(self.height):
            for i in range(self.width):
                c = ray_color(self.camera.get_ray(i, j, rng), max_depth, world, rng, background)
                self.accumulation_buffer[j, i] += (c.x, c.y, c.z)
        self.samples += 1

    def render(self, world: Hittable, rng: Optional[RandomSource] = None) -> np.ndarray:
        """Run samples_per_pixel passes and return the averaged image."""
        start = time.perf_counter()
        for _ in range(self.settings.samples_per_pixel):
            self.render_pass(world, rng)
            logger.debug("Sample %d/%d done", self.samples, self.settings.samples_per_pixel)
        logger.info("Rendered %dx%d at %d spp in %.2fs", self.width, self.height,
                    self.samples, time.perf_counter() - start)
        return self.image()

    def image(self) -> np.ndarray:
        if self.samples == 0:
            return np.zeros_like(self.accumulation_buffer)
        return self.accumulation_buffer / self.samples
