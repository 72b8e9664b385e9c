# camera/camera.py
import math
from typing import Optional
from core.vector import Vector3, Point3
from core.ray import Ray
from core.utils import RandomSource, degrees_to_radians, get_rng, random_in_unit_disk

class Camera:
    """
    Look-at pinhole camera with an optional defocus disk (thin-lens depth of
    field). Pixel (0, 0) is the top-left corner of the image.
    """
    def __init__(self, aspect_ratio: float = 1.0, image_width: int = 100, vfov: float = 90.0,
                 lookfrom: Point3 = None, lookat: Point3 = None, vup: Vector3 = None,
                 defocus_angle: float = 0.0, focus_dist: float = 10.0):
        if image_width < 1:
            raise ValueError(f"Image width must be at least 1, got {image_width}")
        self.aspect_ratio = aspect_ratio
        self.image_width = image_width
        self.vfov = vfov  # Vertical field of view in degrees
        self.lookfrom = lookfrom if lookfrom is not None else Point3(0, 0, 0)
        self.lookat = lookat if lookat is not None else Point3(0, 0, -1)
        self.vup = vup if vup is not None else Vector3(0, 1, 0)
        self.defocus_angle = defocus_angle  # Cone angle through each pixel, degrees
        self.focus_dist = focus_dist  # Distance to the plane of perfect focus
        self.update_camera()

    def update_camera(self):
        """Updates the camera's basis vectors and viewport."""
        self.image_height = max(1, int(self.image_width / self.aspect_ratio))
        self.center = self.lookfrom

        theta = degrees_to_radians(self.vfov)
        h = math.tan(theta / 2)
        viewport_height = 2.0 * h * self.focus_dist
        viewport_width = viewport_height * (self.image_width / self.image_height)

        # Orthonormal basis: w points backwards, u right, v up.
        view = self.lookfrom - self.lookat
        if view.near_zero():
            raise ValueError("lookfrom and lookat must be distinct points")
        self.w = view.normalize()
        side = self.vup.cross(self.w)
        if side.near_zero():
            raise ValueError(f"vup {tuple(self.vup)} is parallel to the view direction")
        self.u = side.normalize()
        self.v = self.w.cross(self.u)

        viewport_u = self.u * viewport_width
        viewport_v = -self.v * viewport_height

        self.pixel_delta_u = viewport_u / self.image_width
        self.pixel_delta_v = viewport_v / self.image_height

        viewport_upper_left = (self.center
                               - self.w * self.focus_dist
                               - viewport_u / 2
                               - viewport_v / 2)
        self.pixel00_loc = viewport_upper_left + (self.pixel_delta_u + self.pixel_delta_v) * 0.5

        defocus_radius = self.focus_dist * math.tan(degrees_to_radians(self.defocus_angle / 2))
        self.defocus_disk_u = self.u * defocus_radius
        self.defocus_disk_v = self.v * defocus_radius

    def pixel_center(self, i: int, j: int) -> Point3:
        return self.pixel00_loc + self.pixel_delta_u * i + self.pixel_delta_v * j

    def get_center_ray(self, i: int, j: int) -> Ray:
        """Deterministic ray through the center of pixel (i, j) at time 0."""
        return Ray(self.center, self.pixel_center(i, j) - self.center)

    def get_ray(self, i: int, j: int, rng: Optional[RandomSource] = None) -> Ray:
        """
        Randomly sampled ray for pixel (i, j): jittered within the pixel square,
        starting on the defocus disk, at a random time in [0, 1).
        """
        rng = get_rng(rng)
        px = -0.5 + rng.random()
        py = -0.5 + rng.random()
        pixel_sample = self.pixel_center(i, j) + self.pixel_delta_u * px + self.pixel_delta_v * py

        ray_origin = self.center if self.defocus_angle <= 0 else self.defocus_disk_sample(rng)
        ray_direction = pixel_sample - ray_origin
        return Ray(ray_origin, ray_direction, rng.random())

    def defocus_disk_sample(self, rng: RandomSource) -> Point3:
        p = random_in_unit_disk(rng)
        return self.center + self.defocus_disk_u * p.x + self.defocus_disk_v * p.y
