# materials/textures.py
import logging
import math
from typing import Optional, Union
from core.interval import Interval
from core.utils import RandomSource
from core.vector import Color, Point3
from materials.perlin import Perlin
from materials.texture_loader import ImageBuffer, load_image

logger = logging.getLogger(__name__)

# Returned by image textures without pixel data so the failure shows in renders.
MISSING_IMAGE_COLOR = Color(0.0, 1.0, 1.0)

class Texture:
    """Base class for all textures."""
    def value(self, u: float, v: float, p: Point3) -> Color:
        """Color at surface coordinates (u, v) and world point p."""
        raise NotImplementedError("value() must be implemented by texture subclasses.")

class SolidColor(Texture):
    """A solid color texture."""
    def __init__(self, color: Color):
        self.color = color

    @staticmethod
    def from_rgb(red: float, green: float, blue: float) -> "SolidColor":
        return SolidColor(Color(red, green, blue))

    def value(self, u: float, v: float, p: Point3) -> Color:
        return self.color

class CheckerTexture(Texture):
    """
    A 3-D spatial checker pattern: cells of edge `scale` alternate between the
    even and odd textures, independent of the surface parameterization.
    """
    def __init__(self, scale: float, even: Union[Color, Texture], odd: Union[Color, Texture]):
        if not scale > 0:
            raise ValueError(f"Checker scale must be positive, got {scale}")
        self.inv_scale = 1.0 / scale
        self.even = SolidColor(even) if isinstance(even, Color) else even
        self.odd = SolidColor(odd) if isinstance(odd, Color) else odd

    def value(self, u: float, v: float, p: Point3) -> Color:
        x = math.floor(self.inv_scale * p.x)
        y = math.floor(self.inv_scale * p.y)
        z = math.floor(self.inv_scale * p.z)
        is_even = (x + y + z) % 2 == 0
        return self.even.value(u, v, p) if is_even else self.odd.value(u, v, p)

class ImageTexture(Texture):
    """A nearest-neighbor lookup into decoded image pixels."""
    def __init__(self, image: Optional[ImageBuffer]):
        self.image = image

    @staticmethod
    def from_file(image_path: str) -> "ImageTexture":
        """
        Load the image once; on failure the texture renders as cyan instead of
        aborting the render.
        """
        try:
            image = load_image(image_path)
        except (FileNotFoundError, ValueError) as e:
            logger.warning("Using placeholder color for texture: %s", e)
            image = None
        return ImageTexture(image)

    def value(self, u: float, v: float, p: Point3) -> Color:
        if self.image is None or self.image.width <= 0 or self.image.height <= 0:
            return MISSING_IMAGE_COLOR

        # Clamp to [0,1] and flip V to image row order.
        unit = Interval(0.0, 1.0)
        u = unit.clamp(u)
        v = 1.0 - unit.clamp(v)

        i = int(u * self.image.width)
        j = int(v * self.image.height)
        r, g, b = self.image.pixel_data(i, j)

        color_scale = 1.0 / 255.0
        return Color(color_scale * r, color_scale * g, color_scale * b)

class NoiseTexture(Texture):
    """A marble-like procedural texture driven by Perlin turbulence."""
    def __init__(self, scale: float = 1.0, rng: Optional[RandomSource] = None,
                 turbulence_depth: int = 7):
        self.noise = Perlin(rng)
        self.scale = scale
        self.turbulence_depth = turbulence_depth

    def value(self, u: float, v: float, p: Point3) -> Color:
        phase = self.scale * p.z + 10 * self.noise.turb(p, self.turbulence_depth)
        return Color(0.5, 0.5, 0.5) * (1 + math.sin(phase))
