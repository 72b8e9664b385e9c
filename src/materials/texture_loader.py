# materials/texture_loader.py
import os
from typing import Tuple
from PIL import Image
import numpy as np

class ImageBuffer:
    """
    Decoded 8-bit RGB pixels, row 0 at the top of the image.
    """
    def __init__(self, pixels: np.ndarray):
        if pixels.ndim != 3 or pixels.shape[2] < 3:
            raise ValueError(f"Expected an (height, width, 3) pixel array, got shape {pixels.shape}")
        self.pixels = np.ascontiguousarray(pixels[:, :, :3], dtype=np.uint8)
        self.height, self.width = self.pixels.shape[:2]

    def pixel_data(self, i: int, j: int) -> Tuple[int, int, int]:
        """RGB of column i, row j; indices are clamped to the image."""
        i = min(max(i, 0), self.width - 1)
        j = min(max(j, 0), self.height - 1)
        r, g, b = self.pixels[j, i]
        return int(r), int(g), int(b)

def load_image(image_path: str) -> ImageBuffer:
    """
    Decode an image file into an ImageBuffer, converting to RGB when needed.

    Args:
        image_path: Path to the image file

    Returns:
        ImageBuffer with the decoded pixels

    Raises:
        FileNotFoundError: If the image file doesn't exist
        ValueError: If the image cannot be decoded
    """
    if not os.path.exists(image_path):
        raise FileNotFoundError(f"Texture file not found: {image_path}")

    try:
        with Image.open(image_path) as img:
            if img.mode != 'RGB':
                img = img.convert('RGB')
            return ImageBuffer(np.array(img))
    except OSError as e:
        raise ValueError(f"Error loading texture {image_path}: {e}") from e
