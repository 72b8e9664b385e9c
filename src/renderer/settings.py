# renderer/settings.py
from dataclasses import dataclass
from typing import Optional
from core.vector import Color

MAX_BOUNCES = 50

# Named presets, from fast previews to final renders.
QUALITY_LEVELS = {
    "interactive": {"samples": 1, "bounces": 4},
    "balanced": {"samples": 16, "bounces": 10},
    "high_quality": {"samples": 100, "bounces": MAX_BOUNCES},
}

@dataclass
class RenderSettings:
    """Sampling parameters for a render."""
    samples_per_pixel: int = 10
    max_depth: int = MAX_BOUNCES
    # None selects the sky gradient; otherwise a constant background color.
    background: Optional[Color] = None

    def __post_init__(self):
        if self.samples_per_pixel < 1:
            raise ValueError(f"samples_per_pixel must be at least 1, got {self.samples_per_pixel}")
        if self.max_depth < 0:
            raise ValueError(f"max_depth must be non-negative, got {self.max_depth}")

    @classmethod
    def from_quality(cls, name: str, background: Optional[Color] = None) -> "RenderSettings":
        try:
            quality = QUALITY_LEVELS[name]
        except KeyError:
            raise ValueError(
                f"Unknown quality level {name!r}; expected one of {sorted(QUALITY_LEVELS)}") from None
        return cls(samples_per_pixel=quality["samples"], max_depth=quality["bounces"],
                   background=background)
