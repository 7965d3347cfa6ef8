from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, Sequence

from ..types.color_types import RGBTuple


@dataclass(frozen=True, order=True)
class HSLColor:
    """
    Color represented in HSL.

    Fields are plain attributes so callers can build and inspect values
    directly. They are stored as given; nothing is clamped on construction.

    Attributes:
        h: Hue in degrees, [0, 360)
        s: Saturation in [0, 1]
        l: Lightness in [0, 1]
    """
    h: float = 0.0
    s: float = 0.0
    l: float = 0.0

    # ------------------ READ-ONLY ALIASES ------------------
    @property
    def hue(self) -> float:
        return self.h

    @property
    def saturation(self) -> float:
        return self.s

    @property
    def lightness(self) -> float:
        return self.l

    @property
    def is_achromatic(self) -> bool:
        """True for grays, where the hue carries no information."""
        return self.s == 0

    def __iter__(self) -> Iterator[float]:
        yield self.h
        yield self.s
        yield self.l

    @classmethod
    def from_rgb(cls, rgb: Sequence[int]) -> HSLColor:
        """
        Build an HSL color from a 3-item sequence of bytes.

        >>> HSLColor.from_rgb((255, 255, 0))
        HSLColor(h=60.0, s=1.0, l=0.5)
        """
        from ..conversions.to_hsl import rgb_to_hsl

        if len(rgb) != 3:
            raise ValueError(f"rgb expects 3 channels, got {len(rgb)}")
        r, g, b = rgb
        return rgb_to_hsl(r, g, b)

    def to_rgb(self) -> RGBTuple:
        """
        Convert to an ``(r, g, b)`` tuple of bytes.

        >>> HSLColor(180.0, 1.0, 0.5).to_rgb()
        (0, 255, 255)
        """
        from ..conversions.to_rgb import _hsl_to_rgb

        return _hsl_to_rgb(self)
