"""hslcolor: conversions between 8-bit RGB and HSL."""

from .colors.hsl import HSLColor
from .conversions import (
    rgb_to_hsl,
    hsl_to_rgb,
    np_rgb_to_hsl,
    np_hsl_to_rgb,
)
from .types.color_types import RGBTuple
from .types.format_type import HUE_360, BYTE_MAX

__version__ = "1.0.0"

__all__ = [
    # value type
    "HSLColor",
    "RGBTuple",
    # conversions
    "rgb_to_hsl",
    "hsl_to_rgb",
    "np_rgb_to_hsl",
    "np_hsl_to_rgb",
    # constants
    "HUE_360",
    "BYTE_MAX",
    "__version__",
]
