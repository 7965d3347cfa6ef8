"""
HSL Color Space Conversions
===========================

Scalar and vectorized (numpy) conversions between 8-bit RGB and HSL.

Conversion Functions
-------------------

RGB → HSL:
    rgb_to_hsl(r, g, b)
        Scalar conversion, returns an HSLColor
    np_rgb_to_hsl(r, g, b)
        Vectorized conversion, returns an (..., 3) array of (h, s, l)

HSL → RGB:
    hsl_to_rgb(color)
        Scalar conversion, returns an (r, g, b) tuple of bytes
    np_hsl_to_rgb(h, s, l)
        Vectorized conversion, returns an (..., 3) uint8 array

Examples
--------
>>> from hslcolor.conversions import rgb_to_hsl, hsl_to_rgb
>>> rgb_to_hsl(255, 255, 0)
HSLColor(h=60.0, s=1.0, l=0.5)
>>> hsl_to_rgb(rgb_to_hsl(18, 35, 67))
(18, 35, 67)
"""

from .to_hsl import rgb_to_hsl, np_rgb_to_hsl
from .to_rgb import hsl_to_rgb, np_hsl_to_rgb

__all__ = [
    'rgb_to_hsl',
    'np_rgb_to_hsl',
    'hsl_to_rgb',
    'np_hsl_to_rgb',
]
