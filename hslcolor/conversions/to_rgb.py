import numpy as np
from numpy import ndarray as NDArray

from ..colors.hsl import HSLColor
from ..types.color_types import RGBTuple, FloatArrayLike
from ..types.format_type import HUE_360
from .numbers import unit_to_byte, np_unit_to_byte

ONE_THIRD = 1.0 / 3.0
ONE_SIXTH = 1.0 / 6.0
TWO_THIRDS = 2.0 / 3.0


def _hue_to_channel(p: float, q: float, t: float) -> float:
    """Intensity of one channel, given chroma bounds ``p``/``q`` and hue fraction ``t``."""
    # Offsets are at most 1/3, one step brings t back into [0, 1]
    if t < 0.0:
        t += 1.0
    elif t > 1.0:
        t -= 1.0

    if t < ONE_SIXTH:
        return p + (q - p) * 6.0 * t
    if t < 0.5:
        return q
    if t < TWO_THIRDS:
        return p + (q - p) * (TWO_THIRDS - t) * 6.0
    return p


def hsl_to_rgb(color: HSLColor) -> RGBTuple:
    """
    Convert an HSL color to 8-bit RGB.

    Args:
        color: HSLColor (or any ``(h, s, l)`` triple) with hue in degrees,
            saturation and lightness in [0, 1]

    Returns:
        Tuple[int, int, int]: (r, g, b) in [0, 255]

    Values outside the nominal ranges are not rejected; the hue wraps and
    channels that fall outside [0, 255] are saturated with a warning.
    """
    return _hsl_to_rgb(color)


def _hsl_to_rgb(color: HSLColor) -> RGBTuple:
    # Shared by hsl_to_rgb and HSLColor.to_rgb so warnings land on their caller
    h, s, l = color

    if s == 0:
        gray = unit_to_byte(l)
        return gray, gray, gray

    t = h / HUE_360

    if l < 0.5:
        q = l * (1.0 + s)
    else:
        q = l + s - (l * s)
    p = 2.0 * l - q

    return (
        unit_to_byte(_hue_to_channel(p, q, t + ONE_THIRD)),
        unit_to_byte(_hue_to_channel(p, q, t)),
        unit_to_byte(_hue_to_channel(p, q, t - ONE_THIRD)),
    )


def _np_hue_to_channel(p: NDArray, q: NDArray, t: NDArray) -> NDArray:
    t = np.where(t < 0.0, t + 1.0, np.where(t > 1.0, t - 1.0, t))
    return np.select(
        [t < ONE_SIXTH, t < 0.5, t < TWO_THIRDS],
        [p + (q - p) * 6.0 * t, q, p + (q - p) * (TWO_THIRDS - t) * 6.0],
        default=p,
    )


def np_hsl_to_rgb(h: FloatArrayLike, s: FloatArrayLike, l: FloatArrayLike) -> NDArray:
    """
    Vectorized: Convert HSL to 8-bit RGB.

    Args:
        h: array-like or scalar, hue in degrees [0, 360)
        s: array-like or scalar, saturation in [0, 1]
        l: array-like or scalar, lightness in [0, 1]

    Returns:
        rgb: uint8 array of shape (..., 3)
    """
    h = np.asarray(h, dtype=float)
    s = np.asarray(s, dtype=float)
    l = np.asarray(l, dtype=float)

    out_shape = np.broadcast(h, s, l).shape
    h = np.broadcast_to(h, out_shape)
    s = np.broadcast_to(s, out_shape)
    l = np.broadcast_to(l, out_shape)

    # Infinite lightness yields NaN channels, which np_unit_to_byte maps to 0
    with np.errstate(invalid="ignore"):
        t = h / HUE_360
        q = np.where(l < 0.5, l * (1.0 + s), l + s - (l * s))
        p = 2.0 * l - q

        r = _np_hue_to_channel(p, q, t + ONE_THIRD)
        g = _np_hue_to_channel(p, q, t)
        b = _np_hue_to_channel(p, q, t - ONE_THIRD)

    achromatic = s == 0
    r = np.where(achromatic, l, r)
    g = np.where(achromatic, l, g)
    b = np.where(achromatic, l, b)

    return np_unit_to_byte(np.stack([r, g, b], axis=-1))
