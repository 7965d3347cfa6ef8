import numpy as np
from numpy import ndarray as NDArray

from ..colors.hsl import HSLColor
from ..types.color_types import ByteArrayLike
from ..types.format_type import HUE_360, HUE_DECIMALS, BYTE_MAX
from .numbers import validate_byte, np_validate_bytes, byte_to_unit, round_half_up


def _fraction_to_degrees(h: float) -> float:
    degrees = round_half_up(h * HUE_360, HUE_DECIMALS)
    # 359.999 rounds up to a full turn
    return 0.0 if degrees >= HUE_360 else degrees


def rgb_to_hsl(r: int, g: int, b: int) -> HSLColor:
    """
    Convert 8-bit RGB channels to HSL.

    Args:
        r: Red component in [0, 255]
        g: Green component in [0, 255]
        b: Blue component in [0, 255]

    Returns:
        HSLColor: hue in [0, 360) rounded to centi-degrees, saturation and
        lightness in [0, 1]. Grays come back with hue 0 and saturation 0.

    Raises:
        TypeError: if a channel is not an integer.
        ValueError: if a channel is outside [0, 255].
    """
    r = byte_to_unit(validate_byte(r, "red"))
    g = byte_to_unit(validate_byte(g, "green"))
    b = byte_to_unit(validate_byte(b, "blue"))

    max_c = max(r, g, b)
    min_c = min(r, g, b)

    lightness = (max_c + min_c) / 2.0

    delta = max_c - min_c
    # Exact comparison is safe: both sides come from the same division by 255
    if delta == 0:
        return HSLColor(0.0, 0.0, lightness)

    if lightness < 0.5:
        saturation = delta / (max_c + min_c)
    else:
        saturation = delta / (2.0 - max_c - min_c)

    r2 = (((max_c - r) / 6.0) + (delta / 2.0)) / delta
    g2 = (((max_c - g) / 6.0) + (delta / 2.0)) / delta
    b2 = (((max_c - b) / 6.0) + (delta / 2.0)) / delta

    if max_c == r:
        h = b2 - g2
    elif max_c == g:
        h = (1.0 / 3.0) + r2 - b2
    else:
        h = (2.0 / 3.0) + g2 - r2

    if h < 0:
        h += 1.0
    elif h > 1:
        h -= 1.0

    return HSLColor(_fraction_to_degrees(h), saturation, lightness)


def np_rgb_to_hsl(r: ByteArrayLike, g: ByteArrayLike, b: ByteArrayLike) -> NDArray:
    """
    Vectorized: Convert 8-bit RGB channels to HSL.

    Args:
        r, g, b: array-like or scalar of integers in [0, 255]

    Returns:
        hsl: array of shape (..., 3): (hue [0,360), saturation [0,1], lightness [0,1])
    """
    r = np_validate_bytes(r, "red") / BYTE_MAX
    g = np_validate_bytes(g, "green") / BYTE_MAX
    b = np_validate_bytes(b, "blue") / BYTE_MAX

    out_shape = np.broadcast(r, g, b).shape
    r = np.broadcast_to(r, out_shape)
    g = np.broadcast_to(g, out_shape)
    b = np.broadcast_to(b, out_shape)

    max_c = np.maximum.reduce([r, g, b])
    min_c = np.minimum.reduce([r, g, b])
    delta = max_c - min_c

    lightness = (max_c + min_c) / 2.0

    chromatic = delta != 0
    safe_delta = np.where(chromatic, delta, 1.0)

    saturation = np.zeros(out_shape)
    low = chromatic & (lightness < 0.5)
    high = chromatic & ~(lightness < 0.5)
    saturation[low] = delta[low] / (max_c[low] + min_c[low])
    saturation[high] = delta[high] / (2.0 - max_c[high] - min_c[high])

    r2 = (((max_c - r) / 6.0) + (delta / 2.0)) / safe_delta
    g2 = (((max_c - g) / 6.0) + (delta / 2.0)) / safe_delta
    b2 = (((max_c - b) / 6.0) + (delta / 2.0)) / safe_delta

    mask_r = max_c == r
    mask_g = ~mask_r & (max_c == g)
    mask_b = ~mask_r & ~mask_g

    h = np.zeros(out_shape)
    h[mask_r] = b2[mask_r] - g2[mask_r]
    h[mask_g] = (1.0 / 3.0) + r2[mask_g] - b2[mask_g]
    h[mask_b] = (2.0 / 3.0) + g2[mask_b] - r2[mask_b]

    h = np.where(h < 0, h + 1.0, np.where(h > 1, h - 1.0, h))

    factor = 10 ** HUE_DECIMALS
    hue = np.floor(h * HUE_360 * factor + 0.5) / factor
    hue = np.where(hue >= HUE_360, 0.0, hue)
    hue = np.where(chromatic, hue, 0.0)

    return np.stack([hue, saturation, lightness], axis=-1)
