import math
import numbers
import warnings

import numpy as np
from numpy import ndarray as NDArray
from boundednumbers import BoundType, bound_type_to_np_function
from boundednumbers.functions import clamp

from ..types.color_types import ByteArrayLike
from ..types.format_type import BYTE_MAX


def validate_byte(value, channel: str = "channel") -> int:
    """Return ``value`` as an ``int`` if it is a valid 8-bit channel value.

    Raises:
        TypeError: if ``value`` is not an integer (``bool`` is rejected).
        ValueError: if ``value`` lies outside ``[0, 255]``.
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise TypeError(f"{channel} must be an integer in [0, {BYTE_MAX}], got {type(value).__name__}")
    value = int(value)
    if not 0 <= value <= BYTE_MAX:
        raise ValueError(f"{channel} must be in [0, {BYTE_MAX}], got {value}")
    return value


def np_validate_bytes(values: ByteArrayLike, channel: str = "channel") -> NDArray:
    """Vectorized ``validate_byte``; returns an integer array."""
    arr = np.asarray(values)
    if arr.dtype.kind not in "iu":
        raise TypeError(f"{channel} must be an integer array, got dtype {arr.dtype}")
    if arr.size and (arr.min() < 0 or arr.max() > BYTE_MAX):
        raise ValueError(f"{channel} values must be in [0, {BYTE_MAX}]")
    return arr.astype(np.int64, copy=False)


def byte_to_unit(value: int) -> float:
    return value / BYTE_MAX


def round_half_up(value: float, decimals: int = 0) -> float:
    """Round to ``decimals`` places with halves going up (``round`` rounds halves to even)."""
    factor = 10 ** decimals
    return math.floor(value * factor + 0.5) / factor


def unit_to_byte(fraction: float) -> int:
    """
    Convert a fraction in ``[0, 1]`` to a byte, rounding to nearest.

    Out-of-range fractions saturate at 0 or 255. A ``UserWarning`` is emitted
    when saturation changes the rounded result.

    Only called from ``to_rgb._hsl_to_rgb``; the warning points at whoever
    called ``hsl_to_rgb`` or ``HSLColor.to_rgb``.
    """
    if math.isnan(fraction):
        warnings.warn("Channel fraction is NaN; using 0", UserWarning, stacklevel=4)
        return 0
    scaled = fraction * BYTE_MAX
    clamped = clamp(scaled, 0, BYTE_MAX)
    if abs(scaled - clamped) >= 0.5:
        warnings.warn(
            f"Channel fraction {fraction!r} is outside [0, 1]; saturated to {int(clamped)}",
            UserWarning,
            stacklevel=4,
        )
    return int(math.floor(clamped + 0.5))


def np_unit_to_byte(fraction: NDArray) -> NDArray:
    """Vectorized ``unit_to_byte``. Saturates silently; NaN maps to 0."""
    scaled = np.nan_to_num(np.asarray(fraction, dtype=float) * BYTE_MAX, nan=0.0)
    clamped = bound_type_to_np_function[BoundType.CLAMP](scaled, 0.0, float(BYTE_MAX))
    return np.floor(np.asarray(clamped) + 0.5).astype(np.uint8)
