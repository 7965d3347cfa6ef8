from __future__ import annotations
from typing import Sequence, Tuple, Union
from numpy import ndarray

Scalar = int | float
Byte = int
RGBTuple = Tuple[Byte, Byte, Byte]
ByteArrayLike = Union[Byte, Sequence[Byte], ndarray]
FloatArrayLike = Union[Scalar, Sequence[Scalar], ndarray]
