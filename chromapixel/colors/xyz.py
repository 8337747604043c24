"""CIE XYZ and xyY colors, the device independent pivot of every conversion."""
from __future__ import annotations

from typing import ClassVar, Optional, Tuple, Union

import numpy as np

from ..colorspace.registry import D65
from ..types.color_types import Scalar
from .color_base import ColorBase

# buffer layout of both types: three little-endian float32
_ELEMENT_DTYPE = np.dtype("<f4")
ELEMENT_BYTES = 3 * _ELEMENT_DTYPE.itemsize


class _TristimulusColor(ColorBase):
    __slots__ = ()

    def __init__(self, *args: Union[Scalar, ColorBase, tuple, list]) -> None:
        if len(args) == 1 and isinstance(args[0], ColorBase):
            value = args[0].convert(type(self))._value
        else:
            if len(args) == 1 and isinstance(args[0], (tuple, list)):
                args = tuple(args[0])
            if len(args) != 3:
                raise TypeError(f"{type(self).__name__} expects 3 values, got {len(args)}")
            value = tuple(float(v) for v in args)
        self._value = value
        self._freeze()

    @classmethod
    def from_bytes(cls, data: Union[bytes, bytearray, memoryview]):
        raw = np.frombuffer(data, dtype=_ELEMENT_DTYPE, count=3)
        return cls._from_stored(tuple(float(v) for v in raw))

    def to_bytes(self) -> bytes:
        return np.array(self._value, dtype=_ELEMENT_DTYPE).tobytes()


class XYZ(_TristimulusColor):
    __slots__ = ()

    mode: ClassVar[str] = "xyz"
    format: ClassVar[str] = "XYZ"

    @property
    def X(self) -> float:
        return self._value[0]

    @property
    def Y(self) -> float:
        return self._value[1]

    @property
    def Z(self) -> float:
        return self._value[2]

    def to_xyY(self, white: Tuple[float, float] = D65) -> xyY:
        """
        Project onto chromaticity coordinates.

        Black (X + Y + Z == 0) has no chromaticity; it takes the
        chromaticity of ``white``.
        """
        X, Y, Z = self._value
        total = X + Y + Z
        if total == 0.0:
            return xyY(white[0], white[1], Y)
        return xyY(X / total, Y / total, Y)


class xyY(_TristimulusColor):
    __slots__ = ()

    mode: ClassVar[str] = "xyY"
    format: ClassVar[str] = "xyY"

    @property
    def x(self) -> float:
        return self._value[0]

    @property
    def y(self) -> float:
        return self._value[1]

    @property
    def Y(self) -> float:
        return self._value[2]

    def to_XYZ(self) -> XYZ:
        x, y, Y = self._value
        if y == 0.0:
            return XYZ(0.0, 0.0, 0.0)
        return XYZ(x * Y / y, Y, (1.0 - x - y) * Y / y)


XYZ_FORMATS = {cls.format: cls for cls in (XYZ, xyY)}


def xyz_type(format_string: str) -> Optional[type]:
    return XYZ_FORMATS.get(format_string)


def register_xyz() -> None:
    """Register the "xyz" image format family."""
    from ..image.format import ImageGeometry, register_image_format_family

    def get_image_params(format_string: str, width: int, height: int) -> Optional[ImageGeometry]:
        if format_string not in XYZ_FORMATS:
            return None
        bits = ELEMENT_BYTES * 8
        return ImageGeometry(bits_per_block=bits, row_pitch=width * ELEMENT_BYTES)

    register_image_format_family("xyz", get_image_params, lambda f: f in XYZ_FORMATS)
