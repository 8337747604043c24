"""
Chromapixel Color Classes
=========================

Immutable color values: one ``RGBBase`` subclass per RGB pixel format, plus
the ``XYZ`` and ``xyY`` pivot types.

>>> from chromapixel.colors import RGB8, L8
>>> L8(RGB8(0xFF, 0x20, 0x40)).l == 82
True

Notes
-----
- Values are frozen after initialization
- Construction arguments are in stored units (raw integers for integer
  formats) and are clamped to the storage range
- ``convert`` picks the static conversion path for the class pair
"""

from .color_base import ColorBase
from .rgb import (
    RGBBase,
    rgb_type,
    is_rgb,
    format_string_of,
    RGB8,
    RGBA8,
    BGR8,
    BGRA8,
    L8,
    LA8,
    RGB16,
    RGBA16,
    RGBF32,
    RGBAF32,
    LinearRGBAF32,
)
from .xyz import XYZ, xyY, xyz_type

__all__ = [
    "ColorBase",
    "RGBBase",
    "rgb_type",
    "is_rgb",
    "format_string_of",
    "RGB8",
    "RGBA8",
    "BGR8",
    "BGRA8",
    "L8",
    "LA8",
    "RGB16",
    "RGBA16",
    "RGBF32",
    "RGBAF32",
    "LinearRGBAF32",
    "XYZ",
    "xyY",
    "xyz_type",
]
