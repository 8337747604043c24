"""
Chromapixel Conversions
=======================

Static conversion (both color classes known):
    convert_color(color, target)
        RGB <-> RGB, RGB <-> XYZ / xyY
    resolve_transform(source_id, target_id)
        Cached color space transform shared by both engines

Dynamic conversion (source format is a runtime string):
    build_conversion(source_format, target)
        Resolve once per (format, target) pair, then call per pixel
    unpack_rgb_color(raw, descriptor)
        Decode raw pixel bytes, including bit-packed formats
"""

from .plan import TransformKind, TransformPlan, resolve_transform
from .wrapper import convert_color, check_convertible
from .unpack import unpack_rgb_color, make_rgb_unpacker
from .dynamic import DynamicConversion, PlanKind, build_conversion

__all__ = [
    "TransformKind",
    "TransformPlan",
    "resolve_transform",
    "convert_color",
    "check_convertible",
    "unpack_rgb_color",
    "make_rgb_unpacker",
    "DynamicConversion",
    "PlanKind",
    "build_conversion",
]
