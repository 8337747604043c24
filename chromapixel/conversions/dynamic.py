"""
Dynamic (runtime format) conversion.

When a pixel format is data, for example the format string of an image
buffer, ``build_conversion`` resolves everything that does not depend on the
pixel value exactly once per (source format, target type) pair: the format
family, the descriptor, the element size, the unpack function and the color
space transform. The resulting ``DynamicConversion`` then only decodes,
transforms and encodes each pixel.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from functools import lru_cache
from typing import Callable, Optional

from ..colors.color_base import ColorBase
from ..colors.rgb import RGBBase, is_rgb, rgb_type
from ..colors.xyz import ELEMENT_BYTES, XYZ, xyz_type
from ..errors import UnsupportedFormat, UnsupportedFormatFamily
from ..formats.descriptor import PixelFormatDescriptor
from ..formats.parser import parse_rgb_format
from ..colorspace.registry import resolve_color_space
from ..image.format import get_format_family
from .plan import TransformKind, TransformPlan, resolve_transform, to_xyz
from .unpack import RawPixel, make_rgb_unpacker
from .wrapper import check_convertible, convert_color, rgb_to_rgb

logger = logging.getLogger(__name__)


class PlanKind(Enum):
    SAME_SPACE = "same_space"
    GAMMA_ONLY = "gamma_only"
    MATRIX = "matrix"
    TO_XYZ = "to_xyz"
    XYZ_SOURCE = "xyz_source"


_TRANSFORM_KINDS = {
    TransformKind.SAME_SPACE: PlanKind.SAME_SPACE,
    TransformKind.GAMMA_ONLY: PlanKind.GAMMA_ONLY,
    TransformKind.MATRIX: PlanKind.MATRIX,
}


@dataclass(frozen=True)
class DynamicConversion:
    source_format: str
    target: type
    family: str
    kind: PlanKind
    element_bytes: int
    descriptor: Optional[PixelFormatDescriptor] = None
    transform: Optional[TransformPlan] = None
    _convert: Callable[[RawPixel], ColorBase] = field(default=None, compare=False, repr=False)

    def __call__(self, data: RawPixel, offset: int = 0) -> ColorBase:
        """Convert the pixel stored at ``data[offset:]``."""
        return self._convert(data[offset:offset + self.element_bytes])


def _rgb_source(source_format: str, target: type) -> DynamicConversion:
    desc = parse_rgb_format(source_format)
    unpack = make_rgb_unpacker(desc)
    element_bytes = desc.bits // 8

    if is_rgb(target):
        check_convertible(target)
        transform = resolve_transform(desc.color_space, target.color_space.id)
        if transform.kind is TransformKind.SAME_SPACE and desc.is_operable:
            # re-encode stored values exactly as the static engine does
            source = rgb_type(source_format)

            def convert(raw: RawPixel) -> RGBBase:
                return rgb_to_rgb(source.from_bytes(raw), target)
        else:
            apply = transform.apply
            from_unpacked = target.from_unpacked

            def convert(raw: RawPixel) -> RGBBase:
                r, g, b, a = unpack(raw)
                r, g, b = apply(r, g, b)
                return from_unpacked(r, g, b, a)

        kind = _TRANSFORM_KINDS[transform.kind]
        return DynamicConversion(source_format, target, "rgb", kind, element_bytes, desc, transform, convert)

    if getattr(target, "mode", None) in ("xyz", "xyY"):
        space = resolve_color_space(desc.color_space)

        def convert(raw: RawPixel) -> ColorBase:
            r, g, b, _ = unpack(raw)
            xyz = XYZ(*to_xyz(space, r, g, b))
            return xyz if target is XYZ else convert_color(xyz, target)

        return DynamicConversion(source_format, target, "rgb", PlanKind.TO_XYZ, element_bytes, desc, None, convert)

    raise TypeError(f"Unsupported conversion target {target!r}")


def _xyz_source(source_format: str, target: type) -> DynamicConversion:
    source = xyz_type(source_format)
    if source is None:
        raise UnsupportedFormat(f"Unknown XYZ format {source_format!r}")
    if is_rgb(target):
        check_convertible(target)

    def convert(raw: RawPixel) -> ColorBase:
        return convert_color(source.from_bytes(raw), target)

    return DynamicConversion(source_format, target, "xyz", PlanKind.XYZ_SOURCE, ELEMENT_BYTES, None, None, convert)


@lru_cache(maxsize=None)
def build_conversion(source_format: str, target: type) -> DynamicConversion:
    """
    Resolve the per-pixel conversion from a runtime format to a color class.

    Raises:
        UnsupportedFormatFamily: If the format belongs to no family with an unpack strategy.
        ParseError: If an rgb-family format string is malformed.
        UnsupportedFormat: If either side cannot be converted.
    """
    family = get_format_family(source_format)
    if family == "rgb":
        conversion = _rgb_source(source_format, target)
    elif family == "xyz":
        conversion = _xyz_source(source_format, target)
    else:
        raise UnsupportedFormatFamily(source_format, family)

    logger.debug(
        f"Built {conversion.kind.value} conversion {source_format!r} -> {target.__name__} "
        f"({conversion.element_bytes} bytes per element)"
    )
    return conversion
