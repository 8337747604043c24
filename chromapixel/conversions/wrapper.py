from __future__ import annotations
from typing import Callable, Dict, Tuple, Union

from ..colors.color_base import ColorBase
from ..colors.rgb import RGBBase, rgb_type
from ..colors.xyz import XYZ, xyY
from ..errors import UnsupportedFormat
from .plan import TransformKind, from_xyz, resolve_transform, to_xyz


def check_convertible(cls: type) -> None:
    """Raise if an RGB class cannot take part in color conversion."""
    if not cls.is_operable:
        raise UnsupportedFormat(f"Conversion with bit-packed format {cls.format!r} is not supported")
    if cls.descriptor.has_shared_exponent:
        raise UnsupportedFormat(f"Shared exponent format {cls.format!r} has no color decoding")


def rgb_to_rgb(color: RGBBase, target: type) -> RGBBase:
    source = type(color)
    check_convertible(source)
    check_convertible(target)

    plan = resolve_transform(source.color_space.id, target.color_space.id)
    if plan.kind is TransformKind.SAME_SPACE:
        # color space is the same, just do type conversion
        src_codec, dst_codec = source.codec, target.codec
        values = tuple(dst_codec.cast(v, src_codec) for v in color.tristimulus_with_alpha)
        return target._from_stored(target._assemble(*values))

    r, g, b, a = color.unpack()
    r, g, b = plan.apply(r, g, b)
    return target.from_unpacked(r, g, b, a)


def rgb_to_xyz(color: RGBBase, target: type = XYZ) -> XYZ:
    check_convertible(type(color))
    r, g, b, _ = color.unpack()
    return XYZ(*to_xyz(color.color_space, r, g, b))


def xyz_to_rgb(color: XYZ, target: type) -> RGBBase:
    check_convertible(target)
    r, g, b = from_xyz(target.color_space, *color.value)
    return target.from_unpacked(r, g, b)


CONVERTERS: Dict[Tuple[str, str], Callable[[ColorBase, type], ColorBase]] = {
    ("rgb", "rgb"): rgb_to_rgb,
    ("rgb", "xyz"): rgb_to_xyz,
    ("rgb", "xyY"): lambda c, t: rgb_to_xyz(c).to_xyY(),
    ("xyz", "rgb"): xyz_to_rgb,
    ("xyY", "rgb"): lambda c, t: xyz_to_rgb(c.to_XYZ(), t),
    ("xyz", "xyY"): lambda c, t: c.to_xyY(),
    ("xyY", "xyz"): lambda c, t: c.to_XYZ(),
}


def convert_color(color: ColorBase, target: Union[type, str]) -> ColorBase:
    """
    Universal color converter.

    Args:
        color: Source color value.
        target: Target color class, or an RGB format string.

    Returns:
        New color of the target type (``color`` itself when it already is one).

    Raises:
        UnsupportedFormat: If either side is bit-packed or has shared exponents.
    """
    if isinstance(target, str):
        target = rgb_type(target)
    if type(color) is target:
        return color  # No conversion needed

    key = (color.mode, getattr(target, "mode", None))
    converter = CONVERTERS.get(key)
    if converter is None:
        raise TypeError(f"Cannot convert {type(color).__name__} to {target.__name__}")
    return converter(color, target)
