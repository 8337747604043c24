"""
Pixel format string parser.

Grammar::

    format     := layout ['_' type]* ['_' colorspace]
    layout     := 1 to 6 letters from r g b a l e m x
    type       := digits            unsigned normalized   (8, 16, 5 ...)
                | 's' digits        signed normalized     (s8)
                | 'u' digits        unsigned integer      (u16)
                | 'i' digits        signed integer        (i32)
                | 'f' digits        floating point        (f16, f32, f64)
                | 'q' digits '.' digits    unsigned fixed point (q16.8)
                | 'sq' digits '.' digits   signed fixed point   (sq16.8)
    colorspace := identifier ['^' gamma]

Either every component gets a type token or none does; with none, every
component defaults to ``Config.default_bits`` unsigned normalized (exponent
and mantissa channels default to unsigned integer). ``x`` marks padding and
is the only letter that may repeat.
"""
from __future__ import annotations

import re
from functools import lru_cache
from typing import Tuple

from ..config import DEFAULT_CONFIG, Config
from ..errors import ParseError
from ..types.format_type import ComponentKind, NumericForm
from .descriptor import Component, PixelFormatDescriptor, make_format_string

MAX_COMPONENTS = 6

_LAYOUT_RE = re.compile(r"^[rgbalemx]+$")
_TYPE_RE = re.compile(r"^(?P<prefix>sq|q|s|u|i|f)?(?P<bits>\d+)(?:\.(?P<frac>\d+))?$")
_COLORSPACE_RE = re.compile(r"^[A-Za-z][A-Za-z0-9\-]*(?:\^[A-Za-z0-9.]+)?$")

_PREFIX_FORMS = {
    None: NumericForm.UNSIGNED_NORMALIZED,
    "s": NumericForm.SIGNED_NORMALIZED,
    "u": NumericForm.UNSIGNED_INT,
    "i": NumericForm.SIGNED_INT,
    "f": NumericForm.FLOAT,
    "q": NumericForm.FIXED_POINT,
    "sq": NumericForm.SIGNED_FIXED_POINT,
}


def _is_type_token(token: str) -> bool:
    return _TYPE_RE.match(token) is not None


def _parse_type(format_string: str, kind: ComponentKind, token: str) -> Component:
    match = _TYPE_RE.match(token)
    if match is None:
        raise ParseError(format_string, f"invalid component type {token!r}")

    prefix, frac = match.group("prefix"), match.group("frac")
    form = _PREFIX_FORMS[prefix]
    bits = int(match.group("bits"))

    if (frac is not None) != (prefix in ("q", "sq")):
        raise ParseError(format_string, f"fraction bits only apply to fixed point types, got {token!r}")
    if not 1 <= bits <= 64:
        raise ParseError(format_string, f"component width must be 1..64 bits, got {token!r}")
    frac_bits = int(frac) if frac is not None else 0
    if frac_bits > bits:
        raise ParseError(format_string, f"fixed point fraction wider than the component in {token!r}")

    return Component(kind, form, bits, frac_bits)


def _default_component(kind: ComponentKind, config: Config) -> Component:
    if kind in (ComponentKind.E, ComponentKind.M):
        return Component(kind, NumericForm.UNSIGNED_INT, config.default_bits)
    return Component(kind, NumericForm.UNSIGNED_NORMALIZED, config.default_bits)


def parse_rgb_format(format_string: str, config: Config = DEFAULT_CONFIG) -> PixelFormatDescriptor:
    """
    Parse an RGB-family format string into a descriptor.

    Args:
        format_string: e.g. ``"rgba"``, ``"bgr_s8_s8_s8"``, ``"la_f32_f32"``,
            ``"rgba_16_16_16_16_sRGB^1"``.
        config: Supplies the default color space and component width.

    Returns:
        PixelFormatDescriptor

    Raises:
        ParseError: If the string is malformed.
    """
    if not isinstance(format_string, str) or not format_string:
        raise ParseError(str(format_string), "empty format string")
    return _parse_rgb_format(format_string, config)


@lru_cache(maxsize=256)
def _parse_rgb_format(format_string: str, config: Config) -> PixelFormatDescriptor:
    tokens = format_string.split("_")
    layout, rest = tokens[0], tokens[1:]

    if not _LAYOUT_RE.match(layout):
        raise ParseError(format_string, f"invalid component layout {layout!r}")

    kinds = [ComponentKind(c) for c in layout]
    seen = set()
    for kind in kinds:
        if kind != ComponentKind.X and kind in seen:
            raise ParseError(format_string, f"duplicate component {kind.value!r}")
        seen.add(kind)
    if len(kinds) > MAX_COMPONENTS:
        raise ParseError(format_string, f"at most {MAX_COMPONENTS} components are allowed")

    color_space = config.default_color_space
    if rest and not _is_type_token(rest[-1]):
        color_space = rest.pop()
        if not _COLORSPACE_RE.match(color_space):
            raise ParseError(format_string, f"invalid color space {color_space!r}")

    components: Tuple[Component, ...]
    if not rest:
        components = tuple(_default_component(kind, config) for kind in kinds)
    elif len(rest) == len(kinds):
        components = tuple(_parse_type(format_string, k, t) for k, t in zip(kinds, rest))
    else:
        raise ParseError(
            format_string,
            f"{len(kinds)} components but {len(rest)} component types",
        )

    return PixelFormatDescriptor(components, color_space)


def is_rgb_format(format_string: str) -> bool:
    """Check if a string parses as an RGB-family format."""
    try:
        parse_rgb_format(format_string)
    except ParseError:
        return False
    return True


def canonical_format(format_string: str, config: Config = DEFAULT_CONFIG) -> str:
    """Return the fully spelled-out form of a format string."""
    return make_format_string(parse_rgb_format(format_string, config))
