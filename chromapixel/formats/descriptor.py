"""Structured description of an RGB-family pixel format."""
from __future__ import annotations

from dataclasses import dataclass
from enum import IntFlag
from typing import Optional, Tuple

from ..types.format_type import ComponentKind, NumericForm, aligned_widths, fixed_point_forms, form_prefixes
from .codec import ComponentCodec, get_codec


class FormatFlags(IntFlag):
    NONE = 0
    ALL_SAME_FORM = 1
    ALL_ALIGNED = 2
    ALL_SAME_SIZE = 4

    OPERABLE = ALL_SAME_FORM | ALL_ALIGNED | ALL_SAME_SIZE


@dataclass(frozen=True)
class Component:
    kind: ComponentKind
    form: NumericForm
    bits: int
    frac_bits: int = 0

    @property
    def codec(self) -> ComponentCodec:
        return get_codec(self.form, self.bits, self.frac_bits)

    @property
    def token(self) -> str:
        """Format string token, e.g. ``8``, ``s16``, ``f32``, ``q16.8``."""
        token = f"{form_prefixes[self.form]}{self.bits}"
        if self.form in fixed_point_forms:
            token += f".{self.frac_bits}"
        return token


@dataclass(frozen=True)
class PixelFormatDescriptor:
    components: Tuple[Component, ...]
    color_space: str

    @property
    def layout(self) -> str:
        return "".join(c.kind.value for c in self.components)

    @property
    def bits(self) -> int:
        """Total bits of one pixel block."""
        return sum(c.bits for c in self.components)

    @property
    def flags(self) -> FormatFlags:
        first = self.components[0]
        flags = FormatFlags.NONE
        if all(c.form == first.form and c.frac_bits == first.frac_bits for c in self.components):
            flags |= FormatFlags.ALL_SAME_FORM
        if all(c.bits in aligned_widths for c in self.components):
            flags |= FormatFlags.ALL_ALIGNED
        if all(c.bits == first.bits for c in self.components):
            flags |= FormatFlags.ALL_SAME_SIZE
        return flags

    @property
    def is_operable(self) -> bool:
        return (self.flags & FormatFlags.OPERABLE) == FormatFlags.OPERABLE

    @property
    def kinds(self) -> Tuple[ComponentKind, ...]:
        return tuple(c.kind for c in self.components)

    def has_component(self, kind: ComponentKind) -> bool:
        return kind in self.kinds

    def index_of(self, kind: ComponentKind) -> Optional[int]:
        for i, c in enumerate(self.components):
            if c.kind == kind:
                return i
        return None

    @property
    def has_shared_exponent(self) -> bool:
        return self.has_component(ComponentKind.E) or self.has_component(ComponentKind.M)

    def __str__(self) -> str:
        return make_format_string(self)


def make_format_string(desc: PixelFormatDescriptor) -> str:
    """Build the canonical format string for a descriptor.

    Every component type is spelled out and the color space is always
    present, so the result is independent of configuration defaults.
    """
    parts = [desc.layout]
    parts.extend(c.token for c in desc.components)
    parts.append(desc.color_space)
    return "_".join(parts)
