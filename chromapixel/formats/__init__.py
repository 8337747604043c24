"""Pixel format descriptors, the format string parser and the component codec."""

from .codec import ComponentCodec, get_codec
from .descriptor import Component, FormatFlags, PixelFormatDescriptor, make_format_string
from .parser import parse_rgb_format, is_rgb_format, canonical_format

__all__ = [
    "ComponentCodec",
    "get_codec",
    "Component",
    "FormatFlags",
    "PixelFormatDescriptor",
    "make_format_string",
    "parse_rgb_format",
    "is_rgb_format",
    "canonical_format",
]
