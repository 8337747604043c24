"""
Image buffers.

An ``ImageBuffer`` is a window onto pixel memory whose format is a runtime
string. It never owns the memory it points to: ``data`` is a memoryview and
cropping only re-slices it. ``Image`` pairs a buffer with a known color class
for typed access.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional, Sequence, Union

from ..config import DEFAULT_CONFIG, Config, validate_image_dimensions
from ..errors import ParseError, UnsupportedFormat, UnsupportedFormatFamily
from .format import get_format_family, get_image_params

Buffer = Union[bytes, bytearray, memoryview]


@dataclass(frozen=True)
class ImageBuffer:
    format: str
    width: int
    height: int
    bits_per_block: int
    row_pitch: int
    data: memoryview
    block_width: int = 1
    block_height: int = 1
    metadata: Optional[Dict[str, Any]] = None

    @property
    def element_bytes(self) -> int:
        if self.bits_per_block % 8:
            raise UnsupportedFormat(f"{self.bits_per_block}-bit blocks are not byte addressable")
        return self.bits_per_block // 8

    def offset_of(self, x: int, y: int) -> int:
        """Byte offset of the block holding pixel (x, y)."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return (y // self.block_height) * self.row_pitch + (x // self.block_width) * self.element_bytes

    def element(self, x: int, y: int) -> memoryview:
        """Raw bytes of the block holding pixel (x, y)."""
        offset = self.offset_of(x, y)
        return self.data[offset:offset + self.element_bytes]


def create_image_buffer(format_string: str, width: int, height: int, data: Optional[Buffer] = None,
                        metadata: Optional[Dict[str, Any]] = None,
                        config: Config = DEFAULT_CONFIG) -> ImageBuffer:
    """
    Describe (and, without ``data``, allocate) an image of a runtime format.

    Raises:
        UnsupportedFormatFamily: If no registered family recognises the format.
        ParseError: If the family rejects the format string.
        ValueError: If ``data`` is too small for the geometry.
    """
    validate_image_dimensions(width, height, config)
    if get_format_family(format_string) is None:
        raise UnsupportedFormatFamily(format_string)
    geometry = get_image_params(format_string, width, height)
    if geometry is None:
        raise ParseError(format_string, "rejected by its image format family")

    rows = -(-height // geometry.block_height)
    size = geometry.row_pitch * rows
    if data is None:
        data = bytearray(size)
    view = memoryview(data).cast("B")
    if len(view) < size:
        raise ValueError(f"Image data holds {len(view)} bytes, geometry needs {size}")

    return ImageBuffer(
        format=format_string,
        width=width,
        height=height,
        bits_per_block=geometry.bits_per_block,
        row_pitch=geometry.row_pitch,
        data=view,
        block_width=geometry.block_width,
        block_height=geometry.block_height,
        metadata=metadata,
    )


class Image:
    """A buffer viewed through a known color class."""

    __slots__ = ("element_type", "buffer")

    def __init__(self, element_type: type, buffer: ImageBuffer) -> None:
        if get_format_family(buffer.format) == "rgb" and getattr(element_type, "mode", None) == "rgb":
            from ..formats.parser import canonical_format
            matches = canonical_format(buffer.format) == canonical_format(element_type.format)
        else:
            matches = buffer.format == element_type.format
        if not matches:
            raise ValueError(f"Buffer format {buffer.format!r} does not match {element_type.__name__}")
        self.element_type = element_type
        self.buffer = buffer

    @classmethod
    def create(cls, element_type: type, width: int, height: int) -> Image:
        return cls(element_type, create_image_buffer(element_type.format, width, height))

    @classmethod
    def from_pixels(cls, element_type: type, rows: Sequence[Sequence[Any]]) -> Image:
        """Pack rows of colors (converted to ``element_type`` when needed) into a new image."""
        height = len(rows)
        width = len(rows[0]) if rows else 0
        buffer = create_image_buffer(element_type.format, width, height)
        for y, row in enumerate(rows):
            if len(row) != width:
                raise ValueError("All rows must have the same length")
            for x, color in enumerate(row):
                pixel = color if type(color) is element_type else element_type(color)
                offset = buffer.offset_of(x, y)
                buffer.data[offset:offset + buffer.element_bytes] = pixel.to_bytes()
        return cls(element_type, buffer)

    @property
    def format(self) -> str:
        return self.buffer.format

    @property
    def width(self) -> int:
        return self.buffer.width

    @property
    def height(self) -> int:
        return self.buffer.height

    def at(self, x: int, y: int):
        return self.element_type.from_bytes(self.buffer.element(x, y))

    def rows(self) -> List[List[Any]]:
        return [[self.at(x, y) for x in range(self.width)] for y in range(self.height)]

    def __iter__(self) -> Iterator[Any]:
        for y in range(self.height):
            for x in range(self.width):
                yield self.at(x, y)
