"""
Image transformations.

None of these copy pixel data. ``crop`` re-slices the underlying memoryview;
``map_image`` and ``convert_image`` return lazy views read pixel by pixel.
"""
from __future__ import annotations

from dataclasses import replace
from typing import Any, Callable, Iterator, List, Union

from ..colors.rgb import rgb_type
from ..conversions.dynamic import DynamicConversion, build_conversion
from ..conversions.wrapper import convert_color
from .buffer import Image, ImageBuffer

AnyImage = Union[Image, ImageBuffer]


def crop(image: AnyImage, left: int, right: int, top: int, bottom: int) -> AnyImage:
    """
    Return a view of the pixels in ``[left, right) x [top, bottom)``.

    Bounds must fall on block boundaries and blocks must be whole bytes.
    The result shares memory with ``image``.
    """
    if isinstance(image, Image):
        return Image(image.element_type, crop(image.buffer, left, right, top, bottom))
    if not isinstance(image, ImageBuffer):
        raise TypeError(f"Expected an image buffer, got {type(image).__name__}")

    if (left % image.block_width or right % image.block_width or
            top % image.block_height or bottom % image.block_height):
        raise ValueError("Crop bounds must be aligned to the image block size")
    if image.bits_per_block % 8:
        raise ValueError("Cannot crop images whose blocks are not whole bytes")
    if not (0 <= left <= right <= image.width and 0 <= top <= bottom <= image.height):
        raise ValueError(
            f"Crop ({left}, {right}, {top}, {bottom}) outside {image.width}x{image.height} image"
        )

    row = top // image.block_height
    col = left // image.block_width
    offset = row * image.row_pitch + col * image.bits_per_block // 8
    return replace(image, data=image.data[offset:], width=right - left, height=bottom - top)


def strip_metadata(image: AnyImage) -> AnyImage:
    """Strip all metadata from an image buffer."""
    if isinstance(image, Image):
        return Image(image.element_type, strip_metadata(image.buffer))
    if not isinstance(image, ImageBuffer):
        raise TypeError(f"Expected an image buffer, got {type(image).__name__}")
    return replace(image, metadata=None)


class _ImageView:
    width: int
    height: int

    def at(self, x: int, y: int) -> Any:
        raise NotImplementedError

    def rows(self) -> List[List[Any]]:
        return [[self.at(x, y) for x in range(self.width)] for y in range(self.height)]

    def __iter__(self) -> Iterator[Any]:
        for y in range(self.height):
            for x in range(self.width):
                yield self.at(x, y)


class MappedImage(_ImageView):
    """Map image elements lazily."""

    def __init__(self, image: Any, map_func: Callable[[Any], Any]) -> None:
        self.image = image
        self.map_func = map_func

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height

    def at(self, x: int, y: int) -> Any:
        return self.map_func(self.image.at(x, y))


class ConvertedImage(_ImageView):
    """A raw buffer read through one dynamic conversion."""

    def __init__(self, image: ImageBuffer, conversion: DynamicConversion) -> None:
        self.image = image
        self.conversion = conversion

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height

    def at(self, x: int, y: int) -> Any:
        return self.conversion(self.image.data, self.image.offset_of(x, y))


def map_image(image: Any, map_func: Callable[[Any], Any]) -> MappedImage:
    return MappedImage(image, map_func)


def convert_image(image: AnyImage, target: Union[type, str]) -> _ImageView:
    """
    Convert image format.

    Typed images convert each element with the static engine. Raw buffers
    resolve one dynamic conversion for the whole image up front.
    """
    if isinstance(target, str):
        target = rgb_type(target)
    if isinstance(image, Image):
        return map_image(image, lambda color: convert_color(color, target))
    if not isinstance(image, ImageBuffer):
        raise TypeError(f"Expected an image buffer, got {type(image).__name__}")
    return ConvertedImage(image, build_conversion(image.format, target))
