"""Image format family registry."""
from __future__ import annotations

import logging
from typing import Callable, Dict, NamedTuple, Optional

logger = logging.getLogger(__name__)


class ImageGeometry(NamedTuple):
    bits_per_block: int
    row_pitch: int
    block_width: int = 1
    block_height: int = 1


GetImageParams = Callable[[str, int, int], Optional[ImageGeometry]]
RecognizeFormat = Callable[[str], bool]


class _Family(NamedTuple):
    get_image_params: GetImageParams
    recognizes: RecognizeFormat


_families: Dict[str, _Family] = {}


def register_image_format_family(family: str, get_image_params: GetImageParams,
                                 recognizes: RecognizeFormat) -> None:
    """
    Register a pixel format family.

    Args:
        family: Family key, e.g. ``"rgb"``.
        get_image_params: ``(format, width, height) -> ImageGeometry``, or
            ``None`` if the format string is invalid for this family.
        recognizes: Cheap syntactic test deciding whether a format string
            belongs to this family at all.
    """
    _families[family] = _Family(get_image_params, recognizes)
    logger.debug(f"Registered image format family {family!r}")


def registered_families() -> tuple:
    return tuple(_families)


def get_format_family(format_string: str) -> Optional[str]:
    """Return the family a format string belongs to, or None."""
    for name, family in _families.items():
        if family.recognizes(format_string):
            return name
    return None


def get_image_params(format_string: str, width: int, height: int) -> Optional[ImageGeometry]:
    family = get_format_family(format_string)
    if family is None:
        return None
    return _families[family].get_image_params(format_string, width, height)
