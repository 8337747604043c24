"""Image buffers and the image format family registry."""

from .format import ImageGeometry, register_image_format_family, get_format_family, get_image_params, registered_families
from .buffer import ImageBuffer, Image, create_image_buffer

__all__ = [
    "ImageGeometry",
    "register_image_format_family",
    "get_format_family",
    "get_image_params",
    "registered_families",
    "ImageBuffer",
    "Image",
    "create_image_buffer",
]
