"""Chromapixel: pixel formats described by strings, and conversions between them.

Example:
    from chromapixel import RGB8, RGBA16, rgb_type

    color = RGBA16(RGB8(0xFF, 0x80, 0x00))
    bgr565 = rgb_type("bgr_5_6_5")

For raw image memory whose format is only known at runtime:

    from chromapixel import RGBA8, build_conversion

    conversion = build_conversion("bgra_8_8_8_8_sRGB", RGBA8)
    pixel = conversion(raw_bytes, offset)

For debug logging, enable with:

    import logging
    logging.getLogger("chromapixel").setLevel(logging.DEBUG)
    logging.basicConfig(level=logging.DEBUG)
"""
import logging

# Package logger - disabled by default, enable with logging.getLogger("chromapixel").setLevel(logging.DEBUG)
logger = logging.getLogger("chromapixel")
logger.addHandler(logging.NullHandler())

from .config import Config, DEFAULT_CONFIG
from .errors import (
    ChromaPixelError,
    ParseError,
    UnsupportedFormat,
    UnsupportedNumericForm,
    UnsupportedFormatFamily,
    UnknownColorSpace,
    UnknownGamma,
)
from .types.format_type import NumericForm, ComponentKind
from .formats import (
    ComponentCodec,
    Component,
    FormatFlags,
    PixelFormatDescriptor,
    parse_rgb_format,
    canonical_format,
    make_format_string,
)
from .colorspace import (
    ColorSpace,
    resolve_color_space,
    register_color_space,
    resolve_gamma,
    register_gamma,
)
from .colors import (
    ColorBase,
    RGBBase,
    rgb_type,
    is_rgb,
    RGB8,
    RGBA8,
    BGR8,
    BGRA8,
    L8,
    LA8,
    RGB16,
    RGBA16,
    RGBF32,
    RGBAF32,
    LinearRGBAF32,
    XYZ,
    xyY,
)
from .colors.rgb import register_rgb
from .colors.xyz import register_xyz

register_rgb()
register_xyz()

from .conversions import convert_color, resolve_transform, build_conversion, DynamicConversion, PlanKind
from .image import ImageBuffer, Image, create_image_buffer, register_image_format_family, get_format_family
from .image.transform import crop, strip_metadata, map_image, convert_image

__version__ = "0.1.0"

__all__ = [
    "Config",
    "DEFAULT_CONFIG",
    "ChromaPixelError",
    "ParseError",
    "UnsupportedFormat",
    "UnsupportedNumericForm",
    "UnsupportedFormatFamily",
    "UnknownColorSpace",
    "UnknownGamma",
    "NumericForm",
    "ComponentKind",
    "ComponentCodec",
    "Component",
    "FormatFlags",
    "PixelFormatDescriptor",
    "parse_rgb_format",
    "canonical_format",
    "make_format_string",
    "ColorSpace",
    "resolve_color_space",
    "register_color_space",
    "resolve_gamma",
    "register_gamma",
    "ColorBase",
    "RGBBase",
    "rgb_type",
    "is_rgb",
    "RGB8",
    "RGBA8",
    "BGR8",
    "BGRA8",
    "L8",
    "LA8",
    "RGB16",
    "RGBA16",
    "RGBF32",
    "RGBAF32",
    "LinearRGBAF32",
    "XYZ",
    "xyY",
    "convert_color",
    "resolve_transform",
    "build_conversion",
    "DynamicConversion",
    "PlanKind",
    "ImageBuffer",
    "Image",
    "create_image_buffer",
    "register_image_format_family",
    "get_format_family",
    "crop",
    "strip_metadata",
    "map_image",
    "convert_image",
    "__version__",
]
