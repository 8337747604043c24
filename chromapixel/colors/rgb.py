"""
Generic RGB color type.

Every RGB pixel format gets its own ``RGBBase`` subclass. The class carries
the parsed format descriptor and resolved color space; instances carry the
stored component values in the format's physical order.

>>> from chromapixel.colors.rgb import BGRA8, rgb_type
>>> pixel = BGRA8(255, 128, 10, 80)
>>> pixel.value == (10, 128, 255, 80)
True
>>> pixel.tristimulus_with_alpha == (255, 128, 10, 80)
True
>>> FloatRGBA = rgb_type("rgba_f32_f32_f32_f32")
>>> float(pixel.convert(FloatRGBA).r)
1.0
"""
from __future__ import annotations

import logging
from typing import ClassVar, Dict, Optional, Tuple, Union

import numpy as np

from ..colorspace.registry import ColorSpace, resolve_color_space
from ..errors import UnsupportedFormat
from ..formats.codec import ComponentCodec
from ..formats.descriptor import PixelFormatDescriptor, make_format_string
from ..formats.parser import parse_rgb_format
from ..types.color_types import Scalar, StoredScalar, TristimulusAlpha
from ..types.format_type import ComponentKind
from .color_base import ColorBase

logger = logging.getLogger(__name__)

_rgb_classes: Dict[str, type] = {}


class RGBBase(ColorBase):
    __slots__ = ()

    mode: ClassVar[str] = "rgb"
    format: ClassVar[str]
    descriptor: ClassVar[PixelFormatDescriptor]
    color_space: ClassVar[ColorSpace]
    is_operable: ClassVar[bool]
    codec: ClassVar[Optional[ComponentCodec]]

    def __init_subclass__(cls, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        fmt = cls.__dict__.get("format")
        if fmt is None:
            return

        desc = parse_rgb_format(fmt)
        cls.descriptor = desc
        cls.color_space = resolve_color_space(desc.color_space)
        cls.is_operable = desc.is_operable
        # operable formats share one codec for every component
        cls.codec = desc.components[0].codec if desc.is_operable else None
        _rgb_classes.setdefault(make_format_string(desc), cls)

    def __init__(self, *args: Union[Scalar, ColorBase, tuple, list]) -> None:
        cls = type(self)
        if not cls.is_operable:
            raise UnsupportedFormat(
                f"{cls.format!r} is bit-packed; its components cannot be constructed directly"
            )

        if len(args) == 1 and isinstance(args[0], ColorBase):
            value = args[0].convert(cls)._value
        else:
            if len(args) == 1 and isinstance(args[0], (tuple, list)):
                args = tuple(args[0])
            codec = cls.codec
            if len(args) in (3, 4):
                value = cls._assemble(*(codec.coerce(a) for a in args))
            elif len(args) in (1, 2):
                value = cls._assemble_luminance(*(codec.coerce(a) for a in args))
            else:
                raise TypeError(
                    f"{cls.__name__} expects (r, g, b[, a]) or (l[, a]), got {len(args)} values"
                )

        self._value = value
        self._freeze()

    # ------------------ CONSTRUCTION HELPERS ------------------
    @classmethod
    def _assemble(cls, r: StoredScalar, g: StoredScalar, b: StoredScalar,
                  a: Optional[StoredScalar] = None) -> Tuple[StoredScalar, ...]:
        codec = cls.codec
        if a is None:
            a = codec.zero
        stored = {ComponentKind.R: r, ComponentKind.G: g, ComponentKind.B: b, ComponentKind.A: a}
        if cls.descriptor.has_component(ComponentKind.L):
            luminance = cls.color_space.to_monochrome(codec.decode(r), codec.decode(g), codec.decode(b))
            stored[ComponentKind.L] = codec.encode(luminance)
        return tuple(stored.get(c.kind, codec.zero) for c in cls.descriptor.components)

    @classmethod
    def _assemble_luminance(cls, l: StoredScalar, a: Optional[StoredScalar] = None) -> Tuple[StoredScalar, ...]:
        codec = cls.codec
        if a is None:
            a = codec.zero
        stored = {
            ComponentKind.L: l,
            ComponentKind.R: l,
            ComponentKind.G: l,
            ComponentKind.B: l,
            ComponentKind.A: a,
        }
        return tuple(stored.get(c.kind, codec.zero) for c in cls.descriptor.components)

    @classmethod
    def from_unpacked(cls, r: float, g: float, b: float, a: float = 0.0) -> RGBBase:
        """Build a color from real (decoded) channel values."""
        if not cls.is_operable:
            raise UnsupportedFormat(f"Cannot encode into bit-packed format {cls.format!r}")
        codec = cls.codec
        return cls._from_stored(cls._assemble(codec.encode(r), codec.encode(g), codec.encode(b), codec.encode(a)))

    @classmethod
    def from_bytes(cls, data: Union[bytes, bytearray, memoryview]) -> RGBBase:
        """Read one little-endian pixel."""
        if not cls.is_operable:
            raise UnsupportedFormat(
                f"{cls.format!r} is bit-packed; use unpack_rgb_color for decode-only access"
            )
        dtype = cls.codec.dtype.newbyteorder("<")
        count = len(cls.descriptor.components)
        raw = np.frombuffer(data, dtype=dtype, count=count)
        return cls._from_stored(tuple(cls.codec.dtype.type(v) for v in raw))

    def to_bytes(self) -> bytes:
        """Pack this pixel little-endian."""
        dtype = self.codec.dtype.newbyteorder("<")
        return np.array(self._value, dtype=dtype).tobytes()

    # ------------------ COMPONENT ACCESS ------------------
    def component(self, kind: Union[ComponentKind, str]) -> StoredScalar:
        """Stored value of a channel, or the zero value if the format lacks it."""
        index = self.descriptor.index_of(ComponentKind(kind))
        if index is None:
            return self.codec.zero
        return self._value[index]

    @property
    def r(self) -> StoredScalar:
        return self.component(ComponentKind.R)

    @property
    def g(self) -> StoredScalar:
        return self.component(ComponentKind.G)

    @property
    def b(self) -> StoredScalar:
        return self.component(ComponentKind.B)

    @property
    def a(self) -> StoredScalar:
        return self.component(ComponentKind.A)

    @property
    def l(self) -> StoredScalar:
        return self.component(ComponentKind.L)

    @property
    def e(self) -> StoredScalar:
        return self.component(ComponentKind.E)

    @property
    def m(self) -> StoredScalar:
        return self.component(ComponentKind.M)

    @property
    def has_alpha(self) -> bool:
        return self.descriptor.has_component(ComponentKind.A)

    @property
    def tristimulus(self) -> Tuple[StoredScalar, StoredScalar, StoredScalar]:
        """
        Return the RGB tristimulus values as a tuple.
        These will always be ordered (R, G, B).
        Any color channels not present will be 0.
        """
        if self.descriptor.has_component(ComponentKind.L):
            l = self.l
            return (l, l, l)
        return (self.r, self.g, self.b)

    @property
    def tristimulus_with_alpha(self) -> Tuple[StoredScalar, StoredScalar, StoredScalar, StoredScalar]:
        """
        Return the RGB tristimulus values + alpha as a tuple.
        These will always be ordered (R, G, B, A).
        """
        return self.tristimulus + (self.a,)

    def unpack(self) -> TristimulusAlpha:
        """Decoded (R, G, B, A) reals."""
        decode = self.codec.decode
        r, g, b, a = self.tristimulus_with_alpha
        return (decode(r), decode(g), decode(b), decode(a))

    def _key(self):
        return (self.descriptor, self._value)


def rgb_type(format_string: str) -> type:
    """
    Return the color class for an RGB format string.

    Classes are memoised by canonical format, so ``rgb_type("rgba")`` and
    ``rgb_type("rgba_8_8_8_8_sRGB")`` are the same class.
    """
    desc = parse_rgb_format(format_string)
    canonical = make_format_string(desc)
    cls = _rgb_classes.get(canonical)
    if cls is None:
        cls = type(f"RGB[{format_string}]", (RGBBase,), {"format": format_string, "__slots__": ()})
        logger.debug(f"Created RGB type for {canonical!r}")
    return cls


def is_rgb(cls: type) -> bool:
    """Determine if ``cls`` is an RGB color type."""
    return isinstance(cls, type) and issubclass(cls, RGBBase) and "descriptor" in cls.__dict__


def format_string_of(cls: type) -> str:
    """Get the canonical format string for an RGB type."""
    return make_format_string(cls.descriptor)


class RGB8(RGBBase):
    format: ClassVar[str] = "rgb"


class RGBA8(RGBBase):
    format: ClassVar[str] = "rgba"


class BGR8(RGBBase):
    format: ClassVar[str] = "bgr"


class BGRA8(RGBBase):
    format: ClassVar[str] = "bgra"


class L8(RGBBase):
    format: ClassVar[str] = "l"


class LA8(RGBBase):
    format: ClassVar[str] = "la"


class RGB16(RGBBase):
    format: ClassVar[str] = "rgb_16_16_16"


class RGBA16(RGBBase):
    format: ClassVar[str] = "rgba_16_16_16_16"


class RGBF32(RGBBase):
    format: ClassVar[str] = "rgb_f32_f32_f32"


class RGBAF32(RGBBase):
    format: ClassVar[str] = "rgba_f32_f32_f32_f32"


class LinearRGBAF32(RGBBase):
    format: ClassVar[str] = "rgba_f32_f32_f32_f32_sRGB^1"


def register_rgb() -> None:
    """Register the "rgb" image format family."""
    from ..image.format import ImageGeometry, register_image_format_family
    from ..formats.parser import is_rgb_format

    def get_image_params(format_string: str, width: int, height: int) -> Optional[ImageGeometry]:
        if not is_rgb_format(format_string):
            return None
        bits = parse_rgb_format(format_string).bits
        return ImageGeometry(bits_per_block=bits, row_pitch=(width * bits + 7) // 8)

    register_image_format_family("rgb", get_image_params, _looks_like_rgb)


def _looks_like_rgb(format_string: str) -> bool:
    layout = format_string.split("_", 1)[0]
    return bool(layout) and all(c in "rgbalemx" for c in layout)
