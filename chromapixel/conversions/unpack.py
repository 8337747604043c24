"""
Decode raw pixel bytes of a runtime format into real RGBA values.

Operable formats are read with ``numpy.frombuffer``. Bit-packed formats are
read as one little-endian integer per pixel block with the components packed
from the least significant bit upwards in declaration order; this is the
only access bit-packed formats have.
"""
from __future__ import annotations

from typing import Callable, List, Tuple, Union

import numpy as np

from ..errors import UnsupportedFormat
from ..formats.codec import ComponentCodec
from ..formats.descriptor import PixelFormatDescriptor
from ..types.color_types import TristimulusAlpha
from ..types.format_type import ComponentKind, NumericForm, float_dtypes, signed_forms, unsigned_int_dtypes

RawPixel = Union[bytes, bytearray, memoryview]
Unpacker = Callable[[RawPixel], TristimulusAlpha]


def _field_reader(codec: ComponentCodec, signed: bool) -> Callable[[int], float]:
    bits = codec.bits
    if codec.form == NumericForm.FLOAT:
        int_dtype = unsigned_int_dtypes[bits]
        float_dtype = float_dtypes[bits]
        return lambda field: float(np.array(field, dtype=int_dtype).view(float_dtype))
    if signed:
        sign_bit = 1 << (bits - 1)
        return lambda field: codec.decode((field ^ sign_bit) - sign_bit)
    return codec.decode


def _to_rgba(desc: PixelFormatDescriptor, decoded: List[float]) -> TristimulusAlpha:
    channels = {c.kind: v for c, v in zip(desc.components, decoded)}
    if ComponentKind.L in channels:
        l = channels[ComponentKind.L]
        return (l, l, l, channels.get(ComponentKind.A, 0.0))
    return (
        channels.get(ComponentKind.R, 0.0),
        channels.get(ComponentKind.G, 0.0),
        channels.get(ComponentKind.B, 0.0),
        channels.get(ComponentKind.A, 0.0),
    )


def make_rgb_unpacker(desc: PixelFormatDescriptor) -> Unpacker:
    """
    Resolve a per-pixel unpack function for a descriptor.

    Raises:
        UnsupportedFormat: For shared exponent formats or blocks that are not whole bytes.
        UnsupportedNumericForm: For components with no codec (e.g. 11-bit floats).
    """
    if desc.has_shared_exponent:
        raise UnsupportedFormat(f"Shared exponent format {desc} has no color decoding")
    if desc.bits % 8:
        raise UnsupportedFormat(f"Pixel blocks of {desc.bits} bits are not byte addressable")

    codecs = [c.codec for c in desc.components]

    if desc.is_operable:
        codec = codecs[0]
        dtype = codec.dtype.newbyteorder("<")
        count = len(codecs)

        def unpack(raw: RawPixel) -> TristimulusAlpha:
            values = np.frombuffer(raw, dtype=dtype, count=count)
            return _to_rgba(desc, [codec.decode(v) for v in values])

        return unpack

    fields: List[Tuple[int, int, Callable[[int], float]]] = []
    shift = 0
    for comp, codec in zip(desc.components, codecs):
        fields.append((shift, (1 << comp.bits) - 1, _field_reader(codec, comp.form in signed_forms)))
        shift += comp.bits
    nbytes = desc.bits // 8

    def unpack_packed(raw: RawPixel) -> TristimulusAlpha:
        word = int.from_bytes(bytes(raw[:nbytes]), "little")
        return _to_rgba(desc, [read((word >> s) & mask) for s, mask, read in fields])

    return unpack_packed


def unpack_rgb_color(raw: RawPixel, desc: PixelFormatDescriptor) -> TristimulusAlpha:
    """Decode one pixel of ``desc`` into (R, G, B, A) reals."""
    return make_rgb_unpacker(desc)(raw)
