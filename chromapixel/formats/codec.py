"""
Per-component numeric codec.

A codec maps the stored representation of one channel (an integer or a
float of a given width) to a real number and back. Normalized forms map to
[0, 1] or [-1, 1]; integer forms map to themselves; fixed point forms are
scaled by ``2**frac_bits``; float forms are the identity at their width.
"""
from __future__ import annotations

import math
import warnings
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Optional

import numpy as np
from boundednumbers.functions import clamp

from ..errors import UnsupportedNumericForm
from ..types.color_types import StoredScalar
from ..types.format_type import (
    NumericForm,
    fixed_point_forms,
    float_dtypes,
    normalized_forms,
    signed_forms,
    signed_int_dtypes,
    unsigned_int_dtypes,
)
from ..utils.num_utils import round_half_away


@dataclass(frozen=True)
class ComponentCodec:
    form: NumericForm
    bits: int
    frac_bits: int = 0

    dtype: Optional[np.dtype] = field(init=False, compare=False, repr=False)
    minimum: int = field(init=False, compare=False, repr=False)
    maximum: int = field(init=False, compare=False, repr=False)
    scale: int = field(init=False, compare=False, repr=False)

    def __post_init__(self) -> None:
        form, bits = self.form, self.bits
        if not 1 <= bits <= 64:
            raise UnsupportedNumericForm(f"{form.name} components must be 1..64 bits, got {bits}")

        if form == NumericForm.FLOAT:
            if bits not in float_dtypes:
                raise UnsupportedNumericForm(f"No {bits}-bit floating point representation")
            dtype = float_dtypes[bits]
            info = np.finfo(dtype)
            minimum, maximum, scale = float(info.min), float(info.max), 1
        else:
            signed = form in signed_forms
            if signed:
                minimum, maximum = -(1 << (bits - 1)), (1 << (bits - 1)) - 1
                dtype = signed_int_dtypes.get(bits)
            else:
                minimum, maximum = 0, (1 << bits) - 1
                dtype = unsigned_int_dtypes.get(bits)

            if form == NumericForm.UNSIGNED_NORMALIZED:
                scale = maximum
            elif form == NumericForm.SIGNED_NORMALIZED:
                if bits < 2:
                    raise UnsupportedNumericForm("Signed normalized components need at least 2 bits")
                scale = maximum
            elif form in fixed_point_forms:
                if not 0 <= self.frac_bits <= bits:
                    raise UnsupportedNumericForm(
                        f"Fixed point fraction of {self.frac_bits} bits does not fit in {bits} bits"
                    )
                scale = 1 << self.frac_bits
            else:
                scale = 1

        object.__setattr__(self, "dtype", dtype)
        object.__setattr__(self, "minimum", minimum)
        object.__setattr__(self, "maximum", maximum)
        object.__setattr__(self, "scale", scale)

    # ------------------ PROPERTIES ------------------
    @property
    def is_float(self) -> bool:
        return self.form == NumericForm.FLOAT

    @property
    def is_aligned(self) -> bool:
        """True when the component has a numpy storage type (8/16/32/64 bits)."""
        return self.dtype is not None

    @property
    def zero(self) -> StoredScalar:
        return self._store(0)

    # ------------------ CODEC ------------------
    def decode(self, stored: StoredScalar) -> float:
        """Map a stored value to a real number."""
        if self.form == NumericForm.FLOAT:
            return float(stored)
        value = int(stored) / self.scale
        if self.form == NumericForm.SIGNED_NORMALIZED:
            # -2**(n-1) has no positive counterpart
            return max(value, -1.0)
        return value

    def encode(self, real: float) -> StoredScalar:
        """Map a real number to the stored representation, rounding and clamping."""
        real = float(real)
        if self.form == NumericForm.FLOAT:
            return self._store_float(real)

        if math.isnan(real):
            return self._store(0)

        if self.form == NumericForm.UNSIGNED_NORMALIZED:
            real = clamp(real, 0.0, 1.0) * self.scale
        elif self.form == NumericForm.SIGNED_NORMALIZED:
            real = clamp(real, -1.0, 1.0) * self.scale
        else:
            real = clamp(real * self.scale, float(self.minimum), float(self.maximum))

        return self._store(self._clamp_int(round_half_away(real)))

    def cast(self, stored: StoredScalar, source: ComponentCodec) -> StoredScalar:
        """Re-encode a value stored by ``source`` into this codec."""
        if source == self:
            return stored
        if source.form == self.form and self.form in normalized_forms:
            return self._store(self._rescale(int(stored), source))
        return self.encode(source.decode(stored))

    def _rescale(self, stored: int, source: ComponentCodec) -> int:
        """Exact integer rescale between two normalized widths of the same form."""
        # -2**(n-1) decodes like -(2**(n-1) - 1)
        stored = max(stored, -source.maximum)
        num, den = abs(stored) * self.maximum, source.maximum
        scaled = (2 * num + den) // (2 * den)
        return -scaled if stored < 0 else scaled

    def coerce(self, arg: StoredScalar) -> StoredScalar:
        """Coerce a construction argument given in stored units."""
        if self.form == NumericForm.FLOAT:
            return self._store_float(float(arg))
        if isinstance(arg, (int, np.integer)):
            return self._store(self._clamp_int(int(arg)))
        arg = float(arg)
        if math.isnan(arg):
            return self._store(0)
        arg = clamp(arg, float(self.minimum), float(self.maximum))
        return self._store(self._clamp_int(round_half_away(arg)))

    # ------------------ HELPERS ------------------
    def _clamp_int(self, value: int) -> int:
        return max(self.minimum, min(value, self.maximum))

    def _store(self, value: int) -> StoredScalar:
        if self.dtype is None:
            return int(value)
        return self.dtype.type(value)

    def _store_float(self, real: float) -> StoredScalar:
        with np.errstate(over="ignore"):
            stored = self.dtype.type(real)
        if math.isinf(stored) and math.isfinite(real):
            warnings.warn(
                f"{real!r} overflows a {self.bits}-bit float and was stored as infinity",
                RuntimeWarning,
                stacklevel=3,
            )
        return stored


@lru_cache(maxsize=None)
def get_codec(form: NumericForm, bits: int, frac_bits: int = 0) -> ComponentCodec:
    return ComponentCodec(NumericForm(form), bits, frac_bits)
