"""
Gamma (transfer) curves.

A gamma expression is either ``"1"`` (linear), a positive number used as a
plain power exponent (``"2.2"``), or the name of a registered curve
(``"sRGB"``, ``"Rec709"``, ``"Rec2020"``). Curves are mirrored around zero so
signed formats keep their sign, and NaN/infinity pass through untouched.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from functools import lru_cache
from typing import Callable, Dict, Tuple

from ..errors import UnknownGamma

GammaFunc = Callable[[float], float]

LINEAR = "1"


@dataclass(frozen=True)
class GammaFuncPair:
    expression: str
    to_linear: GammaFunc
    to_gamma: GammaFunc

    @property
    def is_identity(self) -> bool:
        return self.expression == LINEAR


def _mirrored(fn: GammaFunc) -> GammaFunc:
    def mirrored(x: float) -> float:
        if x < 0.0:
            return -fn(-x)
        return fn(x)
    return mirrored


def _identity(x: float) -> float:
    return x


## sRGB (IEC 61966-2-1)

def srgb_to_linear(v: float) -> float:
    if v <= 0.04045:
        return v / 12.92
    return ((v + 0.055) / 1.055) ** 2.4


def linear_to_srgb(l: float) -> float:
    if l <= 0.0031308:
        return l * 12.92
    return 1.055 * l ** (1 / 2.4) - 0.055


## ITU-R BT.709 / BT.2020 OETF

_REC709_ALPHA = 1.09929682680944
_REC709_BETA = 0.018053968510807


def rec709_to_linear(v: float) -> float:
    if v < 4.5 * _REC709_BETA:
        return v / 4.5
    return ((v + (_REC709_ALPHA - 1)) / _REC709_ALPHA) ** (1 / 0.45)


def linear_to_rec709(l: float) -> float:
    if l < _REC709_BETA:
        return 4.5 * l
    return _REC709_ALPHA * l ** 0.45 - (_REC709_ALPHA - 1)


_NAMED_CURVES: Dict[str, Tuple[GammaFunc, GammaFunc]] = {
    "sRGB": (srgb_to_linear, linear_to_srgb),
    "Rec709": (rec709_to_linear, linear_to_rec709),
    "Rec2020": (rec709_to_linear, linear_to_rec709),
}


def _is_number(text: str) -> bool:
    try:
        float(text)
    except ValueError:
        return False
    return True


def register_gamma(name: str, to_linear: GammaFunc, to_gamma: GammaFunc) -> None:
    """
    Register a named curve. Both functions receive non-negative inputs.

    Names are permanent: resolved curves are captured by color spaces and
    conversion plans, so an existing name cannot be registered again.

    Raises:
        ValueError: If the name is taken or reads as a numeric exponent.
    """
    if name in _NAMED_CURVES or name == LINEAR:
        raise ValueError(f"Gamma curve {name!r} is already registered")
    if _is_number(name):
        raise ValueError(f"Gamma curve names cannot be numbers: {name!r}")
    _NAMED_CURVES[name] = (to_linear, to_gamma)


def _power_pair(expression: str) -> Tuple[GammaFunc, GammaFunc]:
    try:
        exponent = float(expression)
    except ValueError:
        raise UnknownGamma(expression) from None
    if not math.isfinite(exponent) or exponent <= 0.0:
        raise UnknownGamma(expression)
    inverse = 1.0 / exponent
    return (lambda v: v ** exponent), (lambda l: l ** inverse)


@lru_cache(maxsize=None)
def resolve_gamma(expression: str) -> GammaFuncPair:
    """
    Resolve a gamma expression into a function pair.

    Raises:
        UnknownGamma: If the expression is neither a number nor a registered curve.
    """
    if expression == LINEAR:
        return GammaFuncPair(LINEAR, _identity, _identity)

    if expression in _NAMED_CURVES:
        to_linear, to_gamma = _NAMED_CURVES[expression]
    else:
        to_linear, to_gamma = _power_pair(expression)
        if float(expression) == 1.0:
            return GammaFuncPair(LINEAR, _identity, _identity)

    return GammaFuncPair(expression, _mirrored(to_linear), _mirrored(to_gamma))
