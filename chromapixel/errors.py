"""Exception types raised by chromapixel."""
from __future__ import annotations


class ChromaPixelError(Exception):
    """Base exception for chromapixel errors."""

    pass


class ParseError(ChromaPixelError, ValueError):
    """A pixel format string could not be parsed."""

    def __init__(self, format_string: str, reason: str) -> None:
        super().__init__(f"Invalid pixel format {format_string!r}: {reason}")
        self.format_string = format_string
        self.reason = reason


class UnsupportedFormat(ChromaPixelError):
    """The pixel format cannot be constructed or converted (bit-packed, shared exponent, ...)."""

    pass


class UnsupportedNumericForm(ChromaPixelError):
    """A component numeric form/width combination has no codec."""

    pass


class UnsupportedFormatFamily(ChromaPixelError):
    """The dynamic engine has no unpack strategy for a format family."""

    def __init__(self, format_string: str, family: str | None = None) -> None:
        if family is None:
            message = f"No format family recognises {format_string!r}"
        else:
            message = f"Format family {family!r} is not supported (format {format_string!r})"
        super().__init__(message)
        self.format_string = format_string
        self.family = family


class UnknownColorSpace(ChromaPixelError, KeyError):
    """Color space lookup miss."""

    def __init__(self, identifier: str) -> None:
        super().__init__(identifier)
        self.identifier = identifier

    def __str__(self) -> str:
        return f"Unknown color space: {self.identifier!r}"


class UnknownGamma(ChromaPixelError, KeyError):
    """Gamma expression lookup miss."""

    def __init__(self, expression: str) -> None:
        super().__init__(expression)
        self.expression = expression

    def __str__(self) -> str:
        return f"Unknown gamma expression: {self.expression!r}"
