from __future__ import annotations
from typing import Any, ClassVar, Tuple, Union

from ..types.color_types import StoredScalar


class ColorBase:
    """
    Immutable color value.

    Subclasses store their components in ``_value`` during ``__init__`` and
    call ``_freeze``; after that any attribute assignment raises.
    """
    __slots__ = ('_value', '_is_frozen')  # prevents adding new attributes → immutability

    mode: ClassVar[str]
    format: ClassVar[str]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __delattr__(self, name):
        raise AttributeError(f"{self.__class__.__name__} is immutable; cannot delete {name}")

    def _freeze(self) -> None:
        super().__setattr__('_is_frozen', True)

    @classmethod
    def _from_stored(cls, values: Tuple[StoredScalar, ...]):
        """Build an instance from already encoded component values."""
        obj = cls.__new__(cls)
        obj._value = tuple(values)
        obj._freeze()
        return obj

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> Tuple[StoredScalar, ...]:
        return self._value

    @property
    def has_alpha(self) -> bool:
        return False

    # ------------------ CONVERSION ------------------
    def convert(self, target: Union[type, str]) -> ColorBase:
        """
        Convert this color to another color type.

        Args:
            target: A color class (RGB format class, XYZ, xyY) or an RGB
                format string.

        Returns:
            New color instance of the target type.
        """
        from ..conversions.wrapper import convert_color
        return convert_color(self, target)

    # ------------------ VALUE SEMANTICS ------------------
    def _key(self) -> Any:
        return (self.format, self._value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorBase):
            return NotImplemented
        return self.mode == other.mode and self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        values = ", ".join(repr(v.item() if hasattr(v, "item") else v) for v in self._value)
        return f"{self.__class__.__name__}({values})"

    def __iter__(self):
        return iter(self._value)

    def __len__(self) -> int:
        return len(self._value)
