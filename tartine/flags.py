"""A set of bit flags drawn from an enumeration that has a zero ("none") member."""

from __future__ import annotations

import enum
from typing import Any, Optional

_STORAGE_WIDTHS = (8, 16, 32, 64)


class Flags:
    """Bitwise combination of members of one enumeration.

    The enumeration must have a member whose value is 0, standing for
    "no flag set".
    """

    __hash__ = None  # mutable

    def __init__(self, flag_type: type, value: Any = None) -> None:
        if not (isinstance(flag_type, type) and issubclass(flag_type, enum.Enum)):
            raise TypeError("Flags only works with enumerations")
        members = list(flag_type.__members__.values())
        if not any(member.value == 0 for member in members):
            raise TypeError("The enumeration needs a None value")
        if not all(isinstance(member.value, int) for member in members):
            raise TypeError("Flags needs an enumeration of integer values")
        self.flag_type = flag_type
        if value is None:
            self._value = 0
        elif isinstance(value, int) and not isinstance(value, enum.Enum):
            if value < 0:
                raise ValueError("Flags value must not be negative")
            self._value = value
        else:
            self._value = self._coerce(value)

    def _coerce(self, other: Any) -> int:
        if isinstance(other, Flags):
            if other.flag_type is not self.flag_type:
                raise TypeError("Cannot combine flags of different enumerations")
            return other._value
        if isinstance(other, self.flag_type):
            return int(other.value)
        raise TypeError(f"Expected a member of {self.flag_type.__name__}")

    def has_flag(self, flag: Any) -> bool:
        """Whether any bit of ``flag`` is set."""
        return bool(self._value & self._coerce(flag))

    def set_flag(self, flag: Any) -> "Flags":
        """Set the bits of ``flag`` in place."""
        self._value |= self._coerce(flag)
        return self

    def toggle_flag(self, flag: Any) -> "Flags":
        """Flip the bits of ``flag`` in place."""
        self._value ^= self._coerce(flag)
        return self

    def _default_width(self) -> int:
        highest = max(int(m.value) for m in self.flag_type.__members__.values())
        bits = max(highest.bit_length(), self._value.bit_length(), 1)
        for width in _STORAGE_WIDTHS:
            if bits <= width:
                return width
        return bits

    def bit_string(self, width: Optional[int] = None) -> str:
        """Render the value as binary digits, most significant first."""
        if width is None:
            width = self._default_width()
        if width <= 0:
            raise ValueError("width must be positive")
        return "".join(str((self._value >> i) & 1) for i in reversed(range(width)))

    def _combine(self, other: Any, op) -> "Flags":
        try:
            rhs = self._coerce(other)
        except TypeError:
            return NotImplemented
        return Flags(self.flag_type, op(self._value, rhs))

    def __or__(self, other: Any) -> "Flags":
        return self._combine(other, lambda a, b: a | b)

    def __and__(self, other: Any) -> "Flags":
        return self._combine(other, lambda a, b: a & b)

    def __xor__(self, other: Any) -> "Flags":
        return self._combine(other, lambda a, b: a ^ b)

    __ror__ = __or__
    __rand__ = __and__
    __rxor__ = __xor__

    def __int__(self) -> int:
        return self._value

    def __eq__(self, other: object) -> bool:
        try:
            return self._value == self._coerce(other)
        except TypeError:
            return NotImplemented

    def __repr__(self) -> str:
        return f"Flags({self.flag_type.__name__}, {self._value:#x})"