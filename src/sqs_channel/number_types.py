"""NumberType — the closed set of standard numeric header types."""

from __future__ import annotations

import numbers
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any

from .primitives.exceptions import UnsupportedNumberTypeError

_INT32 = (-(2**31), 2**31 - 1)
_INT64 = (-(2**63), 2**63 - 1)


class NumberType(str, Enum):
    """Standard number subtypes accepted as message headers.

    The value is the suffix used in ``Number.<subtype>`` attribute data types.
    """

    BYTE = "Byte"
    SHORT = "Short"
    INTEGER = "Integer"
    LONG = "Long"
    BIG_INTEGER = "BigInteger"
    FLOAT = "Float"
    DOUBLE = "Double"
    BIG_DECIMAL = "BigDecimal"

    @property
    def is_integral(self) -> bool:
        return self in _INTEGRAL

    @classmethod
    def of(cls, value: Any, header_name: str | None = None) -> NumberType:
        """Return the subtype of *value* or raise UnsupportedNumberTypeError.

        ``int`` is narrowed by magnitude, ``float`` is a double and
        ``Decimal`` is a big decimal. ``bool`` is not a number here.
        """
        if isinstance(value, bool):
            raise UnsupportedNumberTypeError(value, header_name)
        if type(value) is int:
            if _INT32[0] <= value <= _INT32[1]:
                return cls.INTEGER
            if _INT64[0] <= value <= _INT64[1]:
                return cls.LONG
            return cls.BIG_INTEGER
        if type(value) is float:
            return cls.DOUBLE
        if type(value) is Decimal:
            return cls.BIG_DECIMAL
        raise UnsupportedNumberTypeError(value, header_name)

    @classmethod
    def from_suffix(cls, suffix: str) -> NumberType:
        """Resolve a data type suffix such as ``Integer`` or ``java.lang.Integer``."""
        simple = suffix.rsplit(".", 1)[-1]
        try:
            return cls(simple)
        except ValueError:
            raise ValueError(f"Unknown number type {suffix!r}") from None

    def parse(self, text: str) -> int | float | Decimal:
        """Parse an attribute string value back into a Python number."""
        if self.is_integral:
            return int(text)
        if self is NumberType.BIG_DECIMAL:
            try:
                return Decimal(text)
            except InvalidOperation as e:
                raise ValueError(f"Invalid decimal value {text!r}") from e
        return float(text)


_INTEGRAL = frozenset(
    {
        NumberType.BYTE,
        NumberType.SHORT,
        NumberType.INTEGER,
        NumberType.LONG,
        NumberType.BIG_INTEGER,
    }
)


def is_number(value: Any) -> bool:
    """Return True for numeric-like values (standard or not), excluding bool."""
    return isinstance(value, numbers.Number) and not isinstance(value, bool)
