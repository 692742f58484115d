"""
Integer capability layer.

Every operation in :mod:`modarith.operations` is written once against the
:class:`IntegerType` interface below.  A concrete integer type only has to
describe its range and its widened domain; the checked arithmetic, the
remainder and the widen/narrow round trip come from the base class.

The widened domain of a type is wide enough that the sum, difference and
product of any two in-range operands are representable in it.  Overflow is
therefore ruled out by construction, and :meth:`IntegerType.check` turns a
violation of that rule into :class:`ArithmeticOverflowError` instead of a
silently wrong result.

Example:
    >>> I8.mul(-128, -128)
    16384
    >>> I8.narrow(200)
    Traceback (most recent call last):
        ...
    modarith.exceptions.ArithmeticOverflowError: Overflow in i8: 200
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from functools import cached_property

from modarith import config
from modarith.exceptions import ArithmeticOverflowError, InvalidInputError

_NAME_PATTERN = re.compile(r"^([iu])(\d+)$")


class IntegerType(ABC):
    """Capability set an integer type must provide to take part in modular arithmetic."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Short lower-case name, e.g. ``"i32"``."""

    @property
    @abstractmethod
    def min_value(self) -> int | None:
        """Smallest representable value, or None when unbounded."""

    @property
    @abstractmethod
    def max_value(self) -> int | None:
        """Largest representable value, or None when unbounded."""

    @property
    @abstractmethod
    def wide(self) -> IntegerType:
        """Domain holding any sum, difference or product of two in-range values."""

    def contains(self, value: int) -> bool:
        """Whether value is representable in this type."""
        if self.min_value is not None and value < self.min_value:
            return False
        return self.max_value is None or value <= self.max_value

    def check(self, value: int) -> int:
        """
        Return value unchanged if it fits this type.

        Raises:
            ArithmeticOverflowError: If value is outside the type's range
        """
        if not self.contains(value):
            raise ArithmeticOverflowError(self.name, value)
        return value

    def widen(self, value: int) -> int:
        """Move an operand into the widened domain."""
        return self.wide.check(self.check(value))

    def narrow(self, value: int) -> int:
        """Move a widened value back into this type."""
        return self.check(value)

    # Arithmetic inside this type's own range

    def checked_add(self, a: int, b: int) -> int:
        return self.check(a + b)

    def checked_sub(self, a: int, b: int) -> int:
        return self.check(a - b)

    def checked_mul(self, a: int, b: int) -> int:
        return self.check(a * b)

    # Arithmetic on operands of this type, evaluated in the widened domain

    def add(self, a: int, b: int) -> int:
        return self.wide.checked_add(self.widen(a), self.widen(b))

    def sub(self, a: int, b: int) -> int:
        return self.wide.checked_sub(self.widen(a), self.widen(b))

    def mul(self, a: int, b: int) -> int:
        return self.wide.checked_mul(self.widen(a), self.widen(b))

    @staticmethod
    def rem(a: int, b: int) -> int:
        """Truncated remainder: the sign follows the dividend, as on machine integers."""
        r = abs(a) % abs(b)
        return -r if a < 0 else r

    @staticmethod
    def quotient(a: int, b: int) -> int:
        """Truncated division: rounds toward zero."""
        q = abs(a) // abs(b)
        return -q if (a < 0) != (b < 0) else q

    @staticmethod
    def is_negative(value: int) -> bool:
        return value < 0

    @staticmethod
    def compare(a: int, b: int) -> int:
        """Return -1, 0 or 1 as a is less than, equal to or greater than b."""
        return (a > b) - (a < b)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class FixedWidthInteger(IntegerType):
    """
    Two's-complement (signed) or plain binary (unsigned) integer of a fixed width.

    The widened domain is signed with twice the width.  Unsigned types get one
    extra guard bit so that both the full product and negative differences
    stay representable.
    """

    bits: int
    signed: bool = True

    def __post_init__(self) -> None:
        if isinstance(self.bits, bool) or not isinstance(self.bits, int) or self.bits <= 0:
            raise InvalidInputError(self.bits, "Bit width must be a positive integer")

    @property
    def name(self) -> str:
        return f"{'i' if self.signed else 'u'}{self.bits}"

    @property
    def min_value(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max_value(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    @cached_property
    def wide(self) -> FixedWidthInteger:
        return FixedWidthInteger(2 * self.bits + (0 if self.signed else 1), signed=True)


@dataclass(frozen=True)
class ArbitraryPrecisionInteger(IntegerType):
    """Unbounded integers; serves as its own widened domain."""

    @property
    def name(self) -> str:
        return "bigint"

    @property
    def min_value(self) -> None:
        return None

    @property
    def max_value(self) -> None:
        return None

    @property
    def wide(self) -> ArbitraryPrecisionInteger:
        return self


I8 = FixedWidthInteger(8, signed=True)
I16 = FixedWidthInteger(16, signed=True)
I32 = FixedWidthInteger(32, signed=True)
I64 = FixedWidthInteger(64, signed=True)
I128 = FixedWidthInteger(128, signed=True)
U8 = FixedWidthInteger(8, signed=False)
U16 = FixedWidthInteger(16, signed=False)
U32 = FixedWidthInteger(32, signed=False)
U64 = FixedWidthInteger(64, signed=False)
U128 = FixedWidthInteger(128, signed=False)
BIGINT = ArbitraryPrecisionInteger()

INTEGER_TYPES: dict[str, IntegerType] = {
    kind.name: kind
    for kind in (
        *(FixedWidthInteger(bits, signed=True) for bits in config.STANDARD_WIDTHS),
        *(FixedWidthInteger(bits, signed=False) for bits in config.STANDARD_WIDTHS),
        BIGINT,
    )
}


def resolve_integer_type(kind: IntegerType | str | None = None) -> IntegerType:
    """
    Turn an integer type or its name into an IntegerType.

    Names are case-insensitive: the standard catalogue (``"i8"`` .. ``"u128"``),
    ``"bigint"``, or any other ``i<bits>`` / ``u<bits>`` width.

    Args:
        kind: An IntegerType, a type name, or None for the configured default

    Returns:
        The resolved IntegerType

    Raises:
        InvalidInputError: If the name is not recognised
    """
    if kind is None:
        kind = config.DEFAULT_INTEGER_TYPE

    if isinstance(kind, IntegerType):
        return kind

    if not isinstance(kind, str):
        raise InvalidInputError(kind, f"Expected integer type, got {type(kind).__name__}")

    key = kind.strip().lower()
    if key in INTEGER_TYPES:
        return INTEGER_TYPES[key]

    match = _NAME_PATTERN.match(key)
    if match and int(match.group(2)) > 0:
        return FixedWidthInteger(int(match.group(2)), signed=match.group(1) == "i")

    raise InvalidInputError(kind, "Unknown integer type")
