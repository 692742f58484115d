"""Residue class providing operator-based modular arithmetic."""

from __future__ import annotations

from dataclasses import FrozenInstanceError
from typing import TYPE_CHECKING, Any

from modarith.exceptions import IncompatibleModulusError
from modarith.integers import IntegerType, resolve_integer_type
from modarith.operations import mod_add, mod_div, mod_inv, mod_mul, mod_pow, mod_sub, reduce
from modarith.validators import validate_integer, validate_modulus

if TYPE_CHECKING:
    from collections.abc import Callable


class Residue:
    """
    An immutable element of the integers modulo some modulus.

    The stored value is always canonical, in [0, modulus).  Arithmetic with
    another Residue requires the same modulus and integer type; plain ints
    are treated as values of this residue's integer type.

    Example:
        >>> x = Residue(5, 11)
        >>> int(x * 7)
        2
        >>> int(x / 7)
        7
        >>> int(x ** 3)
        4
    """

    __slots__ = ("_kind", "_modulus", "_value")

    def __init__(self, value: int, modulus: int, kind: IntegerType | str | None = None) -> None:
        """
        Initialize a residue.

        Args:
            value: Any value of the integer type; it is reduced
            modulus: Strictly positive modulus of the integer type
            kind: Integer type (default from config)

        Raises:
            InvalidModulusError: If modulus <= 0
            InvalidInputError: If value is not an integer
            OutOfRangeError: If value or modulus do not fit kind
        """
        resolved = resolve_integer_type(kind)
        validate_modulus(modulus, resolved)
        validate_integer(value, resolved)
        object.__setattr__(self, "_kind", resolved)
        object.__setattr__(self, "_modulus", modulus)
        object.__setattr__(self, "_value", reduce(value, modulus, resolved))

    def __setattr__(self, name: str, value: Any) -> None:
        raise FrozenInstanceError(f"cannot assign to field {name!r}")

    def __delattr__(self, name: str) -> None:
        raise FrozenInstanceError(f"cannot delete field {name!r}")

    @property
    def value(self) -> int:
        """Canonical representative in [0, modulus)."""
        return self._value

    @property
    def modulus(self) -> int:
        return self._modulus

    @property
    def kind(self) -> IntegerType:
        return self._kind

    def _derive(self, value: int) -> Residue:
        """New residue sharing this modulus and integer type."""
        return Residue(value, self._modulus, self._kind)

    def _operand(self, other: Any) -> int | None:
        """Raw value of other, or None when other is not a supported operand."""
        if isinstance(other, Residue):
            if other._modulus != self._modulus or other._kind != self._kind:
                raise IncompatibleModulusError(self, other)
            return other._value
        if isinstance(other, int) and not isinstance(other, bool):
            return other
        return None

    def _apply(
        self, operation: Callable[[int, int, int, IntegerType], int], left: int, right: int
    ) -> Residue:
        return self._derive(operation(left, right, self._modulus, self._kind))

    def __add__(self, other: Any) -> Residue:
        value = self._operand(other)
        if value is None:
            return NotImplemented
        return self._apply(mod_add, self._value, value)

    def __radd__(self, other: Any) -> Residue:
        return self.__add__(other)

    def __sub__(self, other: Any) -> Residue:
        value = self._operand(other)
        if value is None:
            return NotImplemented
        return self._apply(mod_sub, self._value, value)

    def __rsub__(self, other: Any) -> Residue:
        value = self._operand(other)
        if value is None:
            return NotImplemented
        return self._apply(mod_sub, value, self._value)

    def __mul__(self, other: Any) -> Residue:
        value = self._operand(other)
        if value is None:
            return NotImplemented
        return self._apply(mod_mul, self._value, value)

    def __rmul__(self, other: Any) -> Residue:
        return self.__mul__(other)

    def __truediv__(self, other: Any) -> Residue:
        """
        Divide by another residue or int.

        Raises:
            NoInverseError: If the divisor is not invertible
        """
        value = self._operand(other)
        if value is None:
            return NotImplemented
        return self._apply(mod_div, self._value, value)

    def __rtruediv__(self, other: Any) -> Residue:
        value = self._operand(other)
        if value is None:
            return NotImplemented
        return self._apply(mod_div, value, self._value)

    def __neg__(self) -> Residue:
        return self._apply(mod_sub, 0, self._value)

    def __pow__(self, exponent: Any, modulo: None = None) -> Residue:
        """Raise to an integer power; negative exponents invert first."""
        if modulo is not None or isinstance(exponent, bool) or not isinstance(exponent, int):
            return NotImplemented
        return self._derive(
            mod_pow(self._value, exponent, self._modulus, self._kind, invert_negative=True)
        )

    def inverse(self) -> Residue:
        """
        Multiplicative inverse of this residue.

        Raises:
            NoInverseError: If gcd(value, modulus) != 1
        """
        return self._derive(mod_inv(self._value, self._modulus, self._kind))

    def congruent(self, other: int | Residue) -> bool:
        """Whether other represents the same class modulo this modulus."""
        value = self._operand(other)
        if value is None:
            raise TypeError(f"Cannot compare Residue with {type(other).__name__}")
        return self == self._derive(value)

    def __int__(self) -> int:
        return self._value

    def __bool__(self) -> bool:
        return self._value != 0

    def __repr__(self) -> str:
        return f"Residue(value={self._value}, modulus={self._modulus}, kind={self._kind.name})"

    def __str__(self) -> str:
        return f"{self._value} (mod {self._modulus})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Residue):
            return NotImplemented
        return (
            self._value == other._value
            and self._modulus == other._modulus
            and self._kind == other._kind
        )

    def __hash__(self) -> int:
        return hash((self._value, self._modulus, self._kind))
