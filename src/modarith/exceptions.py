"""Custom exceptions for the modarith package."""

from typing import Any


class ModularArithmeticError(Exception):
    """Base exception for all modular arithmetic errors."""

    def __init__(self, message: str, value: Any = None) -> None:
        self.message = message
        self.value = value
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.value is not None:
            return f"{self.message}: {self.value}"
        return self.message


class InvalidModulusError(ModularArithmeticError):
    """Raised when the modulus is not a strictly positive integer."""

    def __init__(self, modulus: Any, reason: str = "Modulus must be positive") -> None:
        super().__init__(reason, modulus)
        self.modulus = modulus
        self.reason = reason


class NoInverseError(ModularArithmeticError):
    """Raised when a value has no multiplicative inverse modulo the modulus."""

    def __init__(self, value: int, modulus: int, gcd: int) -> None:
        super().__init__(
            f"No inverse exists modulo {modulus} (gcd is {gcd})",
            value,
        )
        self.modulus = modulus
        self.gcd = gcd


class ArithmeticOverflowError(ModularArithmeticError):
    """Raised when an intermediate value escapes its integer type."""

    def __init__(self, type_name: str, value: int) -> None:
        super().__init__(f"Overflow in {type_name}", value)
        self.type_name = type_name


class InvalidInputError(ModularArithmeticError):
    """Raised when input is invalid (wrong type, unknown name, bad exponent)."""

    def __init__(self, value: Any, reason: str = "invalid input") -> None:
        super().__init__(reason, value)
        self.reason = reason


class OutOfRangeError(ModularArithmeticError):
    """Raised when a value is outside acceptable range."""

    def __init__(self, value: int, min_val: int | None = None, max_val: int | None = None) -> None:
        range_str = f"[{min_val}, {max_val}]"
        super().__init__(f"Value out of range {range_str}", value)
        self.min_val = min_val
        self.max_val = max_val


class IncompatibleModulusError(ModularArithmeticError):
    """Raised when combining residues of different moduli or integer types."""

    def __init__(self, left: Any, right: Any) -> None:
        super().__init__("Residues do not share a modulus", (left, right))
        self.left = left
        self.right = right
