"""
Modular arithmetic operations over any IntegerType.

Every public function takes the modulus followed by an optional ``kind``
(an IntegerType or its name).  Operands and modulus must be values of that
one type; intermediate results live in ``kind.wide`` and are reduced back
into ``[0, modulus)`` before being returned.
"""

from __future__ import annotations

import logging

from modarith.exceptions import InvalidInputError, NoInverseError
from modarith.integers import BIGINT, IntegerType, resolve_integer_type
from modarith.validators import (
    validate_exponent,
    validate_integer,
    validate_modulus,
    validate_range,
)

logger = logging.getLogger(__name__)


def _prepare(modulus: int, kind: IntegerType | str | None, *operands: int) -> IntegerType:
    """Resolve kind and validate the modulus before any operand."""
    resolved = resolve_integer_type(kind)
    validate_modulus(modulus, resolved)
    for operand in operands:
        validate_integer(operand, resolved)
    return resolved


def _reduce(value: int, modulus: int, kind: IntegerType) -> int:
    remainder = kind.rem(value, modulus)
    # |remainder| < modulus, so one correction is enough
    if kind.is_negative(remainder):
        remainder = kind.wide.checked_add(remainder, modulus)
    return kind.narrow(remainder)


def _mul(a: int, b: int, modulus: int, kind: IntegerType) -> int:
    return _reduce(kind.mul(a, b), modulus, kind)


def _egcd(a: int, b: int, domain: IntegerType) -> tuple[int, int, int]:
    old_r, r = a, b
    old_x, x = 1, 0
    old_y, y = 0, 1
    while r != 0:
        q = domain.quotient(old_r, r)
        old_r, r = r, domain.checked_sub(old_r, domain.checked_mul(q, r))
        old_x, x = x, domain.checked_sub(old_x, domain.checked_mul(q, x))
        old_y, y = y, domain.checked_sub(old_y, domain.checked_mul(q, y))
    return old_r, old_x, old_y


def _inverse(a: int, modulus: int, kind: IntegerType) -> int:
    reduced = _reduce(a, modulus, kind)
    g, x, _ = _egcd(reduced, modulus, kind.wide)
    if g != 1:
        logger.debug("no inverse for %d modulo %d (gcd %d)", a, modulus, g)
        raise NoInverseError(a, modulus, g)
    return _reduce(x, modulus, kind)


def _pow(base: int, exponent: int, modulus: int, kind: IntegerType) -> int:
    result = _reduce(1, modulus, kind)
    power = _reduce(base, modulus, kind)
    while exponent > 0:
        if exponent & 1:
            result = _mul(result, power, modulus, kind)
        power = _mul(power, power, modulus, kind)
        exponent >>= 1
    return result


def reduce(value: int, modulus: int, kind: IntegerType | str | None = None) -> int:
    """
    Canonicalize value into the range [0, modulus).

    value may be anything the widened domain of kind can hold, so raw
    sums and products can be passed straight in.

    Args:
        value: Integer to reduce
        modulus: Strictly positive modulus of type kind
        kind: Integer type of the modulus (default from config)

    Returns:
        The representative of value in [0, modulus)

    Raises:
        InvalidModulusError: If modulus <= 0
        InvalidInputError: If value is not an integer
        OutOfRangeError: If value does not fit the widened domain
    """
    resolved = _prepare(modulus, kind)
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInputError(value, f"Expected integer, got {type(value).__name__}")
    validate_range(value, resolved.wide.min_value, resolved.wide.max_value)

    return _reduce(value, modulus, resolved)


def mod_add(a: int, b: int, modulus: int, kind: IntegerType | str | None = None) -> int:
    """
    Add two integers modulo modulus.

    Properties:
        - Commutative: mod_add(a, b, m) == mod_add(b, a, m)
        - Identity: mod_add(a, 0, m) == reduce(a, m)

    Raises:
        InvalidModulusError: If modulus <= 0
        InvalidInputError: If an operand is not an integer
        OutOfRangeError: If an operand does not fit kind
    """
    resolved = _prepare(modulus, kind, a, b)
    return _reduce(resolved.add(a, b), modulus, resolved)


def mod_sub(a: int, b: int, modulus: int, kind: IntegerType | str | None = None) -> int:
    """
    Subtract b from a modulo modulus.

    The difference is taken in the widened domain, so unsigned operands
    with a < b reduce correctly instead of wrapping.
    """
    resolved = _prepare(modulus, kind, a, b)
    return _reduce(resolved.sub(a, b), modulus, resolved)


def mod_mul(a: int, b: int, modulus: int, kind: IntegerType | str | None = None) -> int:
    """
    Multiply two integers modulo modulus.

    Properties:
        - Commutative: mod_mul(a, b, m) == mod_mul(b, a, m)
        - Identity: mod_mul(a, 1, m) == reduce(a, m)
        - Zero: mod_mul(a, 0, m) == 0
    """
    resolved = _prepare(modulus, kind, a, b)
    return _mul(a, b, modulus, resolved)


def egcd(a: int, b: int) -> tuple[int, int, int]:
    """
    Extended Euclidean algorithm.

    Returns (g, x, y) with a*x + b*y == g.  For non-negative inputs g is
    gcd(a, b).

    Example:
        >>> egcd(102, 38)
        (2, 3, -8)
    """
    for value in (a, b):
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidInputError(value, f"Expected integer, got {type(value).__name__}")

    return _egcd(a, b, BIGINT)


def mod_inv(a: int, modulus: int, kind: IntegerType | str | None = None) -> int:
    """
    Multiplicative inverse of a modulo modulus.

    Args:
        a: Value to invert; reduced first, so negatives are fine
        modulus: Strictly positive modulus
        kind: Integer type shared by a and modulus

    Returns:
        x in [0, modulus) with (a * x) mod modulus == 1 mod modulus

    Raises:
        InvalidModulusError: If modulus <= 0
        NoInverseError: If gcd(a, modulus) != 1
    """
    resolved = _prepare(modulus, kind, a)
    return _inverse(a, modulus, resolved)


def mod_div(a: int, b: int, modulus: int, kind: IntegerType | str | None = None) -> int:
    """
    Divide a by b modulo modulus, i.e. a * mod_inv(b, modulus).

    Properties:
        - Inverse of multiply: mod_mul(mod_div(a, b, m), b, m) == reduce(a, m)

    Raises:
        InvalidModulusError: If modulus <= 0
        NoInverseError: If b is not invertible modulo modulus (including b == 0)
    """
    resolved = _prepare(modulus, kind, a, b)
    return _mul(a, mod_inv(b, modulus, resolved), modulus, resolved)


def mod_pow(
    base: int,
    exponent: int,
    modulus: int,
    kind: IntegerType | str | None = None,
    *,
    invert_negative: bool = False,
) -> int:
    """
    Raise base to exponent modulo modulus by square-and-multiply.

    Exponent 0 gives 1 mod modulus for every base, 0 included.

    Negative exponents are rejected unless invert_negative is set, in
    which case the result is mod_inv(base, m) raised to -exponent.

    Args:
        base: The base
        exponent: The exponent, of the same integer type
        modulus: Strictly positive modulus
        kind: Integer type shared by all three values
        invert_negative: Accept negative exponents by inverting

    Returns:
        base ** exponent reduced into [0, modulus)

    Raises:
        InvalidModulusError: If modulus <= 0
        InvalidInputError: If exponent is negative and invert_negative is False
        NoInverseError: If the exponent is negative and base is not invertible
    """
    resolved = _prepare(modulus, kind, base)
    validate_exponent(exponent, resolved, allow_negative=invert_negative)

    if exponent < 0:
        logger.debug("negative exponent %d routed through inversion modulo %d", exponent, modulus)
        magnitude = resolved.sub(0, exponent)
        return _pow(_inverse(base, modulus, resolved), magnitude, modulus, resolved)

    return _pow(base, exponent, modulus, resolved)


def eq_mod(a: int, b: int, modulus: int, kind: IntegerType | str | None = None) -> bool:
    """Whether a and b are congruent modulo modulus."""
    resolved = _prepare(modulus, kind, a, b)
    return _reduce(a, modulus, resolved) == _reduce(b, modulus, resolved)


def ne_mod(a: int, b: int, modulus: int, kind: IntegerType | str | None = None) -> bool:
    """Whether a and b are not congruent modulo modulus."""
    return not eq_mod(a, b, modulus, kind)
