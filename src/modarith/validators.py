"""Input validation functions with strict type checking."""

from modarith.exceptions import InvalidInputError, InvalidModulusError, OutOfRangeError
from modarith.integers import IntegerType


def validate_integer(value: int, kind: IntegerType) -> int:
    """
    Validate that a value is an integer representable in kind.

    Args:
        value: The value to validate
        kind: The integer type the value must belong to

    Returns:
        The validated value

    Raises:
        InvalidInputError: If value is not an int (bools are rejected)
        OutOfRangeError: If value does not fit kind
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInputError(value, f"Expected integer, got {type(value).__name__}")

    return validate_range(value, kind.min_value, kind.max_value)


def validate_modulus(modulus: int, kind: IntegerType) -> int:
    """
    Validate that a modulus is a strictly positive value of kind.

    Args:
        modulus: The modulus to validate
        kind: The integer type shared by operands and modulus

    Returns:
        The validated modulus

    Raises:
        InvalidModulusError: If modulus is not an int or is not positive
        OutOfRangeError: If modulus does not fit kind
    """
    if isinstance(modulus, bool) or not isinstance(modulus, int):
        raise InvalidModulusError(
            modulus, f"Expected integer modulus, got {type(modulus).__name__}"
        )

    if modulus <= 0:
        raise InvalidModulusError(modulus)

    return validate_integer(modulus, kind)


def validate_exponent(exponent: int, kind: IntegerType, allow_negative: bool = False) -> int:
    """
    Validate an exponent for modular exponentiation.

    Args:
        exponent: The exponent to validate
        kind: The integer type the exponent must belong to
        allow_negative: Whether negative exponents are accepted

    Returns:
        The validated exponent

    Raises:
        InvalidInputError: If exponent is not an int, or is negative when not allowed
        OutOfRangeError: If exponent does not fit kind
    """
    validate_integer(exponent, kind)

    if not allow_negative and exponent < 0:
        raise InvalidInputError(exponent, "Exponent must be non-negative")

    return exponent


def validate_range(
    value: int,
    min_val: int | None = None,
    max_val: int | None = None,
    inclusive: bool = True,
) -> int:
    """
    Validate that a value is within a specified range.

    Args:
        value: The value to validate
        min_val: Minimum allowed value (None for no limit)
        max_val: Maximum allowed value (None for no limit)
        inclusive: Whether bounds are inclusive

    Returns:
        The validated value

    Raises:
        OutOfRangeError: If value is outside the range
    """
    if min_val is not None:
        if inclusive and value < min_val:
            raise OutOfRangeError(value, min_val, max_val)
        if not inclusive and value <= min_val:
            raise OutOfRangeError(value, min_val, max_val)

    if max_val is not None:
        if inclusive and value > max_val:
            raise OutOfRangeError(value, min_val, max_val)
        if not inclusive and value >= max_val:
            raise OutOfRangeError(value, min_val, max_val)

    return value
