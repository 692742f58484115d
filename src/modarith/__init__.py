"""
Modular arithmetic over fixed-width and arbitrary-precision integers.

Addition, subtraction, multiplication, division and exponentiation modulo
a positive modulus, written once against a small integer capability
interface and usable with any signed or unsigned width:

    >>> from modarith import mod_div, mod_pow, U8
    >>> mod_div(5, 7, 11, U8)
    7
    >>> mod_pow(5, 3, 11, "u8")
    4
"""

from modarith.core import Residue
from modarith.exceptions import (
    ArithmeticOverflowError,
    IncompatibleModulusError,
    InvalidInputError,
    InvalidModulusError,
    ModularArithmeticError,
    NoInverseError,
    OutOfRangeError,
)
from modarith.integers import (
    BIGINT,
    I8,
    I16,
    I32,
    I64,
    I128,
    INTEGER_TYPES,
    U8,
    U16,
    U32,
    U64,
    U128,
    ArbitraryPrecisionInteger,
    FixedWidthInteger,
    IntegerType,
    resolve_integer_type,
)
from modarith.operations import (
    egcd,
    eq_mod,
    mod_add,
    mod_div,
    mod_inv,
    mod_mul,
    mod_pow,
    mod_sub,
    ne_mod,
    reduce,
)
from modarith.validators import (
    validate_exponent,
    validate_integer,
    validate_modulus,
    validate_range,
)

__all__ = [
    "BIGINT",
    "I8",
    "I16",
    "I32",
    "I64",
    "I128",
    "INTEGER_TYPES",
    "U8",
    "U16",
    "U32",
    "U64",
    "U128",
    "ArbitraryPrecisionInteger",
    "ArithmeticOverflowError",
    "FixedWidthInteger",
    "IncompatibleModulusError",
    "IntegerType",
    "InvalidInputError",
    "InvalidModulusError",
    "ModularArithmeticError",
    "NoInverseError",
    "OutOfRangeError",
    "Residue",
    "egcd",
    "eq_mod",
    "mod_add",
    "mod_div",
    "mod_inv",
    "mod_mul",
    "mod_pow",
    "mod_sub",
    "ne_mod",
    "reduce",
    "resolve_integer_type",
    "validate_exponent",
    "validate_integer",
    "validate_modulus",
    "validate_range",
]

__version__ = "0.1.0"
