"""
numera — целые числа, ограниченные подмножеством и разрядностью.

    >>> from numera import Positive8
    >>> Positive8.new(3) + Positive8.new(4)
    Positive8(raw=7)
"""

from numera.core.config import (
    DEFAULT_CONFIG,
    ArithmeticConfig,
    arithmetic_config,
    get_config,
    reset_config,
    set_config,
)
from numera.core.errors import (
    ArithmeticTrap,
    CheckedResult,
    DivisionByZero,
    FailureKind,
    NumeraError,
    OutOfRange,
    Overflow,
    SubsetViolation,
    Underflow,
)
from numera.core.math import Operator, OperatorRule, Rounding, Storage, Subset, Width, resolve
from numera.core.domain import (
    ALL_CAPABILITIES,
    Bounded,
    CanNegative,
    CanPositive,
    ConstrainedInteger,
    Countable,
    family_of,
    HasNegOne,
    HasOne,
    HasZero,
    has_capability,
    Integer,
    Integer128,
    Integer16,
    Integer32,
    Integer64,
    Integer8,
    IntegerFamily,
    integer_capabilities,
    INTEGER_FAMILIES,
    integer_type,
    Negative128,
    Negative16,
    Negative32,
    Negative64,
    Negative8,
    NegativeInteger,
    NonNegative128,
    NonNegative16,
    NonNegative32,
    NonNegative64,
    NonNegative8,
    NonNegativeInteger,
    NonPositive128,
    NonPositive16,
    NonPositive32,
    NonPositive64,
    NonPositive8,
    NonPositiveInteger,
    NonZero,
    Positive128,
    Positive16,
    Positive32,
    Positive64,
    Positive8,
    PositiveInteger,
    Rational,
    Rational128,
    Rational16,
    Rational32,
    Rational64,
    Rational8,
    rational_type,
    reduce,
    registered_integer_types,
    SUBSET_BASES,
    ZeroFree128,
    ZeroFree16,
    ZeroFree32,
    ZeroFree64,
    ZeroFree8,
    ZeroFreeInteger,
)

__version__ = "0.1.0"

__all__ = [
    # Config
    "ArithmeticConfig",
    "DEFAULT_CONFIG",
    "arithmetic_config",
    "get_config",
    "reset_config",
    "set_config",
    # Errors
    "ArithmeticTrap",
    "CheckedResult",
    "DivisionByZero",
    "FailureKind",
    "NumeraError",
    "OutOfRange",
    "Overflow",
    "SubsetViolation",
    "Underflow",
    # Tags & resolver
    "Operator",
    "OperatorRule",
    "Rounding",
    "Storage",
    "Subset",
    "Width",
    "resolve",
    # Domain types
    "ALL_CAPABILITIES",
    "Bounded",
    "Countable",
    "CanNegative",
    "CanPositive",
    "HasZero",
    "HasOne",
    "HasNegOne",
    "NonZero",
    "has_capability",
    "integer_capabilities",
    "ConstrainedInteger",
    "Integer",
    "ZeroFreeInteger",
    "NonNegativeInteger",
    "NonPositiveInteger",
    "NegativeInteger",
    "PositiveInteger",
    "SUBSET_BASES",
    "integer_type",
    "registered_integer_types",
    "Integer8",
    "Integer16",
    "Integer32",
    "Integer64",
    "Integer128",
    "ZeroFree8",
    "ZeroFree16",
    "ZeroFree32",
    "ZeroFree64",
    "ZeroFree128",
    "NonNegative8",
    "NonNegative16",
    "NonNegative32",
    "NonNegative64",
    "NonNegative128",
    "NonPositive8",
    "NonPositive16",
    "NonPositive32",
    "NonPositive64",
    "NonPositive128",
    "Negative8",
    "Negative16",
    "Negative32",
    "Negative64",
    "Negative128",
    "Positive8",
    "Positive16",
    "Positive32",
    "Positive64",
    "Positive128",
    "IntegerFamily",
    "INTEGER_FAMILIES",
    "family_of",
    "Rational",
    "Rational8",
    "Rational16",
    "Rational32",
    "Rational64",
    "Rational128",
    "rational_type",
    "reduce",
]
