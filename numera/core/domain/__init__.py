"""
Domain value types.

Ограниченные целые (6 подмножеств × 5 разрядностей), семейства разрядностей,
несократимые дроби и маркеры возможностей.
"""

from numera.core.domain.capabilities import (
    ALL_CAPABILITIES,
    Bounded,
    CanNegative,
    CanPositive,
    Countable,
    HasNegOne,
    HasOne,
    HasZero,
    NonZero,
    has_capability,
    integer_capabilities,
)
from numera.core.domain.integer import (
    SUBSET_BASES,
    ConstrainedInteger,
    Integer,
    NegativeInteger,
    NonNegativeInteger,
    NonPositiveInteger,
    PositiveInteger,
    ZeroFreeInteger,
    integer_type,
    registered_integer_types,
)
from numera.core.domain.sized import (
    Integer8,
    Integer16,
    Integer32,
    Integer64,
    Integer128,
    Negative8,
    Negative16,
    Negative32,
    Negative64,
    Negative128,
    NonNegative8,
    NonNegative16,
    NonNegative32,
    NonNegative64,
    NonNegative128,
    NonPositive8,
    NonPositive16,
    NonPositive32,
    NonPositive64,
    NonPositive128,
    Positive8,
    Positive16,
    Positive32,
    Positive64,
    Positive128,
    ZeroFree8,
    ZeroFree16,
    ZeroFree32,
    ZeroFree64,
    ZeroFree128,
)
from numera.core.domain.family import INTEGER_FAMILIES, IntegerFamily, family_of
from numera.core.domain.rational import (
    Rational,
    Rational8,
    Rational16,
    Rational32,
    Rational64,
    Rational128,
    rational_type,
    reduce,
)

__all__ = [
    # Capabilities
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
    # Constrained integer — bases
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
    # Constrained integer — sized
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
    # Bit-width families
    "IntegerFamily",
    "INTEGER_FAMILIES",
    "family_of",
    # Rational
    "Rational",
    "Rational8",
    "Rational16",
    "Rational32",
    "Rational64",
    "Rational128",
    "rational_type",
    "reduce",
]
