"""
Sized integer types — 30 конкретных типов (6 подмножеств × 5 разрядностей)

Каждый тип — лист иерархии ConstrainedInteger с фиксированной разрядностью.
Типы регистрируются в реестре (subset, width) при объявлении и в маркерах
возможностей (numera.core.domain.capabilities) в конце модуля.

Границы на 8 битах:
    Integer8      [-128, 127]
    ZeroFree8     [-128, 127] ∖ {0}
    NonNegative8  [0, 255]
    NonPositive8  [-128, 0]
    Negative8     [-128, -1]
    Positive8     [1, 127]
"""

from typing import ClassVar

from numera.core.domain.capabilities import integer_capabilities, register_capabilities
from numera.core.domain.integer import (
    SUBSET_BASES,
    Integer,
    NegativeInteger,
    NonNegativeInteger,
    NonPositiveInteger,
    PositiveInteger,
    ZeroFreeInteger,
)
from numera.core.math.sets import Width


# =============================================================================
# INTEGER (ℤ)
# =============================================================================


class Integer8(Integer):
    width: ClassVar[Width] = Width.W8


class Integer16(Integer):
    width: ClassVar[Width] = Width.W16


class Integer32(Integer):
    width: ClassVar[Width] = Width.W32


class Integer64(Integer):
    width: ClassVar[Width] = Width.W64


class Integer128(Integer):
    width: ClassVar[Width] = Width.W128


# =============================================================================
# ZERO_FREE (ℤ ∖ {0})
# =============================================================================


class ZeroFree8(ZeroFreeInteger):
    width: ClassVar[Width] = Width.W8


class ZeroFree16(ZeroFreeInteger):
    width: ClassVar[Width] = Width.W16


class ZeroFree32(ZeroFreeInteger):
    width: ClassVar[Width] = Width.W32


class ZeroFree64(ZeroFreeInteger):
    width: ClassVar[Width] = Width.W64


class ZeroFree128(ZeroFreeInteger):
    width: ClassVar[Width] = Width.W128


# =============================================================================
# NON_NEGATIVE (ℤ≥0)
# =============================================================================


class NonNegative8(NonNegativeInteger):
    width: ClassVar[Width] = Width.W8


class NonNegative16(NonNegativeInteger):
    width: ClassVar[Width] = Width.W16


class NonNegative32(NonNegativeInteger):
    width: ClassVar[Width] = Width.W32


class NonNegative64(NonNegativeInteger):
    width: ClassVar[Width] = Width.W64


class NonNegative128(NonNegativeInteger):
    width: ClassVar[Width] = Width.W128


# =============================================================================
# NON_POSITIVE (ℤ≤0)
# =============================================================================


class NonPositive8(NonPositiveInteger):
    width: ClassVar[Width] = Width.W8


class NonPositive16(NonPositiveInteger):
    width: ClassVar[Width] = Width.W16


class NonPositive32(NonPositiveInteger):
    width: ClassVar[Width] = Width.W32


class NonPositive64(NonPositiveInteger):
    width: ClassVar[Width] = Width.W64


class NonPositive128(NonPositiveInteger):
    width: ClassVar[Width] = Width.W128


# =============================================================================
# NEGATIVE (ℤ<0)
# =============================================================================


class Negative8(NegativeInteger):
    width: ClassVar[Width] = Width.W8


class Negative16(NegativeInteger):
    width: ClassVar[Width] = Width.W16


class Negative32(NegativeInteger):
    width: ClassVar[Width] = Width.W32


class Negative64(NegativeInteger):
    width: ClassVar[Width] = Width.W64


class Negative128(NegativeInteger):
    width: ClassVar[Width] = Width.W128


# =============================================================================
# POSITIVE (ℤ>0)
# =============================================================================


class Positive8(PositiveInteger):
    width: ClassVar[Width] = Width.W8


class Positive16(PositiveInteger):
    width: ClassVar[Width] = Width.W16


class Positive32(PositiveInteger):
    width: ClassVar[Width] = Width.W32


class Positive64(PositiveInteger):
    width: ClassVar[Width] = Width.W64


class Positive128(PositiveInteger):
    width: ClassVar[Width] = Width.W128


# =============================================================================
# CAPABILITIES
# =============================================================================

for _base in SUBSET_BASES.values():
    register_capabilities(_base, integer_capabilities(_base.subset))
del _base
