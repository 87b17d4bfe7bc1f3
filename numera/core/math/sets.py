"""
Sets — математические подмножества ℤ и разрядности хранения

Subset — тег подмножества целых чисел:
- UNCONSTRAINED: ℤ
- ZERO_FREE: ℤ ∖ {0}
- NON_NEGATIVE: ℤ≥0
- NON_POSITIVE: ℤ≤0
- NEGATIVE: ℤ<0
- POSITIVE: ℤ>0

Width — разрядность нативного хранения: 8/16/32/64/128 бит.

Storage — знаковость хранения. NON_NEGATIVE — единственное подмножество с
беззнаковым хранением; остальные (включая POSITIVE) хранятся знаково:
    Positive8    = [1, 127]
    NonNegative8 = [0, 255]
    Negative8    = [-128, -1]
"""

from enum import Enum, IntEnum
from typing import Final


# =============================================================================
# STORAGE & WIDTH
# =============================================================================


class Storage(str, Enum):
    """Знаковость нативного хранения."""

    SIGNED = "SIGNED"
    UNSIGNED = "UNSIGNED"


class Width(IntEnum):
    """Разрядность хранения в битах."""

    W8 = 8
    W16 = 16
    W32 = 32
    W64 = 64
    W128 = 128

    @property
    def bits(self) -> int:
        return int(self)

    def signed_range(self) -> tuple[int, int]:
        """Диапазон two's-complement: [-2^(b-1), 2^(b-1) - 1]."""
        half = 1 << (self.bits - 1)
        return -half, half - 1

    def unsigned_range(self) -> tuple[int, int]:
        """Беззнаковый диапазон: [0, 2^b - 1]."""
        return 0, (1 << self.bits) - 1

    def range_for(self, storage: Storage) -> tuple[int, int]:
        if storage is Storage.SIGNED:
            return self.signed_range()
        return self.unsigned_range()

    def is_wider_than(self, other: "Width") -> bool:
        return self.bits > other.bits


ALL_WIDTHS: Final[tuple[Width, ...]] = tuple(Width)


# =============================================================================
# SUBSET
# =============================================================================


class Subset(str, Enum):
    """Подмножество ℤ, которое кодирует тип значения."""

    UNCONSTRAINED = "UNCONSTRAINED"
    ZERO_FREE = "ZERO_FREE"
    NON_NEGATIVE = "NON_NEGATIVE"
    NON_POSITIVE = "NON_POSITIVE"
    NEGATIVE = "NEGATIVE"
    POSITIVE = "POSITIVE"

    @property
    def storage(self) -> Storage:
        if self is Subset.NON_NEGATIVE:
            return Storage.UNSIGNED
        return Storage.SIGNED

    @property
    def contains_zero(self) -> bool:
        return self in (Subset.UNCONSTRAINED, Subset.NON_NEGATIVE, Subset.NON_POSITIVE)

    @property
    def can_negative(self) -> bool:
        return self in (
            Subset.UNCONSTRAINED,
            Subset.ZERO_FREE,
            Subset.NON_POSITIVE,
            Subset.NEGATIVE,
        )

    @property
    def can_positive(self) -> bool:
        return self in (
            Subset.UNCONSTRAINED,
            Subset.ZERO_FREE,
            Subset.NON_NEGATIVE,
            Subset.POSITIVE,
        )


def storage_range(subset: Subset, width: Width) -> tuple[int, int]:
    """Нативный диапазон хранения подмножества на разрядности."""
    return width.range_for(subset.storage)


def subset_bounds(subset: Subset, width: Width) -> tuple[int, int]:
    """
    Граничные константы (MIN, MAX) подмножества на разрядности.

    Пересечение нативного диапазона хранения с предикатом подмножества.

    Examples:
        >>> subset_bounds(Subset.POSITIVE, Width.W8)
        (1, 127)
        >>> subset_bounds(Subset.NON_NEGATIVE, Width.W8)
        (0, 255)
        >>> subset_bounds(Subset.NEGATIVE, Width.W8)
        (-128, -1)
    """
    lo, hi = storage_range(subset, width)

    if subset is Subset.POSITIVE:
        return 1, hi
    if subset is Subset.NON_POSITIVE:
        return lo, 0
    if subset is Subset.NEGATIVE:
        return lo, -1
    # UNCONSTRAINED, ZERO_FREE, NON_NEGATIVE: крайние точки хранения уже в подмножестве
    return lo, hi
