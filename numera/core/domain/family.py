"""
Bit-Width Family — одно подмножество на всех разрядностях

IntegerFamily объединяет пять конкретных типов подмножества (8..128 бит)
и даёт единые границы и выбор наименьшей подходящей разрядности.

    >>> family_of(Subset.POSITIVE).smallest_fitting(300)
    Positive16(raw=300)
"""

from dataclasses import dataclass
from typing import Final, Iterator

from numera.core.domain.integer import ConstrainedInteger, integer_type
from numera.core.errors import OutOfRange, Overflow, Underflow, deliver
from numera.core.math.predicates import is_raw_int, validate
from numera.core.math.sets import ALL_WIDTHS, Subset, Width, storage_range, subset_bounds


@dataclass(frozen=True)
class IntegerFamily:
    """
    Семейство типов одного подмножества.

    Attributes:
        subset: Подмножество
        members: Конкретные типы в порядке возрастания разрядности
    """

    subset: Subset
    members: tuple[type[ConstrainedInteger], ...]

    def __post_init__(self) -> None:
        if len(self.members) != len(ALL_WIDTHS):
            raise ValueError(
                f"Family {self.subset.value} must have {len(ALL_WIDTHS)} members, "
                f"got {len(self.members)}"
            )
        for member, width in zip(self.members, ALL_WIDTHS):
            if member.subset is not self.subset or member.width is not width:
                raise ValueError(
                    f"{member.__name__} is not the {width.bits}-bit member "
                    f"of family {self.subset.value}"
                )

    def __iter__(self) -> Iterator[type[ConstrainedInteger]]:
        return iter(self.members)

    def __len__(self) -> int:
        return len(self.members)

    def member(self, width: Width) -> type[ConstrainedInteger]:
        """Тип семейства для разрядности."""
        return self.members[ALL_WIDTHS.index(Width(width))]

    def min(self) -> int:
        """Наименьшее raw значение среди всех членов (MIN 128-битного члена)."""
        return subset_bounds(self.subset, ALL_WIDTHS[-1])[0]

    def max(self) -> int:
        """Наибольшее raw значение среди всех членов (MAX 128-битного члена)."""
        return subset_bounds(self.subset, ALL_WIDTHS[-1])[1]

    def bounds(self, width: Width) -> tuple[int, int]:
        """(MIN, MAX) члена заданной разрядности."""
        return subset_bounds(self.subset, Width(width))

    def smallest_fitting(self, raw: int) -> ConstrainedInteger:
        """
        Значение в самом узком члене, способном хранить raw.

        Raises:
            TypeError: Если raw не int
            OutOfRange: Если raw вне подмножества
            Overflow / Underflow: Если raw не помещается даже в 128 бит
        """
        if not is_raw_int(raw):
            raise TypeError(f"Raw value must be int, got {type(raw).__name__}")
        if not validate(self.subset, ALL_WIDTHS[0], raw):
            deliver(
                OutOfRange(
                    f"Value {raw} is outside subset {self.subset.value}",
                    subset=self.subset.value,
                    value=raw,
                )
            )

        for member in self.members:
            lo, hi = member.min().raw, member.max().raw
            if lo <= raw <= hi:
                return member._trusted(raw)

        # Ни один член не подошёл: raw вне диапазона 128-битного члена
        widest = ALL_WIDTHS[-1]
        lo, hi = storage_range(self.subset, widest)
        failure = Overflow if raw > hi else Underflow
        deliver(
            failure(
                f"Value {raw} does not fit the widest member of family "
                f"{self.subset.value} [{lo}, {hi}]",
                subset=self.subset.value,
                width=widest.bits,
                value=raw,
            )
        )


def _build_family(subset: Subset) -> IntegerFamily:
    return IntegerFamily(
        subset=subset,
        members=tuple(integer_type(subset, width) for width in ALL_WIDTHS),
    )


INTEGER_FAMILIES: Final[dict[Subset, IntegerFamily]] = {
    subset: _build_family(subset) for subset in Subset
}


def family_of(subset: Subset) -> IntegerFamily:
    """Семейство подмножества."""
    return INTEGER_FAMILIES[Subset(subset)]
