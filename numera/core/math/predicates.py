"""
Invariant Predicate — принадлежность raw значения подмножеству

validate() — чистая тотальная функция без побочных эффектов.
check_raw() — валидирующая форма для границы конструирования.
"""

from typing import Callable, Final

from numera.core.errors import OutOfRange, Overflow, Underflow
from numera.core.math.sets import Subset, Width, storage_range


# =============================================================================
# PREDICATES
# =============================================================================

_PREDICATES: Final[dict[Subset, Callable[[int], bool]]] = {
    Subset.UNCONSTRAINED: lambda raw: True,
    Subset.ZERO_FREE: lambda raw: raw != 0,
    Subset.NON_NEGATIVE: lambda raw: raw >= 0,
    Subset.NON_POSITIVE: lambda raw: raw <= 0,
    Subset.NEGATIVE: lambda raw: raw < 0,
    Subset.POSITIVE: lambda raw: raw > 0,
}


def validate(subset: Subset, width: Width, raw: int) -> bool:
    """
    Принадлежит ли raw подмножеству subset.

    Разрядность не влияет на предикат; она входит в сигнатуру для
    единообразия с check_raw().

    Args:
        subset: Подмножество
        width: Разрядность (не используется предикатом)
        raw: Значение

    Returns:
        True если raw удовлетворяет предикату подмножества
    """
    return _PREDICATES[subset](raw)


def is_raw_int(raw: object) -> bool:
    """int, но не bool."""
    return isinstance(raw, int) and not isinstance(raw, bool)


def check_raw(subset: Subset, width: Width, raw: object) -> int:
    """
    Проверка raw значения на границе конструирования.

    Порядок проверок:
    1. Тип: только int (bool отклоняется)
    2. Предикат подмножества → OutOfRange
    3. Нативный диапазон хранения → Overflow / Underflow

    Args:
        subset: Целевое подмножество
        width: Целевая разрядность
        raw: Входное значение

    Returns:
        raw как int

    Raises:
        TypeError: Если raw не int
        OutOfRange: Если raw вне подмножества
        Overflow: Если raw больше максимума хранения
        Underflow: Если raw меньше минимума хранения
    """
    if not is_raw_int(raw):
        raise TypeError(f"Raw value must be int, got {type(raw).__name__}")

    if not validate(subset, width, raw):
        raise OutOfRange(
            f"Value {raw} is outside subset {subset.value}",
            subset=subset.value,
            width=width.bits,
            value=raw,
        )

    lo, hi = storage_range(subset, width)
    if raw > hi:
        raise Overflow(
            f"Value {raw} exceeds {width.bits}-bit {subset.storage.value.lower()} "
            f"maximum {hi}",
            subset=subset.value,
            width=width.bits,
            value=raw,
        )
    if raw < lo:
        raise Underflow(
            f"Value {raw} is below {width.bits}-bit {subset.storage.value.lower()} "
            f"minimum {lo}",
            subset=subset.value,
            width=width.bits,
            value=raw,
        )

    return raw
