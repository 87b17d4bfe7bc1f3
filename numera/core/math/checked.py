"""
Checked Arithmetic — точная целочисленная арифметика с явными отказами

Все вычисления выполняются точно (int Python не переполняется), после чего
результат проверяется на попадание в диапазон хранения и в подмножество
результата. Wraparound никогда не выполняется.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Деление и остаток — усечённые (к нулю), знак остатка совпадает со знаком делимого
2. Порядок классификации: Overflow → Underflow → SubsetViolation
3. Знаковый MIN, делённый на -1, — Overflow и для частного, и для остатка
4. Функции не имеют побочных эффектов
"""

from numera.core.errors import DivisionByZero, Overflow, SubsetViolation, Underflow
from numera.core.math.predicates import is_raw_int, validate
from numera.core.math.sets import Subset, Width, storage_range


# =============================================================================
# TRUNCATED DIVISION
# =============================================================================


def div_trunc(lhs: int, rhs: int) -> int:
    """
    Усечённое деление (округление к нулю).

    В отличие от `//` Python (floor): div_trunc(-7, 2) == -3.

    Raises:
        DivisionByZero: Если rhs == 0
    """
    if rhs == 0:
        raise DivisionByZero(f"Division of {lhs} by zero", value=lhs)

    quotient = abs(lhs) // abs(rhs)
    if (lhs < 0) != (rhs < 0):
        return -quotient
    return quotient


def rem_trunc(lhs: int, rhs: int) -> int:
    """
    Остаток усечённого деления: lhs == rhs * div_trunc(lhs, rhs) + rem_trunc(lhs, rhs).

    Examples:
        >>> rem_trunc(-7, 3)
        -1
        >>> rem_trunc(7, -3)
        1
    """
    if rhs == 0:
        raise DivisionByZero(f"Remainder of {lhs} by zero", value=lhs)
    return lhs - rhs * div_trunc(lhs, rhs)


def guard_division(lhs: int, rhs: int, width: Width, operation: str = "division") -> None:
    """
    Отказы делителя, предшествующие вычислению частного или остатка.

    MIN / -1 и MIN % -1 отказывают одинаково: аппаратное частное
    не представимо, поэтому и остаток не вычисляется.

    Raises:
        DivisionByZero: Если rhs == 0
        Overflow: Если lhs — знаковый минимум разрядности, а rhs == -1
    """
    if rhs == 0:
        raise DivisionByZero(f"{operation} of {lhs} by zero", value=lhs)

    signed_min = width.signed_range()[0]
    if lhs == signed_min and rhs == -1:
        raise Overflow(
            f"{operation} of {width.bits}-bit minimum {lhs} by -1 overflows",
            width=width.bits,
            value=lhs,
        )


# =============================================================================
# RESULT CLASSIFICATION
# =============================================================================


def fit_result(value: int, subset: Subset, width: Width, operation: str = "result") -> int:
    """
    Проверка точного результата на представимость в (subset, width).

    Args:
        value: Точный математический результат
        subset: Подмножество результата
        width: Разрядность результата
        operation: Имя операции для сообщения об ошибке

    Returns:
        value без изменений

    Raises:
        Overflow: value больше максимума хранения
        Underflow: value меньше минимума хранения
        SubsetViolation: value представимо, но вне подмножества
    """
    lo, hi = storage_range(subset, width)

    if value > hi:
        raise Overflow(
            f"{operation} {value} exceeds {width.bits}-bit maximum {hi}",
            subset=subset.value,
            width=width.bits,
            value=value,
        )
    if value < lo:
        raise Underflow(
            f"{operation} {value} is below {width.bits}-bit minimum {lo}",
            subset=subset.value,
            width=width.bits,
            value=value,
        )
    if not validate(subset, width, value):
        raise SubsetViolation(
            f"{operation} {value} is outside subset {subset.value}",
            subset=subset.value,
            width=width.bits,
            value=value,
        )

    return value


def fit_power(base: int, exponent: int, subset: Subset, width: Width) -> int:
    """
    base ** exponent с проверкой fit_result.

    При |base| >= 2 и exponent > width.bits модуль степени больше 2^bits,
    и отказ определяется без вычисления степени.

    Raises:
        TypeError: Если exponent не int
        ValueError: Если exponent < 0
        Overflow / Underflow / SubsetViolation: как у fit_result()
    """
    if not is_raw_int(exponent):
        raise TypeError(f"Exponent must be int, got {type(exponent).__name__}")
    if exponent < 0:
        raise ValueError(f"Exponent must be non-negative, got {exponent}")

    if abs(base) >= 2 and exponent > width.bits:
        lo, hi = storage_range(subset, width)
        if base < 0 and exponent % 2 == 1:
            raise Underflow(
                f"pow {base}^{exponent} is below {width.bits}-bit minimum {lo}",
                subset=subset.value,
                width=width.bits,
            )
        raise Overflow(
            f"pow {base}^{exponent} exceeds {width.bits}-bit maximum {hi}",
            subset=subset.value,
            width=width.bits,
        )

    return fit_result(base**exponent, subset, width, "pow")


def negate_signed(value: int, width: Width, operation: str = "negation") -> int:
    """
    Знаковое отрицание в пределах разрядности.

    Raises:
        Overflow: Для минимума разрядности (у -MIN нет пары)
    """
    return fit_result(-value, Subset.UNCONSTRAINED, width, operation)
