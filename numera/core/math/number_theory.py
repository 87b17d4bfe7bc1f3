"""
Number Theory — целочисленные свойства raw значений

Чётность, кратность, НОД, НОК и целые квадратные корни. Все функции чистые.
"""

import math

from numera.core.errors import DivisionByZero, OutOfRange


def is_even(value: int) -> bool:
    return value % 2 == 0


def is_multiple_of(value: int, other: int) -> bool:
    """
    Кратно ли value числу other.

    0 кратен только 0 (0 = 0 * k), любое другое value нулю не кратно.
    """
    if other == 0:
        return value == 0
    return value % other == 0


def gcd(lhs: int, rhs: int) -> int:
    """
    Наибольший общий делитель, всегда >= 0.

    gcd(0, d) == |d| по определению; gcd(0, 0) == 0.
    """
    return math.gcd(lhs, rhs)


def lcm(lhs: int, rhs: int) -> int:
    """Наименьшее общее кратное, всегда >= 0; lcm с нулём равен 0."""
    if lhs == 0 or rhs == 0:
        return 0
    return abs(lhs * rhs) // gcd(lhs, rhs)


def exact_quotient(value: int, divisor: int) -> int:
    """
    Деление без остатка (divisor гарантированно делит value).

    Raises:
        DivisionByZero: Если divisor == 0
        ValueError: Если деление не точное
    """
    if divisor == 0:
        raise DivisionByZero(f"Exact division of {value} by zero", value=value)
    quotient, remainder = divmod(value, divisor)
    if remainder != 0:
        raise ValueError(f"{divisor} does not divide {value}")
    return quotient


# =============================================================================
# SQUARE ROOTS
# =============================================================================


def _require_non_negative(value: int, operation: str) -> None:
    if value < 0:
        raise OutOfRange(f"{operation} of negative value {value}", value=value)


def is_square(value: int) -> bool:
    """Полный квадрат; отрицательные значения квадратами не являются."""
    return value >= 0 and math.isqrt(value) ** 2 == value


def sqrt_floor(value: int) -> int:
    """
    Целая часть квадратного корня.

    Raises:
        OutOfRange: Если value < 0
    """
    _require_non_negative(value, "sqrt_floor")
    return math.isqrt(value)


def sqrt_ceil(value: int) -> int:
    """Наименьшее r с r * r >= value."""
    _require_non_negative(value, "sqrt_ceil")
    root = math.isqrt(value)
    return root if root * root == value else root + 1


def sqrt_round(value: int) -> int:
    """
    Корень, округлённый к ближайшему целому.

    Равноудалённых случаев нет: value - r² и (r + 1)² - value
    различаются по чётности.

    Examples:
        >>> [sqrt_round(v) for v in (12, 13, 20, 21)]
        [3, 4, 4, 5]
    """
    _require_non_negative(value, "sqrt_round")
    root = math.isqrt(value)
    if value - root * root >= (root + 1) ** 2 - value:
        return root + 1
    return root
