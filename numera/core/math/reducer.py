"""
Rational Reducer — приведение пары (числитель, знаменатель) к несократимому виду

Шаги:
1. Знаменатель 0 → DivisionByZero
2. Знаменатель < 0 → отрицание числителя и знаменателя
   (Overflow, если один из них равен минимуму разрядности)
3. g = gcd(|числитель|, знаменатель); g >= 1
4. Деление обоих на g (всегда точное)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ результата:
1. denominator > 0
2. gcd(|numerator|, denominator) == 1
3. 0 / d → 0 / 1 (gcd(0, d) = d)
"""

from numera.core.errors import DivisionByZero
from numera.core.math.checked import fit_result, negate_signed
from numera.core.math.number_theory import exact_quotient, gcd
from numera.core.math.sets import Subset, Width


def reduce_parts(numerator: int, denominator: int, width: Width) -> tuple[int, int]:
    """
    Несократимая пара с положительным знаменателем.

    Args:
        numerator: Числитель (знаковый, в пределах width)
        denominator: Знаменатель (знаковый, в пределах width)
        width: Разрядность обоих компонентов

    Returns:
        (numerator, denominator) в несократимом виде

    Raises:
        DivisionByZero: Если denominator == 0
        Overflow: Если отрицание знаменателя или числителя непредставимо

    Examples:
        >>> reduce_parts(6, -4, Width.W8)
        (-3, 2)
        >>> reduce_parts(0, 98, Width.W8)
        (0, 1)
    """
    if denominator == 0:
        raise DivisionByZero(
            f"Rational {numerator}/0 has a zero denominator",
            width=width.bits,
            value=numerator,
        )

    if denominator < 0:
        numerator = negate_signed(numerator, width, "numerator negation")
        denominator = negate_signed(denominator, width, "denominator negation")

    return lowest_terms(numerator, denominator)


def lowest_terms(numerator: int, denominator: int, operation: str = "rational") -> tuple[int, int]:
    """
    Несократимая пара для произвольных int (без ограничения разрядности).

    Знак переносится в числитель обычным отрицанием; проверку разрядности
    выполняет вызывающий код (fit_parts()).

    Raises:
        DivisionByZero: Если denominator == 0

    Examples:
        >>> lowest_terms(-256, -6)
        (128, 3)
    """
    if denominator == 0:
        raise DivisionByZero(
            f"{operation} {numerator}/0 has a zero denominator",
            value=numerator,
        )
    if denominator < 0:
        numerator, denominator = -numerator, -denominator

    divisor = gcd(abs(numerator), denominator)
    return exact_quotient(numerator, divisor), exact_quotient(denominator, divisor)


def fit_parts(numerator: int, denominator: int, width: Width, operation: str = "rational") -> tuple[int, int]:
    """
    Проверка компонентов на разрядность: числитель Integer, знаменатель ZeroFree.

    Raises:
        Overflow / Underflow: Компонент вне диапазона хранения
    """
    return (
        fit_result(numerator, Subset.UNCONSTRAINED, width, f"{operation} numerator"),
        fit_result(denominator, Subset.ZERO_FREE, width, f"{operation} denominator"),
    )


def is_reduced_parts(numerator: int, denominator: int) -> bool:
    """Пара уже в несократимом виде с положительным знаменателем."""
    return denominator > 0 and gcd(abs(numerator), denominator) == 1
