"""
Rounding Division — деление и остаток с выбором округления частного

Для каждого режима остаток согласован с частным:
    lhs == rhs * divide(lhs, rhs, mode) + remainder(lhs, rhs, mode)

    lhs  rhs   TRUNC  EUCLID  FLOOR  CEIL
     7    3      2      2       2      3
     7   -3     -2     -2      -3     -2
    -7    3     -2     -3      -3     -2
    -7   -3      2      3       2      3

Знак остатка:
- TRUNC: как у делимого
- EUCLID: всегда >= 0
- FLOOR: как у делителя
- CEIL: противоположный делителю
"""

from enum import Enum

from numera.core.errors import DivisionByZero
from numera.core.math.checked import div_trunc


class Rounding(str, Enum):
    """Режим округления частного."""

    TRUNC = "TRUNC"  # к нулю
    EUCLID = "EUCLID"  # остаток неотрицателен
    FLOOR = "FLOOR"  # к -∞
    CEIL = "CEIL"  # к +∞


def divide(lhs: int, rhs: int, rounding: Rounding = Rounding.TRUNC) -> int:
    """
    Частное с заданным округлением.

    Raises:
        DivisionByZero: Если rhs == 0

    Examples:
        >>> divide(-7, 3, Rounding.EUCLID)
        -3
        >>> divide(7, 3, Rounding.CEIL)
        3
    """
    if rhs == 0:
        raise DivisionByZero(f"Division of {lhs} by zero", value=lhs)

    if rounding is Rounding.TRUNC:
        return div_trunc(lhs, rhs)
    if rounding is Rounding.FLOOR:
        return lhs // rhs
    if rounding is Rounding.CEIL:
        return -(-lhs // rhs)
    # EUCLID: остаток в [0, |rhs|)
    return (lhs - lhs % abs(rhs)) // rhs


def remainder(lhs: int, rhs: int, rounding: Rounding = Rounding.TRUNC) -> int:
    """
    Остаток, согласованный с divide() того же режима.

    Raises:
        DivisionByZero: Если rhs == 0
    """
    return lhs - rhs * divide(lhs, rhs, rounding)
