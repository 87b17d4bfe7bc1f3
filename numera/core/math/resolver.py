"""
Operator Resolver — матрица операторов над подмножествами

Для каждого оператора и пары подмножеств операндов определяет:
- подмножество результата (closure rule)
- может ли операция отказать и какими FailureKind

Поддерживаемая матрица (операнды одной разрядности):

    lhs \\ op                  +    -    *    /    %    unary -
    UNCONSTRAINED (same)      Z    Z    Z    Z    Z    Z
    ZERO_FREE (same)          ZF   ZF   ZF   ZF   ZF   ZF
    NON_NEGATIVE (same)       NN   NN   NN   NN   NN   NP
    POSITIVE (same)           P    P    P    P    P    N
    NON_POSITIVE (same)       NP   NP   -    -    NP   NN
    NEGATIVE (same)           N    N    -    -    N    P
    POSITIVE x NON_NEGATIVE   P    -    P    -    -    -

Умножение и деление NON_POSITIVE / NEGATIVE не реализованы: замыкание для них
не определено, resolve() возвращает None.

Порядок отказов в evaluate():
    DivisionByZero → Overflow → Underflow → SubsetViolation

Знаковый MIN / -1 и MIN % -1 — Overflow до вычисления результата.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Final, Optional

from numera.core.errors import FailureKind
from numera.core.math.checked import fit_result, guard_division
from numera.core.math.rounding import Rounding, divide, remainder
from numera.core.math.sets import Subset, Width


# =============================================================================
# OPERATORS
# =============================================================================


class Operator(str, Enum):
    """Арифметический оператор."""

    ADD = "ADD"
    SUB = "SUB"
    MUL = "MUL"
    DIV = "DIV"
    REM = "REM"
    NEG = "NEG"

    @property
    def is_unary(self) -> bool:
        return self is Operator.NEG

    @property
    def divides(self) -> bool:
        return self in (Operator.DIV, Operator.REM)


_BINARY: Final[dict[Operator, Callable[[int, int], int]]] = {
    Operator.ADD: lambda a, b: a + b,
    Operator.SUB: lambda a, b: a - b,
    Operator.MUL: lambda a, b: a * b,
}

_DIVIDING: Final[dict[Operator, Callable[[int, int, Rounding], int]]] = {
    Operator.DIV: divide,
    Operator.REM: remainder,
}


# =============================================================================
# RULES
# =============================================================================


@dataclass(frozen=True)
class OperatorRule:
    """Правило оператора для пары подмножеств."""

    operator: Operator
    lhs: Subset
    rhs: Optional[Subset]  # None для NEG
    result: Subset
    failures: frozenset[FailureKind]

    @property
    def can_fail(self) -> bool:
        return bool(self.failures)

    @property
    def is_closed(self) -> bool:
        """Результат в том же подмножестве, что и операнды."""
        return self.result is self.lhs and self.rhs in (None, self.lhs)


_OVF = FailureKind.OVERFLOW
_UNF = FailureKind.UNDERFLOW
_VIOL = FailureKind.SUBSET_VIOLATION
_DIV0 = FailureKind.DIVISION_BY_ZERO

_Z = Subset.UNCONSTRAINED
_ZF = Subset.ZERO_FREE
_NN = Subset.NON_NEGATIVE
_NP = Subset.NON_POSITIVE
_N = Subset.NEGATIVE
_P = Subset.POSITIVE


def _rule(
    operator: Operator,
    lhs: Subset,
    rhs: Optional[Subset],
    result: Subset,
    *failures: FailureKind,
) -> OperatorRule:
    return OperatorRule(operator, lhs, rhs, result, frozenset(failures))


_ADD, _SUB, _MUL, _DIV, _REM, _NEG = Operator

# Отказы, которые реально достижимы для правила (проверяется исчерпывающе на 8 битах)
_RULE_TABLE: Final[tuple[OperatorRule, ...]] = (
    # ℤ
    _rule(_ADD, _Z, _Z, _Z, _OVF, _UNF),
    _rule(_SUB, _Z, _Z, _Z, _OVF, _UNF),
    _rule(_MUL, _Z, _Z, _Z, _OVF, _UNF),
    _rule(_DIV, _Z, _Z, _Z, _DIV0, _OVF),  # MIN / -1
    _rule(_REM, _Z, _Z, _Z, _DIV0, _OVF),  # MIN % -1
    _rule(_NEG, _Z, None, _Z, _OVF),
    # ℤ ∖ {0}
    _rule(_ADD, _ZF, _ZF, _ZF, _OVF, _UNF, _VIOL),
    _rule(_SUB, _ZF, _ZF, _ZF, _OVF, _UNF, _VIOL),
    _rule(_MUL, _ZF, _ZF, _ZF, _OVF, _UNF),
    _rule(_DIV, _ZF, _ZF, _ZF, _OVF, _VIOL),  # |a| < |b| → 0
    _rule(_REM, _ZF, _ZF, _ZF, _OVF, _VIOL),
    _rule(_NEG, _ZF, None, _ZF, _OVF),
    # ℤ≥0 (беззнаковое хранение)
    _rule(_ADD, _NN, _NN, _NN, _OVF),
    _rule(_SUB, _NN, _NN, _NN, _UNF),
    _rule(_MUL, _NN, _NN, _NN, _OVF),
    _rule(_DIV, _NN, _NN, _NN, _DIV0),
    _rule(_REM, _NN, _NN, _NN, _DIV0),
    _rule(_NEG, _NN, None, _NP, _UNF),
    # ℤ>0
    _rule(_ADD, _P, _P, _P, _OVF),
    _rule(_SUB, _P, _P, _P, _VIOL),
    _rule(_MUL, _P, _P, _P, _OVF),
    _rule(_DIV, _P, _P, _P, _VIOL),
    _rule(_REM, _P, _P, _P, _VIOL),
    _rule(_NEG, _P, None, _N),
    # ℤ≤0
    _rule(_ADD, _NP, _NP, _NP, _UNF),
    _rule(_SUB, _NP, _NP, _NP, _OVF, _VIOL),
    _rule(_REM, _NP, _NP, _NP, _DIV0, _OVF),
    _rule(_NEG, _NP, None, _NN),
    # ℤ<0
    _rule(_ADD, _N, _N, _N, _UNF),
    _rule(_SUB, _N, _N, _N, _VIOL),
    _rule(_REM, _N, _N, _N, _OVF, _VIOL),
    _rule(_NEG, _N, None, _P, _OVF),
    # ℤ>0 с ℤ≥0: результат в более строгом подмножестве
    _rule(_ADD, _P, _NN, _P, _OVF),
    _rule(_ADD, _NN, _P, _P, _OVF),
    _rule(_MUL, _P, _NN, _P, _OVF, _VIOL),  # нулевой множитель
    _rule(_MUL, _NN, _P, _P, _OVF, _VIOL),
)

_RULES: Final[dict[tuple[Operator, Subset, Optional[Subset]], OperatorRule]] = {
    (rule.operator, rule.lhs, rule.rhs): rule for rule in _RULE_TABLE
}


def resolve(
    operator: Operator, lhs: Subset, rhs: Optional[Subset] = None
) -> Optional[OperatorRule]:
    """
    Правило для оператора и пары подмножеств.

    Args:
        operator: Оператор
        lhs: Подмножество левого операнда
        rhs: Подмножество правого операнда (None для NEG)

    Returns:
        OperatorRule или None, если комбинация не поддерживается
    """
    if operator.is_unary != (rhs is None):
        return None
    return _RULES.get((operator, lhs, rhs))


def supported_rules() -> tuple[OperatorRule, ...]:
    """Все поддерживаемые правила в порядке объявления."""
    return _RULE_TABLE


# =============================================================================
# EVALUATION
# =============================================================================


def evaluate(
    rule: OperatorRule,
    width: Width,
    lhs_raw: int,
    rhs_raw: Optional[int] = None,
    rounding: Rounding = Rounding.TRUNC,
) -> int:
    """
    Точное вычисление оператора с проверкой результата.

    Args:
        rule: Правило из resolve()
        width: Общая разрядность операндов и результата
        lhs_raw: Raw значение левого операнда
        rhs_raw: Raw значение правого операнда (None для NEG)
        rounding: Округление частного для DIV / REM; rule.failures
            описывают режим TRUNC

    Returns:
        Raw значение результата, принадлежащее (rule.result, width)

    Raises:
        DivisionByZero: Делитель равен 0
        Overflow: Результат больше максимума хранения результата,
            а также знаковый MIN, делённый на -1 (частное и остаток)
        Underflow: Результат меньше минимума хранения результата
        SubsetViolation: Результат вне подмножества результата
    """
    operator = rule.operator
    operation = operator.value.lower()

    if operator.is_unary:
        exact = -lhs_raw
    elif rhs_raw is None:
        raise ValueError(f"Operator {operator.value} requires two operands")
    elif operator.divides:
        guard_division(lhs_raw, rhs_raw, width, operation)
        exact = _DIVIDING[operator](lhs_raw, rhs_raw, Rounding(rounding))
    else:
        exact = _BINARY[operator](lhs_raw, rhs_raw)

    return fit_result(exact, rule.result, width, operation)
