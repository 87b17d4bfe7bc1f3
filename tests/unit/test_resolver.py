"""
Тесты для Operator Resolver

Проверяет:
1. Матрицу поддерживаемых комбинаций
2. Подмножества результатов (closure rules)
3. Объявленные отказы == наблюдаемые отказы (исчерпывающе на 8 битах)
4. Порядок отказов DivisionByZero → Overflow → Underflow → SubsetViolation
5. Корректность результата относительно точной математики
"""

import pytest

from numera.core.errors import (
    DivisionByZero,
    FailureKind,
    NumeraError,
    Overflow,
    SubsetViolation,
    Underflow,
)
from numera.core.math.predicates import validate
from numera.core.math.resolver import Operator, OperatorRule, evaluate, resolve, supported_rules
from numera.core.math.sets import Subset, Width, storage_range, subset_bounds

Z = Subset.UNCONSTRAINED
ZF = Subset.ZERO_FREE
NN = Subset.NON_NEGATIVE
NP = Subset.NON_POSITIVE
N = Subset.NEGATIVE
P = Subset.POSITIVE


def _domain(subset: Subset) -> range:
    lo, hi = subset_bounds(subset, Width.W8)
    return range(lo, hi + 1)


def _reference(operator: Operator, lhs: int, rhs: int) -> int:
    """Точный результат через независимую формулу (малые int)."""
    if operator is Operator.ADD:
        return lhs + rhs
    if operator is Operator.SUB:
        return lhs - rhs
    if operator is Operator.MUL:
        return lhs * rhs
    quotient = int(lhs / rhs)
    if operator is Operator.DIV:
        return quotient
    return lhs - rhs * quotient


# =============================================================================
# MATRIX
# =============================================================================


class TestResolve:
    """Тесты для resolve()"""

    @pytest.mark.parametrize(
        "operator, lhs, rhs, result",
        [
            (Operator.ADD, Z, Z, Z),
            (Operator.DIV, ZF, ZF, ZF),
            (Operator.SUB, NN, NN, NN),
            (Operator.REM, P, P, P),
            (Operator.ADD, NP, NP, NP),
            (Operator.SUB, N, N, N),
            (Operator.ADD, P, NN, P),
            (Operator.ADD, NN, P, P),
            (Operator.MUL, P, NN, P),
            (Operator.MUL, NN, P, P),
        ],
    )
    def test_binary_result_subset(
        self, operator: Operator, lhs: Subset, rhs: Subset, result: Subset
    ) -> None:
        rule = resolve(operator, lhs, rhs)
        assert rule is not None
        assert rule.result is result

    @pytest.mark.parametrize(
        "lhs, result",
        [(Z, Z), (ZF, ZF), (NN, NP), (P, N), (NP, NN), (N, P)],
    )
    def test_negation_result_subset(self, lhs: Subset, result: Subset) -> None:
        rule = resolve(Operator.NEG, lhs)
        assert rule is not None
        assert rule.result is result

    @pytest.mark.parametrize(
        "operator, lhs, rhs",
        [
            (Operator.MUL, NP, NP),
            (Operator.DIV, NP, NP),
            (Operator.MUL, N, N),
            (Operator.DIV, N, N),
            (Operator.SUB, P, NN),
            (Operator.DIV, P, NN),
            (Operator.ADD, P, Z),
            (Operator.ADD, N, P),
        ],
    )
    def test_unsupported(self, operator: Operator, lhs: Subset, rhs: Subset) -> None:
        assert resolve(operator, lhs, rhs) is None

    def test_arity_mismatch(self) -> None:
        assert resolve(Operator.ADD, P) is None
        assert resolve(Operator.NEG, P, P) is None

    def test_dividing_operators(self) -> None:
        assert [op for op in Operator if op.divides] == [Operator.DIV, Operator.REM]

    def test_closed_rules(self) -> None:
        assert resolve(Operator.ADD, Z, Z).is_closed
        assert not resolve(Operator.NEG, P).is_closed
        assert not resolve(Operator.ADD, P, NN).is_closed

    def test_can_fail(self) -> None:
        """Отрицание Positive и NonPositive всегда успешно"""
        assert not resolve(Operator.NEG, P).can_fail
        assert not resolve(Operator.NEG, NP).can_fail
        assert resolve(Operator.NEG, N).can_fail

    def test_supported_rules_unique(self) -> None:
        rules = supported_rules()
        keys = {(rule.operator, rule.lhs, rule.rhs) for rule in rules}
        assert len(keys) == len(rules)


# =============================================================================
# EXHAUSTIVE 8-BIT CHECK
# =============================================================================


class TestEvaluateExhaustive:
    """Все пары операндов на 8 битах для каждого правила"""

    @pytest.mark.parametrize(
        "rule",
        supported_rules(),
        ids=lambda r: f"{r.operator.value}-{r.lhs.value}-{r.rhs.value if r.rhs else ''}",
    )
    def test_declared_failures_match_observed(self, rule: OperatorRule) -> None:
        observed: set[FailureKind] = set()
        lo, hi = storage_range(rule.result, Width.W8)
        rhs_values = [None] if rule.rhs is None else list(_domain(rule.rhs))

        for lhs in _domain(rule.lhs):
            for rhs in rhs_values:
                try:
                    result = evaluate(rule, Width.W8, lhs, rhs)
                except NumeraError as error:
                    observed.add(error.kind)
                    continue

                expected = -lhs if rhs is None else _reference(rule.operator, lhs, rhs)
                assert result == expected
                assert lo <= result <= hi
                assert validate(rule.result, Width.W8, result)

        assert observed == set(rule.failures)


class TestEvaluateOrdering:
    """Порядок классификации отказов"""

    def test_division_by_zero_first(self) -> None:
        rule = resolve(Operator.DIV, Z, Z)
        with pytest.raises(DivisionByZero):
            evaluate(rule, Width.W8, -128, 0)

    def test_minimum_divided_by_minus_one(self) -> None:
        rule = resolve(Operator.DIV, Z, Z)
        with pytest.raises(Overflow):
            evaluate(rule, Width.W8, -128, -1)

    @pytest.mark.parametrize("lhs_subset", [Z, ZF, NP, N])
    def test_minimum_remainder_minus_one(self, lhs_subset: Subset) -> None:
        """MIN % -1 отказывает так же, как MIN / -1"""
        rule = resolve(Operator.REM, lhs_subset, lhs_subset)
        with pytest.raises(Overflow):
            evaluate(rule, Width.W8, -128, -1)

    @pytest.mark.parametrize("width", [Width.W16, Width.W64, Width.W128])
    def test_minimum_remainder_minus_one_wide(self, width: Width) -> None:
        rule = resolve(Operator.REM, Z, Z)
        minimum = width.signed_range()[0]
        with pytest.raises(Overflow):
            evaluate(rule, width, minimum, -1)
        assert evaluate(rule, width, minimum + 1, -1) == 0

    def test_remainder_by_zero_before_overflow(self) -> None:
        rule = resolve(Operator.REM, Z, Z)
        with pytest.raises(DivisionByZero):
            evaluate(rule, Width.W8, -128, 0)

    def test_overflow_before_subset_violation(self) -> None:
        """0 - (-128) = 128: вне i8 и вне NonPositive → Overflow"""
        rule = resolve(Operator.SUB, NP, NP)
        with pytest.raises(Overflow):
            evaluate(rule, Width.W8, 0, -128)

    def test_subset_violation(self) -> None:
        rule = resolve(Operator.SUB, P, P)
        with pytest.raises(SubsetViolation):
            evaluate(rule, Width.W8, 3, 5)

    def test_non_negative_subtraction_underflow(self) -> None:
        rule = resolve(Operator.SUB, NN, NN)
        with pytest.raises(Underflow):
            evaluate(rule, Width.W8, 3, 5)

    def test_binary_rule_requires_rhs(self) -> None:
        with pytest.raises(ValueError):
            evaluate(resolve(Operator.ADD, Z, Z), Width.W8, 1)

    def test_wide_width(self) -> None:
        rule = resolve(Operator.MUL, Z, Z)
        assert evaluate(rule, Width.W128, 2**63, 2**63) == 2**126
        with pytest.raises(Overflow):
            evaluate(rule, Width.W128, 2**64, 2**63)
