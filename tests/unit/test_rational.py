"""
Тесты для Rational Reducer и Rational

Проверяет:
1. reduce(): нормализация знака, сокращение, отказы
2. Идемпотентность сокращения (исчерпывающе на 8 битах)
3. Валидацию прямого конструктора
4. Арифметику дробей и помещаемость результата
5. Запросы is_integer / is_proper / inverted
"""

import pytest
from pydantic import ValidationError

from numera.core.domain import (
    Integer8,
    Integer16,
    NonNegative8,
    Positive8,
    Rational8,
    Rational16,
    ZeroFree8,
    rational_type,
    reduce,
)
from numera.core.errors import DivisionByZero, NumeraError, Overflow, Underflow
from numera.core.math.number_theory import gcd
from numera.core.math.sets import Width

# =============================================================================
# REDUCER
# =============================================================================


class TestReduce:
    """Тесты для reduce()"""

    def test_sign_normalized_and_reduced(self) -> None:
        result = reduce(Integer8.new(6), ZeroFree8.new(-4))
        assert type(result) is Rational8
        assert result.num == Integer8.new(-3)
        assert result.den == ZeroFree8.new(2)

    def test_zero_numerator(self) -> None:
        result = reduce(Integer8.new(0), ZeroFree8.new(98))
        assert (result.numerator, result.denominator) == (0, 1)

    def test_zero_denominator(self) -> None:
        with pytest.raises(DivisionByZero):
            reduce(Integer8.new(5), Integer8.new(0))

    def test_numerator_minimum_negation(self) -> None:
        with pytest.raises(Overflow):
            reduce(Integer8.new(-128), ZeroFree8.new(-1))

    def test_denominator_minimum_negation(self) -> None:
        with pytest.raises(Overflow):
            reduce(Integer8.new(4), ZeroFree8.new(-128))

    def test_width_mismatch(self) -> None:
        with pytest.raises(TypeError):
            reduce(Integer8.new(1), Integer16.new(2))

    def test_wrong_subset(self) -> None:
        with pytest.raises(TypeError):
            reduce(Positive8.new(1), ZeroFree8.new(2))
        with pytest.raises(TypeError):
            reduce(Integer8.new(1), Positive8.new(2))

    def test_idempotent_exhaustive_8(self) -> None:
        """reduce(reduce(n, d)) == reduce(n, d); результат несократим"""
        for n in range(-128, 128):
            for d in range(-128, 128):
                if d == 0:
                    continue
                try:
                    first = reduce(Integer8.new(n), ZeroFree8.new(d))
                except NumeraError:
                    continue
                assert first.denominator > 0
                assert gcd(abs(first.numerator), first.denominator) == 1
                assert first.numerator * d == n * first.denominator
                assert reduce(first.num, first.den) == first

    def test_rational_type_lookup(self) -> None:
        assert rational_type(Width.W8) is Rational8
        assert rational_type(Width.W16) is Rational16


# =============================================================================
# MODEL
# =============================================================================


class TestRationalModel:
    """Тесты конструирования Rational"""

    def test_new(self) -> None:
        value = Rational8.new(6, 8)
        assert (value.numerator, value.denominator) == (3, 4)

    def test_new_integer(self) -> None:
        assert Rational8.new(3).is_integer()

    def test_new_zero_denominator(self) -> None:
        with pytest.raises(DivisionByZero):
            Rational8.new(1, 0)

    def test_new_component_out_of_width(self) -> None:
        with pytest.raises(Overflow):
            Rational8.new(200, 1)

    def test_direct_construction_reduced(self) -> None:
        assert Rational8(num=Integer8.new(3), den=ZeroFree8.new(4)) == Rational8.new(3, 4)

    def test_direct_construction_unreduced(self) -> None:
        with pytest.raises(ValidationError):
            Rational8(num=Integer8.new(2), den=ZeroFree8.new(4))

    def test_direct_construction_negative_denominator(self) -> None:
        with pytest.raises(ValidationError):
            Rational8(num=Integer8.new(1), den=ZeroFree8.new(-2))

    def test_direct_construction_wrong_width(self) -> None:
        with pytest.raises(ValidationError):
            Rational8(num=Integer16.new(1), den=ZeroFree8.new(1))

    def test_from_integer(self) -> None:
        assert Rational8.from_integer(Positive8.new(5)) == Rational8.new(5)
        with pytest.raises(Overflow):
            Rational8.from_integer(NonNegative8.new(200))

    def test_identities(self) -> None:
        assert Rational8.zero().is_zero()
        assert Rational8.one() == Rational8.new(1)

    def test_hashable(self) -> None:
        assert len({Rational8.new(1, 2), Rational8.new(2, 4)}) == 1


# =============================================================================
# QUERIES
# =============================================================================


class TestRationalQueries:
    """Тесты для is_proper / is_improper / is_reduced / inverted"""

    def test_proper(self) -> None:
        assert Rational8.new(3, 4).is_proper()
        assert Rational8.new(-3, 4).is_proper()
        assert Rational8.new(5, 4).is_improper()
        assert Rational8.new(1).is_improper()

    def test_is_reduced(self) -> None:
        assert Rational8.new(6, 4).is_reduced()

    def test_inverted(self) -> None:
        assert Rational8.new(-3, 4).inverted() == Rational8.new(-4, 3)
        assert Rational8.new(5).inverted() == Rational8.new(1, 5)

    def test_inverted_zero(self) -> None:
        with pytest.raises(DivisionByZero):
            Rational8.zero().inverted()

    def test_inverted_minimum(self) -> None:
        with pytest.raises(Overflow):
            Rational8.new(-128).inverted()


# =============================================================================
# ARITHMETIC
# =============================================================================


class TestRationalArithmetic:
    """Тесты для + - * / и унарного минуса"""

    def test_add(self) -> None:
        assert Rational8.new(1, 2) + Rational8.new(1, 3) == Rational8.new(5, 6)

    def test_sub(self) -> None:
        assert Rational8.new(1, 2) - Rational8.new(1, 3) == Rational8.new(1, 6)

    def test_mul(self) -> None:
        assert Rational8.new(2, 3) * Rational8.new(3, 4) == Rational8.new(1, 2)

    def test_div(self) -> None:
        assert Rational8.new(1, 2) / Rational8.new(1, 4) == Rational8.new(2)
        assert Rational8.new(1, 2) / Rational8.new(-1, 4) == Rational8.new(-2)

    def test_div_by_zero(self) -> None:
        with pytest.raises(DivisionByZero):
            Rational8.new(1, 2) / Rational8.zero()

    def test_neg(self) -> None:
        assert -Rational8.new(1, 2) == Rational8.new(-1, 2)
        with pytest.raises(Overflow):
            -Rational8.new(-128)

    def test_intermediate_reduced_before_fit(self) -> None:
        """1/120 + 1/120 = 240/14400 → 1/60"""
        assert Rational8.new(1, 120) + Rational8.new(1, 120) == Rational8.new(1, 60)

    def test_overflow(self) -> None:
        with pytest.raises(Overflow):
            Rational8.new(100) + Rational8.new(100)

    def test_underflow(self) -> None:
        with pytest.raises(Underflow):
            Rational8.new(-100) + Rational8.new(-100)

    def test_denominator_overflow(self) -> None:
        with pytest.raises(Overflow):
            Rational8.new(1, 100) * Rational8.new(1, 3)

    def test_unsupported_operands(self) -> None:
        with pytest.raises(TypeError):
            Rational8.new(1) + Rational16.new(1)
        with pytest.raises(TypeError):
            Rational8.new(1) + 1

    def test_ordering(self) -> None:
        assert Rational8.new(1, 3) < Rational8.new(1, 2)
        assert Rational8.new(-1, 2) < Rational8.zero()
        assert Rational8.new(2, 4) >= Rational8.new(1, 2)
