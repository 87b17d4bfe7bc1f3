"""
Тесты для маркеров возможностей
"""

import pytest

from numera.core.domain import (
    Bounded,
    CanNegative,
    CanPositive,
    Countable,
    HasNegOne,
    HasOne,
    HasZero,
    Integer8,
    Negative8,
    NonNegative8,
    NonNegative16,
    NonPositive8,
    NonZero,
    Positive8,
    Rational8,
    ZeroFree8,
    has_capability,
    integer_capabilities,
    registered_integer_types,
)
from numera.core.math.sets import Subset


class TestCapabilityRegistration:
    """Маркеры регистрируются выборочно по подмножествам"""

    def test_all_types_bounded_and_countable(self) -> None:
        for cls in registered_integer_types():
            assert issubclass(cls, Bounded)
            assert issubclass(cls, Countable)

    def test_zero(self) -> None:
        assert not isinstance(Positive8.new(3), HasZero)
        assert issubclass(NonNegative16, HasZero)
        assert issubclass(ZeroFree8, NonZero)
        assert not issubclass(Integer8, NonZero)

    @pytest.mark.parametrize(
        "cls, expected",
        [
            (Integer8, True),
            (ZeroFree8, True),
            (NonPositive8, True),
            (Negative8, True),
            (NonNegative8, False),
            (Positive8, False),
        ],
    )
    def test_neg_one(self, cls: type, expected: bool) -> None:
        assert issubclass(cls, HasNegOne) is expected

    def test_one(self) -> None:
        assert issubclass(Positive8, HasOne)
        assert not issubclass(Negative8, HasOne)
        assert not issubclass(NonPositive8, HasOne)

    def test_sign(self) -> None:
        assert not issubclass(Positive8, CanNegative)
        assert issubclass(Positive8, CanPositive)
        assert not has_capability(Negative8.new(-1), CanPositive)
        assert has_capability(Negative8, CanNegative)

    def test_markers_agree_with_class_queries(self) -> None:
        for cls in registered_integer_types():
            assert issubclass(cls, HasZero) is cls.can_zero()
            assert issubclass(cls, HasOne) is cls.can_one()
            assert issubclass(cls, HasNegOne) is cls.can_neg_one()
            assert issubclass(cls, CanNegative) is cls.can_negative()
            assert issubclass(cls, CanPositive) is cls.can_positive()

    def test_rational_not_countable(self) -> None:
        assert not issubclass(Rational8, Countable)

    def test_integer_capabilities(self) -> None:
        capabilities = integer_capabilities(Subset.NEGATIVE)
        assert NonZero in capabilities
        assert HasZero not in capabilities
        assert HasOne not in capabilities
