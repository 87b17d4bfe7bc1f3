"""
Rational — дробь из ограниченных целых, всегда в несократимом виде

Числитель — Integer{w}, знаменатель — ZeroFree{w} той же разрядности.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. den > 0
2. gcd(|num|, den) == 1
3. Ноль хранится как 0/1

Знак знаменателя нормализуется ДО сокращения: reduce(-128, -2) на 8 битах
отказывает Overflow, хотя 64/1 представимо.

Арифметика (+ - * / унарный -) вычисляется точно, сокращается и только
затем проверяется на помещаемость в разрядность.
"""

from typing import Any, ClassVar, Final, Optional

from pydantic import BaseModel, model_validator

from numera.core.domain.integer import ConstrainedInteger, Integer, ZeroFreeInteger, integer_type
from numera.core.errors import NumeraError, deliver
from numera.core.math.reducer import fit_parts, is_reduced_parts, lowest_terms, reduce_parts
from numera.core.math.sets import Subset, Width


_RATIONAL_TYPES: Final[dict[Width, type["Rational"]]] = {}


def rational_type(width: Width) -> type["Rational"]:
    """Конкретный тип дроби для разрядности."""
    return _RATIONAL_TYPES[Width(width)]


# =============================================================================
# REDUCER
# =============================================================================


def reduce(numerator: Integer, denominator: ConstrainedInteger) -> "Rational":
    """
    Дробь numerator / denominator в несократимом виде.

    Args:
        numerator: Integer{w}
        denominator: ZeroFree{w} или Integer{w} той же разрядности

    Returns:
        Rational{w}

    Raises:
        TypeError: Неподходящие типы или разные разрядности
        DivisionByZero: denominator == 0
        Overflow: Отрицание числителя или знаменателя непредставимо

    Examples:
        >>> reduce(Integer8.new(6), ZeroFree8.new(-4))
        Rational8(num=Integer8(raw=-3), den=ZeroFree8(raw=2))
    """
    if not isinstance(numerator, Integer):
        raise TypeError(f"Numerator must be an Integer type, got {type(numerator).__name__}")
    if not isinstance(denominator, (Integer, ZeroFreeInteger)):
        raise TypeError(
            f"Denominator must be an Integer or ZeroFree type, got {type(denominator).__name__}"
        )
    if numerator.width is not denominator.width:
        raise TypeError(
            f"Numerator and denominator widths differ: "
            f"{numerator.width.bits} vs {denominator.width.bits}"
        )

    return rational_type(numerator.width)._from_parts(numerator.raw, denominator.raw)


# =============================================================================
# RATIONAL MODEL
# =============================================================================


class Rational(BaseModel):
    """
    Базовая модель несократимой дроби.

    Прямой вызов конструктора проверяется model validator'ом:
    Rational8(num=Integer8.new(2), den=ZeroFree8.new(4)) → ValidationError.
    """

    width: ClassVar[Width]

    num: Integer
    den: ZeroFreeInteger

    model_config = {"frozen": True}  # Immutable

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)
        if "width" in cls.__dict__:
            _RATIONAL_TYPES[cls.width] = cls

    @model_validator(mode="after")
    def validate_reduced(self) -> "Rational":
        """Компоненты нужной разрядности, den > 0, дробь несократима."""
        cls = type(self)
        if "width" not in cls.__dict__:
            raise ValueError(f"{cls.__name__} is abstract, use a sized type")
        if type(self.num) is not integer_type(Subset.UNCONSTRAINED, cls.width):
            raise ValueError(f"num must be Integer{cls.width.bits}, got {type(self.num).__name__}")
        if type(self.den) is not integer_type(Subset.ZERO_FREE, cls.width):
            raise ValueError(f"den must be ZeroFree{cls.width.bits}, got {type(self.den).__name__}")
        if not is_reduced_parts(self.num.raw, self.den.raw):
            raise ValueError(
                f"{self.num.raw}/{self.den.raw} is not reduced with a positive denominator"
            )
        return self

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def _trusted(cls, numerator: int, denominator: int) -> "Rational":
        return cls.model_construct(
            num=integer_type(Subset.UNCONSTRAINED, cls.width)._trusted(numerator),
            den=integer_type(Subset.ZERO_FREE, cls.width)._trusted(denominator),
        )

    @classmethod
    def _from_parts(cls, numerator: int, denominator: int) -> "Rational":
        """Сокращение raw пары, уже лежащей в знаковом диапазоне разрядности."""
        try:
            parts = reduce_parts(numerator, denominator, cls.width)
        except NumeraError as error:
            deliver(error)
        return cls._trusted(*parts)

    @classmethod
    def _from_exact(cls, numerator: int, denominator: int, operation: str) -> "Rational":
        """
        Точная дробь (произвольные int) → сокращение → проверка разрядности.

        Raises:
            DivisionByZero: denominator == 0
            Overflow / Underflow: Сокращённые компоненты не помещаются
        """
        try:
            numerator, denominator = fit_parts(
                *lowest_terms(numerator, denominator, operation), cls.width, operation
            )
        except NumeraError as error:
            deliver(error)
        return cls._trusted(numerator, denominator)

    @classmethod
    def new(cls, numerator: int, denominator: int = 1) -> "Rational":
        """
        Дробь из raw значений.

        Raises:
            TypeError: Не int
            Overflow / Underflow: Компонент вне разрядности
            DivisionByZero: denominator == 0
        """
        num = integer_type(Subset.UNCONSTRAINED, cls.width).new(numerator)
        den = integer_type(Subset.UNCONSTRAINED, cls.width).new(denominator)
        return reduce(num, den)

    @classmethod
    def from_integer(cls, value: ConstrainedInteger) -> "Rational":
        """value / 1. Overflow, если value не помещается в Integer{w}."""
        if not isinstance(value, ConstrainedInteger):
            raise TypeError(f"Expected ConstrainedInteger, got {type(value).__name__}")
        num = value.to(integer_type(Subset.UNCONSTRAINED, cls.width))
        return cls._trusted(num.raw, 1)

    @classmethod
    def zero(cls) -> "Rational":
        return cls._trusted(0, 1)

    @classmethod
    def one(cls) -> "Rational":
        return cls._trusted(1, 1)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    @property
    def numerator(self) -> int:
        return self.num.raw

    @property
    def denominator(self) -> int:
        return self.den.raw

    def is_zero(self) -> bool:
        return self.num.raw == 0

    def is_integer(self) -> bool:
        """Знаменатель равен 1."""
        return self.den.raw == 1

    def is_proper(self) -> bool:
        """|num| < den."""
        return abs(self.num.raw) < self.den.raw

    def is_improper(self) -> bool:
        return not self.is_proper()

    def is_reduced(self) -> bool:
        return is_reduced_parts(self.num.raw, self.den.raw)

    def inverted(self) -> "Rational":
        """
        den / num.

        Raises:
            DivisionByZero: Для нулевой дроби
            Overflow: Если num равен минимуму разрядности
        """
        return type(self)._from_parts(self.den.raw, self.num.raw)

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def _operand(self, other: Any) -> Optional["Rational"]:
        if type(other) is type(self):
            return other
        return None

    def __add__(self, other: Any) -> Any:
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented
        return type(self)._from_exact(
            self.numerator * rhs.denominator + rhs.numerator * self.denominator,
            self.denominator * rhs.denominator,
            "add",
        )

    def __sub__(self, other: Any) -> Any:
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented
        return type(self)._from_exact(
            self.numerator * rhs.denominator - rhs.numerator * self.denominator,
            self.denominator * rhs.denominator,
            "sub",
        )

    def __mul__(self, other: Any) -> Any:
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented
        return type(self)._from_exact(
            self.numerator * rhs.numerator,
            self.denominator * rhs.denominator,
            "mul",
        )

    def __truediv__(self, other: Any) -> Any:
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented
        return type(self)._from_exact(
            self.numerator * rhs.denominator,
            self.denominator * rhs.numerator,
            "div",
        )

    def __neg__(self) -> "Rational":
        return type(self)._from_exact(-self.numerator, self.denominator, "neg")

    # -------------------------------------------------------------------------
    # Ordering (только внутри одного типа)
    # -------------------------------------------------------------------------

    def _cross(self, other: "Rational") -> tuple[int, int]:
        return self.numerator * other.denominator, other.numerator * self.denominator

    def __lt__(self, other: Any) -> bool:
        if self._operand(other) is None:
            return NotImplemented
        lhs, rhs = self._cross(other)
        return lhs < rhs

    def __le__(self, other: Any) -> bool:
        if self._operand(other) is None:
            return NotImplemented
        lhs, rhs = self._cross(other)
        return lhs <= rhs

    def __gt__(self, other: Any) -> bool:
        if self._operand(other) is None:
            return NotImplemented
        lhs, rhs = self._cross(other)
        return lhs > rhs

    def __ge__(self, other: Any) -> bool:
        if self._operand(other) is None:
            return NotImplemented
        lhs, rhs = self._cross(other)
        return lhs >= rhs


# =============================================================================
# SIZED RATIONALS
# =============================================================================


class Rational8(Rational):
    width: ClassVar[Width] = Width.W8


class Rational16(Rational):
    width: ClassVar[Width] = Width.W16


class Rational32(Rational):
    width: ClassVar[Width] = Width.W32


class Rational64(Rational):
    width: ClassVar[Width] = Width.W64


class Rational128(Rational):
    width: ClassVar[Width] = Width.W128
