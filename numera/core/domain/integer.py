"""
ConstrainedInteger — целое значение, ограниченное подмножеством и разрядностью

Immutable Pydantic модель с одним полем raw. Тип кодирует пару
(subset, width); получить экземпляр с raw вне подмножества невозможно:
- new() / try_new() — валидирующая точка входа с типизированными ошибками
- прямой вызов конструктора (Positive8(raw=0)) отклоняется model validator'ом
- арифметика возвращает новые экземпляры через Operator Resolver

Неподдерживаемые комбинации операндов (другое подмножество вне матрицы,
другая разрядность, int вместо ConstrainedInteger) возвращают NotImplemented,
и интерпретатор поднимает TypeError.

Деление `/` и `//` — усечённое целочисленное (к нулю), float не возникает.
Остальные округления: div_euclid / div_floor / div_ceil и парные rem_*.
"""

from typing import Any, Callable, ClassVar, Final, Optional

from pydantic import BaseModel, Field, model_validator

from numera.core.errors import (
    CheckedResult,
    NumeraError,
    OutOfRange,
    Overflow,
    deliver,
)
from numera.core.math.checked import fit_power, fit_result
from numera.core.math.number_theory import gcd as raw_gcd
from numera.core.math.number_theory import is_even as raw_is_even
from numera.core.math.number_theory import is_multiple_of as raw_is_multiple_of
from numera.core.math.number_theory import is_square as raw_is_square
from numera.core.math.number_theory import lcm as raw_lcm
from numera.core.math.number_theory import sqrt_ceil as raw_sqrt_ceil
from numera.core.math.number_theory import sqrt_floor as raw_sqrt_floor
from numera.core.math.number_theory import sqrt_round as raw_sqrt_round
from numera.core.math.predicates import check_raw, is_raw_int, validate
from numera.core.math.resolver import Operator, OperatorRule, evaluate, resolve
from numera.core.math.rounding import Rounding
from numera.core.math.sets import Storage, Subset, Width, storage_range, subset_bounds


# Реестр конкретных типов: (subset, width) → класс
_INTEGER_TYPES: Final[dict[tuple[Subset, Width], type["ConstrainedInteger"]]] = {}


def integer_type(subset: Subset, width: Width) -> type["ConstrainedInteger"]:
    """
    Конкретный тип для пары (subset, width).

    Raises:
        KeyError: Если тип не зарегистрирован
    """
    return _INTEGER_TYPES[(Subset(subset), Width(width))]


def registered_integer_types() -> tuple[type["ConstrainedInteger"], ...]:
    return tuple(_INTEGER_TYPES.values())


# =============================================================================
# BASE MODEL
# =============================================================================


class ConstrainedInteger(BaseModel):
    """
    Базовая модель ограниченного целого.

    Конкретные типы задают ClassVar subset и width; базовый класс и
    промежуточные классы подмножеств экземпляров не имеют.
    """

    subset: ClassVar[Subset]
    width: ClassVar[Width]

    raw: int = Field(..., strict=True, description="Raw значение в нативном диапазоне")

    model_config = {"frozen": True}  # Immutable

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)
        if "width" in cls.__dict__:
            _INTEGER_TYPES[(cls.subset, cls.width)] = cls

    @model_validator(mode="after")
    def validate_invariant(self) -> "ConstrainedInteger":
        """Raw значение удовлетворяет предикату и диапазону типа."""
        cls = type(self)
        if not cls.is_concrete():
            raise ValueError(f"{cls.__name__} is abstract, use a sized type")
        try:
            check_raw(cls.subset, cls.width, self.raw)
        except NumeraError as error:
            raise ValueError(str(error)) from error
        return self

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def is_concrete(cls) -> bool:
        return "width" in cls.__dict__

    @classmethod
    def _trusted(cls, raw: int) -> "ConstrainedInteger":
        """Экземпляр без повторной валидации (raw уже проверен)."""
        return cls.model_construct(raw=raw)

    @classmethod
    def new(cls, raw: int) -> "ConstrainedInteger":
        """
        Валидирующий конструктор.

        Args:
            raw: Значение (int, не bool)

        Returns:
            Экземпляр cls

        Raises:
            TypeError: Если raw не int
            OutOfRange: Если raw вне подмножества
            Overflow / Underflow: Если raw вне диапазона хранения
        """
        if not cls.is_concrete():
            raise TypeError(f"{cls.__name__} is abstract, use a sized type")
        try:
            value = check_raw(cls.subset, cls.width, raw)
        except NumeraError as error:
            deliver(error)
        return cls._trusted(value)

    @classmethod
    def try_new(cls, raw: int) -> CheckedResult:
        """new() без исключений: CheckedResult со значением или ошибкой."""
        if not cls.is_concrete():
            raise TypeError(f"{cls.__name__} is abstract, use a sized type")
        try:
            value = check_raw(cls.subset, cls.width, raw)
        except NumeraError as error:
            return CheckedResult.failed(error)
        return CheckedResult.success(cls._trusted(value))

    @classmethod
    def min(cls) -> "ConstrainedInteger":
        """Наименьшее значение подмножества на разрядности."""
        return cls._trusted(subset_bounds(cls.subset, cls.width)[0])

    @classmethod
    def max(cls) -> "ConstrainedInteger":
        """Наибольшее значение подмножества на разрядности."""
        return cls._trusted(subset_bounds(cls.subset, cls.width)[1])

    # -------------------------------------------------------------------------
    # Conversion
    # -------------------------------------------------------------------------

    def into_width(self, width: Width) -> "ConstrainedInteger":
        """
        То же подмножество на другой разрядности.

        Расширение всегда успешно. Сужение отказывает Overflow, если raw
        не помещается в диапазон целевой разрядности.
        """
        return self.to(integer_type(self.subset, Width(width)))

    def to(self, target: type["ConstrainedInteger"]) -> "ConstrainedInteger":
        """
        Преобразование в другой конкретный тип (подмножество и/или разрядность).

        Raises:
            OutOfRange: raw вне подмножества target
            Overflow: raw вне диапазона хранения target
        """
        if not (isinstance(target, type) and issubclass(target, ConstrainedInteger)):
            raise TypeError(f"Conversion target must be a ConstrainedInteger type, got {target!r}")
        if not target.is_concrete():
            raise TypeError(f"{target.__name__} is abstract, use a sized type")

        if not validate(target.subset, target.width, self.raw):
            deliver(
                OutOfRange(
                    f"{type(self).__name__}({self.raw}) is outside subset "
                    f"{target.subset.value}",
                    subset=target.subset.value,
                    width=target.width.bits,
                    value=self.raw,
                )
            )

        lo, hi = storage_range(target.subset, target.width)
        if not lo <= self.raw <= hi:
            deliver(
                Overflow(
                    f"{type(self).__name__}({self.raw}) does not fit "
                    f"{target.__name__} range [{lo}, {hi}]",
                    subset=target.subset.value,
                    width=target.width.bits,
                    value=self.raw,
                )
            )

        return target._trusted(self.raw)

    def __int__(self) -> int:
        return self.raw

    # -------------------------------------------------------------------------
    # Operator plumbing
    # -------------------------------------------------------------------------

    def _rule_for(self, operator: Operator, other: Any = None) -> Optional[OperatorRule]:
        if operator.is_unary:
            return resolve(operator, self.subset)
        if not isinstance(other, ConstrainedInteger) or other.width is not self.width:
            return None
        return resolve(operator, self.subset, other.subset)

    def _require_rule(self, operator: Operator, other: Any = None) -> OperatorRule:
        rule = self._rule_for(operator, other)
        if rule is None:
            raise TypeError(
                f"Unsupported operation {operator.value} for "
                f"{type(self).__name__} and {type(other).__name__}"
            )
        return rule

    def _compute(
        self,
        rule: OperatorRule,
        other: Optional["ConstrainedInteger"],
        rounding: Rounding = Rounding.TRUNC,
    ) -> "ConstrainedInteger":
        raw = evaluate(rule, self.width, self.raw, None if other is None else other.raw, rounding)
        return integer_type(rule.result, self.width)._trusted(raw)

    def _fit_own(self, raw: int, operation: str) -> "ConstrainedInteger":
        """Результат в типе self после проверки fit_result."""
        return type(self)._trusted(fit_result(raw, self.subset, self.width, operation))

    @staticmethod
    def _delivered(compute: Callable[[], Any]) -> Any:
        try:
            return compute()
        except NumeraError as error:
            deliver(error)

    @staticmethod
    def _captured(compute: Callable[[], Any]) -> CheckedResult:
        try:
            return CheckedResult.success(compute())
        except NumeraError as error:
            return CheckedResult.failed(error)

    def _apply(self, operator: Operator, other: Any = None) -> Any:
        rule = self._rule_for(operator, other)
        if rule is None:
            return NotImplemented
        return self._delivered(lambda: self._compute(rule, other))

    def _checked(self, operator: Operator, other: Any = None) -> CheckedResult:
        rule = self._require_rule(operator, other)
        return self._captured(lambda: self._compute(rule, other))

    # -------------------------------------------------------------------------
    # Operators
    # -------------------------------------------------------------------------

    def __add__(self, other: Any) -> Any:
        return self._apply(Operator.ADD, other)

    def __sub__(self, other: Any) -> Any:
        return self._apply(Operator.SUB, other)

    def __mul__(self, other: Any) -> Any:
        return self._apply(Operator.MUL, other)

    def __truediv__(self, other: Any) -> Any:
        return self._apply(Operator.DIV, other)

    def __floordiv__(self, other: Any) -> Any:
        # Усечённое деление, как и `/`
        return self._apply(Operator.DIV, other)

    def __mod__(self, other: Any) -> Any:
        return self._apply(Operator.REM, other)

    def __divmod__(self, other: Any) -> Any:
        if self._rule_for(Operator.DIV, other) is None or self._rule_for(Operator.REM, other) is None:
            return NotImplemented
        return self.div_rem(other)

    def __neg__(self) -> Any:
        result = self._apply(Operator.NEG)
        if result is NotImplemented:
            raise TypeError(f"Negation is not supported for {type(self).__name__}")
        return result

    def div_rem(self, other: "ConstrainedInteger") -> tuple["ConstrainedInteger", "ConstrainedInteger"]:
        """Усечённые (частное, остаток)."""
        return self.div_rem_trunc(other)

    def checked_add(self, other: "ConstrainedInteger") -> CheckedResult:
        return self._checked(Operator.ADD, other)

    def checked_sub(self, other: "ConstrainedInteger") -> CheckedResult:
        return self._checked(Operator.SUB, other)

    def checked_mul(self, other: "ConstrainedInteger") -> CheckedResult:
        return self._checked(Operator.MUL, other)

    def checked_div(self, other: "ConstrainedInteger") -> CheckedResult:
        return self._checked(Operator.DIV, other)

    def checked_rem(self, other: "ConstrainedInteger") -> CheckedResult:
        return self._checked(Operator.REM, other)

    def checked_neg(self) -> CheckedResult:
        return self._checked(Operator.NEG)

    # -------------------------------------------------------------------------
    # Division with rounding
    # -------------------------------------------------------------------------
    #
    # Поддержка и подмножество результата берутся из правил DIV / REM;
    # неподдерживаемая пара → TypeError. Знаковый MIN на -1 → Overflow
    # при любом округлении.

    def _divide(self, operator: Operator, other: Any, rounding: Rounding) -> "ConstrainedInteger":
        return self._compute(self._require_rule(operator, other), other, rounding)

    def _div_rem(self, other: Any, rounding: Rounding) -> tuple["ConstrainedInteger", "ConstrainedInteger"]:
        div_rule = self._require_rule(Operator.DIV, other)
        rem_rule = self._require_rule(Operator.REM, other)
        return self._compute(div_rule, other, rounding), self._compute(rem_rule, other, rounding)

    def _rounded(self, operator: Operator, other: Any, rounding: Rounding) -> "ConstrainedInteger":
        return self._delivered(lambda: self._divide(operator, other, rounding))

    def _checked_rounded(self, operator: Operator, other: Any, rounding: Rounding) -> CheckedResult:
        return self._captured(lambda: self._divide(operator, other, rounding))

    def div_trunc(self, other: "ConstrainedInteger") -> "ConstrainedInteger":
        """Частное, округлённое к нулю (то же, что `/`)."""
        return self._rounded(Operator.DIV, other, Rounding.TRUNC)

    def div_euclid(self, other: "ConstrainedInteger") -> "ConstrainedInteger":
        """Евклидово частное: соответствующий остаток всегда >= 0."""
        return self._rounded(Operator.DIV, other, Rounding.EUCLID)

    def div_floor(self, other: "ConstrainedInteger") -> "ConstrainedInteger":
        """Частное, округлённое к -∞."""
        return self._rounded(Operator.DIV, other, Rounding.FLOOR)

    def div_ceil(self, other: "ConstrainedInteger") -> "ConstrainedInteger":
        """Частное, округлённое к +∞."""
        return self._rounded(Operator.DIV, other, Rounding.CEIL)

    def rem_trunc(self, other: "ConstrainedInteger") -> "ConstrainedInteger":
        return self._rounded(Operator.REM, other, Rounding.TRUNC)

    def rem_euclid(self, other: "ConstrainedInteger") -> "ConstrainedInteger":
        """
        Евклидов остаток в [0, |other|).

        Для NonPositive / Negative ненулевой остаток вне подмножества
        → SubsetViolation.
        """
        return self._rounded(Operator.REM, other, Rounding.EUCLID)

    def rem_floor(self, other: "ConstrainedInteger") -> "ConstrainedInteger":
        return self._rounded(Operator.REM, other, Rounding.FLOOR)

    def rem_ceil(self, other: "ConstrainedInteger") -> "ConstrainedInteger":
        return self._rounded(Operator.REM, other, Rounding.CEIL)

    def div_rem_trunc(self, other: "ConstrainedInteger") -> tuple["ConstrainedInteger", "ConstrainedInteger"]:
        return self._delivered(lambda: self._div_rem(other, Rounding.TRUNC))

    def div_rem_euclid(self, other: "ConstrainedInteger") -> tuple["ConstrainedInteger", "ConstrainedInteger"]:
        return self._delivered(lambda: self._div_rem(other, Rounding.EUCLID))

    def div_rem_floor(self, other: "ConstrainedInteger") -> tuple["ConstrainedInteger", "ConstrainedInteger"]:
        return self._delivered(lambda: self._div_rem(other, Rounding.FLOOR))

    def div_rem_ceil(self, other: "ConstrainedInteger") -> tuple["ConstrainedInteger", "ConstrainedInteger"]:
        return self._delivered(lambda: self._div_rem(other, Rounding.CEIL))

    def checked_div_euclid(self, other: "ConstrainedInteger") -> CheckedResult:
        return self._checked_rounded(Operator.DIV, other, Rounding.EUCLID)

    def checked_div_floor(self, other: "ConstrainedInteger") -> CheckedResult:
        return self._checked_rounded(Operator.DIV, other, Rounding.FLOOR)

    def checked_div_ceil(self, other: "ConstrainedInteger") -> CheckedResult:
        return self._checked_rounded(Operator.DIV, other, Rounding.CEIL)

    def checked_rem_euclid(self, other: "ConstrainedInteger") -> CheckedResult:
        return self._checked_rounded(Operator.REM, other, Rounding.EUCLID)

    def checked_rem_floor(self, other: "ConstrainedInteger") -> CheckedResult:
        return self._checked_rounded(Operator.REM, other, Rounding.FLOOR)

    def checked_rem_ceil(self, other: "ConstrainedInteger") -> CheckedResult:
        return self._checked_rounded(Operator.REM, other, Rounding.CEIL)

    def checked_div_rem(
        self, other: "ConstrainedInteger", rounding: Rounding = Rounding.TRUNC
    ) -> CheckedResult:
        """CheckedResult с парой (частное, остаток) или первой ошибкой."""
        return self._captured(lambda: self._div_rem(other, Rounding(rounding)))

    # -------------------------------------------------------------------------
    # Power & square root (результат того же типа)
    # -------------------------------------------------------------------------

    def pow(self, exponent: int) -> "ConstrainedInteger":
        """
        self ** exponent в том же типе.

        Raises:
            TypeError: exponent не int
            ValueError: exponent < 0
            Overflow / Underflow: степень вне диапазона хранения
            SubsetViolation: степень вне подмножества (Negative8(-2).pow(2))
        """
        return self._delivered(lambda: self._power(exponent))

    def checked_pow(self, exponent: int) -> CheckedResult:
        return self._captured(lambda: self._power(exponent))

    def __pow__(self, exponent: Any) -> Any:
        if not is_raw_int(exponent):
            return NotImplemented
        return self.pow(exponent)

    def _power(self, exponent: int) -> "ConstrainedInteger":
        return type(self)._trusted(fit_power(self.raw, exponent, self.subset, self.width))

    def is_square(self) -> bool:
        return raw_is_square(self.raw)

    def sqrt_floor(self) -> "ConstrainedInteger":
        """
        Целая часть квадратного корня в том же типе.

        Raises:
            OutOfRange: Для отрицательного значения
        """
        return self._delivered(lambda: self._fit_own(raw_sqrt_floor(self.raw), "sqrt_floor"))

    def sqrt_ceil(self) -> "ConstrainedInteger":
        return self._delivered(lambda: self._fit_own(raw_sqrt_ceil(self.raw), "sqrt_ceil"))

    def sqrt_round(self) -> "ConstrainedInteger":
        return self._delivered(lambda: self._fit_own(raw_sqrt_round(self.raw), "sqrt_round"))

    def checked_sqrt_floor(self) -> CheckedResult:
        return self._captured(lambda: self._fit_own(raw_sqrt_floor(self.raw), "sqrt_floor"))

    def checked_sqrt_ceil(self) -> CheckedResult:
        return self._captured(lambda: self._fit_own(raw_sqrt_ceil(self.raw), "sqrt_ceil"))

    def checked_sqrt_round(self) -> CheckedResult:
        return self._captured(lambda: self._fit_own(raw_sqrt_round(self.raw), "sqrt_round"))

    # -------------------------------------------------------------------------
    # Ordering (только внутри одного конкретного типа)
    # -------------------------------------------------------------------------

    def _same_type(self, other: Any) -> bool:
        return type(other) is type(self)

    def __lt__(self, other: Any) -> bool:
        if not self._same_type(other):
            return NotImplemented
        return self.raw < other.raw

    def __le__(self, other: Any) -> bool:
        if not self._same_type(other):
            return NotImplemented
        return self.raw <= other.raw

    def __gt__(self, other: Any) -> bool:
        if not self._same_type(other):
            return NotImplemented
        return self.raw > other.raw

    def __ge__(self, other: Any) -> bool:
        if not self._same_type(other):
            return NotImplemented
        return self.raw >= other.raw

    # -------------------------------------------------------------------------
    # Identities & sign
    # -------------------------------------------------------------------------

    @classmethod
    def can_zero(cls) -> bool:
        return cls.subset.contains_zero

    @classmethod
    def can_one(cls) -> bool:
        return validate(cls.subset, cls.width, 1)

    @classmethod
    def can_neg_one(cls) -> bool:
        return validate(cls.subset, cls.width, -1) and cls.subset.storage is Storage.SIGNED

    @classmethod
    def can_negative(cls) -> bool:
        return cls.subset.can_negative

    @classmethod
    def can_positive(cls) -> bool:
        return cls.subset.can_positive

    @classmethod
    def zero(cls) -> "ConstrainedInteger":
        """0 или OutOfRange для подмножеств без нуля."""
        return cls.new(0)

    @classmethod
    def one(cls) -> "ConstrainedInteger":
        return cls.new(1)

    @classmethod
    def neg_one(cls) -> "ConstrainedInteger":
        return cls.new(-1)

    def is_zero(self) -> bool:
        return self.raw == 0

    def is_one(self) -> bool:
        return self.raw == 1

    def is_neg_one(self) -> bool:
        return self.raw == -1

    def is_positive(self) -> bool:
        return self.raw > 0

    def is_negative(self) -> bool:
        return self.raw < 0

    # -------------------------------------------------------------------------
    # Integer properties
    # -------------------------------------------------------------------------

    def is_even(self) -> bool:
        return raw_is_even(self.raw)

    def is_odd(self) -> bool:
        return not self.is_even()

    def is_multiple_of(self, other: "ConstrainedInteger") -> bool:
        return raw_is_multiple_of(self.raw, _raw_of(other))

    def is_divisor_of(self, other: "ConstrainedInteger") -> bool:
        return raw_is_multiple_of(_raw_of(other), self.raw)

    def gcd(self, other: "ConstrainedInteger") -> "ConstrainedInteger":
        """
        НОД как NonNegative той же разрядности.

        НОД не превосходит max(|a|, |b|) <= 2^(b-1) и всегда помещается
        в беззнаковое хранение той же разрядности.
        """
        self._require_same_width(other, "gcd")
        return integer_type(Subset.NON_NEGATIVE, self.width)._trusted(raw_gcd(self.raw, other.raw))

    def lcm(self, other: "ConstrainedInteger") -> "ConstrainedInteger":
        """
        НОК как NonNegative той же разрядности.

        Raises:
            Overflow: Если НОК не помещается в разрядность
        """
        self._require_same_width(other, "lcm")
        try:
            raw = fit_result(raw_lcm(self.raw, other.raw), Subset.NON_NEGATIVE, self.width, "lcm")
        except NumeraError as error:
            deliver(error)
        return integer_type(Subset.NON_NEGATIVE, self.width)._trusted(raw)

    def _require_same_width(self, other: Any, operation: str) -> None:
        if not isinstance(other, ConstrainedInteger) or other.width is not self.width:
            raise TypeError(
                f"{operation} requires a ConstrainedInteger of width {self.width.bits}, "
                f"got {type(other).__name__}"
            )

    # -------------------------------------------------------------------------
    # Counting
    # -------------------------------------------------------------------------

    def next(self) -> "ConstrainedInteger":
        """
        Следующее значение подмножества.

        ZeroFree перешагивает через 0 (-1 → 1).

        Raises:
            Overflow: За максимумом хранения
            SubsetViolation: За границей подмножества (Negative: -1 → 0)
        """
        return self._step(1, "next")

    def previous(self) -> "ConstrainedInteger":
        """Предыдущее значение подмножества (см. next())."""
        return self._step(-1, "previous")

    def _step(self, delta: int, operation: str) -> "ConstrainedInteger":
        raw = self.raw + delta
        if raw == 0 and self.subset is Subset.ZERO_FREE:
            raw += delta
        try:
            raw = fit_result(raw, self.subset, self.width, operation)
        except NumeraError as error:
            deliver(error)
        return type(self)._trusted(raw)


def _raw_of(value: Any) -> int:
    if isinstance(value, ConstrainedInteger):
        return value.raw
    if is_raw_int(value):
        return value
    raise TypeError(f"Expected ConstrainedInteger or int, got {type(value).__name__}")


# =============================================================================
# SUBSET BASES
# =============================================================================


class Integer(ConstrainedInteger):
    """Целое ℤ = {…, -2, -1, 0, 1, 2, …}. Знаковое хранение."""

    subset: ClassVar[Subset] = Subset.UNCONSTRAINED


class ZeroFreeInteger(ConstrainedInteger):
    """Ненулевое целое ℤ ∖ {0}. Знаковое хранение."""

    subset: ClassVar[Subset] = Subset.ZERO_FREE


class NonNegativeInteger(ConstrainedInteger):
    """Неотрицательное целое ℤ≥0. Беззнаковое хранение (NonNegative8 = [0, 255])."""

    subset: ClassVar[Subset] = Subset.NON_NEGATIVE


class NonPositiveInteger(ConstrainedInteger):
    """Неположительное целое ℤ≤0. Знаковое хранение."""

    subset: ClassVar[Subset] = Subset.NON_POSITIVE


class NegativeInteger(ConstrainedInteger):
    """Отрицательное целое ℤ<0. Знаковое хранение (Negative8 = [-128, -1])."""

    subset: ClassVar[Subset] = Subset.NEGATIVE


class PositiveInteger(ConstrainedInteger):
    """Положительное целое ℤ>0. Знаковое хранение (Positive8 = [1, 127])."""

    subset: ClassVar[Subset] = Subset.POSITIVE


SUBSET_BASES: Final[dict[Subset, type[ConstrainedInteger]]] = {
    Subset.UNCONSTRAINED: Integer,
    Subset.ZERO_FREE: ZeroFreeInteger,
    Subset.NON_NEGATIVE: NonNegativeInteger,
    Subset.NON_POSITIVE: NonPositiveInteger,
    Subset.NEGATIVE: NegativeInteger,
    Subset.POSITIVE: PositiveInteger,
}
