"""
Errors — типизированные ошибки ограниченной арифметики

Каждая ошибка соответствует одному FailureKind. Все ошибки ядра наследуют
NumeraError (ArithmeticError) и являются recoverable: вызывающий код ловит их
обычным except.

Режим trap (см. numera.core.config) доставляет те же ошибки как ArithmeticTrap,
который наследует BaseException и не перехватывается `except Exception`.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Условия отказа не зависят от режима доставки
2. Ядро никогда не подавляет ошибку и не логирует её
3. Вся доставка идёт через deliver()
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, NoReturn, Optional

from numera.core.config import get_config


# =============================================================================
# FAILURE KINDS
# =============================================================================


class FailureKind(str, Enum):
    """Категория отказа арифметической операции или конструктора."""

    OUT_OF_RANGE = "OUT_OF_RANGE"
    OVERFLOW = "OVERFLOW"
    UNDERFLOW = "UNDERFLOW"
    SUBSET_VIOLATION = "SUBSET_VIOLATION"
    DIVISION_BY_ZERO = "DIVISION_BY_ZERO"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class NumeraError(ArithmeticError):
    """
    Базовая ошибка numera.

    Attributes:
        kind: Категория отказа
        subset: Имя подмножества (если применимо)
        width: Разрядность в битах (если применимо)
        value: Математическое значение, вызвавшее отказ
    """

    kind: FailureKind

    def __init__(
        self,
        message: str,
        *,
        subset: Optional[str] = None,
        width: Optional[int] = None,
        value: Optional[int] = None,
    ):
        super().__init__(message)
        self.subset = subset
        self.width = width
        self.value = value


class OutOfRange(NumeraError):
    """Raw значение не удовлетворяет предикату целевого подмножества."""

    kind = FailureKind.OUT_OF_RANGE


class Overflow(NumeraError):
    """Результат больше представимого максимума разрядности."""

    kind = FailureKind.OVERFLOW


class Underflow(NumeraError):
    """Результат меньше представимого минимума разрядности."""

    kind = FailureKind.UNDERFLOW


class SubsetViolation(NumeraError):
    """
    Результат представим в разрядности, но выходит из подмножества результата.

    Например: Positive8(3) - Positive8(5) = -2 (i8 вмещает -2, Positive — нет).
    """

    kind = FailureKind.SUBSET_VIOLATION


class DivisionByZero(NumeraError, ZeroDivisionError):
    """Делитель равен нулю."""

    kind = FailureKind.DIVISION_BY_ZERO


class ArithmeticTrap(BaseException):
    """
    Аварийная остановка при нарушении инварианта (режим trap_on_violation).

    Наследует BaseException: `except Exception` его не перехватывает, по
    аналогии с checked-арифметикой debug-сборок. Предназначен только для
    отладки, не для production.

    Attributes:
        error: Исходная NumeraError
    """

    def __init__(self, error: NumeraError):
        super().__init__(f"{error.kind.value}: {error}")
        self.error = error


# =============================================================================
# DELIVERY
# =============================================================================


def deliver(error: NumeraError) -> NoReturn:
    """
    Доставка ошибки вызывающему коду согласно активному ArithmeticConfig.

    Args:
        error: Ошибка для доставки

    Raises:
        NumeraError: В обычном режиме (recoverable)
        ArithmeticTrap: В режиме trap_on_violation
    """
    if get_config().trap_on_violation:
        raise ArithmeticTrap(error) from error
    raise error


# =============================================================================
# CHECKED RESULT
# =============================================================================


@dataclass(frozen=True)
class CheckedResult:
    """
    Результат checked-операции: значение либо ошибка, без исключений.

    Ровно одно из value / error не None.
    """

    value: Any
    error: Optional[NumeraError]

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def failure(self) -> Optional[FailureKind]:
        """Категория отказа или None при успехе."""
        return None if self.error is None else self.error.kind

    def unwrap(self) -> Any:
        """
        Значение при успехе, иначе доставка ошибки через deliver().

        Raises:
            NumeraError / ArithmeticTrap: Если результат содержит ошибку
        """
        if self.error is not None:
            deliver(self.error)
        return self.value

    @classmethod
    def success(cls, value: Any) -> "CheckedResult":
        return cls(value=value, error=None)

    @classmethod
    def failed(cls, error: NumeraError) -> "CheckedResult":
        return cls(value=None, error=error)
