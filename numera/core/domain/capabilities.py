"""
Capabilities — интерфейсы-маркеры возможностей числовых типов

Маркеры реализуются выборочно по подмножествам (виртуальная регистрация ABC)
и запрашиваются по возможности, а не по конкретному типу:

    >>> isinstance(Positive8.new(3), HasZero)
    False
    >>> issubclass(NonNegative16, HasZero)
    True
"""

from abc import ABC, abstractmethod
from typing import Final

from numera.core.math.predicates import validate
from numera.core.math.sets import Storage, Subset, Width


# =============================================================================
# BOUNDS & COUNTING
# =============================================================================


class Bounded(ABC):
    """Тип имеет наименьшее и наибольшее значение."""

    @classmethod
    @abstractmethod
    def min(cls): ...

    @classmethod
    @abstractmethod
    def max(cls): ...


class Countable(ABC):
    """У каждого значения есть следующее и предыдущее (checked)."""

    @abstractmethod
    def next(self): ...

    @abstractmethod
    def previous(self): ...


# =============================================================================
# SIGN
# =============================================================================


class CanNegative(ABC):
    """Тип может представлять отрицательные значения."""


class CanPositive(ABC):
    """Тип может представлять положительные значения."""


# =============================================================================
# IDENTITIES
# =============================================================================


class HasZero(ABC):
    """Тип содержит 0 (аддитивная единица)."""

    @classmethod
    @abstractmethod
    def zero(cls): ...


class HasOne(ABC):
    """Тип содержит 1 (мультипликативная единица)."""

    @classmethod
    @abstractmethod
    def one(cls): ...


class HasNegOne(ABC):
    """Тип содержит -1."""

    @classmethod
    @abstractmethod
    def neg_one(cls): ...


class NonZero(ABC):
    """Тип гарантированно не содержит 0."""


ALL_CAPABILITIES: Final[tuple[type, ...]] = (
    Bounded,
    Countable,
    CanNegative,
    CanPositive,
    HasZero,
    HasOne,
    HasNegOne,
    NonZero,
)


# =============================================================================
# REGISTRATION
# =============================================================================


def integer_capabilities(subset: Subset) -> tuple[type, ...]:
    """Маркеры, которые реализует целочисленный тип подмножества."""
    # Предикат не зависит от разрядности
    width = Width.W8
    capabilities: list[type] = [Bounded, Countable]

    if subset.can_negative:
        capabilities.append(CanNegative)
    if subset.can_positive:
        capabilities.append(CanPositive)
    if subset.contains_zero:
        capabilities.append(HasZero)
    else:
        capabilities.append(NonZero)
    if validate(subset, width, 1):
        capabilities.append(HasOne)
    if validate(subset, width, -1) and subset.storage is Storage.SIGNED:
        capabilities.append(HasNegOne)

    return tuple(capabilities)


def register_capabilities(cls: type, capabilities: tuple[type, ...]) -> type:
    """Виртуальная регистрация cls во всех указанных маркерах."""
    for capability in capabilities:
        capability.register(cls)
    return cls


def has_capability(value_or_type: object, capability: type) -> bool:
    """Запрос возможности у значения или типа."""
    if isinstance(value_or_type, type):
        return issubclass(value_or_type, capability)
    return isinstance(value_or_type, capability)
