"""
ArithmeticConfig — единый переключатель режима доставки ошибок

Один флаг trap_on_violation общий для всех операторов и конструкторов:
- False (default, production): ошибки доставляются как recoverable NumeraError
- True (debug): ошибки доставляются как ArithmeticTrap (аварийная остановка)

Условия отказа от режима не зависят, меняется только способ доставки.

Хранится в ContextVar: каждый поток и каждая asyncio-задача видит свою копию.
"""

from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class ArithmeticConfig:
    """Конфигурация доставки ошибок арифметики."""

    trap_on_violation: bool = False


DEFAULT_CONFIG = ArithmeticConfig()

_ACTIVE_CONFIG: ContextVar[ArithmeticConfig] = ContextVar(
    "numera_arithmetic_config", default=DEFAULT_CONFIG
)


def get_config() -> ArithmeticConfig:
    """Активная конфигурация текущего контекста."""
    return _ACTIVE_CONFIG.get()


def set_config(config: ArithmeticConfig) -> Token:
    """
    Установка конфигурации для текущего контекста.

    Args:
        config: Новая конфигурация

    Returns:
        Token для reset_config()
    """
    if not isinstance(config, ArithmeticConfig):
        raise TypeError(f"Expected ArithmeticConfig, got {type(config).__name__}")
    return _ACTIVE_CONFIG.set(config)


def reset_config(token: Token) -> None:
    """Восстановление конфигурации, действовавшей до set_config()."""
    _ACTIVE_CONFIG.reset(token)


@contextmanager
def arithmetic_config(trap_on_violation: bool = False) -> Iterator[ArithmeticConfig]:
    """
    Временная конфигурация на время блока with.

    Examples:
        >>> with arithmetic_config(trap_on_violation=True):
        ...     Positive8.new(3) - Positive8.new(5)  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        ArithmeticTrap: SUBSET_VIOLATION: ...
    """
    config = ArithmeticConfig(trap_on_violation=trap_on_violation)
    token = set_config(config)
    try:
        yield config
    finally:
        reset_config(token)
