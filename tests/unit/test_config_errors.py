"""
Тесты для ArithmeticConfig и доставки ошибок

Проверяет:
1. Иерархию ошибок
2. Режим trap_on_violation: ArithmeticTrap вместо NumeraError
3. Восстановление конфигурации (context manager, token)
4. Изоляцию конфигурации между потоками
5. Checked API не зависит от режима
"""

import threading

import pytest

from numera.core.config import (
    DEFAULT_CONFIG,
    ArithmeticConfig,
    arithmetic_config,
    get_config,
    reset_config,
    set_config,
)
from numera.core.domain import Integer8, NonNegative8, Positive8, Rational8, ZeroFree8, reduce
from numera.core.errors import (
    ArithmeticTrap,
    CheckedResult,
    DivisionByZero,
    FailureKind,
    NumeraError,
    OutOfRange,
    Overflow,
    SubsetViolation,
    Underflow,
    deliver,
)

# =============================================================================
# ERROR HIERARCHY
# =============================================================================


class TestErrorHierarchy:
    """Тесты иерархии исключений"""

    @pytest.mark.parametrize(
        "error_type, kind",
        [
            (OutOfRange, FailureKind.OUT_OF_RANGE),
            (Overflow, FailureKind.OVERFLOW),
            (Underflow, FailureKind.UNDERFLOW),
            (SubsetViolation, FailureKind.SUBSET_VIOLATION),
            (DivisionByZero, FailureKind.DIVISION_BY_ZERO),
        ],
    )
    def test_kinds(self, error_type: type[NumeraError], kind: FailureKind) -> None:
        assert issubclass(error_type, NumeraError)
        assert issubclass(error_type, ArithmeticError)
        assert error_type.kind is kind

    def test_division_by_zero_is_zero_division_error(self) -> None:
        assert issubclass(DivisionByZero, ZeroDivisionError)

    def test_trap_is_not_exception(self) -> None:
        assert issubclass(ArithmeticTrap, BaseException)
        assert not issubclass(ArithmeticTrap, Exception)

    def test_error_context(self) -> None:
        error = Overflow("boom", subset="POSITIVE", width=8, value=200)
        assert str(error) == "boom"
        assert (error.subset, error.width, error.value) == ("POSITIVE", 8, 200)

    def test_deliver_raises_error(self) -> None:
        with pytest.raises(Underflow):
            deliver(Underflow("below"))


class TestCheckedResult:
    """Тесты для CheckedResult"""

    def test_success(self) -> None:
        result = CheckedResult.success(5)
        assert result.ok
        assert result.failure is None
        assert result.unwrap() == 5

    def test_failed(self) -> None:
        result = CheckedResult.failed(Overflow("too big"))
        assert not result.ok
        assert result.failure is FailureKind.OVERFLOW
        with pytest.raises(Overflow):
            result.unwrap()


# =============================================================================
# CONFIG
# =============================================================================


class TestConfig:
    """Тесты для get_config / set_config / arithmetic_config"""

    def test_default(self) -> None:
        assert get_config() == DEFAULT_CONFIG
        assert not get_config().trap_on_violation

    def test_context_manager_restores(self) -> None:
        with arithmetic_config(trap_on_violation=True) as config:
            assert config.trap_on_violation
            assert get_config() is config
        assert not get_config().trap_on_violation

    def test_token_reset(self) -> None:
        token = set_config(ArithmeticConfig(trap_on_violation=True))
        try:
            assert get_config().trap_on_violation
        finally:
            reset_config(token)
        assert not get_config().trap_on_violation

    def test_set_config_type_checked(self) -> None:
        with pytest.raises(TypeError):
            set_config({"trap_on_violation": True})

    def test_thread_isolation(self) -> None:
        """Новый поток видит конфигурацию по умолчанию"""
        seen: list[bool] = []

        def worker() -> None:
            seen.append(get_config().trap_on_violation)

        with arithmetic_config(trap_on_violation=True):
            thread = threading.Thread(target=worker)
            thread.start()
            thread.join()

        assert seen == [False]


# =============================================================================
# TRAP MODE
# =============================================================================


class TestTrapMode:
    """Доставка ошибок в режиме trap_on_violation"""

    def test_operator_traps(self) -> None:
        with arithmetic_config(trap_on_violation=True):
            with pytest.raises(ArithmeticTrap) as exc_info:
                Positive8.new(3) - Positive8.new(5)
        trap = exc_info.value
        assert isinstance(trap.error, SubsetViolation)
        assert trap.__cause__ is trap.error
        assert str(trap).startswith("SUBSET_VIOLATION:")

    def test_trap_escapes_except_exception(self) -> None:
        caught_as_exception = False
        with arithmetic_config(trap_on_violation=True):
            with pytest.raises(ArithmeticTrap):
                try:
                    Integer8.new(-128) / Integer8.new(-1)
                except Exception:
                    caught_as_exception = True
        assert not caught_as_exception

    def test_same_failure_conditions(self) -> None:
        """Режим меняет доставку, но не условия отказа"""
        with arithmetic_config(trap_on_violation=True):
            assert Positive8.new(3) + Positive8.new(4) == Positive8.new(7)
            with pytest.raises(ArithmeticTrap) as exc_info:
                NonNegative8.new(3) - NonNegative8.new(5)
        assert exc_info.value.error.kind is FailureKind.UNDERFLOW

    def test_constructor_and_conversion_trap(self) -> None:
        with arithmetic_config(trap_on_violation=True):
            with pytest.raises(ArithmeticTrap):
                Positive8.new(0)
            with pytest.raises(ArithmeticTrap):
                NonNegative8.new(200).to(Integer8)
            with pytest.raises(ArithmeticTrap):
                reduce(Integer8.new(1), Integer8.new(0))
            with pytest.raises(ArithmeticTrap):
                Rational8.new(100) + Rational8.new(100)
            with pytest.raises(ArithmeticTrap):
                Positive8.max().next()

    def test_rounding_power_and_root_trap(self) -> None:
        with arithmetic_config(trap_on_violation=True):
            with pytest.raises(ArithmeticTrap) as exc_info:
                Integer8.new(-128).rem_euclid(Integer8.new(-1))
            assert exc_info.value.error.kind is FailureKind.OVERFLOW
            with pytest.raises(ArithmeticTrap):
                Integer8.new(-128) % Integer8.new(-1)
            with pytest.raises(ArithmeticTrap):
                Integer8.new(2).pow(7)
            with pytest.raises(ArithmeticTrap):
                Integer8.new(-4).sqrt_floor()
            assert Integer8.new(-4).checked_sqrt_ceil().failure is FailureKind.OUT_OF_RANGE

    def test_checked_api_never_traps(self) -> None:
        with arithmetic_config(trap_on_violation=True):
            result = Positive8.new(3).checked_sub(Positive8.new(5))
            assert result.failure is FailureKind.SUBSET_VIOLATION
            assert Positive8.try_new(0).failure is FailureKind.OUT_OF_RANGE
            with pytest.raises(ArithmeticTrap):
                result.unwrap()

    def test_unsupported_still_type_error(self) -> None:
        with arithmetic_config(trap_on_violation=True):
            with pytest.raises(TypeError):
                Positive8.new(3) + ZeroFree8.new(1)
