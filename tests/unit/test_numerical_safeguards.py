"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. NaN/Inf санитизацию
2. Безопасное деление
3. Ограничение диапазоном (clamp, floor_at_zero)
"""

import math

import pytest

from stablefx.core.math.numerical_safeguards import (
    EPS_CALC,
    EPS_RATE,
    clamp,
    floor_at_zero,
    is_valid_float,
    safe_divide,
    sanitize_float,
)

# =============================================================================
# ТЕСТЫ NaN/Inf САНИТИЗАЦИИ
# =============================================================================


class TestSanitizeFloat:
    """Тесты для is_valid_float и sanitize_float"""

    def test_finite_values_valid(self) -> None:
        """Конечные значения валидны"""
        assert is_valid_float(0.0)
        assert is_valid_float(-1e300)
        assert is_valid_float(1e-300)

    def test_nan_inf_invalid(self) -> None:
        """NaN и Inf невалидны"""
        assert not is_valid_float(float("nan"))
        assert not is_valid_float(float("inf"))
        assert not is_valid_float(float("-inf"))

    def test_valid_value_passes_through(self) -> None:
        assert sanitize_float(10.5) == 10.5
        assert sanitize_float(-3.0) == -3.0

    def test_invalid_value_replaced(self) -> None:
        """NaN/Inf заменяются на fallback"""
        assert sanitize_float(float("nan")) == 0.0
        assert sanitize_float(float("inf")) == 0.0
        assert sanitize_float(float("-inf"), fallback=-1.0) == -1.0


# =============================================================================
# ТЕСТЫ БЕЗОПАСНОГО ДЕЛЕНИЯ
# =============================================================================


class TestSafeDivide:
    """Тесты для safe_divide"""

    def test_normal_division(self) -> None:
        assert safe_divide(10.0, 2.0) == 5.0
        assert safe_divide(98.0, 0.9925125) == pytest.approx(98.7393, abs=1e-4)

    def test_division_by_zero_returns_fallback(self) -> None:
        """Деление на ноль возвращает fallback"""
        assert safe_divide(10.0, 0.0) == 0.0
        assert safe_divide(10.0, 0.0, fallback=-1.0) == -1.0

    def test_tiny_denominator_treated_as_zero(self) -> None:
        """Знаменатель меньше eps считается нулём, а не подменяется на eps"""
        assert safe_divide(10.0, 1e-20, eps=EPS_RATE) == 0.0
        assert safe_divide(10.0, -1e-20, eps=EPS_RATE) == 0.0

    def test_negative_denominator_preserves_sign(self) -> None:
        assert safe_divide(10.0, -2.0) == -5.0

    def test_nan_inputs_sanitized(self) -> None:
        """NaN числитель санитизируется в 0, NaN знаменатель — в fallback"""
        assert safe_divide(float("nan"), 2.0) == 0.0
        assert safe_divide(2.0, float("nan"), fallback=7.0) == 7.0

    def test_overflow_result_returns_fallback(self) -> None:
        """Бесконечный результат заменяется на fallback"""
        assert safe_divide(1e308, 1e-11) == 0.0

    def test_invalid_eps_raises(self) -> None:
        with pytest.raises(ValueError, match="eps must be positive"):
            safe_divide(1.0, 1.0, eps=0.0)

    def test_default_eps(self) -> None:
        assert EPS_CALC > 0
        assert safe_divide(1.0, EPS_CALC / 10) == 0.0


# =============================================================================
# ТЕСТЫ ОГРАНИЧЕНИЯ ДИАПАЗОНОМ
# =============================================================================


class TestClamp:
    """Тесты для clamp и floor_at_zero"""

    def test_clamp_within_range(self) -> None:
        assert clamp(5.0, 0.0, 10.0) == 5.0

    def test_clamp_below_min(self) -> None:
        assert clamp(-1.0, 0.0, 10.0) == 0.0

    def test_clamp_above_max(self) -> None:
        assert clamp(15.0, 0.0, 10.0) == 10.0

    def test_clamp_open_bounds(self) -> None:
        """Без границ значение не меняется"""
        assert clamp(-1e9) == -1e9
        assert clamp(1e9, min_value=0.0) == 1e9
        assert clamp(-1e9, max_value=0.0) == -1e9

    def test_floor_at_zero_positive_unchanged(self) -> None:
        assert floor_at_zero(97.25125) == 97.25125
        assert floor_at_zero(0.0) == 0.0

    def test_floor_at_zero_negative_saturates(self) -> None:
        """Отрицательный net насыщается нулём"""
        assert floor_at_zero(-1.0) == 0.0
        assert floor_at_zero(-1e-12) == 0.0

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_floor_at_zero_non_finite(self, value: float) -> None:
        """NaN/Inf дают 0.0"""
        result = floor_at_zero(value)
        assert result == 0.0
        assert math.isfinite(result)
