"""
Юнит-тесты для Sanitizer

Проверяет:
1. validate_input: очистка текста, одна точка, 6 знаков дробной части
2. Идемпотентность validate_input
3. sanitize_amount: парсинг, 0 для мусора, насыщение до max_amount
4. Инвариант: результат всегда конечен и в [0, max_amount]
"""

import logging
import math
from decimal import Decimal

import pytest

from stablefx.core.domain.config import DEFAULT_CONFIG, AmountLimits
from stablefx.engine.sanitizer import MAX_FRACTION_DIGITS, sanitize_amount, validate_input

# Набор "грязных" вводов для property-проверок
MESSY_INPUTS = [
    None,
    "",
    "abc",
    "12.3.4.5",
    "..5",
    "1..2",
    "12.",
    ".",
    "1,000.50",
    "$ 250",
    "-5",
    "1e5",
    "0.123456789",
    "999999999",
    "9" * 400,
    "١٢3",
    "  42  ",
    "12a.b34c.5",
]


# =============================================================================
# validate_input
# =============================================================================


class TestValidateInput:
    """Тесты очистки текста ввода"""

    def test_multiple_points_keep_first(self) -> None:
        """Сохраняется только первая точка, цифры остаются"""
        assert validate_input("12.3.4.5") == "12.345"
        assert validate_input("1..2") == "1.2"
        assert validate_input("..5") == ".5"

    def test_letters_removed(self) -> None:
        assert validate_input("abc") == ""
        assert validate_input("12a.b34c.5") == "12.345"

    def test_empty_and_none(self) -> None:
        """Пустой ввод даёт пустую строку"""
        assert validate_input("") == ""
        assert validate_input(None) == ""

    def test_separators_and_signs_stripped(self) -> None:
        """Запятые, знаки и пробелы удаляются"""
        assert validate_input("1,000.50") == "1000.50"
        assert validate_input("$ 250") == "250"
        assert validate_input("-5") == "5"
        assert validate_input("1e5") == "15"

    def test_fraction_truncated_to_six_digits(self) -> None:
        """Дробная часть обрезается (не округляется) до 6 знаков"""
        assert validate_input("0.123456789") == "0.123456"
        assert validate_input("1.9999999") == "1.999999"
        assert MAX_FRACTION_DIGITS == 6

    def test_trailing_point_preserved(self) -> None:
        """Точка в конце остаётся (пользователь ещё печатает)"""
        assert validate_input("12.") == "12."
        assert validate_input(".") == "."

    def test_non_ascii_digits_removed(self) -> None:
        assert validate_input("١٢3") == "3"

    def test_number_input_stringified(self) -> None:
        assert validate_input(12.5) == "12.5"

    @pytest.mark.parametrize("raw", MESSY_INPUTS)
    def test_idempotent(self, raw) -> None:
        """validate_input(validate_input(x)) == validate_input(x)"""
        once = validate_input(raw)
        assert validate_input(once) == once

    @pytest.mark.parametrize("raw", MESSY_INPUTS)
    def test_at_most_one_point_and_six_fraction_digits(self, raw) -> None:
        cleaned = validate_input(raw)
        assert cleaned.count(".") <= 1
        if "." in cleaned:
            assert len(cleaned.split(".")[1]) <= MAX_FRACTION_DIGITS
        assert all(ch in "0123456789." for ch in cleaned)


# =============================================================================
# sanitize_amount
# =============================================================================


class TestSanitizeAmount:
    """Тесты преобразования ввода в сумму"""

    def test_cleaned_text_parsed(self) -> None:
        assert sanitize_amount("12.3.4.5") == pytest.approx(12.345)
        assert sanitize_amount("100") == 100.0
        assert sanitize_amount("1,000.50") == pytest.approx(1000.5)

    def test_garbage_gives_zero(self) -> None:
        """Нечисловой ввод даёт 0"""
        assert sanitize_amount("abc") == 0.0
        assert sanitize_amount("") == 0.0
        assert sanitize_amount(None) == 0.0
        assert sanitize_amount(".") == 0.0

    def test_above_max_clamped(self) -> None:
        """Сумма выше max_amount насыщается"""
        assert sanitize_amount("999999999") == 100000.0
        assert sanitize_amount(999999999) == 100000.0
        assert sanitize_amount("9" * 400) == 100000.0

    def test_max_amount_itself_allowed(self) -> None:
        assert sanitize_amount("100000") == 100000.0

    def test_clamp_logged_only_above_max(self, caplog) -> None:
        """Насыщение пишется в DEBUG лог, сумма на границе нет"""
        with caplog.at_level(logging.DEBUG, logger="stablefx.engine.sanitizer"):
            assert sanitize_amount("100000") == 100000.0
            assert not caplog.records

            assert sanitize_amount(float("inf")) == 100000.0

        assert len(caplog.records) == 1
        assert "clamped to max_amount" in caplog.records[0].getMessage()

    def test_negative_number_gives_zero(self) -> None:
        """Отрицательное число даёт 0"""
        assert sanitize_amount(-5) == 0.0
        assert sanitize_amount(-0.01) == 0.0

    def test_negative_text_loses_sign(self) -> None:
        """Текст "-5" после очистки становится "5" """
        assert sanitize_amount("-5") == 5.0

    def test_non_finite_numbers(self) -> None:
        """NaN даёт 0, +Inf насыщается до max_amount"""
        assert sanitize_amount(float("nan")) == 0.0
        assert sanitize_amount(float("-inf")) == 0.0
        assert sanitize_amount(float("inf")) == 100000.0

    def test_huge_int_clamped(self) -> None:
        """int за пределами float насыщается"""
        assert sanitize_amount(10**400) == 100000.0
        assert sanitize_amount(-(10**400)) == 0.0

    def test_bool_is_not_amount(self) -> None:
        assert sanitize_amount(True) == 0.0
        assert sanitize_amount(False) == 0.0

    def test_decimal_input(self) -> None:
        assert sanitize_amount(Decimal("12.5")) == 12.5
        assert sanitize_amount(Decimal("-12.5")) == 0.0

    def test_custom_limits(self) -> None:
        """Сумма ниже min_amount даёт 0, выше max_amount — max_amount"""
        config = DEFAULT_CONFIG.model_copy(
            update={"limits": AmountLimits(min_amount=10.0, max_amount=1000.0)}
        )
        assert sanitize_amount("5", config) == 0.0
        assert sanitize_amount("50", config) == 50.0
        assert sanitize_amount("5000", config) == 1000.0

    @pytest.mark.parametrize(
        "raw",
        MESSY_INPUTS + [0, -1, 1.5, float("nan"), float("inf"), 10**400, Decimal("NaN")],
    )
    def test_result_always_finite_and_in_range(self, raw) -> None:
        """Инвариант: результат конечен и в [0, max_amount]"""
        amount = sanitize_amount(raw)
        assert math.isfinite(amount)
        assert 0.0 <= amount <= DEFAULT_CONFIG.limits.max_amount
