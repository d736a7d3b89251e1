"""
Sanitizer — нормализация свободного ввода суммы

Ввод из UI никогда не вызывает ошибку: некорректный текст деградирует
до ближайшего валидного числового префикса, суммы вне диапазона
насыщаются до границ AmountLimits.

ИНВАРИАНТЫ:
1. validate_input идемпотентна: validate_input(validate_input(x)) == validate_input(x)
2. validate_input оставляет не более одной точки и не более 6 знаков дробной части
3. sanitize_amount всегда возвращает конечное число в [0, max_amount]
"""

import logging
import math
import numbers
import re
from typing import Any, Final

from stablefx.core.domain.config import AmountLimits, FxConfig
from stablefx.core.math.numerical_safeguards import clamp
from stablefx.engine.store import resolve_config

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

# Максимум знаков дробной части в тексте ввода
MAX_FRACTION_DIGITS: Final[int] = 6

# Всё, что не ASCII цифра и не точка
_NON_NUMERIC: Final[re.Pattern[str]] = re.compile(r"[^0-9.]")


# =============================================================================
# TEXT CLEANING
# =============================================================================


def validate_input(raw: Any) -> str:
    """
    Очистка текста ввода суммы.

    - удаляются все символы, кроме цифр и точки
    - сохраняется только первая точка (цифры после остальных точек остаются)
    - дробная часть обрезается до MAX_FRACTION_DIGITS знаков

    Args:
        raw: Текст из поля ввода (None и пустая строка допустимы)

    Returns:
        Очищенный текст или "" для пустого ввода

    Examples:
        >>> validate_input("12.3.4.5")
        '12.345'
        >>> validate_input("abc")
        ''
        >>> validate_input("$1,000.1234567")
        '1000.123456'
    """
    if raw is None or raw == "":
        return ""

    cleaned = _NON_NUMERIC.sub("", str(raw))

    integer_part, point, fraction = cleaned.partition(".")
    if not point:
        return integer_part

    fraction = fraction.replace(".", "")[:MAX_FRACTION_DIGITS]
    return f"{integer_part}.{fraction}"


# =============================================================================
# AMOUNT SANITIZATION
# =============================================================================


def _clamp_to_limits(amount: float, limits: AmountLimits) -> float:
    """
    Насыщение суммы границами.

    NaN и суммы ниже min_amount дают 0.0, суммы выше max_amount
    (включая +inf) дают max_amount.
    """
    if math.isnan(amount) or amount < 0 or amount < limits.min_amount:
        return 0.0

    clamped = clamp(amount, max_value=limits.max_amount)
    if clamped != amount:
        logger.debug("Amount %s clamped to max_amount %s", amount, limits.max_amount)

    return clamped


def sanitize_amount(raw: Any, config: FxConfig | None = None) -> float:
    """
    Преобразование сырого ввода в безопасную сумму.

    Текст проходит validate_input и парсится. Число используется
    как есть (без очистки текста), поэтому отрицательное число даёт 0.0,
    а текст "-5" после удаления знака даёт 5.0.

    Args:
        raw: Текст или число (None допустим)
        config: Конфигурация (default: активная)

    Returns:
        Конечная сумма в [0, max_amount]

    Examples:
        >>> sanitize_amount("12.3.4.5")
        12.345
        >>> sanitize_amount("abc")
        0.0
        >>> sanitize_amount("999999999")
        100000.0
    """
    limits = resolve_config(config).limits

    # bool является подклассом int, но не сумма
    if raw is None or isinstance(raw, bool):
        return 0.0

    if isinstance(raw, numbers.Number):
        try:
            amount = float(raw)
        except OverflowError:
            # int за пределами float
            amount = math.inf if raw > 0 else -math.inf
        except (TypeError, ValueError):
            return 0.0
        return _clamp_to_limits(amount, limits)

    cleaned = validate_input(raw)
    try:
        amount = float(cleaned)
    except ValueError:
        return 0.0

    return _clamp_to_limits(amount, limits)
