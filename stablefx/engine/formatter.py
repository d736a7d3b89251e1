"""
Formatter — детерминированное форматирование чисел для отображения

Формат не зависит от локали и thread-local decimal контекста хоста:
группировка по 3 цифры через ",", "." как десятичный разделитель,
ровно `decimals` знаков дробной части.

Округление: half away from zero по кратчайшему десятичному
представлению float (repr), т.е. 1.005 → "1.01", 0.49875 → "0.50".
"""

from decimal import ROUND_HALF_UP, Context, Decimal, InvalidOperation
from typing import Any, Final

from stablefx.core.math.numerical_safeguards import is_valid_float

# =============================================================================
# CONSTANTS
# =============================================================================

DEFAULT_DECIMALS: Final[int] = 2

# Максимум знаков дробной части
MAX_DECIMALS: Final[int] = 20

# Собственный контекст: точности хватает на любой конечный float
_FORMAT_CONTEXT: Final[Context] = Context(prec=400, rounding=ROUND_HALF_UP)


# =============================================================================
# FORMATTING
# =============================================================================


def zero_string(decimals: int = DEFAULT_DECIMALS) -> str:
    """
    Ноль с заданным числом знаков.

    Examples:
        >>> zero_string(2)
        '0.00'
        >>> zero_string(0)
        '0'
    """
    if decimals == 0:
        return "0"
    return "0." + "0" * decimals


def format_number(value: Any, decimals: int = DEFAULT_DECIMALS) -> str:
    """
    Форматирование числа с фиксированной точностью и группировкой тысяч.

    Args:
        value: Число (float, int, Decimal). NaN/Inf и нечисловые значения
               дают ноль нужной ширины
        decimals: Количество знаков дробной части (0..MAX_DECIMALS)

    Returns:
        Строка вида "5,703.75"

    Raises:
        ValueError: Если decimals вне [0, MAX_DECIMALS]

    Examples:
        >>> format_number(5703.75)
        '5,703.75'
        >>> format_number(float('nan'))
        '0.00'
        >>> format_number(1234567.891, 0)
        '1,234,568'
    """
    if isinstance(decimals, bool) or not isinstance(decimals, int):
        raise ValueError(f"decimals must be an int, got {decimals!r}")
    if not 0 <= decimals <= MAX_DECIMALS:
        raise ValueError(f"decimals must be in [0, {MAX_DECIMALS}], got {decimals}")

    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return zero_string(decimals)

    if not is_valid_float(number):
        return zero_string(decimals)

    quantum = Decimal(1).scaleb(-decimals, context=_FORMAT_CONTEXT)
    try:
        rounded = Decimal(repr(number)).quantize(quantum, context=_FORMAT_CONTEXT)
    except InvalidOperation:
        return zero_string(decimals)

    # -0.001 → "0.00", без знака минус
    if rounded.is_zero():
        rounded = rounded.copy_abs()

    return f"{rounded:,f}"
