"""
Numerical Safeguards — Safe Math Primitives

Модуль обеспечивает численную устойчивость расчётов конвертации:
- Безопасное деление с защитой от деления на ноль
- NaN/Inf санитизация для предотвращения распространения невалидных значений
- Ограничение значений диапазоном (clamp, floor at zero)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Деление на ноль никогда не происходит (возвращается fallback)
2. NaN/Inf никогда не пропагируют в результат (заменяются на fallback)
3. Денежные итоги никогда не бывают отрицательными (floor_at_zero)
4. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Epsilon для курсов (fiat за 1 stablecoin)
# Знаменатели меньше этого порога считаются нулевыми
EPS_RATE: Final[float] = 1e-12

# Epsilon для общих вычислений
EPS_CALC: Final[float] = 1e-12


# =============================================================================
# NaN/Inf САНИТИЗАЦИЯ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


def sanitize_float(value: float, fallback: float = 0.0) -> float:
    """
    Санитизация float: замена NaN/Inf на fallback значение.

    Args:
        value: Исходное значение
        fallback: Значение для замены NaN/Inf (default: 0.0)

    Returns:
        value если валидное, иначе fallback

    Examples:
        >>> sanitize_float(10.0)
        10.0
        >>> sanitize_float(float('nan'))
        0.0
        >>> sanitize_float(float('-inf'), fallback=-1.0)
        -1.0
    """
    if is_valid_float(value):
        return value
    return fallback


# =============================================================================
# БЕЗОПАСНОЕ ДЕЛЕНИЕ
# =============================================================================


def safe_divide(
    numerator: float,
    denominator: float,
    eps: float = EPS_CALC,
    fallback: float = 0.0,
) -> float:
    """
    Безопасное деление с защитой от деления на ноль и NaN/Inf.

    В отличие от epsilon-подстановки в знаменатель, здесь знаменатель
    с abs(denominator) < eps считается нулевым и возвращается fallback:
    курс 1e-20 — это ошибка данных, а не повод вернуть 1e20 монет.

    Args:
        numerator: Числитель
        denominator: Знаменатель
        eps: Порог, ниже которого знаменатель считается нулём
        fallback: Значение при делении на ноль или невалидном результате

    Returns:
        Результат деления или fallback

    Examples:
        >>> safe_divide(10.0, 2.0)
        5.0
        >>> safe_divide(10.0, 0.0)
        0.0
        >>> safe_divide(float('nan'), 2.0)
        0.0
    """
    if eps <= 0:
        raise ValueError(f"eps must be positive, got {eps}")

    num_clean = sanitize_float(numerator, fallback=0.0)
    denom_clean = sanitize_float(denominator, fallback=0.0)

    if abs(denom_clean) < eps:
        return fallback

    try:
        result = num_clean / denom_clean
    except (ZeroDivisionError, OverflowError):
        return fallback

    return sanitize_float(result, fallback=fallback)


# =============================================================================
# ОГРАНИЧЕНИЕ ДИАПАЗОНОМ
# =============================================================================


def clamp(
    value: float,
    min_value: float | None = None,
    max_value: float | None = None,
) -> float:
    """
    Ограничение значения в заданном диапазоне.

    Args:
        value: Исходное значение
        min_value: Минимальное допустимое значение (optional)
        max_value: Максимальное допустимое значение (optional)

    Returns:
        Значение, ограниченное диапазоном [min_value, max_value]

    Examples:
        >>> clamp(5.0, 0.0, 10.0)
        5.0
        >>> clamp(-1.0, 0.0, 10.0)
        0.0
        >>> clamp(15.0, 0.0, 10.0)
        10.0
    """
    result = value

    if min_value is not None:
        result = max(result, min_value)

    if max_value is not None:
        result = min(result, max_value)

    return result


def floor_at_zero(value: float) -> float:
    """
    Насыщение снизу нулём для денежных итогов.

    NaN/Inf тоже превращаются в 0.0: net никогда не бывает
    отрицательным или бесконечным.

    Examples:
        >>> floor_at_zero(-3.5)
        0.0
        >>> floor_at_zero(float('inf'))
        0.0
    """
    if not is_valid_float(value) or value < 0:
        return 0.0
    return value
