"""Widget view-model — чистый пересчёт состояния виджета конвертера.

Состояние виджета (выбранный coin, fiat, направление, текст ввода) —
immutable WidgetState. Каждое действие пользователя порождает новый
WidgetState, а recompute_view строит из него строки для отображения.
Сам движок состояния не хранит.

Переходы:
- with_amount / with_coin / with_fiat: замена одного поля
- swap_direction: смена направления, ввод сбрасывается в "0"
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any

from stablefx.core.domain.breakdown import ConversionBreakdown, ReverseBreakdown
from stablefx.core.domain.config import FxConfig
from stablefx.core.domain.currency import DEFAULT_FIAT, DEFAULT_STABLECOIN, normalize_code
from stablefx.engine.forward import calculate_conversion
from stablefx.engine.reverse import calculate_reverse_conversion
from stablefx.engine.sanitizer import validate_input


class Direction(str, Enum):
    """Направление конвертации виджета."""

    COIN_TO_FIAT = "coinToFiat"
    FIAT_TO_COIN = "fiatToCoin"


APPROX_PREFIX = "≈ "


@dataclass(frozen=True)
class WidgetState:
    """Состояние виджета."""

    coin: str = DEFAULT_STABLECOIN
    fiat: str = DEFAULT_FIAT
    direction: Direction = Direction.COIN_TO_FIAT
    amount: str = "0"


@dataclass(frozen=True)
class WidgetView:
    """Строки для привязки к элементам виджета."""

    # Очищенный текст ввода (UI заменяет им поле, если он изменился)
    amount: str
    input_suffix: str
    output_text: str
    output_suffix: str

    # Строки разбивки
    gross_line: str
    provider_fee_line: str
    network_fee_line: str
    spread_line: str
    net_line: str

    breakdown: ConversionBreakdown | ReverseBreakdown


# =============================================================================
# TRANSITIONS
# =============================================================================


def with_amount(state: WidgetState, raw: Any) -> WidgetState:
    """Новый текст ввода (очищается через validate_input)."""
    return replace(state, amount=validate_input(raw))


def with_coin(state: WidgetState, coin: Any) -> WidgetState:
    return replace(state, coin=normalize_code(coin))


def with_fiat(state: WidgetState, fiat: Any) -> WidgetState:
    return replace(state, fiat=normalize_code(fiat))


def swap_direction(state: WidgetState) -> WidgetState:
    """Смена направления: новая сторона ввода начинает с "0"."""
    if state.direction is Direction.COIN_TO_FIAT:
        direction = Direction.FIAT_TO_COIN
    else:
        direction = Direction.COIN_TO_FIAT
    return replace(state, direction=direction, amount="0")


# =============================================================================
# VIEW
# =============================================================================


def recompute_view(state: WidgetState, config: FxConfig | None = None) -> WidgetView:
    """
    Построение отображения из состояния.

    Args:
        state: Текущее состояние виджета
        config: Конфигурация (default: активная)

    Returns:
        WidgetView со строками и исходной разбивкой
    """
    amount = validate_input(state.amount)

    if state.direction is Direction.COIN_TO_FIAT:
        result = calculate_conversion(amount, state.fiat, config)
        fmt = result.formatted
        symbol = fmt.symbol
        return WidgetView(
            amount=amount,
            input_suffix=normalize_code(state.coin),
            output_text=f"{APPROX_PREFIX}{symbol}{fmt.net_fiat}",
            output_suffix=result.target_fiat,
            gross_line=f"{symbol}{fmt.gross_fiat}",
            provider_fee_line=f"- {symbol}{fmt.provider_fee}",
            network_fee_line=f"- {symbol}{fmt.network_fee}",
            spread_line=f"{fmt.spread_percent}% spread",
            net_line=f"{APPROX_PREFIX}{symbol}{fmt.net_fiat}",
            breakdown=result,
        )

    result = calculate_reverse_conversion(amount, state.fiat, state.coin, config)
    fmt = result.formatted
    symbol = fmt.symbol
    return WidgetView(
        amount=amount,
        input_suffix=result.source_fiat,
        output_text=f"{APPROX_PREFIX}{fmt.net_stablecoin}",
        output_suffix=result.target_coin,
        gross_line=f"{fmt.gross_stablecoin} {result.target_coin}",
        provider_fee_line=f"- {symbol}{fmt.provider_fee}",
        network_fee_line=f"- {symbol}{fmt.network_fee}",
        spread_line=f"{fmt.spread_percent}% spread",
        net_line=f"{APPROX_PREFIX}{fmt.net_stablecoin} {result.target_coin}",
        breakdown=result,
    )


# =============================================================================
# QUICK RESULTS
# =============================================================================


def get_net_fiat(
    stablecoin_amount: Any,
    target_fiat: Any = DEFAULT_FIAT,
    config: FxConfig | None = None,
) -> str:
    """
    Короткий результат forward расчёта: "≈ ₱5,703.75".
    """
    result = calculate_conversion(stablecoin_amount, target_fiat, config)
    return f"{APPROX_PREFIX}{result.formatted.symbol}{result.formatted.net_fiat}"


def get_net_stablecoin(
    fiat_amount: Any,
    source_fiat: Any = DEFAULT_FIAT,
    target_coin: Any = DEFAULT_STABLECOIN,
    config: FxConfig | None = None,
) -> str:
    """
    Короткий результат reverse расчёта: "≈ 98.25".
    """
    result = calculate_reverse_conversion(fiat_amount, source_fiat, target_coin, config)
    return f"{APPROX_PREFIX}{result.formatted.net_stablecoin}"
