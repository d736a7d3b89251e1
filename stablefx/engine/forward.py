"""
Forward Converter — stablecoin → fiat

Разбивка конвертации:
    gross_fiat     = amount * customer_rate
    provider_fee   = amount * provider_fee_ratio * customer_rate
    network_fee    = get_network_fee_in_fiat(target)
    spread_percent = (interbank - customer) / interbank * 100
    net_fiat       = max(0, gross_fiat - provider_fee - network_fee)

Комиссия провайдера — процент от суммы stablecoin, пересчитанный
по customer курсу. Насыщение net в ноль — не ошибка.
"""

from typing import Any

from stablefx.core.domain.breakdown import ConversionBreakdown, FormattedConversion
from stablefx.core.domain.config import FxConfig
from stablefx.core.domain.currency import DEFAULT_FIAT, normalize_code
from stablefx.core.math.numerical_safeguards import floor_at_zero, sanitize_float
from stablefx.engine.formatter import format_number
from stablefx.engine.rates import (
    calculate_spread_percent,
    get_customer_rate,
    get_interbank_rate,
    get_network_fee_in_fiat,
    get_symbol,
)
from stablefx.engine.sanitizer import sanitize_amount
from stablefx.engine.store import resolve_config


def calculate_conversion(
    amount: Any,
    target_fiat: Any = DEFAULT_FIAT,
    config: FxConfig | None = None,
) -> ConversionBreakdown:
    """
    Полная разбивка конвертации stablecoin → fiat.

    Чистая функция входа и immutable конфигурации. Не бросает исключений
    на пользовательский ввод (кроме UnknownCurrencyError в strict режиме).

    Args:
        amount: Сумма stablecoin (текст или число, сырой ввод)
        target_fiat: Код целевой fiat валюты (регистр не важен)
        config: Конфигурация (default: активная)

    Returns:
        ConversionBreakdown с форматированными строками
    """
    cfg = resolve_config(config)
    fiat = normalize_code(target_fiat)

    stablecoin_amount = sanitize_amount(amount, cfg)

    interbank_rate = get_interbank_rate(fiat, cfg)
    customer_rate = get_customer_rate(fiat, cfg)

    gross_fiat = sanitize_float(stablecoin_amount * customer_rate)

    provider_fee_stablecoin = stablecoin_amount * cfg.fees.provider_fee_ratio
    provider_fee = sanitize_float(provider_fee_stablecoin * customer_rate)

    network_fee = get_network_fee_in_fiat(fiat, cfg)

    spread_percent = calculate_spread_percent(interbank_rate, customer_rate)

    net_fiat = floor_at_zero(gross_fiat - provider_fee - network_fee)

    return ConversionBreakdown(
        stablecoin_amount=stablecoin_amount,
        target_fiat=fiat,
        interbank_rate=interbank_rate,
        customer_rate=customer_rate,
        gross_fiat=gross_fiat,
        provider_fee=provider_fee,
        provider_fee_percent=cfg.fees.provider_fee_percent,
        network_fee=network_fee,
        network_fee_reference=cfg.fees.flat_network_fee,
        reference_currency=cfg.fees.reference_currency,
        spread_percent=spread_percent,
        net_fiat=net_fiat,
        formatted=FormattedConversion(
            gross_fiat=format_number(gross_fiat),
            provider_fee=format_number(provider_fee),
            network_fee=format_number(network_fee),
            net_fiat=format_number(net_fiat),
            spread_percent=format_number(spread_percent, 2),
            symbol=get_symbol(fiat, cfg),
        ),
    )
