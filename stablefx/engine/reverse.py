"""
Reverse Converter — fiat → stablecoin

Сколько stablecoin нужно, чтобы после той же модели комиссий
плательщик расстался с заданной суммой fiat:
    after_network_fee       = max(0, amount - network_fee)
    effective_rate          = customer_rate * (1 - provider_fee_ratio)
    gross_stablecoin        = after_network_fee / effective_rate
    provider_fee_stablecoin = gross_stablecoin * provider_fee_ratio
    provider_fee_fiat       = provider_fee_stablecoin * customer_rate
    net_stablecoin          = max(0, gross_stablecoin - provider_fee_stablecoin)

Это приближённая, а не алгебраическая инверсия forward модели:
forward вычитает комиссию в fiat после умножения, reverse закладывает
её в effective_rate до деления. Асимметрия — часть mock модели
ценообразования и не исправляется, т.к. меняет наблюдаемые суммы.
"""

import logging
from typing import Any

from stablefx.core.domain.breakdown import FormattedReverse, ReverseBreakdown
from stablefx.core.domain.config import FxConfig
from stablefx.core.domain.currency import DEFAULT_FIAT, DEFAULT_STABLECOIN, normalize_code
from stablefx.core.math.numerical_safeguards import (
    EPS_RATE,
    floor_at_zero,
    safe_divide,
    sanitize_float,
)
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

logger = logging.getLogger(__name__)


def calculate_reverse_conversion(
    fiat_amount: Any,
    source_fiat: Any = DEFAULT_FIAT,
    target_coin: Any = DEFAULT_STABLECOIN,
    config: FxConfig | None = None,
) -> ReverseBreakdown:
    """
    Полная разбивка обратной конвертации fiat → stablecoin.

    Args:
        fiat_amount: Сумма fiat (текст или число, сырой ввод)
        source_fiat: Код исходной fiat валюты (регистр не важен)
        target_coin: Код целевого stablecoin (только метка, курсы не зависят)
        config: Конфигурация (default: активная)

    Returns:
        ReverseBreakdown с форматированными строками
    """
    cfg = resolve_config(config)
    fiat = normalize_code(source_fiat)
    coin = normalize_code(target_coin)
    fee_ratio = cfg.fees.provider_fee_ratio

    amount = sanitize_amount(fiat_amount, cfg)

    customer_rate = get_customer_rate(fiat, cfg)
    interbank_rate = get_interbank_rate(fiat, cfg)

    network_fee = get_network_fee_in_fiat(fiat, cfg)
    after_network_fee = floor_at_zero(amount - network_fee)

    effective_rate = customer_rate * (1 - fee_ratio)

    # effective_rate == 0 → gross 0 (safe_divide fallback)
    gross_stablecoin = safe_divide(after_network_fee, effective_rate, eps=EPS_RATE)
    if effective_rate < EPS_RATE and after_network_fee > 0:
        logger.debug("Effective rate %s for %s is zero, gross forced to 0", effective_rate, fiat)

    provider_fee_stablecoin = sanitize_float(gross_stablecoin * fee_ratio)
    provider_fee_fiat = sanitize_float(provider_fee_stablecoin * customer_rate)

    net_stablecoin = floor_at_zero(gross_stablecoin - provider_fee_stablecoin)

    spread_percent = calculate_spread_percent(interbank_rate, customer_rate)

    return ReverseBreakdown(
        fiat_amount=amount,
        source_fiat=fiat,
        target_coin=coin,
        interbank_rate=interbank_rate,
        customer_rate=customer_rate,
        effective_rate=effective_rate,
        after_network_fee=after_network_fee,
        gross_stablecoin=gross_stablecoin,
        provider_fee_stablecoin=provider_fee_stablecoin,
        provider_fee_fiat=provider_fee_fiat,
        provider_fee_percent=cfg.fees.provider_fee_percent,
        network_fee=network_fee,
        network_fee_reference=cfg.fees.flat_network_fee,
        reference_currency=cfg.fees.reference_currency,
        spread_percent=spread_percent,
        net_stablecoin=net_stablecoin,
        formatted=FormattedReverse(
            gross_stablecoin=format_number(gross_stablecoin),
            provider_fee=format_number(provider_fee_fiat),
            network_fee=format_number(network_fee),
            net_stablecoin=format_number(net_stablecoin),
            spread_percent=format_number(spread_percent, 2),
            symbol=get_symbol(fiat, cfg),
        ),
    )
