"""
Rate Resolver — курсы, символы и network fee

Lenient режим (по умолчанию): неизвестный код валюты даёт курс 1.0
и символ "$", виджет пересчитывается на каждое нажатие клавиши.
Расчёт, по которому двигаются деньги, должен включать
FxConfig.strict_currency_lookup (UnknownCurrencyError вместо подстановки)
или проверять RateLookup.found.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Final

from stablefx.core.domain.config import (
    FeeModel,
    FxConfig,
    NetworkFeeMode,
    RateEntry,
    UnknownCurrencyError,
)
from stablefx.core.domain.currency import normalize_code
from stablefx.core.math.numerical_safeguards import EPS_RATE, safe_divide
from stablefx.engine.store import resolve_config

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

# Подстановка для неизвестного кода в lenient режиме
FALLBACK_RATE: Final[float] = 1.0
FALLBACK_SYMBOL: Final[str] = "$"


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class RateLookup:
    """Результат поиска курса: найден в таблице или подставлен fallback."""

    code: str
    rate: float
    found: bool


# =============================================================================
# RATE LOOKUP
# =============================================================================


def _lookup(code: Any, config: FxConfig, field: str) -> RateLookup:
    key = normalize_code(code)
    entry = config.rates.get(key)

    if entry is not None:
        return RateLookup(code=key, rate=getattr(entry, field), found=True)

    if config.strict_currency_lookup:
        raise UnknownCurrencyError(key, table=field)

    logger.debug("Unknown currency %r, %s falls back to %s", key, field, FALLBACK_RATE)
    return RateLookup(code=key, rate=FALLBACK_RATE, found=False)


def lookup_interbank_rate(code: Any, config: FxConfig | None = None) -> RateLookup:
    """
    Interbank курс с признаком наличия в таблице.

    Raises:
        UnknownCurrencyError: Только в strict режиме
    """
    return _lookup(code, resolve_config(config), "interbank_rate")


def lookup_customer_rate(code: Any, config: FxConfig | None = None) -> RateLookup:
    """
    Customer курс с признаком наличия в таблице.

    Raises:
        UnknownCurrencyError: Только в strict режиме
    """
    return _lookup(code, resolve_config(config), "customer_rate")


def get_interbank_rate(code: Any, config: FxConfig | None = None) -> float:
    """Interbank курс: 1 stablecoin = X fiat (1.0 для неизвестного кода)."""
    return lookup_interbank_rate(code, config).rate


def get_customer_rate(code: Any, config: FxConfig | None = None) -> float:
    """Customer курс: 1 stablecoin = X fiat (1.0 для неизвестного кода)."""
    return lookup_customer_rate(code, config).rate


def get_symbol(code: Any, config: FxConfig | None = None) -> str:
    """
    Символ валюты для отображения.

    Examples:
        >>> get_symbol("PHP")
        '₱'
        >>> get_symbol("EUR")
        '$'
    """
    symbol = resolve_config(config).symbols.get(normalize_code(code))
    return symbol or FALLBACK_SYMBOL


# =============================================================================
# FEES AND SPREAD
# =============================================================================


def get_network_fee_in_fiat(target: Any, config: FxConfig | None = None) -> float:
    """
    Пересчёт фиксированной network fee из reference валюты в target.

    - target == reference: flat_network_fee без пересчёта
    - CONVERTED: flat_fee * customer_rate[target] / customer_rate[reference]
    - LEGACY: flat_fee * customer_rate[target] только для
      legacy_converted_currencies, иначе flat_fee без пересчёта

    Args:
        target: Код fiat валюты сделки
        config: Конфигурация (default: активная)

    Returns:
        Network fee в target валюте (>= 0)
    """
    cfg = resolve_config(config)
    fees = cfg.fees
    key = normalize_code(target)

    if key == fees.reference_currency:
        return fees.flat_network_fee

    target_rate = get_customer_rate(key, cfg)

    if fees.network_fee_mode is NetworkFeeMode.LEGACY:
        if key in fees.legacy_converted_currencies:
            return fees.flat_network_fee * target_rate
        return fees.flat_network_fee

    reference_rate = get_customer_rate(fees.reference_currency, cfg)
    return safe_divide(fees.flat_network_fee * target_rate, reference_rate, eps=EPS_RATE)


def calculate_spread_percent(interbank_rate: float, customer_rate: float) -> float:
    """
    Знаковый FX спред в процентах относительно interbank курса.

    Положительный, когда customer курс хуже interbank. Нулевой
    interbank курс даёт 0.0.

    Examples:
        >>> round(calculate_spread_percent(59.0, 58.5), 4)
        0.8475
        >>> calculate_spread_percent(1.0, 1.1) < 0
        True
    """
    return safe_divide(interbank_rate - customer_rate, interbank_rate, eps=EPS_RATE) * 100


# =============================================================================
# READ-ONLY ACCESS
# =============================================================================


def get_fee_model(config: FxConfig | None = None) -> FeeModel:
    """Активная модель комиссий (например, для подписи "0.5% fee")."""
    return resolve_config(config).fees


def get_rate_table(config: FxConfig | None = None) -> Mapping[str, RateEntry]:
    """Таблица курсов, доступная только для чтения."""
    return resolve_config(config).rates
