"""Engine — чистые функции расчёта разбивки конвертации.

Поток данных:
- Sanitizer: сырой ввод → безопасная сумма
- Rate Resolver: курсы, символы, network fee
- Forward / Reverse Converter: разбивка gross/fee/net
- Formatter: строки для отображения
"""

from .formatter import DEFAULT_DECIMALS, MAX_DECIMALS, format_number, zero_string
from .forward import calculate_conversion
from .rates import (
    FALLBACK_RATE,
    FALLBACK_SYMBOL,
    RateLookup,
    calculate_spread_percent,
    get_customer_rate,
    get_fee_model,
    get_interbank_rate,
    get_network_fee_in_fiat,
    get_rate_table,
    get_symbol,
    lookup_customer_rate,
    lookup_interbank_rate,
)
from .reverse import calculate_reverse_conversion
from .sanitizer import MAX_FRACTION_DIGITS, sanitize_amount, validate_input
from .store import get_active_config, resolve_config, set_active_config

__all__ = [
    # Store
    "get_active_config",
    "set_active_config",
    "resolve_config",
    # Sanitizer
    "MAX_FRACTION_DIGITS",
    "validate_input",
    "sanitize_amount",
    # Rate Resolver
    "FALLBACK_RATE",
    "FALLBACK_SYMBOL",
    "RateLookup",
    "lookup_interbank_rate",
    "lookup_customer_rate",
    "get_interbank_rate",
    "get_customer_rate",
    "get_symbol",
    "get_network_fee_in_fiat",
    "calculate_spread_percent",
    "get_fee_model",
    "get_rate_table",
    # Converters
    "calculate_conversion",
    "calculate_reverse_conversion",
    # Formatter
    "DEFAULT_DECIMALS",
    "MAX_DECIMALS",
    "format_number",
    "zero_string",
]
