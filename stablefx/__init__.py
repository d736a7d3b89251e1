"""
stablefx — stablecoin/fiat conversion fee breakdown engine

Stateless pure calculator over a static, injectable rate table:
gross value, provider fee, network fee, FX spread and net amount.
"""

import logging

from stablefx.core.domain import (
    DEFAULT_CONFIG,
    LEGACY_CONFIG,
    AmountLimits,
    ConfigurationError,
    ConversionBreakdown,
    CurrencyCode,
    FeeModel,
    FxConfig,
    NetworkFeeMode,
    RateEntry,
    ReverseBreakdown,
    UnknownCurrencyError,
)
from stablefx.engine import (
    RateLookup,
    calculate_conversion,
    calculate_reverse_conversion,
    format_number,
    get_active_config,
    get_customer_rate,
    get_fee_model,
    get_interbank_rate,
    get_network_fee_in_fiat,
    get_rate_table,
    get_symbol,
    lookup_customer_rate,
    lookup_interbank_rate,
    sanitize_amount,
    set_active_config,
    validate_input,
)
from stablefx.view import get_net_fiat, get_net_stablecoin

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # Configuration
    "AmountLimits",
    "FeeModel",
    "FxConfig",
    "NetworkFeeMode",
    "RateEntry",
    "DEFAULT_CONFIG",
    "LEGACY_CONFIG",
    "get_active_config",
    "set_active_config",
    "get_fee_model",
    "get_rate_table",
    # Errors
    "ConfigurationError",
    "UnknownCurrencyError",
    # Types
    "CurrencyCode",
    "ConversionBreakdown",
    "ReverseBreakdown",
    "RateLookup",
    # Operations
    "validate_input",
    "sanitize_amount",
    "calculate_conversion",
    "calculate_reverse_conversion",
    "format_number",
    "get_symbol",
    "get_interbank_rate",
    "get_customer_rate",
    "lookup_interbank_rate",
    "lookup_customer_rate",
    "get_network_fee_in_fiat",
    "get_net_fiat",
    "get_net_stablecoin",
]
