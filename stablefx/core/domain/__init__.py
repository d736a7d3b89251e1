"""
Domain models and value objects.

Contains currency codes, the immutable configuration store and the
conversion breakdown values.
"""

from stablefx.core.domain.breakdown import (
    ConversionBreakdown,
    FormattedConversion,
    FormattedReverse,
    ReverseBreakdown,
)
from stablefx.core.domain.config import (
    DEFAULT_CONFIG,
    LEGACY_CONFIG,
    AmountLimits,
    ConfigurationError,
    FeeModel,
    FxConfig,
    NetworkFeeMode,
    RateEntry,
    UnknownCurrencyError,
)
from stablefx.core.domain.currency import (
    DEFAULT_FIAT,
    DEFAULT_STABLECOIN,
    CurrencyCode,
    normalize_code,
)

__all__ = [
    # Currency
    "CurrencyCode",
    "DEFAULT_FIAT",
    "DEFAULT_STABLECOIN",
    "normalize_code",
    # Config
    "AmountLimits",
    "FeeModel",
    "FxConfig",
    "NetworkFeeMode",
    "RateEntry",
    "DEFAULT_CONFIG",
    "LEGACY_CONFIG",
    "ConfigurationError",
    "UnknownCurrencyError",
    # Breakdowns
    "ConversionBreakdown",
    "FormattedConversion",
    "ReverseBreakdown",
    "FormattedReverse",
]
