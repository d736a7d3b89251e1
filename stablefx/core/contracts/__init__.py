"""
Contract Validation Module

Модуль для валидации JSON контрактов stablefx: options конфигурации
и сериализованных результатов конвертации.
"""

from .validators import (
    CONVERSION_BREAKDOWN_SCHEMA,
    FX_CONFIG_SCHEMA,
    REVERSE_BREAKDOWN_SCHEMA,
    ContractValidator,
    SchemaLoader,
    get_validator,
    validate_conversion_breakdown,
    validate_fx_config,
    validate_reverse_breakdown,
)

__all__ = [
    # Schema names
    "FX_CONFIG_SCHEMA",
    "CONVERSION_BREAKDOWN_SCHEMA",
    "REVERSE_BREAKDOWN_SCHEMA",
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "get_validator",
    # Functions
    "validate_fx_config",
    "validate_conversion_breakdown",
    "validate_reverse_breakdown",
]
