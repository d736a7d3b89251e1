"""
Core math modules для stablefx

Математические примитивы с гарантией численной стабильности.
"""

from stablefx.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_CALC,
    EPS_RATE,
    # NaN/Inf sanitization
    is_valid_float,
    sanitize_float,
    # Safe division
    safe_divide,
    # Range utilities
    clamp,
    floor_at_zero,
)

__all__ = [
    # Epsilon constants
    "EPS_CALC",
    "EPS_RATE",
    # NaN/Inf sanitization
    "is_valid_float",
    "sanitize_float",
    # Safe division
    "safe_divide",
    # Range utilities
    "clamp",
    "floor_at_zero",
]
