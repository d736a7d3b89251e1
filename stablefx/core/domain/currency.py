"""
CurrencyCode — идентификаторы валют

Множество кодов открытое: любая строка нормализуется (strip + upper)
и ищется в таблице курсов. Enum перечисляет коды дефолтной конфигурации.
"""

from enum import Enum
from typing import Any, Final


class CurrencyCode(str, Enum):
    """Известные коды валют"""

    # Fiat
    USD = "USD"
    PHP = "PHP"

    # Stablecoins
    USDC = "USDC"
    USDT = "USDT"


DEFAULT_FIAT: Final[str] = CurrencyCode.USD.value
DEFAULT_STABLECOIN: Final[str] = CurrencyCode.USDC.value


def normalize_code(code: Any) -> str:
    """
    Нормализация кода валюты.

    Принимает CurrencyCode, строку в любом регистре или None.

    Examples:
        >>> normalize_code(" php ")
        'PHP'
        >>> normalize_code(CurrencyCode.USDC)
        'USDC'
        >>> normalize_code(None)
        ''
    """
    if code is None:
        return ""
    if isinstance(code, Enum):
        code = code.value
    return str(code).strip().upper()
