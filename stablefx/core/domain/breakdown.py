"""
Breakdown — результаты расчёта конвертации

Immutable Pydantic модели, создаются заново на каждый расчёт и
принадлежат вызывающему коду. Сравнение только по значению.
Полная совместимость с JSON Schema
(stablefx/core/contracts/schema/conversion_breakdown.json,
reverse_breakdown.json) через model_dump(mode="json").
"""

from pydantic import BaseModel, Field


# =============================================================================
# FORMATTED VIEWS
# =============================================================================


class FormattedConversion(BaseModel):
    """Строки для отображения forward расчёта (2 знака, группировка тысяч)."""

    gross_fiat: str
    provider_fee: str
    network_fee: str
    net_fiat: str
    spread_percent: str
    symbol: str

    model_config = {"frozen": True}


class FormattedReverse(BaseModel):
    """Строки для отображения reverse расчёта."""

    gross_stablecoin: str
    provider_fee: str
    network_fee: str
    net_stablecoin: str
    spread_percent: str
    symbol: str

    model_config = {"frozen": True}


# =============================================================================
# FORWARD: STABLECOIN → FIAT
# =============================================================================


class ConversionBreakdown(BaseModel):
    """
    Разбивка конвертации stablecoin → fiat.

    Immutable модель (frozen=True):
    - Вход (stablecoin_amount после санитизации, target_fiat)
    - Курсы (interbank, customer)
    - Разбивка (gross, provider fee, network fee, spread)
    - Итог (net_fiat, никогда не отрицательный)
    """

    # Вход
    stablecoin_amount: float = Field(..., ge=0, description="Сумма stablecoin после санитизации")
    target_fiat: str = Field(..., description="Целевая fiat валюта (upper case)")

    # Курсы
    interbank_rate: float = Field(..., description="Interbank курс target_fiat")
    customer_rate: float = Field(..., description="Customer курс target_fiat")

    # Разбивка
    gross_fiat: float = Field(..., ge=0, description="amount * customer_rate")
    provider_fee: float = Field(..., ge=0, description="Комиссия провайдера в fiat")
    provider_fee_percent: float = Field(..., ge=0, description="Комиссия провайдера, %")
    network_fee: float = Field(..., ge=0, description="Network fee в fiat")
    network_fee_reference: float = Field(
        ..., ge=0, description="Network fee в reference валюте"
    )
    reference_currency: str = Field(..., description="Reference валюта network fee")
    spread_percent: float = Field(..., description="Знаковый FX спред, %")

    # Итог
    net_fiat: float = Field(..., ge=0, description="Сумма к получению")

    formatted: FormattedConversion

    model_config = {"frozen": True}

    @property
    def total_fees(self) -> float:
        """Сумма удержаний в fiat (без спреда)"""
        return self.provider_fee + self.network_fee

    @property
    def is_saturated(self) -> bool:
        """Удержания съели всю сумму (net упёрся в ноль)"""
        return self.net_fiat == 0.0 and self.gross_fiat > 0.0


# =============================================================================
# REVERSE: FIAT → STABLECOIN
# =============================================================================


class ReverseBreakdown(BaseModel):
    """
    Разбивка обратной конвертации fiat → stablecoin.

    Приближённая инверсия forward модели: комиссия провайдера
    закладывается в effective_rate до деления, а не вычитается
    из fiat после. Асимметрия сохраняется намеренно.
    """

    # Вход
    fiat_amount: float = Field(..., ge=0, description="Сумма fiat после санитизации")
    source_fiat: str = Field(..., description="Исходная fiat валюта (upper case)")
    target_coin: str = Field(..., description="Целевой stablecoin (upper case)")

    # Курсы
    interbank_rate: float = Field(..., description="Interbank курс source_fiat")
    customer_rate: float = Field(..., description="Customer курс source_fiat")
    effective_rate: float = Field(..., ge=0, description="customer_rate * (1 - fee_ratio)")

    # Разбивка
    after_network_fee: float = Field(..., ge=0, description="fiat после network fee")
    gross_stablecoin: float = Field(..., ge=0, description="Требуемая сумма stablecoin")
    provider_fee_stablecoin: float = Field(..., ge=0, description="Комиссия провайдера в stablecoin")
    provider_fee_fiat: float = Field(..., ge=0, description="Комиссия провайдера в fiat")
    provider_fee_percent: float = Field(..., ge=0, description="Комиссия провайдера, %")
    network_fee: float = Field(..., ge=0, description="Network fee в fiat")
    network_fee_reference: float = Field(
        ..., ge=0, description="Network fee в reference валюте"
    )
    reference_currency: str = Field(..., description="Reference валюта network fee")
    spread_percent: float = Field(..., description="Знаковый FX спред, %")

    # Итог
    net_stablecoin: float = Field(..., ge=0, description="Stablecoin к получению")

    formatted: FormattedReverse

    model_config = {"frozen": True}
