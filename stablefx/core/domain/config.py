"""
FxConfig — Configuration Store конвертера

Immutable Pydantic модели конфигурации:
- RateEntry: interbank/customer курс одной fiat валюты
- FeeModel: комиссия провайдера, фиксированная network fee, reference валюта
- AmountLimits: границы суммы ввода
- FxConfig: полная таблица (курсы, комиссии, лимиты, символы, stablecoins)

Конфигурация создаётся один раз и никогда не мутирует. Для обновления
курсов строится новый FxConfig и подменяется ссылка
(см. stablefx.engine.store).

Ошибки конфигурации — единственные исключения движка:
- ConfigurationError: нарушение контракта options, непарные курсы
- pydantic.ValidationError: нарушение ограничений отдельных полей
"""

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType
from typing import Any, Final

from pydantic import (
    BaseModel,
    Field,
    SerializerFunctionWrapHandler,
    field_serializer,
    field_validator,
    model_validator,
)

from stablefx.core.contracts import FX_CONFIG_SCHEMA, get_validator
from stablefx.core.domain.currency import CurrencyCode, normalize_code


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ConfigurationError(ValueError):
    """Некорректная конфигурация курсов/комиссий."""


class UnknownCurrencyError(ConfigurationError):
    """
    Код валюты отсутствует в таблице курсов.

    Поднимается только при strict_currency_lookup=True. В lenient режиме
    (по умолчанию) движок подставляет курс 1.0, что допустимо для
    виджета отображения, но не для расчётов, по которым двигаются деньги.
    """

    def __init__(self, code: str, table: str = "rates"):
        self.code = code
        self.table = table
        super().__init__(f"Unknown currency code '{code}' in {table} table")


# =============================================================================
# ENUMS
# =============================================================================


class NetworkFeeMode(str, Enum):
    """
    Способ пересчёта фиксированной network fee в валюту сделки.

    CONVERTED: flat_fee * customer_rate[target] / customer_rate[reference]
               для любой валюты, отличной от reference.
    LEGACY:    исходная mock-модель. Пересчитываются только коды из
               legacy_converted_currencies (flat_fee * customer_rate[target]),
               остальные получают flat_fee без пересчёта.
    """

    CONVERTED = "CONVERTED"
    LEGACY = "LEGACY"


# =============================================================================
# MODELS
# =============================================================================


class RateEntry(BaseModel):
    """
    Курсы одной fiat валюты: 1 stablecoin = X fiat.

    customer_rate <= interbank_rate ожидается бизнесом, но не проверяется:
    спред считается как знаковый процент.
    """

    interbank_rate: float = Field(..., gt=0, description="Interbank (wholesale) курс")
    customer_rate: float = Field(..., gt=0, description="Курс, применяемый к средствам клиента")

    model_config = {"frozen": True, "allow_inf_nan": False}


class FeeModel(BaseModel):
    """Модель комиссий: процент провайдера + фиксированная network fee."""

    provider_fee_ratio: float = Field(
        0.005, ge=0, lt=1, description="Комиссия провайдера (доля суммы stablecoin)"
    )
    flat_network_fee: float = Field(
        2.0, ge=0, description="Network fee в reference валюте"
    )
    reference_currency: str = Field(
        CurrencyCode.USD.value, min_length=1, description="Валюта network fee"
    )
    network_fee_mode: NetworkFeeMode = Field(
        NetworkFeeMode.CONVERTED, description="Способ пересчёта network fee"
    )
    legacy_converted_currencies: tuple[str, ...] = Field(
        (CurrencyCode.PHP.value,),
        description="Коды, пересчитываемые в LEGACY режиме",
    )

    model_config = {"frozen": True, "allow_inf_nan": False}

    @field_validator("reference_currency")
    @classmethod
    def normalize_reference_currency(cls, v: str) -> str:
        """Reference валюта хранится в upper case"""
        code = normalize_code(v)
        if not code:
            raise ValueError("reference_currency must not be blank")
        return code

    @field_validator("legacy_converted_currencies")
    @classmethod
    def normalize_legacy_codes(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        return tuple(normalize_code(code) for code in v)

    @property
    def provider_fee_percent(self) -> float:
        """Комиссия провайдера в процентах (0.005 → 0.5)"""
        return self.provider_fee_ratio * 100


class AmountLimits(BaseModel):
    """Границы суммы ввода [min_amount, max_amount]."""

    min_amount: float = Field(0.0, ge=0, description="Минимальная сумма")
    max_amount: float = Field(100000.0, gt=0, description="Максимальная сумма")

    model_config = {"frozen": True, "allow_inf_nan": False}

    @model_validator(mode="after")
    def validate_bounds(self) -> "AmountLimits":
        """Проверка, что min_amount <= max_amount"""
        if self.min_amount > self.max_amount:
            raise ValueError(
                f"min_amount {self.min_amount} must be <= max_amount {self.max_amount}"
            )
        return self


# Соответствие snake_case → camelCase ключей options
_OPTION_KEYS: Final[dict[str, str]] = {
    "interbank_rates": "interbankRates",
    "customer_rates": "customerRates",
    "provider_fee_ratio": "providerFeeRatio",
    "flat_network_fee": "flatNetworkFee",
    "reference_currency": "referenceCurrency",
    "symbols": "symbols",
    "min_amount": "minAmount",
    "max_amount": "maxAmount",
    "stablecoins": "stablecoins",
    "network_fee_mode": "networkFeeMode",
    "legacy_converted_currencies": "legacyConvertedCurrencies",
    "strict_currency_lookup": "strictCurrencyLookup",
}


class FxConfig(BaseModel):
    """
    Configuration Store: таблица курсов, комиссии, лимиты и символы.

    Immutable модель (frozen=True). Ключи таблиц нормализуются в upper case,
    таблицы rates и symbols хранятся как MappingProxyType (только чтение).
    """

    rates: Mapping[str, RateEntry] = Field(..., description="Курсы по fiat кодам")
    fees: FeeModel = Field(default_factory=FeeModel, description="Модель комиссий")
    limits: AmountLimits = Field(default_factory=AmountLimits, description="Лимиты суммы")
    symbols: Mapping[str, str] = Field(
        default_factory=dict, validate_default=True, description="Символы валют"
    )
    stablecoins: tuple[str, ...] = Field(
        (CurrencyCode.USDC.value, CurrencyCode.USDT.value),
        description="Поддерживаемые stablecoins",
    )
    strict_currency_lookup: bool = Field(
        False, description="Неизвестный код: True — ошибка, False — курс 1.0"
    )

    model_config = {"frozen": True}

    @field_validator("rates", "symbols")
    @classmethod
    def normalize_table_keys(cls, v: Mapping[str, Any]) -> Mapping[str, Any]:
        """Ключи таблиц в upper case, таблица только для чтения"""
        return MappingProxyType({normalize_code(code): value for code, value in v.items()})

    @field_serializer("rates", "symbols", mode="wrap")
    def serialize_table(
        self, v: Mapping[str, Any], handler: SerializerFunctionWrapHandler
    ) -> dict[str, Any]:
        return handler(dict(v))

    @field_validator("stablecoins")
    @classmethod
    def normalize_stablecoins(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        return tuple(normalize_code(code) for code in v)

    @property
    def fiat_codes(self) -> tuple[str, ...]:
        """Fiat коды с определёнными курсами"""
        return tuple(self.rates)

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> "FxConfig":
        """
        Построение конфигурации из плоского словаря options.

        Ключи принимаются в camelCase (interbankRates, customerRates,
        providerFeeRatio, flatNetworkFee, referenceCurrency, symbols,
        minAmount, maxAmount, ...) или snake_case.

        Args:
            options: Словарь настроек

        Returns:
            Новый FxConfig

        Raises:
            ConfigurationError: Если options нарушают контракт fx_config
                или fiat код имеет только один из двух курсов
            pydantic.ValidationError: Если значения нарушают ограничения моделей
        """
        data = {_OPTION_KEYS.get(key, key): value for key, value in options.items()}

        validator = get_validator(FX_CONFIG_SCHEMA)
        violations = [error.message for error in validator.iter_errors(data)]
        if violations:
            raise ConfigurationError(f"Invalid FX options: {'; '.join(violations)}")

        interbank = {normalize_code(k): v for k, v in data["interbankRates"].items()}
        customer = {normalize_code(k): v for k, v in data["customerRates"].items()}

        unpaired = sorted(set(interbank) ^ set(customer))
        if unpaired:
            raise ConfigurationError(
                f"Fiat codes need both interbank and customer rates: {unpaired}"
            )

        fee_fields = {
            "provider_fee_ratio": "providerFeeRatio",
            "flat_network_fee": "flatNetworkFee",
            "reference_currency": "referenceCurrency",
            "network_fee_mode": "networkFeeMode",
            "legacy_converted_currencies": "legacyConvertedCurrencies",
        }
        limit_fields = {"min_amount": "minAmount", "max_amount": "maxAmount"}

        kwargs: dict[str, Any] = {
            "rates": {
                code: RateEntry(
                    interbank_rate=interbank[code], customer_rate=customer[code]
                )
                for code in interbank
            },
            "fees": FeeModel(
                **{name: data[key] for name, key in fee_fields.items() if key in data}
            ),
            "limits": AmountLimits(
                **{name: data[key] for name, key in limit_fields.items() if key in data}
            ),
        }
        if "symbols" in data:
            kwargs["symbols"] = data["symbols"]
        if "stablecoins" in data:
            kwargs["stablecoins"] = tuple(data["stablecoins"])
        if "strictCurrencyLookup" in data:
            kwargs["strict_currency_lookup"] = data["strictCurrencyLookup"]

        return cls(**kwargs)

    def to_options(self) -> dict[str, Any]:
        """Обратное преобразование в плоский camelCase словарь options."""
        return {
            "interbankRates": {code: e.interbank_rate for code, e in self.rates.items()},
            "customerRates": {code: e.customer_rate for code, e in self.rates.items()},
            "providerFeeRatio": self.fees.provider_fee_ratio,
            "flatNetworkFee": self.fees.flat_network_fee,
            "referenceCurrency": self.fees.reference_currency,
            "symbols": dict(self.symbols),
            "minAmount": self.limits.min_amount,
            "maxAmount": self.limits.max_amount,
            "stablecoins": list(self.stablecoins),
            "networkFeeMode": self.fees.network_fee_mode.value,
            "legacyConvertedCurrencies": list(self.fees.legacy_converted_currencies),
            "strictCurrencyLookup": self.strict_currency_lookup,
        }

    def with_network_fee_mode(self, mode: NetworkFeeMode) -> "FxConfig":
        """Копия конфигурации с другим режимом network fee"""
        return self.model_copy(
            update={"fees": self.fees.model_copy(update={"network_fee_mode": mode})}
        )


# =============================================================================
# DEFAULT TABLES
# =============================================================================

# Mock курсы: 1 stablecoin = X fiat
DEFAULT_CONFIG: Final[FxConfig] = FxConfig(
    rates={
        CurrencyCode.PHP.value: RateEntry(interbank_rate=59.0, customer_rate=58.5),
        CurrencyCode.USD.value: RateEntry(interbank_rate=1.0, customer_rate=0.9975),
    },
    fees=FeeModel(),
    limits=AmountLimits(),
    symbols={
        CurrencyCode.PHP.value: "₱",
        CurrencyCode.USD.value: "$",
    },
)

# Воспроизводит исходные цифры (network fee для PHP = 2.0 * 58.5)
LEGACY_CONFIG: Final[FxConfig] = DEFAULT_CONFIG.with_network_fee_mode(NetworkFeeMode.LEGACY)
