"""
JSON Schema Contract Validators

Валидация options конфигурации и сериализованных результатов
конвертации по JSON Schema контрактам (Draft 2020-12).

Схемы (stablefx/core/contracts/schema/):
- fx_config.json: плоский словарь options для FxConfig.from_options
- conversion_breakdown.json: ConversionBreakdown.model_dump(mode="json")
- reverse_breakdown.json: ReverseBreakdown.model_dump(mode="json")

Валидатор на схему строится один раз и переиспользуется (get_validator).
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Final, Iterator, Mapping

import jsonschema
from jsonschema import Draft202012Validator

FX_CONFIG_SCHEMA: Final[str] = "fx_config"
CONVERSION_BREAKDOWN_SCHEMA: Final[str] = "conversion_breakdown"
REVERSE_BREAKDOWN_SCHEMA: Final[str] = "reverse_breakdown"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов с кэшем и meta-validation.

    По умолчанию читает каталог schema/ рядом с модулем
    (устанавливается вместе с пакетом).
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        self._schemas: dict[str, dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> dict[str, Any]:
        """
        Загрузка схемы по имени без расширения.

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATOR
# =============================================================================


class ContractValidator:
    """Валидатор данных против одной схемы."""

    def __init__(self, schema_name: str, loader: SchemaLoader | None = None):
        self.schema_name = schema_name
        self.schema = (loader or _SCHEMA_LOADER).load_schema(schema_name)
        self._validator = Draft202012Validator(self.schema)

    def validate(self, data: Mapping[str, Any]) -> None:
        """
        Raises:
            jsonschema.ValidationError: Первое (наиболее релевантное) нарушение
        """
        self._validator.validate(data)

    def iter_errors(self, data: Mapping[str, Any]) -> Iterator[jsonschema.ValidationError]:
        """Все нарушения схемы (пусто для валидных данных)."""
        return self._validator.iter_errors(data)


@lru_cache(maxsize=None)
def get_validator(schema_name: str) -> ContractValidator:
    """Общий валидатор для схемы из пакета."""
    return ContractValidator(schema_name)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_fx_config(data: Mapping[str, Any]) -> None:
    """
    Валидация словаря options конфигурации.

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют схеме
    """
    get_validator(FX_CONFIG_SCHEMA).validate(data)


def validate_conversion_breakdown(data: Mapping[str, Any]) -> None:
    """Валидация сериализованного ConversionBreakdown."""
    get_validator(CONVERSION_BREAKDOWN_SCHEMA).validate(data)


def validate_reverse_breakdown(data: Mapping[str, Any]) -> None:
    """Валидация сериализованного ReverseBreakdown."""
    get_validator(REVERSE_BREAKDOWN_SCHEMA).validate(data)
