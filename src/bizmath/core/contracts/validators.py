"""
JSON Schema Contract Validators

Валидация входных JSON payload (stock series, corporation, business inputs)
до построения pydantic моделей.

Схемы (bizmath/core/contracts/schema/):
- stock_series.json: компания, тикер и дневные данные акции
- corporation.json: корпорация, владельцы и количество акций
- business_inputs.json: цены, спрос/предложение и издержки бизнес-модели

Нарушение контракта сообщается как InvalidInput (иерархия BizMathError);
в сообщении — путь к самому релевантному полю (jsonschema.exceptions.best_match).
Исходная jsonschema.ValidationError доступна как __cause__.
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterator, Optional

import jsonschema
from jsonschema import Draft202012Validator
from jsonschema.exceptions import best_match

from bizmath.app_logging import get_logger
from bizmath.core.errors import InvalidInput

logger = get_logger("contracts")


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema и кэш скомпилированных валидаторов.

    Каждая схема читается и проходит meta-validation один раз;
    Draft202012Validator создаётся один раз на схему.
    """

    def __init__(self, schema_dir: Optional[Path] = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        self._schemas: Dict[str, Dict[str, Any]] = {}
        self._validators: Dict[str, Draft202012Validator] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Схема по имени (без расширения .json).

        Raises:
            FileNotFoundError: Файл схемы не найден
            ValueError: Файл не является валидной Draft 2020-12 схемой
        """
        cached = self._schemas.get(schema_name)
        if cached is not None:
            return cached

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e.message}") from e

        logger.debug("Loaded schema %s from %s", schema_name, schema_path)
        self._schemas[schema_name] = schema
        return schema

    def validator_for(self, schema_name: str) -> Draft202012Validator:
        """Скомпилированный валидатор схемы (один экземпляр на схему)."""
        validator = self._validators.get(schema_name)
        if validator is None:
            validator = Draft202012Validator(self.load_schema(schema_name))
            self._validators[schema_name] = validator
        return validator


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """Валидация payload против одной схемы."""

    def __init__(self, schema_name: str, loader: Optional[SchemaLoader] = None):
        self.schema_name = schema_name
        self.validator = (loader or _SCHEMA_LOADER).validator_for(schema_name)

    @property
    def schema(self) -> Dict[str, Any]:
        return self.validator.schema

    def validate(self, data: Any) -> None:
        """
        Проверка payload.

        Raises:
            InvalidInput: "<schema> contract violation at <json path>: <message>"
        """
        error = best_match(self.validator.iter_errors(data))
        if error is not None:
            raise InvalidInput(
                f"{self.schema_name} contract violation at {error.json_path}: {error.message}"
            ) from error

    def is_valid(self, data: Any) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Any) -> Iterator[jsonschema.ValidationError]:
        """Все нарушения схемы (для диагностики)."""
        return self.validator.iter_errors(data)


class StockSeriesValidator(ContractValidator):
    def __init__(self):
        super().__init__("stock_series")


class CorporationValidator(ContractValidator):
    def __init__(self):
        super().__init__("corporation")


class BusinessInputsValidator(ContractValidator):
    def __init__(self):
        super().__init__("business_inputs")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================

_STOCK_SERIES = StockSeriesValidator()
_CORPORATION = CorporationValidator()
_BUSINESS_INPUTS = BusinessInputsValidator()


def validate_stock_series(data: Any) -> None:
    """
    Raises:
        InvalidInput: payload не соответствует схеме stock_series
    """
    _STOCK_SERIES.validate(data)


def validate_corporation(data: Any) -> None:
    """
    Raises:
        InvalidInput: payload не соответствует схеме corporation
    """
    _CORPORATION.validate(data)


def validate_business_inputs(data: Any) -> None:
    """
    Raises:
        InvalidInput: payload не соответствует схеме business_inputs
    """
    _BUSINESS_INPUTS.validate(data)
