"""
Tests for JSON Schema Contract Validators

Комплексное тестирование JSON Schema валидаторов:
- Валидность самих схем
- Валидация правильных данных
- Детекция нарушений required полей
- Детекция нарушений типов
- Детекция нарушений constraints (minimum/minItems/pattern)
- Нарушения сообщаются как InvalidInput с путём к полю
- Кэширование скомпилированных валидаторов
- Интеграция с Pydantic моделями (from_payload)
"""

from datetime import datetime
from decimal import Decimal

import jsonschema
import pytest

from bizmath.analytics.business_model import BusinessModel
from bizmath.core.contracts import (
    BusinessInputsValidator,
    ContractValidator,
    CorporationValidator,
    SchemaLoader,
    StockSeriesValidator,
    validate_business_inputs,
    validate_corporation,
    validate_stock_series,
)
from bizmath.core.domain import Corporation, StockSeries
from bizmath.core.errors import BizMathError, InvalidInput


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_stock_series():
    """Валидный stock_series для тестирования."""
    return {
        "company_name": "BenCorpo",
        "symbol": "BNCRP",
        "data": [
            {
                "date": "2022-10-01T00:00:00",
                "high": 121.5,
                "low": 119.0,
                "open": 120.0,
                "close": 121.0,
            },
            {
                "date": "2022-10-02T00:00:00",
                "high": "123.10",
                "low": "120.40",
                "open": "121.00",
                "close": "122.00",
            },
        ],
    }


@pytest.fixture
def valid_corporation():
    """Валидный corporation для тестирования."""
    return {
        "name": "KamoteCorp",
        "total_shares": 100000,
        "owners": [
            {"name": "Mark", "investment": 250.0},
            {"name": "Benedict", "investment": 200.0},
            {"name": "Ben", "investment": 150.25},
        ],
    }


@pytest.fixture
def valid_business_inputs():
    """Валидный business_inputs для тестирования."""
    return {
        "prices": [10, 20, 30, 40, 50],
        "quantities_purchased": [90, 70, 50, 30, 10],
        "quantities_supplied": [10, 30, 50, 70, 90],
        "fixed_cost": 100,
        "manufacturing_cost": 5,
    }


# =============================================================================
# TESTS - SCHEMA LOADING
# =============================================================================


def test_schema_loader_loads_all_schemas():
    """Проверка загрузки всех схем."""
    loader = SchemaLoader()

    assert loader.load_schema("stock_series")["title"] == "stock_series"
    assert loader.load_schema("corporation")["title"] == "corporation"
    assert loader.load_schema("business_inputs")["title"] == "business_inputs"


def test_schema_loader_caches_schemas():
    """Проверка кэширования схем."""
    loader = SchemaLoader()

    schema1 = loader.load_schema("corporation")
    schema2 = loader.load_schema("corporation")

    # Должен вернуть тот же объект (кэш)
    assert schema1 is schema2


def test_schema_loader_raises_on_missing_schema():
    """Проверка ошибки при отсутствующей схеме."""
    loader = SchemaLoader()

    with pytest.raises(FileNotFoundError):
        loader.load_schema("non_existent_schema")


def test_schema_loader_raises_on_missing_dir(tmp_path):
    with pytest.raises(RuntimeError, match="Schema directory not found"):
        SchemaLoader(tmp_path / "missing")


def test_schema_loader_rejects_invalid_schema(tmp_path):
    """Схема, не прошедшая meta-validation, отклоняется."""
    (tmp_path / "broken.json").write_text('{"type": 12}', encoding="utf-8")
    loader = SchemaLoader(tmp_path)

    with pytest.raises(ValueError, match="Invalid JSON Schema in broken.json"):
        loader.load_schema("broken")


# =============================================================================
# TESTS - STOCK SERIES VALIDATION
# =============================================================================


def test_stock_series_validator_accepts_valid_data(valid_stock_series):
    """Валидация правильного stock_series."""
    validator = StockSeriesValidator()
    validator.validate(valid_stock_series)  # Не должно выбросить исключение
    assert validator.is_valid(valid_stock_series)


def test_stock_series_validate_function(valid_stock_series):
    validate_stock_series(valid_stock_series)


def test_stock_series_accepts_empty_data(valid_stock_series):
    """Пустая серия валидна: аналитика вернёт None."""
    data = valid_stock_series.copy()
    data["data"] = []
    validate_stock_series(data)


def test_stock_series_rejects_missing_symbol(valid_stock_series):
    data = valid_stock_series.copy()
    del data["symbol"]

    with pytest.raises(InvalidInput) as exc_info:
        validate_stock_series(data)
    assert "'symbol' is a required property" in str(exc_info.value)


def test_stock_series_rejects_negative_price(valid_stock_series):
    data = valid_stock_series.copy()
    data["data"] = [dict(valid_stock_series["data"][0], close=-1.0)]

    with pytest.raises(InvalidInput):
        validate_stock_series(data)


def test_stock_series_rejects_non_numeric_price_string(valid_stock_series):
    data = valid_stock_series.copy()
    data["data"] = [dict(valid_stock_series["data"][0], high="12,50")]

    assert not StockSeriesValidator().is_valid(data)


def test_stock_series_rejects_unknown_field(valid_stock_series):
    data = valid_stock_series.copy()
    data["exchange"] = "PSE"

    with pytest.raises(InvalidInput):
        validate_stock_series(data)


def test_stock_series_reports_all_errors(valid_stock_series):
    """iter_errors возвращает все нарушения сразу."""
    data = valid_stock_series.copy()
    del data["symbol"]
    del data["company_name"]

    errors = list(StockSeriesValidator().iter_errors(data))
    assert len(errors) == 2


# =============================================================================
# TESTS - CORPORATION VALIDATION
# =============================================================================


def test_corporation_validator_accepts_valid_data(valid_corporation):
    validator = CorporationValidator()
    validator.validate(valid_corporation)
    assert validator.is_valid(valid_corporation)


def test_corporation_validate_function(valid_corporation):
    validate_corporation(valid_corporation)


def test_corporation_rejects_zero_investment(valid_corporation):
    data = valid_corporation.copy()
    data["owners"] = [{"name": "Mark", "investment": 0}]

    with pytest.raises(InvalidInput):
        validate_corporation(data)


def test_corporation_rejects_fractional_total_shares(valid_corporation):
    data = valid_corporation.copy()
    data["total_shares"] = 10.5

    with pytest.raises(InvalidInput) as exc_info:
        validate_corporation(data)
    assert "is not of type 'integer'" in str(exc_info.value)


def test_corporation_rejects_missing_owners():
    with pytest.raises(InvalidInput):
        validate_corporation({"name": "KamoteCorp"})


# =============================================================================
# TESTS - BUSINESS INPUTS VALIDATION
# =============================================================================


def test_business_inputs_validator_accepts_valid_data(valid_business_inputs):
    validator = BusinessInputsValidator()
    validator.validate(valid_business_inputs)
    assert validator.is_valid(valid_business_inputs)


def test_business_inputs_validate_function(valid_business_inputs):
    validate_business_inputs(valid_business_inputs)


def test_business_inputs_supply_optional(valid_business_inputs):
    data = valid_business_inputs.copy()
    del data["quantities_supplied"]
    validate_business_inputs(data)


def test_business_inputs_rejects_negative_cost(valid_business_inputs):
    data = valid_business_inputs.copy()
    data["fixed_cost"] = -1

    with pytest.raises(InvalidInput):
        validate_business_inputs(data)


def test_business_inputs_rejects_empty_prices(valid_business_inputs):
    data = valid_business_inputs.copy()
    data["prices"] = []

    with pytest.raises(InvalidInput):
        validate_business_inputs(data)


def test_business_inputs_rejects_missing_cost(valid_business_inputs):
    data = valid_business_inputs.copy()
    del data["manufacturing_cost"]

    with pytest.raises(InvalidInput) as exc_info:
        validate_business_inputs(data)
    assert "'manufacturing_cost' is a required property" in str(exc_info.value)


# =============================================================================
# TESTS - PYDANTIC MODEL INTEGRATION
# =============================================================================


def test_stock_series_from_payload(valid_stock_series):
    """Payload проходит контракт и превращается в StockSeries."""
    series = StockSeries.from_payload(valid_stock_series)

    assert series.symbol == "BNCRP"
    assert len(series) == 2
    assert series.data[0].date == datetime(2022, 10, 1)
    assert series.data[0].high == Decimal("121.5")
    assert series.data[1].close == Decimal("122.00")


def test_stock_series_from_payload_rejects_invalid(valid_stock_series):
    data = valid_stock_series.copy()
    del data["data"]

    with pytest.raises(InvalidInput):
        StockSeries.from_payload(data)


def test_corporation_from_payload(valid_corporation):
    corp = Corporation.from_payload(valid_corporation)

    assert corp.total_investment == Decimal("600.25")
    assert corp.shares_for_owner("Mark") == 42_000


def test_corporation_model_dump_is_valid_payload(valid_corporation):
    """model_dump (без вычисляемых полей) снова проходит контракт."""
    corp = Corporation.from_payload(valid_corporation)

    payload = corp.model_dump(exclude={"total_investment"})
    payload["owners"] = [
        {"name": owner["name"], "investment": float(owner["investment"])}
        for owner in payload["owners"]
    ]
    validate_corporation(payload)


def test_business_model_from_payload(valid_business_inputs):
    model = BusinessModel.from_payload(valid_business_inputs)

    assert model.prices == (10, 20, 30, 40, 50)
    assert model.fixed_cost == 100.0
    assert model.equilibrium().price == pytest.approx(30.0)


def test_business_model_from_payload_rejects_invalid(valid_business_inputs):
    data = valid_business_inputs.copy()
    data["manufacturing_cost"] = "five"

    with pytest.raises(InvalidInput):
        BusinessModel.from_payload(data)


# =============================================================================
# TESTS - ERROR REPORTING & CACHING
# =============================================================================


def test_violation_is_bizmath_error(valid_business_inputs):
    """Нарушение контракта ловится как BizMathError (и как ValueError)."""
    data = valid_business_inputs.copy()
    data["fixed_cost"] = -1

    with pytest.raises(BizMathError):
        validate_business_inputs(data)
    with pytest.raises(ValueError):
        validate_business_inputs(data)


def test_violation_message_carries_path(valid_stock_series):
    """Сообщение содержит имя схемы и JSON path нарушения."""
    data = valid_stock_series.copy()
    data["data"] = [dict(valid_stock_series["data"][0], close=-1.0)]

    with pytest.raises(InvalidInput) as exc_info:
        validate_stock_series(data)
    message = str(exc_info.value)
    assert message.startswith("stock_series contract violation at $.data[0].close")


def test_violation_chains_jsonschema_error(valid_corporation):
    data = valid_corporation.copy()
    data["total_shares"] = -5

    with pytest.raises(InvalidInput, match=r"at \$\.total_shares") as exc_info:
        validate_corporation(data)
    assert isinstance(exc_info.value.__cause__, jsonschema.ValidationError)


def test_from_payload_raises_invalid_input(valid_corporation):
    data = valid_corporation.copy()
    data["owners"] = [{"name": "", "investment": 10.0}]

    with pytest.raises(InvalidInput, match=r"\$\.owners\[0\]\.name"):
        Corporation.from_payload(data)


def test_loader_caches_compiled_validator():
    """Один Draft202012Validator на схему."""
    loader = SchemaLoader()

    first = loader.validator_for("business_inputs")
    assert loader.validator_for("business_inputs") is first
    assert isinstance(first, jsonschema.Draft202012Validator)


def test_validator_instances_share_compiled_validator():
    assert CorporationValidator().validator is CorporationValidator().validator
    assert StockSeriesValidator().schema["title"] == "stock_series"


def test_custom_loader(tmp_path):
    """ContractValidator работает с отдельным каталогом схем."""
    (tmp_path / "point.json").write_text(
        '{"type": "object", "required": ["x"], "properties": {"x": {"type": "number"}}}',
        encoding="utf-8",
    )
    validator = ContractValidator("point", loader=SchemaLoader(tmp_path))

    validator.validate({"x": 1.5})
    with pytest.raises(InvalidInput, match="point contract violation at \\$: 'x' is a required property"):
        validator.validate({})
