"""
Contract Validation Module

Валидация входных JSON payload (stock series, corporation, business inputs).
"""

from .validators import (
    BusinessInputsValidator,
    ContractValidator,
    CorporationValidator,
    SchemaLoader,
    StockSeriesValidator,
    validate_business_inputs,
    validate_corporation,
    validate_stock_series,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "StockSeriesValidator",
    "CorporationValidator",
    "BusinessInputsValidator",
    # Functions
    "validate_stock_series",
    "validate_corporation",
    "validate_business_inputs",
]
