"""
Stock — Модели биржевых данных

Immutable Pydantic модели:
- StockDataPoint: дневные данные акции (high/low/open/close) в Decimal
- StockSeries: компания, тикер и упорядоченная по дате серия StockDataPoint

Результаты вычислений (frozen dataclass):
- PostSplitResult: акции/цена/дивиденд после сплита
- CapitalGains: прирост капитала в деньгах и процентах

Все цены хранятся в Decimal: повторные вычитания и деления (change,
moving average) в float накапливали бы дрейф округления.

ПРЕДУСЛОВИЕ: серия уже отсортирована по дате по возрастанию.
Ядро серию не сортирует.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from bizmath.core.contracts import validate_stock_series
from bizmath.core.math.numerical_safeguards import to_decimal


# =============================================================================
# MODELS
# =============================================================================


class StockDataPoint(BaseModel):
    """
    Дневные данные акции.

    net_change и net_change_percent равны None до вычисления изменений
    (см. bizmath.analytics.time_series.with_change).
    """

    date: datetime = Field(..., description="Дата торгового дня")
    high: Decimal = Field(..., ge=0, description="Максимальная цена")
    low: Decimal = Field(..., ge=0, description="Минимальная цена")
    open: Decimal = Field(..., ge=0, description="Цена открытия")
    close: Decimal = Field(..., ge=0, description="Цена закрытия")

    net_change: Optional[Decimal] = Field(default=None, description="close - previous close")
    net_change_percent: Optional[Decimal] = Field(
        default=None, description="Изменение в % от previous close"
    )

    model_config = {"frozen": True}

    @field_validator(
        "high", "low", "open", "close", "net_change", "net_change_percent", mode="before"
    )
    @classmethod
    def coerce_float_prices(cls, v: Any) -> Any:
        """float → Decimal через str (без двоичного дрейфа)."""
        if isinstance(v, float):
            return to_decimal(v, "price")
        return v


class StockSeries(BaseModel):
    """Серия дневных данных одной акции."""

    company_name: str = Field(..., description="Название компании")
    symbol: str = Field(..., min_length=1, description="Тикер")
    data: tuple[StockDataPoint, ...] = Field(
        default=(), description="Дневные данные по возрастанию даты"
    )

    model_config = {"frozen": True}

    @classmethod
    def from_payload(cls, data: dict[str, Any]) -> "StockSeries":
        """
        Создание серии из JSON payload с валидацией контракта.

        Raises:
            InvalidInput: Если payload не соответствует схеме stock_series
        """
        validate_stock_series(data)
        return cls.model_validate(data)

    def __len__(self) -> int:
        return len(self.data)

    def is_empty(self) -> bool:
        return len(self.data) == 0

    def closing_prices(self) -> list[Decimal]:
        """Цены закрытия в порядке серии."""
        return [point.close for point in self.data]


# =============================================================================
# RESULTS
# =============================================================================


@dataclass(frozen=True)
class PostSplitResult:
    """Результат пересчёта после сплита акций."""

    new_share_count: int  # floor(total_shares * received / surrendered)

    # Цена за акцию
    new_price: Decimal  # Округлено до 2 знаков
    new_price_exact: Decimal  # Полная точность

    # Дивиденд на акцию
    new_dividend_per_share: Decimal  # Округлено до 2 знаков
    new_dividend_exact: Decimal  # Полная точность


@dataclass(frozen=True)
class CapitalGains:
    """Прирост (или убыток) капитала по сделке."""

    amount: Decimal  # selling_price - purchase_price
    percent: Decimal  # amount / purchase_price * 100
