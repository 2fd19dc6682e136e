"""
Chart Data Builder — Серии точек для графиков

Тонкий слой сборки: из результатов регрессии, бизнес-модели и аналитики
временных рядов строит упорядоченные серии (x, y) для chart renderer.
Сам ничего не рисует.

Графики:
- scatterplot: точки + линия регрессии
- demand_supply: линии спроса и предложения + точка равновесия
- business_model: expense, revenue, profit + breakeven и максимумы
- candlestick: свечи + до 3 линий SMA

Валидация входов делегирована LinearRegression/BusinessModel/TimeSeriesAnalytics;
их ошибки пробрасываются без изменений.
"""

import math
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Callable, Optional, Sequence

from bizmath.analytics import time_series
from bizmath.analytics.business_model import BusinessModel
from bizmath.charts.config import effective_windows
from bizmath.core.domain.stock import StockSeries
from bizmath.core.errors import InsufficientData
from bizmath.core.math.linreg import RegressionResult, fit
from bizmath.core.math.numerical_safeguards import validate_series_pair


# =============================================================================
# DATA TYPES
# =============================================================================


class SeriesStyle(str, Enum):
    """Стиль отрисовки серии."""

    SCATTER = "scatter"
    LINE = "line"
    MARKER = "marker"


@dataclass(frozen=True)
class ChartSeries:
    """Серия точек (x, y) с подписью и стилем."""

    label: str
    style: SeriesStyle
    points: tuple[tuple[Any, float], ...]

    @property
    def xs(self) -> list[Any]:
        return [x for x, _ in self.points]

    @property
    def ys(self) -> list[float]:
        return [y for _, y in self.points]


@dataclass(frozen=True)
class Candle:
    """Свеча дневных данных (float для отрисовки)."""

    date: datetime
    open: float
    high: float
    low: float
    close: float

    @property
    def is_rising(self) -> bool:
        return self.close >= self.open


@dataclass(frozen=True)
class ChartData:
    """Всё, что нужно chart renderer для одного графика."""

    title: str
    x_label: str
    y_label: str
    series: tuple[ChartSeries, ...] = ()
    candles: tuple[Candle, ...] = ()

    @property
    def x_range(self) -> tuple[Any, Any]:
        """(min, max) по x среди всех серий и свечей."""
        xs = [x for s in self.series for x in s.xs] + [c.date for c in self.candles]
        if not xs:
            raise InsufficientData(f"Chart '{self.title}' has no points")
        return (min(xs), max(xs))

    @property
    def y_range(self) -> tuple[float, float]:
        """(min, max) по y среди всех серий и свечей."""
        ys = [y for s in self.series for y in s.ys]
        ys += [c.low for c in self.candles] + [c.high for c in self.candles]
        if not ys:
            raise InsufficientData(f"Chart '{self.title}' has no points")
        return (min(ys), max(ys))


# =============================================================================
# HELPERS
# =============================================================================


def integer_steps(start: float, end: float) -> list[int]:
    """Целые x от floor(start) до ceil(end) включительно."""
    return list(range(math.floor(start), math.ceil(end) + 1))


def sample(
    label: str,
    fn: Callable[[float], float],
    xs: Sequence[float],
    style: SeriesStyle = SeriesStyle.LINE,
) -> ChartSeries:
    """Серия значений fn(x) в заданных точках."""
    return ChartSeries(label=label, style=style, points=tuple((x, fn(x)) for x in xs))


def marker(label: str, x: float, y: float) -> ChartSeries:
    return ChartSeries(label=label, style=SeriesStyle.MARKER, points=((x, y),))


# =============================================================================
# SCATTERPLOT
# =============================================================================


def scatter_points(domain: Sequence[float], range_: Sequence[float], label: str = "Data") -> ChartSeries:
    """Точки (domain[i], range[i])."""
    xs, ys = validate_series_pair(domain, range_)
    return ChartSeries(label=label, style=SeriesStyle.SCATTER, points=tuple(zip(xs, ys)))


def regression_line(
    domain: Sequence[float],
    range_: Sequence[float],
    regression: Optional[RegressionResult] = None,
) -> ChartSeries:
    """
    Линия регрессии, взятая в целых шагах по диапазону domain.

    Raises:
        InvalidInput, DegenerateInput: ошибки LinearRegression
    """
    if regression is None:
        regression = fit(domain, range_)
    return sample("Line of best fit", regression.predict, integer_steps(min(domain), max(domain)))


def scatterplot(
    domain: Sequence[float],
    range_: Sequence[float],
    title: str,
    x_label: str,
    y_label: str,
) -> ChartData:
    """Scatterplot с линией регрессии."""
    regression = fit(domain, range_)
    return ChartData(
        title=title,
        x_label=x_label,
        y_label=y_label,
        series=(
            scatter_points(domain, range_),
            regression_line(domain, range_, regression),
        ),
    )


# =============================================================================
# BUSINESS MODEL
# =============================================================================


def demand_supply(model: BusinessModel, title: str) -> ChartData:
    """
    Линии спроса и предложения с точкой равновесия.

    Raises:
        InvalidInput: Если у модели нет quantities_supplied
        NoRealSolution: Если линии параллельны
    """
    steps = integer_steps(min(model.prices), max(model.prices))
    equilibrium = model.equilibrium()

    return ChartData(
        title=title,
        x_label="Price",
        y_label="Quantity",
        series=(
            scatter_points(model.prices, model.quantities_purchased, label="Quantity purchased"),
            scatter_points(model.prices, model.quantities_supplied, label="Quantity supplied"),
            sample("Demand", model.demand(), steps),
            sample("Supply", model.supply(), steps),
            marker("Equilibrium", equilibrium.price, equilibrium.quantity),
        ),
    )


def business_model(model: BusinessModel, title: str) -> ChartData:
    """
    Кривые expense, revenue и profit с breakeven и максимумами.

    Цены берутся в целых шагах от 0 до большего из max(prices) и
    положительного корня revenue (где выручка снова падает до нуля).

    Raises:
        NoRealSolution: Если breakeven цены нет
        DegenerateInput: Если у revenue/profit нет максимума
    """
    expense = model.expense()
    revenue = model.revenue()
    profit = model.profit()

    low_breakeven, high_breakeven = model.breakeven_prices()
    revenue_max = model.revenue_maximum()
    profit_max = model.profit_maximum()

    upper = max(model.prices)
    if revenue.a < 0:
        upper = max(upper, -revenue.b / revenue.a)
    steps = integer_steps(0, upper)

    series = [
        sample("Expense", expense, steps),
        sample("Revenue", revenue, steps),
        sample("Profit", profit, steps),
        marker("Breakeven (low)", low_breakeven, revenue(low_breakeven)),
    ]
    if high_breakeven != low_breakeven:
        series.append(marker("Breakeven (high)", high_breakeven, revenue(high_breakeven)))
    series.append(marker("Max revenue", revenue_max.x, revenue_max.y))
    series.append(marker("Max profit", profit_max.x, profit_max.y))

    return ChartData(title=title, x_label="Price", y_label="Amount", series=tuple(series))


# =============================================================================
# CANDLESTICK
# =============================================================================


def candlestick(series: StockSeries, windows: Sequence[int] = ()) -> ChartData:
    """
    Свечи дневных данных и линии SMA.

    Точка SMA ставится на дату последнего дня окна.

    Raises:
        InsufficientData: Пустая серия или окно длиннее серии
        TooManyWindows: Больше 3 окон
    """
    if series.is_empty():
        raise InsufficientData(f"Stock series {series.symbol} is empty")

    windows = effective_windows(windows)

    candles = tuple(
        Candle(
            date=point.date,
            open=float(point.open),
            high=float(point.high),
            low=float(point.low),
            close=float(point.close),
        )
        for point in series.data
    )

    ma_series = []
    for window in windows:
        averages = time_series.moving_average(series, window)
        if averages is None:
            raise InsufficientData(
                f"Moving average window {window} exceeds series length {len(series)}"
            )
        dates = [point.date for point in series.data[window - 1:]]
        ma_series.append(
            ChartSeries(
                label=f"SMA {window}",
                style=SeriesStyle.LINE,
                points=tuple((date, float(avg)) for date, avg in zip(dates, averages)),
            )
        )

    return ChartData(
        title=f"{series.company_name} ({series.symbol})",
        x_label="Date",
        y_label="Price",
        series=tuple(ma_series),
        candles=candles,
    )
