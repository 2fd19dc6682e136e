"""
Chart Pipeline — Построение и сохранение графиков

Каждая функция:
1. Строит ChartData (ChartDataBuilder)
2. Создаёт каталог вывода и имя файла <dir>/<timestamp>_<kind>.png
3. Передаёт данные renderer

Если вычисление падает с BizMathError, ошибка логируется, renderer не
вызывается и функция возвращает None — частичный файл не создаётся.
"""

from pathlib import Path
from typing import Callable, Optional, Sequence

from bizmath.analytics.business_model import BusinessModel
from bizmath.app_logging import get_logger
from bizmath.charts import data_builder
from bizmath.charts.config import DEFAULT_CHART_CONFIG, ChartConfig, ChartKind
from bizmath.charts.data_builder import ChartData
from bizmath.charts.output import ChartOutputWriter
from bizmath.charts.renderer import ChartRenderer, MatplotlibChartRenderer
from bizmath.core.domain.stock import StockSeries
from bizmath.core.errors import BizMathError

logger = get_logger("charts")


def _write_chart(
    kind: ChartKind,
    build: Callable[[], ChartData],
    config: ChartConfig,
    renderer: Optional[ChartRenderer],
    writer: Optional[ChartOutputWriter],
) -> Optional[Path]:
    try:
        chart = build()
    except BizMathError as e:
        logger.warning("Skipping %s chart: %s: %s", kind.value, type(e).__name__, e)
        return None

    writer = writer or ChartOutputWriter(config.output_dir)
    renderer = renderer or MatplotlibChartRenderer()

    writer.ensure_dir()
    path = writer.path_for(kind)
    renderer.render(chart, path, config.width, config.height)

    logger.info("Wrote %s chart to %s", kind.value, path)
    return path


def draw_scatterplot(
    domain: Sequence[float],
    range_: Sequence[float],
    title: str,
    x_label: str,
    y_label: str,
    config: ChartConfig = DEFAULT_CHART_CONFIG,
    renderer: Optional[ChartRenderer] = None,
    writer: Optional[ChartOutputWriter] = None,
) -> Optional[Path]:
    """Scatterplot с линией регрессии → <dir>/<ts>_scatterplot.png."""
    return _write_chart(
        ChartKind.SCATTERPLOT,
        lambda: data_builder.scatterplot(domain, range_, title, x_label, y_label),
        config,
        renderer,
        writer,
    )


def draw_demand_supply(
    model: BusinessModel,
    title: str,
    config: ChartConfig = DEFAULT_CHART_CONFIG,
    renderer: Optional[ChartRenderer] = None,
    writer: Optional[ChartOutputWriter] = None,
) -> Optional[Path]:
    """Спрос/предложение с равновесием → <dir>/<ts>_demand_supply.png."""
    return _write_chart(
        ChartKind.DEMAND_SUPPLY,
        lambda: data_builder.demand_supply(model, title),
        config,
        renderer,
        writer,
    )


def draw_business_model(
    model: BusinessModel,
    title: str,
    config: ChartConfig = DEFAULT_CHART_CONFIG,
    renderer: Optional[ChartRenderer] = None,
    writer: Optional[ChartOutputWriter] = None,
) -> Optional[Path]:
    """Expense/revenue/profit с breakeven → <dir>/<ts>_business_model.png."""
    return _write_chart(
        ChartKind.BUSINESS_MODEL,
        lambda: data_builder.business_model(model, title),
        config,
        renderer,
        writer,
    )


def draw_candlestick_chart(
    series: StockSeries,
    config: ChartConfig = DEFAULT_CHART_CONFIG,
    renderer: Optional[ChartRenderer] = None,
    writer: Optional[ChartOutputWriter] = None,
) -> Optional[Path]:
    """Свечи с линиями SMA из config.moving_average_windows → <dir>/<ts>_candlestick_chart.png."""
    return _write_chart(
        ChartKind.CANDLESTICK_CHART,
        lambda: data_builder.candlestick(series, config.moving_average_windows),
        config,
        renderer,
        writer,
    )
