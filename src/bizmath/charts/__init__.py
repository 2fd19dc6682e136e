"""
Charts — данные графиков, рендеринг и файлы вывода.

Вычислительная часть (data_builder) не зависит от matplotlib;
renderer и pipeline отвечают за PNG файлы.
"""

from bizmath.charts.config import (
    DEFAULT_CHART_CONFIG,
    MAX_MOVING_AVERAGE_WINDOWS,
    ChartConfig,
    ChartKind,
    effective_windows,
)
from bizmath.charts.data_builder import Candle, ChartData, ChartSeries, SeriesStyle
from bizmath.charts.output import ChartOutputWriter

__all__ = [
    # Config
    "DEFAULT_CHART_CONFIG",
    "MAX_MOVING_AVERAGE_WINDOWS",
    "ChartConfig",
    "ChartKind",
    "effective_windows",
    # Data
    "Candle",
    "ChartData",
    "ChartSeries",
    "SeriesStyle",
    # Output
    "ChartOutputWriter",
]
