"""
Chart Renderer — Отрисовка ChartData в PNG через matplotlib

Используется объектный API matplotlib (Figure без pyplot), поэтому
отрисовка не трогает глобальное состояние и работает без GUI backend.
"""

from pathlib import Path
from typing import Protocol, Union

from matplotlib.figure import Figure

from bizmath.charts.data_builder import ChartData, SeriesStyle

# DPI для перевода пикселей в дюймы figsize
RENDER_DPI = 100

# Доля диапазона, добавляемая по краям осей
AXIS_PADDING = 0.05

SERIES_COLORS = ("tab:blue", "tab:orange", "tab:green", "tab:purple", "tab:brown")
RISING_COLOR = "tab:green"
FALLING_COLOR = "tab:red"


class ChartRenderer(Protocol):
    """Коллаборатор, превращающий ChartData в файл изображения."""

    def render(self, chart: ChartData, path: Union[str, Path], width: int, height: int) -> Path:
        ...


class MatplotlibChartRenderer:
    """ChartRenderer на matplotlib."""

    def __init__(self, dpi: int = RENDER_DPI):
        self.dpi = dpi

    def render(self, chart: ChartData, path: Union[str, Path], width: int, height: int) -> Path:
        fig = Figure(figsize=(width / self.dpi, height / self.dpi), dpi=self.dpi)
        ax = fig.add_subplot(1, 1, 1)

        for candle in chart.candles:
            color = RISING_COLOR if candle.is_rising else FALLING_COLOR
            ax.vlines(candle.date, candle.low, candle.high, color=color, linewidth=1)
            ax.bar(
                candle.date,
                abs(candle.close - candle.open) or 0.01,
                bottom=min(candle.open, candle.close),
                width=0.6,
                color=color,
            )

        for idx, series in enumerate(chart.series):
            color = SERIES_COLORS[idx % len(SERIES_COLORS)]
            if series.style == SeriesStyle.SCATTER:
                ax.scatter(series.xs, series.ys, label=series.label, color=color, s=20)
            elif series.style == SeriesStyle.LINE:
                ax.plot(series.xs, series.ys, label=series.label, color=color, linewidth=2)
            else:
                ax.scatter(
                    series.xs, series.ys, label=series.label, color=color,
                    marker="D", s=60, zorder=3,
                )
                for x, y in series.points:
                    ax.annotate(f"({x:.2f}, {y:.2f})", (x, y), textcoords="offset points",
                                xytext=(5, 5), fontsize=8)

        x_min, x_max = chart.x_range
        y_min, y_max = chart.y_range
        if x_min != x_max:
            x_pad = (x_max - x_min) * AXIS_PADDING
            ax.set_xlim(x_min - x_pad, x_max + x_pad)
        if y_min != y_max:
            y_pad = (y_max - y_min) * AXIS_PADDING
            ax.set_ylim(y_min - y_pad, y_max + y_pad)

        ax.set_title(chart.title)
        ax.set_xlabel(chart.x_label)
        ax.set_ylabel(chart.y_label)
        if chart.series:
            ax.legend(loc="best")
        if chart.candles:
            fig.autofmt_xdate()

        path = Path(path)
        fig.savefig(path, format="png")
        return path
