"""
Chart Config — Параметры построения графиков

Параметры, принимаемые функциями построения графиков:
- output_dir: каталог для PNG файлов (default: "chart_outputs")
- width/height: размер изображения в пикселях (default: 1024x768)
- moving_average_windows: окна SMA для candlestick chart (максимум 3,
  нулевые значения пропускаются)
"""

from dataclasses import dataclass
from enum import Enum
from typing import Final, Sequence

from bizmath.core.errors import InvalidInput, TooManyWindows


# =============================================================================
# CONSTANTS
# =============================================================================

DEFAULT_OUTPUT_DIR: Final[str] = "chart_outputs"
DEFAULT_WIDTH_PX: Final[int] = 1024
DEFAULT_HEIGHT_PX: Final[int] = 768

# Максимальное количество линий SMA на candlestick chart
MAX_MOVING_AVERAGE_WINDOWS: Final[int] = 3


# =============================================================================
# ENUMS
# =============================================================================


class ChartKind(str, Enum):
    """Вид графика (суффикс имени файла)."""

    SCATTERPLOT = "scatterplot"
    DEMAND_SUPPLY = "demand_supply"
    BUSINESS_MODEL = "business_model"
    CANDLESTICK_CHART = "candlestick_chart"


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class ChartConfig:
    """Конфигурация построения и сохранения графика."""

    output_dir: str = DEFAULT_OUTPUT_DIR
    width: int = DEFAULT_WIDTH_PX
    height: int = DEFAULT_HEIGHT_PX
    moving_average_windows: tuple[int, ...] = ()

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise InvalidInput(
                f"Image size must be positive, got {self.width}x{self.height}"
            )
        object.__setattr__(self, "moving_average_windows", tuple(self.moving_average_windows))


DEFAULT_CHART_CONFIG: Final[ChartConfig] = ChartConfig()


def effective_windows(windows: Sequence[int]) -> list[int]:
    """
    Окна SMA, которые реально строятся.

    Args:
        windows: Запрошенные окна

    Returns:
        Окна без нулей в исходном порядке

    Raises:
        TooManyWindows: Если запрошено больше MAX_MOVING_AVERAGE_WINDOWS окон
        InvalidInput: Если окно отрицательное или не int

    Examples:
        >>> effective_windows([5, 0, 20])
        [5, 20]
    """
    if len(windows) > MAX_MOVING_AVERAGE_WINDOWS:
        raise TooManyWindows(
            f"At most {MAX_MOVING_AVERAGE_WINDOWS} moving average windows are allowed, "
            f"got {len(windows)}"
        )

    result = []
    for window in windows:
        if isinstance(window, bool) or not isinstance(window, int) or window < 0:
            raise InvalidInput(
                f"Moving average window must be a non-negative integer, got {window!r}"
            )
        if window == 0:
            continue
        result.append(window)
    return result
