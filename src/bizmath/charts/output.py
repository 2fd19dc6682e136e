"""
Chart Output — Каталог и имена PNG файлов

Имя файла: <output_dir>/<unix_timestamp>_<chart_kind>.png

Часы передаются явно (clock), поэтому вычислительное ядро никогда не читает
системное время, а тесты подставляют фиксированный timestamp.
"""

import time
from pathlib import Path
from typing import Callable, Union

from bizmath.app_logging import get_logger
from bizmath.charts.config import ChartKind

logger = get_logger("charts.output")


class ChartOutputWriter:
    """Создаёт каталог вывода и формирует имена файлов графиков."""

    def __init__(
        self,
        output_dir: Union[str, Path],
        clock: Callable[[], float] = time.time,
    ):
        self.output_dir = Path(output_dir)
        self._clock = clock

    def ensure_dir(self) -> Path:
        """Создание каталога вывода (вместе с родителями), если его нет."""
        if not self.output_dir.exists():
            logger.debug("Creating chart output directory %s", self.output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        return self.output_dir

    def path_for(self, kind: Union[ChartKind, str]) -> Path:
        """
        Путь файла для графика данного вида.

        Examples:
            >>> ChartOutputWriter("out", clock=lambda: 1700000000.9).path_for(ChartKind.SCATTERPLOT)
            PosixPath('out/1700000000_scatterplot.png')
        """
        kind_value = kind.value if isinstance(kind, ChartKind) else str(kind)
        timestamp = int(self._clock())
        return self.output_dir / f"{timestamp}_{kind_value}.png"
