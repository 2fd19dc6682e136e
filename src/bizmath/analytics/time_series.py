"""
Time Series Analytics — Изменения, moving averages, сплиты

Модуль вычисляет аналитику по упорядоченной серии дневных данных акции:
- Изменение день к дню (net_change, net_change_percent)
- Поиск дня по дате (с вычисленными изменениями)
- Simple Moving Average с инкрементальным обновлением окна
- Пересчёт количества акций, цены и дивиденда после сплита

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все цены в Decimal, округление до 2 знаков (ROUND_HALF_EVEN)
2. Входная серия не изменяется — возвращаются новые модели
3. Серия считается отсортированной по дате (сортировка не выполняется)

ФОРМУЛЫ:
    net_change[i] = close[i] - close[i-1]
    net_change_percent[i] = net_change[i] / close[i-1] * 100

    SMA[0] = round(Σ close[0..w) / w)
    SMA[k] = round(SMA[k-1] - close[k-1] / w + close[k+w-1] / w)

    new_shares = floor(total_shares * received / surrendered)
    new_value = value * surrendered / received
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from bizmath.core.domain.stock import PostSplitResult, StockDataPoint, StockSeries
from bizmath.core.errors import InvalidInput
from bizmath.core.math.numerical_safeguards import DecimalLike, round_dp, to_decimal


# =============================================================================
# CHANGE SERIES
# =============================================================================


def closing_prices(series: StockSeries) -> list[Decimal]:
    """Цены закрытия серии в порядке дат."""
    return series.closing_prices()


def with_change(series: StockSeries) -> Optional[list[StockDataPoint]]:
    """
    Серия с вычисленными изменениями день к дню.

    Первый день получает net_change = 0 и net_change_percent = 0.

    Args:
        series: Серия дневных данных (по возрастанию даты)

    Returns:
        Новый список StockDataPoint с заполненными net_change/net_change_percent,
        или None если серия пустая
    """
    if series.is_empty():
        return None

    points: list[StockDataPoint] = []
    previous_close: Optional[Decimal] = None

    for point in series.data:
        if previous_close is None:
            net_change = Decimal("0.0")
            net_change_percent = Decimal("0.0")
        else:
            net_change = point.close - previous_close
            if previous_close == 0:
                raise InvalidInput(
                    f"Previous close is zero at {point.date.isoformat()}: "
                    f"percent change is undefined"
                )
            net_change_percent = (net_change / previous_close) * 100
            net_change = round_dp(net_change)
            net_change_percent = round_dp(net_change_percent)

        points.append(
            point.model_copy(
                update={"net_change": net_change, "net_change_percent": net_change_percent}
            )
        )
        previous_close = point.close

    return points


def find_by_date(series: StockSeries, date: datetime) -> Optional[StockDataPoint]:
    """
    День с вычисленными изменениями по дате.

    Сначала строится серия изменений, затем линейный поиск по дате.

    Returns:
        StockDataPoint или None если серия пустая или дата не найдена
    """
    points = with_change(series)
    if points is None:
        return None

    for point in points:
        if point.date == date:
            return point
    return None


# =============================================================================
# MOVING AVERAGE
# =============================================================================


def moving_average(series: StockSeries, window: int) -> Optional[list[Decimal]]:
    """
    Simple Moving Average цен закрытия с инкрементальным обновлением.

    Первое значение — среднее первого окна. Каждое следующее получается из
    предыдущего ОКРУГЛЁННОГО значения: prev - head / window + tail / window.
    Это O(1) на шаг и даёт собственное поведение округления, отличное от
    пересчёта среднего заново.

    Args:
        series: Серия дневных данных
        window: Размер окна (положительный int)

    Returns:
        Список длины len(series) - window + 1, или None если серия пустая
        или короче окна

    Raises:
        InvalidInput: Если window не положительный int

    Examples:
        >>> moving_average(series_121_to_126, 4)  # closes 121,122,120,119,124,128,126
        [Decimal('120.50'), Decimal('121.25'), Decimal('122.75'), Decimal('124.25')]
    """
    if isinstance(window, bool) or not isinstance(window, int) or window <= 0:
        raise InvalidInput(f"Moving average window must be a positive integer, got {window!r}")

    closes = series.closing_prices()
    if not closes or len(closes) < window:
        return None

    window_decimal = Decimal(window)

    first_average = sum(closes[:window], Decimal(0)) / window_decimal
    averages = [round_dp(first_average)]

    for head_idx in range(len(closes) - window):
        tail_idx = head_idx + window
        head_price = closes[head_idx] / window_decimal
        tail_price = closes[tail_idx] / window_decimal
        averages.append(round_dp(averages[-1] - head_price + tail_price))

    return averages


# =============================================================================
# STOCK SPLIT
# =============================================================================


def post_split_adjustment(
    shares_received: int,
    shares_surrendered: int,
    total_shares: int,
    price: DecimalLike,
    dividend: DecimalLike = 0,
) -> PostSplitResult:
    """
    Пересчёт после сплита "shares_received за shares_surrendered".

    Сплит 5-for-4: за каждые 4 старые акции выдаётся 5 новых.
    Обратный сплит 1-for-20: за каждые 20 старых акций выдаётся 1 новая.

    Вычисления только в Decimal: коэффициенты сплита и дивиденды — аудируемые
    финансовые величины.

    Args:
        shares_received: Новых акций за блок
        shares_surrendered: Старых акций в блоке
        total_shares: Количество акций до сплита
        price: Цена акции до сплита
        dividend: Дивиденд на акцию до сплита (default: 0)

    Returns:
        PostSplitResult: количество акций (floor), цена и дивиденд
        (полная точность и округление до 2 знаков)

    Raises:
        InvalidInput: Если коэффициенты не положительные или total_shares < 0

    Examples:
        >>> post_split_adjustment(5, 4, 942, 56, 28)
        PostSplitResult(new_share_count=1177, new_price=Decimal('44.80'), ...
        >>> post_split_adjustment(1, 20, 580_000_000, 0.64)
        PostSplitResult(new_share_count=29000000, new_price=Decimal('12.80'), ...
    """
    for name, value in (
        ("shares_received", shares_received),
        ("shares_surrendered", shares_surrendered),
    ):
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            raise InvalidInput(f"{name} must be a positive integer, got {value!r}")

    if isinstance(total_shares, bool) or not isinstance(total_shares, int) or total_shares < 0:
        raise InvalidInput(f"total_shares must be a non-negative integer, got {total_shares!r}")

    price_decimal = to_decimal(price, "price")
    dividend_decimal = to_decimal(dividend, "dividend")

    received = Decimal(shares_received)
    surrendered = Decimal(shares_surrendered)

    new_shares = (total_shares * shares_received) // shares_surrendered
    new_price = price_decimal * surrendered / received
    new_dividend = dividend_decimal * surrendered / received

    return PostSplitResult(
        new_share_count=new_shares,
        new_price=round_dp(new_price),
        new_price_exact=new_price,
        new_dividend_per_share=round_dp(new_dividend),
        new_dividend_exact=new_dividend,
    )
