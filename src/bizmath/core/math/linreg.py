"""
Linear Regression — Ordinary Least Squares (closed form)

Модуль вычисляет линию наилучшего приближения y = slope * x + intercept
по двум сериям одинаковой длины.

ФОРМУЛЫ:
    x̄ = mean(domain), ȳ = mean(range)
    dx = x - x̄, dy = y - ȳ
    Sxy = Σ(dx * dy)
    Sxx = Σ(dx²)
    slope = Sxy / Sxx
    intercept = ȳ - slope * x̄

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Пустые серии или серии разной длины → InvalidInput
2. Sxx == 0 (все x одинаковы) → DegenerateInput, NaN/Inf не возвращаются
3. Чистая функция: повторный вызов с теми же входами даёт тот же результат
"""

from typing import NamedTuple, Sequence

from bizmath.core.errors import DegenerateInput
from bizmath.core.math.numerical_safeguards import (
    is_valid_float,
    validate_series_pair,
)


# =============================================================================
# RESULT
# =============================================================================


class RegressionResult(NamedTuple):
    """Результат OLS регрессии: (slope, intercept)."""

    slope: float
    intercept: float

    def predict(self, x: float) -> float:
        """Значение линии регрессии в точке x."""
        return self.slope * x + self.intercept


# =============================================================================
# LINEAR REGRESSION
# =============================================================================


def fit(domain: Sequence[float], range_: Sequence[float]) -> RegressionResult:
    """
    OLS регрессия range по domain.

    Args:
        domain: Значения x
        range_: Значения y (парные с domain по индексу)

    Returns:
        RegressionResult(slope, intercept)

    Raises:
        InvalidInput: Если серия пустая, длины различаются или есть NaN/Inf
        DegenerateInput: Если все значения domain одинаковы (Sxx = 0)

    Examples:
        >>> fit([2, 4, 6, 8, 10], [9, 14, 7, 18, 27])
        RegressionResult(slope=2.0, intercept=3.0)
    """
    xs, ys = validate_series_pair(domain, range_)

    # Среднее константной серии в float может отличаться от самих значений
    # на ulp, поэтому константность проверяется до вычисления Sxx
    if all(x == xs[0] for x in xs):
        raise DegenerateInput(
            f"Domain has zero variance (all values equal {xs[0]}): slope is undefined"
        )

    n = len(xs)
    x_mean = sum(xs) / n
    y_mean = sum(ys) / n

    sxy = 0.0
    sxx = 0.0
    for x, y in zip(xs, ys):
        dx = x - x_mean
        dy = y - y_mean
        sxy += dx * dy
        sxx += dx * dx

    if sxx == 0.0:
        raise DegenerateInput("Domain variance underflows to zero: slope is undefined")

    slope = sxy / sxx
    intercept = y_mean - slope * x_mean

    if not (is_valid_float(slope) and is_valid_float(intercept)):
        raise DegenerateInput(
            f"Regression produced non-finite result: slope={slope}, intercept={intercept}"
        )

    return RegressionResult(slope=slope, intercept=intercept)


# Alias
linear_regress = fit
