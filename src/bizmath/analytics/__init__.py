"""
Analytics — бизнес-модель, временные ряды акций и прирост капитала.
"""

from bizmath.analytics.business_model import (
    BusinessModel,
    BusinessModelResult,
    Equilibrium,
    LinearFunction,
    QuadraticFunction,
)
from bizmath.analytics.portfolio import (
    capital_gains,
    capital_gains_percent,
    capital_gains_summary,
)
from bizmath.analytics.time_series import (
    closing_prices,
    find_by_date,
    moving_average,
    post_split_adjustment,
    with_change,
)

__all__ = [
    # Business model
    "BusinessModel",
    "BusinessModelResult",
    "Equilibrium",
    "LinearFunction",
    "QuadraticFunction",
    # Portfolio
    "capital_gains",
    "capital_gains_percent",
    "capital_gains_summary",
    # Time series
    "closing_prices",
    "find_by_date",
    "moving_average",
    "post_split_adjustment",
    "with_change",
]
