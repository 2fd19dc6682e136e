"""
Domain models and value objects.

Contains ownership entities (Owner, Corporation) and stock market
entities (StockDataPoint, StockSeries, PostSplitResult, CapitalGains).
"""

from bizmath.core.domain.ownership import (
    MAJORITY_THRESHOLD_PCT,
    Corporation,
    Owner,
    OwnershipShare,
)
from bizmath.core.domain.stock import (
    CapitalGains,
    PostSplitResult,
    StockDataPoint,
    StockSeries,
)

__all__ = [
    # Ownership
    "MAJORITY_THRESHOLD_PCT",
    "Owner",
    "OwnershipShare",
    "Corporation",
    # Stock
    "StockDataPoint",
    "StockSeries",
    "PostSplitResult",
    "CapitalGains",
]
