"""
Portfolio — Прирост капитала по сделке

ФОРМУЛЫ:
    capital_gains = selling_price - purchase_price
    capital_gains_percent = capital_gains / purchase_price * 100

Отрицательный результат — убыток (capital loss).
"""

from decimal import Decimal

from bizmath.core.domain.stock import CapitalGains
from bizmath.core.errors import InvalidInput
from bizmath.core.math.numerical_safeguards import DecimalLike, to_decimal


def capital_gains(selling_price: DecimalLike, purchase_price: DecimalLike) -> Decimal:
    """
    Прирост капитала: selling_price - purchase_price.

    Examples:
        >>> capital_gains(1000, 500)
        Decimal('500')
        >>> capital_gains(500, 1000)
        Decimal('-500')
    """
    return to_decimal(selling_price, "selling_price") - to_decimal(purchase_price, "purchase_price")


def capital_gains_percent(selling_price: DecimalLike, purchase_price: DecimalLike) -> Decimal:
    """
    Прирост капитала в процентах от цены покупки.

    Raises:
        InvalidInput: Если purchase_price <= 0

    Examples:
        >>> capital_gains_percent(1000, 500)
        Decimal('100')
        >>> capital_gains_percent(500, 1000)
        Decimal('-50')
    """
    purchase = to_decimal(purchase_price, "purchase_price")
    if purchase <= 0:
        raise InvalidInput(f"purchase_price must be positive, got {purchase_price}")

    return capital_gains(selling_price, purchase) / purchase * 100


def capital_gains_summary(selling_price: DecimalLike, purchase_price: DecimalLike) -> CapitalGains:
    """Прирост капитала в деньгах и процентах."""
    return CapitalGains(
        amount=capital_gains(selling_price, purchase_price),
        percent=capital_gains_percent(selling_price, purchase_price),
    )
