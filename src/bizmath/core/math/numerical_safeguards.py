"""
Numerical Safeguards — Safe Math Primitives

Модуль обеспечивает численную корректность всех вычислений bizmath:
- NaN/Inf проверки для float входов (регрессия, бизнес-модель)
- Конверсия в Decimal без двоичного дрейфа (float → str → Decimal)
- Округление Decimal до фиксированного числа знаков (round_dp)
- Округление процентов до целого (round half up)
- Валидация серий (непустые, одинаковой длины)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN/Inf никогда не возвращаются как результат вычисления
2. Финансовые величины (цены, дивиденды, сплиты) считаются только в Decimal
3. Все операции детерминированы и воспроизводимы
"""

import math
from decimal import ROUND_HALF_EVEN, ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Final, Sequence, Union

from bizmath.core.errors import InvalidInput

# =============================================================================
# ПАРАМЕТРЫ ОКРУГЛЕНИЯ
# =============================================================================

# Количество знаков после запятой для цен, изменений и moving averages
PRICE_DP: Final[int] = 2

# Абсолютная толерантность для сравнения float с нулём
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12

DecimalLike = Union[Decimal, int, float, str]


# =============================================================================
# FLOAT ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


def is_zero(value: float, tol: float = EPS_FLOAT_COMPARE_ABS) -> bool:
    """
    Проверка, близко ли значение к нулю с учётом толерантности.

    Args:
        value: Проверяемое значение
        tol: Абсолютная толерантность (default: EPS_FLOAT_COMPARE_ABS)

    Returns:
        True если abs(value) <= tol
    """
    return abs(value) <= tol


def validate_finite(value: float, name: str) -> float:
    """
    Валидация, что значение — конечный float.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        value как float

    Raises:
        InvalidInput: Если value NaN/Inf или не число
    """
    try:
        result = float(value)
    except (TypeError, ValueError) as e:
        raise InvalidInput(f"{name} must be a number, got {value!r}") from e

    if not is_valid_float(result):
        raise InvalidInput(f"{name} must be a valid float (not NaN/Inf), got {value}")

    return result


def validate_series_pair(
    domain: Sequence[float],
    range_: Sequence[float],
) -> tuple[tuple[float, ...], tuple[float, ...]]:
    """
    Валидация пары серий (domain, range) и копирование в tuple.

    Args:
        domain: Значения x
        range_: Значения y

    Returns:
        (domain, range) как tuple[float] — собственная read-only копия

    Raises:
        InvalidInput: Если серия пустая, длины различаются или есть NaN/Inf
    """
    if len(domain) == 0 or len(range_) == 0:
        raise InvalidInput("Insufficient series lengths")

    if len(domain) != len(range_):
        raise InvalidInput("Range length is not equal to domain length or vice versa")

    xs = tuple(validate_finite(x, "domain value") for x in domain)
    ys = tuple(validate_finite(y, "range value") for y in range_)
    return xs, ys


# =============================================================================
# DECIMAL КОНВЕРСИЯ И ОКРУГЛЕНИЕ
# =============================================================================


def to_decimal(value: DecimalLike, name: str = "value") -> Decimal:
    """
    Конверсия в Decimal без двоичного дрейфа.

    float конвертируется через str(), поэтому 0.64 → Decimal("0.64"),
    а не Decimal("0.64000000000000001332...").

    Args:
        value: Decimal, int, float или str
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        Конечный Decimal

    Raises:
        InvalidInput: Если значение не число, NaN или Inf

    Examples:
        >>> to_decimal(0.64)
        Decimal('0.64')
        >>> to_decimal("56")
        Decimal('56')
    """
    if isinstance(value, bool):
        raise InvalidInput(f"{name} must be a number, got {value!r}")

    try:
        if isinstance(value, Decimal):
            result = value
        elif isinstance(value, float):
            result = Decimal(str(value))
        else:
            result = Decimal(value)
    except (InvalidOperation, TypeError, ValueError) as e:
        raise InvalidInput(f"{name} must be a number, got {value!r}") from e

    if not result.is_finite():
        raise InvalidInput(f"{name} must be finite (not NaN/Inf), got {value}")

    return result


def round_dp(value: Decimal, dp: int = PRICE_DP) -> Decimal:
    """
    Округление Decimal до dp знаков после запятой (banker's rounding).

    ROUND_HALF_EVEN — стандартное округление финансовых Decimal величин.

    Examples:
        >>> round_dp(Decimal("35.218"))
        Decimal('35.22')
        >>> round_dp(Decimal("0.125"))
        Decimal('0.12')
    """
    return value.quantize(Decimal(1).scaleb(-dp), rounding=ROUND_HALF_EVEN)


def round_percent(value: Decimal) -> float:
    """
    Округление процента до целого (round half up).

    Examples:
        >>> round_percent(Decimal("41.649"))
        42.0
        >>> round_percent(Decimal("24.5"))
        25.0
    """
    return float(value.quantize(Decimal(1), rounding=ROUND_HALF_UP))
