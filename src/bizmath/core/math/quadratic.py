"""
Quadratic — Корни и вершина параболы a*p² + b*p + c

Используется бизнес-моделью для:
- breakeven цен (profit(p) = 0) через квадратичную формулу
- максимумов revenue/profit через вершину параболы p* = -b / (2a)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. a == 0 → DegenerateInput (формула делит на 2a)
2. Дискриминант < 0 → NoRealSolution (без NaN и complex)
3. Вершина как максимум существует только для a < 0
"""

import math
from typing import NamedTuple

from bizmath.core.errors import DegenerateInput, NoRealSolution
from bizmath.core.math.numerical_safeguards import is_zero, validate_finite


class Vertex(NamedTuple):
    """Вершина параболы: (x, y)."""

    x: float
    y: float


def evaluate(a: float, b: float, c: float, x: float) -> float:
    """Значение a*x² + b*x + c."""
    return a * x * x + b * x + c


def discriminant(a: float, b: float, c: float) -> float:
    """Дискриминант b² - 4ac."""
    return b * b - 4.0 * a * c


def solve(a: float, b: float, c: float) -> tuple[float, float]:
    """
    Действительные корни a*x² + b*x + c = 0 по квадратичной формуле.

    Args:
        a: Коэффициент при x²
        b: Коэффициент при x
        c: Свободный член

    Returns:
        (x1, x2) по возрастанию (при нулевом дискриминанте x1 == x2)

    Raises:
        InvalidInput: Если коэффициенты NaN/Inf
        DegenerateInput: Если a == 0
        NoRealSolution: Если дискриминант < 0

    Examples:
        >>> solve(1.0, -3.0, 2.0)
        (1.0, 2.0)
    """
    a = validate_finite(a, "a")
    b = validate_finite(b, "b")
    c = validate_finite(c, "c")

    if is_zero(a):
        raise DegenerateInput("Quadratic coefficient a is zero: equation is not quadratic")

    disc = discriminant(a, b, c)
    if disc < 0:
        raise NoRealSolution(
            f"Discriminant is negative ({disc:.6g}): no real solution exists"
        )

    root = math.sqrt(disc)
    x1 = (-b - root) / (2.0 * a)
    x2 = (-b + root) / (2.0 * a)
    return (min(x1, x2), max(x1, x2))


def vertex(a: float, b: float, c: float = 0.0) -> Vertex:
    """
    Вершина параболы: x* = -b / (2a), y* = f(x*).

    Raises:
        InvalidInput: Если коэффициенты NaN/Inf
        DegenerateInput: Если a == 0
    """
    a = validate_finite(a, "a")
    b = validate_finite(b, "b")
    c = validate_finite(c, "c")

    if is_zero(a):
        raise DegenerateInput("Quadratic coefficient a is zero: parabola has no vertex")

    x = -b / (2.0 * a)
    return Vertex(x=x, y=evaluate(a, b, c, x))


def maximum(a: float, b: float, c: float = 0.0) -> Vertex:
    """
    Максимум параболы, открытой вниз.

    Raises:
        DegenerateInput: Если a >= 0 (максимума нет)
    """
    if validate_finite(a, "a") > 0:
        raise DegenerateInput(
            f"Parabola opens upward (a={a:.6g}): no maximum exists"
        )
    return vertex(a, b, c)
