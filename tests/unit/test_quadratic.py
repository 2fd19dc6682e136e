"""
Тесты для Quadratic: корни и вершина параболы

Проверяемые инварианты:
1. Корни по квадратичной формуле (по возрастанию)
2. NoRealSolution при отрицательном дискриминанте
3. DegenerateInput при a == 0
4. Максимум существует только для a < 0
"""

import pytest

from bizmath.core.errors import DegenerateInput, InvalidInput, NoRealSolution
from bizmath.core.math.quadratic import (
    Vertex,
    discriminant,
    evaluate,
    maximum,
    solve,
    vertex,
)


class TestSolve:
    """Тесты solve"""

    def test_two_roots_sorted(self):
        assert solve(1.0, -3.0, 2.0) == (1.0, 2.0)

    def test_roots_sorted_for_negative_a(self):
        """При a < 0 формула даёт корни в обратном порядке — результат всё равно по возрастанию."""
        x1, x2 = solve(-1.0, 3.0, -2.0)
        assert (x1, x2) == (1.0, 2.0)

    def test_double_root(self):
        assert solve(1.0, -4.0, 4.0) == (2.0, 2.0)

    def test_roots_satisfy_equation(self):
        a, b, c = -2.0, 120.0, -650.0
        for root in solve(a, b, c):
            assert evaluate(a, b, c, root) == pytest.approx(0.0, abs=1e-9)

    def test_negative_discriminant(self):
        """b² - 4ac < 0 → NoRealSolution, не NaN/complex."""
        assert discriminant(1.0, 0.0, 1.0) == -4.0
        with pytest.raises(NoRealSolution, match="Discriminant is negative"):
            solve(1.0, 0.0, 1.0)

    def test_zero_a(self):
        with pytest.raises(DegenerateInput):
            solve(0.0, 2.0, 1.0)

    def test_nan_coefficient(self):
        with pytest.raises(InvalidInput):
            solve(float("nan"), 1.0, 1.0)


class TestVertex:
    """Тесты vertex / maximum"""

    def test_vertex(self):
        assert vertex(-2.0, 110.0) == Vertex(x=27.5, y=1512.5)

    def test_vertex_with_constant(self):
        result = vertex(-2.0, 120.0, -650.0)
        assert result.x == 30.0
        assert result.y == 1150.0

    def test_vertex_zero_a(self):
        with pytest.raises(DegenerateInput):
            vertex(0.0, 1.0)

    def test_maximum_downward(self):
        assert maximum(-1.0, 4.0) == Vertex(x=2.0, y=4.0)

    def test_maximum_upward_rejected(self):
        """Парабола открыта вверх — максимума нет."""
        with pytest.raises(DegenerateInput, match="no maximum"):
            maximum(1.0, 4.0)

    def test_maximum_zero_a(self):
        with pytest.raises(DegenerateInput):
            maximum(0.0, 4.0)
