"""
Business Model — Спрос, издержки, выручка, прибыль и breakeven

Модуль выводит функции бизнес-модели из наблюдений (цена, спрос) и издержек:
- Demand: линейная регрессия quantity_purchased по price
- Expense: линейная по цене (manufacturing_cost * demand + fixed_cost)
- Revenue: квадратичная по цене (price * demand)
- Profit: revenue - expense
- Максимумы revenue/profit через вершину параболы
- Breakeven цены (profit = 0) через квадратичную формулу
- Supply и рыночное равновесие (пересечение demand и supply)

ФОРМУЛЫ:
    demand(p) = m*p + k                         (m, k = OLS по (price, quantity))
    expense(p) = (mc*m)*p + (mc*k + fixed_cost)
    revenue(p) = m*p² + k*p
    profit(p) = m*p² + (k - mc*m)*p - (mc*k + fixed_cost)
    p_max = -b / (2a)
    p_breakeven = (-b ± sqrt(b² - 4ac)) / (2a)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все производные величины — чистые функции четырёх входов (идемпотентны)
2. Дискриминант < 0 → NoRealSolution (без NaN/complex)
3. a == 0 или a > 0 → DegenerateInput для максимумов
"""

from dataclasses import dataclass, field
from typing import Any, NamedTuple, Optional, Sequence

from bizmath.app_logging import get_logger
from bizmath.core.contracts import validate_business_inputs
from bizmath.core.errors import DegenerateInput, InvalidInput, NoRealSolution
from bizmath.core.math import quadratic
from bizmath.core.math.linreg import RegressionResult, fit
from bizmath.core.math.numerical_safeguards import is_zero, validate_finite

logger = get_logger("business_model")


# =============================================================================
# FUNCTIONS
# =============================================================================


class LinearFunction(NamedTuple):
    """f(p) = slope * p + intercept."""

    slope: float
    intercept: float

    def __call__(self, p: float) -> float:
        return self.slope * p + self.intercept


class QuadraticFunction(NamedTuple):
    """f(p) = a*p² + b*p + c."""

    a: float
    b: float
    c: float = 0.0

    def __call__(self, p: float) -> float:
        return quadratic.evaluate(self.a, self.b, self.c, p)


class Equilibrium(NamedTuple):
    """Рыночное равновесие: цена и количество, где demand == supply."""

    price: float
    quantity: float


@dataclass(frozen=True)
class BusinessModelResult:
    """
    Снимок всех производных величин бизнес-модели.

    Точки, которые не существуют для данных входов, равны None:
    - revenue_maximum/profit_maximum: спрос не убывает с ценой
    - breakeven_prices: дискриминант < 0
    - supply/equilibrium: нет quantities_supplied или прямые параллельны
    """

    demand: LinearFunction
    expense: LinearFunction
    revenue: QuadraticFunction
    profit: QuadraticFunction

    revenue_maximum: Optional[quadratic.Vertex]
    profit_maximum: Optional[quadratic.Vertex]
    breakeven_prices: Optional[tuple[float, float]]

    supply: Optional[LinearFunction] = None
    equilibrium: Optional[Equilibrium] = None


# =============================================================================
# BUSINESS MODEL
# =============================================================================


@dataclass(frozen=True)
class BusinessModel:
    """
    Бизнес-модель по ценам, спросу и издержкам.

    Входы копируются в tuple при создании; регрессия спроса выполняется сразу,
    поэтому невалидные серии (пустые, разной длины, константные цены)
    отклоняются в конструкторе.

    Raises:
        InvalidInput: Пустые/разной длины серии, отрицательные издержки
        DegenerateInput: Все цены одинаковы (наклон спроса не определён)
    """

    prices: Sequence[float]
    quantities_purchased: Sequence[float]
    fixed_cost: float = 0.0
    manufacturing_cost: float = 0.0
    quantities_supplied: Optional[Sequence[float]] = None

    _demand: RegressionResult = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "prices", tuple(self.prices))
        object.__setattr__(self, "quantities_purchased", tuple(self.quantities_purchased))
        if self.quantities_supplied is not None:
            object.__setattr__(self, "quantities_supplied", tuple(self.quantities_supplied))

        fixed_cost = validate_finite(self.fixed_cost, "fixed_cost")
        manufacturing_cost = validate_finite(self.manufacturing_cost, "manufacturing_cost")
        if fixed_cost < 0:
            raise InvalidInput(f"fixed_cost must be non-negative, got {fixed_cost}")
        if manufacturing_cost < 0:
            raise InvalidInput(f"manufacturing_cost must be non-negative, got {manufacturing_cost}")
        object.__setattr__(self, "fixed_cost", fixed_cost)
        object.__setattr__(self, "manufacturing_cost", manufacturing_cost)

        object.__setattr__(self, "_demand", fit(self.prices, self.quantities_purchased))
        logger.debug(
            "Demand fitted: slope=%.6g intercept=%.6g",
            self._demand.slope,
            self._demand.intercept,
        )

    @classmethod
    def from_payload(cls, data: dict[str, Any]) -> "BusinessModel":
        """
        Создание модели из JSON payload с валидацией контракта.

        Raises:
            InvalidInput: Если payload не соответствует схеме business_inputs
        """
        validate_business_inputs(data)
        return cls(
            prices=data["prices"],
            quantities_purchased=data["quantities_purchased"],
            fixed_cost=data["fixed_cost"],
            manufacturing_cost=data["manufacturing_cost"],
            quantities_supplied=data.get("quantities_supplied"),
        )

    @classmethod
    def from_series(
        cls,
        prices: Sequence[float],
        quantities_purchased: Sequence[float],
        fixed_cost: float = 0.0,
        manufacturing_cost: float = 0.0,
        quantities_supplied: Optional[Sequence[float]] = None,
    ) -> BusinessModelResult:
        """
        Модель и снимок всех её производных величин за один вызов.

        Raises:
            InvalidInput, DegenerateInput: Ошибки входных серий (см. конструктор)
        """
        model = cls(
            prices=prices,
            quantities_purchased=quantities_purchased,
            fixed_cost=fixed_cost,
            manufacturing_cost=manufacturing_cost,
            quantities_supplied=quantities_supplied,
        )
        return model.snapshot()

    def snapshot(self) -> BusinessModelResult:
        """Все производные величины; несуществующие точки → None."""
        try:
            revenue_maximum: Optional[quadratic.Vertex] = self.revenue_maximum()
            profit_maximum: Optional[quadratic.Vertex] = self.profit_maximum()
        except DegenerateInput as e:
            logger.debug("No revenue/profit maximum: %s", e)
            revenue_maximum = profit_maximum = None

        try:
            breakeven: Optional[tuple[float, float]] = self.breakeven_prices()
        except (NoRealSolution, DegenerateInput) as e:
            logger.debug("No breakeven price: %s", e)
            breakeven = None

        supply: Optional[LinearFunction] = None
        equilibrium: Optional[Equilibrium] = None
        if self.quantities_supplied is not None:
            supply = self.supply()
            try:
                equilibrium = self.equilibrium()
            except NoRealSolution as e:
                logger.debug("No equilibrium: %s", e)

        return BusinessModelResult(
            demand=self.demand(),
            expense=self.expense(),
            revenue=self.revenue(),
            profit=self.profit(),
            revenue_maximum=revenue_maximum,
            profit_maximum=profit_maximum,
            breakeven_prices=breakeven,
            supply=supply,
            equilibrium=equilibrium,
        )

    # -------------------------------------------------------------------------
    # Functions of price
    # -------------------------------------------------------------------------

    def demand(self) -> LinearFunction:
        """Функция спроса (OLS по (price, quantity_purchased))."""
        return LinearFunction(self._demand.slope, self._demand.intercept)

    def expense(self) -> LinearFunction:
        """expense(p) = mc * demand(p) + fixed_cost."""
        demand = self.demand()
        return LinearFunction(
            slope=self.manufacturing_cost * demand.slope,
            intercept=self.manufacturing_cost * demand.intercept + self.fixed_cost,
        )

    def revenue(self) -> QuadraticFunction:
        """revenue(p) = p * demand(p)."""
        demand = self.demand()
        return QuadraticFunction(a=demand.slope, b=demand.intercept, c=0.0)

    def profit(self) -> QuadraticFunction:
        """profit(p) = revenue(p) - expense(p)."""
        demand = self.demand()
        expense = self.expense()
        return QuadraticFunction(
            a=demand.slope,
            b=demand.intercept - expense.slope,
            c=-expense.intercept,
        )

    # -------------------------------------------------------------------------
    # Derived points
    # -------------------------------------------------------------------------

    def revenue_maximum(self) -> quadratic.Vertex:
        """
        Цена и значение максимальной выручки.

        Raises:
            DegenerateInput: Если спрос не убывает с ценой (нет максимума)
        """
        revenue = self.revenue()
        return quadratic.maximum(revenue.a, revenue.b, revenue.c)

    def profit_maximum(self) -> quadratic.Vertex:
        """
        Цена и значение максимальной прибыли.

        Raises:
            DegenerateInput: Если спрос не убывает с ценой (нет максимума)
        """
        profit = self.profit()
        return quadratic.maximum(profit.a, profit.b, profit.c)

    def breakeven_prices(self) -> tuple[float, float]:
        """
        Цены, при которых revenue == expense (profit = 0), по возрастанию.

        Raises:
            NoRealSolution: Если дискриминант < 0 (breakeven цены нет)
            DegenerateInput: Если наклон спроса равен 0
        """
        profit = self.profit()
        return quadratic.solve(profit.a, profit.b, profit.c)

    # -------------------------------------------------------------------------
    # Supply & equilibrium
    # -------------------------------------------------------------------------

    def supply(self) -> LinearFunction:
        """
        Функция предложения (OLS по (price, quantity_supplied)).

        Raises:
            InvalidInput: Если quantities_supplied не заданы или невалидны
        """
        if self.quantities_supplied is None:
            raise InvalidInput("quantities_supplied are required for the supply function")

        result = fit(self.prices, self.quantities_supplied)
        return LinearFunction(result.slope, result.intercept)

    def equilibrium(self) -> Equilibrium:
        """
        Пересечение demand и supply: m_d*p + k_d = m_s*p + k_s.

        Raises:
            NoRealSolution: Если прямые параллельны
        """
        demand = self.demand()
        supply = self.supply()

        slope_diff = demand.slope - supply.slope
        if is_zero(slope_diff):
            raise NoRealSolution("Demand and supply lines are parallel: no equilibrium exists")

        price = (supply.intercept - demand.intercept) / slope_diff
        return Equilibrium(price=price, quantity=demand(price))
