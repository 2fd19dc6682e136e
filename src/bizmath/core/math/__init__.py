"""
Core math modules для bizmath

Математические примитивы и численные алгоритмы с гарантией корректности.
"""

# Numerical Safeguards
from bizmath.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    PRICE_DP,
    is_valid_float,
    is_zero,
    round_dp,
    round_percent,
    to_decimal,
    validate_finite,
    validate_series_pair,
)

# Linear Regression
from bizmath.core.math.linreg import RegressionResult, fit, linear_regress

# Quadratic
from bizmath.core.math.quadratic import Vertex, discriminant, evaluate, maximum, solve, vertex

__all__ = [
    # Numerical Safeguards — Constants
    "EPS_FLOAT_COMPARE_ABS",
    "PRICE_DP",
    # Numerical Safeguards — Functions
    "is_valid_float",
    "is_zero",
    "round_dp",
    "round_percent",
    "to_decimal",
    "validate_finite",
    "validate_series_pair",
    # Linear Regression
    "RegressionResult",
    "fit",
    "linear_regress",
    # Quadratic
    "Vertex",
    "discriminant",
    "evaluate",
    "maximum",
    "solve",
    "vertex",
]
