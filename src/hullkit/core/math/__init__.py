"""
Core math modules для hullkit

Математические примитивы и численные алгоритмы с гарантией стабильности.
"""

# Numerical Safeguards
from hullkit.core.math.numerical_safeguards import (
    # Epsilon constants
    ANGLE_SINE_SWITCH_RATIO,
    DEFAULT_HULL_TOLERANCE,
    EPS_CALC,
    EPS_FLOAT_COMPARE_ABS,
    # NaN/Inf checks
    is_valid_float,
    # Epsilon comparisons
    compare_with_tolerance,
    is_zero,
    # Validation
    validate_non_negative,
)

# Linear Combination
from hullkit.core.math.linear_combination import (
    SPLIT_FACTOR,
    linear_combination,
    linear_combination_of,
    split,
    two_product,
)

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "ANGLE_SINE_SWITCH_RATIO",
    "DEFAULT_HULL_TOLERANCE",
    "EPS_CALC",
    "EPS_FLOAT_COMPARE_ABS",
    # Numerical Safeguards — NaN/Inf checks
    "is_valid_float",
    # Numerical Safeguards — Epsilon comparisons
    "compare_with_tolerance",
    "is_zero",
    # Numerical Safeguards — Validation
    "validate_non_negative",
    # Linear Combination
    "SPLIT_FACTOR",
    "linear_combination",
    "linear_combination_of",
    "split",
    "two_product",
]
