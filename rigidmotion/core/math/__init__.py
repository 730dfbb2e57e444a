"""
Core math modules for rigidmotion

Tolerances and fuzzy comparison shared by every value type.
"""

from rigidmotion.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    EPS_FUZZY_COMPARE,
    EPS_NORMALIZED_SQ,
    NAN,
    # NaN/Inf detection
    is_valid_float,
    # Epsilon comparisons
    is_close,
    is_normalized_squared,
    is_zero,
)

__all__ = [
    # Epsilon constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    "EPS_FUZZY_COMPARE",
    "EPS_NORMALIZED_SQ",
    "NAN",
    # NaN/Inf detection
    "is_valid_float",
    # Epsilon comparisons
    "is_close",
    "is_normalized_squared",
    "is_zero",
]
