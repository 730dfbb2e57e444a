"""
Numerical Safeguards — Tolerances and Fuzzy Comparison

The module owns every floating-point tolerance used by the algebra:
- Fuzzy comparison of scalars (absolute + relative tolerance)
- Unit-magnitude test on squared lengths
- NaN/Inf detection
- The NaN sentinel returned by failed normalized operations

CRITICAL INVARIANTS:
1. Float equality is never exact: every comparison goes through is_close
2. NaN is unequal to everything, itself included (sentinel detection relies on it)
3. All operations are deterministic and side-effect free
"""

import math
from typing import Final

# =============================================================================
# EPSILON PARAMETERS
# =============================================================================

# Tolerance of value equality (used as both relative and absolute tolerance).
# Single-precision scale: reference values carry 6-7 significant digits.
EPS_FUZZY_COMPARE: Final[float] = 1.0e-5

# Relative tolerance for is_close
EPS_FLOAT_COMPARE_REL: Final[float] = EPS_FUZZY_COMPARE

# Absolute tolerance for is_close (matters for values near zero)
EPS_FLOAT_COMPARE_ABS: Final[float] = EPS_FUZZY_COMPARE

# Tolerance on |length_squared - 1| for the unit-magnitude precondition.
# d(x²) = 2x·dx, so a length tolerance of eps is 2·eps on the squared length.
EPS_NORMALIZED_SQ: Final[float] = 2.0 * EPS_FUZZY_COMPARE

# Sentinel component of a value produced by a failed normalized operation
NAN: Final[float] = float("nan")


# =============================================================================
# NaN/Inf DETECTION
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Check that a float is finite (neither NaN nor Inf).

    Args:
        value: Value to check

    Returns:
        True if the value is finite, False for NaN or Inf
    """
    return math.isfinite(value)


# =============================================================================
# EPSILON COMPARISONS
# =============================================================================


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Fuzzy float comparison.

    Python's math.isclose with domain tolerances as defaults.

    Algorithm:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Args:
        a: First value
        b: Second value
        rel_tol: Relative tolerance (default: 1e-5)
        abs_tol: Absolute tolerance (default: 1e-5)

    Returns:
        True if the values are close; always False if either is NaN

    Examples:
        >>> is_close(-0.307692, -4.0 / 13.0)
        True
        >>> is_close(1.0, 1.001)
        False
        >>> is_close(0.0, 1e-7)
        True  # abs diff < abs_tol
        >>> is_close(float("nan"), float("nan"))
        False
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


def is_zero(value: float, tol: float = EPS_FLOAT_COMPARE_ABS) -> bool:
    """
    Check whether a value is zero within an absolute tolerance.

    Args:
        value: Value to check
        tol: Absolute tolerance (default: EPS_FLOAT_COMPARE_ABS)

    Returns:
        True if abs(value) <= tol
    """
    return abs(value) <= tol


def is_normalized_squared(length_sq: float, tol: float = EPS_NORMALIZED_SQ) -> bool:
    """
    Check that a squared length describes a unit-magnitude value.

    Comparing the squared length avoids a sqrt on the hot path.

    Args:
        length_sq: Squared magnitude (e.g. real² + imag²)
        tol: Absolute tolerance on |length_sq - 1| (default: EPS_NORMALIZED_SQ)

    Returns:
        True if abs(length_sq - 1) < tol; False for NaN

    Examples:
        >>> is_normalized_squared(1.0)
        True
        >>> is_normalized_squared(0.9999996)
        True
        >>> is_normalized_squared(7.25)
        False
    """
    return abs(length_sq - 1.0) < tol
