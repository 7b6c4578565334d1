"""
Numerical precision constants and utilities.

Provides machine epsilon, IEEE-preserving arithmetic helpers and the
closeness test behind Vector.allclose and Matrix.allclose.
"""

import warnings

import numpy as np
from numpy.typing import NDArray
from typing import Any

from pivotmath.core.exceptions import NumericalWarning


# Machine epsilon for float64
EPSILON_64: float = float(np.finfo(np.float64).eps)  # ~2.22e-16


def ieee_errstate() -> np.errstate:
    """
    Floating-point error state for operations that deliberately produce
    inf and nan instead of raising or warning.
    """
    return np.errstate(divide='ignore', over='ignore', under='ignore', invalid='ignore')


def reciprocal(constant: float, name: str, stacklevel: int = 3) -> float:
    """
    Compute 1 / constant with IEEE semantics.

    Division by an exact zero returns +inf or -inf (matching the sign of
    the zero) and emits a NumericalWarning instead of raising
    ZeroDivisionError.

    Args:
        constant: Divisor
        name: Operation name for the warning message
        stacklevel: Passed through to warnings.warn

    Returns:
        The reciprocal as a Python float
    """
    with ieee_errstate():
        result = float(np.float64(1.0) / np.float64(constant))
    if constant == 0:
        warnings.warn(
            f"{name}: division by zero, result contains inf or nan",
            NumericalWarning,
            stacklevel=stacklevel,
        )
    return result


def is_close(
    a: float | NDArray[np.floating[Any]],
    b: float | NDArray[np.floating[Any]],
    rtol: float,
    atol: float,
) -> bool | NDArray[np.bool_]:
    """
    Check if values are numerically close.

    Uses the formula: |a - b| <= atol + rtol * |b|. Identical values
    (including matching infinities) are always close; nan is never close
    to anything.

    Args:
        a: First value(s)
        b: Second value(s)
        rtol: Relative tolerance
        atol: Absolute tolerance

    Returns:
        Boolean or boolean array indicating closeness
    """
    with ieee_errstate():
        finite = np.isfinite(a) & np.isfinite(b)
        return (a == b) | (finite & (np.abs(a - b) <= atol + rtol * np.abs(b)))
