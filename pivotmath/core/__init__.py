"""
Core infrastructure for PivotMath.

Shared abstractions used by the Vector and Matrix types.

Key components:
    protocols: VectorLike, MatrixLike capability protocols
    exceptions: Exception hierarchy
    validation: Input validators
    precision: IEEE arithmetic helpers and closeness test
    tolerances: Named tolerance tiers for approximate comparison
"""

from pivotmath.core.protocols import VectorLike, MatrixLike
from pivotmath.core.tolerances import ToleranceTier, select_tolerance
from pivotmath.core.exceptions import (
    PivotMathError,
    InvalidArgumentError,
    IndexOutOfRangeError,
    DimensionMismatchError,
    ParseError,
    NumericalWarning,
)

__all__ = [
    # Protocols
    "VectorLike",
    "MatrixLike",
    # Tolerances
    "ToleranceTier",
    "select_tolerance",
    # Exceptions
    "PivotMathError",
    "InvalidArgumentError",
    "IndexOutOfRangeError",
    "DimensionMismatchError",
    "ParseError",
    "NumericalWarning",
]
