"""
PivotMath: dense real vectors and matrices for hand-written linear algebra.

Two value types with arithmetic operators, structural transforms and the
in-place row/column primitives that elimination algorithms are built from.
Pivoting strategy and numerical stability are left to the caller.

Submodules:
    basis: Vector and Matrix
    core: Exceptions, validation, protocols and tolerance tiers
"""

__version__ = "0.1.0"

from pivotmath.basis import Matrix, Vector
from pivotmath.core.exceptions import (
    PivotMathError,
    InvalidArgumentError,
    IndexOutOfRangeError,
    DimensionMismatchError,
    ParseError,
    NumericalWarning,
)

__all__ = [
    "__version__",
    "Vector",
    "Matrix",
    "PivotMathError",
    "InvalidArgumentError",
    "IndexOutOfRangeError",
    "DimensionMismatchError",
    "ParseError",
    "NumericalWarning",
]
