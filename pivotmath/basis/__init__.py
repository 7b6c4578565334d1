"""
Dense value types.

Public API:
    Vector    - fixed-length sequence of float64 scalars
    Matrix    - fixed-shape grid of float64 scalars
"""

from pivotmath.basis.vector import Vector
from pivotmath.basis.matrix import Matrix

__all__ = [
    "Vector",
    "Matrix",
]
