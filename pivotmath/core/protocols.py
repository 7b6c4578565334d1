"""
Core protocols for PivotMath.

These define structural interfaces that alternative storage backends must
satisfy. We use Protocol (structural typing) rather than ABC (nominal
typing) so a sparse, memory-mapped or GPU-resident container can take part
without inheriting from the dense implementation.

Design Principles:
    - Minimal contracts: shape, element read, element write, dense export
    - Everything else (arithmetic, structural transforms) is built on top
"""

from typing import Protocol, runtime_checkable

import numpy as np
from numpy.typing import NDArray


@runtime_checkable
class VectorLike(Protocol):
    """
    Minimal protocol for a fixed-length sequence of real scalars.

    The dense implementation is pivotmath.basis.Vector.
    """

    @property
    def length(self) -> int:
        """Number of entries. Never changes after construction."""
        ...

    def __len__(self) -> int:
        ...

    def __getitem__(self, index: int) -> float:
        """
        Read entry at index.

        Raises:
            IndexOutOfRangeError: If index is outside [0, length)
        """
        ...

    def __setitem__(self, index: int, value: float) -> None:
        """
        Overwrite entry at index in place.

        Raises:
            IndexOutOfRangeError: If index is outside [0, length)
        """
        ...

    def to_numpy(self) -> NDArray[np.float64]:
        """Dense float64 copy of the entries, shape (length,)."""
        ...


@runtime_checkable
class MatrixLike(Protocol):
    """
    Minimal protocol for a fixed-shape grid of real scalars.

    The dense implementation is pivotmath.basis.Matrix. Alternative storage
    (banded, sparse, lazily computed) only needs to honor this contract to
    be consumed by code written against it.
    """

    @property
    def rows(self) -> int:
        """Number of rows."""
        ...

    @property
    def columns(self) -> int:
        """Number of columns."""
        ...

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, columns)."""
        ...

    def __getitem__(self, key: tuple[int, int]) -> float:
        """
        Read entry at [row, column].

        Raises:
            IndexOutOfRangeError: If either index is out of bounds
        """
        ...

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        """
        Overwrite entry at [row, column] in place.

        Raises:
            IndexOutOfRangeError: If either index is out of bounds
        """
        ...

    def to_numpy(self) -> NDArray[np.float64]:
        """Dense float64 copy of the entries, shape (rows, columns)."""
        ...
