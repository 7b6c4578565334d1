"""
Matrix: fixed-shape grid of float64 scalars.

Index assignment and the row/column maintenance operations
(interchange_*, change_*, modify_*, sum_*, rest_*) mutate the matrix in
place and return None. Everything else returns a new Matrix or Vector.

The maintenance operations are the primitive steps a caller composes into
elimination algorithms. Note that modify_rows overwrites the destination
row with a scaled copy of the source row:

    m.modify_rows(dest, src, c)    # row dest <- c * row src

so an accumulating step "dest <- dest + c * src" has to be written as

    m.change_row(dest, m.row_to_vector(dest).plus_mult(c, m.row_to_vector(src)))
"""

from __future__ import annotations

import numbers
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pivotmath.basis.vector import Vector
from pivotmath.core.exceptions import DimensionMismatchError, InvalidArgumentError
from pivotmath.core.precision import ieee_errstate, is_close, reciprocal
from pivotmath.core.protocols import MatrixLike, VectorLike
from pivotmath.core.tolerances import DEFAULT, ToleranceTier
from pivotmath.core.validation import (
    check_index,
    check_matrix_like,
    check_ndim,
    check_permutation,
    check_positive,
    check_same_length,
    check_same_shape,
    check_scalar,
    check_values,
    check_vector_like,
)


class Matrix:
    """
    Dense real matrix of fixed shape.

    Construction:
        Matrix(2, 3)                      2 x 3 zeros
        Matrix(4)                         4 x 4 zeros
        Matrix.identity(3)                3 x 3 identity
        Matrix.null(2, 5)                 2 x 5 zeros
        Matrix.from_rows([[1, 2], [3, 4]])

    Operators:
        A + B, A - B, -A                  element-wise, equal shapes
        A + v, A - v                      broadcast over a single row/column
        c * A, A * c, A / c               scaling
        A * B, A @ B                      matrix product
        A * v, A @ v                      matrix-vector product
    """

    __slots__ = ('_values',)

    __array_ufunc__ = None

    def __init__(self, rows: int, columns: int | None = None):
        """
        Zero matrix of shape (rows, columns), square if columns is omitted.

        Raises:
            InvalidArgumentError: If a dimension is not a positive integer
        """
        rows = check_positive(rows, 'rows')
        columns = rows if columns is None else check_positive(columns, 'columns')
        self._values = np.zeros((rows, columns), dtype=np.float64)

    @classmethod
    def _from_array(cls, array: NDArray[np.float64]) -> Matrix:
        """Wrap an already validated 2D float64 array without copying."""
        matrix = cls.__new__(cls)
        matrix._values = array
        return matrix

    # === Factories ===

    @classmethod
    def null(cls, rows: int, columns: int | None = None) -> Matrix:
        """All-zero matrix."""
        return cls(rows, columns)

    @classmethod
    def identity(cls, rows: int, columns: int | None = None) -> Matrix:
        """
        Ones on the main diagonal (i == j), zeros elsewhere.

        Square when columns is omitted; rectangular shapes are allowed.
        """
        rows = check_positive(rows, 'rows')
        columns = rows if columns is None else check_positive(columns, 'columns')
        return cls._from_array(np.eye(rows, columns, dtype=np.float64))

    @classmethod
    def from_rows(cls, rows: ArrayLike) -> Matrix:
        """
        Build a matrix from a nested sequence of rows.

        Args:
            rows: 2D array-like of real numbers with at least one row and
                one column

        Raises:
            InvalidArgumentError: If rows is empty, ragged or non-numeric
            DimensionMismatchError: If rows is not two-dimensional
        """
        array = check_values(rows, 'rows')
        if array.size == 0:
            raise InvalidArgumentError(
                f"rows: a matrix needs at least one row and one column, got shape {array.shape}"
            )
        check_ndim(array, 2, 'rows')
        return cls._from_array(array)

    # === Shape and element access ===

    @property
    def rows(self) -> int:
        return self._values.shape[0]

    @property
    def columns(self) -> int:
        return self._values.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        return (self._values.shape[0], self._values.shape[1])

    @property
    def is_square(self) -> bool:
        return self.rows == self.columns

    def _check_key(self, key: Any) -> tuple[int, int]:
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError(
                f"Matrix indices must be a (row, column) pair, got {key!r}"
            )
        return (check_index(key[0], self.rows, 'row'),
                check_index(key[1], self.columns, 'column'))

    def __getitem__(self, key: tuple[int, int]) -> float:
        return float(self._values[self._check_key(key)])

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        self._values[self._check_key(key)] = check_scalar(value, 'value')

    def to_numpy(self) -> NDArray[np.float64]:
        """Independent float64 copy of the entries."""
        return self._values.copy()

    def __array__(self, dtype: Any = None, copy: bool | None = None) -> NDArray[Any]:
        if dtype is None:
            return self._values.copy()
        return self._values.astype(dtype)

    # === Value semantics ===

    def copy(self) -> Matrix:
        """Deep copy sharing no storage with this matrix."""
        return self._from_array(self._values.copy())

    def __copy__(self) -> Matrix:
        return self.copy()

    def __deepcopy__(self, memo: dict[int, Any]) -> Matrix:
        return self.copy()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return bool(np.array_equal(self._values, other._values))

    __hash__ = None

    def allclose(self, other: MatrixLike, tolerance: ToleranceTier = DEFAULT) -> bool:
        """
        Element-wise closeness within a tolerance tier.

        Matrices of different shape are never close.
        """
        check_matrix_like(other, 'other')
        if tuple(other.shape) != self.shape:
            return False
        return bool(np.all(is_close(self._values, other.to_numpy(),
                                    tolerance.rtol, tolerance.atol)))

    def __str__(self) -> str:
        return '( ' + ' , '.join(str(self.row_to_vector(i)) for i in range(self.rows)) + ' )'

    def __repr__(self) -> str:
        return f"Matrix({self._values.tolist()!r})"

    # === Arithmetic ===

    def scale(self, constant: float) -> Matrix:
        """Multiply every entry by constant."""
        constant = check_scalar(constant, 'constant')
        with ieee_errstate():
            return self._from_array(self._values * constant)

    def divide(self, constant: float) -> Matrix:
        """
        Divide every entry by constant, computed as scaling by 1/constant.

        Dividing by zero yields inf/nan entries and a NumericalWarning.
        """
        constant = check_scalar(constant, 'constant')
        return self.scale(reciprocal(constant, 'Matrix.divide'))

    def add(self, other: MatrixLike | VectorLike) -> Matrix:
        """
        Element-wise sum with a matrix of the same shape, or broadcast sum
        with a vector (see _broadcast).

        Raises:
            DimensionMismatchError: If shapes are incompatible
        """
        if isinstance(other, MatrixLike):
            check_same_shape(self.shape, other.shape, 'Matrix.add')
            with ieee_errstate():
                return self._from_array(self._values + other.to_numpy())
        check_vector_like(other, 'other')
        return self._from_array(self._broadcast(other, 'Matrix.add', 1.0))

    def subtract(self, other: MatrixLike | VectorLike) -> Matrix:
        """
        Element-wise difference with a matrix of the same shape, or
        broadcast difference with a vector.

        Raises:
            DimensionMismatchError: If shapes are incompatible
        """
        if isinstance(other, MatrixLike):
            check_same_shape(self.shape, other.shape, 'Matrix.subtract')
            with ieee_errstate():
                return self._from_array(self._values - other.to_numpy())
        check_vector_like(other, 'other')
        return self._from_array(self._broadcast(other, 'Matrix.subtract', -1.0))

    def _broadcast(self, vector: VectorLike, name: str, sign: float) -> NDArray[np.float64]:
        """
        Combine a single-row or single-column matrix with a vector.

        The vector runs along the non-unit axis. A vector of length 1 is
        applied to every entry. The result keeps the matrix's shape.
        """
        rows, columns = self.shape
        length = len(vector)
        if (rows > 1 and columns > 1) or length not in (rows, columns):
            raise DimensionMismatchError(
                f"{name}: cannot broadcast a vector of length {length} over a "
                f"{rows}x{columns} matrix; the matrix needs a single row or column "
                f"matching the vector length",
                expected=(rows, columns),
                actual=length,
            )
        values = vector.to_numpy()
        if columns == 1 and length == rows:
            values = values.reshape(-1, 1)
        elif rows == 1 and length == columns:
            values = values.reshape(1, -1)
        with ieee_errstate():
            return self._values + sign * values

    def multiply(self, other: MatrixLike | VectorLike) -> Matrix | Vector:
        """
        Matrix-matrix or matrix-vector product.

        For a matrix operand the result has shape [self.rows, other.columns]
        with entry [i, k] = sum_j self[i, j] * other[j, k]. For a vector
        operand the result is a vector of length self.rows with
        result[i] = sum_j self[i, j] * vector[j].

        Raises:
            DimensionMismatchError: If the inner dimensions differ
        """
        if isinstance(other, MatrixLike):
            if self.columns != other.rows:
                raise DimensionMismatchError(
                    f"Matrix.multiply: left has {self.columns} columns, "
                    f"right has {other.rows} rows",
                    expected=self.columns,
                    actual=other.rows,
                )
            with ieee_errstate():
                return self._from_array(self._values @ other.to_numpy())
        check_vector_like(other, 'other')
        check_same_length(self.columns, len(other), 'Matrix.multiply')
        with ieee_errstate():
            return Vector._from_array(self._values @ other.to_numpy())

    def __add__(self, other: object) -> Matrix:
        if not isinstance(other, (MatrixLike, VectorLike)):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> Matrix:
        if not isinstance(other, (MatrixLike, VectorLike)):
            return NotImplemented
        return self.subtract(other)

    def __neg__(self) -> Matrix:
        return self.scale(-1.0)

    def __mul__(self, other: object) -> Matrix | Vector:
        if isinstance(other, numbers.Real):
            return self.scale(other)
        if isinstance(other, (MatrixLike, VectorLike)):
            return self.multiply(other)
        return NotImplemented

    def __rmul__(self, other: object) -> Matrix:
        if isinstance(other, numbers.Real):
            return self.scale(other)
        return NotImplemented

    def __matmul__(self, other: object) -> Matrix | Vector:
        if isinstance(other, (MatrixLike, VectorLike)):
            return self.multiply(other)
        return NotImplemented

    def __truediv__(self, other: object) -> Matrix:
        if not isinstance(other, numbers.Real):
            return NotImplemented
        constant = check_scalar(other, 'constant')
        return self.scale(reciprocal(constant, 'Matrix / constant'))

    # === Structural ===

    def transpose(self) -> Matrix:
        """[columns, rows] matrix with result[i, j] = self[j, i]."""
        return self._from_array(self._values.T.copy())

    @property
    def T(self) -> Matrix:
        return self.transpose()

    def row_to_vector(self, index: int) -> Vector:
        """Copy of row index as a vector of length columns."""
        index = check_index(index, self.rows, 'row')
        return Vector._from_array(self._values[index, :].copy())

    def column_to_vector(self, index: int) -> Vector:
        """Copy of column index as a vector of length rows."""
        index = check_index(index, self.columns, 'column')
        return Vector._from_array(self._values[:, index].copy())

    def minor(self, exclude_row: int, exclude_column: int) -> Matrix:
        """
        Submatrix with one row and one column deleted.

        Args:
            exclude_row: Row to delete
            exclude_column: Column to delete

        Returns:
            A (rows - 1) x (columns - 1) matrix

        Raises:
            IndexOutOfRangeError: If either index is out of bounds
            InvalidArgumentError: If the matrix has a single row or column
        """
        exclude_row = check_index(exclude_row, self.rows, 'exclude_row')
        exclude_column = check_index(exclude_column, self.columns, 'exclude_column')
        if self.rows == 1 or self.columns == 1:
            raise InvalidArgumentError(
                f"minor: a {self.rows}x{self.columns} matrix has no minor"
            )
        reduced = np.delete(self._values, exclude_row, axis=0)
        return self._from_array(np.delete(reduced, exclude_column, axis=1))

    def principal_minor(self, size: int) -> Matrix:
        """
        Top-left size x size submatrix.

        Raises:
            InvalidArgumentError: If size is not positive or exceeds either
                dimension
        """
        size = check_positive(size, 'size')
        if size > self.rows or size > self.columns:
            raise InvalidArgumentError(
                f"principal_minor: size {size} exceeds a {self.rows}x{self.columns} matrix"
            )
        return self._from_array(self._values[:size, :size].copy())

    def permute_rows(self, permutation: ArrayLike) -> Matrix:
        """
        Row i of the result is row permutation[i] of this matrix.

        Raises:
            IndexOutOfRangeError: If an entry is outside [0, rows)
            DimensionMismatchError: If len(permutation) != rows
            InvalidArgumentError: If an entry repeats
        """
        perm = check_permutation(permutation, self.rows, 'permutation')
        return self._from_array(self._values[perm, :])

    def permute_columns(self, permutation: ArrayLike) -> Matrix:
        """
        Column j of the result is column permutation[j] of this matrix.

        Raises:
            IndexOutOfRangeError: If an entry is outside [0, columns)
            DimensionMismatchError: If len(permutation) != columns
            InvalidArgumentError: If an entry repeats
        """
        perm = check_permutation(permutation, self.columns, 'permutation')
        return self._from_array(self._values[:, perm])

    # === In-place row/column maintenance ===

    def change_row(self, index: int, vector: VectorLike) -> None:
        """Overwrite row index with the entries of vector."""
        index = check_index(index, self.rows, 'row')
        check_vector_like(vector, 'vector')
        check_same_length(self.columns, len(vector), 'Matrix.change_row')
        self._values[index, :] = vector.to_numpy()

    def change_column(self, index: int, vector: VectorLike) -> None:
        """Overwrite column index with the entries of vector."""
        index = check_index(index, self.columns, 'column')
        check_vector_like(vector, 'vector')
        check_same_length(self.rows, len(vector), 'Matrix.change_column')
        self._values[:, index] = vector.to_numpy()

    def interchange_rows(self, first: int, second: int) -> None:
        first = check_index(first, self.rows, 'first')
        second = check_index(second, self.rows, 'second')
        self._values[[first, second], :] = self._values[[second, first], :]

    def interchange_columns(self, first: int, second: int) -> None:
        first = check_index(first, self.columns, 'first')
        second = check_index(second, self.columns, 'second')
        self._values[:, [first, second]] = self._values[:, [second, first]]

    def modify_rows(self, dest: int, source: int, constant: float) -> None:
        """
        Set row dest to constant * row source.

        This overwrites row dest; its previous contents are discarded.
        """
        dest = check_index(dest, self.rows, 'dest')
        source = check_index(source, self.rows, 'source')
        constant = check_scalar(constant, 'constant')
        with ieee_errstate():
            self._values[dest, :] = self._values[source, :] * constant

    def modify_columns(self, dest: int, source: int, constant: float) -> None:
        """
        Set column dest to constant * column source.

        This overwrites column dest; its previous contents are discarded.
        """
        dest = check_index(dest, self.columns, 'dest')
        source = check_index(source, self.columns, 'source')
        constant = check_scalar(constant, 'constant')
        with ieee_errstate():
            self._values[:, dest] = self._values[:, source] * constant

    def sum_rows(self, source: int, dest: int) -> None:
        self.modify_rows(dest, source, 1.0)

    def rest_rows(self, source: int, dest: int) -> None:
        self.modify_rows(dest, source, -1.0)

    def sum_columns(self, source: int, dest: int) -> None:
        self.modify_columns(dest, source, 1.0)

    def rest_columns(self, source: int, dest: int) -> None:
        self.modify_columns(dest, source, -1.0)
