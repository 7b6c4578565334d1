"""
Vector: fixed-length sequence of float64 scalars.

Every operation except index assignment returns a fresh Vector (or Matrix,
or float) and leaves its operands untouched. Storage is a private float64
numpy array owned exclusively by the instance.

Text form:
    str(Vector([1, 2.5, -3]))  ->  "(1.0, 2.5, -3.0)"
    Vector.parse("(1.0, 2.5, -3.0)") reverses it exactly.
"""

from __future__ import annotations

import numbers
from typing import Any, Iterator, TYPE_CHECKING

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pivotmath.core.exceptions import (
    DimensionMismatchError,
    IndexOutOfRangeError,
    InvalidArgumentError,
    ParseError,
)
from pivotmath.core.precision import ieee_errstate, is_close, reciprocal
from pivotmath.core.protocols import MatrixLike, VectorLike
from pivotmath.core.tolerances import DEFAULT, ToleranceTier
from pivotmath.core.validation import (
    check_index,
    check_ndim,
    check_positive,
    check_same_length,
    check_scalar,
    check_values,
    check_vector_like,
)

if TYPE_CHECKING:
    from pivotmath.basis.matrix import Matrix


class Vector:
    """
    Dense real vector of fixed length.

    Construction:
        Vector([1.0, 2.0, 3.0])      from explicit values
        Vector.null(3)               three zeros
        Vector.canonical(1, 3)       (0.0, 1.0, 0.0)
        Vector.parse("(1.0, 2.0)")   from text

    Operators:
        u + v, u - v, -v             element-wise
        c * v, v * c, v / c          scaling
        u * v, u @ v                 dot product (float)
        v * M, v @ M                 row vector times matrix
    """

    __slots__ = ('_values',)

    # Numpy defers binary operators to our reflected methods instead of
    # broadcasting over the object.
    __array_ufunc__ = None

    def __init__(self, values: ArrayLike):
        """
        Build a vector holding a copy of values.

        Args:
            values: 1D array-like of real numbers, at least one entry

        Raises:
            InvalidArgumentError: If values is empty or not real-valued
            DimensionMismatchError: If values is not one-dimensional
        """
        array = check_values(values, 'values')
        check_ndim(array, 1, 'values')
        if array.size == 0:
            raise InvalidArgumentError("values: a vector needs at least one entry")
        self._values = array

    @classmethod
    def _from_array(cls, array: NDArray[np.float64]) -> Vector:
        """Wrap an already validated 1D float64 array without copying."""
        vector = cls.__new__(cls)
        vector._values = array
        return vector

    # === Factories ===

    @classmethod
    def null(cls, length: int) -> Vector:
        """
        Zero vector of the given length.

        Raises:
            InvalidArgumentError: If length <= 0
        """
        length = check_positive(length, 'length')
        return cls._from_array(np.zeros(length, dtype=np.float64))

    @classmethod
    def canonical(cls, index: int, length: int) -> Vector:
        """
        Canonical basis vector e_index of the given length.

        Raises:
            InvalidArgumentError: If length <= 0
            IndexOutOfRangeError: If index is outside [0, length)
        """
        length = check_positive(length, 'length')
        index = check_index(index, length, 'index')
        result = np.zeros(length, dtype=np.float64)
        result[index] = 1.0
        return cls._from_array(result)

    @classmethod
    def parse(cls, text: str) -> Vector:
        """
        Parse the text form produced by str(vector).

        Whitespace around the parentheses and around each component is
        ignored. Components are read with float(), so 'inf' and 'nan'
        round-trip.

        Args:
            text: String of the form "(v0, v1, ..., vn-1)"

        Returns:
            The parsed vector

        Raises:
            ParseError: If parentheses are missing, a component is empty,
                or a component is not a plain ASCII number
        """
        if not isinstance(text, str):
            raise ParseError(
                f"text: expected str, got {type(text).__name__}", text=None
            )
        stripped = text.strip()
        if len(stripped) < 2 or stripped[0] != '(' or stripped[-1] != ')':
            raise ParseError(
                f"text: {text!r} must be wrapped in parentheses", text=text
            )

        values = []
        for position, token in enumerate(stripped[1:-1].split(',')):
            token = token.strip()
            if not token:
                raise ParseError(
                    f"text: empty component at position {position} in {text!r}",
                    text=text,
                )
            # float() also takes digit separators and non-ASCII digits,
            # neither of which str(vector) produces.
            if '_' in token or not token.isascii():
                raise ParseError(
                    f"text: component {token!r} at position {position} is not a number",
                    text=text,
                )
            try:
                values.append(float(token))
            except ValueError as e:
                raise ParseError(
                    f"text: component {token!r} at position {position} is not a number",
                    text=text,
                ) from e

        return cls._from_array(np.array(values, dtype=np.float64))

    # === Shape and element access ===

    @property
    def length(self) -> int:
        """Number of entries."""
        return self._values.shape[0]

    def __len__(self) -> int:
        return self._values.shape[0]

    def __getitem__(self, index: int) -> float:
        index = check_index(index, self.length, 'index')
        return float(self._values[index])

    def __setitem__(self, index: int, value: float) -> None:
        index = check_index(index, self.length, 'index')
        self._values[index] = check_scalar(value, 'value')

    def __iter__(self) -> Iterator[float]:
        return iter(self._values.tolist())

    def to_numpy(self) -> NDArray[np.float64]:
        """Independent float64 copy of the entries."""
        return self._values.copy()

    def __array__(self, dtype: Any = None, copy: bool | None = None) -> NDArray[Any]:
        if dtype is None:
            return self._values.copy()
        return self._values.astype(dtype)

    # === Value semantics ===

    def copy(self) -> Vector:
        """Deep copy sharing no storage with this vector."""
        return self._from_array(self._values.copy())

    def __copy__(self) -> Vector:
        return self.copy()

    def __deepcopy__(self, memo: dict[int, Any]) -> Vector:
        return self.copy()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return bool(np.array_equal(self._values, other._values))

    __hash__ = None  # mutable

    def allclose(self, other: VectorLike, tolerance: ToleranceTier = DEFAULT) -> bool:
        """
        Element-wise closeness within a tolerance tier.

        Vectors of different length are never close.
        """
        check_vector_like(other, 'other')
        if len(other) != self.length:
            return False
        return bool(np.all(is_close(self._values, other.to_numpy(),
                                    tolerance.rtol, tolerance.atol)))

    def __str__(self) -> str:
        return '(' + ', '.join(str(value) for value in self._values.tolist()) + ')'

    def __repr__(self) -> str:
        return f"Vector({self._values.tolist()!r})"

    # === Arithmetic ===

    def scale(self, constant: float) -> Vector:
        """Multiply every entry by constant."""
        constant = check_scalar(constant, 'constant')
        with ieee_errstate():
            return self._from_array(self._values * constant)

    def divide(self, constant: float) -> Vector:
        """
        Divide every entry by constant, computed as scaling by 1/constant.

        Dividing by zero yields inf/nan entries and a NumericalWarning.
        """
        constant = check_scalar(constant, 'constant')
        return self.scale(reciprocal(constant, 'Vector.divide'))

    def add(self, other: VectorLike) -> Vector:
        """
        Element-wise sum.

        Raises:
            TypeError: If other is not a vector
            DimensionMismatchError: If lengths differ
        """
        check_vector_like(other, 'other')
        check_same_length(self.length, len(other), 'Vector.add')
        with ieee_errstate():
            return self._from_array(self._values + other.to_numpy())

    def subtract(self, other: VectorLike) -> Vector:
        """
        Element-wise difference.

        Raises:
            TypeError: If other is not a vector
            DimensionMismatchError: If lengths differ
        """
        check_vector_like(other, 'other')
        check_same_length(self.length, len(other), 'Vector.subtract')
        with ieee_errstate():
            return self._from_array(self._values - other.to_numpy())

    def dot(self, other: VectorLike) -> float:
        """
        Inner product: sum of element-wise products.

        Raises:
            TypeError: If other is not a vector
            DimensionMismatchError: If lengths differ
        """
        check_vector_like(other, 'other')
        check_same_length(self.length, len(other), 'Vector.dot')
        with ieee_errstate():
            return float(np.dot(self._values, other.to_numpy()))

    def plus_mult(self, constant: float, other: VectorLike) -> Vector:
        """Return self + constant * other."""
        constant = check_scalar(constant, 'constant')
        check_vector_like(other, 'other')
        check_same_length(self.length, len(other), 'Vector.plus_mult')
        with ieee_errstate():
            return self._from_array(self._values + constant * other.to_numpy())

    def outer(self, other: VectorLike) -> Matrix:
        """
        Outer product, a [self.length, other.length] matrix with entry
        [i, j] = self[i] * other[j].
        """
        from pivotmath.basis.matrix import Matrix

        check_vector_like(other, 'other')
        with ieee_errstate():
            return Matrix._from_array(np.outer(self._values, other.to_numpy()))

    def _times_matrix(self, matrix: MatrixLike) -> Vector:
        if matrix.rows != self.length:
            raise DimensionMismatchError(
                f"Vector * Matrix: matrix has {matrix.rows} rows, "
                f"vector has length {self.length}",
                expected=self.length,
                actual=matrix.rows,
            )
        with ieee_errstate():
            return self._from_array(self._values @ matrix.to_numpy())

    def __add__(self, other: object) -> Vector:
        if not isinstance(other, VectorLike):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> Vector:
        if not isinstance(other, VectorLike):
            return NotImplemented
        return self.subtract(other)

    def __neg__(self) -> Vector:
        return self.scale(-1.0)

    def __mul__(self, other: object) -> Vector | float:
        if isinstance(other, numbers.Real):
            return self.scale(other)
        if isinstance(other, VectorLike):
            return self.dot(other)
        if isinstance(other, MatrixLike):
            return self._times_matrix(other)
        return NotImplemented

    def __rmul__(self, other: object) -> Vector:
        if isinstance(other, numbers.Real):
            return self.scale(other)
        return NotImplemented

    def __matmul__(self, other: object) -> Vector | float:
        if isinstance(other, VectorLike):
            return self.dot(other)
        if isinstance(other, MatrixLike):
            return self._times_matrix(other)
        return NotImplemented

    def __truediv__(self, other: object) -> Vector:
        if not isinstance(other, numbers.Real):
            return NotImplemented
        constant = check_scalar(other, 'constant')
        return self.scale(reciprocal(constant, 'Vector / constant'))

    # === Structural ===

    def to_matrix(self, horizontal: bool) -> Matrix:
        """
        Embed as a 1 x n (horizontal) or n x 1 (vertical) matrix.
        """
        from pivotmath.basis.matrix import Matrix

        if horizontal:
            return Matrix._from_array(self._values.reshape(1, -1).copy())
        return Matrix._from_array(self._values.reshape(-1, 1).copy())

    def concat(self, other: VectorLike) -> Vector:
        """All entries of self followed by all entries of other."""
        check_vector_like(other, 'other')
        return self._from_array(np.concatenate([self._values, other.to_numpy()]))

    def sub_vector(self, start: int, stop: int) -> Vector:
        """
        Inclusive slice [start, stop] as a new vector of length
        stop - start + 1.

        Raises:
            IndexOutOfRangeError: If a bound is outside [0, length) or
                start > stop
        """
        start = check_index(start, self.length, 'start')
        stop = check_index(stop, self.length, 'stop')
        if start > stop:
            raise IndexOutOfRangeError(
                f"sub_vector: start {start} is after stop {stop}",
                index=start,
                bound=stop + 1,
            )
        return self._from_array(self._values[start:stop + 1].copy())
