"""
Input validation utilities for PivotMath.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray to float64 on array-likes)
    - No default handling of edge cases
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import math
import numbers

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pivotmath.core.exceptions import (
    DimensionMismatchError,
    IndexOutOfRangeError,
    InvalidArgumentError,
)
from pivotmath.core.protocols import MatrixLike, VectorLike


def check_values(
    values: ArrayLike,
    name: str,
) -> NDArray[np.float64]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts any array-like of real numbers. Rejects inputs that result in
    object dtype (ragged or mixed data), non-numeric dtypes and complex
    numbers. The result is always a fresh array, never a view of the input.

    Args:
        values: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with dtype float64

    Raises:
        InvalidArgumentError: If input cannot be converted to a real array
    """
    try:
        result = np.asarray(values)
    except (ValueError, TypeError) as e:
        raise InvalidArgumentError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise InvalidArgumentError(
            f"{name}: converted to object dtype, indicating ragged or non-numeric data"
        )

    if not np.issubdtype(result.dtype, np.number):
        raise InvalidArgumentError(
            f"{name}: non-numeric dtype {result.dtype}, expected real numbers"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise InvalidArgumentError(
            f"{name}: complex dtype {result.dtype}, expected real numbers"
        )

    return np.array(result, dtype=np.float64, copy=True)


def check_ndim(array: NDArray[Any], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Raises:
        DimensionMismatchError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionMismatchError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}",
            expected=ndim,
            actual=array.ndim,
        )


def check_positive(value: int, name: str) -> int:
    """
    Verify value is a strictly positive integer.

    Args:
        value: Length, size or dimension to check
        name: Parameter name for error messages

    Returns:
        The value as a plain int

    Raises:
        InvalidArgumentError: If value is not an integer or is <= 0
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidArgumentError(
            f"{name}: expected a positive integer, got {type(value).__name__}"
        )
    if value <= 0:
        raise InvalidArgumentError(f"{name}: must be positive, got {value}")
    return int(value)


def check_index(index: int, bound: int, name: str) -> int:
    """
    Verify index lies in [0, bound).

    Negative indices are rejected rather than wrapped.

    Args:
        index: Index to check
        bound: Exclusive upper bound
        name: Parameter name for error messages

    Returns:
        The index as a plain int

    Raises:
        TypeError: If index is not an integer
        IndexOutOfRangeError: If index is outside [0, bound)
    """
    if isinstance(index, bool) or not isinstance(index, numbers.Integral):
        raise TypeError(
            f"{name}: indices must be integers, got {type(index).__name__}"
        )
    if not 0 <= index < bound:
        raise IndexOutOfRangeError(
            f"{name}: index {index} out of range [0, {bound})",
            index=int(index),
            bound=bound,
        )
    return int(index)


def check_scalar(value: Any, name: str) -> float:
    """
    Verify value is a real scalar and convert it to float.

    Exact reals beyond the float64 range (large ints, Fractions) become
    +inf or -inf, the value float64 arithmetic would overflow to.

    Raises:
        InvalidArgumentError: If value is not a real number
    """
    if not isinstance(value, numbers.Real):
        raise InvalidArgumentError(
            f"{name}: expected a real scalar, got {type(value).__name__}"
        )
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def check_vector_like(value: Any, name: str) -> None:
    """
    Verify value satisfies the VectorLike protocol.

    Raises:
        TypeError: If value is not vector-like
    """
    if not isinstance(value, VectorLike):
        raise TypeError(
            f"{name}: expected a Vector, got {type(value).__name__}"
        )


def check_matrix_like(value: Any, name: str) -> None:
    """
    Verify value satisfies the MatrixLike protocol.

    Raises:
        TypeError: If value is not matrix-like
    """
    if not isinstance(value, MatrixLike):
        raise TypeError(
            f"{name}: expected a Matrix, got {type(value).__name__}"
        )


def check_same_length(expected: int, actual: int, name: str) -> None:
    """
    Verify two lengths agree.

    Args:
        expected: Length required by the receiver
        actual: Length of the supplied operand
        name: Description of the operation for error messages

    Raises:
        DimensionMismatchError: If lengths differ
    """
    if expected != actual:
        raise DimensionMismatchError(
            f"{name}: length mismatch, expected {expected}, got {actual}",
            expected=expected,
            actual=actual,
        )


def check_same_shape(
    expected: tuple[int, int],
    actual: tuple[int, int],
    name: str,
) -> None:
    """
    Verify two matrix shapes agree.

    Raises:
        DimensionMismatchError: If shapes differ
    """
    if tuple(expected) != tuple(actual):
        raise DimensionMismatchError(
            f"{name}: shape mismatch, expected {tuple(expected)}, got {tuple(actual)}",
            expected=tuple(expected),
            actual=tuple(actual),
        )


def check_permutation(
    permutation: ArrayLike,
    size: int,
    name: str,
) -> NDArray[np.intp]:
    """
    Verify permutation is a rearrangement of range(size).

    Args:
        permutation: Sequence of indices
        size: Number of rows or columns being permuted
        name: Parameter name for error messages

    Returns:
        The permutation as an integer numpy array

    Raises:
        InvalidArgumentError: If entries are not integers or repeat
        DimensionMismatchError: If the permutation has the wrong length
        IndexOutOfRangeError: If an entry is outside [0, size)
    """
    perm = np.asarray(permutation)
    if perm.ndim != 1:
        raise DimensionMismatchError(
            f"{name}: expected a flat sequence of indices, got shape {perm.shape}",
            expected=1,
            actual=perm.ndim,
        )
    if perm.size > 0 and not np.issubdtype(perm.dtype, np.integer):
        raise InvalidArgumentError(
            f"{name}: entries must be integers, got dtype {perm.dtype}"
        )
    check_same_length(size, perm.size, name)

    out_of_range = np.where((perm < 0) | (perm >= size))[0]
    if len(out_of_range) > 0:
        bad = int(perm[out_of_range[0]])
        raise IndexOutOfRangeError(
            f"{name}: entry {bad} at position {int(out_of_range[0])} "
            f"out of range [0, {size})",
            index=bad,
            bound=size,
        )

    if len(np.unique(perm)) != size:
        raise InvalidArgumentError(
            f"{name}: {perm.tolist()} repeats indices, not a permutation"
        )

    return perm.astype(np.intp)
