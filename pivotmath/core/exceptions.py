"""
Exception hierarchy for PivotMath.

All exceptions inherit from PivotMathError to allow catching any
library-specific error. Each one also inherits from the closest builtin
(ValueError, IndexError) so generic Python handlers keep working.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PivotMathError(Exception):
    """Base exception for all PivotMath errors."""
    pass


class InvalidArgumentError(PivotMathError, ValueError):
    """
    An argument is outside its valid domain.

    Raised for non-positive lengths or sizes, an invalid principal minor
    size, a permutation with repeated entries, or non-numeric values.
    """
    pass


class IndexOutOfRangeError(PivotMathError, IndexError):
    """
    An index falls outside the valid range.

    Raised for vector positions, matrix rows and columns, sub-vector
    bounds and permutation entries.

    Attributes:
        index: The offending index, if known
        bound: Exclusive upper bound of the valid range [0, bound)
    """

    def __init__(
        self,
        message: str,
        index: int | None = None,
        bound: int | None = None
    ):
        super().__init__(message)
        self.index = index
        self.bound = bound


class DimensionMismatchError(PivotMathError, ValueError):
    """
    Operand shapes or lengths are incompatible.

    Attributes:
        expected: Expected length or shape, if known
        actual: Actual length or shape received, if known
    """

    def __init__(
        self,
        message: str,
        expected: int | tuple[int, ...] | None = None,
        actual: int | tuple[int, ...] | None = None
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class ParseError(PivotMathError, ValueError):
    """
    Textual input could not be parsed.

    Attributes:
        text: The input that failed to parse
    """

    def __init__(self, message: str, text: str | None = None):
        super().__init__(message)
        self.text = text


class NumericalWarning(UserWarning):
    """
    Non-fatal floating-point condition.

    Emitted when an operation deliberately produces IEEE special values
    (e.g. dividing by zero yields inf or nan instead of raising).
    """
    pass
