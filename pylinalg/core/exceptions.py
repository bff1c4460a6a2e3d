"""
Exception hierarchy for PyLinalg.

All exceptions inherit from PyLinalgError to allow catching any
library-specific error. Module-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyLinalgError(Exception):
    """Base exception for all PyLinalg errors."""
    pass


class ValidationError(PyLinalgError):
    """
    Input validation failed.

    Raised for invalid arguments: negative sizes, non-square input to a
    square-only algorithm, or a rectangle that does not fit the matrix.
    """
    pass


class DimensionError(ValidationError):
    """
    Operand dimensions are inconsistent.

    Raised when two operands (matrices or vectors) do not have the sizes
    an operation requires, e.g. adding matrices of different shapes.
    """
    pass


class IndexOutOfRangeError(ValidationError, IndexError):
    """
    Row, column or element index outside the current bounds.

    Also an IndexError so that ordinary Python code catching IndexError
    keeps working.

    Attributes:
        index: The offending index
        bound: Exclusive upper bound that was violated
    """

    def __init__(
        self,
        message: str,
        index: int | None = None,
        bound: int | None = None,
    ):
        super().__init__(message)
        self.index = index
        self.bound = bound


class NumericalError(PyLinalgError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or nearly singular.

    Raised by the Gaussian solver when no usable pivot exists in a column.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        column: Column in which no pivot was found
        rank: Number of pivots found before failing
        expected_rank: Pivots required for a unique solution
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        column: int | None = None,
        rank: int | None = None,
        expected_rank: int | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.column = column
        self.rank = rank
        self.expected_rank = expected_rank
