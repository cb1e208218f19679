"""
Exception hierarchy for PyLinAlg.

All exceptions inherit from LinAlgError to allow catching any
library-specific error. Shape problems are DimensionErrors, numerical
preconditions (zero length, empty input) are NumericalErrors.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class LinAlgError(Exception):
    """Base exception for all PyLinAlg errors."""
    pass


class ValidationError(LinAlgError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class InvalidDimensionsError(ValidationError):
    """
    A constructor was asked for a non-positive number of rows or columns.

    Attributes:
        rows: Requested row count
        cols: Requested column count
    """

    def __init__(self, message: str, rows: int | None = None, cols: int | None = None):
        super().__init__(message)
        self.rows = rows
        self.cols = cols


class IndexOutOfRangeError(ValidationError, IndexError):
    """
    Row or column index outside the valid range.

    Attributes:
        index: The offending index
        size: Number of rows/columns available
        axis: 'row' or 'column'
    """

    def __init__(
        self,
        message: str,
        index: int | None = None,
        size: int | None = None,
        axis: str | None = None
    ):
        super().__init__(message)
        self.index = index
        self.size = size
        self.axis = axis


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when array shapes don't match expected dimensions or
    when multiple operands have inconsistent shapes.
    """
    pass


class _ShapePairError(DimensionError):
    """Shape error between two operands."""

    def __init__(
        self,
        message: str,
        left_shape: tuple[int, ...] | None = None,
        right_shape: tuple[int, ...] | None = None
    ):
        super().__init__(message)
        self.left_shape = left_shape
        self.right_shape = right_shape


class DimensionMismatchError(_ShapePairError):
    """
    Operands of an elementwise operation differ in shape.

    Attributes:
        left_shape: Shape of the first operand
        right_shape: Shape of the second operand
    """
    pass


class IncompatibleDimensionsError(_ShapePairError):
    """
    Inner dimensions disagree for matrix multiplication.

    Attributes:
        left_shape: Shape of the left factor
        right_shape: Shape of the right factor
    """
    pass


class InconsistentRowsError(DimensionError):
    """
    Rows of a matrix have different lengths.

    Attributes:
        row_lengths: Length of every row, in order
    """

    def __init__(self, message: str, row_lengths: tuple[int, ...] | None = None):
        super().__init__(message)
        self.row_lengths = row_lengths


class RowCountMismatchError(DimensionError):
    """
    Horizontal join of operands with different row counts.

    Attributes:
        left_rows: Row count of the left operand
        right_rows: Row count of the right operand
    """

    def __init__(
        self,
        message: str,
        left_rows: int | None = None,
        right_rows: int | None = None
    ):
        super().__init__(message)
        self.left_rows = left_rows
        self.right_rows = right_rows


class NonSquareMatrixError(DimensionError):
    """
    Operation requires a square matrix.

    Attributes:
        shape: (rows, cols) of the offending matrix
    """

    def __init__(self, message: str, shape: tuple[int, int] | None = None):
        super().__init__(message)
        self.shape = shape


class EmptyMatrixError(DimensionError):
    """
    Matrix has no rows or no columns.

    Attributes:
        shape: (rows, cols) of the offending matrix
    """

    def __init__(self, message: str, shape: tuple[int, int] | None = None):
        super().__init__(message)
        self.shape = shape


class NumericalError(LinAlgError):
    """
    Numerical computation failed.

    Base class for errors arising from undefined quantities during computation.
    """
    pass


class ZeroVectorError(NumericalError):
    """Normalization attempted on a vector of length zero."""
    pass


class EmptyVectorError(NumericalError):
    """A statistic such as the mean was requested of a zero-dimension vector."""
    pass
