"""
Matrix: an ordered list of Vector rows.

Matrices are logically immutable. The single exception is
Matrix.swap_in_place(), which exchanges two rows of the receiver so that
sort-style algorithms can reorder rows without copying. Every other
operation returns a new Matrix.

Thread safety: no operation takes a lock. Concurrent readers are safe;
callers that swap rows of a matrix shared between threads must
synchronize externally.
"""

from __future__ import annotations

from typing import Any, Iterable, Iterator
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinalg.core.exceptions import EmptyMatrixError, InconsistentRowsError
from pylinalg.core.formatting import format_rows
from pylinalg.core.validation import check_array, check_2d, check_index
from pylinalg.vector import Vector
from pylinalg.vector import less as vector_less


class Matrix:
    """
    Dense matrix stored row by row.

    Construction:
        Matrix([[1, 2], [3, 4]])        # rows stored as given, unchecked
        Matrix.from_rows(rows)          # rows must all have the same length
        Matrix.from_array(np.eye(3))    # non-empty 2D array-like

    A Matrix built directly from ragged rows can exist; every operation
    that reads its dimensions raises InconsistentRowsError.
    """
    __slots__ = ('_rows',)

    __array_ufunc__ = None

    _rows: list[Vector]

    def __init__(self, rows: Iterable[Vector | ArrayLike] = ()):
        self._rows = [r if isinstance(r, Vector) else Vector(r) for r in rows]

    @classmethod
    def from_rows(cls, rows: Iterable[Vector | ArrayLike]) -> Matrix:
        """Build a Matrix and verify that every row has the same length."""
        A = cls(rows)
        A.dimensions()
        return A

    @classmethod
    def from_array(cls, array: ArrayLike) -> Matrix:
        """
        Build a Matrix from a 2D array-like.

        Raises
        ------
        ValidationError
            If the input is not numeric.
        DimensionError
            If the input is not 2D.
        EmptyMatrixError
            If the input has no rows or no columns.
        """
        data = check_array(array, "array")
        check_2d(data, "array")
        if data.size == 0:
            raise EmptyMatrixError(
                f"array: matrix must have at least one row and one column, "
                f"got shape {data.shape}",
                shape=tuple(data.shape),
            )
        return cls._wrap(data)

    @classmethod
    def _wrap(cls, data: NDArray[np.float64]) -> Matrix:
        """Adopt a 2D array produced internally, skipping validation."""
        A = object.__new__(cls)
        data = np.asarray(data, dtype=np.float64)
        # rows are views; the owner must be read-only before slicing
        data.setflags(write=False)
        A._rows = [Vector._wrap(row) for row in data]
        return A

    # Dimensions

    def dimensions(self) -> tuple[int, int]:
        """
        (rows, columns) of the matrix.

        A matrix without rows has dimensions (0, 0).

        Raises
        ------
        InconsistentRowsError
            If the rows differ in length.
        """
        m = len(self._rows)
        if m == 0:
            return 0, 0
        n = len(self._rows[0])
        if any(len(row) != n for row in self._rows):
            lengths = tuple(len(row) for row in self._rows)
            raise InconsistentRowsError(
                f"inconsistent matrix dimensions: row lengths {list(lengths)}",
                row_lengths=lengths,
            )
        return m, n

    def _checked_shape(self, name: str) -> tuple[int, int]:
        """Dimensions of a consistent, non-empty matrix."""
        m, n = self.dimensions()
        if m < 1 or n < 1:
            raise EmptyMatrixError(
                f"{name}: matrix must have at least one row and one column, got {m}x{n}",
                shape=(m, n),
            )
        return m, n

    @property
    def shape(self) -> tuple[int, int]:
        return self.dimensions()

    @property
    def row_count(self) -> int:
        """Number of rows, without checking row consistency."""
        return len(self._rows)

    @property
    def rows(self) -> tuple[Vector, ...]:
        return tuple(self._rows)

    def to_numpy(self) -> NDArray[np.float64]:
        """Writable 2D copy of the entries."""
        m, n = self.dimensions()
        if m == 0:
            return np.empty((0, 0), dtype=np.float64)
        return np.vstack([row.data for row in self._rows])

    def to_list(self) -> list[list[float]]:
        return [row.to_list() for row in self._rows]

    # Sortable collection of rows

    def less(self, i: int, j: int) -> bool:
        """Row i strictly dominates row j from below in every component."""
        check_index(i, len(self._rows), "row")
        check_index(j, len(self._rows), "row")
        return vector_less(self._rows[i], self._rows[j])

    def swap_in_place(self, i: int, j: int) -> None:
        """
        Exchange rows i and j of this matrix in place.

        This is the only mutating operation on Matrix. It is not
        synchronized; see the module docstring.

        Raises
        ------
        IndexOutOfRangeError
            If i or j is not a valid row index.
        """
        check_index(i, len(self._rows), "row")
        check_index(j, len(self._rows), "row")
        self._rows[i], self._rows[j] = self._rows[j], self._rows[i]

    # Python protocol

    def __len__(self) -> int:
        return len(self._rows)

    def __getitem__(self, index: int | tuple[int, int]) -> Any:
        if isinstance(index, tuple):
            i, j = index
            return self._rows[i][j]
        return self._rows[index]

    def __iter__(self) -> Iterator[Vector]:
        return iter(list(self._rows))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        from pylinalg.matrix.operations import equals
        return equals(self, other)

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return format_rows(row.data for row in self._rows)

    def __repr__(self) -> str:
        return f"Matrix({self.to_list()!r})"

    def __add__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        from pylinalg.matrix.operations import add
        return add(self, other)

    def __sub__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        from pylinalg.matrix.operations import subtract
        return subtract(self, other)

    def __matmul__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        from pylinalg.matrix.operations import multiply
        return multiply(self, other)

    @property
    def T(self) -> Matrix:
        from pylinalg.matrix.operations import transpose
        return transpose(self)
