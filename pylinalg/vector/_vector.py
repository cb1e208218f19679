"""
Vector: immutable fixed-length sequence of float64 values.

A Vector wraps a read-only 1D numpy array. Every operation in
pylinalg.vector returns a new Vector; nothing mutates its operands.
"""

from __future__ import annotations

from typing import Any, Iterator
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinalg.core.formatting import format_components
from pylinalg.core.validation import check_array, check_1d


class Vector:
    """
    Immutable vector of double precision reals.

    Construction:
        Vector([1, 2, 3])
        Vector(np.arange(3))
        Vector()                  # zero-dimension vector

    The dimension is len(v). Entries are exposed as floats through indexing
    and iteration; to_numpy() returns a writable copy.
    """
    __slots__ = ('_data',)

    # numpy defers mixed operators to the Vector methods
    __array_ufunc__ = None

    _data: NDArray[np.float64]

    def __init__(self, values: ArrayLike = ()):
        data = check_array(values, "values")
        check_1d(data, "values")
        data.setflags(write=False)
        object.__setattr__(self, '_data', data)

    @classmethod
    def _wrap(cls, data: NDArray[np.float64]) -> Vector:
        """
        Adopt an array produced internally, skipping validation.

        The array must own its memory or be a view of a read-only owner.
        """
        v = object.__new__(cls)
        data = np.ascontiguousarray(data, dtype=np.float64)
        data.setflags(write=False)
        object.__setattr__(v, '_data', data)
        return v

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def data(self) -> NDArray[np.float64]:
        """Read-only view of the entries; its write flag cannot be re-enabled."""
        return self._data.view()

    @property
    def dimension(self) -> int:
        """Number of entries."""
        return self._data.shape[0]

    def to_numpy(self) -> NDArray[np.float64]:
        """Writable copy of the entries."""
        return self._data.copy()

    def to_list(self) -> list[float]:
        return self._data.tolist()

    def __len__(self) -> int:
        return self._data.shape[0]

    def __getitem__(self, index: int) -> float:
        if not isinstance(index, (int, np.integer)):
            raise TypeError(
                f"Vector indices must be integers, got {type(index).__name__}"
            )
        return float(self._data[index])

    def __iter__(self) -> Iterator[float]:
        return iter(self._data.tolist())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return len(self) == len(other) and bool(np.array_equal(self._data, other._data))

    def __hash__(self) -> int:
        return hash(tuple(self._data.tolist()))

    def __str__(self) -> str:
        return format_components(self._data)

    def __repr__(self) -> str:
        return f"Vector({self._data.tolist()!r})"

    # Operators delegate to the free functions in pylinalg.vector.operations

    def __add__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        from pylinalg.vector.operations import add
        return add(self, other)

    def __sub__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        from pylinalg.vector.operations import subtract
        return subtract(self, other)

    def __mul__(self, other: Vector | float) -> Vector:
        from pylinalg.vector.operations import multiply, scalar_multiply
        if isinstance(other, Vector):
            return multiply(self, other)
        if isinstance(other, (int, float, np.integer, np.floating)):
            return scalar_multiply(float(other), self)
        return NotImplemented

    def __rmul__(self, other: float) -> Vector:
        if isinstance(other, (int, float, np.integer, np.floating)):
            from pylinalg.vector.operations import scalar_multiply
            return scalar_multiply(float(other), self)
        return NotImplemented

    def __neg__(self) -> Vector:
        from pylinalg.vector.operations import scalar_multiply
        return scalar_multiply(-1.0, self)
