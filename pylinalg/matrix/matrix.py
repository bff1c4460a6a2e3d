"""
Matrix: rectangular table of real numbers.

Entries are addressed as (x, y) with x = column and y = row. Storage is a
private float64 numpy array of shape (height, width). Rows and columns
handed out by get_row()/get_column() are independent Vector copies.

Ownership: data given to from_rows() is copied, never aliased. Every
mutating method validates its arguments before touching storage, so a
failed call leaves the matrix unchanged.

Bounds policy: get() and set() are bounds-checked and raise
IndexOutOfRangeError; negative indices never wrap around.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinalg.core.validation import (
    check_array,
    check_ndim,
    check_index,
    check_non_negative_size,
    check_same_length,
    check_same_shape,
    check_rectangle,
    check_scalar,
)
from pylinalg.core.exceptions import DimensionError
from pylinalg.matrix.vector import Vector


class Matrix:
    """
    Mutable W x H matrix of floats.

    Construction:
        Matrix(width, height)              # zero matrix
        Matrix.from_rows([[1, 2], [3, 4]]) # row-major data, copied
        Matrix.identity(n)
    """

    __slots__ = ('_numbers',)

    def __init__(self, width: int, height: int):
        check_non_negative_size(width, 'width')
        check_non_negative_size(height, 'height')
        self._numbers = np.zeros((int(height), int(width)), dtype=np.float64)

    @classmethod
    def _wrap(cls, numbers: NDArray[np.floating[Any]]) -> Matrix:
        """Adopt an already-owned (height, width) float64 array without copying."""
        matrix = cls.__new__(cls)
        matrix._numbers = numbers
        return matrix

    @classmethod
    def from_rows(cls, rows: ArrayLike) -> Matrix:
        """
        Build a matrix from row-major data.

        Empty input yields the 0 x 0 matrix.

        Raises:
            ValidationError: If rows are ragged or non-numeric
            DimensionError: If data is not 2D
        """
        numbers = check_array(rows, 'rows')
        if numbers.ndim == 1 and numbers.size == 0:
            return cls(0, 0)
        check_ndim(numbers, 2, 'rows')
        return cls._wrap(numbers)

    @classmethod
    def identity(cls, size: int) -> Matrix:
        check_non_negative_size(size, 'size')
        return cls._wrap(np.eye(int(size), dtype=np.float64))

    # === Shape ===

    @property
    def width(self) -> int:
        return self._numbers.shape[1]

    @property
    def height(self) -> int:
        return self._numbers.shape[0]

    @property
    def shape(self) -> tuple[int, int]:
        """(height, width), numpy order."""
        return (self.height, self.width)

    def is_square(self) -> bool:
        return self.width == self.height

    # === Element access ===

    def get(self, x: int, y: int) -> float:
        check_index(x, self.width, 'x')
        check_index(y, self.height, 'y')
        return float(self._numbers[y, x])

    def set(self, x: int, y: int, value: float) -> None:
        check_index(x, self.width, 'x')
        check_index(y, self.height, 'y')
        self._numbers[y, x] = check_scalar(value, 'value')

    def get_row(self, index: int) -> Vector:
        check_index(index, self.height, 'row')
        return Vector._wrap(self._numbers[index, :].copy())

    def get_column(self, index: int) -> Vector:
        check_index(index, self.width, 'column')
        return Vector._wrap(self._numbers[:, index].copy())

    # === Arithmetic ===

    def scale(self, factor: float) -> None:
        self._numbers *= check_scalar(factor, 'factor')

    def scale_row(self, index: int, factor: float) -> None:
        check_index(index, self.height, 'row')
        self._numbers[index, :] *= check_scalar(factor, 'factor')

    def scale_column(self, index: int, factor: float) -> None:
        check_index(index, self.width, 'column')
        self._numbers[:, index] *= check_scalar(factor, 'factor')

    def add(self, other: Matrix) -> None:
        """Element-wise sum, in place. Shapes must be identical."""
        check_same_shape(other.shape, self.shape, 'other')
        self._numbers += other._numbers

    def add_to_row(self, index: int, vector: Vector) -> None:
        check_index(index, self.height, 'row')
        check_same_length(vector.size(), self.width, 'vector')
        self._numbers[index, :] += vector._values

    def add_to_column(self, index: int, vector: Vector) -> None:
        check_index(index, self.width, 'column')
        check_same_length(vector.size(), self.height, 'vector')
        self._numbers[:, index] += vector._values

    def multiply(self, other: Matrix) -> Matrix:
        """
        Matrix product self * other.

        Entry (x, y) of the result is row y of self dotted with column x
        of other. The result is other.width wide and self.height tall.

        Raises:
            DimensionError: If other.height != self.width
        """
        if other.height != self.width:
            raise DimensionError(
                f"other: must be as tall as this matrix is wide, "
                f"expected height {self.width}, got {other.height}"
            )
        return Matrix._wrap(self._numbers @ other._numbers)

    # === Structure ===

    def resize(self, width: int, height: int) -> None:
        """
        Change the size in place.

        The overlapping top-left region is kept, new entries are zero,
        entries outside the new bounds are dropped.
        """
        check_non_negative_size(width, 'width')
        check_non_negative_size(height, 'height')
        numbers = np.zeros((int(height), int(width)), dtype=np.float64)
        keep_h = min(height, self.height)
        keep_w = min(width, self.width)
        numbers[:keep_h, :keep_w] = self._numbers[:keep_h, :keep_w]
        self._numbers = numbers

    def copy(self, x: int, y: int, width: int, height: int) -> Matrix:
        """
        Extract the width x height sub-matrix whose top-left corner is (x, y).

        Raises:
            ValidationError: If the area is not fully inside this matrix
        """
        check_rectangle(x, y, width, height, (self.width, self.height), 'area')
        return Matrix._wrap(self._numbers[y:y + height, x:x + width].copy())

    def clone(self) -> Matrix:
        return self.copy(0, 0, self.width, self.height)

    def paste(self, other: Matrix, x: int, y: int) -> None:
        """
        Overwrite the region at offset (x, y) with other's entries.

        Raises:
            ValidationError: If other does not fit at (x, y)
        """
        check_rectangle(x, y, other.width, other.height, (self.width, self.height), 'other')
        self._numbers[y:y + other.height, x:x + other.width] = other._numbers

    def paste_row(self, index: int, vector: Vector) -> None:
        check_index(index, self.height, 'row')
        check_same_length(vector.size(), self.width, 'vector')
        self._numbers[index, :] = vector._values

    def paste_column(self, index: int, vector: Vector) -> None:
        check_index(index, self.width, 'column')
        check_same_length(vector.size(), self.height, 'vector')
        self._numbers[:, index] = vector._values

    def concatenate(self, other: Matrix) -> None:
        """
        Append other to the right of this matrix, in place.

        Raises:
            DimensionError: If heights differ
        """
        if other.height != self.height:
            raise DimensionError(
                f"other: heights must match to concatenate, "
                f"expected {self.height}, got {other.height}"
            )
        if other is self:
            other = other.clone()
        old_width = self.width
        self.resize(old_width + other.width, self.height)
        self.paste(other, old_width, 0)

    def remove_row(self, index: int) -> None:
        check_index(index, self.height, 'row')
        self._numbers = np.delete(self._numbers, index, axis=0)

    def remove_column(self, index: int) -> None:
        check_index(index, self.width, 'column')
        self._numbers = np.delete(self._numbers, index, axis=1)

    # === Conversion / comparison ===

    def to_numpy(self) -> NDArray[np.floating[Any]]:
        """Copy of the entries as a (height, width) float64 array."""
        return self._numbers.copy()

    def allclose(self, other: Matrix, rtol: float = 1e-10, atol: float = 1e-12) -> bool:
        """True if shapes match and all entries agree within tolerance."""
        if other.shape != self.shape:
            return False
        return bool(np.allclose(self._numbers, other._numbers, rtol=rtol, atol=atol))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return bool(np.array_equal(self._numbers, other._numbers))

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"Matrix(width={self.width}, height={self.height}, rows={self._numbers.tolist()})"
