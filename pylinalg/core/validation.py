"""
Input validation utilities for PyLinalg.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently clamping
indices or padding operands.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pylinalg.core.exceptions import (
    ValidationError,
    DimensionError,
    IndexOutOfRangeError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    Always returns a fresh array, so the caller's data is never aliased.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with float64 dtype

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.array(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating ragged rows or non-numeric data"
        )

    if result.size > 0 and not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: complex dtype {result.dtype} is not supported, expected real data"
        )

    return result.astype(np.float64, copy=False)


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_scalar(value: Any, name: str) -> float:
    """
    Convert a single entry to float.

    Returns:
        The value as a Python float

    Raises:
        ValidationError: If value is not a real number
    """
    if isinstance(value, (complex, np.complexfloating)):
        raise ValidationError(f"{name}: expected a real number, got complex {value!r}")
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise ValidationError(
            f"{name}: expected a real number, got {type(value).__name__} {value!r}"
        ) from e


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_non_negative_size(value: int, name: str) -> None:
    """
    Verify a size argument is a non-negative integer.

    Raises:
        ValidationError: If value is negative or not an integer
    """
    _check_int(value, name)
    if value < 0:
        raise ValidationError(f"{name}: must not be negative, got {value}")


def _check_int(value: Any, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise ValidationError(f"{name}: expected int, got {type(value).__name__}")


def check_index(index: int, bound: int, name: str) -> None:
    """
    Verify 0 <= index < bound.

    Negative indices are rejected rather than wrapped around.

    Raises:
        IndexOutOfRangeError: If index is outside [0, bound)
    """
    if isinstance(index, bool) or not isinstance(index, (int, np.integer)):
        raise IndexOutOfRangeError(
            f"{name}: expected int index, got {type(index).__name__}",
            index=None,
            bound=bound,
        )
    if index < 0 or index >= bound:
        raise IndexOutOfRangeError(
            f"{name}: index {index} out of range [0, {bound})",
            index=int(index),
            bound=bound,
        )


def check_same_length(actual: int, expected: int, name: str) -> None:
    """
    Verify an operand has the expected length.

    Raises:
        DimensionError: If lengths differ
    """
    if actual != expected:
        raise DimensionError(
            f"{name}: size mismatch, expected {expected}, got {actual}"
        )


def check_same_shape(
    actual: tuple[int, int],
    expected: tuple[int, int],
    name: str,
) -> None:
    """
    Verify an operand has the expected (height, width) shape.

    Raises:
        DimensionError: If shapes differ
    """
    if actual != expected:
        raise DimensionError(
            f"{name}: shape mismatch, expected {expected}, got {actual}"
        )


def check_square(width: int, height: int, name: str) -> None:
    """
    Verify a matrix is n x n.

    Raises:
        ValidationError: If width != height
    """
    if width != height:
        raise ValidationError(
            f"{name}: must be square (n x n), got width={width}, height={height}"
        )


def check_rectangle(
    x: int,
    y: int,
    width: int,
    height: int,
    bounds: tuple[int, int],
    name: str,
) -> None:
    """
    Verify the rectangle at (x, y) of size width x height lies inside bounds.

    Args:
        x, y: Top-left corner (column, row)
        width, height: Rectangle size
        bounds: (outer_width, outer_height)
        name: Parameter name for error messages

    Raises:
        ValidationError: If an argument is not an int or any part of the
            rectangle is outside
    """
    for label, value in (('x', x), ('y', y), ('width', width), ('height', height)):
        _check_int(value, f"{name}.{label}")
    outer_width, outer_height = bounds
    if (
        x < 0 or y < 0 or width < 0 or height < 0
        or x + width > outer_width or y + height > outer_height
    ):
        raise ValidationError(
            f"{name}: area at ({x}, {y}) of size {width}x{height} "
            f"exceeds matrix bounds {outer_width}x{outer_height}"
        )


def check_tolerance(tol: float, name: str) -> None:
    """
    Verify a tolerance is a finite, non-negative number.

    Raises:
        ValidationError: If tol is negative, NaN or infinite
    """
    if not np.isfinite(tol) or tol < 0:
        raise ValidationError(f"{name}: must be finite and >= 0, got {tol}")
