"""
Argument validation utilities for flatmatrix.

These validators follow the "fail fast, fail loud" principle for
programming errors. They raise immediately with clear error messages
rather than silently correcting the input.

They are never used for the recoverable failures of the matrix API
(out-of-range access, shape mismatch), which are reported as None.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from flatmatrix.core.exceptions import ValidationError, DimensionError


def check_dimension(value: Any, name: str) -> int:
    """
    Verify value is usable as a matrix dimension.

    Args:
        value: Candidate row or column count
        name: Parameter name for error messages

    Returns:
        The dimension as a plain int

    Raises:
        ValidationError: If value is not a non-negative integer
    """
    # bool is an int subclass but never a meaningful dimension
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise ValidationError(
            f"{name}: expected a non-negative integer, got {type(value).__name__} {value!r}"
        )
    if value < 0:
        raise ValidationError(f"{name}: must be non-negative, got {value}")
    return int(value)


def check_callable(func: Any, name: str) -> None:
    """
    Verify func can be called.

    Args:
        func: Candidate element function
        name: Parameter name for error messages

    Raises:
        ValidationError: If func is not callable
    """
    if not callable(func):
        raise ValidationError(
            f"{name}: expected a callable, got {type(func).__name__}"
        )


def check_buffer_length(data: tuple, rows: int, cols: int, name: str) -> None:
    """
    Verify a flat buffer holds exactly rows * cols elements.

    Args:
        data: Flat row-major buffer
        rows: Declared number of rows
        cols: Declared number of columns
        name: Parameter name for error messages

    Raises:
        DimensionError: If the buffer length disagrees with the shape
    """
    expected = rows * cols
    if len(data) != expected:
        raise DimensionError(
            f"{name}: buffer of length {len(data)} does not match shape "
            f"({rows}, {cols}), expected {expected} elements",
            expected=expected,
            actual=len(data),
        )


def check_array(array: ArrayLike, name: str) -> NDArray[Any]:
    """
    Convert input to a numpy array.

    Unlike numeric pipelines, matrices are generic over their element type,
    so no dtype is imposed here.

    Args:
        array: Input to convert
        name: Parameter name for error messages

    Returns:
        numpy.ndarray

    Raises:
        ValidationError: If input cannot be converted to an array
    """
    try:
        return np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e


def check_ndim(array: NDArray[Any], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Args:
        array: Array to check
        ndim: Required number of dimensions
        name: Parameter name for error messages

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}",
            expected=ndim,
            actual=array.ndim,
        )


def check_2d(array: NDArray[Any], name: str) -> None:
    """
    Verify array is 2-dimensional.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        DimensionError: If array is not 2D
    """
    check_ndim(array, 2, name)
