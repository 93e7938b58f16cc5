"""
Conversion and rendering for Matrix values.

Lists:
    to_flat_list(m)     - row-major list of all elements
    to_nested_lists(m)  - list of rows

numpy interop:
    to_numpy(m)         - (rows, cols) ndarray
    from_numpy(array)   - Matrix from any 2D array-like

Display:
    pretty(m)           - bracketed, one row per line
"""

from __future__ import annotations

from typing import Any, Callable

import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from flatmatrix.core.protocols import T
from flatmatrix.core.validation import check_2d, check_array
from flatmatrix.dense.matrix import Matrix


def to_flat_list(m: Matrix[T]) -> list[T]:
    """All elements in row-major order."""
    return list(m.data)


def to_nested_lists(m: Matrix[T]) -> list[list[T]]:
    """Rows of the matrix, each as a list of cols elements."""
    cols = m.cols
    return [list(m.data[i * cols:(i + 1) * cols]) for i in range(m.rows)]


def to_numpy(m: Matrix, dtype: DTypeLike = None) -> NDArray[Any]:
    """
    Copy the matrix into a new (rows, cols) C-contiguous array.

    Parameters
    ----------
    m : Matrix
        Source matrix.
    dtype : dtype, optional
        Target dtype. If None, numpy infers it from the elements
        (float64 for a matrix with no elements).
    """
    return np.array(m.data, dtype=dtype).reshape(m.rows, m.cols)


def from_numpy(array: ArrayLike) -> Matrix:
    """
    Build a Matrix from a 2D array-like.

    Elements are converted to Python scalars with ndarray.tolist(), so the
    result does not reference the source array.

    Raises
    ------
    DimensionError
        If the input is not two-dimensional.
    """
    arr = check_array(array, "array")
    check_2d(arr, "array")
    rows, cols = arr.shape
    return Matrix(rows, cols, tuple(arr.ravel(order='C').tolist()))


def pretty(m: Matrix, *, formatter: Callable[[Any], str] = str) -> str:
    """
    Render the matrix for display.

    Each row is shown as ``[ a, b, c ]``; rows are joined by a newline
    and a leading comma, and the whole is wrapped in brackets:

        [ [ 1, 0 ]
        , [ 0, 1 ] ]

    The empty matrix renders as ``[]``. Layout is for humans only and is
    not meant to be parsed back.
    """
    if m.rows == 0:
        return "[]"
    rows = []
    for r in to_nested_lists(m):
        rows.append("[ " + ", ".join(formatter(x) for x in r) + " ]" if r else "[]")
    return "[ " + "\n, ".join(rows) + " ]"
