"""
Transform algorithms over Matrix values.

Every transform allocates a fresh Matrix; inputs are never modified.
Shape mismatches are reported as None (logged at DEBUG level) rather
than raised.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from flatmatrix.core.protocols import N, T
from flatmatrix.core.validation import check_callable
from flatmatrix.dense._indexing import _at
from flatmatrix.dense.matrix import Matrix, initialize

logger = logging.getLogger(__name__)


def map_elements(f: Callable[[T], Any], m: Matrix[T]) -> Matrix:
    """Apply f to every element, keeping the shape."""
    check_callable(f, "f")
    return Matrix(m.rows, m.cols, tuple(f(x) for x in m.data))


def map2(f: Callable[[Any, Any], Any], m1: Matrix, m2: Matrix) -> Matrix | None:
    """
    Combine two matrices elementwise with f.

    Both rows and columns must agree; otherwise returns None.
    """
    check_callable(f, "f")
    if m1.shape != m2.shape:
        logger.debug("map2: shape %s does not match shape %s", m1.shape, m2.shape)
        return None
    # Equal shapes share one row-major layout, so offsets line up.
    return Matrix(m1.rows, m1.cols, tuple(f(a, b) for a, b in zip(m1.data, m2.data)))


def transpose(m: Matrix[T]) -> Matrix[T]:
    """Swap rows and columns: result[i, j] == m[j, i]."""
    return initialize(m.cols, m.rows, lambda i, j: _at(m, j, i))


def dot(m1: Matrix[N], m2: Matrix[N], *, zero: Any = 0) -> Matrix[N] | None:
    """
    Matrix product m1 x m2.

    Plain triple loop, O(rows1 * cols2 * cols1). Each entry is folded from
    ``zero`` with ``+`` over the products ``m1[i, k] * m2[k, j]``.

    Parameters
    ----------
    m1 : Matrix
        Left operand, shape (n, k).
    m2 : Matrix
        Right operand, shape (k, p).
    zero : number
        Additive identity of the element type.

    Returns
    -------
    Matrix or None
        Product of shape (n, p), or None when width(m1) != height(m2).
    """
    if m1.cols != m2.rows:
        logger.debug(
            "dot: cannot multiply %dx%d by %dx%d", m1.rows, m1.cols, m2.rows, m2.cols
        )
        return None

    inner = m1.cols

    def entry(i: int, j: int):
        acc = zero
        for k in range(1, inner + 1):
            acc = acc + _at(m1, i, k) * _at(m2, k, j)
        return acc

    return initialize(m1.rows, m2.cols, entry)
