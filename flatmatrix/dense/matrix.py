"""
Matrix: immutable dense matrix over a flat row-major buffer.

Construction:
    empty()
    filled(rows, cols, value)
    initialize(rows, cols, f)
    identity(n)
    from_flat(rows, cols, seq)
    from_nested_lists(rows)

Queries use 1-based coordinates and report out-of-range access as None
rather than raising.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from itertools import islice
from numbers import Integral
from typing import Any, Callable, Generic, Iterable, Sequence

from flatmatrix.core.exceptions import DimensionError
from flatmatrix.core.protocols import N, T
from flatmatrix.core.validation import (
    check_buffer_length,
    check_callable,
    check_dimension,
)
from flatmatrix.dense._indexing import _at, coordinates

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Matrix(Generic[T]):
    """
    Dense rows x cols matrix stored as a single row-major tuple.

    Immutable after construction: every transform returns a new Matrix.
    Equality compares shape and elements pointwise, so two degenerate
    matrices are equal only when their shapes agree.

    Direct construction validates both dimensions, copies the buffer into
    a tuple and checks its length against the shape.
    """
    _rows: int
    _cols: int
    _data: tuple[T, ...]

    def __post_init__(self) -> None:
        # Frozen: normalise through object.__setattr__
        object.__setattr__(self, "_rows", check_dimension(self._rows, "rows"))
        object.__setattr__(self, "_cols", check_dimension(self._cols, "cols"))
        object.__setattr__(self, "_data", tuple(self._data))
        check_buffer_length(self._data, self._rows, self._cols, "data")

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self._rows

    @property
    def cols(self) -> int:
        """Number of columns."""
        return self._cols

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, cols)."""
        return (self._rows, self._cols)

    @property
    def data(self) -> tuple[T, ...]:
        """Flat row-major buffer."""
        return self._data

    @property
    def is_empty(self) -> bool:
        """Whether the matrix holds no elements (a zero dimension)."""
        return not self._data

    def get(self, row: int, col: int) -> T | None:
        """Element at (row, col), or None when out of range."""
        return get(self, row, col)

    # --- Transforms (see flatmatrix.dense.transforms) ---

    def map(self, f: Callable[[T], Any]) -> Matrix:
        """Apply f to every element. See transforms.map_elements."""
        from flatmatrix.dense.transforms import map_elements
        return map_elements(f, self)

    def map2(self, f: Callable[[T, Any], Any], other: Matrix) -> Matrix | None:
        """Combine with other elementwise, or None. See transforms.map2."""
        from flatmatrix.dense.transforms import map2
        return map2(f, self, other)

    def transpose(self) -> Matrix[T]:
        """Swap rows and columns. See transforms.transpose."""
        from flatmatrix.dense.transforms import transpose
        return transpose(self)

    @property
    def T(self) -> Matrix[T]:
        """Transpose."""
        return self.transpose()

    def dot(self, other: Matrix, *, zero: Any = 0) -> Matrix | None:
        """Matrix product with other, or None. See transforms.dot."""
        from flatmatrix.dense.transforms import dot
        return dot(self, other, zero=zero)

    def __matmul__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        product = self.dot(other)
        if product is None:
            raise DimensionError(
                f"Cannot multiply {self._rows}x{self._cols} by "
                f"{other._rows}x{other._cols}: inner dimensions differ",
                expected=self._cols,
                actual=other._rows,
            )
        return product

    def __repr__(self) -> str:
        return f"Matrix(rows={self._rows}, cols={self._cols})"

    def __str__(self) -> str:
        from flatmatrix.dense.conversion import pretty
        return pretty(self)


# ═══════════════════════════════════════════════════════════════════════
# Constructors
# ═══════════════════════════════════════════════════════════════════════


def empty() -> Matrix:
    """The 0 x 0 matrix."""
    return Matrix(0, 0, ())


def filled(rows: int, cols: int, value: T) -> Matrix[T]:
    """rows x cols matrix with every element equal to value."""
    rows = check_dimension(rows, "rows")
    cols = check_dimension(cols, "cols")
    return Matrix(rows, cols, (value,) * (rows * cols))


def initialize(rows: int, cols: int, f: Callable[[int, int], T]) -> Matrix[T]:
    """
    Build a matrix by calling f(row, col) for every coordinate.

    Coordinates are 1-based and visited in row-major order. f should depend
    on its coordinate only.
    """
    rows = check_dimension(rows, "rows")
    cols = check_dimension(cols, "cols")
    check_callable(f, "f")
    return Matrix(rows, cols, tuple(f(r, c) for r, c in coordinates(rows, cols)))


def identity(n: int, *, one: N = 1, zero: N = 0) -> Matrix[N]:
    """
    n x n identity matrix.

    Parameters
    ----------
    n : int
        Size of the matrix.
    one : number
        Value placed on the diagonal.
    zero : number
        Value placed everywhere else.
    """
    return initialize(n, n, lambda r, c: one if r == c else zero)


def from_flat(rows: int, cols: int, seq: Iterable[T]) -> Matrix[T] | None:
    """
    Build a matrix from the first rows * cols elements of seq.

    Extra elements are ignored. Returns None when seq is too short.
    """
    rows = check_dimension(rows, "rows")
    cols = check_dimension(cols, "cols")
    n = rows * cols
    data = tuple(islice(seq, n))
    if len(data) < n:
        logger.debug(
            "from_flat: %d elements cannot fill a %dx%d matrix", len(data), rows, cols
        )
        return None
    return Matrix(rows, cols, data)


def from_nested_lists(rows: Iterable[Sequence[T]]) -> Matrix[T] | None:
    """
    Build a matrix from a sequence of rows.

    The first row fixes the column count. Later rows longer than that are
    truncated; a strictly shorter row makes the whole result None. No rows,
    or a first row with no elements, give the empty matrix.

    Examples:
        >>> from_nested_lists([[1, 2], [1], [1, 2]]) is None
        True
        >>> from_nested_lists([[1, 2], [1, 2, 3], [1, 2]]).shape
        (3, 2)
    """
    row_list = list(rows)
    if not row_list or len(row_list[0]) == 0:
        return empty()

    cols = len(row_list[0])
    data: list[T] = []
    for i, r in enumerate(row_list, start=1):
        if len(r) < cols:
            logger.debug(
                "from_nested_lists: row %d has %d elements, expected at least %d",
                i, len(r), cols,
            )
            return None
        data.extend(r[:cols])
    return Matrix(len(row_list), cols, tuple(data))


# ═══════════════════════════════════════════════════════════════════════
# Queries
# ═══════════════════════════════════════════════════════════════════════


def height(m: Matrix) -> int:
    """Number of rows."""
    return m.rows


def width(m: Matrix) -> int:
    """Number of columns."""
    return m.cols


def size(m: Matrix) -> tuple[int, int]:
    """(rows, cols)."""
    return m.shape


def _in_range(index: Any, bound: int) -> bool:
    # bool is Integral but never a coordinate
    return (
        isinstance(index, Integral)
        and not isinstance(index, bool)
        and 1 <= index <= bound
    )


def get(m: Matrix[T], row: int, col: int) -> T | None:
    """Element at the 1-based coordinate (row, col), or None when out of range."""
    if _in_range(row, m.rows) and _in_range(col, m.cols):
        return _at(m, int(row), int(col))
    return None


def row(m: Matrix[T], i: int) -> tuple[T, ...] | None:
    """Row i (1-based) as a tuple, or None when out of range."""
    if not _in_range(i, m.rows):
        return None
    start = (int(i) - 1) * m.cols
    return m.data[start:start + m.cols]


def column(m: Matrix[T], j: int) -> tuple[T, ...] | None:
    """Column j (1-based) as a tuple, or None when out of range."""
    if not _in_range(j, m.cols):
        return None
    return m.data[int(j) - 1::m.cols]
