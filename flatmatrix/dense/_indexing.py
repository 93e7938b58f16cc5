"""
Coordinate mapping for row-major flat buffers.

Public coordinates are 1-based (row, col) pairs; storage offsets are
0-based positions in the flat buffer. Row 1 is stored first in full,
then row 2, and so on.
"""

from __future__ import annotations

from typing import Iterator, TYPE_CHECKING

if TYPE_CHECKING:
    from flatmatrix.dense.matrix import Matrix


def encode(cols: int, row: int, col: int) -> int:
    """Flat offset of the 1-based coordinate (row, col). Requires cols > 0."""
    return (row - 1) * cols + (col - 1)


def decode(cols: int, offset: int) -> tuple[int, int]:
    """1-based coordinate of a flat offset. Requires cols > 0."""
    row, col = divmod(offset, cols)
    return row + 1, col + 1


def coordinates(rows: int, cols: int) -> Iterator[tuple[int, int]]:
    """Yield every (row, col) of a rows x cols matrix in row-major order."""
    for r in range(1, rows + 1):
        for c in range(1, cols + 1):
            yield r, c


def _at(matrix: Matrix, row: int, col: int):
    # Callers derive (row, col) from the matrix's own ranges; no bounds check.
    return matrix._data[encode(matrix._cols, row, col)]
