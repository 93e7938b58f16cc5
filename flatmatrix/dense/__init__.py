"""
Dense matrix module.

Immutable matrices stored as one flat row-major buffer, with 1-based
coordinates. Operations that can fail return None instead of raising.

Public API:
    empty(), filled(), initialize(), identity()      - construction
    from_flat(), from_nested_lists()                 - construction from lists
    height(), width(), size(), get(), row(), column() - queries
    map_elements(), map2(), transpose(), dot()       - transforms
    to_flat_list(), to_nested_lists(), pretty()      - conversion
    to_numpy(), from_numpy()                         - numpy interop
"""

from flatmatrix.dense.matrix import (
    Matrix,
    empty,
    filled,
    initialize,
    identity,
    from_flat,
    from_nested_lists,
    height,
    width,
    size,
    get,
    row,
    column,
)
from flatmatrix.dense.transforms import map_elements, map2, transpose, dot
from flatmatrix.dense.conversion import (
    to_flat_list,
    to_nested_lists,
    to_numpy,
    from_numpy,
    pretty,
)

__all__ = [
    "Matrix",
    "empty",
    "filled",
    "initialize",
    "identity",
    "from_flat",
    "from_nested_lists",
    "height",
    "width",
    "size",
    "get",
    "row",
    "column",
    "map_elements",
    "map2",
    "transpose",
    "dot",
    "to_flat_list",
    "to_nested_lists",
    "to_numpy",
    "from_numpy",
    "pretty",
]
