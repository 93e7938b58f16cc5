"""
flatmatrix: immutable dense matrices over a flat row-major buffer.

Submodules:
    core: Exceptions, validation and the Numeric protocol
    dense: The Matrix type and its operations
"""

import logging

__version__ = "0.1.0"

from flatmatrix.core import (
    Numeric,
    FlatMatrixError,
    ValidationError,
    DimensionError,
)
from flatmatrix.dense import (
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
    map_elements,
    map2,
    transpose,
    dot,
    to_flat_list,
    to_nested_lists,
    to_numpy,
    from_numpy,
    pretty,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Core
    "Numeric",
    "FlatMatrixError",
    "ValidationError",
    "DimensionError",
    # Dense matrices
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
