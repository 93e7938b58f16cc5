"""
Core infrastructure for flatmatrix.

Shared abstractions used by the dense matrix implementation.

Key components:
    protocols: Numeric element protocol
    exceptions: Exception hierarchy
    validation: Argument validators
"""

from flatmatrix.core.protocols import Numeric
from flatmatrix.core.exceptions import (
    FlatMatrixError,
    ValidationError,
    DimensionError,
)

__all__ = [
    # Protocols
    "Numeric",
    # Exceptions
    "FlatMatrixError",
    "ValidationError",
    "DimensionError",
]
