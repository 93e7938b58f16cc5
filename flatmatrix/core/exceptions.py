"""
Exception hierarchy for flatmatrix.

All exceptions inherit from FlatMatrixError to allow catching any
library-specific error.

Absent results (None) are the normal failure channel of the matrix API:
out-of-range access, mismatched shapes in map2/dot, short inputs to the
list constructors. The exceptions below are reserved for programming
errors, such as negative dimensions or a non-callable element function.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
"""


class FlatMatrixError(Exception):
    """Base exception for all flatmatrix errors."""
    pass


class ValidationError(FlatMatrixError):
    """
    Argument validation failed.

    Raised when caller-provided arguments are not usable at all
    (wrong type, negative dimension, non-callable function).
    """
    pass


class DimensionError(ValidationError):
    """
    Matrix dimensions are incorrect or inconsistent.

    Raised when a buffer length disagrees with the declared shape, when
    an array is not two-dimensional, or when an operator that cannot
    return an absent result is applied to incompatible shapes.

    Attributes:
        expected: Expected shape or length, if known
        actual: Actual shape or length, if known
    """

    def __init__(
        self,
        message: str,
        expected: tuple[int, ...] | int | None = None,
        actual: tuple[int, ...] | int | None = None,
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual
