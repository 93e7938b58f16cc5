"""
Core protocols for flatmatrix.

Matrices are generic over their element type. Most operations place no
requirement on elements at all; matrix multiplication and the identity
constructor need elements that behave like numbers. That requirement is
expressed structurally with Protocol rather than by a fixed set of types,
so int, float, complex, Fraction, Decimal and numpy scalars all qualify.
"""

from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

T = TypeVar('T')  # Element type


@runtime_checkable
class Numeric(Protocol):
    """
    Minimal protocol for elements usable in dot products.

    An element type qualifies when it supports addition and multiplication
    with values of the same type. The additive identity is not part of
    the protocol; operations that need one (dot, identity) take it as a
    keyword argument defaulting to the integer 0.
    """

    def __add__(self, other):
        ...

    def __mul__(self, other):
        ...


N = TypeVar('N', bound=Numeric)  # Numeric element type
