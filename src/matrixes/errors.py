"""Exceptions raised by the elimination core."""
from __future__ import annotations


class MatrixesError(Exception):
    """Base class for errors that abort a computation."""


class DivisionByZero(MatrixesError, ZeroDivisionError):
    """A rational division had a zero-valued divisor."""


class RationalOverflow(MatrixesError, OverflowError):
    """A numerator or denominator left the fixed-width integer range."""


class AllocationFailure(MatrixesError, MemoryError):
    """The prime table or a matrix could not be allocated."""
