"""
matrixes: Gaussian elimination over floats and exact fractions, for
simplifying matrices and solving systems of linear equations.
"""

from .errors import MatrixesError, DivisionByZero, RationalOverflow, AllocationFailure
from .primes import MAX_PRIME, PrimeTable
from .rational import Rational, reduce_fraction
from .field import NumericField, FloatField, FractionField
from .eliminate import eliminate

__all__ = [
    # Errors
    "MatrixesError",
    "DivisionByZero",
    "RationalOverflow",
    "AllocationFailure",
    # Primes
    "MAX_PRIME",
    "PrimeTable",
    # Fractions
    "Rational",
    "reduce_fraction",
    # Fields
    "NumericField",
    "FloatField",
    "FractionField",
    # Elimination
    "eliminate",
]
