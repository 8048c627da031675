"""Arithmetic back ends for the elimination engine.

eliminate() only talks to a NumericField, so the same control flow runs
over floats and over Rational values.
"""
from __future__ import annotations

from typing import Protocol, TypeVar

from matrixes import rational
from matrixes.primes import PrimeTable
from matrixes.rational import Rational

T = TypeVar("T")


class NumericField(Protocol[T]):
    """The six operations elimination needs from an element type."""

    def add(self, a: T, b: T) -> T: ...

    def subtract(self, a: T, b: T) -> T: ...

    def multiply(self, a: T, b: T) -> T: ...

    def divide(self, a: T, b: T) -> T: ...

    def from_integer(self, x: int) -> T: ...

    def is_zero(self, x: T) -> bool: ...


class FloatField:
    """IEEE doubles. Zero test is exact: no epsilon."""

    def __repr__(self):
        return "FloatField()"

    def add(self, a: float, b: float) -> float:
        return a + b

    def subtract(self, a: float, b: float) -> float:
        return a - b

    def multiply(self, a: float, b: float) -> float:
        return a * b

    def divide(self, a: float, b: float) -> float:
        return a / b

    def from_integer(self, x: int) -> float:
        return float(x)

    def is_zero(self, x: float) -> bool:
        return x == 0.0


class FractionField:
    """Rational values reduced against a fixed prime table."""

    def __init__(self, primes: PrimeTable):
        self.primes = primes

    def __repr__(self):
        return f"FractionField(bound={self.primes.bound})"

    def add(self, a: Rational, b: Rational) -> Rational:
        return rational.add(a, b, self.primes)

    def subtract(self, a: Rational, b: Rational) -> Rational:
        return rational.subtract(a, b, self.primes)

    def multiply(self, a: Rational, b: Rational) -> Rational:
        return rational.multiply(a, b, self.primes)

    def divide(self, a: Rational, b: Rational) -> Rational:
        return rational.divide(a, b, self.primes)

    def from_integer(self, x: int) -> Rational:
        return rational.from_integer(x)

    def is_zero(self, x: Rational) -> bool:
        return rational.is_zero(x)
