"""Exact fractions over fixed-width integers.

Numerator and denominator are signed 32-bit values. Every arithmetic
result is normalized by reduce_fraction: positive denominator, 0 stored
as 0/1, and common prime factors from the PrimeTable divided out.
Intermediate values that leave the 32-bit range raise RationalOverflow.
"""
from __future__ import annotations

from dataclasses import dataclass

from matrixes.errors import DivisionByZero, RationalOverflow
from matrixes.primes import SENTINEL, PrimeTable

INT_BITS = 32
INT_MIN = -(2 ** (INT_BITS - 1))
INT_MAX = 2 ** (INT_BITS - 1) - 1


def _checked(value: int) -> int:
    if value < INT_MIN or value > INT_MAX:
        raise RationalOverflow(f"{value} does not fit in a {INT_BITS}-bit integer")
    return value


@dataclass(frozen=True)
class Rational:
    """A fraction as given; construction does not normalize, only arithmetic results are reduced."""

    numerator: int
    denominator: int = 1

    def __post_init__(self) -> None:
        _checked(self.numerator)
        _checked(self.denominator)
        if self.denominator == 0:
            raise DivisionByZero(f"zero denominator in {self.numerator}/0")

    def is_zero(self) -> bool:
        return self.numerator == 0

    def __str__(self) -> str:
        if self.denominator == 1:
            return str(self.numerator)
        return f"{self.numerator}/{self.denominator}"


def reduce_fraction(x: Rational, primes: PrimeTable) -> Rational:
    """
    Normalize x.

    Common factors are only searched among the primes of the table and
    never above min(|numerator|, denominator), so a shared factor larger
    than the table bound survives.
    """
    n, d = x.numerator, x.denominator
    if d < 0:
        n, d = _checked(-n), _checked(-d)
    if n == 0:
        return Rational(0, 1)
    if abs(n) == d:
        return Rational(n // d, 1)

    for p in primes.with_sentinel:
        if p == SENTINEL or p > abs(n) or p > d:
            break
        while n % p == 0 and d % p == 0:
            n //= p
            d //= p
    return Rational(n, d)


def from_integer(x: int) -> Rational:
    return Rational(x, 1)


def is_zero(x: Rational) -> bool:
    return x.numerator == 0


def add(a: Rational, b: Rational, primes: PrimeTable) -> Rational:
    n = _checked(_checked(a.numerator * b.denominator) + _checked(b.numerator * a.denominator))
    d = _checked(a.denominator * b.denominator)
    return reduce_fraction(Rational(n, d), primes)


def subtract(a: Rational, b: Rational, primes: PrimeTable) -> Rational:
    n = _checked(_checked(a.numerator * b.denominator) - _checked(b.numerator * a.denominator))
    d = _checked(a.denominator * b.denominator)
    return reduce_fraction(Rational(n, d), primes)


def multiply(a: Rational, b: Rational, primes: PrimeTable) -> Rational:
    n = _checked(a.numerator * b.numerator)
    d = _checked(a.denominator * b.denominator)
    return reduce_fraction(Rational(n, d), primes)


def divide(a: Rational, b: Rational, primes: PrimeTable) -> Rational:
    """a * (1/b); raises DivisionByZero when b is zero."""
    if b.numerator == 0:
        raise DivisionByZero(f"division of {a} by zero")
    n = _checked(a.numerator * b.denominator)
    d = _checked(a.denominator * b.numerator)
    return reduce_fraction(Rational(n, d), primes)
