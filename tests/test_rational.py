"""Tests for matrixes.rational."""
from fractions import Fraction
from itertools import product

import pytest

from matrixes.errors import DivisionByZero, MatrixesError, RationalOverflow
from matrixes.primes import PrimeTable
from matrixes.rational import (
    INT_MAX,
    INT_MIN,
    Rational,
    add,
    divide,
    from_integer,
    is_zero,
    multiply,
    reduce_fraction,
    subtract,
)

PRIMES = PrimeTable.build(1000)


def _assert_reduced(r: Rational) -> None:
    assert r.denominator > 0
    if r.numerator == 0:
        assert r.denominator == 1
        return
    bound = min(abs(r.numerator), r.denominator)
    for p in PRIMES:
        if p > bound:
            break
        assert not (r.numerator % p == 0 and r.denominator % p == 0)


# --- construction ---

def test_default_denominator():
    assert Rational(5) == Rational(5, 1)


def test_zero_denominator_rejected():
    with pytest.raises(DivisionByZero):
        Rational(1, 0)


def test_out_of_range_rejected():
    with pytest.raises(RationalOverflow):
        Rational(INT_MAX + 1)
    with pytest.raises(RationalOverflow):
        Rational(1, INT_MIN - 1)


def test_str():
    assert str(Rational(3)) == "3"
    assert str(Rational(-1, 2)) == "-1/2"


# --- reduction ---

def test_reduce_common_factor():
    assert reduce_fraction(Rational(2, 4), PRIMES) == Rational(1, 2)


def test_reduce_negative_denominator():
    assert reduce_fraction(Rational(-3, -6), PRIMES) == Rational(1, 2)
    assert reduce_fraction(Rational(3, -6), PRIMES) == Rational(-1, 2)


def test_reduce_zero():
    assert reduce_fraction(Rational(0, -7), PRIMES) == Rational(0, 1)


def test_reduce_equal_magnitude():
    assert reduce_fraction(Rational(3, -3), PRIMES) == Rational(-1, 1)
    # 65537 is above any table bound, handled by the |n| == d shortcut
    assert reduce_fraction(Rational(65537, 65537), PRIMES) == Rational(1, 1)


def test_reduce_stops_at_table_bound():
    small = PrimeTable.build(10)
    # 13 is not in the table, so it is not divided out
    assert reduce_fraction(Rational(26, 39), small) == Rational(26, 39)
    assert reduce_fraction(Rational(26, 39), PRIMES) == Rational(2, 3)


def test_reduce_repeated_factor():
    assert reduce_fraction(Rational(48, 72), PRIMES) == Rational(2, 3)


def test_reduce_negating_min_overflows():
    with pytest.raises(RationalOverflow):
        reduce_fraction(Rational(1, INT_MIN), PRIMES)


# --- arithmetic ---

def test_add_subtract():
    assert add(Rational(1, 2), Rational(1, 3), PRIMES) == Rational(5, 6)
    assert subtract(Rational(1, 2), Rational(1, 3), PRIMES) == Rational(1, 6)
    assert subtract(Rational(1, 3), Rational(1, 3), PRIMES) == Rational(0, 1)


def test_half_times_two_is_one():
    assert multiply(Rational(1, 2), Rational(2, 1), PRIMES) == Rational(1, 1)


def test_divide():
    assert divide(Rational(1, 2), Rational(-3, 4), PRIMES) == Rational(-2, 3)


def test_divide_by_zero():
    with pytest.raises(DivisionByZero):
        divide(Rational(1, 1), Rational(0, 5), PRIMES)


def test_division_by_zero_is_builtin_too():
    with pytest.raises(ZeroDivisionError):
        divide(Rational(1), Rational(0), PRIMES)


def test_from_integer_and_is_zero():
    assert from_integer(-4) == Rational(-4, 1)
    assert is_zero(Rational(0))
    assert not is_zero(Rational(1, 3))
    assert Rational(0).is_zero()


def test_multiply_overflow():
    with pytest.raises(RationalOverflow):
        multiply(Rational(2 ** 16), Rational(2 ** 16), PRIMES)


def test_add_overflow():
    with pytest.raises(OverflowError):
        add(Rational(INT_MAX), Rational(1), PRIMES)


def test_overflow_is_matrixes_error():
    with pytest.raises(MatrixesError):
        multiply(Rational(1, 2 ** 16), Rational(1, 2 ** 16), PRIMES)


def test_results_reduced_and_exact():
    values = [Rational(n, d) for n, d in product(range(-6, 7), range(1, 7))]
    for a, b in product(values[::5], values[::3]):
        fa = Fraction(a.numerator, a.denominator)
        fb = Fraction(b.numerator, b.denominator)
        for op, expected in ((add, fa + fb), (subtract, fa - fb), (multiply, fa * fb)):
            r = op(a, b, PRIMES)
            _assert_reduced(r)
            assert (r.numerator, r.denominator) == (expected.numerator, expected.denominator)


def test_add_matches_cross_multiplication():
    a, b = Rational(7, 12), Rational(-5, 18)
    r = add(a, b, PRIMES)
    n = a.numerator * b.denominator + b.numerator * a.denominator
    d = a.denominator * b.denominator
    assert n * r.denominator == r.numerator * d
