#!/usr/bin/env python3
"""matrixes: simplify matrices and solve systems of linear equations.

Usage
-----
    matrixes                 simplify a matrix in floating point
    matrixes -e -f           solve a linear system with exact fractions
    echo "2 2 1 1 1 -1" | matrixes -q
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, List, Optional, Sequence

from matrixes.eliminate import eliminate
from matrixes.errors import MatrixesError
from matrixes.field import FloatField, FractionField
from matrixes.io.text import (
    format_float,
    format_fraction,
    format_matrix,
    parse_float,
    parse_fraction,
    read_dimensions,
    read_matrix,
    tokenize,
)
from matrixes.primes import PrimeTable

_logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="matrixes",
        description="Simplify matrices and solve systems of linear equations.",
    )
    parser.add_argument(
        "-e", "--equation", dest="equation", action="store_const", const=True, default=False,
        help="solve a system of linear equations",
    )
    parser.add_argument(
        "-m", "--matrix", dest="equation", action="store_const", const=False,
        help="simplify a matrix using Gaussian elimination (default)",
    )
    parser.add_argument(
        "-d", "--double", dest="fraction", action="store_const", const=False, default=False,
        help="use floating-point arithmetic (default)",
    )
    parser.add_argument(
        "-f", "--fraction", dest="fraction", action="store_const", const=True,
        help="use rational number arithmetic",
    )
    parser.add_argument("-q", "--quiet", action="store_true", help="display pure answer")
    parser.add_argument("-v", "--verbose", action="store_true", help="log elimination steps to stderr")
    return parser


def _prompt(quiet: bool, text: str, out) -> None:
    if not quiet:
        print(text, file=out)


def run(args: argparse.Namespace, stdin=None, stdout=None) -> None:
    """Read a matrix, eliminate it and print the result."""
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    tokens = tokenize(stdin)

    _prompt(
        args.quiet,
        "Enter the number of equations and the number of unknowns:"
        if args.equation
        else "Enter height and width of the matrix:",
        stdout,
    )
    rows, columns = read_dimensions(tokens, min_columns=0 if args.equation else 1)
    if args.equation:
        columns += 1

    if not args.quiet:
        sign = "/" if args.fraction else "."
        if args.equation:
            print(
                "For every equation enter coefficients of the consecutive variables and\n"
                f'the constant term, e.g. for "(1{sign}2)*a + 1*b + 2*c = 4" enter "1{sign}2 1 2 4":',
                file=stdout,
            )
        else:
            hint = '. For fractions use notation "p/q":' if args.fraction else ":"
            print(f"Enter values of matrix fields{hint}", file=stdout)

    fmt: Callable
    if args.fraction:
        primes = PrimeTable.build()
        field = FractionField(primes)
        matrix: List[list] = read_matrix(tokens, rows, columns, lambda tok: parse_fraction(tok, primes))
        fmt = format_fraction
    else:
        field = FloatField()
        matrix = read_matrix(tokens, rows, columns, parse_float)
        fmt = format_float

    _logger.debug("eliminating %dx%d matrix with %r", rows, columns, field)
    eliminate(matrix, rows, columns, field)

    _prompt(
        args.quiet,
        "The matrix representing this linear system is as follows:"
        if args.equation
        else "Simplified matrix:",
        stdout,
    )
    print(format_matrix(matrix, fmt), file=stdout)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    logging.getLogger("matrixes").setLevel(logging.DEBUG if args.verbose else logging.WARNING)
    try:
        run(args)
    except (MatrixesError, ValueError) as exc:
        print(f"matrixes: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
