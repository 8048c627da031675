from __future__ import annotations

import re
from typing import Callable, Iterable, Iterator, List, Sequence, TextIO, Tuple, TypeVar

from matrixes.errors import AllocationFailure
from matrixes.primes import PrimeTable
from matrixes.rational import Rational, reduce_fraction

T = TypeVar("T")

_FRACTION_RE = re.compile(r"([+-]?\d+)(?:/([+-]?\d+))?")


def tokenize(stream: TextIO) -> Iterator[str]:
    """Yield whitespace-separated tokens from a text stream, line by line."""
    for line in stream:
        yield from line.split()


def _next_token(tokens: Iterator[str], what: str) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise ValueError(f"unexpected end of input while reading {what}") from None


# ---------------------------------------------------------------------------
# Cells
# ---------------------------------------------------------------------------

def parse_float(token: str) -> float:
    try:
        return float(token)
    except ValueError:
        raise ValueError(f"not a number: {token!r}") from None


def parse_fraction(token: str, primes: PrimeTable) -> Rational:
    """
    Parse "p" or "p/q" into a reduced Rational. The denominator defaults to 1.
    """
    m = _FRACTION_RE.fullmatch(token.strip())
    if not m:
        raise ValueError(f"not a fraction: {token!r}")
    numerator = int(m.group(1))
    denominator = int(m.group(2)) if m.group(2) is not None else 1
    if denominator == 0:
        raise ValueError(f"zero denominator in {token!r}")
    return reduce_fraction(Rational(numerator, denominator), primes)


# ---------------------------------------------------------------------------
# Matrices
# ---------------------------------------------------------------------------

def read_dimensions(tokens: Iterator[str], min_columns: int = 1) -> Tuple[int, int]:
    """
    Read the row count and the column count. Rows must be positive; columns
    must be at least min_columns (0 for a system whose constant column is
    appended afterwards).
    """
    dims = []
    for what, lowest in (("rows", 1), ("columns", min_columns)):
        tok = _next_token(tokens, what)
        try:
            value = int(tok)
        except ValueError:
            raise ValueError(f"{what} must be an integer, got {tok!r}") from None
        if value < lowest:
            raise ValueError(f"{what} must be at least {lowest}, got {value}")
        dims.append(value)
    return dims[0], dims[1]


def _new_row(columns: int) -> list:
    return [None] * columns


def read_matrix(
    tokens: Iterator[str],
    rows: int,
    columns: int,
    parse: Callable[[str], T],
) -> List[List[T]]:
    """
    Read rows*columns cells in row-major order. Each row is its own list so
    that elimination can swap rows without copying cells.
    """
    try:
        matrix: List[List[T]] = [_new_row(columns) for _ in range(rows)]
    except MemoryError as exc:
        raise AllocationFailure(f"cannot allocate a {rows}x{columns} matrix") from exc
    for y in range(rows):
        for x in range(columns):
            matrix[y][x] = parse(_next_token(tokens, f"cell ({y}, {x})"))
    return matrix


def format_float(x: float) -> str:
    return f"{x:f}"


def format_fraction(x: Rational) -> str:
    return str(x)


def format_matrix(matrix: Iterable[Sequence[T]], fmt: Callable[[T], str]) -> str:
    return "\n".join("\t".join(fmt(v) for v in row) for row in matrix)
