from __future__ import annotations

import logging
from typing import List, MutableSequence

from matrixes.field import NumericField, T

_logger = logging.getLogger(__name__)


def _check_shape(matrix: MutableSequence[MutableSequence[T]], rows: int, columns: int) -> None:
    if rows < 1 or columns < 1:
        raise ValueError(f"matrix must be at least 1x1, got {rows}x{columns}")
    if len(matrix) != rows:
        raise ValueError(f"expected {rows} rows, got {len(matrix)}")
    for y, row in enumerate(matrix):
        if len(row) != columns:
            raise ValueError(f"row {y} has {len(row)} entries, expected {columns}")


def _clear_column(
    matrix: MutableSequence[MutableSequence[T]],
    targets: range,
    y0: int,
    x0: int,
    columns: int,
    field: NumericField[T],
) -> None:
    """Subtract multiples of row y0 so that column x0 vanishes in every target row."""
    zero = field.from_integer(0)
    source = matrix[y0]
    for y in targets:
        row = matrix[y]
        if field.is_zero(row[x0]):
            continue
        multiplier = row[x0]
        # known result; set directly instead of subtracting
        row[x0] = zero
        for x in range(x0 + 1, columns):
            row[x] = field.subtract(row[x], field.multiply(source[x], multiplier))


def eliminate(
    matrix: MutableSequence[MutableSequence[T]],
    rows: int,
    columns: int,
    field: NumericField[T],
) -> None:
    """Reduced row echelon form, in place.

    The pivot cursor walks the diagonal: (x0, y0) advance together, and a
    column with no nonzero entry at or below y0 is skipped without holding
    the row back. Pivot rows are swapped in by exchanging the row objects
    themselves. Rank deficiency leaves rows without a pivot; it is not an
    error.

    For an augmented system the last column holds the constant terms.
    """
    _check_shape(matrix, rows, columns)
    one = field.from_integer(1)

    # Forward elimination
    x0 = y0 = 0
    missing: List[int] = []
    while x0 < columns and y0 < rows:
        if field.is_zero(matrix[y0][x0]):
            for y in range(y0 + 1, rows):
                if not field.is_zero(matrix[y][x0]):
                    matrix[y0], matrix[y] = matrix[y], matrix[y0]
                    _logger.debug("column %d: swapped rows %d and %d", x0, y0, y)
                    break

        if field.is_zero(matrix[y0][x0]):
            missing.append(x0)
            x0 += 1
            y0 += 1
            continue

        # Make the pivot 1
        scale = field.divide(one, matrix[y0][x0])
        pivot_row = matrix[y0]
        for x in range(x0, columns):
            pivot_row[x] = field.multiply(pivot_row[x], scale)

        _clear_column(matrix, range(y0 + 1, rows), y0, x0, columns, field)
        x0 += 1
        y0 += 1

    if missing:
        _logger.debug("no pivot in column(s) %s", missing)

    # Back substitution
    for y0 in range(y0 - 1, 0, -1):
        row = matrix[y0]
        x0 = 0
        while x0 < columns - 1 and field.is_zero(row[x0]):
            x0 += 1
        if field.is_zero(row[x0]):
            continue
        _clear_column(matrix, range(y0 - 1, -1, -1), y0, x0, columns, field)
