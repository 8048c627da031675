from .text import (
    tokenize,
    parse_float,
    parse_fraction,
    read_dimensions,
    read_matrix,
    format_float,
    format_fraction,
    format_matrix,
)

__all__ = [
    "tokenize",
    "parse_float",
    "parse_fraction",
    "read_dimensions",
    "read_matrix",
    "format_float",
    "format_fraction",
    "format_matrix",
]
