"""Prime table used by rational reduction.

The table holds every prime up to a fixed bound, in ascending order,
followed by a terminating 0. It is built once where rational arithmetic
starts and handed to each reduction; nothing mutates it afterwards.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import cached_property
from typing import Iterator, Tuple

import numpy as np

from matrixes.errors import AllocationFailure

_logger = logging.getLogger(__name__)


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


MAX_PRIME = _env_int("MATRIXES_MAX_PRIME", 65535)
SENTINEL = 0


def sieve(bound: int) -> np.ndarray:
    """
    Boolean primality mask for 0..bound (sieve of Eratosthenes).
    """
    if bound < 2:
        return np.zeros(max(bound + 1, 0), dtype=bool)
    try:
        mask = np.ones(bound + 1, dtype=bool)
    except MemoryError as exc:
        raise AllocationFailure(f"cannot allocate sieve for bound {bound}") from exc
    mask[:2] = False
    for i in range(2, bound + 1):
        if i * i > bound:
            break
        if mask[i]:
            mask[2 * i :: i] = False
    return mask


@dataclass(frozen=True)
class PrimeTable:
    """
    Ascending primes <= bound.

    primes:        the real primes, without the sentinel.
    with_sentinel: the same values followed by SENTINEL (0), for loops
                   that stop on the terminator instead of a length.
    """

    bound: int
    primes: Tuple[int, ...]

    @classmethod
    def build(cls, bound: int = MAX_PRIME) -> "PrimeTable":
        mask = sieve(bound)
        primes = tuple(int(p) for p in np.flatnonzero(mask))
        _logger.debug("prime table built: %d primes <= %d", len(primes), bound)
        return cls(bound=bound, primes=primes)

    @cached_property
    def with_sentinel(self) -> Tuple[int, ...]:
        return self.primes + (SENTINEL,)

    def __iter__(self) -> Iterator[int]:
        return iter(self.primes)

    def __len__(self) -> int:
        return len(self.primes)

    def __contains__(self, value: object) -> bool:
        return value in self.primes
