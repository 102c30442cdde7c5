"""Small numeric helpers: sequences, matrices, vectors and comparisons."""

from __future__ import annotations

import math
from itertools import cycle, islice
from typing import Sequence, TypeVar

T = TypeVar("T")


def collatz_length(n: int) -> int:
    """Return the length of the Collatz sequence that starts at ``n``."""
    length = 1
    while n > 1:
        n = n // 2 if n % 2 == 0 else 3 * n + 1
        length += 1
    return length


def fib(n: int) -> int:
    """Return the ``n``-th Fibonacci number, with ``fib(0) == 0``."""
    if n < 0:
        raise ValueError(f"fib is undefined for negative n: {n}")
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current


def transpose(matrix: Sequence[Sequence[T]]) -> list[list[T]]:
    """Return the transpose of a rectangular matrix given as rows."""
    rows = [list(row) for row in matrix]
    if any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("matrix rows must all have the same length")
    return [list(column) for column in zip(*rows)]


def magnitude(vector: Sequence[float]) -> float:
    """Return the Euclidean length of ``vector``."""
    return math.sqrt(sum(coord * coord for coord in vector))


def normalize(vector: Sequence[float]) -> list[float]:
    """Return a vector with the direction of ``vector`` and length 1.0."""
    mag = magnitude(vector)
    return [coord / mag for coord in vector]


def min_of(left: T, right: T) -> T:
    """Return the smaller of two values, preferring ``left`` on ties."""
    return right if right < left else left


def offset_differences(offset: int, values: Sequence[T]) -> list[T]:
    """Return ``values[(n + offset) % len] - values[n]`` for every ``n``.

    The offset wraps around from the end of ``values`` to the beginning.
    """
    shifted = islice(cycle(values), offset, None)
    return [later - earlier for earlier, later in zip(values, shifted)]