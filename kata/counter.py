"""Counting how many times each value has been seen."""

from __future__ import annotations

from typing import Dict, Generic, Hashable, TypeVar

T = TypeVar("T", bound=Hashable)


class Counter(Generic[T]):
    """Counts the number of times each value has been seen."""

    def __init__(self) -> None:
        self._values: Dict[T, int] = {}

    def count(self, value: T) -> None:
        """Count an occurrence of ``value``."""
        self._values[value] = self._values.get(value, 0) + 1

    def times_seen(self, value: T) -> int:
        """Return the number of times ``value`` has been seen."""
        return self._values.get(value, 0)