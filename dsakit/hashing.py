"""A fixed-size hash table resolving collisions by linear probing."""

from __future__ import annotations

from typing import Any, Iterator, Optional


class TableFullError(Exception):
    """Raised when inserting into a table with no free slot."""


class LinearProbingTable:
    """Maps integer keys to values in ``size`` slots.

    A key goes to slot ``key % size`` or, if that is taken, to the next free
    slot after it, wrapping round. Inserting a key that is already present
    stores a second entry; lookups return the first one found.
    """

    def __init__(self, size: int = 10) -> None:
        if size < 1:
            raise ValueError("size must be positive")
        self.size = size
        self._slots: list[Optional[tuple[int, Any]]] = [None] * size

    def _probe(self, key: int) -> Iterator[int]:
        start = key % self.size
        for offset in range(self.size):
            yield (start + offset) % self.size

    def insert(self, key: int, value) -> int:
        """Store ``value`` under ``key`` and return the slot index used."""
        for index in self._probe(key):
            if self._slots[index] is None:
                self._slots[index] = (key, value)
                return index
        raise TableFullError("hash table is full")

    def search(self, key: int):
        """Return the value stored under ``key``; raise KeyError if absent."""
        for index in self._probe(key):
            slot = self._slots[index]
            if slot is None:
                break
            if slot[0] == key:
                return slot[1]
        raise KeyError(key)

    def __contains__(self, key: int) -> bool:
        try:
            self.search(key)
        except KeyError:
            return False
        return True

    def __len__(self) -> int:
        return sum(slot is not None for slot in self._slots)