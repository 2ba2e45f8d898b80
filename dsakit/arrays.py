"""Positional insertion and deletion in a bounded array, and min/max."""

from __future__ import annotations

from typing import Any, Sequence

DEFAULT_CAPACITY = 100


def insert_element(values: Sequence, position: int, element, capacity: int = DEFAULT_CAPACITY) -> list:
    """Return a copy of ``values`` with ``element`` inserted at ``position``.

    ``position`` is zero-based and may equal ``len(values)``. The array may
    hold at most ``capacity`` elements.
    """
    if len(values) >= capacity:
        raise OverflowError("array is at capacity")
    if position < 0 or position > len(values):
        raise IndexError("invalid position for insertion")
    return [*values[:position], element, *values[position:]]


def delete_element(values: Sequence, position: int) -> list:
    """Return a copy of ``values`` without the element at ``position``."""
    if position < 0 or position >= len(values):
        raise IndexError("invalid position for deletion")
    return [*values[:position], *values[position + 1:]]


def min_max(values: Sequence) -> tuple[Any, Any]:
    """Return ``(smallest, largest)`` of a non-empty sequence in one pass."""
    iterator = iter(values)
    try:
        smallest = largest = next(iterator)
    except StopIteration:
        raise ValueError("min_max() of an empty sequence") from None
    for value in iterator:
        if value < smallest:
            smallest = value
        if value > largest:
            largest = value
    return smallest, largest