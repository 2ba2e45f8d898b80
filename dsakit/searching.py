"""Linear, binary and interpolation search over sequences."""

from __future__ import annotations

from typing import Optional, Sequence


def linear_search(values: Sequence, key) -> Optional[int]:
    """Return the index of the first element equal to ``key``, or ``None``."""
    for index, value in enumerate(values):
        if value == key:
            return index
    return None


def binary_search(values: Sequence, key) -> Optional[int]:
    """Return an index of ``key`` in ascending ``values``, or ``None``."""
    left, right = 0, len(values) - 1
    while left <= right:
        middle = left + (right - left) // 2
        if values[middle] == key:
            return middle
        if values[middle] < key:
            left = middle + 1
        else:
            right = middle - 1
    return None


def interpolation_search(values: Sequence[int], key: int) -> Optional[int]:
    """Return an index of ``key`` in ascending integer ``values``, or ``None``.

    The probe position is estimated from the key's place between the
    boundary values, which suits uniformly distributed data.
    """
    left, right = 0, len(values) - 1
    while left <= right and values[left] <= key <= values[right]:
        span = values[right] - values[left]
        if span == 0:
            return left if values[left] == key else None
        position = left + (key - values[left]) * (right - left) // span
        if values[position] == key:
            return position
        if values[position] < key:
            left = position + 1
        else:
            right = position - 1
    return None