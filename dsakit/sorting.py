"""Comparison sorts: heap sort, insertion sort, merge sort and quick sort.

Each function takes any iterable and returns a new ascending list,
leaving its input untouched.
"""

from __future__ import annotations

from typing import Any, Iterable


def _sift_down(items: list, root: int, size: int) -> None:
    while True:
        largest = root
        for child in (2 * root + 1, 2 * root + 2):
            if child < size and items[child] > items[largest]:
                largest = child
        if largest == root:
            return
        items[root], items[largest] = items[largest], items[root]
        root = largest


def heap_sort(values: Iterable) -> list:
    """Sort by building a max-heap and repeatedly moving its root to the end."""
    items = list(values)
    size = len(items)
    for root in range(size // 2 - 1, -1, -1):
        _sift_down(items, root, size)
    for end in range(size - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, 0, end)
    return items


def insertion_sort(values: Iterable) -> list:
    """Sort by inserting each value into the sorted prefix before it."""
    items = list(values)
    for current in range(1, len(items)):
        key = items[current]
        slot = current
        while slot > 0 and items[slot - 1] > key:
            items[slot] = items[slot - 1]
            slot -= 1
        items[slot] = key
    return items


def _merge(left: list, right: list) -> list:
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def _merge_sort(items: list) -> list:
    if len(items) <= 1:
        return items
    middle = (len(items) + 1) // 2
    return _merge(_merge_sort(items[:middle]), _merge_sort(items[middle:]))


def merge_sort(values: Iterable) -> list:
    """Stable top-down merge sort; ties keep their original order."""
    return _merge_sort(list(values))


def _partition(items: list, low: int, high: int) -> int:
    pivot = items[high]
    boundary = low - 1
    for index in range(low, high):
        if items[index] <= pivot:
            boundary += 1
            items[boundary], items[index] = items[index], items[boundary]
    items[boundary + 1], items[high] = items[high], items[boundary + 1]
    return boundary + 1


def quick_sort(values: Iterable) -> list:
    """Quick sort using the last element of each range as the pivot."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot = _partition(items, low, high)
            pending.append((low, pivot - 1))
            pending.append((pivot + 1, high))
    return items