"""Bounded and linked stacks, and sorting a stack with a second stack."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator


class StackOverflowError(Exception):
    """Raised when pushing onto a full stack."""


class StackUnderflowError(Exception):
    """Raised when popping from an empty stack."""


class BoundedStack:
    """An array-backed stack holding at most ``capacity`` values."""

    def __init__(self, capacity: int = 20) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._items: list[Any] = []

    def is_empty(self) -> bool:
        return not self._items

    def push(self, value) -> None:
        """Put ``value`` on top."""
        if len(self._items) == self.capacity:
            raise StackOverflowError("stack is full")
        self._items.append(value)

    def pop(self):
        """Remove and return the top value."""
        if not self._items:
            raise StackUnderflowError("stack is empty")
        return self._items.pop()

    def peek(self):
        """Return the top value without removing it."""
        if not self._items:
            raise StackUnderflowError("stack is empty")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the top of the stack down."""
        return reversed(self._items)


@dataclass(slots=True)
class _Link:
    value: Any
    next: "_Link | None" = None


class LinkedStack:
    """An unbounded stack built from singly linked nodes."""

    def __init__(self) -> None:
        self._head: _Link | None = None
        self._size = 0

    def is_empty(self) -> bool:
        return self._head is None

    def push(self, value) -> None:
        """Put ``value`` on top."""
        self._head = _Link(value, self._head)
        self._size += 1

    def pop(self):
        """Remove and return the top value."""
        if self._head is None:
            raise StackUnderflowError("stack is empty")
        link = self._head
        self._head = link.next
        self._size -= 1
        return link.value

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the top of the stack down."""
        link = self._head
        while link is not None:
            yield link.value
            link = link.next


def sort_stack(values: Iterable) -> list:
    """Sort a stack using one auxiliary stack.

    ``values`` is read bottom to top; the result is also bottom to top,
    so the largest value ends up on top.
    """
    source = list(values)
    result: list[Any] = []
    while source:
        item = source.pop()
        while result and item < result[-1]:
            source.append(result.pop())
        result.append(item)
    return result