"""Bounded and unbounded FIFO queues, a bounded deque and a priority queue."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any, Iterator


class QueueFullError(Exception):
    """Raised when adding to a queue that has no room left."""


class QueueEmptyError(Exception):
    """Raised when removing from an empty queue."""


class CircularQueue:
    """A fixed-capacity ring buffer queue."""

    def __init__(self, capacity: int = 3) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._slots: list[Any] = [None] * capacity
        self._front = -1
        self._rear = -1

    def is_empty(self) -> bool:
        return self._front == -1

    def is_full(self) -> bool:
        return (self._rear + 1) % self.capacity == self._front

    def enqueue(self, value) -> None:
        """Add ``value`` at the rear."""
        if self.is_full():
            raise QueueFullError("queue is full")
        if self.is_empty():
            self._front = self._rear = 0
        else:
            self._rear = (self._rear + 1) % self.capacity
        self._slots[self._rear] = value

    def dequeue(self):
        """Remove and return the value at the front."""
        if self.is_empty():
            raise QueueEmptyError("queue is empty")
        value = self._slots[self._front]
        self._slots[self._front] = None
        if self._front == self._rear:
            self._front = self._rear = -1
        else:
            self._front = (self._front + 1) % self.capacity
        return value

    def __len__(self) -> int:
        if self.is_empty():
            return 0
        return (self._rear - self._front) % self.capacity + 1

    def __iter__(self) -> Iterator[Any]:
        for offset in range(len(self)):
            yield self._slots[(self._front + offset) % self.capacity]


class BoundedDeque:
    """A double-ended queue holding at most ``capacity`` values."""

    def __init__(self, capacity: int = 10) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._items: deque[Any] = deque()

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def _check_room(self) -> None:
        if self.is_full():
            raise QueueFullError("deque is full")

    def _check_items(self) -> None:
        if self.is_empty():
            raise QueueEmptyError("deque is empty")

    def push_front(self, value) -> None:
        """Add ``value`` at the front."""
        self._check_room()
        self._items.appendleft(value)

    def push_back(self, value) -> None:
        """Add ``value`` at the rear."""
        self._check_room()
        self._items.append(value)

    def pop_front(self):
        """Remove and return the front value."""
        self._check_items()
        return self._items.popleft()

    def pop_back(self):
        """Remove and return the rear value."""
        self._check_items()
        return self._items.pop()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)


class LinearQueue:
    """An array-backed queue whose slots are only reclaimed once it empties.

    Dequeued slots are not reused: after ``capacity`` enqueues the queue
    reports full until every value has been dequeued.
    """

    def __init__(self, capacity: int = 5) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._slots: list[Any] = []
        self._front = 0

    def is_empty(self) -> bool:
        return not self._slots

    def enqueue(self, value) -> None:
        """Add ``value`` at the rear."""
        if len(self._slots) == self.capacity:
            raise QueueFullError("queue is full")
        self._slots.append(value)

    def dequeue(self):
        """Remove and return the value at the front."""
        if self.is_empty():
            raise QueueEmptyError("queue is empty")
        value = self._slots[self._front]
        self._front += 1
        if self._front == len(self._slots):
            self._slots = []
            self._front = 0
        return value

    def __len__(self) -> int:
        return len(self._slots) - self._front

    def __iter__(self) -> Iterator[Any]:
        return iter(self._slots[self._front:])


@dataclass(slots=True)
class _Link:
    value: Any
    next: "_Link | None" = None


class LinkedQueue:
    """An unbounded queue built from singly linked nodes."""

    def __init__(self) -> None:
        self._front: _Link | None = None
        self._rear: _Link | None = None
        self._size = 0

    def is_empty(self) -> bool:
        return self._front is None

    def enqueue(self, value) -> None:
        """Add ``value`` at the rear."""
        link = _Link(value)
        if self._rear is None:
            self._front = self._rear = link
        else:
            self._rear.next = link
            self._rear = link
        self._size += 1

    def dequeue(self):
        """Remove and return the value at the front."""
        if self._front is None:
            raise QueueEmptyError("queue is empty")
        link = self._front
        self._front = link.next
        if self._front is None:
            self._rear = None
        self._size -= 1
        return link.value

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        link = self._front
        while link is not None:
            yield link.value
            link = link.next


@dataclass(slots=True)
class _Entry:
    data: Any
    priority: Any


class PriorityQueue:
    """A bounded binary min-heap; the lowest priority value leaves first."""

    def __init__(self, capacity: int = 10) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._heap: list[_Entry] = []

    def is_empty(self) -> bool:
        return not self._heap

    def enqueue(self, data, priority) -> None:
        """Add ``data`` with the given ``priority``."""
        if len(self._heap) == self.capacity:
            raise QueueFullError("priority queue is full")
        heap = self._heap
        heap.append(_Entry(data, priority))
        index = len(heap) - 1
        while index > 0:
            parent = (index - 1) // 2
            if not heap[parent].priority > heap[index].priority:
                break
            heap[parent], heap[index] = heap[index], heap[parent]
            index = parent

    def dequeue(self) -> tuple[Any, Any]:
        """Remove the entry of lowest priority and return ``(data, priority)``."""
        heap = self._heap
        if not heap:
            raise QueueEmptyError("priority queue is empty")
        root = heap[0]
        last = heap.pop()
        if heap:
            heap[0] = last
            self._sift_down(0)
        return root.data, root.priority

    def _sift_down(self, index: int) -> None:
        heap = self._heap
        size = len(heap)
        while True:
            smallest = index
            for child in (2 * index + 1, 2 * index + 2):
                if child < size and heap[child].priority < heap[smallest].priority:
                    smallest = child
            if smallest == index:
                return
            heap[index], heap[smallest] = heap[smallest], heap[index]
            index = smallest

    def __len__(self) -> int:
        return len(self._heap)