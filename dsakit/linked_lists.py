"""Singly and doubly linked lists."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional


@dataclass(slots=True, eq=False)
class _Node:
    value: Any
    next: Optional["_Node"] = None


class SinglyLinkedList:
    """A singly linked list with positional insertion and deletion."""

    def __init__(self, values: Iterable = ()) -> None:
        self._head: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.push_back(value)

    def _node_at(self, index: int) -> _Node:
        node = self._head
        for _ in range(index):
            node = node.next
        return node

    def push_front(self, value) -> None:
        """Add ``value`` at the head."""
        self._head = _Node(value, self._head)
        self._size += 1

    def push_back(self, value) -> None:
        """Add ``value`` at the tail."""
        if self._head is None:
            self.push_front(value)
            return
        self._node_at(self._size - 1).next = _Node(value)
        self._size += 1

    def insert_at(self, index: int, value) -> None:
        """Insert ``value`` so that it ends up at position ``index``.

        In an empty list the value becomes the only element whatever the
        index; otherwise ``index`` must lie in ``0..len(self)``.
        """
        if self._head is None:
            self.push_front(value)
            return
        if index < 0 or index > self._size:
            raise IndexError("index out of range")
        if index == 0:
            self.push_front(value)
            return
        previous = self._node_at(index - 1)
        previous.next = _Node(value, previous.next)
        self._size += 1

    def pop_front(self):
        """Remove and return the head value."""
        if self._head is None:
            raise IndexError("pop from empty list")
        node = self._head
        self._head = node.next
        self._size -= 1
        return node.value

    def pop_back(self):
        """Remove and return the tail value."""
        if self._head is None:
            raise IndexError("pop from empty list")
        if self._head.next is None:
            return self.pop_front()
        previous = self._node_at(self._size - 2)
        node = previous.next
        previous.next = None
        self._size -= 1
        return node.value

    def delete_at(self, index: int):
        """Remove and return the value at position ``index``."""
        if self._head is None:
            raise IndexError("delete from empty list")
        if index < 0 or index >= self._size:
            raise IndexError("index out of range")
        if index == 0:
            return self.pop_front()
        previous = self._node_at(index - 1)
        node = previous.next
        previous.next = node.next
        self._size -= 1
        return node.value

    def reverse(self) -> None:
        """Reverse the list in place."""
        previous: Optional[_Node] = None
        node = self._head
        while node is not None:
            following = node.next
            node.next = previous
            previous = node
            node = following
        self._head = previous

    def sort(self) -> None:
        """Sort the values in ascending order, keeping the nodes in place."""
        ordered = sorted(self)
        node = self._head
        for value in ordered:
            node.value = value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


@dataclass(slots=True, eq=False)
class _DoubleNode:
    value: Any
    prev: Optional["_DoubleNode"] = None
    next: Optional["_DoubleNode"] = None


class DoublyLinkedList:
    """A doubly linked list that can be walked in both directions."""

    def __init__(self, values: Iterable = ()) -> None:
        self._head: Optional[_DoubleNode] = None
        self._tail: Optional[_DoubleNode] = None
        self._size = 0
        for value in values:
            self.push_back(value)

    def push_front(self, value) -> None:
        """Add ``value`` at the head."""
        node = _DoubleNode(value, None, self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._size += 1

    def push_back(self, value) -> None:
        """Add ``value`` at the tail."""
        node = _DoubleNode(value, self._tail, None)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def remove(self, value) -> None:
        """Remove the first node holding ``value``."""
        if self._head is None:
            raise ValueError("list is empty")
        node = self._head
        while node is not None:
            if node.value == value:
                if node.prev is not None:
                    node.prev.next = node.next
                else:
                    self._head = node.next
                if node.next is not None:
                    node.next.prev = node.prev
                else:
                    self._tail = node.prev
                self._size -= 1
                return
            node = node.next
        raise ValueError(f"{value!r} not found in list")

    def reverse(self) -> None:
        """Reverse the list in place."""
        node = self._head
        while node is not None:
            node.prev, node.next = node.next, node.prev
            node = node.prev
        self._head, self._tail = self._tail, self._head

    def backwards(self) -> Iterator[Any]:
        """Yield the values from tail to head."""
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"