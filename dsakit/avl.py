"""Self-balancing AVL search tree of distinct keys."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Optional


@dataclass(slots=True, eq=False)
class _Node:
    key: Any
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None
    height: int = 1


def _height(node: Optional[_Node]) -> int:
    return node.height if node is not None else 0


def _balance(node: Optional[_Node]) -> int:
    if node is None:
        return 0
    return _height(node.left) - _height(node.right)


def _refresh(node: _Node) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _rotate_right(node: _Node) -> _Node:
    pivot = node.left
    node.left = pivot.right
    pivot.right = node
    _refresh(node)
    _refresh(pivot)
    return pivot


def _rotate_left(node: _Node) -> _Node:
    pivot = node.right
    node.right = pivot.left
    pivot.left = node
    _refresh(node)
    _refresh(pivot)
    return pivot


def _rebalance(node: _Node) -> _Node:
    _refresh(node)
    factor = _balance(node)
    if factor > 1:
        if _balance(node.left) < 0:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if factor < -1:
        if _balance(node.right) > 0:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


def _insert(node: Optional[_Node], key: Any) -> tuple[_Node, bool]:
    if node is None:
        return _Node(key), True
    if key < node.key:
        node.left, added = _insert(node.left, key)
    elif key > node.key:
        node.right, added = _insert(node.right, key)
    else:
        return node, False
    return _rebalance(node), added


def _delete(node: Optional[_Node], key: Any) -> tuple[Optional[_Node], bool]:
    if node is None:
        return None, False
    if key < node.key:
        node.left, removed = _delete(node.left, key)
    elif key > node.key:
        node.right, removed = _delete(node.right, key)
    else:
        removed = True
        if node.left is None or node.right is None:
            child = node.left if node.left is not None else node.right
            if child is None:
                return None, True
            node = child
        else:
            successor = node.right
            while successor.left is not None:
                successor = successor.left
            node.key = successor.key
            node.right, _ = _delete(node.right, successor.key)
    return _rebalance(node), removed


def _walk(node: Optional[_Node]) -> Iterator[Any]:
    stack: list[_Node] = []
    while stack or node is not None:
        if node is not None:
            stack.append(node)
            node = node.left
        else:
            node = stack.pop()
            yield node.key
            node = node.right


class AVLTree:
    """An AVL tree holding distinct, mutually comparable keys."""

    def __init__(self, keys=()) -> None:
        self._root: Optional[_Node] = None
        self._size = 0
        for key in keys:
            self.insert(key)

    def insert(self, key) -> None:
        """Add ``key``; a key already present is left as it is."""
        self._root, added = _insert(self._root, key)
        if added:
            self._size += 1

    def delete(self, key) -> None:
        """Remove ``key`` if present; an absent key leaves the tree unchanged."""
        self._root, removed = _delete(self._root, key)
        if removed:
            self._size -= 1

    def inorder(self) -> list:
        """Return the keys in ascending order."""
        return list(_walk(self._root))

    def height(self) -> int:
        """Return the height of the tree; an empty tree has height 0."""
        return _height(self._root)

    def __iter__(self) -> Iterator[Any]:
        return _walk(self._root)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key) -> bool:
        node = self._root
        while node is not None:
            if key < node.key:
                node = node.left
            elif key > node.key:
                node = node.right
            else:
                return True
        return False