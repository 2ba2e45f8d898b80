"""Binary tree nodes, an unbalanced search tree and stack-based traversals."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Optional


@dataclass(eq=False)
class TreeNode:
    """A binary tree node."""

    value: Any
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None

    def insert_left(self, value) -> "TreeNode":
        """Attach a new left child holding ``value`` and return it."""
        self.left = TreeNode(value)
        return self.left

    def insert_right(self, value) -> "TreeNode":
        """Attach a new right child holding ``value`` and return it."""
        self.right = TreeNode(value)
        return self.right


def preorder(root: Optional[TreeNode]) -> Iterator[Any]:
    """Yield values root, left subtree, right subtree."""
    if root is None:
        return
    stack = [root]
    while stack:
        node = stack.pop()
        yield node.value
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def inorder(root: Optional[TreeNode]) -> Iterator[Any]:
    """Yield values left subtree, root, right subtree."""
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        if node is not None:
            stack.append(node)
            node = node.left
        else:
            node = stack.pop()
            yield node.value
            node = node.right


def postorder(root: Optional[TreeNode]) -> Iterator[Any]:
    """Yield values left subtree, right subtree, root."""
    if root is None:
        return
    pending = [root]
    output: list[TreeNode] = []
    while pending:
        node = pending.pop()
        output.append(node)
        if node.left is not None:
            pending.append(node.left)
        if node.right is not None:
            pending.append(node.right)
    for node in reversed(output):
        yield node.value


class BinarySearchTree:
    """An unbalanced binary search tree of distinct keys."""

    def __init__(self, keys=()) -> None:
        self.root: Optional[TreeNode] = None
        for key in keys:
            self.insert(key)

    def insert(self, key) -> None:
        """Add ``key``; a key already present is ignored."""
        if self.root is None:
            self.root = TreeNode(key)
            return
        node = self.root
        while True:
            if key < node.value:
                if node.left is None:
                    node.insert_left(key)
                    return
                node = node.left
            elif key > node.value:
                if node.right is None:
                    node.insert_right(key)
                    return
                node = node.right
            else:
                return

    def inorder(self) -> list:
        """Return the keys in ascending order."""
        return list(inorder(self.root))