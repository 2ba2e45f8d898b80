"""Classic data structures and algorithms: trees, queues, stacks, lists, sorting, searching, hashing, graphs, polynomials and expression notation."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "avl",
    "bst",
    "expression_tree",
    "graphs",
    "hanoi",
    "hashing",
    "linked_lists",
    "matching",
    "notation",
    "polynomials",
    "queues",
    "searching",
    "sorting",
    "stacks",
]