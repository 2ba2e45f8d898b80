"""Binary expression trees built from postfix expressions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .notation import _ARITHMETIC, _DIGITS, ExpressionError


@dataclass(eq=False)
class ExpressionNode:
    """A node holding an operator or a single-character operand."""

    value: str
    left: Optional["ExpressionNode"] = None
    right: Optional["ExpressionNode"] = None

    def evaluate(self) -> int:
        """Compute the value of the subtree; operands must be single digits.

        Division truncates toward zero.
        """
        operation = _ARITHMETIC.get(self.value)
        if operation is not None:
            if self.left is None or self.right is None:
                raise ExpressionError(f"operator {self.value!r} is missing an operand")
            return operation(self.left.evaluate(), self.right.evaluate())
        if self.value not in _DIGITS:
            raise ExpressionError(f"operand {self.value!r} is not a digit")
        return int(self.value)


def build_expression_tree(postfix: str) -> ExpressionNode:
    """Build a tree from a postfix expression over ``+ - * /``.

    Each other character is a single operand. Whitespace is ignored.
    When operands are left over, the tree on top of the stack is returned.
    """
    stack: list[ExpressionNode] = []
    for symbol in postfix:
        if symbol.isspace():
            continue
        node = ExpressionNode(symbol)
        if symbol in _ARITHMETIC:
            if len(stack) < 2:
                raise ExpressionError(f"operator {symbol!r} is missing an operand")
            node.right = stack.pop()
            node.left = stack.pop()
        stack.append(node)
    if not stack:
        raise ExpressionError("empty expression")
    return stack[-1]