"""Conversions between infix, prefix and postfix notation, and postfix evaluation."""

from __future__ import annotations

import operator

_DIGITS = frozenset("0123456789")

_INFIX_PRECEDENCE = {"*": 3, "/": 3, "+": 2, "-": 2}

_PREFIX_OPERATORS = frozenset("+-*/%^")

_SKIPPED = frozenset(" \t\0")


class ExpressionError(Exception):
    """Raised when an expression is malformed."""


def _truncating_divide(left: int, right: int) -> int:
    """Integer division that rounds toward zero."""
    if right == 0:
        raise ZeroDivisionError("division by zero")
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


_ARITHMETIC = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _truncating_divide,
}


def infix_to_postfix(infix: str) -> str:
    """Convert an infix expression over ``+ - * /`` to postfix.

    Every character that is not one of the four operators is an operand
    and is copied through unchanged; operators of equal precedence
    associate to the left. Whitespace is ignored.
    """
    output: list[str] = []
    pending: list[str] = []
    for symbol in infix:
        if symbol.isspace():
            continue
        precedence = _INFIX_PRECEDENCE.get(symbol)
        if precedence is None:
            output.append(symbol)
            continue
        while pending and precedence <= _INFIX_PRECEDENCE[pending[-1]]:
            output.append(pending.pop())
        pending.append(symbol)
    output.extend(reversed(pending))
    return "".join(output)


def prefix_to_postfix(prefix: str) -> str:
    """Convert a prefix expression over ``+ - * / % ^`` to postfix.

    Each other character is a single operand. Blanks, tabs and NUL
    characters are ignored.
    """
    stack: list[str] = []
    for symbol in reversed(prefix):
        if symbol in _SKIPPED:
            continue
        if symbol in _PREFIX_OPERATORS:
            if len(stack) < 2:
                raise ExpressionError(f"operator {symbol!r} is missing an operand")
            first = stack.pop()
            second = stack.pop()
            stack.append(first + second + symbol)
        else:
            stack.append(symbol)
    if len(stack) != 1:
        raise ExpressionError("expression does not reduce to a single operand")
    return stack[0]


def evaluate_postfix(expression: str) -> int:
    """Evaluate a postfix expression of single-digit operands.

    Division truncates toward zero. Whitespace is ignored. When operands
    are left over, the value on top of the stack is returned.
    """
    stack: list[int] = []
    for symbol in expression:
        if symbol.isspace():
            continue
        if symbol in _DIGITS:
            stack.append(int(symbol))
            continue
        operation = _ARITHMETIC.get(symbol)
        if operation is None:
            raise ExpressionError(f"invalid operator {symbol!r}")
        if len(stack) < 2:
            raise ExpressionError(f"operator {symbol!r} is missing an operand")
        right = stack.pop()
        left = stack.pop()
        stack.append(operation(left, right))
    if not stack:
        raise ExpressionError("empty expression")
    return stack[-1]