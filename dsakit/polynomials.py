"""Polynomial arithmetic on coefficient lists and on sparse term lists."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import zip_longest
from typing import Sequence


@dataclass(frozen=True)
class Term:
    """One term ``coefficient * x ** exponent`` of a sparse polynomial."""

    coefficient: int
    exponent: int

    def __str__(self) -> str:
        return f"{self.coefficient}(x^{self.exponent})"


def add_coefficients(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Add two polynomials given lowest degree first.

    The shorter list is padded with zeros.
    """
    return [a + b for a, b in zip_longest(first, second, fillvalue=0)]


def multiply_coefficients(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Multiply two polynomials given lowest degree first."""
    if not first or not second:
        return []
    product = [0] * (len(first) + len(second) - 1)
    for i, a in enumerate(first):
        for j, b in enumerate(second):
            product[i + j] += a * b
    return product


def horner(coefficients: Sequence[int], x: int) -> int:
    """Evaluate a polynomial given highest degree first at ``x``."""
    if not coefficients:
        raise ValueError("a polynomial needs at least one coefficient")
    result = 0
    for coefficient in coefficients:
        result = result * x + coefficient
    return result


def add_terms(first: Sequence[Term], second: Sequence[Term]) -> list[Term]:
    """Add two sparse polynomials whose terms are in descending exponent order.

    Terms of equal exponent are combined, even when the sum is zero.
    """
    result: list[Term] = []
    i = j = 0
    while i < len(first) and j < len(second):
        left, right = first[i], second[j]
        if left.exponent == right.exponent:
            result.append(Term(left.coefficient + right.coefficient, left.exponent))
            i += 1
            j += 1
        elif left.exponent > right.exponent:
            result.append(left)
            i += 1
        else:
            result.append(right)
            j += 1
    result.extend(first[i:])
    result.extend(second[j:])
    return result


def format_terms(terms: Sequence[Term]) -> str:
    """Render terms as ``c(x^e)`` joined by ``+``."""
    return "+".join(str(term) for term in terms)