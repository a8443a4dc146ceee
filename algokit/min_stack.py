"""A stack that reports its minimum in constant time, and an RPN evaluator."""

from __future__ import annotations

from typing import Iterable


class MinStack:
    """Integer stack whose smallest element is available in O(1)."""

    def __init__(self) -> None:
        # Each entry holds the value and the minimum at that height.
        self._items: list[tuple[int, int]] = []

    def push(self, value: int) -> None:
        """Put ``value`` on top."""
        current = value if not self._items else min(value, self._items[-1][1])
        self._items.append((value, current))

    def pop(self) -> int:
        """Remove and return the top value."""
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()[0]

    def top(self) -> int:
        """Return the top value."""
        if not self._items:
            raise IndexError("top of empty stack")
        return self._items[-1][0]

    def get_min(self) -> int:
        """Return the smallest value currently stored."""
        if not self._items:
            raise IndexError("minimum of empty stack")
        return self._items[-1][1]

    def __len__(self) -> int:
        return len(self._items)


def _truncating_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def eval_rpn(tokens: Iterable[str]) -> int:
    """Evaluate an integer expression in reverse Polish notation.

    Division truncates toward zero. A missing operand counts as 0.
    """
    stack: list[int] = []

    def pop() -> int:
        return stack.pop() if stack else 0

    for token in tokens:
        if token in ("+", "-", "*", "/"):
            right = pop()
            left = pop()
            if token == "+":
                stack.append(left + right)
            elif token == "-":
                stack.append(left - right)
            elif token == "*":
                stack.append(left * right)
            else:
                stack.append(_truncating_div(left, right))
        else:
            stack.append(int(token))
    return pop()