"""First-in first-out queues: a plain one and one built from two stacks."""

from __future__ import annotations

from collections import deque
from typing import Any, Iterable

from .stack import Stack


class Queue:
    """First-in first-out container."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items: deque[Any] = deque(items)

    def push(self, value: Any) -> None:
        """Add ``value`` at the back."""
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the front value."""
        if not self._items:
            raise IndexError("pop from empty queue")
        return self._items.popleft()

    def peek(self) -> Any:
        """Return the front value without removing it."""
        if not self._items:
            raise IndexError("peek at empty queue")
        return self._items[0]

    def clear(self) -> None:
        """Remove every value."""
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)


class TwoStackQueue:
    """Queue made of an inbox stack and an outbox stack.

    Like :class:`Stack`, it ignores pushed ``None`` values.
    """

    def __init__(self) -> None:
        self._inbox = Stack()
        self._outbox = Stack()

    def _refill(self) -> None:
        if not self._outbox:
            while self._inbox:
                self._outbox.push(self._inbox.pop())
        if not self._outbox:
            raise IndexError("empty queue")

    def push(self, value: Any) -> None:
        """Add ``value`` at the back."""
        self._inbox.push(value)

    def pop(self) -> Any:
        """Remove and return the front value."""
        self._refill()
        return self._outbox.pop()

    def peek(self) -> Any:
        """Return the front value without removing it."""
        self._refill()
        return self._outbox.peek()

    def __len__(self) -> int:
        return len(self._inbox) + len(self._outbox)