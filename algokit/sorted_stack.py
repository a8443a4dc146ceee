"""A stack that keeps its smallest element on top."""

from __future__ import annotations

from typing import Any, Iterable


class SortedStack:
    """Stack ordered so that the smallest value is always on top."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items: list[Any] = []
        for item in items:
            self.push(item)

    def push(self, value: Any) -> None:
        """Insert ``value`` at its sorted position."""
        moved = []
        while self._items and self._items[-1] < value:
            moved.append(self._items.pop())
        self._items.append(value)
        self._items.extend(reversed(moved))

    def pop(self) -> Any:
        """Remove and return the smallest value."""
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the smallest value without removing it."""
        if not self._items:
            raise IndexError("peek at empty stack")
        return self._items[-1]

    def is_empty(self) -> bool:
        """Return True when nothing is stored."""
        return not self._items

    def clear(self) -> None:
        """Remove every value."""
        self._items.clear()

    def values(self) -> list[Any]:
        """Return a copy of the contents, bottom (largest) first."""
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)