"""A last-in first-out stack backed by a Python list."""

from __future__ import annotations

from typing import Any, Iterable


class Stack:
    """Last-in first-out container.

    ``None`` is never stored: pushing it is silently ignored.
    """

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items: list[Any] = []
        for item in items:
            self.push(item)

    def push(self, value: Any) -> None:
        """Put ``value`` on top of the stack, ignoring ``None``."""
        if value is None:
            return
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value."""
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top value without removing it."""
        if not self._items:
            raise IndexError("peek at empty stack")
        return self._items[-1]

    def clear(self) -> None:
        """Remove every value."""
        self._items.clear()

    def values(self) -> list[Any]:
        """Return a copy of the contents, bottom first."""
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"