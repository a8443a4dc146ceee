"""A doubly linked list with 1-based positions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator, Optional


@dataclass(eq=False)
class DoublyNode:
    """A list node linked in both directions."""

    data: Any
    prev: Optional["DoublyNode"] = field(default=None, repr=False)
    next: Optional["DoublyNode"] = field(default=None, repr=False)


class LinkedList:
    """Doubly linked list; positions count from 1."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Optional[DoublyNode] = None
        self.tail: Optional[DoublyNode] = None
        self._size = 0
        for item in items:
            self.append(item)

    def add(self, data: Any) -> None:
        """Insert ``data`` at the front."""
        node = DoublyNode(data, None, self.head)
        if self.head is None:
            self.tail = node
        else:
            self.head.prev = node
        self.head = node
        self._size += 1

    def append(self, data: Any) -> None:
        """Insert ``data`` at the back."""
        node = DoublyNode(data, self.tail, None)
        if self.tail is None:
            self.head = node
        else:
            self.tail.next = node
        self.tail = node
        self._size += 1

    def insert(self, data: Any, index: int) -> None:
        """Insert ``data`` after the ``index``-th element.

        An index past the end appends; an index of 0 or less prepends.
        """
        if index >= self._size:
            self.append(data)
            return
        if index <= 0:
            self.add(data)
            return
        node = self.get(index)
        new = DoublyNode(data, node, node.next)
        node.next.prev = new
        node.next = new
        self._size += 1

    def _nodes(self) -> Iterator[DoublyNode]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def get(self, index: int) -> DoublyNode:
        """Return the ``index``-th node."""
        if not 1 <= index <= self._size:
            raise IndexError(f"position {index} out of range")
        for position, node in enumerate(self._nodes(), start=1):
            if position == index:
                return node
        raise IndexError(f"position {index} out of range")

    def delete(self, index: int) -> DoublyNode:
        """Remove and return the ``index``-th node."""
        node = self.get(index)
        if node.prev is None:
            self.head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self.tail = node.prev
        else:
            node.next.prev = node.prev
        node.prev = node.next = None
        self._size -= 1
        return node

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.data

    def __reversed__(self) -> Iterator[Any]:
        node = self.tail
        while node is not None:
            yield node.data
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"