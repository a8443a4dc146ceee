"""A set of strings."""

from __future__ import annotations

from typing import Iterable, Iterator


class StringSet:
    """Unordered collection of distinct strings."""

    def __init__(self, keys: Iterable[str] = ()) -> None:
        self._keys: set[str] = set(keys)

    def add(self, key: str) -> None:
        """Add ``key``."""
        self._keys.add(key)

    def discard(self, key: str) -> None:
        """Remove ``key`` if present."""
        self._keys.discard(key)

    def __contains__(self, key: object) -> bool:
        return key in self._keys

    def __iter__(self) -> Iterator[str]:
        return iter(self._keys)

    def __len__(self) -> int:
        return len(self._keys)