"""A prefix tree for fast word lookup."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional


@dataclass
class _TrieNode:
    children: dict[str, "_TrieNode"] = field(default_factory=dict)
    is_word: bool = False


class Trie:
    """Set of words that also answers prefix queries."""

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._root = _TrieNode()
        for word in words:
            self.insert(word)

    def insert(self, word: str) -> None:
        """Add ``word``."""
        node = self._root
        for ch in word:
            node = node.children.setdefault(ch, _TrieNode())
        node.is_word = True

    def _find(self, text: str) -> Optional[_TrieNode]:
        node = self._root
        for ch in text:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def search(self, word: str) -> bool:
        """True when ``word`` was inserted."""
        node = self._find(word)
        return node is not None and node.is_word

    def starts_with(self, prefix: str) -> bool:
        """True when some inserted word begins with ``prefix``."""
        return self._find(prefix) is not None

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.search(word)