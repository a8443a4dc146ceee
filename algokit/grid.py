"""Puzzles on character grids."""

from __future__ import annotations

from collections import Counter
from typing import Sequence


def find_lonely_pixel(picture: Sequence[Sequence[str]]) -> int:
    """Count black pixels ("B") that are alone in both their row and column."""
    black = [
        (i, j)
        for i, row in enumerate(picture)
        for j, cell in enumerate(row)
        if cell == "B"
    ]
    rows = Counter(i for i, _ in black)
    cols = Counter(j for _, j in black)
    return sum(1 for i, j in black if rows[i] == 1 and cols[j] == 1)


def valid_word_square(words: Sequence[str]) -> bool:
    """True when the k-th row reads the same as the k-th column for every k."""
    for i, word in enumerate(words):
        for j, ch in enumerate(word):
            if j >= len(words) or i >= len(words[j]) or ch != words[j][i]:
                return False
    return True