"""An undirected graph with breadth-first traversal, and two grid searches."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from collections import deque
from typing import Any, MutableSequence, Sequence


@dataclass(eq=False)
class GraphNode:
    """A graph vertex carrying a value; identity decides equality."""

    value: Any

    def __str__(self) -> str:
        return str(self.value)


class Graph:
    """Undirected graph kept as adjacency lists; safe to share between threads."""

    def __init__(self) -> None:
        self.nodes: list[GraphNode] = []
        self.edges: dict[GraphNode, list[GraphNode]] = {}
        self._lock = threading.Lock()

    def add_node(self, node: GraphNode) -> None:
        """Register ``node`` as a vertex."""
        with self._lock:
            self.nodes.append(node)

    def add_edge(self, u: GraphNode, v: GraphNode) -> None:
        """Connect ``u`` and ``v`` in both directions."""
        with self._lock:
            self.edges.setdefault(u, []).append(v)
            self.edges.setdefault(v, []).append(u)

    def bfs(self, start: GraphNode) -> list[GraphNode]:
        """Return the nodes reachable from ``start`` in breadth-first order."""
        with self._lock:
            order: list[GraphNode] = []
            visited = {start}
            pending = deque([start])
            while pending:
                node = pending.popleft()
                for neighbour in self.edges.get(node, ()):
                    if neighbour not in visited:
                        visited.add(neighbour)
                        pending.append(neighbour)
                order.append(node)
            return order

    def __str__(self) -> str:
        with self._lock:
            lines = []
            for node in self.nodes:
                neighbours = "".join(f"{n} " for n in self.edges.get(node, ()))
                lines.append(f"{node} -> {neighbours}\n")
            return "".join(lines)


def path_with_obstacles(grid: Sequence[Sequence[int]]) -> list[list[int]]:
    """A path of ``[row, col]`` cells from the top left to the bottom right.

    Moves go down or right only; cells holding 1 are blocked. Returns an
    empty list when no path exists.
    """
    if not grid or not grid[0]:
        return []
    rows, cols = len(grid), len(grid[0])
    visited: set[tuple[int, int]] = set()
    path: list[list[int]] = []

    def walk(r: int, c: int) -> bool:
        if grid[r][c] == 1 or (r, c) in visited:
            return False
        visited.add((r, c))
        path.append([r, c])
        if r == rows - 1 and c == cols - 1:
            return True
        if r < rows - 1 and walk(r + 1, c):
            return True
        if c < cols - 1 and walk(r, c + 1):
            return True
        path.pop()
        return False

    return path if walk(0, 0) else []


def flood_fill(
    image: MutableSequence[MutableSequence[int]], sr: int, sc: int, new_color: int
) -> MutableSequence[MutableSequence[int]]:
    """Recolour, in place, the 4-connected region holding ``(sr, sc)``; return ``image``."""
    if not (0 <= sr < len(image) and 0 <= sc < len(image[sr])):
        raise IndexError(f"start ({sr}, {sc}) outside the image")
    old_color = image[sr][sc]
    seen = {(sr, sc)}
    pending = [(sr, sc)]
    while pending:
        r, c = pending.pop()
        image[r][c] = new_color
        for nr, nc in ((r - 1, c), (r + 1, c), (r, c - 1), (r, c + 1)):
            if (
                0 <= nr < len(image)
                and 0 <= nc < len(image[nr])
                and (nr, nc) not in seen
                and image[nr][nc] == old_color
            ):
                seen.add((nr, nc))
                pending.append((nr, nc))
    return image