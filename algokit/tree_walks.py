"""Binary tree traversals, a string codec for trees, and structural checks."""

from __future__ import annotations

from collections import deque
from typing import Iterator, Optional

from .bst import TreeNode

_NULL = "null"


class Codec:
    """Turns a binary tree into a comma-separated pre-order string and back.

    Missing children are written as ``null``.
    """

    def serialize(self, root: Optional[TreeNode]) -> str:
        """Encode ``root`` as a string."""
        parts: list[str] = []
        stack: list[Optional[TreeNode]] = [root]
        while stack:
            node = stack.pop()
            if node is None:
                parts.append(_NULL)
                continue
            parts.append(str(node.val))
            stack.append(node.right)
            stack.append(node.left)
        return ",".join(parts)

    def deserialize(self, data: str) -> Optional[TreeNode]:
        """Rebuild the tree encoded by :meth:`serialize`."""
        tokens: Iterator[str] = iter(data.split(","))

        def build() -> Optional[TreeNode]:
            try:
                token = next(tokens)
            except StopIteration:
                raise ValueError("truncated tree encoding") from None
            if token == _NULL:
                return None
            try:
                value = int(token)
            except ValueError:
                raise ValueError(f"invalid node value {token!r}") from None
            node = TreeNode(value)
            node.left = build()
            node.right = build()
            return node

        root = build()
        if next(tokens, None) is not None:
            raise ValueError("trailing data after tree encoding")
        return root


def _inorder(root: Optional[TreeNode]) -> Iterator[TreeNode]:
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node
        node = node.right


def kth_smallest(root: Optional[TreeNode], k: int) -> int:
    """The ``k``-th smallest value (1-based) of a binary search tree."""
    if k >= 1:
        for position, node in enumerate(_inorder(root), start=1):
            if position == k:
                return node.val
    raise ValueError(f"k={k} is out of range for this tree")


def lowest_common_ancestor_by_value(
    root: Optional[TreeNode], p: TreeNode, q: TreeNode
) -> Optional[TreeNode]:
    """Deepest node with nodes holding ``p.val`` and ``q.val`` at or below it."""
    if root is None:
        return None
    if root.val == p.val or root.val == q.val:
        return root
    left = lowest_common_ancestor_by_value(root.left, p, q)
    right = lowest_common_ancestor_by_value(root.right, p, q)
    if left is not None and right is not None:
        return root
    return left if left is not None else right


def _levels(root: Optional[TreeNode]) -> Iterator[list[int]]:
    level = [root] if root is not None else []
    while level:
        yield [node.val for node in level]
        level = [child for node in level for child in (node.left, node.right) if child]


def level_order(root: Optional[TreeNode]) -> list[int]:
    """Values in breadth-first order, each level left to right."""
    return [value for level in _levels(root) for value in level]


def level_order_groups(root: Optional[TreeNode]) -> list[list[int]]:
    """Values grouped by level, each level left to right."""
    return list(_levels(root))


def level_order_zigzag(root: Optional[TreeNode]) -> list[list[int]]:
    """Values grouped by level; the first level and every other one read left to right."""
    return [
        level if depth % 2 == 0 else level[::-1]
        for depth, level in enumerate(_levels(root))
    ]


def _matches_at(root: Optional[TreeNode], pattern: Optional[TreeNode]) -> bool:
    if pattern is None:
        return True
    if root is None or root.val != pattern.val:
        return False
    return _matches_at(root.left, pattern.left) and _matches_at(root.right, pattern.right)


def is_sub_structure(a: Optional[TreeNode], b: Optional[TreeNode]) -> bool:
    """True when ``b`` matches, by value, the shape of ``a`` below some node.

    An empty ``b`` is never a sub-structure.
    """
    if b is None:
        return False
    return any(_matches_at(node, b) for node in _inorder(a))


def mirror_tree(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Swap left and right children throughout the tree, in place; return ``root``."""
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        node.left, node.right = node.right, node.left
        stack.extend(child for child in (node.left, node.right) if child is not None)
    return root


def is_symmetric(root: Optional[TreeNode]) -> bool:
    """True when the tree is its own mirror image."""
    if root is None:
        return True
    pending = deque([(root.left, root.right)])
    while pending:
        left, right = pending.popleft()
        if left is None and right is None:
            continue
        if left is None or right is None or left.val != right.val:
            return False
        pending.append((left.left, right.right))
        pending.append((left.right, right.left))
    return True