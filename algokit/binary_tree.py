"""Puzzles on general binary trees."""

from __future__ import annotations

from typing import Iterator, Optional

from .bst import TreeNode


def _preorder(root: Optional[TreeNode]) -> Iterator[TreeNode]:
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        yield node
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def height(tree: Optional[TreeNode]) -> int:
    """Height of the tree, or -1 when some subtree is not balanced."""
    if tree is None:
        return 0
    left = height(tree.left)
    if left == -1:
        return -1
    right = height(tree.right)
    if right == -1 or abs(left - right) > 1:
        return -1
    return max(left, right) + 1


def is_balanced(tree: Optional[TreeNode]) -> bool:
    """True when every node's subtrees differ in height by at most one."""
    return height(tree) >= 0


def lowest_common_ancestor(
    root: Optional[TreeNode], p: TreeNode, q: TreeNode
) -> Optional[TreeNode]:
    """Deepest node having both ``p`` and ``q`` (by identity) below or at it."""
    if root is None:
        return None
    if root is p or root is q:
        return root
    left = lowest_common_ancestor(root.left, p, q)
    right = lowest_common_ancestor(root.right, p, q)
    if left is not None and right is not None:
        return root
    return left if left is not None else right


def check_sub_tree(t1: Optional[TreeNode], t2: TreeNode) -> bool:
    """True when some node of ``t1`` holds the same value as the root of ``t2``."""
    if t2 is None:
        raise ValueError("t2 must be a tree")
    return any(node.val == t2.val for node in _preorder(t1))


def path_sum(root: Optional[TreeNode], total: int) -> int:
    """Count downward paths, from any node to a leaf, whose values add up to ``total``."""

    def from_node(node: TreeNode, running: int) -> int:
        running += node.val
        if node.left is None and node.right is None:
            return int(running == total)
        return sum(
            from_node(child, running)
            for child in (node.left, node.right)
            if child is not None
        )

    return sum(from_node(node, 0) for node in _preorder(root))