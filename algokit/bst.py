"""Binary search trees: building, searching, checking and walking by level."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Iterator, Optional, Sequence

from .linked_lists import ListNode


@dataclass(eq=False)
class TreeNode:
    """A binary tree node; identity decides equality."""

    val: int
    left: Optional["TreeNode"] = field(default=None, repr=False)
    right: Optional["TreeNode"] = field(default=None, repr=False)

    def search(self, value: int) -> Optional["TreeNode"]:
        """Node holding ``value`` in this search tree, or None."""
        node: Optional[TreeNode] = self
        while node is not None:
            if value == node.val:
                return node
            node = node.right if value > node.val else node.left
        return None

    def insert(self, node: "TreeNode") -> None:
        """Attach ``node`` at its place in this search tree; duplicates are ignored."""
        current = self
        while True:
            if node.val == current.val:
                return
            if node.val < current.val:
                if current.left is None:
                    current.left = node
                    return
                current = current.left
            else:
                if current.right is None:
                    current.right = node
                    return
                current = current.right


def _build(nums: Sequence[int], start: int, end: int) -> Optional[TreeNode]:
    if end < start:
        return None
    mid = start + (end - start) // 2
    return TreeNode(nums[mid], _build(nums, start, mid - 1), _build(nums, mid + 1, end))


def sorted_array_to_bst(nums: Sequence[int]) -> Optional[TreeNode]:
    """Height-balanced search tree holding the sorted ``nums``."""
    if not nums:
        return None
    mid = len(nums) // 2
    return TreeNode(nums[mid], _build(nums, 0, mid - 1), _build(nums, mid + 1, len(nums) - 1))


def list_of_depth(tree: Optional[TreeNode]) -> list[ListNode]:
    """One linked list per level of the tree, each read left to right."""
    levels: list[ListNode] = []
    level = [tree] if tree is not None else []
    while level:
        head = None
        for node in reversed(level):
            head = ListNode(node.val, head)
        levels.append(head)
        level = [child for node in level for child in (node.left, node.right) if child]
    return levels


def is_valid_bst(root: Optional[TreeNode]) -> bool:
    """True when every left subtree is strictly smaller and every right one strictly larger."""
    pending = deque([(root, None, None)])
    while pending:
        node, lower, upper = pending.popleft()
        if node is None:
            continue
        if (lower is not None and node.val <= lower) or (
            upper is not None and node.val >= upper
        ):
            return False
        pending.append((node.left, lower, node.val))
        pending.append((node.right, node.val, upper))
    return True


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


def inorder_successor(root: Optional[TreeNode], p: TreeNode) -> Optional[TreeNode]:
    """First node in in-order that holds a value larger than ``p``'s, or None."""
    return next((node for node in _inorder(root) if node.val > p.val), None)