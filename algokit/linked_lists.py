"""Singly linked list puzzles, a list with random pointers, and an LRU cache."""

from __future__ import annotations

from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Iterator, MutableSequence, Optional


@dataclass(eq=False)
class ListNode:
    """A singly linked list node; identity decides equality."""

    val: int
    next: Optional["ListNode"] = field(default=None, repr=False)


@dataclass(eq=False)
class RandomNode:
    """A list node with an extra pointer to any node of the list, or None."""

    val: int
    next: Optional["RandomNode"] = field(default=None, repr=False)
    random: Optional["RandomNode"] = field(default=None, repr=False)


def _walk(head):
    node = head
    while node is not None:
        yield node
        node = node.next


def _link(nodes: list) -> Optional[ListNode]:
    for current, following in zip(nodes, nodes[1:]):
        current.next = following
    if nodes:
        nodes[-1].next = None
        return nodes[0]
    return None


def copy_random_list(head: Optional[RandomNode]) -> Optional[RandomNode]:
    """Deep copy of a list whose nodes also point at random nodes."""
    copies = {node: RandomNode(node.val) for node in _walk(head)}
    for original, copy in copies.items():
        copy.next = copies.get(original.next)
        copy.random = copies.get(original.random)
    return copies.get(head)


def delete_node(node: ListNode) -> None:
    """Remove ``node`` from its list by taking over its successor's value.

    The node must not be the last one of its list.
    """
    if node.next is None:
        raise ValueError("cannot delete the last node this way")
    node.val = node.next.val
    node.next = node.next.next


def odd_even_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Relink the list so the nodes at odd positions come before those at even ones."""
    nodes = list(_walk(head))
    return _link(nodes[0::2] + nodes[1::2])


def has_cycle(head: Optional[ListNode]) -> bool:
    """True when following ``next`` from ``head`` never reaches the end."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def sort_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Relink the nodes in ascending order of value (stable); return the new head."""
    return _link(sorted(_walk(head), key=lambda node: node.val))


def get_intersection_node(
    head_a: Optional[ListNode], head_b: Optional[ListNode]
) -> Optional[ListNode]:
    """First node shared by both lists, or None."""
    seen = set(_walk(head_a))
    return next((node for node in _walk(head_b) if node in seen), None)


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse the list in place; return the new head."""
    previous = None
    node = head
    while node is not None:
        node.next, previous, node = previous, node, node.next
    return previous


def delete_value(head: Optional[ListNode], val: int) -> Optional[ListNode]:
    """Unlink the first node holding ``val``; return the head."""
    previous = None
    for node in _walk(head):
        if node.val == val:
            if previous is None:
                return node.next
            previous.next = node.next
            return head
        previous = node
    return head


def get_kth_from_end(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """The ``k``-th node counted from the end (1 is the last); None for ``k`` of 0."""
    if k < 0:
        raise ValueError("k must not be negative")
    fast = head
    for _ in range(k):
        if fast is None:
            raise ValueError("k is longer than the list")
        fast = fast.next
    slow = head
    while fast is not None:
        slow = slow.next
        fast = fast.next
    return slow


def merge_two_lists(
    l1: Optional[ListNode], l2: Optional[ListNode]
) -> Optional[ListNode]:
    """Splice two sorted lists into one sorted list; return its head."""
    dummy = ListNode(0)
    tail = dummy
    while l1 is not None and l2 is not None:
        if l1.val < l2.val:
            tail.next, l1 = l1, l1.next
        else:
            tail.next, l2 = l2, l2.next
        tail = tail.next
    tail.next = l1 if l1 is not None else l2
    return dummy.next


def exchange(nums: MutableSequence[int]) -> MutableSequence[int]:
    """Reorder ``nums`` in place so odd values come before even ones; return it."""
    left, right = 0, len(nums) - 1
    while True:
        while left < len(nums) and nums[left] & 1:
            left += 1
        while right >= 0 and not nums[right] & 1:
            right -= 1
        if left >= len(nums) or right < 0 or left >= right:
            return nums
        nums[left], nums[right] = nums[right], nums[left]


class LRUCache:
    """Key-value cache that evicts the least recently used key when full."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._entries: OrderedDict[int, int] = OrderedDict()

    def get(self, key: int) -> int:
        """Value stored under ``key``, or -1; marks the key as recently used."""
        if key not in self._entries:
            return -1
        self._entries.move_to_end(key)
        return self._entries[key]

    def put(self, key: int, value: int) -> None:
        """Store ``value`` under ``key``, evicting the oldest key if needed."""
        if key in self._entries:
            self._entries.move_to_end(key)
        elif len(self._entries) >= self.capacity:
            self._entries.popitem(last=False)
        self._entries[key] = value

    def __len__(self) -> int:
        return len(self._entries)

    def _keys(self) -> Iterator[int]:
        return iter(self._entries)