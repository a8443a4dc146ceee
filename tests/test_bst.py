import pytest

from algokit.bst import (
    TreeNode,
    inorder_successor,
    is_valid_bst,
    list_of_depth,
    sorted_array_to_bst,
)


def inorder(node):
    if node is None:
        return []
    return inorder(node.left) + [node.val] + inorder(node.right)


def depth(node):
    if node is None:
        return 0
    return 1 + max(depth(node.left), depth(node.right))


def chain_values(head):
    out = []
    while head is not None:
        out.append(head.val)
        head = head.next
    return out


@pytest.mark.parametrize("nums", [[1], [1, 2], [-10, -3, 0, 5, 9], list(range(20))])
def test_sorted_array_to_bst(nums):
    root = sorted_array_to_bst(nums)
    assert inorder(root) == nums
    assert is_valid_bst(root)
    assert depth(root) == len(nums).bit_length()


def test_sorted_array_to_bst_empty():
    assert sorted_array_to_bst([]) is None


def test_search_and_insert():
    root = TreeNode(5)
    values = [3, 8, 1, 4, 7, 9, 3]
    for value in values:
        root.insert(TreeNode(value))
    assert inorder(root) == sorted(set(values + [5]))
    assert is_valid_bst(root)
    for value in values:
        assert root.search(value).val == value
    assert root.search(6) is None


def test_is_valid_bst_rejects():
    assert not is_valid_bst(TreeNode(5, TreeNode(1), TreeNode(4, TreeNode(3), TreeNode(6))))
    assert not is_valid_bst(TreeNode(2, TreeNode(2)))
    assert not is_valid_bst(TreeNode(5, TreeNode(4), TreeNode(6, TreeNode(3), TreeNode(7))))
    assert is_valid_bst(None)


def test_list_of_depth():
    nums = [1, 2, 3]
    root = sorted_array_to_bst(nums)
    levels = [chain_values(head) for head in list_of_depth(root)]
    assert levels == [[2], [1, 3]]


def test_list_of_depth_covers_all_levels():
    nums = list(range(10))
    root = sorted_array_to_bst(nums)
    levels = [chain_values(head) for head in list_of_depth(root)]
    assert len(levels) == depth(root)
    assert sorted(v for level in levels for v in level) == nums
    assert levels[0] == [root.val]
    assert list_of_depth(None) == []


def test_inorder_successor():
    nums = [1, 3, 5, 7, 9]
    root = sorted_array_to_bst(nums)
    for value, following in zip(nums, nums[1:]):
        assert inorder_successor(root, root.search(value)).val == following
    assert inorder_successor(root, root.search(nums[-1])) is None