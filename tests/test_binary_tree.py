import pytest

from algokit.binary_tree import (
    check_sub_tree,
    height,
    is_balanced,
    lowest_common_ancestor,
    path_sum,
)
from algokit.bst import TreeNode, sorted_array_to_bst


def chain(values):
    root = None
    for value in reversed(values):
        root = TreeNode(value, root)
    return root


def test_balanced_tree():
    root = sorted_array_to_bst(list(range(15)))
    assert is_balanced(root)
    assert height(root) == (15).bit_length()
    assert height(None) == 0
    assert is_balanced(None)


def test_unbalanced_tree():
    root = chain([1, 2, 3])
    assert not is_balanced(root)
    assert height(root) < 0
    assert is_balanced(chain([1, 2]))
    assert height(chain([1, 2])) == len([1, 2])


def test_lowest_common_ancestor():
    a, b = TreeNode(6), TreeNode(4)
    c = TreeNode(2, TreeNode(7), b)
    left = TreeNode(5, a, c)
    right = TreeNode(1, TreeNode(0), TreeNode(8))
    root = TreeNode(3, left, right)
    assert lowest_common_ancestor(root, a, b) is left
    assert lowest_common_ancestor(root, left, right.left) is root
    assert lowest_common_ancestor(root, c, b) is c
    assert lowest_common_ancestor(None, a, b) is None


def test_check_sub_tree_matches_values():
    root = sorted_array_to_bst([1, 2, 3, 4, 5])
    assert check_sub_tree(root, TreeNode(4))
    assert not check_sub_tree(root, TreeNode(6))
    with pytest.raises(ValueError):
        check_sub_tree(root, None)


def test_path_sum():
    root = TreeNode(1, TreeNode(2), TreeNode(3))
    assert path_sum(root, 3) == 2
    assert path_sum(root, 100) == 0
    assert path_sum(None, 0) == 0


def test_path_sum_on_chain_counts_each_suffix():
    values = [0, 0, 0]
    assert path_sum(chain(values), 0) == len(values)