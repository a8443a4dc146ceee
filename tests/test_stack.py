import pytest

from algokit.stack import Stack


def test_pop_returns_values_in_reverse_order():
    items = [1, 2, 3]
    stack = Stack(items)
    popped = [stack.pop() for _ in items]
    assert popped == items[::-1]
    assert not stack


def test_peek_does_not_remove():
    stack = Stack()
    stack.push("a")
    stack.push("b")
    assert stack.peek() == "b"
    assert len(stack) == len(["a", "b"])
    assert stack.values() == ["a", "b"]


def test_push_ignores_none():
    stack = Stack(["x"])
    stack.push(None)
    assert stack.values() == ["x"]


def test_values_is_a_copy():
    items = [4, 5]
    stack = Stack(items)
    snapshot = stack.values()
    snapshot.append(6)
    assert stack.values() == items


def test_clear_empties_stack():
    stack = Stack([1, 2])
    stack.clear()
    assert not stack
    assert stack.values() == []


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        Stack().pop()


def test_peek_empty_raises():
    with pytest.raises(IndexError):
        Stack().peek()