import pytest

from algokit.queue import Queue, TwoStackQueue

KINDS = ["plain", "two_stack"]


@pytest.mark.parametrize("kind", KINDS)
def test_fifo_order(kind):
    items = ["a", "b", "c"]
    queue = Queue() if kind == "plain" else TwoStackQueue()
    for item in items:
        queue.push(item)
    assert len(queue) == len(items)
    assert [queue.pop() for _ in items] == items
    assert not queue


@pytest.mark.parametrize("kind", KINDS)
def test_peek_keeps_front(kind):
    queue = Queue() if kind == "plain" else TwoStackQueue()
    queue.push(1)
    queue.push(2)
    assert queue.peek() == 1
    assert queue.peek() == 1
    assert queue.pop() == 1
    assert queue.peek() == 2


@pytest.mark.parametrize("kind", KINDS)
def test_interleaved_push_and_pop(kind):
    queue = Queue() if kind == "plain" else TwoStackQueue()
    queue.push(1)
    queue.push(2)
    first = queue.pop()
    queue.push(3)
    rest = [queue.pop(), queue.pop()]
    assert [first] + rest == [1, 2, 3]


@pytest.mark.parametrize("kind", KINDS)
def test_empty_raises(kind):
    queue = Queue() if kind == "plain" else TwoStackQueue()
    with pytest.raises(IndexError):
        queue.pop()
    with pytest.raises(IndexError):
        queue.peek()


def test_queue_clear():
    queue = Queue([1, 2, 3])
    queue.clear()
    assert not queue
    with pytest.raises(IndexError):
        queue.pop()


def test_two_stack_queue_ignores_none():
    queue = TwoStackQueue()
    queue.push(None)
    queue.push("x")
    assert len(queue) == len(["x"])
    assert queue.pop() == "x"