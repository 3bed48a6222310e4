from collections import deque

import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.queues import (
    CircularQueue,
    Deque,
    LinearQueue,
    QueueOverflow,
    QueueUnderflow,
)


def test_circular_fifo_order():
    queue = CircularQueue()
    for value in (1, 2, 3):
        queue.enqueue(value)
    assert queue.dequeue() == 1
    assert list(queue) == [2, 3]
    assert len(queue) == 2


def test_circular_default_capacity_is_ten():
    queue = CircularQueue()
    for value in range(10):
        queue.enqueue(value)
    with pytest.raises(QueueOverflow):
        queue.enqueue(99)
    assert len(queue) == 10


def test_circular_wraps_around():
    queue = CircularQueue(3)
    for value in (1, 2, 3):
        queue.enqueue(value)
    queue.dequeue()
    queue.enqueue(4)
    assert list(queue) == [2, 3, 4]


def test_circular_underflow():
    queue = CircularQueue(2)
    with pytest.raises(QueueUnderflow):
        queue.dequeue()
    queue.enqueue(5)
    assert queue.dequeue() == 5
    with pytest.raises(QueueUnderflow):
        queue.dequeue()


@pytest.mark.parametrize("cls", [CircularQueue, LinearQueue])
def test_invalid_capacity(cls):
    with pytest.raises(ValueError):
        cls(0)


@given(
    st.integers(min_value=1, max_value=6),
    st.lists(st.one_of(st.integers(), st.none()), max_size=40),
)
def test_circular_matches_bounded_model(capacity, operations):
    queue = CircularQueue(capacity)
    model = deque()
    for operation in operations:
        if operation is None:
            if model:
                assert queue.dequeue() == model.popleft()
            else:
                with pytest.raises(QueueUnderflow):
                    queue.dequeue()
        elif len(model) == capacity:
            with pytest.raises(QueueOverflow):
                queue.enqueue(operation)
        else:
            queue.enqueue(operation)
            model.append(operation)
        assert list(queue) == list(model)


def test_linear_default_capacity_is_five():
    queue = LinearQueue()
    for char in "abcde":
        queue.enqueue(char)
    with pytest.raises(QueueOverflow):
        queue.enqueue("f")


def test_linear_slots_not_reused_until_empty():
    queue = LinearQueue(3)
    for char in "xyz":
        queue.enqueue(char)
    assert queue.dequeue() == "x"
    with pytest.raises(QueueOverflow):
        queue.enqueue("w")
    assert list(queue) == ["y", "z"]


def test_linear_resets_after_emptying():
    queue = LinearQueue(2)
    queue.enqueue("a")
    queue.enqueue("b")
    queue.dequeue()
    queue.dequeue()
    queue.enqueue("c")
    queue.enqueue("d")
    assert list(queue) == ["c", "d"]


def test_linear_underflow():
    with pytest.raises(QueueUnderflow):
        LinearQueue().dequeue()


def test_deque_front_and_back():
    dq = Deque()
    dq.push_back(1)
    dq.push_front(2)
    dq.push_back(3)
    dq.push_front(4)
    assert list(dq) == [4, 2, 1, 3]
    assert dq.pop_front() == 4
    assert dq.pop_back() == 3
    assert list(dq) == [2, 1]
    dq.push_front(7)
    dq.push_back(8)
    assert list(dq) == [7, 2, 1, 8]
    assert len(dq) == 4


def test_deque_underflow():
    dq = Deque()
    with pytest.raises(QueueUnderflow):
        dq.pop_front()
    with pytest.raises(QueueUnderflow):
        dq.pop_back()


@given(st.lists(st.integers()))
def test_deque_push_back_then_pop_front_is_fifo(values):
    dq = Deque()
    for value in values:
        dq.push_back(value)
    assert [dq.pop_front() for _ in values] == values
    assert len(dq) == 0


@given(st.lists(st.integers()))
def test_deque_push_front_reverses(values):
    dq = Deque()
    for value in values:
        dq.push_front(value)
    assert list(dq) == values[::-1]