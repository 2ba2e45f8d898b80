import pytest

from dsakit.queues import (
    BoundedDeque,
    CircularQueue,
    LinearQueue,
    LinkedQueue,
    PriorityQueue,
    QueueEmptyError,
    QueueFullError,
)


def test_circular_queue_fifo_order():
    queue = CircularQueue()
    for value in (7, 8, 9):
        queue.enqueue(value)
    assert [queue.dequeue() for _ in range(3)] == [7, 8, 9]
    assert queue.is_empty()


def test_circular_queue_default_capacity_is_three():
    queue = CircularQueue()
    for value in (1, 2, 3):
        queue.enqueue(value)
    assert queue.is_full()
    with pytest.raises(QueueFullError):
        queue.enqueue(4)


def test_circular_queue_wraps_around():
    queue = CircularQueue()
    for value in (1, 2, 3):
        queue.enqueue(value)
    assert queue.dequeue() == 1
    queue.enqueue(4)
    assert list(queue) == [2, 3, 4]
    assert len(queue) == 3


def test_circular_queue_empty_dequeue_raises():
    queue = CircularQueue(capacity=2)
    with pytest.raises(QueueEmptyError):
        queue.dequeue()
    queue.enqueue(5)
    assert queue.dequeue() == 5
    with pytest.raises(QueueEmptyError):
        queue.dequeue()


def test_deque_both_ends():
    dq = BoundedDeque()
    dq.push_back(2)
    dq.push_front(1)
    dq.push_back(3)
    assert list(dq) == [1, 2, 3]
    assert dq.pop_front() == 1
    assert dq.pop_back() == 3
    assert list(dq) == [2]


def test_deque_capacity_and_empty():
    dq = BoundedDeque(capacity=2)
    dq.push_front(1)
    dq.push_back(2)
    with pytest.raises(QueueFullError):
        dq.push_front(3)
    with pytest.raises(QueueFullError):
        dq.push_back(3)
    dq.pop_front()
    dq.pop_back()
    assert dq.is_empty()
    with pytest.raises(QueueEmptyError):
        dq.pop_front()
    with pytest.raises(QueueEmptyError):
        dq.pop_back()


def test_deque_default_capacity_is_ten():
    dq = BoundedDeque()
    for value in range(10):
        dq.push_back(value)
    with pytest.raises(QueueFullError):
        dq.push_back(10)
    assert len(dq) == 10


def test_linear_queue_does_not_reuse_slots():
    queue = LinearQueue()
    for value in range(5):
        queue.enqueue(value)
    assert queue.dequeue() == 0
    with pytest.raises(QueueFullError):
        queue.enqueue(99)
    assert list(queue) == [1, 2, 3, 4]


def test_linear_queue_resets_when_drained():
    queue = LinearQueue(capacity=2)
    queue.enqueue(10)
    queue.enqueue(20)
    assert queue.dequeue() == 10
    assert queue.dequeue() == 20
    assert queue.is_empty()
    queue.enqueue(30)
    assert list(queue) == [30]
    with pytest.raises(QueueEmptyError):
        LinearQueue().dequeue()


def test_linked_queue_round_trip():
    queue = LinkedQueue()
    values = [4, -1, 6, 0]
    for value in values:
        queue.enqueue(value)
    assert list(queue) == values
    assert len(queue) == len(values)
    assert [queue.dequeue() for _ in values] == values
    assert queue.is_empty()
    with pytest.raises(QueueEmptyError):
        queue.dequeue()


def test_linked_queue_reusable_after_empty():
    queue = LinkedQueue()
    queue.enqueue(1)
    queue.dequeue()
    queue.enqueue(2)
    queue.enqueue(3)
    assert list(queue) == [2, 3]


def test_priority_queue_orders_by_priority():
    queue = PriorityQueue()
    queue.enqueue(5, 2)
    queue.enqueue(10, 1)
    queue.enqueue(3, 4)
    queue.enqueue(7, 3)
    out = [queue.dequeue() for _ in range(4)]
    assert out == [(10, 1), (5, 2), (7, 3), (3, 4)]
    assert queue.is_empty()


def test_priority_queue_capacity_and_empty():
    queue = PriorityQueue(capacity=1)
    queue.enqueue("a", 1)
    with pytest.raises(QueueFullError):
        queue.enqueue("b", 0)
    assert queue.dequeue() == ("a", 1)
    with pytest.raises(QueueEmptyError):
        queue.dequeue()


def test_priority_queue_many_items_sorted():
    queue = PriorityQueue()
    priorities = [9, 3, 7, 1, 8, 2, 6, 4, 5, 0]
    for p in priorities:
        queue.enqueue(p * 10, p)
    drained = [queue.dequeue()[1] for _ in priorities]
    assert drained == sorted(priorities)