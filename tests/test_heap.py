import random

import pytest

from spotifind.heap import Heap


def test_empty_heap_has_no_top():
    heap = Heap()
    assert heap.top() is None
    assert len(heap) == 0


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        Heap().pop()


def test_top_is_highest_priority():
    heap = Heap()
    heap.push("low", 1)
    heap.push("high", 9)
    heap.push("mid", 5)
    assert heap.top() == "high"
    assert len(heap) == 3


def test_pop_returns_items_in_priority_order():
    heap = Heap()
    for name, priority in [("c", 3), ("a", 7), ("d", 1), ("b", 5)]:
        heap.push(name, priority)
    assert [heap.pop() for _ in range(4)] == ["a", "b", "c", "d"]
    assert len(heap) == 0


def test_equal_priority_keeps_first_on_top():
    heap = Heap()
    heap.push("first", 4)
    heap.push("second", 4)
    assert heap.top() == "first"


def test_random_pushes_pop_in_descending_order():
    rng = random.Random(1234)
    priorities = [rng.randint(-50, 50) for _ in range(300)]
    heap = Heap()
    for priority in priorities:
        heap.push(priority, priority)
    popped = [heap.pop() for _ in range(len(priorities))]
    assert popped == sorted(priorities, reverse=True)


def test_interleaved_push_and_pop():
    heap = Heap()
    heap.push("x", 2)
    heap.push("y", 8)
    assert heap.pop() == "y"
    heap.push("z", 6)
    assert heap.top() == "z"
    assert heap.pop() == "z"
    assert heap.pop() == "x"
    assert heap.top() is None