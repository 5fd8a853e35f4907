"""
Tests for remove_front / peek.

remove_front hands back the lowest priority element; on an empty queue
both it and peek return the empty value instead of raising.
"""

import random

from pqueue.heap import MinHeapPriorityQueue, is_min_heap


def test_removes_in_priority_order(queue):
    """Core guarantee: priorities [5, 1, 3, 2, 4] come back out as 1..5."""
    for priority in [5, 1, 3, 2, 4]:
        queue.insert(priority, f"p{priority}")

    assert [queue.remove_front() for _ in range(5)] == ["p1", "p2", "p3", "p4", "p5"]
    assert queue.empty()


def test_remove_front_restores_heap(filled_queue):
    """Last entry (g7) moves to the root, then sinks past b1 and d2."""
    assert filled_queue.remove_front() == "a"
    assert filled_queue.get_all_elements() == ["b", "d", "c", "g", "e", "f"]
    assert filled_queue.get_all_priorities() == [1, 2, 5, 7, 3, 6]


def test_remove_last_entry_leaves_empty(queue):
    queue.insert(3, "only")

    assert queue.remove_front() == "only"
    assert queue.size() == 0
    assert queue.empty()


def test_remove_front_from_empty_returns_empty_value(queue):
    assert queue.remove_front() == ""
    assert queue.size() == 0


def test_empty_value_defaults_to_none():
    queue = MinHeapPriorityQueue()
    assert queue.remove_front() is None
    assert queue.peek() is None


def test_empty_value_is_built_fresh_each_time():
    queue = MinHeapPriorityQueue(default_factory=list)
    first = queue.peek()
    first.append("mutated")

    assert queue.peek() == []


def test_fresh_queue_state(queue):
    assert queue.size() == 0
    assert queue.empty()
    assert queue.peek() == ""
    assert queue.remove_front() == ""
    assert queue.get_all_elements() == []
    assert queue.get_all_priorities() == []


def test_peek_does_not_remove(queue):
    queue.insert(10, "low")
    queue.insert(1, "high")

    assert queue.peek() == "high"
    assert queue.peek() == "high"
    assert queue.size() == 2


def test_size_conservation(queue):
    queue.insert_all([(2, "a"), (1, "b")])

    queue.remove_front()
    assert queue.size() == 1
    queue.remove_front()
    assert queue.size() == 0
    queue.remove_front()
    assert queue.size() == 0


def test_equal_priorities_all_come_out(queue):
    queue.insert_all([(3, "x"), (3, "y"), (1, "z"), (3, "w")])

    assert queue.remove_front() == "z"
    assert sorted(queue.remove_front() for _ in range(3)) == ["w", "x", "y"]


def test_heap_property_under_random_workload():
    """Interleave inserts and removals; the invariant holds after every step."""
    rng = random.Random(1234)
    queue = MinHeapPriorityQueue(default_factory=str)
    shadow = []

    for step in range(500):
        if shadow and rng.random() < 0.4:
            expected_min = min(p for p, _ in shadow)
            element = queue.remove_front()
            removed = next(pair for pair in shadow if pair[1] == element)
            assert removed[0] == expected_min
            shadow.remove(removed)
        else:
            priority = rng.randint(0, 50)
            queue.insert(priority, f"e{step}")
            shadow.append((priority, f"e{step}"))

        assert queue.size() == len(shadow)
        assert is_min_heap(queue.get_all_priorities())

    drained = []
    while not queue.empty():
        drained.append(queue.get_priority(queue.peek()))
        queue.remove_front()
    assert drained == sorted(drained)
