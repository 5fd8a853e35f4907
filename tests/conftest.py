"""
Shared test fixtures.

Queues are built with explicit priority_lookup / reheapify_on_change
values so tests don't depend on whatever PQ_* variables happen to be set
in the environment running them.
"""

import pytest

from models.enums import PriorityLookup
from pqueue.heap import MinHeapPriorityQueue


@pytest.fixture
def queue():
    """Empty queue of strings; the empty value is ""."""
    return MinHeapPriorityQueue(
        default_factory=str,
        priority_lookup=PriorityLookup.FIRST,
        reheapify_on_change=True,
    )


@pytest.fixture
def filled_queue(queue):
    """
    Seven entries whose insertion order needs no swaps, so the internal
    array is exactly: a0 b1 c5 d2 e3 f6 g7.
    """
    queue.insert_all([
        (0, "a"), (1, "b"), (5, "c"), (2, "d"), (3, "e"), (6, "f"), (7, "g"),
    ])
    return queue
