"""
Array-backed binary min-heap priority queue.

The heap is a plain Python list of Entry objects read as a binary tree:

    index:     0     1     2     3     4     5     6
             root  left right ...
    parent(i) = (i - 1) // 2
    left(i)   = 2i + 1
    right(i)  = 2i + 2

Invariant: every entry's priority is >= its parent's priority, so the
minimum always sits at index 0.

- insert:        append at the end, bubble up     → O(log n)
- remove_front:  move last entry to root, bubble down → O(log n)
- peek:          read index 0                     → O(1)
- contains / get_priority / change_priority: linear scan → O(n)

Why not heapq?
heapq compares whole tuples, so equal priorities would fall through to
comparing the elements themselves (or need a counter tiebreaker). Here
only the priority is ever compared, the element just needs ==, and
change_priority needs direct access to arbitrary slots anyway.

The queue never raises for bad input. Negative priorities are dropped,
an empty queue returns the "empty value" (default_factory() or None),
and a missing element has priority -1.
"""

import logging
from typing import Callable, Iterable, Optional

from config.settings import settings
from models.entry import E, Entry
from models.enums import PriorityLookup
from pqueue.base import NOT_FOUND, AbstractPriorityQueue

logger = logging.getLogger(__name__)


def parent_index(child: int) -> int:
    return (child - 1) // 2


def left_child_index(parent: int) -> int:
    return 2 * parent + 1


def right_child_index(parent: int) -> int:
    return 2 * parent + 2


def is_min_heap(priorities: list[int]) -> bool:
    """True if every non-root priority is >= its parent's."""
    return all(
        priorities[parent_index(i)] <= priorities[i] for i in range(1, len(priorities))
    )


class MinHeapPriorityQueue(AbstractPriorityQueue[E]):
    """
    Priority queue of arbitrary elements keyed by non-negative int priority.

    Args:
        default_factory: zero-arg callable that builds the value returned by
            peek()/remove_front() on an empty queue, e.g. `str` → "".
            None means the empty value is None.
        priority_lookup: how get_priority() resolves duplicate elements.
            Defaults to settings.PQ_PRIORITY_LOOKUP.
        reheapify_on_change: whether change_priority() repairs the heap after
            removing entries from arbitrary positions.
            Defaults to settings.PQ_REHEAPIFY_ON_CHANGE.
    """

    def __init__(
        self,
        default_factory: Optional[Callable[[], E]] = None,
        priority_lookup: Optional[PriorityLookup] = None,
        reheapify_on_change: Optional[bool] = None,
    ):
        self._heap: list[Entry[E]] = []
        self._default_factory = default_factory
        # PriorityLookup("bogus") raises ValueError — fail fast on bad config
        self._priority_lookup = PriorityLookup(
            priority_lookup if priority_lookup is not None else settings.PQ_PRIORITY_LOOKUP
        )
        self._reheapify_on_change: bool = (
            reheapify_on_change
            if reheapify_on_change is not None
            else settings.PQ_REHEAPIFY_ON_CHANGE
        )

    # ── Mutation ────────────────────────────────────────────────

    def insert(self, priority: int, element: E) -> None:
        if priority < 0:
            logger.warning(f"Ignoring insert of {element!r} with negative priority {priority}")
            return
        self._heap.append(Entry(priority, element))
        self._bubble_up(len(self._heap) - 1)

    def insert_all(self, entries: Iterable[tuple[int, E]]) -> None:
        before = len(self._heap)
        super().insert_all(entries)
        logger.debug(f"insert_all added {len(self._heap) - before} entries")

    def remove_front(self) -> E:
        """
        Take the root off the heap and return its element.

        The last entry moves into the root slot (keeps the tree complete),
        then sinks until both children are >= it.
        """
        if not self._heap:
            return self._empty_value()

        front = self._heap[0].element
        last = self._heap.pop()
        if self._heap:
            self._heap[0] = last
            self._bubble_down(0)
        return front

    def change_priority(self, element: E, new_priority: int) -> None:
        """
        Replace every copy of `element` with a single entry at `new_priority`.

        If the element isn't in the queue, nothing happens. If new_priority
        is negative, nothing happens either (the copies are NOT removed).

        Removing entries from the middle of the array shifts everything after
        them, which can put a child above a larger parent. With
        reheapify_on_change (the default) the remaining array is rebuilt
        into a heap in O(n) before the new entry is inserted. Without it,
        only the bubble-up from insert runs, which is the legacy behaviour
        and can leave the invariant broken.
        """
        if new_priority < 0:
            logger.warning(
                f"Ignoring change_priority of {element!r} to negative priority {new_priority}"
            )
            return

        kept = [entry for entry in self._heap if entry.element != element]
        removed = len(self._heap) - len(kept)
        if not removed:
            return

        self._heap = kept
        if self._reheapify_on_change:
            self._heapify()
        self.insert(new_priority, element)
        logger.debug(
            f"change_priority collapsed {removed} entries of {element!r} to priority {new_priority}"
        )

    # ── Queries ─────────────────────────────────────────────────

    def peek(self) -> E:
        return self._heap[0].element if self._heap else self._empty_value()

    def get_all_elements(self) -> list[E]:
        """Elements in internal heap order — NOT sorted by priority."""
        return [entry.element for entry in self._heap]

    def get_all_priorities(self) -> list[int]:
        """Priorities in the same order as get_all_elements()."""
        return [entry.priority for entry in self._heap]

    def contains(self, element: E) -> bool:
        return any(entry.element == element for entry in self._heap)

    def get_priority(self, element: E) -> int:
        """
        Priority of `element`, or -1 if it isn't queued.

        With duplicates, PriorityLookup.FIRST returns whichever copy comes
        first in the array (not necessarily the lowest), PriorityLookup.LOWEST
        scans them all and returns the minimum.
        """
        matches = (entry.priority for entry in self._heap if entry.element == element)
        if self._priority_lookup == PriorityLookup.LOWEST:
            return min(matches, default=NOT_FOUND)
        return next(matches, NOT_FOUND)

    def size(self) -> int:
        return len(self._heap)

    def __len__(self) -> int:
        return len(self._heap)

    def __repr__(self) -> str:
        return f"<MinHeapPriorityQueue {self._heap}>"

    # ── Heap maintenance ────────────────────────────────────────

    def _bubble_up(self, child: int) -> None:
        """Swap the entry at `child` with its parent while it is strictly smaller."""
        heap = self._heap
        while child > 0:
            parent = parent_index(child)
            if heap[child].priority < heap[parent].priority:
                heap[child], heap[parent] = heap[parent], heap[child]
                child = parent
            else:
                break

    def _bubble_down(self, parent: int) -> None:
        """Swap the entry at `parent` with its smallest child while that child is smaller."""
        heap = self._heap
        length = len(heap)
        while True:
            left = left_child_index(parent)
            right = right_child_index(parent)
            smallest = parent

            if left < length and heap[left].priority < heap[smallest].priority:
                smallest = left
            if right < length and heap[right].priority < heap[smallest].priority:
                smallest = right

            if smallest == parent:
                return
            heap[parent], heap[smallest] = heap[smallest], heap[parent]
            parent = smallest

    def _heapify(self) -> None:
        """Bottom-up rebuild: bubble down every internal node, last one first."""
        for index in range(len(self._heap) // 2 - 1, -1, -1):
            self._bubble_down(index)

    def _empty_value(self) -> E:
        return self._default_factory() if self._default_factory is not None else None
