"""
Abstract base class for priority queues.

The interface is the whole ADT contract: anything that calls the queue
(tests, the benchmark) only depends on AbstractPriorityQueue, not on how
the entries are laid out internally.

Contract highlights:
- priorities are non-negative ints, LOWER value = closer to the front
- bad input degrades instead of raising: a negative priority is ignored,
  an empty queue hands back an "empty value", a missing element has priority -1
- get_all_elements()[i] and get_all_priorities()[i] describe the same entry

insert_all and empty are defined here once in terms of insert and size,
so implementations only provide the primitive operations.
"""

from abc import ABC, abstractmethod
from typing import Generic, Iterable, TypeVar

E = TypeVar("E")

# Returned by get_priority() when the element is not in the queue.
# Safe as a sentinel because negative priorities are never stored.
NOT_FOUND = -1


class AbstractPriorityQueue(ABC, Generic[E]):

    @abstractmethod
    def insert(self, priority: int, element: E) -> None:
        """Add an element. Negative priorities are ignored."""
        ...

    @abstractmethod
    def remove_front(self) -> E:
        """Remove and return the lowest-priority element, or the empty value."""
        ...

    @abstractmethod
    def peek(self) -> E:
        """View the lowest-priority element without removing it."""
        ...

    @abstractmethod
    def get_all_elements(self) -> list[E]:
        ...

    @abstractmethod
    def get_all_priorities(self) -> list[int]:
        ...

    @abstractmethod
    def contains(self, element: E) -> bool:
        ...

    @abstractmethod
    def get_priority(self, element: E) -> int:
        """Priority of a matching element, or NOT_FOUND."""
        ...

    @abstractmethod
    def change_priority(self, element: E, new_priority: int) -> None:
        """Collapse every copy of element into one entry at new_priority."""
        ...

    @abstractmethod
    def size(self) -> int:
        ...

    def insert_all(self, entries: Iterable[tuple[int, E]]) -> None:
        """
        Insert each (priority, element) pair in order.

        Equivalent to calling insert() once per pair, so negative
        priorities are skipped the same way. This is NOT a bulk heapify.
        """
        for priority, element in entries:
            self.insert(priority, element)

    def empty(self) -> bool:
        return self.size() == 0
