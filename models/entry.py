"""
Entry — one slot of the heap array.

A plain dataclass instead of a bare tuple so the heap code reads
`entry.priority` rather than `entry[0]`. Comparisons are done by the heap
on `priority` alone; the element is never compared for ordering, so it
only needs `==` (used by contains / get_priority / change_priority).
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

E = TypeVar("E")


@dataclass
class Entry(Generic[E]):
    priority: int   # non-negative, lower = closer to the front
    element: E

    def __repr__(self) -> str:
        return f"({self.priority}, {self.element!r})"
