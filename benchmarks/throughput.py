"""
Throughput benchmark — measures ops/sec for each queue operation.

How it works:
1. Build N random (priority, element) pairs (seeded, so runs are repeatable)
2. insert_all them into a fresh MinHeapPriorityQueue and time it
3. remove_front until empty, time it, and check the priorities came out
   in non-decreasing order
4. change_priority on a sample of elements and check the heap invariant
5. Push/pop the same workload through stdlib heapq as a baseline

The baseline uses the (priority, counter, element) tuple trick so heapq
never has to compare elements. It's the reference point for how much the
pure-Python sift loops cost compared to the C implementation.
"""

import heapq
import logging
import random
import time
from typing import Optional

from config.settings import settings
from pqueue.heap import MinHeapPriorityQueue, is_min_heap

logger = logging.getLogger(__name__)


class ThroughputBenchmark:

    def __init__(
        self,
        num_entries: int = settings.BENCHMARK_NUM_ENTRIES,
        max_priority: int = settings.BENCHMARK_MAX_PRIORITY,
        seed: Optional[int] = settings.BENCHMARK_SEED,
    ):
        self.num_entries = num_entries
        self.max_priority = max_priority
        self._rng = random.Random(seed)
        self.entries = self.build_entries()

    def build_entries(self) -> list[tuple[int, str]]:
        """Random priorities in [0, max_priority], unique element names."""
        return [
            (self._rng.randint(0, self.max_priority), f"item-{i}")
            for i in range(self.num_entries)
        ]

    def _result(self, operation: str, ops: int, elapsed: float) -> dict:
        return {
            "operation": operation,
            "ops": ops,
            "wall_clock_sec": round(elapsed, 6),
            "ops_per_sec": round(ops / elapsed, 2) if elapsed > 0 else float("inf"),
        }

    def _filled_queue(self) -> MinHeapPriorityQueue[str]:
        queue: MinHeapPriorityQueue[str] = MinHeapPriorityQueue(default_factory=str)
        queue.insert_all(self.entries)
        return queue

    def run_insert_all(self) -> dict:
        queue: MinHeapPriorityQueue[str] = MinHeapPriorityQueue(default_factory=str)
        start = time.perf_counter()
        queue.insert_all(self.entries)
        elapsed = time.perf_counter() - start
        return self._result("insert_all", queue.size(), elapsed)

    def run_drain(self) -> dict:
        """
        Time remove_front over the whole queue.

        Priorities are looked up from the workload (elements are unique),
        so the order check doesn't call back into the queue mid-drain.
        """
        queue = self._filled_queue()
        priority_of = {element: priority for priority, element in self.entries}

        drained = []
        start = time.perf_counter()
        while not queue.empty():
            drained.append(queue.remove_front())
        elapsed = time.perf_counter() - start

        order = [priority_of[element] for element in drained]
        if any(a > b for a, b in zip(order, order[1:])):
            raise RuntimeError("remove_front returned entries out of priority order")
        return self._result("remove_front", len(drained), elapsed)

    def run_change_priority(self, sample_size: int = 100) -> dict:
        """Move a random sample of elements to new priorities, then check the invariant."""
        queue = self._filled_queue()
        sample = self._rng.sample(self.entries, min(sample_size, len(self.entries)))

        start = time.perf_counter()
        for _, element in sample:
            queue.change_priority(element, self._rng.randint(0, self.max_priority))
        elapsed = time.perf_counter() - start

        if not is_min_heap(queue.get_all_priorities()):
            raise RuntimeError("heap invariant broken after change_priority")
        return self._result("change_priority", len(sample), elapsed)

    def run_heapq_baseline(self) -> dict:
        """Same push-all-then-pop-all workload through heapq."""
        heap: list[tuple[int, int, str]] = []
        start = time.perf_counter()
        for counter, (priority, element) in enumerate(self.entries):
            heapq.heappush(heap, (priority, counter, element))
        while heap:
            heapq.heappop(heap)
        elapsed = time.perf_counter() - start
        return self._result("heapq_push_pop", 2 * len(self.entries), elapsed)

    def run(self) -> list[dict]:
        """Run every measurement in sequence."""
        results = []
        for measure in (
            self.run_insert_all,
            self.run_drain,
            self.run_change_priority,
            self.run_heapq_baseline,
        ):
            result = measure()
            logger.info(
                f"{result['operation']}: {result['ops_per_sec']} ops/sec "
                f"({result['wall_clock_sec']}s wall clock)"
            )
            results.append(result)
        return results
