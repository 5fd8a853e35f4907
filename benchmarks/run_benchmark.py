"""
CLI entry point for running throughput benchmarks.

Usage:
    python -m benchmarks.run_benchmark                          # defaults from settings
    python -m benchmarks.run_benchmark --num-entries 100000     # bigger workload
    python -m benchmarks.run_benchmark --seed 42                # repeatable run
    python -m benchmarks.run_benchmark --max-priority 10        # lots of duplicate priorities
"""

import argparse
import json
import logging

from config.settings import settings
from benchmarks.throughput import ThroughputBenchmark

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)


def main():
    parser = argparse.ArgumentParser(description="Min-Heap Priority Queue Throughput Benchmark")
    parser.add_argument(
        "--num-entries", type=int, default=settings.BENCHMARK_NUM_ENTRIES,
        help=f"Number of entries in the workload (default: {settings.BENCHMARK_NUM_ENTRIES})",
    )
    parser.add_argument(
        "--max-priority", type=int, default=settings.BENCHMARK_MAX_PRIORITY,
        help=f"Priorities are drawn from [0, max] (default: {settings.BENCHMARK_MAX_PRIORITY})",
    )
    parser.add_argument(
        "--seed", type=int, default=settings.BENCHMARK_SEED,
        help="RNG seed for a repeatable workload (default: random)",
    )
    args = parser.parse_args()

    print(f"=== Min-Heap Priority Queue Benchmark ===")
    print(f"Entries: {args.num_entries} | Max priority: {args.max_priority}\n")

    bench = ThroughputBenchmark(
        num_entries=args.num_entries,
        max_priority=args.max_priority,
        seed=args.seed,
    )
    results = bench.run()

    print("\n=== RESULTS ===")
    print(json.dumps(results, indent=2))

    # Summary table
    print("\n{:<18} {:>10} {:>18}".format("Operation", "Time (s)", "Throughput"))
    print("-" * 48)
    for r in results:
        print("{:<18} {:>10.3f} {:>14.2f} op/s".format(
            r["operation"], r["wall_clock_sec"], r["ops_per_sec"]
        ))


if __name__ == "__main__":
    main()
