"""
Centralized configuration using pydantic-settings.

How it works:
- Reads environment variables automatically (e.g., PQ_PRIORITY_LOOKUP env var → Settings.PQ_PRIORITY_LOOKUP)
- Falls back to defaults defined here if env vars are not set
- Can also read from a .env file in the project root

The queue reads its defaults from here when the caller doesn't pass them
explicitly. The benchmark reads its workload size from here too.
"""

from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ── Queue behaviour ─────────────────────────────────────────
    PQ_PRIORITY_LOOKUP: str = "first"   # "first" (array order) or "lowest" for duplicates
    PQ_REHEAPIFY_ON_CHANGE: bool = True  # repair the heap after change_priority removals

    # ── Benchmark ───────────────────────────────────────────────
    BENCHMARK_NUM_ENTRIES: int = 10_000
    BENCHMARK_MAX_PRIORITY: int = 100   # priorities drawn from [0, max]
    BENCHMARK_SEED: Optional[int] = None

    # ── App ─────────────────────────────────────────────────────
    LOG_LEVEL: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


# Singleton — import this everywhere
settings = Settings()
