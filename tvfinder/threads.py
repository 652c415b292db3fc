"""Thread-count heuristics."""

from __future__ import annotations

import os

_MAX_THREADS = 32


def _available_parallelism() -> int | None:
    affinity = getattr(os, "sched_getaffinity", None)
    if affinity is not None:
        try:
            count = len(affinity(0))
        except OSError:
            count = 0
        if count > 0:
            return count
    return os.cpu_count()


def default_num_threads() -> int:
    """Number of threads to use by default.

    Uses the available parallelism, falling back to 1 when it cannot be
    determined, and never more than 32 to limit startup overhead.
    """
    available = _available_parallelism() or 1
    return max(1, min(available, _MAX_THREADS))