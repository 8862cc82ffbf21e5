"""Helpers describing the parallelism available on this machine."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence


def cpu_core_count() -> int:
    """Return the number of logical CPU cores available on the system."""
    return os.cpu_count() or 1


def max_parallel_threads() -> int:
    """Return the maximum number of threads that can run in parallel."""
    sched_getaffinity = getattr(os, "sched_getaffinity", None)
    if sched_getaffinity is not None:
        try:
            usable = len(sched_getaffinity(0))
        except OSError:
            usable = 0
        if usable > 0:
            return usable
    return os.cpu_count() or 1


def main(argv: Sequence[str] | None = None) -> int:
    """Print the detected core count and the parallel thread limit."""
    del argv  # the command takes no arguments
    cores = cpu_core_count()
    threads = max_parallel_threads()
    sys.stdout.write(f"CPU cores detected: {cores}\n")
    sys.stdout.write(f"Maximum parallel threads: {threads}\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())