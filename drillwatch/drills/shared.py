"""Shared-state drills: summing across threads and counting finished jobs."""

from __future__ import annotations

import threading
import time
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass


def offset_sums(numbers: Iterable[int] = range(100), workers: int = 8) -> list[int]:
    """Sum the numbers congruent to each offset modulo workers, one thread per offset."""
    if workers <= 0:
        raise ValueError("workers must be positive")
    shared = tuple(numbers)
    if any(n < 0 for n in shared):
        raise ValueError("numbers must be non-negative")

    def sum_offset(offset: int) -> int:
        total = sum(n for n in shared if n % workers == offset)
        print(f"Sum of offset {offset} is {total}")
        return total

    with ThreadPoolExecutor(max_workers=workers) as pool:
        return list(pool.map(sum_offset, range(workers)))


@dataclass
class JobStatus:
    """How many jobs have finished."""

    jobs_completed: int = 0


def run_jobs(count: int = 10, delay: float = 0.25) -> JobStatus:
    """Start count threads that each wait, then record one finished job."""
    if count < 0:
        raise ValueError("count must not be negative")
    if delay < 0:
        raise ValueError("delay must not be negative")
    status = JobStatus()
    lock = threading.Lock()

    def job() -> None:
        time.sleep(delay)
        with lock:
            status.jobs_completed += 1

    threads = [threading.Thread(target=job) for _ in range(count)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
        with lock:
            print(f"jobs completed {status.jobs_completed}")
    return status