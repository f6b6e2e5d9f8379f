"""Timing helpers for call instrumentation."""

from __future__ import annotations

import time
from collections.abc import Callable, Iterator
from contextlib import contextmanager

NANOS_PER_MILLI = 1_000_000


def nanos_to_millis(elapsed_ns: int) -> int:
    """Whole milliseconds, truncated."""
    return max(elapsed_ns, 0) // NANOS_PER_MILLI


@contextmanager
def time_block(on_elapsed: Callable[[int], None]) -> Iterator[None]:
    """Measure the enclosed block and report elapsed milliseconds.

    ``on_elapsed`` runs on every exit path, including exceptions and
    cancellation, before control leaves the block. The block's own
    exception is re-raised unchanged afterwards.
    """
    start = time.perf_counter_ns()
    try:
        yield
    finally:
        end = time.perf_counter_ns()
        on_elapsed(nanos_to_millis(end - start))
