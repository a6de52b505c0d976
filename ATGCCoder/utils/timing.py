"""
Timing utilities for ATGCCoder.
"""

import time
from typing import Optional
from contextlib import contextmanager

from ATGCCoder.utils.logging import get_logger

class Timer:
    """A simple timer class for measuring elapsed time."""

    def __init__(self, name: Optional[str] = None):
        self.name = name
        self.start_time: Optional[float] = None
        self.elapsed: float = 0.0

    def start(self) -> "Timer":
        self.start_time = time.perf_counter()
        return self

    def stop(self) -> float:
        if self.start_time is None:
            raise RuntimeError("Timer has not been started.")
        end_time = time.perf_counter()
        self.elapsed = end_time - self.start_time
        self.start_time = None
        return self.elapsed


@contextmanager
def timing_context(name: Optional[str] = None):
    """Context manager for timing a code block."""
    timer = Timer(name=name).start()
    try:
        yield timer
    finally:
        elapsed = timer.stop()
        if name:
            get_logger().info(f"{name} took {elapsed:.4f} seconds")
