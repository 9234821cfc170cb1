"""
Timing utilities for JSON Logic benchmarking.

Provides a manual timer, a context manager, and a container for the
wall-clock measurement of a timed iteration loop.
"""

import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator


@dataclass
class TimingResult:
    """Container for a timed loop measurement."""

    name: str
    start_time: float
    end_time: float = 0.0
    iterations: int = 1
    metadata: dict = field(default_factory=dict)

    @property
    def total_latency_ms(self) -> float:
        """Total elapsed time in milliseconds."""
        return max(self.end_time - self.start_time, 0.0) * 1000

    @property
    def average_latency_ms(self) -> float:
        """Elapsed time per iteration pass in milliseconds."""
        if self.iterations <= 0:
            return 0.0
        return self.total_latency_ms / self.iterations

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "name": self.name,
            "total_latency_ms": self.total_latency_ms,
            "average_latency_ms": self.average_latency_ms,
            "iterations": self.iterations,
            "metadata": self.metadata,
        }


class Timer:
    """Simple timer for manual timing control."""

    def __init__(self, name: str = "timer"):
        self.name = name
        self.start_time: float = 0.0
        self.end_time: float = 0.0
        self._running = False

    def start(self) -> "Timer":
        """Start the timer."""
        self.start_time = time.perf_counter()
        self._running = True
        return self

    def stop(self) -> "Timer":
        """Stop the timer."""
        self.end_time = time.perf_counter()
        self._running = False
        return self

    @property
    def running(self) -> bool:
        return self._running

    @property
    def elapsed_ms(self) -> float:
        """Elapsed time in milliseconds."""
        end = self.end_time if not self._running else time.perf_counter()
        return (end - self.start_time) * 1000

    def to_result(self, **kwargs) -> TimingResult:
        """Convert to TimingResult with optional additional data."""
        return TimingResult(
            name=self.name,
            start_time=self.start_time,
            end_time=self.end_time if self.end_time else time.perf_counter(),
            **kwargs
        )


@contextmanager
def timed(name: str = "operation") -> Iterator[Timer]:
    """Context manager for timing synchronous operations.

    Usage:
        with timed("my_operation") as timer:
            # do work
        print(f"Elapsed: {timer.elapsed_ms}ms")
    """
    timer = Timer(name).start()
    try:
        yield timer
    finally:
        timer.stop()
