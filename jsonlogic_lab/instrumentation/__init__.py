"""
Instrumentation module for JSON Logic benchmarking.

Provides timing utilities.
"""

from .timing import (
    Timer,
    TimingResult,
    timed,
)

__all__ = [
    "Timer",
    "TimingResult",
    "timed",
]
