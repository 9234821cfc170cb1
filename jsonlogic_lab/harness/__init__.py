"""
Benchmark harness for JSON Logic timing experiments.

Provides orchestration and reporting capabilities.
"""

from .evaluator import (
    canonical_json,
    complexity_score,
    evaluate,
    pretty_json,
)

from .runner import (
    BenchmarkRun,
    BenchmarkRunner,
    CaseOutcome,
    ResultRecord,
)

from .reporter import (
    ChartReporter,
    ConsoleReporter,
    JSONReporter,
)

__all__ = [
    # Evaluator
    "canonical_json",
    "complexity_score",
    "evaluate",
    "pretty_json",
    # Runner
    "BenchmarkRun",
    "BenchmarkRunner",
    "CaseOutcome",
    "ResultRecord",
    # Reporter
    "ChartReporter",
    "ConsoleReporter",
    "JSONReporter",
]
