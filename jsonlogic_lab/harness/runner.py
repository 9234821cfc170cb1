"""
Benchmark orchestrator for timing JSON Logic rules.

Runs test cases strictly in declaration order, times the evaluator over
each case's inputs, and collects one outcome per case.
"""

import json
import math
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional, Sequence

from ..instrumentation.timing import TimingResult, timed
from ..scenarios.definitions import TestCase
from .evaluator import Evaluator, canonical_json, complexity_score, evaluate


@dataclass
class ResultRecord:
    """Timing and outputs for one completed test case."""

    name: str
    average_time_ms: float
    complexity_score: int
    outputs: list[str]
    elapsed_ms: float = 0.0
    iterations: int = 1
    input_count: int = 0

    def to_dict(self) -> dict:
        """Convert record to dictionary for serialization."""
        return {
            "name": self.name,
            "average_time_ms": self.average_time_ms,
            "complexity_score": self.complexity_score,
            "outputs": self.outputs,
            "elapsed_ms": self.elapsed_ms,
            "iterations": self.iterations,
            "input_count": self.input_count,
        }


@dataclass
class CaseOutcome:
    """Either a ResultRecord or the reason the case failed."""

    case: TestCase
    record: Optional[ResultRecord] = None
    error: Optional[str] = None

    def __post_init__(self):
        if (self.record is None) == (self.error is None):
            raise ValueError("CaseOutcome needs exactly one of record or error")

    @property
    def ok(self) -> bool:
        return self.record is not None

    @property
    def name(self) -> str:
        return self.case.name

    def to_dict(self) -> dict:
        return {
            "name": self.case.name,
            "ok": self.ok,
            "record": self.record.to_dict() if self.record else None,
            "error": self.error,
        }


@dataclass
class BenchmarkRun:
    """All outcomes of one harness run, in declaration order."""

    outcomes: list[CaseOutcome]
    start_time: datetime
    end_time: datetime
    metadata: dict = field(default_factory=dict)

    @property
    def records(self) -> list[ResultRecord]:
        """Records of the cases that completed."""
        return [o.record for o in self.outcomes if o.record is not None]

    @property
    def errors(self) -> dict[str, str]:
        """Failure reason per failed case name."""
        return {o.name: o.error for o in self.outcomes if o.error is not None}

    @property
    def success_rate(self) -> float:
        """Fraction of executed cases that completed without errors."""
        if not self.outcomes:
            return 0.0
        return len(self.records) / len(self.outcomes)

    @property
    def duration_seconds(self) -> float:
        return (self.end_time - self.start_time).total_seconds()

    def to_dict(self) -> dict:
        """Convert run to dictionary for serialization."""
        return {
            "start_time": self.start_time.isoformat(),
            "end_time": self.end_time.isoformat(),
            "duration_seconds": self.duration_seconds,
            "success_rate": self.success_rate,
            "results": [r.to_dict() for r in self.records],
            "errors": self.errors,
            "metadata": self.metadata,
        }

    def save(self, path: Path) -> None:
        """Save run to JSON file."""
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)


def describe_error(exc: BaseException) -> str:
    """Failure reason recorded for a case."""
    return f"{type(exc).__name__}: {exc}"


class BenchmarkRunner:
    """Times the evaluator over a sequence of test cases."""

    def __init__(
        self,
        evaluator: Evaluator = evaluate,
        fail_fast: bool = False,
        verbose: bool = True,
    ):
        self.evaluator = evaluator
        self.fail_fast = fail_fast
        self.verbose = verbose

    def time_case(self, case: TestCase) -> TimingResult:
        """Time ``case.iterations`` passes of the evaluator over the inputs."""
        inputs = case.inputs
        rule = case.rule
        apply = self.evaluator

        with timed(case.name) as timer:
            for _ in range(case.iterations):
                for item in inputs:
                    apply(rule, item)

        return timer.to_result(
            iterations=case.iterations,
            metadata={"input_count": len(inputs)},
        )

    def compute_outputs(self, case: TestCase) -> list[str]:
        """Evaluate each input once more, outside any timing, for display."""
        return [canonical_json(self.evaluator(case.rule, item)) for item in case.inputs]

    def run_case(self, case: TestCase) -> ResultRecord:
        """Run a single test case. Evaluator exceptions propagate."""
        timing = self.time_case(case)
        average = timing.average_latency_ms
        if not math.isfinite(average) or average < 0:
            average = 0.0

        return ResultRecord(
            name=case.name,
            average_time_ms=average,
            complexity_score=complexity_score(case.rule),
            outputs=self.compute_outputs(case),
            elapsed_ms=timing.total_latency_ms,
            iterations=case.iterations,
            input_count=len(case.inputs),
        )

    def run(
        self,
        test_cases: Sequence[TestCase],
        on_case_start: Optional[Callable[[str], None]] = None,
        on_case_complete: Optional[Callable[[CaseOutcome, int, int], None]] = None,
    ) -> BenchmarkRun:
        """Run test cases sequentially.

        Args:
            test_cases: Cases in the order they should run
            on_case_start: Optional callback(name) fired before a case is timed
            on_case_complete: Optional callback(outcome, index, total)
        """
        self._check_unique_names(test_cases)
        outcomes: list[CaseOutcome] = []
        start_time = datetime.now()
        total = len(test_cases)

        if self.verbose:
            print(f"\nRunning {total} JSON Logic test case(s)")

        for index, case in enumerate(test_cases, start=1):
            if on_case_start:
                on_case_start(case.name)
            if self.verbose:
                print(f"  [{index}/{total}] {case.name}...", end="", flush=True)

            try:
                record = self.run_case(case)
                outcome = CaseOutcome(case=case, record=record)
                if self.verbose:
                    print(f" {record.average_time_ms:.4f}ms avg")
            except Exception as e:
                outcome = CaseOutcome(case=case, error=describe_error(e))
                if self.verbose:
                    print(f" error: {outcome.error}")

            outcomes.append(outcome)
            if on_case_complete:
                on_case_complete(outcome, index, total)

            if self.fail_fast and not outcome.ok:
                if self.verbose and index < total:
                    print(f"  Stopping early, {total - index} case(s) not run")
                break

        end_time = datetime.now()
        run = BenchmarkRun(
            outcomes=outcomes,
            start_time=start_time,
            end_time=end_time,
            metadata={"total_cases": total, "fail_fast": self.fail_fast},
        )

        if self.verbose:
            print(f"\nCompleted {len(run.records)}/{total} case(s) in {run.duration_seconds:.2f}s")

        return run

    def run_records(self, test_cases: Sequence[TestCase]) -> list[ResultRecord]:
        """Run test cases and return only the completed records."""
        return self.run(test_cases).records

    @staticmethod
    def _check_unique_names(test_cases: Sequence[TestCase]) -> None:
        seen = set()
        for case in test_cases:
            if case.name in seen:
                raise ValueError(f"Duplicate test case name: {case.name}")
            seen.add(case.name)
