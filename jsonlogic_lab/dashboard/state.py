"""Presenter state for the benchmark page."""

from dataclasses import dataclass, field
from typing import Optional

from ..harness.runner import BenchmarkRun, ResultRecord


@dataclass
class BenchmarkState:
    """Results of the latest run and the name of the case currently running.

    Only the transition methods write to it.
    """

    results: list[ResultRecord] = field(default_factory=list)
    errors: dict[str, str] = field(default_factory=dict)
    current_test: str = ""
    last_run: Optional[BenchmarkRun] = None

    @property
    def running(self) -> bool:
        return bool(self.current_test)

    @property
    def has_results(self) -> bool:
        return bool(self.results) or bool(self.errors)

    def run_started(self) -> None:
        """Clear the previous run before a new one begins."""
        self.results = []
        self.errors = {}
        self.current_test = ""
        self.last_run = None

    def case_started(self, name: str) -> None:
        self.current_test = name

    def run_completed(self, run: BenchmarkRun) -> None:
        """Attach a finished run and clear the running marker."""
        self.results = list(run.records)
        self.errors = dict(run.errors)
        self.current_test = ""
        self.last_run = run
