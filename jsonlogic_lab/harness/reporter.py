"""
Results aggregation and visualization for benchmark runs.

Provides CLI tables, charts, and JSON exports.
"""

import json
from pathlib import Path
from typing import Optional

from .runner import BenchmarkRun, ResultRecord


class ConsoleReporter:
    """Generates console/CLI reports."""

    def __init__(self, use_color: bool = True):
        self.use_color = use_color

    def _color(self, text: str, color: str) -> str:
        """Apply ANSI color if enabled."""
        if not self.use_color:
            return text

        colors = {
            "green": "\033[92m",
            "red": "\033[91m",
            "yellow": "\033[93m",
            "blue": "\033[94m",
            "bold": "\033[1m",
            "reset": "\033[0m",
        }

        return f"{colors.get(color, '')}{text}{colors['reset']}"

    def format_time(self, ms: float) -> str:
        """Format an average time the way the dashboard shows it."""
        return f"{ms:.4f}"

    def results_table(self, run: BenchmarkRun) -> str:
        """Generate a table with one row per completed case, in run order."""
        records = run.records
        if not records:
            return "No results to display"

        headers = ["Test Case", "Avg. Time (ms)", "Complexity", "Inputs", "Iterations"]
        col_widths = [28, 16, 12, 10, 10]

        lines = []
        lines.append(self._color(f"\n{'=' * sum(col_widths)}", "blue"))
        lines.append(self._color("JSON Logic Benchmark", "bold"))
        lines.append(self._color(f"{'=' * sum(col_widths)}", "blue"))

        header_row = ""
        for i, header in enumerate(headers):
            header_row += f"{header:<{col_widths[i]}}"
        lines.append(self._color(header_row, "bold"))
        lines.append("-" * sum(col_widths))

        for record in records:
            name = record.name[:25] + "..." if len(record.name) > 28 else record.name
            row = [
                f"{name:<{col_widths[0]}}",
                f"{self.format_time(record.average_time_ms):<{col_widths[1]}}",
                f"{record.complexity_score:<{col_widths[2]}}",
                f"{record.input_count:<{col_widths[3]}}",
                f"{record.iterations:<{col_widths[4]}}",
            ]
            lines.append("".join(row))

        return "\n".join(lines)

    def errors_section(self, run: BenchmarkRun) -> str:
        """List failed cases with their reasons."""
        errors = run.errors
        if not errors:
            return ""

        lines = [f"\n{self._color('Errors:', 'red')}"]
        for name, reason in errors.items():
            lines.append(f"  - {name}: {reason}")
        return "\n".join(lines)

    def summary(self, run: BenchmarkRun) -> str:
        """Generate a short execution summary."""
        executed = len(run.outcomes)
        total = run.metadata.get("total_cases", executed)
        rate = run.success_rate * 100
        color = "green" if rate == 100 else "yellow" if rate > 0 else "red"

        lines = []
        lines.append(f"\nExecution:")
        lines.append(f"  Cases run: {executed}/{total}")
        lines.append(f"  Success rate: {self._color(f'{rate:.1f}%', color)}")
        lines.append(f"  Total duration: {run.duration_seconds:.2f}s")
        return "\n".join(lines)

    def full_report(self, run: BenchmarkRun) -> str:
        """Table, errors and summary together."""
        parts = [self.results_table(run), self.errors_section(run), self.summary(run)]
        return "\n".join(part for part in parts if part)


class ChartReporter:
    """Generates visual charts using matplotlib."""

    def __init__(self, output_dir: Optional[Path] = None):
        self.output_dir = output_dir or Path("results/charts")
        import matplotlib
        matplotlib.use("Agg")  # Non-interactive backend

    def timing_line_chart(
        self,
        records: list[ResultRecord],
        filename: Optional[str] = None,
    ) -> Optional[Path]:
        """Generate a line chart of average time per test case, in run order."""
        if not records:
            return None

        import matplotlib.pyplot as plt
        import numpy as np

        names = [r.name for r in records]
        times = [r.average_time_ms for r in records]
        x = np.arange(len(names))

        fig, ax = plt.subplots(figsize=(10, 6))
        ax.plot(x, times, marker="o", color="#8884d8", label="Execution Time (ms)")
        ax.grid(True, linestyle="--", alpha=0.5)

        ax.set_xlabel("Test Case")
        ax.set_ylabel("Time (ms)")
        ax.set_title("JSON Logic Execution Time")
        ax.set_xticks(x)
        ax.set_xticklabels(names, rotation=45, ha="right")
        ax.legend()

        fig.tight_layout()

        self.output_dir.mkdir(parents=True, exist_ok=True)
        filename = filename or "timing_line_chart.png"
        filepath = self.output_dir / filename
        fig.savefig(filepath, dpi=150, bbox_inches="tight")
        plt.close(fig)

        return filepath


class JSONReporter:
    """Exports runs as JSON for further analysis."""

    def __init__(self, output_dir: Optional[Path] = None):
        self.output_dir = output_dir or Path("results")

    def save_run(self, run: BenchmarkRun, name: str = "jsonlogic_benchmark") -> Path:
        """Save a run to a timestamped JSON file."""
        timestamp = run.start_time.strftime("%Y%m%d_%H%M%S")
        filepath = self.output_dir / f"{name}_{timestamp}.json"
        run.save(filepath)
        return filepath

    def dumps(self, run: BenchmarkRun) -> str:
        """Serialize a run to JSON text."""
        return json.dumps(run.to_dict(), indent=2)

    def load_result(self, filepath: Path) -> dict:
        """Load a saved run from JSON."""
        with open(filepath) as f:
            return json.load(f)

    def load_all_results(self, pattern: str = "*.json") -> list[dict]:
        """Load all saved runs matching a pattern."""
        results = []
        for filepath in sorted(self.output_dir.glob(pattern)):
            results.append(self.load_result(filepath))
        return results
