"""
JSONLogic Lab - Command line interface for the benchmark.

Usage:
    jsonlogic-lab [command] [options]

Commands:
    run         - Run the built-in test cases and print a report (default)
    list        - List the built-in test cases

The interactive page is started with:
    streamlit run jsonlogic_lab/dashboard/app.py
"""

import argparse
from dataclasses import replace
from pathlib import Path

from dotenv import load_dotenv

from .config import LabSettings
from .harness import BenchmarkRunner, ChartReporter, ConsoleReporter, JSONReporter
from .scenarios import build_test_cases, select_test_cases


def run_benchmark(args, settings: LabSettings) -> int:
    """Run the selected test cases and report. Returns the exit status."""
    cases = select_test_cases(args.case, settings)
    runner = BenchmarkRunner(fail_fast=settings.fail_fast, verbose=not args.quiet)
    run = runner.run(cases)

    reporter = ConsoleReporter(use_color=not args.no_color)
    print(reporter.full_report(run))

    if args.json:
        path = JSONReporter(settings.results_dir).save_run(run)
        print(f"\nSaved JSON results to {path}")

    if args.chart:
        path = ChartReporter(settings.results_dir / "charts").timing_line_chart(run.records)
        if path:
            print(f"Saved chart to {path}")

    return 0 if not run.errors else 1


def list_cases(args, settings: LabSettings) -> int:
    """Print the built-in test cases."""
    for case in build_test_cases(replace(settings, dataset_size=1, large_dataset_size=1)):
        print(f"{case.name:<28} {case.description}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="JSONLogic Lab - Benchmark JSON Logic rule evaluation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    jsonlogic-lab
    jsonlogic-lab run --iterations 10 --seed 42
    jsonlogic-lab run --case "Nested Logic" --case "Complex Logic"
    jsonlogic-lab run --json --chart --output-dir results
    jsonlogic-lab list
        """,
    )

    parser.add_argument(
        "command",
        nargs="?",
        default="run",
        choices=["run", "list"],
        help="Command to run (default: run)",
    )
    parser.add_argument(
        "--iterations",
        type=int,
        default=None,
        help="Iteration passes per test case (default: JSONLOGIC_LAB_ITERATIONS or 3)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for random test data (default: JSONLOGIC_LAB_SEED or unseeded)",
    )
    parser.add_argument(
        "--case",
        action="append",
        default=None,
        help="Run only this test case; may be repeated",
    )
    parser.add_argument(
        "--fail-fast",
        action="store_true",
        help="Stop after the first failed test case",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Save the run as JSON in the output directory",
    )
    parser.add_argument(
        "--chart",
        action="store_true",
        help="Save a PNG line chart in the output directory",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Directory to save results (default: JSONLOGIC_LAB_RESULTS_DIR or results/)",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable ANSI colors in the report",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Do not print per-case progress",
    )
    return parser


def resolve_settings(args) -> LabSettings:
    """Environment settings overridden by command line options."""
    settings = LabSettings.from_env()
    overrides = {}
    if args.iterations is not None:
        if args.iterations < 1:
            raise ValueError(f"--iterations must be positive, got {args.iterations}")
        overrides["iterations"] = args.iterations
    if args.seed is not None:
        overrides["seed"] = args.seed
    if args.fail_fast:
        overrides["fail_fast"] = True
    if args.output_dir is not None:
        overrides["results_dir"] = args.output_dir
    return replace(settings, **overrides)


def main(argv=None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)

    commands = {
        "run": run_benchmark,
        "list": list_cases,
    }

    try:
        settings = resolve_settings(args)
        return commands[args.command](args, settings)
    except KeyboardInterrupt:
        print("\nBenchmark interrupted by user")
        return 1
    except Exception as e:
        print(f"\nError: {e}")
        return 1
