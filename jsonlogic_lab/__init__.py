"""
JSONLogic Lab - A benchmark page for JSON Logic rule evaluation.

Times a JSON Logic evaluator against hand-written test cases of increasing
complexity and renders the timings as a chart and a table.

Key modules:
- harness: Benchmark orchestration and reporting
- instrumentation: Timing utilities
- scenarios: Built-in test cases
- dashboard: Streamlit results presenter
"""

__version__ = "0.1.0"

from . import config
from . import harness
from . import instrumentation
from . import scenarios

__all__ = [
    "config",
    "harness",
    "instrumentation",
    "scenarios",
]
