"""Table data for the benchmark page."""

import json
from typing import Sequence

import pandas as pd

from ..config import DEFAULT_DETAIL_LIMIT
from ..harness.evaluator import pretty_json
from ..harness.runner import ResultRecord
from ..scenarios.definitions import TestCase


def format_time_ms(ms: float) -> str:
    """Format an average time with four decimals."""
    return f"{ms:.4f}"


def summary_frame(records: Sequence[ResultRecord]) -> pd.DataFrame:
    """One row per record, in record order."""
    return pd.DataFrame(
        [
            {
                "Test Case": r.name,
                "Avg. Time (ms)": format_time_ms(r.average_time_ms),
                "Rule Complexity": r.complexity_score,
            }
            for r in records
        ],
        columns=["Test Case", "Avg. Time (ms)", "Rule Complexity"],
    )


def detail_pairs(
    case: TestCase,
    record: ResultRecord,
    limit: int = DEFAULT_DETAIL_LIMIT,
) -> list[tuple[str, str]]:
    """Pretty-printed (input, output) pairs, at most ``limit`` of them."""
    pairs = []
    for item, output in zip(case.inputs[:limit], record.outputs[:limit]):
        pairs.append((pretty_json(item), pretty_json(json.loads(output))))
    return pairs


def detail_frame(
    case: TestCase,
    record: ResultRecord,
    limit: int = DEFAULT_DETAIL_LIMIT,
) -> pd.DataFrame:
    """Detail panel contents as a two-column table."""
    return pd.DataFrame(detail_pairs(case, record, limit), columns=["Data", "Result"])
