import os
from datetime import datetime, timedelta

import pytest

from jsonlogic_lab.config import ENV_PREFIX, LabSettings
from jsonlogic_lab.harness.runner import BenchmarkRun, CaseOutcome, ResultRecord
from jsonlogic_lab.scenarios import TestCase


@pytest.fixture(autouse=True)
def clean_lab_env(monkeypatch):
    """Keep a developer's JSONLOGIC_LAB_* variables out of the tests."""
    for key in list(os.environ):
        if key.startswith(ENV_PREFIX):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def small_settings():
    return LabSettings(iterations=2, seed=7, dataset_size=5, large_dataset_size=8)


@pytest.fixture
def temp_case():
    return TestCase(
        name="Temperature",
        rule={">=": [{"var": "temp"}, 20]},
        data=[{"temp": 25}, {"temp": 10}, {"temp": 20}],
        iterations=2,
    )


@pytest.fixture
def sample_run():
    cases = [
        TestCase(name="first", rule={"==": [1, 1]}, data={}, iterations=1),
        TestCase(name="second", rule={"var": "x"}, data=[{"x": 1}, {"x": 2}], iterations=1),
        TestCase(name="broken", rule={"var": "x"}, data={}, iterations=1),
    ]
    outcomes = [
        CaseOutcome(
            case=cases[0],
            record=ResultRecord(
                name="first",
                average_time_ms=0.5,
                complexity_score=12,
                outputs=["true"],
                elapsed_ms=0.5,
                iterations=1,
                input_count=1,
            ),
        ),
        CaseOutcome(
            case=cases[1],
            record=ResultRecord(
                name="second",
                average_time_ms=1.25,
                complexity_score=11,
                outputs=["1", "2"],
                elapsed_ms=1.25,
                iterations=1,
                input_count=2,
            ),
        ),
        CaseOutcome(case=cases[2], error="ValueError: bad rule"),
    ]
    start = datetime(2024, 5, 1, 12, 0, 0)
    return BenchmarkRun(
        outcomes=outcomes,
        start_time=start,
        end_time=start + timedelta(seconds=2),
        metadata={"total_cases": 3, "fail_fast": False},
    )
