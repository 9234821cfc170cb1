from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

APP_PATH = Path(__file__).resolve().parents[1] / "jsonlogic_lab" / "dashboard" / "app.py"

CASE_NAMES = [
    "Simple Comparison",
    "Data Variable Access",
    "Nested Logic",
    "Complex Logic",
    "Array Operations",
    "Complex Data Access",
    "Large Dataset Processing",
]


@pytest.fixture
def app(monkeypatch):
    monkeypatch.setenv("JSONLOGIC_LAB_DATASET_SIZE", "5")
    monkeypatch.setenv("JSONLOGIC_LAB_LARGE_DATASET_SIZE", "10")
    monkeypatch.setenv("JSONLOGIC_LAB_ITERATIONS", "1")
    monkeypatch.setenv("JSONLOGIC_LAB_SEED", "1")
    at = AppTest.from_file(str(APP_PATH), default_timeout=60)
    at.run()
    return at


def test_page_starts_empty(app):
    assert not app.exception
    assert app.title[0].value == "JSONLogic Benchmark"
    assert app.button[0].label == "Run Benchmark"
    assert len(app.expander) == 0
    assert len(app.dataframe) == 0


def test_run_renders_table_and_details(app):
    app.button[0].click().run()
    assert not app.exception

    summary = app.dataframe[0].value
    assert summary["Test Case"].tolist() == CASE_NAMES
    assert len(app.expander) == len(CASE_NAMES)
    assert all(e.label == "Data & Results" for e in app.expander)
    assert len(app.code) == len(CASE_NAMES)
    assert '"==": [' in app.code[0].value
    assert len(app.error) == 0

    state = app.session_state["benchmark_state"]
    assert state.current_test == ""
    assert [r.name for r in state.results] == CASE_NAMES


def test_detail_panel_is_limited(monkeypatch):
    monkeypatch.setenv("JSONLOGIC_LAB_DATASET_SIZE", "5")
    monkeypatch.setenv("JSONLOGIC_LAB_LARGE_DATASET_SIZE", "10")
    monkeypatch.setenv("JSONLOGIC_LAB_ITERATIONS", "1")
    monkeypatch.setenv("JSONLOGIC_LAB_DETAIL_LIMIT", "3")
    at = AppTest.from_file(str(APP_PATH), default_timeout=60)
    at.run()
    at.button[0].click().run()

    detail = at.expander[0].dataframe[0].value
    assert list(detail.columns) == ["Data", "Result"]
    assert detail["Result"].tolist() == ["true", "true", "true"]


def test_second_run_replaces_results(app):
    app.button[0].click().run()
    first = app.session_state["benchmark_state"].last_run
    app.button[0].click().run()
    second = app.session_state["benchmark_state"].last_run
    assert second is not first
    assert len(app.expander) == len(CASE_NAMES)
