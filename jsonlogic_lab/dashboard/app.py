"""JSONLogic Lab - Streamlit Dashboard."""

import streamlit as st
from dotenv import load_dotenv

from jsonlogic_lab.config import LabSettings
from jsonlogic_lab.dashboard.charts import timing_line_chart
from jsonlogic_lab.dashboard.state import BenchmarkState
from jsonlogic_lab.dashboard.views import detail_frame, format_time_ms, summary_frame
from jsonlogic_lab.harness import BenchmarkRunner, JSONReporter, pretty_json
from jsonlogic_lab.scenarios import build_test_cases

load_dotenv()
settings = LabSettings.from_env()

st.set_page_config(
    page_title="JSONLogic Benchmark",
    page_icon="⏱️",
    layout="wide",
)

if "benchmark_state" not in st.session_state:
    st.session_state.benchmark_state = BenchmarkState()
state: BenchmarkState = st.session_state.benchmark_state


def run_benchmark(status) -> None:
    """Run every built-in case, reporting the running name in ``status``."""
    state.run_started()

    def on_case_start(name: str) -> None:
        state.case_started(name)
        status.text(f"Running: {name}...")

    runner = BenchmarkRunner(fail_fast=settings.fail_fast, verbose=False)
    run = runner.run(build_test_cases(settings), on_case_start=on_case_start)
    state.run_completed(run)
    status.empty()


st.title("JSONLogic Benchmark")
st.subheader("json-logic Performance Benchmark")

col1, col2 = st.columns([1, 3])
with col1:
    clicked = st.button("Run Benchmark", type="primary")
with col2:
    status = st.empty()

if clicked:
    run_benchmark(status)

if state.results:
    st.plotly_chart(timing_line_chart(state.results), width="stretch")

    st.dataframe(summary_frame(state.results), width="stretch", hide_index=True)

    for outcome in state.last_run.outcomes:
        if not outcome.ok:
            continue
        record = outcome.record
        with st.container(border=True):
            name_col, time_col, complexity_col, rule_col = st.columns([2, 1, 1, 3])
            name_col.markdown(f"**{record.name}**")
            time_col.markdown(f"`{format_time_ms(record.average_time_ms)}` ms")
            complexity_col.markdown(f"Complexity: `{record.complexity_score}`")
            rule_col.code(pretty_json(outcome.case.rule), language="json")

            with st.expander("Data & Results"):
                st.dataframe(
                    detail_frame(outcome.case, record, settings.detail_limit),
                    width="stretch",
                    hide_index=True,
                )

if state.errors:
    st.subheader("Failed Cases")
    for name, reason in state.errors.items():
        st.error(f"{name}: {reason}")

if state.last_run is not None:
    st.download_button(
        "📥 Download JSON",
        data=JSONReporter().dumps(state.last_run),
        file_name=f"jsonlogic_benchmark_{state.last_run.start_time.strftime('%Y%m%d_%H%M%S')}.json",
        mime="application/json",
    )
