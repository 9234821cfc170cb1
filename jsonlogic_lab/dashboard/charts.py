"""Plotly figures for the benchmark page."""

from typing import Sequence

import plotly.graph_objects as go

from ..harness.runner import ResultRecord

LINE_COLOR = "#8884d8"


def timing_line_chart(records: Sequence[ResultRecord]) -> go.Figure:
    """Average time per test case, one point per record in run order."""
    fig = go.Figure(
        go.Scatter(
            x=[r.name for r in records],
            y=[r.average_time_ms for r in records],
            mode="lines+markers",
            name="Execution Time (ms)",
            line={"color": LINE_COLOR},
            marker={"size": 8},
        )
    )
    fig.update_layout(
        height=350,
        margin={"t": 20, "r": 30, "l": 20, "b": 5},
        showlegend=True,
        xaxis={"tickangle": -45, "categoryorder": "array", "categoryarray": [r.name for r in records]},
        yaxis={"title": {"text": "Time (ms)"}},
    )
    return fig
