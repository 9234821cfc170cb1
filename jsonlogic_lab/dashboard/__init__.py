"""
Results presenter for JSON Logic benchmark runs.

The Streamlit page lives in ``app.py`` and is started with
``streamlit run jsonlogic_lab/dashboard/app.py``.
"""

from .charts import timing_line_chart
from .state import BenchmarkState
from .views import detail_frame, detail_pairs, format_time_ms, summary_frame

__all__ = [
    "BenchmarkState",
    "detail_frame",
    "detail_pairs",
    "format_time_ms",
    "summary_frame",
    "timing_line_chart",
]
