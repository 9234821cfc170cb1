import json

from jsonlogic_lab.harness import ChartReporter, ConsoleReporter, JSONReporter


class TestConsoleReporter:
    def test_table_lists_records_in_order(self, sample_run):
        table = ConsoleReporter(use_color=False).results_table(sample_run)
        assert table.index("first") < table.index("second")
        assert "0.5000" in table
        assert "1.2500" in table
        assert "\033[" not in table

    def test_errors_section(self, sample_run):
        section = ConsoleReporter(use_color=False).errors_section(sample_run)
        assert "broken: ValueError: bad rule" in section

    def test_summary(self, sample_run):
        summary = ConsoleReporter(use_color=False).summary(sample_run)
        assert "Cases run: 3/3" in summary
        assert "66.7%" in summary
        assert "2.00s" in summary

    def test_full_report_uses_color(self, sample_run):
        report = ConsoleReporter(use_color=True).full_report(sample_run)
        assert "\033[1m" in report
        assert "Errors:" in report

    def test_empty_run(self, sample_run):
        sample_run.outcomes = []
        reporter = ConsoleReporter(use_color=False)
        assert reporter.results_table(sample_run) == "No results to display"
        assert reporter.errors_section(sample_run) == ""

    def test_long_names_are_truncated(self, sample_run):
        sample_run.outcomes[0].record.name = "x" * 40
        table = ConsoleReporter(use_color=False).results_table(sample_run)
        assert "x" * 25 + "..." in table
        assert "x" * 26 not in table


class TestJSONReporter:
    def test_save_and_load(self, tmp_path, sample_run):
        reporter = JSONReporter(tmp_path)
        path = reporter.save_run(sample_run)
        assert path.name == "jsonlogic_benchmark_20240501_120000.json"

        data = reporter.load_result(path)
        assert [r["name"] for r in data["results"]] == ["first", "second"]
        assert data["errors"] == {"broken": "ValueError: bad rule"}
        assert reporter.load_all_results() == [data]

    def test_dumps(self, sample_run):
        data = json.loads(JSONReporter().dumps(sample_run))
        assert data["results"][1]["outputs"] == ["1", "2"]
        assert data["duration_seconds"] == 2.0


class TestChartReporter:
    def test_writes_png(self, tmp_path, sample_run):
        path = ChartReporter(tmp_path).timing_line_chart(sample_run.records)
        assert path == tmp_path / "timing_line_chart.png"
        assert path.read_bytes()[:4] == b"\x89PNG"

    def test_no_records_no_chart(self, tmp_path):
        assert ChartReporter(tmp_path).timing_line_chart([]) is None
        assert not any(tmp_path.iterdir())
