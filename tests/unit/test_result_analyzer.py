"""Unit tests for results file analysis."""

import pandas as pd
import pytest

from httpstat_batch.batch.exceptions import ResultsFileError
from httpstat_batch.batch.result_analyzer import ResultAnalyzer
from ..test_const import RECORD_A_1, RESULTS_FILE_CONTENT, URL_A, URL_B


@pytest.fixture
def results_file(workdir):
    path = workdir / "results.json"
    path.write_text(RESULTS_FILE_CONTENT)
    return path


class TestResultAnalyzer:
    """Test ResultAnalyzer loading and aggregation."""

    def test_load_skips_comments(self, results_file):
        df = ResultAnalyzer.load_records(results_file)
        assert len(df) == 3
        assert list(df["url"]) == [URL_A, URL_B, URL_A]

    def test_load_skips_malformed_lines(self, workdir):
        path = workdir / "broken.json"
        path.write_text(RECORD_A_1 + "\n" + '{"url": "https://a.example", "time_' + "\n")

        df = ResultAnalyzer.load_records(path)

        assert len(df) == 1

    def test_load_missing_file(self, workdir):
        with pytest.raises(ResultsFileError):
            ResultAnalyzer.load_records(workdir / "missing.json")

    def test_analyze_overall(self, results_file):
        report = ResultAnalyzer.analyze(ResultAnalyzer.load_records(results_file))

        assert report.count == 3
        assert report.average == pytest.approx(20.0)
        assert report.minimum == pytest.approx(10.0)
        assert report.maximum == pytest.approx(30.0)
        assert report.p50 == pytest.approx(20.0)

    def test_analyze_by_url(self, results_file):
        report = ResultAnalyzer.analyze(ResultAnalyzer.load_records(results_file))

        assert [(s.url, s.count) for s in report.by_url] == [(URL_A, 2), (URL_B, 1)]
        assert report.by_url[0].average == pytest.approx(15.0)
        assert report.by_url[1].average == pytest.approx(30.0)

    def test_analyze_empty(self, workdir):
        path = workdir / "empty.json"
        path.write_text("# httpstat batch results\n# Failed test 1 for x at now\n")

        report = ResultAnalyzer.analyze(ResultAnalyzer.load_records(path))

        assert report.count == 0
        assert report.average is None
        assert report.by_url == []

    def test_slowest(self, results_file):
        df = ResultAnalyzer.load_records(results_file)
        slowest = ResultAnalyzer.slowest(df, 2)
        assert list(slowest["time_total"]) == [30.0, 20.0]

    def test_slowest_empty(self):
        assert ResultAnalyzer.slowest(pd.DataFrame()).empty

    def test_format_report(self, results_file):
        report = ResultAnalyzer.analyze(ResultAnalyzer.load_records(results_file))

        lines = ResultAnalyzer.format_report(report, results_file)

        assert "Total requests: 3" in lines
        assert "Average: 20.00 ms" in lines
        assert f"  2 requests |    15.00 ms avg | {URL_A}" in lines
        assert f"  1 requests |    30.00 ms avg | {URL_B}" in lines

    def test_format_report_without_records(self):
        from httpstat_batch.batch.models import AnalysisReport
        lines = ResultAnalyzer.format_report(AnalysisReport(count=0), "empty.json")
        assert lines[-1] == "Total requests: 0"
