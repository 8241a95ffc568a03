"""Unit tests for results file comment lines."""

from httpstat_batch.batch.result_writer import ResultWriter
from ..test_const import FIXED_DATE, RECORD_A_1, URL_B


class TestResultWriter:
    """Test ResultWriter append-only behavior."""

    def test_header(self, workdir):
        output = workdir / "out.json"
        ResultWriter(output, clock=lambda: FIXED_DATE).write_header()

        assert output.read_text().splitlines() == [
            f"# httpstat batch results - {FIXED_DATE}",
            "# Format: One JSON object per line",
        ]

    def test_header_keeps_existing_content(self, workdir):
        output = workdir / "out.json"
        output.write_text(RECORD_A_1 + "\n")

        ResultWriter(output, clock=lambda: FIXED_DATE).write_header()

        lines = output.read_text().splitlines()
        assert lines[0] == RECORD_A_1
        assert len(lines) == 3

    def test_failure_line(self, workdir):
        output = workdir / "out.json"
        ResultWriter(output, clock=lambda: FIXED_DATE).record_failure(URL_B, 4)

        assert output.read_text() == f"# Failed test 4 for {URL_B} at {FIXED_DATE}\n"
