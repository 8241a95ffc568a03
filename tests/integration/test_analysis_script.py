"""Runs the generated analysis script against a results file."""

import shutil
import subprocess

import pytest

from httpstat_batch.analyze import analyze
from httpstat_batch.batch.analysis_generator import AnalysisGenerator
from ..test_const import RESULTS_FILE_CONTENT, URL_A, URL_B


requires_shell_tools = pytest.mark.skipif(
    shutil.which("bash") is None or shutil.which("jq") is None,
    reason="bash and jq are required to run the analysis script",
)


@pytest.fixture
def results_file(workdir):
    path = workdir / "results.json"
    path.write_text(RESULTS_FILE_CONTENT)
    return path


class TestAnalysisScript:
    """Test the emitted shell script and its Python counterpart."""

    @requires_shell_tools
    def test_script_summarizes_each_url(self, results_file):
        script = AnalysisGenerator().emit(results_file)

        completed = subprocess.run(["bash", str(script), str(results_file)],
                                   capture_output=True, text=True, check=True)

        lines = completed.stdout.splitlines()
        assert "Total requests: 3" in lines
        assert "Average: 20.00 ms" in lines
        assert "Min:     10.00 ms" in lines
        assert "Max:     30.00 ms" in lines
        assert f"  2 requests |    15.00 ms avg | {URL_A}" in lines
        assert f"  1 requests |    30.00 ms avg | {URL_B}" in lines

    @pytest.mark.skipif(shutil.which("bash") is None, reason="bash is required")
    def test_script_usage_error(self, workdir):
        script = AnalysisGenerator().emit(workdir / "results.json")

        completed = subprocess.run(["bash", str(script), str(workdir / "missing.json")],
                                   capture_output=True, text=True)

        assert completed.returncode == 1
        assert "Usage:" in completed.stdout

    def test_python_analysis_matches(self, results_file, capsys):
        assert analyze(str(results_file), top=1) == 0

        lines = capsys.readouterr().out.splitlines()
        assert f"  2 requests |    15.00 ms avg | {URL_A}" in lines
        assert f"  1 requests |    30.00 ms avg | {URL_B}" in lines
        assert f"   30.00 ms | {URL_B}" in lines

    def test_python_analysis_missing_file(self, workdir):
        assert analyze(str(workdir / "missing.json")) == 1

    def test_python_analysis_plot(self, results_file, workdir):
        plot = workdir / "latency.png"
        assert analyze(str(results_file), plot=str(plot)) == 0
        assert plot.exists()
