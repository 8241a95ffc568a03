"""Console output for batch runs."""
import logging
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from ..const import BLUE, GREEN, NO_COLOR, RED
from .constants import BatchConstants
from .models import RunSummary


# Configure logging
logger = logging.getLogger(__name__)

SEPARATOR = "=" * 34


class ConsoleReporter:
    """Renders progress, per-endpoint results and the final summary."""

    def __init__(self, stream: Optional[TextIO] = None, use_color: bool = True):
        self.stream = stream if stream is not None else sys.stdout
        self.use_color = use_color

    def _color(self, code: str) -> str:
        return code if self.use_color else ""

    def _write(self, text: str) -> None:
        self.stream.write(text)
        self.stream.flush()

    def blank_line(self) -> None:
        self._write("\n")

    def progress(self, iteration: int, iterations: int) -> None:
        """Redraw the live progress line."""
        self._write(f"\r  {self._color(BLUE)}Progress: {iteration}/{iterations}{self._color(NO_COLOR)}")

    def endpoint_completed(self, iterations: int, failures: int) -> None:
        """Replace the progress line with the endpoint result."""
        line = f"\r  {self._color(GREEN)}Completed: {iterations}/{iterations} tests"
        if failures > 0:
            line += f" {self._color(RED)}({failures} failures)"
        self._write(f"{line}{self._color(NO_COLOR)}\n")

    def waiting(self, delay: float) -> None:
        self._write(f"  Waiting {delay:g}s before next endpoint...\n")

    def summary(self, summary: RunSummary) -> None:
        """Print the final run summary."""
        rate = summary.success_rate
        rate_text = "N/A" if rate is None else f"{rate:.1f}%"
        lines = [
            SEPARATOR,
            f"  Total tests: {summary.total}",
            f"  Successful: {summary.successful}",
            f"  Failed: {summary.failed}",
            f"  Success rate: {rate_text}",
            f"  Total duration: {summary.duration:.0f}s",
            f"  Results saved to: {summary.output_file}",
            SEPARATOR,
        ]
        self._write("\n".join(lines) + "\n")

    def sample_commands(self, output_file: Path, jq_available: bool) -> None:
        """Print example shell commands for inspecting the results file."""
        self._write("\n".join(self._sample_command_lines(output_file, jq_available)) + "\n")

    @staticmethod
    def _sample_command_lines(output_file: Path, jq_available: bool) -> List[str]:
        lines = [
            "",
            "Sample analysis commands:",
            "  # Count total requests:",
            f"    grep -c '^{{' {output_file}",
            "",
        ]
        if jq_available:
            lines += [
                "  # Average response time:",
                f"    grep '^{{' {output_file} | jq '.time_total' | "
                "awk '{sum+=$1; count++} END {print \"Average:\", sum/count \"ms\"}'",
                "",
                "  # Response times by URL:",
                f"    grep '^{{' {output_file} | jq -r '\"\\(.url): \\(.time_total)ms\"'",
                "",
                "  # Find slowest requests:",
                f"    grep '^{{' {output_file} | jq -s 'sort_by(.time_total) | reverse | "
                f".[0:{BatchConstants.SLOWEST_COUNT}]'",
            ]
        else:
            lines += [
                "  # Install jq for JSON analysis:",
                f"    {BatchConstants.QUERY_TOOL_INSTALL_HINT}",
            ]
        return lines
