"""Analyzes results files and computes latency statistics."""
import json
import logging
from pathlib import Path
from typing import List, Union

import numpy as np
import pandas as pd

from .constants import BatchConstants
from .exceptions import ResultsFileError
from .models import AnalysisReport, UrlStats


# Configure logging
logger = logging.getLogger(__name__)


class ResultAnalyzer:
    """Loads JSON-lines results files and aggregates ``time_total`` per URL."""

    @staticmethod
    def load_records(input_path: Union[Path, str]) -> pd.DataFrame:
        """
        Load metric records from a results file.

        Comment lines are skipped. Lines that start like a record but do not
        parse are logged and skipped.

        Args:
            input_path: Results file written by a batch run.

        Returns:
            DataFrame with one row per record.

        Raises:
            ResultsFileError: If the file does not exist.
        """
        input_path = Path(input_path)
        if not input_path.is_file():
            raise ResultsFileError(f"Results file '{input_path}' not found")

        records = []
        with open(input_path, 'r', encoding='utf-8') as f:
            for line_number, line in enumerate(f, start=1):
                if not line.startswith(BatchConstants.RECORD_PREFIX):
                    continue
                try:
                    records.append(json.loads(line))
                except json.JSONDecodeError as e:
                    logger.warning(f"Skipping malformed record on line {line_number}: {e}")

        df = pd.DataFrame(records)
        if BatchConstants.TIME_TOTAL_FIELD in df.columns:
            df[BatchConstants.TIME_TOTAL_FIELD] = pd.to_numeric(df[BatchConstants.TIME_TOTAL_FIELD], errors='coerce')
        logger.debug(f"Loaded {len(df)} records from {input_path}")
        return df

    @staticmethod
    def analyze(df: pd.DataFrame) -> AnalysisReport:
        """
        Compute overall and per-URL latency figures.

        Args:
            df: Records as returned by load_records.

        Returns:
            AnalysisReport; only ``count`` is set when there are no records.
        """
        report = AnalysisReport(count=len(df))
        if df.empty or BatchConstants.TIME_TOTAL_FIELD not in df.columns:
            return report

        times = df[BatchConstants.TIME_TOTAL_FIELD].dropna()
        if times.empty:
            return report

        report.average = float(times.mean())
        report.minimum = float(times.min())
        report.maximum = float(times.max())
        report.p50 = float(np.percentile(times, 50))
        report.p90 = float(np.percentile(times, 90))
        report.p95 = float(np.percentile(times, 95))

        if BatchConstants.URL_FIELD in df.columns:
            grouped = df.groupby(BatchConstants.URL_FIELD, sort=True)[BatchConstants.TIME_TOTAL_FIELD]
            for url, group in grouped:
                report.by_url.append(UrlStats(url=str(url), count=int(group.size), average=float(group.mean())))
        return report

    @staticmethod
    def slowest(df: pd.DataFrame, count: int = BatchConstants.SLOWEST_COUNT) -> pd.DataFrame:
        """Return the ``count`` records with the largest ``time_total``."""
        if df.empty or BatchConstants.TIME_TOTAL_FIELD not in df.columns:
            return df
        return df.sort_values(by=BatchConstants.TIME_TOTAL_FIELD, ascending=False).head(count)

    @staticmethod
    def format_report(report: AnalysisReport, source: Union[Path, str]) -> List[str]:
        """Render a report in the same layout as the generated analysis script."""
        lines = [
            "=== httpstat Results Analysis ===",
            f"File: {source}",
            "",
            "=== Summary ===",
            f"Total requests: {report.count}",
        ]
        if report.average is None:
            return lines

        lines += [
            "",
            "=== Response Time Statistics ===",
            f"Average: {report.average:.2f} ms",
            f"Min:     {report.minimum:.2f} ms",
            f"Max:     {report.maximum:.2f} ms",
            f"P50:     {report.p50:.2f} ms",
            f"P90:     {report.p90:.2f} ms",
            f"P95:     {report.p95:.2f} ms",
        ]
        if report.by_url:
            lines += ["", "=== By Endpoint ==="]
            for stats in report.by_url:
                lines.append(f"{stats.count:3d} requests | {stats.average:8.2f} ms avg | {stats.url}")
        return lines
