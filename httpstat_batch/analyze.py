"""
Analyze an httpstat-batch results file without jq.
Prints the same summary as the generated analysis script, plus percentiles.
"""
import argparse
import sys
from typing import List, Optional

from .batch import BatchConstants, ResultAnalyzer, ResultsFileError
from .const import EXIT_FAILURE, EXIT_OK
from .cli import load_settings
from .shared.logging import LoggingManager


logger = LoggingManager.get_logger(__name__)


def _create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='httpstat-batch-analyze',
        description='Summarize an httpstat-batch results file.',
    )
    parser.add_argument('results_file', help='Results file (JSON lines)')
    parser.add_argument('--plot', metavar='PNG', help='Save a per-endpoint latency plot to this path')
    parser.add_argument('--top', metavar='N', type=int, default=0,
                        help='Also list the N slowest requests')
    return parser


def analyze(results_file: str, plot: Optional[str] = None, top: int = 0) -> int:
    """
    Print the analysis of a results file.

    Args:
        results_file: Path to the results file.
        plot: Optional PNG path for the latency plot.
        top: Number of slowest requests to list (0 disables the listing).

    Returns:
        Process exit code.
    """
    analyzer = ResultAnalyzer()
    try:
        df = analyzer.load_records(results_file)
    except ResultsFileError as e:
        logger.error(str(e))
        return EXIT_FAILURE

    report = analyzer.analyze(df)
    print("\n".join(analyzer.format_report(report, results_file)))

    if top > 0 and report.count > 0:
        print("\n=== Slowest Requests ===")
        for _, row in analyzer.slowest(df, top).iterrows():
            print(f"{row[BatchConstants.TIME_TOTAL_FIELD]:8.2f} ms | {row.get(BatchConstants.URL_FIELD, '')}")

    if plot:
        from .batch.visualization_generator import VisualizationGenerator
        VisualizationGenerator().plot_latency_by_endpoint(df, plot)

    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    """Console script entry point."""
    settings = load_settings()
    if settings is None:
        return EXIT_FAILURE
    LoggingManager.setup_logging(settings.log_level, settings.use_color, settings.library_log_levels)
    args = _create_parser().parse_args(argv)
    return analyze(args.results_file, plot=args.plot, top=args.top)


if __name__ == "__main__":
    sys.exit(main())
