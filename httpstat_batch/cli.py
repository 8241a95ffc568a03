"""Command line entry point for httpstat-batch."""
import argparse
import sys
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from .batch import (
    AnalysisGenerator, BatchConstants, BatchError, BatchRunner, ConsoleReporter, EndpointSource,
    ProbeInvoker, ProbeOptions, RunConfig
)
from .const import EXIT_FAILURE, EXIT_INTERRUPTED, EXIT_OK
from .shared.config import Config
from .shared.logging import LoggingManager


logger = LoggingManager.get_logger(__name__)


class _ArgumentParser(argparse.ArgumentParser):
    """Argument parser that exits with status 1 on bad usage."""

    def error(self, message):
        self.print_help(sys.stderr)
        self.exit(EXIT_FAILURE, f"\n{self.prog}: error: {message}\n")


class BatchCLI:
    """Command line interface for batch probing with httpstat."""

    def __init__(self, settings: Optional[Config] = None):
        self.settings = settings if settings is not None else Config()
        self.parser = self._create_parser()

    def _create_parser(self) -> argparse.ArgumentParser:
        """Create the argument parser."""
        parser = _ArgumentParser(
            prog='httpstat-batch',
            description='Test multiple endpoints with httpstat and collect JSON metrics.',
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  httpstat-batch -f endpoints.txt
  httpstat-batch -e "https://httpbin.org/status/200"
  httpstat-batch -f endpoints.txt -i 50 -o my_results.json

Endpoints file format (one per line):
  https://httpbin.org/status/200
  https://httpbin.org/delay/1
  https://api.github.com
            """
        )
        parser.add_argument('-f', dest='endpoints_file', metavar='FILE',
                            help='File containing list of endpoints (one per line)')
        parser.add_argument('-e', dest='endpoint', metavar='ENDPOINT',
                            help='Single endpoint to test')
        parser.add_argument('-i', dest='iterations', metavar='NUM', type=int,
                            default=self.settings.default_iterations,
                            help=f'Number of iterations per endpoint (default: {self.settings.default_iterations})')
        parser.add_argument('-o', dest='output', metavar='FILE',
                            help='Output file name (default: httpstat_results_TIMESTAMP.json)')
        parser.add_argument('-d', dest='request_delay', metavar='SECONDS', type=float,
                            default=self.settings.default_request_delay,
                            help=f'Delay between requests (default: {self.settings.default_request_delay:g})')
        parser.add_argument('-D', dest='endpoint_delay', metavar='SECONDS', type=float,
                            default=self.settings.default_endpoint_delay,
                            help=f'Delay between endpoints (default: {self.settings.default_endpoint_delay:g})')
        return parser

    @staticmethod
    def default_output_file() -> Path:
        timestamp = datetime.now().strftime(BatchConstants.OUTPUT_TIMESTAMP_FORMAT)
        return Path(BatchConstants.OUTPUT_FILE_TEMPLATE.format(timestamp=timestamp))

    def run(self, argv: Optional[List[str]] = None) -> int:
        """
        Parse arguments and run the batch.

        Returns:
            Process exit code.
        """
        try:
            args = self.parser.parse_args(argv)
        except SystemExit as e:
            return e.code if isinstance(e.code, int) else EXIT_FAILURE

        try:
            config = RunConfig(
                output_file=Path(args.output) if args.output else self.default_output_file(),
                iterations=args.iterations,
                request_delay=args.request_delay,
                endpoint_delay=args.endpoint_delay,
            )
            invoker = ProbeInvoker(ProbeOptions(
                append_target=config.output_file,
                command=self.settings.probe_command,
                timeout=self.settings.probe_timeout,
                metrics_only=self.settings.metrics_only,
            ))
            invoker.ensure_available()

            generator = AnalysisGenerator(self.settings.query_command)
            jq_available = generator.jq_available()
            if not jq_available:
                logger.warning(f"{self.settings.query_command} is not installed. Analysis features will be limited.")
                logger.warning(f"Install with: {BatchConstants.QUERY_TOOL_INSTALL_HINT}")

            source = EndpointSource(self.settings.sample_endpoints_file)
            endpoints = source.resolve(args.endpoints_file, args.endpoint)
        except BatchError as e:
            logger.error(str(e))
            return EXIT_FAILURE
        except OSError as e:
            logger.error(f"Cannot prepare endpoints: {e}")
            return EXIT_FAILURE

        reporter = ConsoleReporter(use_color=self.settings.use_color)
        runner = BatchRunner(config, invoker, reporter=reporter)
        try:
            summary = runner.run(endpoints)
        except KeyboardInterrupt:
            reporter.blank_line()
            logger.error(f"Interrupted, partial results left in {config.output_file}")
            return EXIT_INTERRUPTED
        except OSError as e:
            logger.error(f"Cannot write results to {config.output_file}: {e}")
            return EXIT_FAILURE

        reporter.summary(summary)
        reporter.sample_commands(config.output_file, jq_available)
        try:
            generator.emit(config.output_file)
        except OSError as e:
            logger.error(f"Cannot write analysis script: {e}")
            return EXIT_FAILURE
        return EXIT_OK


def load_settings() -> Optional[Config]:
    """
    Read settings from the environment and httpstat_batch.json.

    Returns:
        Config, or None after logging the problem when a value is invalid.
    """
    try:
        return Config()
    except ValidationError as e:
        LoggingManager.setup_logging()
        logger.error(f"Invalid configuration: {e}")
        return None


def main(argv: Optional[List[str]] = None) -> int:
    """Console script entry point."""
    settings = load_settings()
    if settings is None:
        return EXIT_FAILURE
    LoggingManager.setup_logging(settings.log_level, settings.use_color, settings.library_log_levels)
    return BatchCLI(settings).run(argv)


if __name__ == "__main__":
    sys.exit(main())
