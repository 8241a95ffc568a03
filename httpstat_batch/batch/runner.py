"""Batch runner to orchestrate probing of all endpoints."""
import logging
import time
from typing import Callable, List, Optional

from .models import EndpointStats, RunConfig, RunSummary, RunTally
from .probe_invoker import ProbeInvoker
from .reporter import ConsoleReporter
from .result_writer import ResultWriter


# Configure logging
logger = logging.getLogger(__name__)


class BatchRunner:
    """Probes every endpoint ``iterations`` times, strictly one probe at a time."""

    def __init__(self, config: RunConfig, invoker: ProbeInvoker,
                 writer: Optional[ResultWriter] = None,
                 reporter: Optional[ConsoleReporter] = None,
                 sleep: Callable[[float], None] = time.sleep,
                 clock: Callable[[], float] = time.monotonic):
        self.config = config
        self.invoker = invoker
        self.writer = writer if writer is not None else ResultWriter(config.output_file)
        self.reporter = reporter if reporter is not None else ConsoleReporter()
        self.sleep = sleep
        self.clock = clock

    def run(self, endpoints: List[str]) -> RunSummary:
        """
        Run the complete batch.

        Args:
            endpoints: Endpoints to probe, in order.

        Returns:
            RunSummary with totals over all endpoints.
        """
        self.writer.write_header()

        tally = RunTally()
        endpoint_stats = []
        start_time = self.clock()

        logger.info("Starting httpstat batch testing")
        logger.info(f"Endpoints: {len(endpoints)}")
        logger.info(f"Iterations per endpoint: {self.config.iterations}")
        logger.info(f"Output file: {self.config.output_file}")
        logger.info(f"Total tests: {len(endpoints) * self.config.iterations}")
        self.reporter.blank_line()

        for index, endpoint in enumerate(endpoints, start=1):
            logger.info(f"Testing endpoint {index}/{len(endpoints)}: {endpoint}")
            stats = self.run_endpoint(endpoint, tally)
            endpoint_stats.append(stats)

            self.reporter.endpoint_completed(self.config.iterations, stats.failed)
            logger.info(f"Endpoint completed in {stats.duration:.0f}s")

            if index < len(endpoints):
                self.reporter.waiting(self.config.endpoint_delay)
                self.sleep(self.config.endpoint_delay)
            self.reporter.blank_line()

        summary = RunSummary(
            total=tally.attempted,
            failed=tally.failed,
            duration=self.clock() - start_time,
            output_file=self.config.output_file,
            endpoints=endpoint_stats,
        )
        logger.info("Batch testing completed!")
        return summary

    def run_endpoint(self, endpoint: str, tally: RunTally) -> EndpointStats:
        """
        Probe one endpoint for all iterations.

        Args:
            endpoint: URL to probe.
            tally: Run-wide accumulator, updated in place.

        Returns:
            EndpointStats for this endpoint.
        """
        stats = EndpointStats(endpoint)
        start_time = self.clock()
        iterations = self.config.iterations

        for iteration in range(1, iterations + 1):
            self.reporter.progress(iteration, iterations)

            result = self.invoker.probe(endpoint, iteration)
            tally.record(result)
            stats.record(result)
            if not result.success:
                self.writer.record_failure(endpoint, iteration)

            if iteration < iterations:
                self.sleep(self.config.request_delay)

        stats.duration = self.clock() - start_time
        return stats
