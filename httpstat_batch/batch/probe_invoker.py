"""Runs the external timing tool against one endpoint."""
import logging
import shutil
import subprocess
import time
from typing import Optional

from .constants import BatchConstants
from .exceptions import MissingToolError
from .models import ProbeOptions, ProbeResult


# Configure logging
logger = logging.getLogger(__name__)


class ProbeInvoker:
    """Launches the probe tool with its output signals and a bounded timeout."""

    def __init__(self, options: ProbeOptions):
        self.options = options

    def ensure_available(self) -> str:
        """
        Check that the probe tool can be found on PATH.

        Returns:
            Resolved path of the tool.

        Raises:
            MissingToolError: If the tool is not installed.
        """
        resolved: Optional[str] = shutil.which(self.options.command)
        if resolved is None:
            raise MissingToolError(
                f"{self.options.command} is not installed or not in PATH "
                f"(install with: {BatchConstants.PROBE_TOOL_INSTALL_HINT})"
            )
        return resolved

    def probe(self, endpoint: str, iteration: int) -> ProbeResult:
        """
        Probe an endpoint once.

        The tool appends its own JSON record to the append target; only the
        exit status is observed here.

        Args:
            endpoint: URL to probe.
            iteration: 1-based iteration number, for reporting.

        Returns:
            ProbeResult describing the outcome.
        """
        cmd = [self.options.command, endpoint]
        start_time = time.perf_counter()
        try:
            completed = subprocess.run(
                cmd,
                env=self.options.environment(),
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                timeout=self.options.timeout,
                check=False,
            )
        except subprocess.TimeoutExpired:
            logger.debug(f"Probe {iteration} of {endpoint} timed out after {self.options.timeout}s")
            return ProbeResult(endpoint, iteration, success=False, timed_out=True,
                               duration=time.perf_counter() - start_time)
        except OSError as e:
            logger.debug(f"Probe {iteration} of {endpoint} could not be started: {e}")
            return ProbeResult(endpoint, iteration, success=False,
                               duration=time.perf_counter() - start_time)

        duration = time.perf_counter() - start_time
        if completed.returncode != 0:
            logger.debug(f"Probe {iteration} of {endpoint} exited with {completed.returncode}")
        return ProbeResult(endpoint, iteration, success=completed.returncode == 0,
                           return_code=completed.returncode, duration=duration)
