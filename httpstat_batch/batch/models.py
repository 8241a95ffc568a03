"""Data models for the batch runner."""
import math
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Mapping, Optional

from ..const import APPEND_JSON_ENV, DEFAULT_PROBE_COMMAND, DEFAULT_PROBE_TIMEOUT, METRICS_ONLY_ENV
from .exceptions import InvalidConfigurationError


@dataclass(frozen=True)
class RunConfig:
    """Parameters of a single batch run."""
    output_file: Path
    iterations: int = 25
    request_delay: float = 1.0
    endpoint_delay: float = 5.0

    def __post_init__(self):
        if self.iterations <= 0:
            raise InvalidConfigurationError(f"Iterations must be a positive integer, got {self.iterations}")
        if not math.isfinite(self.request_delay) or self.request_delay < 0:
            raise InvalidConfigurationError(f"Delay between requests must be a finite, non-negative number, got {self.request_delay}")
        if not math.isfinite(self.endpoint_delay) or self.endpoint_delay < 0:
            raise InvalidConfigurationError(f"Delay between endpoints must be a finite, non-negative number, got {self.endpoint_delay}")


@dataclass(frozen=True)
class ProbeOptions:
    """How to launch the probe tool and what to signal to it."""
    append_target: Path
    command: str = DEFAULT_PROBE_COMMAND
    timeout: float = DEFAULT_PROBE_TIMEOUT
    metrics_only: bool = True
    metrics_only_env: str = METRICS_ONLY_ENV
    append_target_env: str = APPEND_JSON_ENV

    def environment(self, base: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
        """Build the child process environment on top of ``base`` (defaults to os.environ)."""
        env = dict(os.environ if base is None else base)
        if self.metrics_only:
            env[self.metrics_only_env] = "true"
        env[self.append_target_env] = str(self.append_target)
        return env


@dataclass
class ProbeResult:
    """Outcome of one probe invocation."""
    endpoint: str
    iteration: int
    success: bool
    return_code: Optional[int] = None
    timed_out: bool = False
    duration: float = 0.0


@dataclass
class EndpointStats:
    """Counters for one endpoint."""
    endpoint: str
    attempted: int = 0
    failed: int = 0
    duration: float = 0.0

    def record(self, result: ProbeResult) -> None:
        self.attempted += 1
        if not result.success:
            self.failed += 1


@dataclass
class RunTally:
    """Running totals across all endpoints of a run."""
    attempted: int = 0
    failed: int = 0

    def record(self, result: ProbeResult) -> None:
        self.attempted += 1
        if not result.success:
            self.failed += 1


@dataclass
class RunSummary:
    """Final figures of a batch run."""
    total: int
    failed: int
    duration: float
    output_file: Path
    endpoints: List[EndpointStats] = field(default_factory=list)

    @property
    def successful(self) -> int:
        return self.total - self.failed

    @property
    def success_rate(self) -> Optional[float]:
        """Percentage of successful probes, or None when nothing was attempted."""
        if self.total == 0:
            return None
        return 100.0 * (self.total - self.failed) / self.total


@dataclass
class UrlStats:
    """Aggregate latency for one URL."""
    url: str
    count: int
    average: float


@dataclass
class AnalysisReport:
    """Aggregates computed from a results file."""
    count: int
    average: Optional[float] = None
    minimum: Optional[float] = None
    maximum: Optional[float] = None
    p50: Optional[float] = None
    p90: Optional[float] = None
    p95: Optional[float] = None
    by_url: List[UrlStats] = field(default_factory=list)
