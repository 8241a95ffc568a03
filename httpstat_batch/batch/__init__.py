"""Batch runner package initialization."""
from .models import (
    RunConfig, ProbeOptions, ProbeResult, EndpointStats, RunTally, RunSummary, UrlStats, AnalysisReport
)
from .constants import BatchConstants
from .exceptions import (
    BatchError, MissingToolError, EndpointsFileNotFoundError, NoEndpointsError,
    InvalidConfigurationError, ResultsFileError
)
from .endpoint_source import EndpointSource
from .probe_invoker import ProbeInvoker
from .result_writer import ResultWriter
from .reporter import ConsoleReporter
from .runner import BatchRunner
from .analysis_generator import AnalysisGenerator
from .result_analyzer import ResultAnalyzer

__all__ = [
    'RunConfig',
    'ProbeOptions',
    'ProbeResult',
    'EndpointStats',
    'RunTally',
    'RunSummary',
    'UrlStats',
    'AnalysisReport',
    'BatchConstants',
    'BatchError',
    'MissingToolError',
    'EndpointsFileNotFoundError',
    'NoEndpointsError',
    'InvalidConfigurationError',
    'ResultsFileError',
    'EndpointSource',
    'ProbeInvoker',
    'ResultWriter',
    'ConsoleReporter',
    'BatchRunner',
    'AnalysisGenerator',
    'ResultAnalyzer',
]
