"""Custom exceptions for the batch runner."""


class BatchError(Exception):
    """Base exception for fatal batch run errors."""
    pass


class MissingToolError(BatchError):
    """Exception raised when the probe tool is not on PATH."""
    pass


class EndpointsFileNotFoundError(BatchError):
    """Exception raised when the given endpoints file does not exist."""
    pass


class NoEndpointsError(BatchError):
    """Exception raised when no endpoints are left after filtering."""
    pass


class InvalidConfigurationError(BatchError):
    """Exception raised when run parameters are out of range."""
    pass


class ResultsFileError(BatchError):
    """Exception raised when a results file cannot be read for analysis."""
    pass
