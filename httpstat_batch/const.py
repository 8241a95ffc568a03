"""Constants for httpstat-batch."""

# Default configuration values
DEFAULT_PROBE_COMMAND = "httpstat"
DEFAULT_QUERY_COMMAND = "jq"
DEFAULT_PROBE_TIMEOUT = 30  # seconds
DEFAULT_ITERATIONS = 25
DEFAULT_REQUEST_DELAY = 1.0  # seconds
DEFAULT_ENDPOINT_DELAY = 5.0  # seconds
DEFAULT_SAMPLE_ENDPOINTS_FILE = "endpoints.txt"
DEFAULT_CONFIG_FILE = "httpstat_batch.json"
ENV_PREFIX = "HTTPSTAT_BATCH_"

# Environment signals understood by the probe tool
METRICS_ONLY_ENV = "HTTPSTAT_METRICS_ONLY"
APPEND_JSON_ENV = "HTTPSTAT_APPEND_JSON"

# Logging configuration
DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = "[%(asctime)s] %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"

# Library log levels
LIBRARY_LOG_LEVELS = {
    "matplotlib": "WARNING",
    "PIL": "WARNING",
}

# ANSI color codes
RED = "\033[0;31m"
GREEN = "\033[0;32m"
YELLOW = "\033[1;33m"
BLUE = "\033[0;34m"
NO_COLOR = "\033[0m"

# Exit codes
EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130
