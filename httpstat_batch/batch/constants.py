"""Constants for the batch runner."""


class BatchConstants:
    """Centralized constants for batch runs and result files."""
    SAMPLE_ENDPOINTS = [
        "https://httpbin.org/status/200",
        "https://httpbin.org/delay/1",
        "https://httpbin.org/delay/2",
        "https://api.github.com",
        "https://jsonplaceholder.typicode.com/posts/1",
    ]
    OUTPUT_FILE_TEMPLATE = "httpstat_results_{timestamp}.json"
    OUTPUT_TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"
    ANALYSIS_SCRIPT_TEMPLATE = "analyze_results.sh"
    ANALYSIS_SCRIPT_PREFIX = "analyze_"
    ANALYSIS_SCRIPT_SUFFIX = ".sh"
    RESULTS_SUFFIX = ".json"
    COMMENT_PREFIX = "#"
    RECORD_PREFIX = "{"
    URL_FIELD = "url"
    TIME_TOTAL_FIELD = "time_total"
    SLOWEST_COUNT = 5
    HEADER_LINES = [
        "httpstat batch results - {date}",
        "Format: One JSON object per line",
    ]
    FAILURE_LINE = "Failed test {iteration} for {endpoint} at {date}"
    QUERY_TOOL_INSTALL_HINT = "brew install jq"
    PROBE_TOOL_INSTALL_HINT = "pip install httpstat"
