from pathlib import Path
from typing import Dict

from pydantic import Field
from pydantic_settings import BaseSettings, JsonConfigSettingsSource, SettingsConfigDict

from ..const import (
    DEFAULT_CONFIG_FILE, DEFAULT_ENDPOINT_DELAY, DEFAULT_ITERATIONS, DEFAULT_LOG_LEVEL,
    DEFAULT_PROBE_COMMAND, DEFAULT_PROBE_TIMEOUT, DEFAULT_QUERY_COMMAND, DEFAULT_REQUEST_DELAY,
    DEFAULT_SAMPLE_ENDPOINTS_FILE, ENV_PREFIX, LIBRARY_LOG_LEVELS
)


class Config(BaseSettings):
    """Global configuration settings for httpstat-batch."""

    probe_command: str = DEFAULT_PROBE_COMMAND
    probe_timeout: float = Field(default=DEFAULT_PROBE_TIMEOUT, gt=0, allow_inf_nan=False)
    query_command: str = DEFAULT_QUERY_COMMAND
    metrics_only: bool = True
    default_iterations: int = DEFAULT_ITERATIONS
    default_request_delay: float = DEFAULT_REQUEST_DELAY
    default_endpoint_delay: float = DEFAULT_ENDPOINT_DELAY
    sample_endpoints_file: Path = Path(DEFAULT_SAMPLE_ENDPOINTS_FILE)
    log_level: str = DEFAULT_LOG_LEVEL
    use_color: bool = True
    library_log_levels: Dict[str, str] = dict(LIBRARY_LOG_LEVELS)

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        json_file=DEFAULT_CONFIG_FILE,
        extra='ignore',
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        """
        Customise the sources for settings.

        Order of precedence (highest to lowest):
        1. Init settings (kwargs passed to constructor)
        2. Environment variables
        3. JSON config file (httpstat_batch.json in the working directory)
        4. Default values
        """
        return (
            init_settings,
            env_settings,
            JsonConfigSettingsSource(settings_cls),
        )
