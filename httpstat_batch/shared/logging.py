import logging
import sys
from typing import Dict, Optional

from ..const import GREEN, LOG_DATE_FORMAT, LOG_FORMAT, NO_COLOR, RED, YELLOW


class ConsoleFormatter(logging.Formatter):
    """Formats records as ``[HH:MM:SS] message`` with level prefixes for problems."""

    LEVEL_COLORS = {
        logging.DEBUG: GREEN,
        logging.INFO: GREEN,
        logging.WARNING: YELLOW,
        logging.ERROR: RED,
        logging.CRITICAL: RED,
    }

    def __init__(self, use_color: bool = True):
        super().__init__(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        timestamp = self.formatTime(record, self.datefmt)
        prefix = f"[{timestamp}]"
        if record.levelno >= logging.WARNING:
            prefix = f"{prefix} {record.levelname}:"
        if self.use_color:
            color = self.LEVEL_COLORS.get(record.levelno, GREEN)
            prefix = f"{color}{prefix}{NO_COLOR}"

        message = f"{prefix} {record.getMessage()}"
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"
        return message


class LoggingManager:
    """Manager for logging setup and logger retrieval."""

    _handler: Optional[logging.Handler] = None

    @classmethod
    def setup_logging(cls, level: str = "INFO", use_color: bool = True,
                      library_log_levels: Optional[Dict[str, str]] = None) -> None:
        """Setup console logging for the application.

        Args:
            level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            use_color: Whether to wrap the timestamp prefix in ANSI colors
            library_log_levels: Per-library level overrides for noisy loggers
        """
        # Convert string level to logging level
        numeric_level = getattr(logging, level.upper(), logging.INFO)

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(ConsoleFormatter(use_color=use_color))
        console_handler.setLevel(numeric_level)

        # Replace the handler from a previous setup instead of stacking them
        root_logger = logging.getLogger()
        if cls._handler is not None:
            root_logger.removeHandler(cls._handler)
        root_logger.setLevel(numeric_level)
        root_logger.addHandler(console_handler)
        cls._handler = console_handler

        for logger_name, library_level in (library_log_levels or {}).items():
            logging.getLogger(logger_name).setLevel(getattr(logging, library_level.upper(), logging.WARNING))

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        """Get a logger instance.

        Args:
            name: Logger name, typically __name__

        Returns:
            Configured logger instance
        """
        return logging.getLogger(name)
