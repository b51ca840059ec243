"""Logging configuration for CLI."""

from enum import Enum

from realm_clone.core.logging import configure_logging


class LogLevel(str, Enum):
    """Log level options."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class LogFormat(str, Enum):
    """Log format options."""

    CONSOLE = "console"
    JSON = "json"


def configure_cli_logging(
    log_level: LogLevel | str = LogLevel.WARNING,
    log_format: LogFormat | str = LogFormat.CONSOLE,
) -> None:
    """
    Configure logging for a CLI invocation.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_format: Format for logs (console or json)
    """
    configure_logging(
        level=LogLevel(log_level).value,
        format=LogFormat(log_format).value,
        force=True,
    )
