"""Core module exports."""

from apibump.core.errors import (
    ApibumpError,
    BuildError,
    ConfigError,
    ErrorCode,
    InternalError,
)
from apibump.core.logging import (
    clear_run_id,
    configure_logging,
    get_logger,
    get_run_id,
    set_run_id,
)
from apibump.core.progress import spinner, status, task

__all__ = [
    # Errors
    "ApibumpError",
    "BuildError",
    "ConfigError",
    "ErrorCode",
    "InternalError",
    # Logging
    "clear_run_id",
    "configure_logging",
    "get_logger",
    "get_run_id",
    "set_run_id",
    # Progress
    "spinner",
    "status",
    "task",
]
