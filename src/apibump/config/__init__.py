"""Config module exports."""

from apibump.config.loader import ApibumpSettings, load_config
from apibump.config.models import (
    ApibumpConfig,
    BuildConfig,
    LoggingConfig,
    VersioningConfig,
)

__all__ = [
    "load_config",
    "ApibumpConfig",
    "ApibumpSettings",
    "BuildConfig",
    "LoggingConfig",
    "VersioningConfig",
]
