"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (APIBUMP__SECTION__KEY)
3. Repo YAML (.apibump/config.yaml)
4. Global YAML (~/.config/apibump/config.yaml)
5. Built-in defaults (this file)

Environment Variable Format:
    APIBUMP__<SECTION>__<KEY>=<VALUE>

Examples:
    APIBUMP__LOGGING__LEVEL=DEBUG
    APIBUMP__VERSIONING__INITIAL_VERSION=1.0.0
    APIBUMP__BUILD__TIMEOUT_SEC=600
    APIBUMP__BUILD__COMMAND='["make", "interface"]'
"""

import re
import shlex
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from apibump.config.constants import (
    DEFAULT_COMMENT_MARKER,
    DEFAULT_INITIAL_VERSION,
    DEFAULT_INTERFACE_GLOB,
    DEFAULT_TAG_PATTERN,
    SEMVER_CORE_PATTERN,
)

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration.

    Env vars: Not directly configurable via env (use YAML for multi-output).
    """

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        APIBUMP__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="WARNING",
        description="Root log level. stdout stays reserved for the proposed version; "
        "INFO adds per-build timings, DEBUG every git and build step.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class VersioningConfig(BaseModel):
    """Version proposal configuration.

    Env vars:
        APIBUMP__VERSIONING__TAG_PATTERN: Glob selecting release tags
        APIBUMP__VERSIONING__COMMENT_MARKER: Prefix of ignored interface lines
        APIBUMP__VERSIONING__INITIAL_VERSION: Proposal when no release tag exists
    """

    tag_pattern: str = Field(
        default=DEFAULT_TAG_PATTERN,
        description="Glob (git tag --list syntax) selecting release tags. "
        "Tags that match but are not plain MAJOR.MINOR.PATCH are echoed back unchanged.",
    )
    comment_marker: str = Field(
        default=DEFAULT_COMMENT_MARKER,
        description="Interface lines starting with this marker are ignored by the diff.",
    )
    initial_version: str = Field(
        default=DEFAULT_INITIAL_VERSION,
        description="Version proposed when the repository has no release tag yet.",
    )

    @field_validator("tag_pattern", "comment_marker")
    @classmethod
    def validate_not_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("must not be empty")
        return v

    @field_validator("initial_version")
    @classmethod
    def validate_initial_version(cls, v: str) -> str:
        if not re.fullmatch(SEMVER_CORE_PATTERN, v, flags=re.ASCII):
            raise ValueError(f"Initial version must be MAJOR.MINOR.PATCH, got {v!r}")
        return v


class BuildConfig(BaseModel):
    """Public interface build configuration.

    The command runs twice per proposal: once in an export of the release tag,
    once in the repository root. Each run must leave exactly one file matching
    interface_glob under its directory.

    Env vars:
        APIBUMP__BUILD__COMMAND: JSON list, e.g. '["make", "interface"]'
        APIBUMP__BUILD__INTERFACE_GLOB: Glob locating the interface dump
        APIBUMP__BUILD__TIMEOUT_SEC: Per-build timeout
    """

    command: list[str] = Field(
        default_factory=list,
        description="Build command producing the interface dump. Empty means the dump "
        "is committed to the repository and no build runs.",
    )
    interface_glob: str = Field(
        default=DEFAULT_INTERFACE_GLOB,
        description="Glob, relative to the build directory, matching the interface dump.",
    )
    clean_paths: list[str] = Field(
        default_factory=list,
        description="Paths (relative to the build directory) removed before building "
        "so that no cached build products leak into the dump.",
    )
    timeout_sec: float = Field(
        default=1800.0,
        description="Per-build timeout. RISK: Too low aborts cold builds.",
    )
    env: dict[str, str] = Field(
        default_factory=dict,
        description="Extra environment variables for the build command.",
    )

    @field_validator("command", mode="before")
    @classmethod
    def split_command(cls, v: object) -> object:
        if isinstance(v, str):
            # YAML may spell the command as one shell-style string
            return shlex.split(v)
        return v

    @field_validator("interface_glob")
    @classmethod
    def validate_interface_glob(cls, v: str) -> str:
        if not v or Path(v).is_absolute():
            raise ValueError(f"Interface glob must be a non-empty relative pattern: {v!r}")
        return v

    @field_validator("clean_paths")
    @classmethod
    def validate_clean_paths(cls, v: list[str]) -> list[str]:
        for entry in v:
            path = Path(entry)
            if path.is_absolute() or ".." in path.parts:
                raise ValueError(f"Clean path must stay inside the build directory: {entry}")
        return v

    @field_validator("timeout_sec")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError(f"Timeout must be positive, got {v}")
        return v


class ApibumpConfig(BaseModel):
    """Root configuration for apibump.

    All settings can be configured via:
    1. Environment variables: APIBUMP__SECTION__KEY
    2. YAML config files (repo or global)
    3. Direct kwargs to load_config()
    """

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    versioning: VersioningConfig = Field(default_factory=VersioningConfig)
    build: BuildConfig = Field(default_factory=BuildConfig)
