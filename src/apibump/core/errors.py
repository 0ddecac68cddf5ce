"""apibump error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 4xxx: Build
- 9xxx: Internal

Git failures use the exception hierarchy in ``apibump.git.errors``.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002

    # Build (4xxx)
    BUILD_FAILED = 4001
    BUILD_TIMEOUT = 4002
    BUILD_COMMAND_NOT_FOUND = 4003
    INTERFACE_NOT_FOUND = 4004
    INTERFACE_AMBIGUOUS = 4005

    # Internal (9xxx)
    INTERNAL_ERROR = 9001


@dataclass(frozen=True)
class ApibumpError(Exception):
    """Base error with structured context for CLI and JSON output."""

    code: ErrorCode
    message: str
    retryable: bool = False
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'BUILD_FAILED')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON output."""
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "retryable": self.retryable,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(ApibumpError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )


class BuildError(ApibumpError):
    """Errors raised while producing a public interface dump."""

    @classmethod
    def failed(cls, command: list[str], exit_code: int, output: str) -> "BuildError":
        return cls(
            code=ErrorCode.BUILD_FAILED,
            message=(
                f"Build command exited with status {exit_code}: {' '.join(command)}\n"
                f"{output.rstrip()}\n"
                "Cannot complete the build due to the compile error. Check logs above."
            ),
            details={"command": command, "exit_code": exit_code},
        )

    @classmethod
    def timed_out(cls, command: list[str], timeout_sec: float) -> "BuildError":
        return cls(
            code=ErrorCode.BUILD_TIMEOUT,
            message=f"Build command timed out after {timeout_sec:g}s: {' '.join(command)}",
            retryable=True,
            details={"command": command, "timeout_sec": timeout_sec},
        )

    @classmethod
    def command_not_found(cls, command: list[str], reason: str) -> "BuildError":
        return cls(
            code=ErrorCode.BUILD_COMMAND_NOT_FOUND,
            message=f"Cannot run build command {command[0]!r}: {reason}",
            details={"command": command, "reason": reason},
        )

    @classmethod
    def interface_not_found(cls, workdir: str, pattern: str) -> "BuildError":
        return cls(
            code=ErrorCode.INTERFACE_NOT_FOUND,
            message=f"No public interface file matching '{pattern}' under {workdir}",
            details={"workdir": workdir, "pattern": pattern},
        )

    @classmethod
    def ambiguous_interface(cls, pattern: str, matches: list[str]) -> "BuildError":
        return cls(
            code=ErrorCode.INTERFACE_AMBIGUOUS,
            message=(
                f"Pattern '{pattern}' matched {len(matches)} interface files; "
                "narrow build.interface_glob to a single module"
            ),
            details={"pattern": pattern, "matches": matches},
        )


class InternalError(ApibumpError):
    """Internal/unexpected errors."""

    @classmethod
    def unexpected(cls, reason: str, **details: Any) -> "InternalError":
        return cls(
            code=ErrorCode.INTERNAL_ERROR,
            message=f"Internal error: {reason}",
            details=details,
        )
