"""Configuration constants.

This module contains truly constant values that should NOT be user-configurable,
plus the defaults that the configurable fields in models.py start from.
"""

# =============================================================================
# Version Format
# =============================================================================

SEMVER_CORE_PATTERN = r"(\d+)\.(\d+)\.(\d+)"
"""MAJOR.MINOR.PATCH with decimal components only. Always matched in full."""

# =============================================================================
# Defaults
# =============================================================================

DEFAULT_TAG_PATTERN = "[0-9]*.[0-9]*.[0-9]*"
"""Release tag glob, same syntax as ``git tag --list``."""

DEFAULT_COMMENT_MARKER = "//"
"""Interface lines starting with this marker carry no API signal."""

DEFAULT_INITIAL_VERSION = "0.1.0"
"""Proposed version for a repository without any release tag."""

DEFAULT_INTERFACE_GLOB = "**/*.swiftinterface"
"""Where the build leaves the textual interface dump."""

# =============================================================================
# Paths
# =============================================================================

CONFIG_DIR_NAME = ".apibump"
"""Per-repository config directory."""

CONFIG_FILE_NAME = "config.yaml"
"""Config file inside CONFIG_DIR_NAME and the global config directory."""
