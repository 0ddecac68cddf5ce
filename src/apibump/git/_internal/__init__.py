"""Internal components for git operations - not part of public API."""

from apibump.git._internal.access import RepoAccess
from apibump.git._internal.parsing import (
    extract_tag_name,
    matches_tag_pattern,
    version_sort_key,
)

__all__ = [
    "RepoAccess",
    "extract_tag_name",
    "matches_tag_pattern",
    "version_sort_key",
]
