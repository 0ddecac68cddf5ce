"""Git operations module."""

from apibump.git.errors import (
    ExportError,
    GitError,
    NotARepositoryError,
    RefNotFoundError,
)
from apibump.git.models import Signature, TagInfo
from apibump.git.ops import GitOps

__all__ = [
    # Main class
    "GitOps",
    # Models
    "Signature",
    "TagInfo",
    # Errors
    "GitError",
    "NotARepositoryError",
    "RefNotFoundError",
    "ExportError",
]
