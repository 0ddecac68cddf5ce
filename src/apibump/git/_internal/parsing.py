"""String helpers for git ref names and version tag ordering."""

from __future__ import annotations

import re
from fnmatch import fnmatchcase

_REFS_TAGS_PREFIX = "refs/tags/"
_VERSION_CHUNK_RE = re.compile(r"(\d+)", re.ASCII)


def extract_tag_name(refname: str) -> str | None:
    """Extract tag name from full ref (e.g., 'refs/tags/1.0.0' -> '1.0.0')."""
    if refname.startswith(_REFS_TAGS_PREFIX):
        return refname[len(_REFS_TAGS_PREFIX) :]
    return None


def matches_tag_pattern(name: str, pattern: str) -> bool:
    """Glob match with ``git tag --list <pattern>`` semantics (case-sensitive)."""
    return fnmatchcase(name, pattern)


def version_sort_key(name: str) -> tuple[tuple[int, int | str], ...]:
    """Sort key approximating ``git tag --sort=version:refname``.

    Digit runs compare as integers, everything else as text, so 1.10.0
    orders after 1.9.0.
    """
    key: list[tuple[int, int | str]] = []
    for chunk in _VERSION_CHUNK_RE.split(name):
        if not chunk:
            continue
        if chunk.isdigit():
            key.append((1, int(chunk)))
        else:
            key.append((0, chunk))
    return tuple(key)
