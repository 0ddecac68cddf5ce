"""Semantic version core parsing and bumping."""

from __future__ import annotations

import re
from dataclasses import dataclass

from apibump.config.constants import SEMVER_CORE_PATTERN
from apibump.versioning.classify import BumpKind, ChangeSummary

_SEMVER_CORE_RE = re.compile(SEMVER_CORE_PATTERN, re.ASCII)


@dataclass(frozen=True, slots=True, order=True)
class SemanticVersion:
    """MAJOR.MINOR.PATCH without pre-release or build metadata."""

    major: int
    minor: int
    patch: int

    def __post_init__(self) -> None:
        if min(self.major, self.minor, self.patch) < 0:
            raise ValueError(f"Version components must be non-negative: {self.as_tuple()}")

    @classmethod
    def parse(cls, tag: str) -> SemanticVersion | None:
        """Parse a plain version core, or return None.

        The whole string must match: ``v1.2.3``, ``1.2``, ``1.2.3-rc.1`` and
        ``"1.2.3\\n"`` are all unparseable.
        """
        match = _SEMVER_CORE_RE.fullmatch(tag)
        if match is None:
            return None
        major, minor, patch = (int(group) for group in match.groups())
        return cls(major, minor, patch)

    def bump(self, kind: BumpKind) -> SemanticVersion:
        if kind is BumpKind.MAJOR:
            return SemanticVersion(self.major + 1, 0, 0)
        if kind is BumpKind.MINOR:
            return SemanticVersion(self.major, self.minor + 1, 0)
        return SemanticVersion(self.major, self.minor, self.patch + 1)

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.major, self.minor, self.patch)

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


def next_version(tag: str, has_removals: bool, has_additions: bool) -> str:
    """Propose the version following ``tag``.

    An unparseable tag comes back unchanged so the caller can tell that no
    semantic baseline exists (for instance before the first release).
    """
    baseline = SemanticVersion.parse(tag)
    if baseline is None:
        return tag
    summary = ChangeSummary(has_removals=has_removals, has_additions=has_additions)
    return str(baseline.bump(summary.bump))
