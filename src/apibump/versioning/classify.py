"""Reduce an interface diff to the flags that drive the version bump."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from apibump.versioning.differ import InterfaceDiff


class BumpKind(Enum):
    """Which semantic version component a change set increments."""

    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"


@dataclass(frozen=True, slots=True)
class ChangeSummary:
    """Breaking/additive flags for one diff."""

    has_removals: bool
    has_additions: bool

    @property
    def bump(self) -> BumpKind:
        # Any removal is potentially breaking, whatever was added alongside it
        if self.has_removals:
            return BumpKind.MAJOR
        if self.has_additions:
            return BumpKind.MINOR
        return BumpKind.PATCH


def classify(diff: InterfaceDiff) -> ChangeSummary:
    removed = sum(1 for line in diff if line.kind == "removed")
    added = len(diff) - removed
    return ChangeSummary(has_removals=removed > 0, has_additions=added > 0)
