"""Version proposal engine.

Pure and stateless: normalize both interface dumps, diff them, reduce the
diff to breaking/additive flags and apply them to the release tag.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import structlog

from apibump.config.constants import DEFAULT_COMMENT_MARKER
from apibump.versioning.classify import ChangeSummary, classify
from apibump.versioning.differ import InterfaceDiff, diff_lines
from apibump.versioning.normalize import normalize_interface
from apibump.versioning.semver import SemanticVersion, next_version

logger = structlog.get_logger()


@dataclass(frozen=True, slots=True)
class Proposal:
    """Proposed version plus the evidence behind it."""

    previous_tag: str
    next_version: str
    baseline: SemanticVersion | None
    summary: ChangeSummary
    diff: InterfaceDiff

    @property
    def has_baseline(self) -> bool:
        """False when the tag was not a plain version core and got echoed back."""
        return self.baseline is not None

    def to_dict(self) -> dict[str, Any]:
        return {
            "previous_tag": self.previous_tag,
            "next_version": self.next_version,
            "has_baseline": self.has_baseline,
            "bump": self.summary.bump.value if self.has_baseline else None,
            "has_removals": self.summary.has_removals,
            "has_additions": self.summary.has_additions,
            "removed_lines": list(self.diff.removed_lines),
            "added_lines": list(self.diff.added_lines),
        }


def evaluate(
    previous_version_tag: str,
    previous_interface_text: str,
    current_interface_text: str,
    *,
    comment_marker: str = DEFAULT_COMMENT_MARKER,
) -> Proposal:
    previous = normalize_interface(previous_interface_text, comment_marker=comment_marker)
    current = normalize_interface(current_interface_text, comment_marker=comment_marker)
    diff = diff_lines(previous, current)
    summary = classify(diff)
    proposed = next_version(previous_version_tag, summary.has_removals, summary.has_additions)
    baseline = SemanticVersion.parse(previous_version_tag)

    logger.debug(
        "interface_diff",
        previous_lines=len(previous),
        current_lines=len(current),
        removed=len(diff.removed_lines),
        added=len(diff.added_lines),
    )
    if baseline is None:
        logger.info("no_semantic_baseline", tag=previous_version_tag)
    else:
        logger.info(
            "version_proposed",
            tag=previous_version_tag,
            bump=summary.bump.value,
            next_version=proposed,
        )

    return Proposal(
        previous_tag=previous_version_tag,
        next_version=proposed,
        baseline=baseline,
        summary=summary,
        diff=diff,
    )


def propose_next_version(
    previous_version_tag: str,
    previous_interface_text: str,
    current_interface_text: str,
    *,
    comment_marker: str = DEFAULT_COMMENT_MARKER,
) -> str:
    """Next version for ``previous_version_tag`` given two interface dumps.

    Returns a ``MAJOR.MINOR.PATCH`` string, or the tag itself when it is not a
    plain version core. Deterministic for equal inputs.
    """
    return evaluate(
        previous_version_tag,
        previous_interface_text,
        current_interface_text,
        comment_marker=comment_marker,
    ).next_version
