"""Version proposal operations - tag resolution, builds and the engine."""

from __future__ import annotations

import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import structlog

from apibump.config.models import ApibumpConfig
from apibump.core.progress import status, task
from apibump.git import GitOps, TagInfo
from apibump.interface import InterfaceBuilder
from apibump.versioning.classify import ChangeSummary
from apibump.versioning.engine import Proposal, evaluate

logger = structlog.get_logger()

_EXPORT_DIR_PREFIX = "apibump-"


@dataclass(frozen=True, slots=True)
class ProposalResult:
    """Outcome of one proposal run."""

    previous_tag: str | None
    next_version: str
    initial_release: bool = False
    has_removals: bool = False
    has_additions: bool = False
    removed_lines: tuple[str, ...] = field(default_factory=tuple)
    added_lines: tuple[str, ...] = field(default_factory=tuple)
    has_baseline: bool = True

    @classmethod
    def from_proposal(cls, proposal: Proposal) -> ProposalResult:
        return cls(
            previous_tag=proposal.previous_tag,
            next_version=proposal.next_version,
            has_removals=proposal.summary.has_removals,
            has_additions=proposal.summary.has_additions,
            removed_lines=proposal.diff.removed_lines,
            added_lines=proposal.diff.added_lines,
            has_baseline=proposal.has_baseline,
        )

    @property
    def bump(self) -> str | None:
        """'major' / 'minor' / 'patch', or None without a semantic baseline."""
        if self.initial_release or not self.has_baseline:
            return None
        summary = ChangeSummary(has_removals=self.has_removals, has_additions=self.has_additions)
        return summary.bump.value

    def to_dict(self) -> dict[str, Any]:
        return {
            "previous_tag": self.previous_tag,
            "next_version": self.next_version,
            "initial_release": self.initial_release,
            "has_baseline": self.has_baseline,
            "bump": self.bump,
            "has_removals": self.has_removals,
            "has_additions": self.has_additions,
            "removed_lines": list(self.removed_lines),
            "added_lines": list(self.added_lines),
        }


class VersionOps:
    """Proposes the next release version for a repository.

    Flow: resolve the baseline tag, export its tree to a temporary directory,
    build the interface there and in the working tree, then diff the two.
    """

    def __init__(self, repo_root: Path, config: ApibumpConfig) -> None:
        self._config = config
        self._git = GitOps(repo_root)
        self._builder = InterfaceBuilder(config.build)

    def resolve_tag(self, tag: str | None = None) -> str | None:
        """Explicit tag, else the newest release tag reachable from HEAD."""
        if tag is not None:
            return tag
        latest: TagInfo | None = self._git.latest_version_tag(self._config.versioning.tag_pattern)
        return latest.name if latest else None

    def propose(self, tag: str | None = None) -> ProposalResult:
        """Run the full proposal against the repository.

        Raises:
            GitError: the tag cannot be resolved or exported.
            BuildError: either build fails or yields no single interface file.
        """
        previous_tag = self.resolve_tag(tag)
        if not previous_tag:
            initial = self._config.versioning.initial_version
            logger.info("no_release_tag", initial_version=initial)
            status(f"No release tag found; proposing initial version {initial}", style="warning")
            return ProposalResult(previous_tag=None, next_version=initial, initial_release=True)

        logger.debug("baseline_resolved", tag=previous_tag, branch=self._git.current_branch())
        status(f"Baseline tag: {previous_tag}")
        with tempfile.TemporaryDirectory(prefix=_EXPORT_DIR_PREFIX) as tmp:
            export_dir = Path(tmp) / "version"
            self._git.export_tree(previous_tag, export_dir)
            with task(f"Building public interface at {previous_tag}"):
                previous = self._builder.build(export_dir)

        with task("Building public interface of the working tree"):
            current = self._builder.build(self._git.path)

        return self.compare(previous.text, current.text, previous_tag)

    def compare(self, previous_text: str, current_text: str, tag: str) -> ProposalResult:
        """Evaluate two interface dumps directly (no git, no build)."""
        proposal = evaluate(
            tag,
            previous_text,
            current_text,
            comment_marker=self._config.versioning.comment_marker,
        )
        return ProposalResult.from_proposal(proposal)
