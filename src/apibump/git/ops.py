"""Git operations via pygit2 - returns serializable data models."""

from __future__ import annotations

from pathlib import Path

import structlog

from apibump.config.constants import DEFAULT_TAG_PATTERN
from apibump.git._internal import RepoAccess, matches_tag_pattern, version_sort_key
from apibump.git.models import Signature, TagInfo

logger = structlog.get_logger()


class GitOps:
    """Read-only view of the repository used to resolve and export releases."""

    def __init__(self, repo_path: Path | str) -> None:
        self._access = RepoAccess(repo_path)

    @property
    def path(self) -> Path:
        """Repository root path."""
        return self._access.path

    def current_branch(self) -> str | None:
        """Current branch name, or None if detached or unborn."""
        return self._access.current_branch_name()

    def version_tags(self, pattern: str = DEFAULT_TAG_PATTERN) -> list[TagInfo]:
        """Release tags reachable from HEAD, newest version first.

        Equivalent of ``git tag --merged HEAD --list <pattern>
        --sort=-version:refname``. An unborn HEAD has no reachable tags.
        """
        head = self._access.head_commit()
        if head is None:
            return []

        result: list[TagInfo] = []
        for name, commit_oid, tag_obj in self._access.iter_tags():
            if not matches_tag_pattern(name, pattern):
                continue
            if not self._access.is_reachable_from(commit_oid, head.id):
                logger.debug("tag_not_merged", tag=name)
                continue
            if tag_obj is not None:
                tagger = Signature.from_pygit2(tag_obj.tagger) if tag_obj.tagger else None
                result.append(TagInfo(name, str(commit_oid), True, tag_obj.message, tagger))
            else:
                result.append(TagInfo(name, str(commit_oid), False))

        result.sort(key=lambda tag: version_sort_key(tag.name), reverse=True)
        return result

    def latest_version_tag(self, pattern: str = DEFAULT_TAG_PATTERN) -> TagInfo | None:
        """Most recent release tag reachable from HEAD, or None."""
        tags = self.version_tags(pattern)
        return tags[0] if tags else None

    def export_tree(self, ref: str, destination: Path | str) -> Path:
        """Write the tree of ``ref`` (tag, branch or sha) into ``destination``.

        HEAD, the index and the working tree are left untouched.
        """
        commit = self._access.resolve_commit(ref)
        dest = Path(destination)
        written = self._access.export_tree(commit, dest, ref)
        logger.debug("tree_exported", ref=ref, commit=str(commit.id)[:7], files=written)
        return dest
