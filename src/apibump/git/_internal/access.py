"""Repository access layer - owns pygit2.Repository and exposes computed facts."""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

import pygit2

from apibump.git._internal.constants import (
    FILEMODE_BLOB_EXECUTABLE,
    FILEMODE_COMMIT,
    FILEMODE_LINK,
    OBJ_BLOB,
    OBJ_TREE,
)
from apibump.git._internal.parsing import extract_tag_name
from apibump.git.errors import (
    ExportError,
    GitError,
    NotARepositoryError,
    RefNotFoundError,
)


class RepoAccess:
    """Owns pygit2.Repository and provides normalized access to repo state."""

    def __init__(self, repo_path: Path | str) -> None:
        self._path = Path(repo_path)
        try:
            self._repo = pygit2.Repository(str(self._path))
        except pygit2.GitError as e:
            raise NotARepositoryError(str(self._path)) from e

    @property
    def path(self) -> Path:
        return Path(self._repo.workdir) if self._repo.workdir else self._path

    # =========================================================================
    # Repository State Facts
    # =========================================================================

    @property
    def is_unborn(self) -> bool:
        return self._repo.head_is_unborn

    @property
    def is_detached(self) -> bool:
        return self._repo.head_is_detached

    def head_commit(self) -> pygit2.Commit | None:
        if self.is_unborn:
            return None
        return self._repo.head.peel(pygit2.Commit)

    def current_branch_name(self) -> str | None:
        if self.is_unborn:
            try:
                ref = self._repo.references["HEAD"]
                target = getattr(ref, "target", None)
                if isinstance(target, str) and target.startswith("refs/heads/"):
                    return target[len("refs/heads/") :]
            except KeyError:
                # HEAD reference missing in unborn repo; no branch name available
                pass
            return None
        if self.is_detached:
            return None
        return self._repo.head.shorthand

    # =========================================================================
    # Resolution Helpers
    # =========================================================================

    def resolve_commit(self, ref: str) -> pygit2.Commit:
        try:
            obj, _ = self._repo.resolve_refish(ref)
        except (pygit2.GitError, KeyError, ValueError) as e:
            raise RefNotFoundError(ref) from e
        if not isinstance(obj, pygit2.Commit):
            raise RefNotFoundError(f"{ref} is not a commit")
        return obj

    def is_reachable_from(self, commit: pygit2.Oid, tip: pygit2.Oid) -> bool:
        """True if ``commit`` is ``tip`` or one of its ancestors (``git tag --merged``)."""
        return commit == tip or self._repo.descendant_of(tip, commit)

    # =========================================================================
    # Tag Iteration
    # =========================================================================

    def iter_tags(self) -> Iterator[tuple[str, pygit2.Oid, pygit2.Tag | None]]:
        """
        Iterate tags as (name, commit_oid, tag_object_or_none).

        Contract:
        - name: normalized tag name (no 'refs/tags/' prefix)
        - commit_oid: commit the tag peels to
        - tag_obj: pygit2.Tag object for annotated tags, None for lightweight
        - tags that do not peel to a commit (tagged trees/blobs) are skipped
        """
        for refname in self._repo.references:
            name = extract_tag_name(refname)
            if name is None:
                continue
            ref = self._repo.references[refname].resolve()
            obj = self._repo.get(ref.target)
            tag_obj = obj if isinstance(obj, pygit2.Tag) else None
            try:
                commit = ref.peel(pygit2.Commit)
            except (pygit2.GitError, ValueError):
                continue
            yield name, commit.id, tag_obj

    # =========================================================================
    # Tree Export
    # =========================================================================

    def export_tree(self, commit: pygit2.Commit, destination: Path, ref: str) -> int:
        """Write the files of ``commit`` under ``destination``.

        Leaves HEAD, the index and the working tree untouched. Submodule
        entries become empty directories. Returns the number of files written.
        """
        try:
            destination.mkdir(parents=True, exist_ok=True)
            return self._write_tree(commit.tree, destination)
        except OSError as e:
            raise ExportError(ref, str(destination), str(e)) from e

    def _write_tree(self, tree: pygit2.Tree, directory: Path) -> int:
        written = 0
        for entry in tree:
            target = directory / entry.name
            if entry.filemode == FILEMODE_COMMIT:
                target.mkdir(exist_ok=True)
                continue
            obj = self._repo[entry.id]
            if obj.type == OBJ_TREE:
                target.mkdir(exist_ok=True)
                written += self._write_tree(obj, target)  # type: ignore[arg-type]
            elif obj.type == OBJ_BLOB:
                data: bytes = obj.data  # type: ignore[attr-defined]
                if entry.filemode == FILEMODE_LINK:
                    os.symlink(data.decode("utf-8", errors="surrogateescape"), target)
                else:
                    target.write_bytes(data)
                    if entry.filemode == FILEMODE_BLOB_EXECUTABLE:
                        target.chmod(0o755)
                written += 1
            else:
                raise GitError(f"Unexpected object type in tree entry {entry.name!r}")
        return written
