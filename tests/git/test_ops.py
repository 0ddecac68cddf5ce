"""Tests for GitOps class."""

from __future__ import annotations

import os
import stat
from pathlib import Path

import pygit2
import pytest
from pygit2.enums import FileMode

from apibump.git import (
    ExportError,
    GitOps,
    NotARepositoryError,
    RefNotFoundError,
    TagInfo,
)


class TestGitOpsInit:
    def test_init_valid_repo(self, temp_repo: pygit2.Repository) -> None:
        ops = GitOps(temp_repo.workdir)
        assert ops.path == Path(temp_repo.workdir)

    def test_init_not_a_repo(self, tmp_path: Path) -> None:
        with pytest.raises(NotARepositoryError):
            GitOps(tmp_path / "missing")


class TestCurrentBranch:
    def test_branch_name(self, temp_repo: pygit2.Repository) -> None:
        assert GitOps(temp_repo.workdir).current_branch() == "main"

    def test_detached_head(self, temp_repo: pygit2.Repository) -> None:
        temp_repo.set_head(temp_repo.head.target)
        assert GitOps(temp_repo.workdir).current_branch() is None


class TestVersionTags:
    """Release tag discovery (git tag --merged HEAD --sort=-version:refname)."""

    def test_given_tags_when_listed_then_version_descending(
        self, tagged_repo: pygit2.Repository
    ) -> None:
        """Numeric ordering: 1.10.0 before 1.9.0."""
        names = [tag.name for tag in GitOps(tagged_repo.workdir).version_tags()]
        assert names == ["1.10.0", "1.9.0", "1.0.0"]

    def test_given_unmerged_tag_when_listed_then_excluded(
        self, tagged_repo: pygit2.Repository
    ) -> None:
        """Tags on other branches are not baselines."""
        names = {tag.name for tag in GitOps(tagged_repo.workdir).version_tags()}
        assert "3.0.0" not in names

    def test_given_checkout_of_feature_when_listed_then_feature_tag_visible(
        self, tagged_repo: pygit2.Repository
    ) -> None:
        """Reachability is evaluated from HEAD."""
        tagged_repo.set_head("refs/heads/feature")
        names = [tag.name for tag in GitOps(tagged_repo.workdir).version_tags()]
        assert names == ["3.0.0", "1.0.0"]

    def test_given_custom_pattern_when_listed_then_applied(
        self, tagged_repo: pygit2.Repository
    ) -> None:
        """Pattern uses git's glob syntax."""
        names = [tag.name for tag in GitOps(tagged_repo.workdir).version_tags("v*")]
        assert names == ["v2.0.0"]

    def test_given_annotated_tag_when_listed_then_metadata_kept(
        self, tagged_repo: pygit2.Repository
    ) -> None:
        """Annotated tags carry message and tagger; target is the commit."""
        # Given
        ops = GitOps(tagged_repo.workdir)

        # When
        latest = ops.latest_version_tag()

        # Then
        assert isinstance(latest, TagInfo)
        assert latest.name == "1.10.0"
        assert latest.is_annotated
        assert latest.message == "Release 1.10.0\n"
        assert latest.tagger is not None
        assert latest.target_sha == str(tagged_repo.head.target)

    def test_given_no_tags_when_latest_then_none(self, temp_repo: pygit2.Repository) -> None:
        assert GitOps(temp_repo.workdir).latest_version_tag() is None

    def test_given_unborn_repo_when_listed_then_empty(self, tmp_path: Path) -> None:
        """A repository without commits has no reachable tags."""
        repo = pygit2.init_repository(str(tmp_path / "empty"))
        assert GitOps(repo.workdir).version_tags() == []

    def test_given_tag_on_tree_when_listed_then_skipped(
        self, temp_repo: pygit2.Repository
    ) -> None:
        """Tags that do not point at a commit are ignored."""
        # Given
        tree_id = temp_repo.head.peel(pygit2.Commit).tree.id
        temp_repo.references.create("refs/tags/9.9.9", tree_id)

        # When
        tags = GitOps(temp_repo.workdir).version_tags()

        # Then
        assert tags == []


class TestExportTree:
    """Tree export without touching HEAD, index or working tree."""

    def test_given_tag_when_exported_then_files_match_tag(
        self, tagged_repo: pygit2.Repository, tmp_path: Path
    ) -> None:
        """Exported files are the tagged versions."""
        # Given
        dest = tmp_path / "export" / "version"

        # When
        result = GitOps(tagged_repo.workdir).export_tree("1.0.0", dest)

        # Then
        assert result == dest
        assert (dest / "api.txt").read_text() == "func a()\n"
        assert (dest / "README.md").exists()
        assert not (dest / ".git").exists()

    def test_given_export_when_done_then_repo_state_untouched(
        self, tagged_repo: pygit2.Repository, tmp_path: Path
    ) -> None:
        """HEAD and working tree keep their state."""
        # Given
        head_before = tagged_repo.head.target
        workdir_file = Path(tagged_repo.workdir) / "api.txt"
        content_before = workdir_file.read_text()

        # When
        GitOps(tagged_repo.workdir).export_tree("1.0.0", tmp_path / "out")

        # Then
        assert tagged_repo.head.target == head_before
        assert workdir_file.read_text() == content_before
        assert tagged_repo.status() == {}

    def test_given_nested_dirs_and_modes_when_exported_then_preserved(
        self, temp_repo: pygit2.Repository, tmp_path: Path
    ) -> None:
        """Subdirectories, executables and symlinks are recreated."""
        # Given
        sig = pygit2.Signature("Test User", "test@example.com")
        script = temp_repo.create_blob(b"#!/bin/sh\necho api\n")
        link = temp_repo.create_blob(b"../README.md")
        nested = temp_repo.TreeBuilder()
        nested.insert("gen.sh", script, FileMode.BLOB_EXECUTABLE)
        nested.insert("readme", link, FileMode.LINK)
        root = temp_repo.TreeBuilder(temp_repo.head.peel(pygit2.Commit).tree)
        root.insert("tools", nested.write(), FileMode.TREE)
        temp_repo.create_commit(
            "HEAD", sig, sig, "Tools", root.write(), [temp_repo.head.target]
        )
        dest = tmp_path / "out"

        # When
        GitOps(temp_repo.workdir).export_tree("HEAD", dest)

        # Then
        assert (dest / "tools" / "gen.sh").stat().st_mode & stat.S_IXUSR
        assert os.readlink(dest / "tools" / "readme") == "../README.md"

    def test_given_unknown_ref_when_exported_then_ref_not_found(
        self, temp_repo: pygit2.Repository, tmp_path: Path
    ) -> None:
        with pytest.raises(RefNotFoundError):
            GitOps(temp_repo.workdir).export_tree("0.0.1", tmp_path / "out")

    def test_given_unwritable_destination_when_exported_then_export_error(
        self, temp_repo: pygit2.Repository, tmp_path: Path
    ) -> None:
        """Filesystem failures are wrapped."""
        blocker = tmp_path / "file"
        blocker.write_text("not a directory")

        with pytest.raises(ExportError):
            GitOps(temp_repo.workdir).export_tree("HEAD", blocker / "out")
