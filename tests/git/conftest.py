"""Test fixtures for git module."""

from __future__ import annotations

from collections.abc import Callable

import pygit2
import pytest
from pygit2.enums import FileMode


@pytest.fixture
def tagged_repo(
    temp_repo: pygit2.Repository,
    commit_files: Callable[..., pygit2.Oid],
    create_tag: Callable[..., None],
) -> pygit2.Repository:
    """Repository with release history on main and an unmerged feature tag.

    main:     1.0.0 -> 1.9.0 -> 1.10.0 (annotated), v2.0.0, nightly
    feature:  3.0.0 (not reachable from main)
    """
    first = commit_files(temp_repo, {"api.txt": "func a()\n"}, "Release 1.0.0")
    create_tag(temp_repo, "1.0.0", first)

    feature_commit = temp_repo.get(first)
    temp_repo.branches.local.create("feature", feature_commit)

    create_tag(temp_repo, "1.9.0", commit_files(temp_repo, {"api.txt": "func a()\nfunc b()\n"}))
    tip = commit_files(temp_repo, {"api.txt": "func a()\nfunc b()\nfunc c()\n"}, "Release 1.10")
    create_tag(temp_repo, "1.10.0", tip, message="Release 1.10.0\n")
    create_tag(temp_repo, "v2.0.0", tip)
    create_tag(temp_repo, "nightly", tip)

    # Commit on feature without touching HEAD
    sig = pygit2.Signature("Test User", "test@example.com")
    blob = temp_repo.create_blob(b"func z()\n")
    builder = temp_repo.TreeBuilder(feature_commit.tree)
    builder.insert("api.txt", blob, FileMode.BLOB)
    feature_tip = temp_repo.create_commit(
        "refs/heads/feature", sig, sig, "Feature", builder.write(), [first]
    )
    create_tag(temp_repo, "3.0.0", feature_tip)

    return temp_repo
