"""Root conftest.py for test configuration.

Ensures local src/ directory takes priority over any installed packages,
and provides git repository fixtures shared by the git, versioning and CLI
tests.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Generator
from pathlib import Path

import pygit2
import pytest
from pygit2.enums import ObjectType

# Insert local src directory at the beginning of sys.path
# This ensures that the local apibump package is used, not any installed one
_src_dir = Path(__file__).parent.parent / "src"
if str(_src_dir) not in sys.path:
    sys.path.insert(0, str(_src_dir))

# Force reimport of apibump modules if already imported
for module_name in list(sys.modules.keys()):
    if module_name.startswith("apibump"):
        del sys.modules[module_name]

CommitFiles = Callable[..., pygit2.Oid]
CreateTag = Callable[..., None]

_SIG = pygit2.Signature("Test User", "test@example.com")


@pytest.fixture(autouse=True)
def isolated_config(
    tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Keep the developer's global config and APIBUMP__ env vars out of tests."""
    missing = tmp_path_factory.mktemp("global-config") / "config.yaml"
    monkeypatch.setattr("apibump.config.loader.GLOBAL_CONFIG_PATH", missing)
    for key in list(os.environ):
        if key.upper().startswith("APIBUMP__"):
            monkeypatch.delenv(key)


@pytest.fixture
def temp_repo(tmp_path: Path) -> Generator[pygit2.Repository, None, None]:
    """Create a temporary git repository with initial commit."""
    repo_path = tmp_path / "repo"
    repo_path.mkdir()

    repo = pygit2.init_repository(str(repo_path), initial_head="main")
    repo.config["user.name"] = "Test User"
    repo.config["user.email"] = "test@example.com"

    (repo_path / "README.md").write_text("# Test Repo\n")
    repo.index.add("README.md")
    repo.index.write()
    tree = repo.index.write_tree()
    repo.create_commit("refs/heads/main", _SIG, _SIG, "Initial commit", tree, [])
    repo.set_head("refs/heads/main")

    yield repo


@pytest.fixture
def commit_files() -> CommitFiles:
    """Write files into the working tree and commit them on HEAD."""

    def _commit(
        repo: pygit2.Repository, files: dict[str, str], message: str = "Update"
    ) -> pygit2.Oid:
        workdir = Path(repo.workdir)
        for name, content in files.items():
            path = workdir / name
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content)
            repo.index.add(name)
        repo.index.write()
        tree = repo.index.write_tree()
        parents = [] if repo.head_is_unborn else [repo.head.target]
        return repo.create_commit("HEAD", _SIG, _SIG, message, tree, parents)

    return _commit


@pytest.fixture
def create_tag() -> CreateTag:
    """Tag a commit (HEAD by default), lightweight unless a message is given."""

    def _tag(
        repo: pygit2.Repository,
        name: str,
        target: pygit2.Oid | None = None,
        message: str | None = None,
    ) -> None:
        oid = target if target is not None else repo.head.target
        if message is None:
            repo.references.create(f"refs/tags/{name}", oid)
        else:
            repo.create_tag(name, oid, ObjectType.COMMIT, _SIG, message)

    return _tag
