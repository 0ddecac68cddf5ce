"""CLI utilities."""

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

import click

from apibump.config.loader import load_config
from apibump.config.models import ApibumpConfig
from apibump.core.errors import ApibumpError
from apibump.core.logging import configure_logging
from apibump.git.errors import GitError


def find_repo_root(start_path: Path | None = None) -> Path:
    """Find the git repository root from the given path.

    Walks up the directory tree looking for a .git entry.
    If start_path is None, uses the current working directory.

    Args:
        start_path: Starting directory to search from

    Returns:
        Path to repository root

    Raises:
        click.ClickException: If not inside a git repository
    """
    if start_path is None:
        start_path = Path.cwd()

    current = start_path.resolve()

    # Walk up to find .git (a directory, or a file for worktrees)
    while current != current.parent:
        if (current / ".git").exists():
            return current
        current = current.parent

    if (current / ".git").exists():
        return current

    raise click.ClickException(
        f"Not inside a git repository: {start_path}\n"
        "Run apibump from within the repository, or pass its path."
    )


def is_verbose(ctx: click.Context) -> bool:
    return bool(ctx.obj and ctx.obj.get("verbose"))


def load_cli_config(repo_root: Path | None, *, verbose: bool = False) -> ApibumpConfig:
    """Load configuration and reconfigure logging from it.

    --verbose wins over the configured level.
    """
    with cli_errors():
        config = load_config(repo_root)
    if verbose:
        config.logging.level = "DEBUG"
    configure_logging(config=config.logging)
    return config


@contextmanager
def cli_errors() -> Iterator[None]:
    """Turn domain errors into click errors (message on stderr, exit code 1)."""
    try:
        yield
    except ApibumpError as e:
        raise click.ClickException(str(e)) from e
    except GitError as e:
        raise click.ClickException(str(e)) from e
