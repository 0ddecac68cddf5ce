"""apibump tags command - list release tags reachable from HEAD."""

import json
from pathlib import Path

import click

from apibump.cli.utils import cli_errors, find_repo_root, is_verbose, load_cli_config
from apibump.git.ops import GitOps


@click.command()
@click.argument(
    "path",
    default=None,
    required=False,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
)
@click.option("--pattern", default=None, help="Tag glob (default: versioning.tag_pattern)")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def tags_command(ctx: click.Context, path: Path | None, pattern: str | None, as_json: bool) -> None:
    """List release tags merged into HEAD, newest version first.

    The first entry is the baseline `apibump propose` uses by default.
    """
    repo_root = find_repo_root(path)
    config = load_cli_config(repo_root, verbose=is_verbose(ctx))

    with cli_errors():
        tags = GitOps(repo_root).version_tags(pattern or config.versioning.tag_pattern)

    if as_json:
        click.echo(json.dumps([tag.to_dict() for tag in tags], indent=2))
        return
    for tag in tags:
        click.echo(tag.name)
