"""apibump propose command - diff the working tree against the last release."""

import json
from pathlib import Path

import click

from apibump.cli.utils import cli_errors, find_repo_root, is_verbose, load_cli_config
from apibump.versioning.ops import VersionOps


@click.command()
@click.argument(
    "path",
    default=None,
    required=False,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
)
@click.option(
    "--tag",
    "-t",
    default=None,
    help="Release tag to compare against (default: newest release tag reachable from HEAD)",
)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def propose_command(ctx: click.Context, path: Path | None, tag: str | None, as_json: bool) -> None:
    """Propose the next release version for a repository.

    Builds the public interface at the release tag and in the working tree,
    diffs the two and prints the next version.

    PATH is inside the repository (default: current directory).
    """
    repo_root = find_repo_root(path)
    config = load_cli_config(repo_root, verbose=is_verbose(ctx))

    with cli_errors():
        result = VersionOps(repo_root, config).propose(tag)

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
    else:
        click.echo(result.next_version)
