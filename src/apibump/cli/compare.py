"""apibump compare command - evaluate two interface dumps directly."""

import json
from pathlib import Path

import click

from apibump.cli.utils import cli_errors, is_verbose, load_cli_config
from apibump.versioning.engine import evaluate
from apibump.versioning.ops import ProposalResult


def _read_interface(path: Path) -> str:
    return path.read_text(encoding="utf-8", errors="surrogateescape")


@click.command()
@click.argument("previous_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("current_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--tag", "-t", required=True, help="Release tag PREVIOUS_FILE was built from")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.option("--diff", "show_diff", is_flag=True, help="Print the interface diff to stderr")
@click.pass_context
def compare_command(
    ctx: click.Context,
    previous_file: Path,
    current_file: Path,
    tag: str,
    as_json: bool,
    show_diff: bool,
) -> None:
    """Propose the next version from two prebuilt interface files.

    No git access and no build: PREVIOUS_FILE is the interface of release TAG,
    CURRENT_FILE the interface of the candidate.
    """
    config = load_cli_config(None, verbose=is_verbose(ctx))

    with cli_errors():
        proposal = evaluate(
            tag,
            _read_interface(previous_file),
            _read_interface(current_file),
            comment_marker=config.versioning.comment_marker,
        )

    if show_diff:
        for line in proposal.diff:
            click.echo(line.render(), err=True)

    result = ProposalResult.from_proposal(proposal)
    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
    else:
        click.echo(result.next_version)
