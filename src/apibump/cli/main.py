"""apibump CLI - propose release versions from public interface diffs."""

import click

from apibump.cli.compare import compare_command
from apibump.cli.propose import propose_command
from apibump.cli.tags import tags_command
from apibump.core.logging import configure_logging, set_run_id


@click.group()
@click.version_option(version="0.1.0", prog_name="apibump")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """apibump - Semantic version proposals from public API changes.

    Prints the proposed version on stdout; progress and logs go to stderr.
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    set_run_id()
    configure_logging(level="DEBUG" if verbose else "WARNING")


cli.add_command(propose_command, name="propose")
cli.add_command(compare_command, name="compare")
cli.add_command(tags_command, name="tags")


if __name__ == "__main__":
    cli()
