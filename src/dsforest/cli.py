"""CLI entry point for dsforest tool."""

import logging
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler

from dsforest.commands import components, query
from dsforest.core.config import load_config

console = Console()


def setup_logging(verbose: bool) -> None:
    """Route log records through rich; DEBUG when verbose, WARNING otherwise."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@click.group()
@click.version_option(version="0.1.0", prog_name="dsforest")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    help="Path to JSON configuration file",
)
@click.pass_context
def main(ctx, verbose: bool, config_path: Path | None):
    """Disjoint-Set Forest Tool.

    Build union-find forests from edge lists and inspect their components.
    """
    ctx.ensure_object(dict)
    try:
        config = load_config(config_path)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]Error:[/red] {e}", highlight=False)
        raise click.Abort()

    setup_logging(verbose or config.report.verbose)
    ctx.obj["config"] = config


# Register commands
main.add_command(components.components)
main.add_command(query.query)


if __name__ == "__main__":
    main()
