"""Query whether two elements share a component."""

from pathlib import Path

import click
from rich.console import Console

from dsforest.core.config import Config
from dsforest.core.edge_list import EdgeListLoader
from dsforest.core.replay import build_forest
from dsforest.error.cmd import handle_command_errors

console = Console()


@click.command()
@click.argument(
    "input_file",
    type=click.Path(exists=True, path_type=Path, file_okay=True, dir_okay=False),
)
@click.argument("first", type=int)
@click.argument("second", type=int)
@click.option("--size", "-n", type=click.IntRange(min=0), help="Number of elements")
@click.option("--source-column", type=str, help="Column holding the first endpoint")
@click.option("--target-column", type=str, help="Column holding the second endpoint")
@click.pass_context
@handle_command_errors
def query(
    ctx,
    input_file: Path,
    first: int,
    second: int,
    size: int | None,
    source_column: str | None,
    target_column: str | None,
) -> None:
    """Check whether FIRST and SECOND are connected.

    INPUT_FILE: CSV file with one edge per row
    """
    config: Config = (ctx.obj or {}).get("config") or Config.get_default()
    loader = EdgeListLoader(
        source_column=source_column or config.forest.source_column,
        target_column=target_column or config.forest.target_column,
    )
    result = loader.load(input_file)
    forest, _ = build_forest(result, size if size is not None else config.forest.size)

    if forest.same(first, second):
        console.print(f"[green]Connected:[/green] {first} and {second}")
    else:
        console.print(f"[yellow]Not connected:[/yellow] {first} and {second}")

    console.print(f"  size({first}) = {forest.size(first)}", highlight=False)
    console.print(f"  size({second}) = {forest.size(second)}", highlight=False)
    console.print(f"  redundant edges = {forest.edge_count(first)}", highlight=False)
