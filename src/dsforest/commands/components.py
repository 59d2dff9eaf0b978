"""Components command for summarising a forest built from an edge list."""

from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from dsforest.core.config import Config
from dsforest.core.edge_list import EdgeListLoader
from dsforest.core.replay import build_forest, summarize_components
from dsforest.error.cmd import handle_command_errors

console = Console()


@click.command()
@click.argument(
    "input_file",
    type=click.Path(exists=True, path_type=Path, file_okay=True, dir_okay=False),
)
@click.option("--size", "-n", type=click.IntRange(min=0), help="Number of elements")
@click.option("--top", "-t", type=click.IntRange(min=1), help="Number of components to show")
@click.option("--source-column", type=str, help="Column holding the first endpoint")
@click.option("--target-column", type=str, help="Column holding the second endpoint")
@click.pass_context
@handle_command_errors
def components(
    ctx,
    input_file: Path,
    size: int | None,
    top: int | None,
    source_column: str | None,
    target_column: str | None,
) -> None:
    """Summarise the components of a forest built from an edge list.

    INPUT_FILE: CSV file with one edge per row
    """
    config: Config = (ctx.obj or {}).get("config") or Config.get_default()
    loader = EdgeListLoader(
        source_column=source_column or config.forest.source_column,
        target_column=target_column or config.forest.target_column,
    )
    top = top or config.report.top

    console.print(f"[bold blue]Reading edges:[/bold blue] {input_file}")
    result = loader.load(input_file)
    forest, stats = build_forest(result, size if size is not None else config.forest.size)

    summaries = summarize_components(forest)

    table = Table(title="Components")
    table.add_column("Root", style="cyan", justify="right")
    table.add_column("Volume", style="green", justify="right")
    table.add_column("Rank", justify="right")
    table.add_column("Redundant edges", style="yellow", justify="right")
    for summary in summaries[:top]:
        table.add_row(
            str(summary.root),
            str(summary.volume),
            str(summary.rank),
            str(summary.edge_count),
        )

    console.print(table)
    if len(summaries) > top:
        console.print(f"[dim]... {len(summaries) - top} more components[/dim]")
    console.print(
        f"[dim]Rows: {result.row_count:,}  Edges: {len(result.edges):,}[/dim]"
    )
    console.print(
        f"[dim]Elements: {len(forest):,}  Components: {forest.component_count:,}  "
        f"Merges: {stats.merges:,}  Redundant edges: {stats.redundant:,}[/dim]"
    )
    console.print("[bold green]✓[/bold green] Components computed!")
