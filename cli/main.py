"""
crate-depgraph CLI

Command-line interface that scans a directory of crates and writes their
inter-crate dependency graph as a Graphviz DOT file, then renders it to SVG.

Usage:
    $ crate-depgraph ./rust/compiler deps.dot
    $ crate-depgraph ./rust/compiler deps.dot --no-render --strict
    $ crate-depgraph ./crates deps.dot --prefix my_ --no-default-excludes
"""

from pathlib import Path
from typing import Optional

import networkx as nx
import typer
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from depgraph import __version__
from depgraph.config import DEFAULT_PREFIX, IMAGE_PATH, ScanConfig
from depgraph.errors import DepGraphError
from depgraph.logging import configure_logging
from depgraph.models import ScanResult
from depgraph.pipeline import run

# Initialize Typer app and Rich consoles
app = typer.Typer(
    name="crate-depgraph",
    help="Render the inter-crate dependency graph of a Cargo crate tree",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"[bold]crate-depgraph[/bold] version {__version__}")
        raise typer.Exit()


@app.command()
def main(
    path: Path = typer.Argument(
        ...,
        help="Directory holding one subdirectory per crate",
    ),
    out: Path = typer.Argument(
        ...,
        help="Output path for the DOT graph description",
    ),
    prefix: str = typer.Option(
        DEFAULT_PREFIX,
        "--prefix",
        "-p",
        envvar="CRATE_DEPGRAPH_PREFIX",
        help="Only keep dependencies whose name starts with this",
    ),
    exclude: Optional[list[str]] = typer.Option(
        None,
        "--exclude",
        "-x",
        help="Crate name to leave out of the graph (repeatable)",
    ),
    no_default_excludes: bool = typer.Option(
        False,
        "--no-default-excludes",
        help="Do not skip the built-in list of rustc meta/internal crates",
    ),
    image: Path = typer.Option(
        IMAGE_PATH,
        "--image",
        "-o",
        envvar="CRATE_DEPGRAPH_IMAGE",
        help="Path of the rendered SVG image",
    ),
    render: bool = typer.Option(
        True,
        "--render/--no-render",
        help="Invoke Graphviz dot to render the image",
    ),
    strict: bool = typer.Option(
        False,
        "--strict",
        help="Warn about every dependency dropped from the graph",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
    log_json: bool = typer.Option(
        False,
        "--log-json",
        help="Emit log lines as JSON",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """
    Scan PATH for crates and write their dependency graph to OUT.

    Each immediate subdirectory of PATH holding a Cargo.toml is a crate.
    Its [dependencies] whose names start with the prefix become edges to
    the other crates found under PATH.
    """
    configure_logging(verbose=verbose, log_json=log_json)

    config = ScanConfig(
        prefix=prefix,
        image_path=image,
        render=render,
        strict=strict,
    ).with_excluded(exclude or [], include_defaults=not no_default_excludes)

    try:
        result = run(path, out, config)
    except (OSError, DepGraphError) as e:
        err_console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)

    _print_summary(result)

    if result.dangling:
        console.print(
            f"\n[yellow]⚠️  {result.dangling_count} dependency reference(s) "
            f"dropped from the graph[/yellow]"
        )


# Helper functions for output formatting

def _print_summary(result: ScanResult) -> None:
    """Print a summary panel after a successful run."""
    nx_graph = result.graph.to_networkx()

    table = Table(box=box.SIMPLE, show_header=False)
    table.add_column("Label", style="dim")
    table.add_column("Value", style="bold")

    table.add_row("Crates", str(result.node_count))
    table.add_row("Dependency edges", str(result.edge_count))
    table.add_row("Self-loops", str(sum(1 for _ in nx.selfloop_edges(nx_graph))))
    table.add_row("Isolated crates", str(nx.number_of_isolates(nx_graph)))
    table.add_row("Acyclic", "yes" if nx.is_directed_acyclic_graph(nx_graph) else "no")
    table.add_row("Graph file", escape(str(result.output_path)))
    if result.image_path is not None:
        status = "" if result.rendered else " [yellow](not rendered)[/yellow]"
        table.add_row("Image", f"{escape(str(result.image_path))}{status}")
    table.add_row("Scan time", f"{result.scan_time_seconds:.2f}s")

    panel = Panel(table, title="[bold green]✓ Graph Written[/bold green]", border_style="green")
    console.print(panel)


if __name__ == "__main__":
    app()
