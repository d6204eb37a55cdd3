"""Console output — run summary with Rich tables on stderr."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

if TYPE_CHECKING:
    from shortpath.dijkstra import SearchResult
    from shortpath.graph import Graph
    from shortpath.model import ShortestPath


def render_summary(
    path: ShortestPath,
    search: SearchResult,
    graph: Graph,
    console: Console | None = None,
) -> None:
    """Print a short summary of the search; stdout stays reserved for DOT."""
    console = console or Console(stderr=True)

    table = Table(title="Shortest Path")
    table.add_column("Metric", style="bold")
    table.add_column("Value", justify="right")
    table.add_row("Nodes", str(len(graph)))
    table.add_row("Edges", str(graph.edge_count))
    table.add_row("Settled", str(search.settled))
    table.add_row("Hops", str(path.hops))
    table.add_row("Total distance", str(path.total_distance))
    console.print(table)

    route = " -> ".join(str(n) for n in path.node_ids)
    console.print(f"Route: {route}")
    if search.stopped_early:
        console.print("[dim]Search stopped once the destination was settled.[/dim]")
