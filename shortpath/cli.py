"""CLI entry point and pipeline orchestration."""

from __future__ import annotations

import logging
from contextlib import ExitStack
from pathlib import Path
from typing import IO, Annotated

import click
import typer

from shortpath.config import load_config
from shortpath.dijkstra import shortest_paths
from shortpath.errors import (
    AllocationFailure,
    InvalidArguments,
    InvalidDestinationNode,
    InvalidEdgeFile,
    InvalidNodeFile,
    InvalidSourceNode,
    ShortPathError,
)
from shortpath.graph import Graph
from shortpath.loader import load_edges, load_nodes, parse_id
from shortpath.logger import logger
from shortpath.model import ShortPathConfig
from shortpath.outputs.output_console import render_summary
from shortpath.outputs.output_dot import render_dot, trace_path, write_dot

app = typer.Typer()


def _open_input(path: Path, error: type[ShortPathError], stack: ExitStack) -> IO[str]:
    try:
        return stack.enter_context(path.open(encoding="utf-8"))
    except OSError as e:
        logger.debug("Cannot open %s: %s", path, e)
        raise error() from e


def _execute(
    node_file: Path,
    edge_file: Path,
    source: str,
    destination: str,
    output: Path | None,
    cfg: ShortPathConfig,
    summary: bool,
) -> None:
    graph = Graph()
    try:
        with ExitStack() as stack:
            nodes_fh = _open_input(node_file, InvalidNodeFile, stack)
            edges_fh = _open_input(edge_file, InvalidEdgeFile, stack)
            try:
                load_nodes(graph, nodes_fh, cfg.input)
            except UnicodeDecodeError as e:
                raise InvalidNodeFile(f"Cannot decode nodes file {node_file}: {e.reason}.") from e
            try:
                load_edges(graph, edges_fh, cfg.input)
            except UnicodeDecodeError as e:
                raise InvalidEdgeFile(f"Cannot decode edges file {edge_file}: {e.reason}.") from e

        dest_id = parse_id(destination)
        if dest_id is None or dest_id not in graph:
            raise InvalidDestinationNode()

        # An unknown source id surfaces from the search itself.
        source_id = parse_id(source)
        if source_id is None:
            raise InvalidSourceNode()

        search = shortest_paths(
            graph, source_id, dest_id, stop_at_target=cfg.search.stop_at_target
        )
        path = trace_path(graph, source_id, dest_id)
        text = render_dot(path, graph_name=cfg.output.graph_name, indent=cfg.output.indent)
        out_file = write_dot(text, output)
        if out_file is not None:
            logger.info("Wrote path (DOT): %s", out_file)

        if summary:
            render_summary(path, search, graph)
    finally:
        graph.clear()


@app.command()
def run(
    node_file: Annotated[Path, typer.Argument(help="Node file, one id per line")],
    edge_file: Annotated[
        Path, typer.Argument(help="Edge file: source,destination,reserved,weight")
    ],
    source: Annotated[str, typer.Argument(help="Source node id")],
    destination: Annotated[str, typer.Argument(help="Destination node id")],
    output: Annotated[
        Path | None, typer.Argument(help="Output DOT file (stdout if omitted)")
    ] = None,
    config_path: Annotated[
        Path | None, typer.Option("--config", help="Path to shortpath.yml")
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", help="Enable verbose logging")] = False,
    summary: Annotated[
        bool, typer.Option("--summary", help="Print a run summary to stderr")
    ] = False,
    lenient: Annotated[
        bool, typer.Option("--lenient", help="Read malformed numeric fields as 0")
    ] = False,
) -> None:
    """Find the shortest path between two nodes and print it as a DOT digraph."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)

    cfg = load_config(config_path, strict=False if lenient else None)

    try:
        _execute(node_file, edge_file, source, destination, output, cfg, summary)
    except MemoryError:
        typer.echo(f"Error: {AllocationFailure().message}", err=True)
        raise SystemExit(1)  # noqa: B904
    except ShortPathError as e:
        logger.debug("Run failed with %s", e.code)
        typer.echo(f"Error: {e.message}", err=True)
        raise SystemExit(1)  # noqa: B904


def main() -> None:
    """Console entry point; argument errors exit with 1 like every other failure."""
    try:
        app(standalone_mode=False)
    except click.UsageError as e:
        typer.echo(f"Error: {InvalidArguments().message} {e.format_message()}", err=True)
        raise SystemExit(1)  # noqa: B904
