"""DOT output — traces the predecessor chain and renders it as a digraph."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from shortpath.graph import Graph

from shortpath.errors import NoPathExists, OutputCreationFailure
from shortpath.model import PathEdge, ShortestPath


def trace_path(graph: Graph, source_id: int, target_id: int) -> ShortestPath:
    """Walk predecessors from the target back to the source.

    The walk stops on the source id rather than on a missing predecessor:
    the source and every unreached node both have ``previous is None``.
    Edges come out target-first, each labelled with the distance gained
    across it.
    """
    target = graph.get_node(target_id)
    if target is None or not target.reachable:
        raise NoPathExists()

    edges: list[PathEdge] = []
    current = target
    while current.id != source_id:
        if current.previous is None:
            raise NoPathExists()
        prev = graph.get_node(current.previous)
        if prev is None:
            raise NoPathExists()
        edges.append(
            PathEdge(
                source=prev.id,
                destination=current.id,
                weight=int(current.distance - prev.distance),
            )
        )
        current = prev

    return ShortestPath(
        source_id=source_id,
        target_id=target_id,
        total_distance=int(target.distance),
        edges=edges,
    )


def render_dot(path: ShortestPath, graph_name: str | None = None, indent: str = "\t") -> str:
    header = f"digraph {graph_name} {{" if graph_name else "digraph {"
    lines = [header]
    for e in path.edges:
        lines.append(f"{indent}{e.source} -> {e.destination} [label={e.weight}];")
    lines.append("}")
    return "\n".join(lines) + "\n"


def write_dot(text: str, out_path: Path | None = None) -> Path | None:
    """Write *text* to *out_path*, or to stdout when no path is given."""
    if out_path is None:
        sys.stdout.write(text)
        sys.stdout.flush()
        return None

    from pathlib import Path as _Path

    out_file = _Path(str(out_path))
    try:
        out_file.write_text(text, encoding="utf-8")
    except OSError as e:
        raise OutputCreationFailure() from e
    return out_file
