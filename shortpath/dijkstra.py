"""Single-source shortest paths over a Graph, driven by MinHeap."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from shortpath.errors import InvalidSourceNode
from shortpath.graph import INFINITY
from shortpath.heap import MinHeap
from shortpath.logger import logger

if TYPE_CHECKING:
    from shortpath.graph import Graph


@dataclass
class SearchResult:
    source_id: int
    target_id: int | None
    graph: Graph = field(repr=False, compare=False)
    settled: int = 0
    stopped_early: bool = False

    def reached(self, node_id: int) -> bool:
        """True if the search found a finite distance to *node_id*."""
        node = self.graph.get_node(node_id)
        return node is not None and node.reachable


def shortest_paths(
    graph: Graph,
    source_id: int,
    target_id: int | None = None,
    stop_at_target: bool = True,
) -> SearchResult:
    """Run Dijkstra from *source_id*, leaving distances and predecessors on the nodes.

    Weights must be non-negative. When *target_id* is given and
    *stop_at_target* is set, the search ends as soon as the target is
    extracted, since its distance is final at that point. Nodes never reached
    keep an infinite distance and no predecessor.
    """
    graph.reset_search_state()
    heap = MinHeap.from_graph(graph)
    result = SearchResult(source_id=source_id, target_id=target_id, graph=graph)
    try:
        source = graph.get_node(source_id)
        if source is None:
            raise InvalidSourceNode()
        heap.decrease_distance(source, 0, None)

        while not heap.is_empty():
            node = heap.extract_min()
            if node is None or node.distance == INFINITY:
                break
            result.settled += 1
            for edge in node.edges:
                dest = graph.get_node(edge.destination)
                # finalized nodes are never reopened
                if dest is None or dest not in heap:
                    continue
                candidate = node.distance + edge.weight
                if candidate < dest.distance:
                    heap.decrease_distance(dest, candidate, node.id)
            if stop_at_target and node.id == target_id:
                result.stopped_early = True
                break
    finally:
        heap.clear()

    logger.debug(
        "Settled %d of %d node(s) from %d%s",
        result.settled,
        len(graph),
        source_id,
        " (stopped at target)" if result.stopped_early else "",
    )
    return result
