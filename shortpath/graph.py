"""Graph storage: an arena of nodes keyed by id, with per-node adjacency lists."""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass, field

from shortpath.errors import AllocationFailure

INFINITY = math.inf
NOT_IN_HEAP = -1


@dataclass
class GraphEdge:
    destination: int
    weight: int


@dataclass(eq=False)
class GraphNode:
    """A vertex plus the running state of the current search.

    ``previous`` and edge destinations are node ids resolved through the
    owning graph, never object references.
    """

    id: int
    distance: float = INFINITY
    previous: int | None = None
    heap_index: int = NOT_IN_HEAP
    edges: list[GraphEdge] = field(default_factory=list)

    @property
    def reachable(self) -> bool:
        return self.distance != INFINITY

    def reset(self) -> None:
        self.distance = INFINITY
        self.previous = None
        self.heap_index = NOT_IN_HEAP


class Graph:
    """Directed weighted graph. Parallel edges and self loops are kept."""

    def __init__(self) -> None:
        self._nodes: dict[int, GraphNode] = {}

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._nodes

    def __iter__(self) -> Iterator[GraphNode]:
        return iter(self._nodes.values())

    @property
    def edge_count(self) -> int:
        return sum(len(n.edges) for n in self._nodes.values())

    def insert_node(self, node_id: int) -> GraphNode:
        """Return the node with *node_id*, creating it if needed."""
        node = self._nodes.get(node_id)
        if node is not None:
            return node
        try:
            node = GraphNode(id=node_id)
            self._nodes[node_id] = node
        except MemoryError as e:
            raise AllocationFailure() from e
        return node

    def get_node(self, node_id: int) -> GraphNode | None:
        return self._nodes.get(node_id)

    def insert_edge(self, source_id: int, dest_id: int, weight: int) -> GraphEdge:
        source = self.insert_node(source_id)
        self.insert_node(dest_id)
        try:
            edge = GraphEdge(destination=dest_id, weight=weight)
            source.edges.append(edge)
        except MemoryError as e:
            raise AllocationFailure() from e
        return edge

    def reset_search_state(self) -> None:
        for node in self._nodes.values():
            node.reset()

    def clear(self) -> None:
        for node in self._nodes.values():
            node.edges.clear()
        self._nodes.clear()
