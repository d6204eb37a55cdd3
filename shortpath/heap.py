"""Decrease-key binary min-heap over graph nodes, keyed by distance.

Each node stores its own slot in ``heap_index`` so that a decrease-key can
start sifting from the right place without searching the array. Every swap
updates the index of both moved nodes; if the two ever diverge later
decrease-key calls silently corrupt the ordering.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from shortpath.errors import AllocationFailure
from shortpath.graph import NOT_IN_HEAP

if TYPE_CHECKING:
    from shortpath.graph import Graph, GraphNode


class HeapError(Exception):
    """Raised when the heap is used outside its contract."""


class MinHeap:
    def __init__(self) -> None:
        self._slots: list[GraphNode] = []

    @classmethod
    def from_graph(cls, graph: Graph) -> MinHeap:
        """Build a heap holding every node currently in *graph*."""
        heap = cls()
        try:
            heap._slots = list(graph)
        except MemoryError as e:
            raise AllocationFailure() from e
        for i, node in enumerate(heap._slots):
            node.heap_index = i
        for i in range(len(heap._slots) // 2 - 1, -1, -1):
            heap._sift_down(i)
        return heap

    def __len__(self) -> int:
        return len(self._slots)

    def __contains__(self, node: object) -> bool:
        index = getattr(node, "heap_index", NOT_IN_HEAP)
        return 0 <= index < len(self._slots) and self._slots[index] is node

    @property
    def slots(self) -> tuple[GraphNode, ...]:
        return tuple(self._slots)

    def is_empty(self) -> bool:
        return not self._slots

    def position(self, node: GraphNode) -> int:
        return node.heap_index if node in self else NOT_IN_HEAP

    def peek(self) -> GraphNode | None:
        return self._slots[0] if self._slots else None

    def decrease_distance(
        self, node: GraphNode, new_distance: float, new_previous: int | None
    ) -> None:
        if node not in self:
            raise HeapError(f"node {node.id} is not in the heap")
        if new_distance > node.distance:
            raise HeapError(
                f"cannot raise distance of node {node.id} "
                f"from {node.distance} to {new_distance}"
            )
        node.distance = new_distance
        node.previous = new_previous
        self._sift_up(node.heap_index)

    def extract_min(self) -> GraphNode | None:
        """Remove and return the closest node, or ``None`` when empty."""
        if not self._slots:
            return None
        root = self._slots[0]
        last = self._slots.pop()
        if self._slots:
            self._slots[0] = last
            last.heap_index = 0
            self._sift_down(0)
        root.heap_index = NOT_IN_HEAP
        return root

    def clear(self) -> None:
        """Drop the backing array. Nodes remain owned by the graph."""
        for node in self._slots:
            node.heap_index = NOT_IN_HEAP
        self._slots = []

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _swap(self, i: int, j: int) -> None:
        slots = self._slots
        slots[i], slots[j] = slots[j], slots[i]
        slots[i].heap_index = i
        slots[j].heap_index = j

    def _sift_up(self, index: int) -> None:
        slots = self._slots
        while index > 0:
            parent = (index - 1) // 2
            if slots[index].distance >= slots[parent].distance:
                break
            self._swap(index, parent)
            index = parent

    def _sift_down(self, index: int) -> None:
        slots = self._slots
        size = len(slots)
        while True:
            smallest = index
            left = 2 * index + 1
            right = left + 1
            if left < size and slots[left].distance < slots[smallest].distance:
                smallest = left
            if right < size and slots[right].distance < slots[smallest].distance:
                smallest = right
            if smallest == index:
                return
            self._swap(index, smallest)
            index = smallest
