"""Canonical model — input records, path results, config."""

from __future__ import annotations

from pydantic import BaseModel, Field


class NodeRecord(BaseModel):
    id: int = Field(ge=0)


class EdgeRecord(BaseModel):
    source: int = Field(ge=0)
    destination: int = Field(ge=0)
    weight: int
    reserved: str = ""  # third column of the edge file, read but never used


class PathEdge(BaseModel):
    source: int
    destination: int
    weight: int


class ShortestPath(BaseModel):
    """Edges run from the target back toward the source."""

    source_id: int
    target_id: int
    total_distance: int
    edges: list[PathEdge] = Field(default_factory=list)

    @property
    def hops(self) -> int:
        return len(self.edges)

    @property
    def node_ids(self) -> list[int]:
        """Node ids in source → target order."""
        if not self.edges:
            return [self.source_id]
        ids = [e.source for e in reversed(self.edges)]
        ids.append(self.target_id)
        return ids


class InputConfig(BaseModel):
    delimiter: str = Field(default=",", min_length=1)
    strict: bool = True


class SearchConfig(BaseModel):
    stop_at_target: bool = True


class OutputConfig(BaseModel):
    graph_name: str | None = None
    indent: str = "\t"


class ShortPathConfig(BaseModel):
    input: InputConfig = Field(default_factory=InputConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
