"""Parses node and edge files into records and fills a Graph."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

from shortpath.errors import InvalidEdgeFile, InvalidNodeFile, ShortPathError
from shortpath.logger import logger
from shortpath.model import EdgeRecord, InputConfig, NodeRecord

if TYPE_CHECKING:
    from shortpath.graph import Graph

_STRICT_INT = re.compile(r"^[+-]?\d+$")
_INT_PREFIX = re.compile(r"^[+-]?\d+")

_EDGE_FIELDS = 4


def parse_id(text: str) -> int | None:
    """Parse a node id as given on the command line; ``None`` if invalid."""
    text = text.strip()
    if not _STRICT_INT.match(text):
        return None
    value = int(text)
    return value if value >= 0 else None


def _lenient_int(text: str) -> int:
    match = _INT_PREFIX.match(text.strip())
    return int(match.group()) if match else 0


def _field_int(
    fields: list[str],
    index: int,
    name: str,
    lineno: int,
    strict: bool,
    error: type[ShortPathError],
    file_label: str,
) -> int:
    if index >= len(fields):
        if strict:
            raise error(f"Malformed {file_label} file: line {lineno} has no {name} field.")
        logger.warning("%s file line %d: missing %s, reading as 0", file_label, lineno, name)
        return 0

    raw = fields[index].strip()
    if _STRICT_INT.match(raw):
        return int(raw)
    if strict:
        raise error(f"Malformed {file_label} file: line {lineno} has invalid {name} '{raw}'.")
    value = _lenient_int(raw)
    logger.warning(
        "%s file line %d: invalid %s %r, reading as %d", file_label, lineno, name, raw, value
    )
    return value


def _non_negative(
    value: int,
    name: str,
    lineno: int,
    strict: bool,
    error: type[ShortPathError],
    file_label: str,
) -> int:
    if value >= 0:
        return value
    if strict:
        raise error(f"Malformed {file_label} file: line {lineno} has negative {name} {value}.")
    logger.warning("%s file line %d: negative %s %d, reading as 0", file_label, lineno, name, value)
    return 0


def read_node_records(lines: Iterable[str], cfg: InputConfig) -> Iterator[NodeRecord]:
    """Yield one NodeRecord per non-blank line; only the first field is used."""
    for lineno, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        fields = line.rstrip("\r\n").split(cfg.delimiter)
        node_id = _field_int(fields, 0, "node id", lineno, cfg.strict, InvalidNodeFile, "nodes")
        node_id = _non_negative(node_id, "node id", lineno, cfg.strict, InvalidNodeFile, "nodes")
        yield NodeRecord(id=node_id)


def read_edge_records(lines: Iterable[str], cfg: InputConfig) -> Iterator[EdgeRecord]:
    """Yield one EdgeRecord per non-blank line.

    Columns are source, destination, a reserved field that is carried along
    but otherwise ignored, and the integer weight. Extra columns are ignored.
    """
    for lineno, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        fields = line.rstrip("\r\n").split(cfg.delimiter)
        if cfg.strict and len(fields) < _EDGE_FIELDS:
            raise InvalidEdgeFile(
                f"Malformed edges file: line {lineno} has {len(fields)} field(s), "
                f"expected {_EDGE_FIELDS}."
            )

        source = _field_int(fields, 0, "source id", lineno, cfg.strict, InvalidEdgeFile, "edges")
        dest = _field_int(fields, 1, "destination id", lineno, cfg.strict, InvalidEdgeFile, "edges")
        weight = _field_int(fields, 3, "weight", lineno, cfg.strict, InvalidEdgeFile, "edges")

        source = _non_negative(source, "source id", lineno, cfg.strict, InvalidEdgeFile, "edges")
        dest = _non_negative(dest, "destination id", lineno, cfg.strict, InvalidEdgeFile, "edges")
        if cfg.strict:
            weight = _non_negative(weight, "weight", lineno, True, InvalidEdgeFile, "edges")

        reserved = fields[2].strip() if len(fields) > 2 else ""
        yield EdgeRecord(source=source, destination=dest, weight=weight, reserved=reserved)


def load_nodes(graph: Graph, lines: Iterable[str], cfg: InputConfig) -> int:
    """Insert every node record into *graph*; return the number of records read."""
    count = 0
    for record in read_node_records(lines, cfg):
        graph.insert_node(record.id)
        count += 1
    logger.info("Loaded %d node record(s), graph has %d node(s)", count, len(graph))
    return count


def load_edges(graph: Graph, lines: Iterable[str], cfg: InputConfig) -> int:
    """Insert every edge record into *graph*, creating undeclared endpoints."""
    count = 0
    before = len(graph)
    for record in read_edge_records(lines, cfg):
        graph.insert_edge(record.source, record.destination, record.weight)
        count += 1
    implicit = len(graph) - before
    if implicit:
        logger.info("Created %d node(s) referenced only by edges", implicit)
    logger.info("Loaded %d edge record(s)", count)
    return count
