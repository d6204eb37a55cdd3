"""Tests for loader record parsing and graph population."""

from __future__ import annotations

import pytest

from shortpath.errors import InvalidEdgeFile, InvalidNodeFile
from shortpath.graph import Graph
from shortpath.loader import (
    load_edges,
    load_nodes,
    parse_id,
    read_edge_records,
    read_node_records,
)
from shortpath.model import InputConfig

STRICT = InputConfig()
LENIENT = InputConfig(strict=False)


class TestParseId:
    @pytest.mark.parametrize(("text", "expected"), [("3", 3), (" 12 ", 12), ("0", 0)])
    def test_valid(self, text: str, expected: int) -> None:
        assert parse_id(text) == expected

    @pytest.mark.parametrize("text", ["", "abc", "-1", "1.5", "7x"])
    def test_invalid(self, text: str) -> None:
        assert parse_id(text) is None


class TestNodeRecords:
    def test_first_field_only(self) -> None:
        records = list(read_node_records(["1,foo,bar\n", "2\n", "3,baz"], STRICT))
        assert [r.id for r in records] == [1, 2, 3]

    def test_blank_lines_skipped(self) -> None:
        records = list(read_node_records(["1\n", "\n", "  \n", "2\n"], STRICT))
        assert [r.id for r in records] == [1, 2]

    def test_strict_rejects_garbage(self) -> None:
        with pytest.raises(InvalidNodeFile, match="line 2"):
            list(read_node_records(["1\n", "abc,2\n"], STRICT))

    def test_strict_rejects_negative(self) -> None:
        with pytest.raises(InvalidNodeFile, match="negative"):
            list(read_node_records(["-4\n"], STRICT))

    def test_lenient_reads_prefix_or_zero(self) -> None:
        records = list(read_node_records(["12abc\n", "abc\n"], LENIENT))
        assert [r.id for r in records] == [12, 0]

    def test_custom_delimiter(self) -> None:
        records = list(read_node_records(["5;x\n"], InputConfig(delimiter=";")))
        assert records[0].id == 5


class TestEdgeRecords:
    def test_four_fields(self) -> None:
        (record,) = read_edge_records(["1,2,ignored,7\n"], STRICT)
        assert (record.source, record.destination, record.weight) == (1, 2, 7)
        assert record.reserved == "ignored"

    def test_extra_fields_ignored(self) -> None:
        (record,) = read_edge_records(["1,2,x,7,extra,more\n"], STRICT)
        assert record.weight == 7

    def test_strict_rejects_short_line(self) -> None:
        with pytest.raises(InvalidEdgeFile, match="expected 4"):
            list(read_edge_records(["1,2,x\n"], STRICT))

    def test_strict_rejects_bad_weight(self) -> None:
        with pytest.raises(InvalidEdgeFile, match="weight"):
            list(read_edge_records(["1,2,x,heavy\n"], STRICT))

    def test_strict_rejects_negative_weight(self) -> None:
        with pytest.raises(InvalidEdgeFile, match="negative weight"):
            list(read_edge_records(["1,2,x,-3\n"], STRICT))

    def test_lenient_defaults_missing_fields(self) -> None:
        (record,) = read_edge_records(["1,2\n"], LENIENT)
        assert (record.source, record.destination, record.weight) == (1, 2, 0)

    def test_lenient_logs_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level("WARNING", logger="shortpath"):
            list(read_edge_records(["1,zz,x,4\n"], LENIENT))
        assert "destination id" in caplog.text


class TestLoadIntoGraph:
    def test_edges_create_implicit_nodes(self) -> None:
        g = Graph()
        assert load_nodes(g, ["1\n", "2\n"], STRICT) == 2
        assert load_edges(g, ["1,2,x,3\n", "2,9,x,1\n"], STRICT) == 2
        assert len(g) == 3
        assert 9 in g

    def test_duplicate_node_lines(self) -> None:
        g = Graph()
        assert load_nodes(g, ["1\n", "1\n"], STRICT) == 2
        assert len(g) == 1
