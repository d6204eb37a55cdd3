"""Shared test fixtures."""

from pathlib import Path

import pytest

from shortpath.graph import Graph

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture()
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture()
def triangle() -> Graph:
    """nodes {1,2,3}; 1->2 (5), 2->3 (2), 1->3 (10)."""
    g = Graph()
    for node_id in (1, 2, 3):
        g.insert_node(node_id)
    g.insert_edge(1, 2, 5)
    g.insert_edge(2, 3, 2)
    g.insert_edge(1, 3, 10)
    return g
