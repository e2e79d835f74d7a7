"""Shared graph fixtures."""

import pytest

from vertexga.graph import Graph

GRID_EDGES = [
    # horizontal
    (0, 1), (1, 2), (3, 4), (4, 5), (6, 7), (7, 8),
    (9, 10), (10, 11), (12, 13), (13, 14),
    # vertical
    (0, 3), (3, 6), (6, 9), (9, 12),
    (1, 4), (4, 7), (7, 10), (10, 13),
    (2, 5), (5, 8), (8, 11), (11, 14),
]

# One colour class of the bipartite grid: a valid cover of size 7.
GRID_COVER_7 = [1, 3, 5, 7, 9, 11, 13]


@pytest.fixture()
def triangle():
    return Graph(3, [(0, 1), (1, 2), (0, 2)], name="triangle")


@pytest.fixture()
def grid_5x3():
    return Graph(15, GRID_EDGES, name="grid_5x3")


@pytest.fixture()
def edgeless():
    return Graph(5, [], name="edgeless")
