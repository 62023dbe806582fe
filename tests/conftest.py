"""Shared graph fixtures."""

import pytest

from simplegraph import pysimplegraph


def build_graph(aIndex, aEdge):
    graph = pysimplegraph()
    graph.add_vertices(aIndex)
    for index_v, index_u in aEdge:
        graph.connect(index_v, index_u)
    return graph


@pytest.fixture
def empty_graph():
    return pysimplegraph()


@pytest.fixture
def single_graph():
    return build_graph([0], [])


@pytest.fixture
def star_graph():
    """Hub 0 joined to leaves 1..4."""
    return build_graph([0, 1, 2, 3, 4], [(0, 1), (0, 2), (0, 3), (0, 4)])


@pytest.fixture
def path_graph():
    """1 - 2 - 3 - 4 - 5"""
    return build_graph([1, 2, 3, 4, 5], [(1, 2), (2, 3), (3, 4), (4, 5)])


@pytest.fixture
def complete_graph():
    return pysimplegraph().complete(0, 5)


@pytest.fixture
def odd_cycle_graph():
    return build_graph([0, 1, 2, 3, 4], [(0, 1), (1, 2), (2, 3), (3, 4), (4, 0)])


@pytest.fixture
def even_cycle_graph():
    return build_graph([0, 1, 2, 3], [(0, 1), (1, 2), (2, 3), (3, 0)])


@pytest.fixture
def split_graph():
    """Two pieces: edge 0-1 plus isolated 2, and edge 3-4."""
    return build_graph([0, 1, 2, 3, 4], [(0, 1), (3, 4)])


@pytest.fixture
def mesh_graph():
    """
    Connected graph with 14 vertices mixing cycles, bridges and leaves.

        1 - 2 - 3 - 4        10 - 11
        |   |   |   |        |
        5 - 6   7 - 8 - 9 - 12 - 13 - 14
    """
    aEdge = [
        (1, 2), (2, 3), (3, 4), (1, 5), (2, 6), (5, 6), (3, 7), (4, 8),
        (7, 8), (8, 9), (9, 12), (10, 11), (10, 12), (12, 13), (13, 14),
    ]
    return build_graph(range(1, 15), aEdge)
