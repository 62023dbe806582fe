"""Tests for simplegraph/analysis/traversal.py"""

import pytest

from simplegraph import NoSuchVertexError, NegativeIndexError


class TestRestrictedVisits:
    def test_empty_subset(self, path_graph):
        assert path_graph.breadth_first_visit([]) == 0
        assert path_graph.depth_first_visit([]) == 0

    def test_whole_graph(self, path_graph):
        aIndex = list(path_graph.vertices())
        assert path_graph.breadth_first_visit(aIndex) == 5
        assert path_graph.depth_first_visit(aIndex) == 5

    def test_stays_inside_subset(self, path_graph):
        """Vertex 2 joins 1 and 3 in the graph but is outside the subset."""
        assert path_graph.breadth_first_visit([1, 3]) == 1
        assert path_graph.depth_first_visit([1, 3]) == 1

    def test_split_subset(self, path_graph):
        """Only the piece holding the first index is reached."""
        assert path_graph.breadth_first_visit([1, 2, 4, 5]) == 2
        assert path_graph.depth_first_visit([4, 5, 1]) == 2

    def test_duplicates_counted_once(self, path_graph):
        assert path_graph.breadth_first_visit([1, 1, 2]) == 2
        assert path_graph.depth_first_visit([2, 1, 2]) == 2

    def test_does_not_mutate(self, star_graph):
        edges = star_graph.edges()
        star_graph.breadth_first_visit(star_graph.vertices())
        star_graph.depth_first_visit(star_graph.vertices())
        assert star_graph.edges() == edges

    def test_unknown_index(self, path_graph):
        with pytest.raises(NoSuchVertexError):
            path_graph.breadth_first_visit([1, 9])
        with pytest.raises(NegativeIndexError):
            path_graph.depth_first_visit([-1])

    def test_disconnected_graph(self, split_graph):
        assert split_graph.depth_first_visit(split_graph.vertices()) == 2
        assert split_graph.breadth_first_visit([2, 0, 1]) == 1


class TestComponents:
    def test_components(self, split_graph):
        assert split_graph.connected_components() == [{0, 1}, {2}, {3, 4}]

    def test_connected_graph(self, mesh_graph):
        components = mesh_graph.connected_components()
        assert len(components) == 1
        assert components[0] == set(range(1, 15))

    def test_empty_graph(self, empty_graph):
        assert empty_graph.connected_components() == []
