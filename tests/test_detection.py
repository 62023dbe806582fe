"""Tests for simplegraph/analysis/detection.py"""

import pytest

from simplegraph import NoSuchVertexError, NegativeIndexError

from conftest import build_graph


class TestConnectivity:
    def test_empty_graph(self, empty_graph):
        assert empty_graph.is_connected()

    def test_single_vertex(self, single_graph):
        assert single_graph.is_connected()

    def test_connected(self, path_graph, mesh_graph):
        assert path_graph.is_connected()
        assert mesh_graph.is_connected()

    def test_disconnected(self, split_graph):
        assert not split_graph.is_connected()

    def test_disconnect_breaks_path(self, path_graph):
        path_graph.disconnect(3, 4)
        assert not path_graph.is_connected()

    def test_induced_subgraph(self, path_graph):
        assert path_graph.does_induce_connected_subgraph([2, 3, 4])
        assert path_graph.does_induce_connected_subgraph([5])
        assert not path_graph.does_induce_connected_subgraph([1, 3])

    def test_induced_empty_subgraph(self, path_graph):
        assert path_graph.does_induce_connected_subgraph([])

    def test_induced_unknown_index(self, path_graph):
        with pytest.raises(NoSuchVertexError):
            path_graph.does_induce_connected_subgraph([1, 7])


class TestCompleteness:
    def test_trivial_graphs(self, empty_graph, single_graph):
        assert empty_graph.is_complete()
        assert single_graph.is_complete()

    def test_complete(self, complete_graph):
        assert complete_graph.is_complete()

    def test_not_complete(self, star_graph, path_graph):
        assert not star_graph.is_complete()
        assert not path_graph.is_complete()

    def test_missing_edge(self, complete_graph):
        complete_graph.disconnect(1, 3)
        assert not complete_graph.is_complete()


class TestBipartite:
    def test_path(self, path_graph):
        assert path_graph.is_bipartite()

    def test_even_cycle(self, even_cycle_graph):
        assert even_cycle_graph.is_bipartite()

    def test_odd_cycle(self, odd_cycle_graph):
        assert not odd_cycle_graph.is_bipartite()

    def test_empty_is_not_bipartite(self, empty_graph, path_graph):
        """Unlike connectivity, the empty case is not accepted."""
        assert not empty_graph.is_bipartite()
        assert not path_graph.does_induce_bipartite_subgraph([])
        assert empty_graph.is_connected()

    def test_single_vertex(self, single_graph):
        assert single_graph.is_bipartite()

    def test_induced_subgraph(self, odd_cycle_graph):
        """Dropping one vertex of a 5-cycle leaves a path."""
        assert odd_cycle_graph.does_induce_bipartite_subgraph([0, 1, 2, 3])
        assert not odd_cycle_graph.does_induce_bipartite_subgraph([4, 0, 1, 2, 3])

    def test_ignores_outside_neighbours(self, complete_graph):
        assert complete_graph.does_induce_bipartite_subgraph([0, 1])
        assert not complete_graph.does_induce_bipartite_subgraph([0, 1, 2])

    def test_only_start_piece_is_coloured(self):
        """A triangle unreachable from the lowest index does not affect the answer."""
        graph = build_graph([0, 1, 2, 3], [(1, 2), (2, 3), (3, 1)])
        assert graph.is_bipartite()
        assert not graph.does_induce_bipartite_subgraph([1, 2, 3])
        assert not graph.does_induce_bipartite_subgraph([1, 0, 2, 3])
        assert graph.does_induce_bipartite_subgraph([0, 1, 2, 3])

    def test_all_components(self):
        graph = build_graph([0, 1, 2, 3, 4], [(0, 1), (2, 3), (3, 4), (4, 2)])
        assert graph.is_bipartite()
        assert not graph.are_all_components_bipartite()
        graph.disconnect(4, 2)
        assert graph.are_all_components_bipartite()

    def test_all_components_empty(self, empty_graph, single_graph):
        assert not empty_graph.are_all_components_bipartite()
        assert single_graph.are_all_components_bipartite()

    def test_induced_negative_index(self, path_graph):
        with pytest.raises(NegativeIndexError):
            path_graph.does_induce_bipartite_subgraph([1, -2])


class TestDominatingSets:
    def test_star_hub(self, star_graph):
        assert star_graph.is_connected_dominating_set([0])
        assert star_graph.is_dominating_set([0])

    def test_star_leaf(self, star_graph):
        assert not star_graph.is_connected_dominating_set([1])

    def test_path(self, path_graph):
        assert path_graph.is_connected_dominating_set([2, 3, 4])
        assert path_graph.is_dominating_set([2, 4])
        assert not path_graph.is_connected_dominating_set([2, 4])

    def test_not_dominating(self, path_graph):
        assert not path_graph.is_connected_dominating_set([1, 2, 3])

    def test_whole_graph(self, mesh_graph):
        assert mesh_graph.is_connected_dominating_set(mesh_graph.vertices())

    def test_unknown_index(self, star_graph):
        with pytest.raises(NoSuchVertexError):
            star_graph.is_connected_dominating_set([0, 5])


class TestIndependentSets:
    def test_leaves(self, star_graph):
        assert star_graph.is_independent_set([1, 2, 3, 4])

    def test_adjacent_pair(self, star_graph):
        assert not star_graph.is_independent_set([0, 1])

    def test_single_vertex(self, path_graph):
        assert path_graph.is_independent_set([3])

    def test_empty(self, path_graph):
        assert not path_graph.is_independent_set([])

    def test_edge_away_from_first_vertex(self, path_graph):
        """3-4 is an edge even though neither touches vertex 1."""
        assert path_graph.is_independent_set([1, 3, 5])
        assert not path_graph.is_independent_set([1, 3, 4])

    def test_unknown_index(self, path_graph):
        with pytest.raises(NoSuchVertexError):
            path_graph.is_independent_set([1, 8])
