"""Tests for transitive closure and strongly connected components."""

import numpy as np
import pytest

from floydkit.graphs import (
    Graph,
    closure_from_adjacency,
    mutually_reachable,
    strongly_connected_components,
    transitive_closure,
)
from floydkit.graphs.closure import adjacency_matrix


class TestTransitiveClosure:
    """Tests for transitive_closure."""

    def test_chain(self):
        """Test that a chain reaches every later vertex."""
        g = Graph.from_edges(4, [(0, 1, 1), (1, 2, 1), (2, 3, 1)])
        reach = transitive_closure(g)
        expected = np.triu(np.ones((4, 4), dtype=bool))
        np.testing.assert_array_equal(reach, expected)

    def test_reflexive(self):
        """Test that every vertex reaches itself."""
        reach = transitive_closure(Graph(3))
        np.testing.assert_array_equal(reach, np.eye(3, dtype=bool))

    def test_weights_ignored(self):
        """Test that negative weights and negative cycles do not matter."""
        g = Graph.from_edges(3, [(0, 1, -100), (1, 0, -100)])
        reach = transitive_closure(g)
        assert reach[0, 1] and reach[1, 0]
        assert not reach[0, 2]

    def test_empty(self):
        """Test the empty graph."""
        assert transitive_closure(Graph(0)).shape == (0, 0)

    def test_adjacency_matrix(self):
        """Test the seed matrix."""
        g = Graph.from_edges(3, [(0, 2, 5)])
        adj = adjacency_matrix(g)
        assert adj.dtype == bool
        assert adj[0, 2]
        assert not adj[2, 0]
        assert np.all(np.diagonal(adj))

    def test_closure_from_adjacency_does_not_mutate(self):
        """Test that the input matrix is left unchanged."""
        adj = np.array([[False, True], [False, False]])
        before = adj.copy()
        closure_from_adjacency(adj)
        np.testing.assert_array_equal(adj, before)

    def test_closure_from_adjacency_non_square(self):
        """Test that non-square input is rejected."""
        with pytest.raises(ValueError, match="square"):
            closure_from_adjacency(np.zeros((2, 3), dtype=bool))

    def test_matches_distances(self, random_graph):
        """Test that reachability matches finite distances on random graphs."""
        g = random_graph(12, density=0.12)
        reach = transitive_closure(g)
        result = g.solve()
        for i in range(12):
            for j in range(12):
                assert reach[i, j] == (result.distance(i, j) is not None)


class TestStronglyConnectedComponents:
    """Tests for SCC grouping."""

    def test_two_cycles_and_bridge(self):
        """Test two cycles joined one way."""
        g = Graph.from_edges(
            5, [(0, 1, 1), (1, 0, 1), (2, 3, 1), (3, 4, 1), (4, 2, 1), (1, 2, 1)]
        )
        reach = transitive_closure(g)
        assert strongly_connected_components(reach) == [[0, 1], [2, 3, 4]]
        assert mutually_reachable(reach, 2, 4)
        assert not mutually_reachable(reach, 0, 2)

    def test_singletons(self):
        """Test a DAG, where every vertex is its own component."""
        g = Graph.from_edges(3, [(0, 1, 1), (1, 2, 1)])
        assert g.strongly_connected_components() == [[0], [1], [2]]

    def test_ordering(self):
        """Test that components are sorted by smallest member."""
        g = Graph.from_edges(4, [(3, 1, 1), (1, 3, 1), (2, 0, 1), (0, 2, 1)])
        assert g.strongly_connected_components() == [[0, 2], [1, 3]]

    def test_partition(self, random_graph):
        """Test that components partition the vertex set."""
        g = random_graph(15, density=0.1)
        components = g.strongly_connected_components()
        members = sorted(v for comp in components for v in comp)
        assert members == list(range(15))
