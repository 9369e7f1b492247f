"""Tests for negative-cycle detection and extraction."""

import numpy as np
import pytest

from floydkit.graphs import (
    Graph,
    find_negative_cycle,
    has_negative_cycle,
    negative_cycle_vertices,
    path_weight,
)


class TestDiagonalScan:
    """Tests for the diagonal-based detector."""

    def test_no_cycle(self):
        """Test a clean diagonal."""
        dist = np.array([[0, 1], [5, 0]], dtype=np.int64)
        assert not has_negative_cycle(dist)
        assert negative_cycle_vertices(dist) == ()

    def test_negative_entries(self):
        """Test that every negative diagonal entry is reported, in order."""
        dist = np.array([[0, 1, 1], [1, -2, 1], [1, 1, -1]], dtype=np.int64)
        assert has_negative_cycle(dist)
        assert negative_cycle_vertices(dist) == (1, 2)

    def test_empty_matrix(self):
        """Test the empty matrix."""
        dist = np.zeros((0, 0), dtype=np.int64)
        assert not has_negative_cycle(dist)
        assert negative_cycle_vertices(dist) == ()

    def test_vertices_reaching_cycle(self):
        """Test that vertices that can leave and re-enter through a cycle are flagged."""
        # 3 <-> 0 joins vertex 3 to the negative cycle 0 -> 1 -> 2 -> 0.
        g = Graph.from_edges(
            5, [(0, 1, 1), (1, 2, -5), (2, 0, 1), (3, 0, 1), (0, 3, 1), (4, 0, 1)]
        )
        result = g.solve()
        assert set(result.negative_cycle_vertices) == {0, 1, 2, 3}
        assert 4 not in result.negative_cycle_vertices


class TestFindNegativeCycle:
    """Tests for explicit cycle extraction."""

    def test_triangle(self):
        """Test extraction of a negative triangle."""
        g = Graph.from_edges(3, [(0, 1, 1), (1, 2, -5), (2, 0, 1)])
        assert find_negative_cycle(g) == [0, 1, 2, 0]

    def test_self_loop(self):
        """Test extraction of a negative self-loop."""
        g = Graph.from_edges(2, [(1, 1, -1)])
        assert find_negative_cycle(g) == [1, 1]

    def test_no_cycle(self):
        """Test that graphs without negative cycles return None."""
        g = Graph.from_edges(3, [(0, 1, -1), (1, 2, -1), (2, 0, 3)])
        assert find_negative_cycle(g) is None

    def test_empty(self):
        """Test the empty graph."""
        assert find_negative_cycle(Graph(0)) is None

    def test_cycle_in_larger_graph(self):
        """Test that the extracted cycle is closed and negative."""
        g = Graph.from_edges(
            6,
            [(0, 1, 2), (1, 2, 2), (2, 3, 1), (3, 4, -3), (4, 2, -1), (4, 5, 1)],
        )
        cycle = find_negative_cycle(g)
        assert cycle is not None
        assert cycle[0] == cycle[-1]
        assert set(cycle) == {2, 3, 4}
        assert path_weight(g, cycle) < 0

    @pytest.mark.parametrize("strategy", ["sequential", "threaded", "tensor"])
    def test_agrees_with_solver(self, strategy):
        """Test that extraction and the solver agree on presence of a cycle."""
        from floydkit.config import SolverConfig

        g = Graph.from_edges(4, [(0, 1, 2), (1, 2, -4), (2, 1, 1), (2, 3, 1)])
        result = g.solve(SolverConfig(strategy=strategy))
        cycle = find_negative_cycle(g)
        assert result.has_negative_cycle
        assert cycle == [1, 2, 1]
        assert set(cycle) <= set(result.negative_cycle_vertices)
