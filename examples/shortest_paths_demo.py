"""
Example: All-pairs shortest paths with floydkit

Walks through the main entry points: solving a small weighted digraph,
reconstructing paths, detecting a negative cycle, reachability and strongly
connected components, and the labeled-node front end.
"""

from floydkit import (
    CancellationToken,
    Graph,
    NegativeCycleError,
    SolverConfig,
    Status,
    find_negative_cycle,
    floyd_warshall,
)


def example_basic_queries():
    """Example: Distances and paths on a four-vertex digraph."""
    print("=" * 60)
    print("Example 1: Distances and paths")
    print("=" * 60)

    g = Graph(4)
    g.add_edge(0, 1, 3)
    g.add_edge(1, 2, 2)
    g.add_edge(2, 0, 1)
    g.add_edge(0, 3, 7)
    g.add_edge(3, 2, 4)

    result = g.solve()
    print(f"Status: {result.status}")
    for start, end in [(0, 2), (1, 3), (3, 1)]:
        print(f"dist({start}, {end}) = {result.distance(start, end)}, path = {result.path(start, end)}")
    print()


def example_negative_cycle():
    """Example: A negative cycle poisons distance queries."""
    print("=" * 60)
    print("Example 2: Negative cycle detection")
    print("=" * 60)

    g = Graph.from_edges(3, [(0, 1, 1), (1, 2, -1), (2, 0, -1)])
    result = g.solve()
    print(f"Status: {result.status}")
    assert result.status == Status.NEGATIVE_CYCLE
    print(f"Vertices on or reaching a negative cycle: {list(result.negative_cycle_vertices)}")
    print(f"One negative cycle: {find_negative_cycle(g)}")
    try:
        result.distance(0, 2)
    except NegativeCycleError as exc:
        print(f"distance(0, 2) raised: {exc}")
    print()


def example_reachability():
    """Example: Transitive closure and strongly connected components."""
    print("=" * 60)
    print("Example 3: Reachability")
    print("=" * 60)

    g = Graph.from_edges(5, [(0, 1, 1), (1, 0, 1), (1, 2, 1), (2, 3, 1), (3, 2, 1)])
    result = g.solve()
    print(f"reachable(0, 3) = {result.reachable(0, 3)}")
    print(f"reachable(3, 0) = {result.reachable(3, 0)}")
    print(f"Strongly connected components: {result.strongly_connected_components()}")
    print()


def example_strategies():
    """Example: All strategies produce the same result."""
    print("=" * 60)
    print("Example 4: Relaxation strategies")
    print("=" * 60)

    g = Graph(6)
    for u in range(6):
        g.add_undirected_edge(u, (u + 1) % 6, u + 1)
    token = CancellationToken()
    for strategy in ("sequential", "threaded", "tensor"):
        result = g.solve(SolverConfig(strategy=strategy, num_workers=2), token=token)
        print(f"{strategy:>10}: dist(0, 3) = {result.distance(0, 3)}, path = {result.path(0, 3)}")
    print()


def example_labeled_nodes():
    """Example: Labeled nodes through the dictionary front end."""
    print("=" * 60)
    print("Example 5: Labeled nodes")
    print("=" * 60)

    dist, path = floyd_warshall(
        ["A", "B", "C", "D"],
        [("A", "B", 2), ("B", "C", 2), ("A", "C", 5)],
    )
    print(f"dist[A, C] = {dist[('A', 'C')]}, path = {path[('A', 'C')]}")
    print(f"dist[A, D] = {dist[('A', 'D')]}, path = {path[('A', 'D')]}")
    print()


if __name__ == "__main__":
    example_basic_queries()
    example_negative_cycle()
    example_reachability()
    example_strategies()
    example_labeled_nodes()
    print("All examples completed.")
