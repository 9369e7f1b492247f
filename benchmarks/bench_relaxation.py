"""Benchmark the relaxation strategies."""

import random
import time
from typing import Dict

from floydkit import Graph, SolverConfig


def _random_graph(n: int, density: float, seed: int) -> Graph:
    rng = random.Random(seed)
    g = Graph(n)
    for u in range(n):
        for v in range(n):
            if u != v and rng.random() < density:
                g.add_edge(u, v, rng.randint(1, 100))
    return g


def benchmark_relaxation(
    n: int,
    strategy: str = "sequential",
    density: float = 0.2,
    num_workers: int = 4,
    seed: int = 0,
) -> Dict[str, float]:
    """Benchmark one solve on a random graph.

    Args:
        n: Number of vertices.
        strategy: Relaxation strategy name.
        density: Probability of each directed edge.
        num_workers: Worker count for the threaded strategy.
        seed: Random seed for the graph.

    Returns:
        Dictionary with timing results.
    """
    g = _random_graph(n, density, seed)
    config = SolverConfig(strategy=strategy, num_workers=num_workers)

    # Warmup
    _random_graph(8, density, seed).solve(config)

    start = time.perf_counter()
    g.solve(config)
    total_time = time.perf_counter() - start

    return {
        "n": n,
        "total_time_sec": total_time,
        "updates_per_sec": n**3 / total_time,
    }


if __name__ == "__main__":
    print("Benchmarking relaxation...")

    for strategy in ("sequential", "threaded", "tensor"):
        results = benchmark_relaxation(n=150, strategy=strategy)
        print(f"{strategy} (150 vertices):")
        print(f"  Time: {results['total_time_sec']*1e3:.1f} ms")
        print(f"  Candidate updates per second: {results['updates_per_sec']:.0f}")
