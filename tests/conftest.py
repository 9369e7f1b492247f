"""Pytest configuration and shared fixtures for floydkit tests.

This module provides:
- Deterministic RNG fixtures for numpy and torch
- A random graph builder used by the property tests
"""

import os
from typing import Callable, Optional

import numpy as np
import pytest
import torch

from floydkit.diagnostics import set_debug_enabled, is_debug_enabled
from floydkit.graphs import Graph


def _seed() -> int:
    return int(os.environ.get("TEST_RNG_SEED", "0"))


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    """
    return np.random.default_rng(_seed())


@pytest.fixture(scope="function", autouse=True)
def set_random_seeds() -> None:
    """Seed the global numpy and torch generators before every test."""
    np.random.seed(_seed())
    torch.manual_seed(_seed())


@pytest.fixture(scope="function", autouse=True)
def restore_debug_mode():
    """Tests may toggle debug mode; put the original value back afterwards."""
    original = is_debug_enabled()
    yield
    set_debug_enabled(original)


@pytest.fixture(scope="function")
def random_graph(rng: np.random.Generator) -> Callable[..., Graph]:
    """Factory for random directed graphs.

    Args (of the returned callable):
        n: Vertex count.
        density: Probability that an ordered pair (u != v) gets an edge.
        low, high: Weight range, inclusive.
        undirected: Add every edge in both directions.
    """

    def build(
        n: int,
        density: float = 0.3,
        low: int = 1,
        high: int = 20,
        undirected: bool = False,
        seed: Optional[int] = None,
    ) -> Graph:
        gen = rng if seed is None else np.random.default_rng(seed)
        graph = Graph(n)
        for u in range(n):
            for v in range(n):
                if u == v or gen.random() >= density:
                    continue
                weight = int(gen.integers(low, high + 1))
                if undirected:
                    graph.add_undirected_edge(u, v, weight)
                else:
                    graph.add_edge(u, v, weight)
        return graph

    return build


@pytest.fixture(scope="function")
def dag_with_negative_edges(rng: np.random.Generator) -> Callable[[int], Graph]:
    """Factory for random DAGs (edges only go from lower to higher index)
    with weights in [-10, 10]; they can never contain a negative cycle."""

    def build(n: int, density: float = 0.4) -> Graph:
        graph = Graph(n)
        for u in range(n):
            for v in range(u + 1, n):
                if rng.random() < density:
                    graph.add_edge(u, v, int(rng.integers(-10, 11)))
        return graph

    return build
