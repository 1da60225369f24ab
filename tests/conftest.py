"""
Shared graph fixtures.
"""

import pytest

from weightedgraph import Graph


@pytest.fixture
def sample_graph():
    """A -> B (1), B -> C (2), A -> C (5), C -> D (1). Cheapest A to D costs 4."""
    graph = Graph()
    for name in ["A", "B", "C", "D"]:
        graph.add_vertex(name, name.lower())
    graph.add_directed_edge("A", "B", 1)
    graph.add_directed_edge("B", "C", 2)
    graph.add_directed_edge("A", "C", 5)
    graph.add_directed_edge("C", "D", 1)
    return graph


@pytest.fixture
def tree_graph():
    """A small tree with sorted neighbour enumeration."""
    graph = Graph(sort_neighbors=True)
    for name in ["A", "B", "C", "D", "E", "F"]:
        graph.add_vertex(name, ord(name))
    # Inserted out of order on purpose
    graph.add_directed_edge("A", "C", 1)
    graph.add_directed_edge("A", "B", 1)
    graph.add_directed_edge("B", "D", 1)
    graph.add_directed_edge("C", "E", 1)
    graph.add_directed_edge("D", "F", 1)
    return graph


@pytest.fixture
def two_components():
    """A <-> B and C -> D, with no edges between the two groups."""
    graph = Graph()
    for name in ["A", "B", "C", "D"]:
        graph.add_vertex(name, None)
    graph.add_directed_edge("A", "B", 3)
    graph.add_directed_edge("B", "A", 3)
    graph.add_directed_edge("C", "D", 2)
    return graph


@pytest.fixture
def long_chain():
    """v00000 -> v00001 -> ... -> v02999, each edge costing 1."""
    graph = Graph()
    names = [f"v{i:05d}" for i in range(3000)]
    for i, name in enumerate(names):
        graph.add_vertex(name, i)
    for start, end in zip(names, names[1:]):
        graph.add_directed_edge(start, end, 1)
    return graph
