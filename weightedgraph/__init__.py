"""
weightedgraph - Weighted Directed Graph Library

A Python library for building weighted directed graphs with named vertices
carrying arbitrary payloads, and for traversing and searching them.

Main Classes:
    Graph: Weighted directed graph (facade)
    GraphStore: Underlying vertex and edge storage

Example:
    >>> from weightedgraph import Graph
    >>> graph = Graph()
    >>> graph.add_vertex("A", {"city": "Annapolis"})
    >>> graph.add_vertex("B", {"city": "Baltimore"})
    >>> graph.add_directed_edge("A", "B", 30)
    >>> graph.shortest_path("A", "B")
    (30, ['A', 'B'])
"""

__version__ = "0.1.0"

from weightedgraph.core.graph import GraphStore
from weightedgraph.core.weightedgraph import Graph
from weightedgraph.analysis.pathfinding import NO_PATH_COST, NO_PATH_MARKER
from weightedgraph.exceptions import (
    GraphError,
    VertexNotFoundError,
    EdgeNotFoundError,
)

__all__ = [
    'Graph',
    'GraphStore',
    'NO_PATH_COST',
    'NO_PATH_MARKER',
    'GraphError',
    'VertexNotFoundError',
    'EdgeNotFoundError',
]
