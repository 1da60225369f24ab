"""
Graph algorithms operating over a GraphStore.

This module contains classes for breadth-first and depth-first traversal
and for path finding.
"""

from .traversal import Traverser
from .pathfinding import PathFinder, NO_PATH_COST, NO_PATH_MARKER

__all__ = ['Traverser', 'PathFinder', 'NO_PATH_COST', 'NO_PATH_MARKER']
