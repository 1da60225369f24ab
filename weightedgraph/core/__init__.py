"""
Core graph data structures and management.

This module contains the fundamental graph representation and the public
facade built on top of it.
"""

from .graph import GraphStore
from .weightedgraph import Graph

__all__ = ['GraphStore', 'Graph']
