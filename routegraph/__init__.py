"""routegraph: directed graph container for route planning and network analysis.

Primary API:
    Graph - Directed multigraph over hashable vertex keys
    Vertex, Edge - Graph elements returned by lookups and spanning trees
    from_networkx() / to_networkx() - NetworkX interop

Example:
    from routegraph import Graph

    g = Graph()
    for key in ("A", "B", "C"):
        g.add_vertex(key)
    g.add_bidirectional_edge("A", "B", 1.0)
    g.add_bidirectional_edge("B", "C", 2.0)

    g.bfs("A")              # ['A', 'B', 'C']
    g.kruskal_mst("A")      # two edges, total weight 3.0
    g.get_edge_weight("A", "C")  # inf
"""

from __future__ import annotations

from routegraph import logging
from routegraph._version import __version__
from routegraph.algorithms import NO_EDGE_WEIGHT, DisjointSets
from routegraph.config import GRAPH_CONFIG, GraphConfig
from routegraph.graph.convert import from_networkx, to_networkx
from routegraph.graph.digraph import Graph
from routegraph.graph.edge import Edge
from routegraph.graph.validation import GraphInvariantError
from routegraph.graph.vertex import QueueSlot, Vertex, VertexKey

__all__ = [
    # Version
    "__version__",
    # Model
    "Graph",
    "Vertex",
    "Edge",
    "VertexKey",
    "QueueSlot",
    "DisjointSets",
    "NO_EDGE_WEIGHT",
    # Configuration and errors
    "GraphConfig",
    "GRAPH_CONFIG",
    "GraphInvariantError",
    # Library integrations (NetworkX)
    "from_networkx",
    "to_networkx",
    # Utilities
    "logging",
]
