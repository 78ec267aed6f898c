"""Algorithms over `routegraph.graph.digraph.Graph`.

Every function takes the graph as its first argument; `Graph` exposes the
same operations as methods.
"""

from routegraph.algorithms.dag import is_dag, topsort
from routegraph.algorithms.disjoint_set import DisjointSets
from routegraph.algorithms.mst import (
    kruskal_mst,
    minimum_spanning_forest,
    spanning_tree_from,
)
from routegraph.algorithms.traversal import bfs, dfs, dfs_from
from routegraph.algorithms.weights import NO_EDGE_WEIGHT, get_edge_weight

__all__ = [
    "DisjointSets",
    "NO_EDGE_WEIGHT",
    "bfs",
    "dfs",
    "dfs_from",
    "get_edge_weight",
    "is_dag",
    "kruskal_mst",
    "minimum_spanning_forest",
    "spanning_tree_from",
    "topsort",
]
