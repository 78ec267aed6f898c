"""Conversion between `Graph` and NetworkX graphs.

`to_networkx` exports every edge (parallel edges included) into a
``networkx.MultiDiGraph``. `from_networkx` builds a `Graph` from any NetworkX
graph type; undirected edges become bidirectional edge pairs.

Example:
    >>> import networkx as nx
    >>> from routegraph.graph.convert import from_networkx, to_networkx
    >>>
    >>> G = nx.DiGraph()
    >>> G.add_edge("A", "B", weight=4.0)
    >>> graph = from_networkx(G)
    >>> graph.get_edge_weight("A", "B")
    4.0
    >>> to_networkx(graph).number_of_edges()
    1
"""

from __future__ import annotations

from typing import Optional

import networkx as nx

from routegraph.config import GRAPH_CONFIG
from routegraph.graph.digraph import Graph


def to_networkx(graph: Graph, weight_attr: str = "weight") -> nx.MultiDiGraph:
    """Convert a `Graph` to a NetworkX MultiDiGraph.

    Nodes keep the vertex insertion order. Each edge carries the weight under
    ``weight_attr`` plus ``flow`` and ``selected``.

    Args:
        graph: Graph to export.
        weight_attr: Edge attribute name for the weight (default: "weight").

    Returns:
        nx.MultiDiGraph with one edge per graph edge.
    """
    nx_graph = nx.MultiDiGraph()
    nx_graph.add_nodes_from(graph)
    for edge in graph.edges():
        nx_graph.add_edge(
            edge.orig.info,
            edge.dest.info,
            **{
                weight_attr: edge.weight,
                "flow": edge.flow,
                "selected": edge.selected,
            },
        )
    return nx_graph


def from_networkx(
    nx_graph: nx.Graph,
    weight_attr: str = "weight",
    default_weight: Optional[float] = None,
) -> Graph:
    """Build a `Graph` from a NetworkX graph.

    Directed graphs map edge for edge. For undirected graphs each edge is
    added with `Graph.add_bidirectional_edge`, so both directions exist and
    reference each other as reverse.

    Args:
        nx_graph: NetworkX graph (Graph, DiGraph, MultiGraph or MultiDiGraph).
        weight_attr: Edge attribute holding the weight (default: "weight").
        default_weight: Weight for edges without ``weight_attr``; None uses
            ``GRAPH_CONFIG.default_weight``.

    Returns:
        Graph: New graph with the same nodes and edges.

    Raises:
        TypeError: If ``nx_graph`` is not a NetworkX graph.
    """
    if not isinstance(nx_graph, nx.Graph):
        raise TypeError(
            f"Expected NetworkX graph (Graph, DiGraph, MultiGraph, MultiDiGraph), "
            f"got {type(nx_graph).__name__}"
        )
    if default_weight is None:
        default_weight = GRAPH_CONFIG.default_weight

    graph = Graph()
    for node in nx_graph.nodes:
        graph.add_vertex(node)

    add = graph.add_edge if nx_graph.is_directed() else graph.add_bidirectional_edge
    for u, v, data in nx_graph.edges(data=True):
        add(u, v, float(data.get(weight_attr, default_weight)))
    return graph
