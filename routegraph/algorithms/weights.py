"""Edge-weight lookup between two vertex keys."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from routegraph.graph.vertex import VertexKey

if TYPE_CHECKING:
    from routegraph.graph.digraph import Graph

# Returned when no edge connects the requested pair
NO_EDGE_WEIGHT = math.inf


def get_edge_weight(graph: "Graph", source: VertexKey, destination: VertexKey) -> float:
    """Return the weight of the first ``source -> destination`` edge.

    Edges are scanned in ``source.adj`` insertion order, so with parallel
    edges the oldest one wins.

    Args:
        graph: Graph to query.
        source: Origin vertex key.
        destination: Destination vertex key.

    Returns:
        float: The edge weight, or ``NO_EDGE_WEIGHT`` (``inf``) when the
        source is absent or has no edge to ``destination``.
    """
    vertex = graph.find_vertex(source)
    target = graph.find_vertex(destination)
    if vertex is None or target is None:
        return NO_EDGE_WEIGHT
    for edge in vertex.adj:
        if edge.dest is target:
            return edge.weight
    return NO_EDGE_WEIGHT
