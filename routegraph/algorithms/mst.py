"""Kruskal-based spanning trees.

Three entry points share one greedy sweep:

- `kruskal_mst` sweeps edges by ascending weight, taking edges that leave
  ``source`` first among equal weights, and keeps the edges that ended up in
  ``source``'s component. With ``source_first=True`` every edge leaving
  ``source`` is swept before all others; the result is then a spanning tree
  grown from ``source`` but not necessarily a minimum one.
- `minimum_spanning_forest` is plain Kruskal over all edges.
- `spanning_tree_from` is plain Kruskal restricted to ``source``'s component.

Edges are treated as undirected links. Results are detached edge copies, so
later graph mutations do not alter them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, List, Tuple

from routegraph.algorithms.disjoint_set import DisjointSets
from routegraph.graph.edge import Edge
from routegraph.graph.vertex import VertexKey
from routegraph.logging import get_logger

if TYPE_CHECKING:
    from routegraph.graph.digraph import Graph

LOGGER = get_logger(__name__)


def _snapshot(graph: "Graph") -> Tuple[List[VertexKey], List[Edge]]:
    vertices: List[VertexKey] = []
    edges: List[Edge] = []
    for vertex in graph._vertex_set:
        vertices.append(vertex.info)
        for edge in vertex.adj:
            edges.append(edge.copy())
    return vertices, edges


def _sweep(
    vertices: List[VertexKey],
    edges: List[Edge],
    sort_key: Callable[[Edge], Tuple],
) -> Tuple[DisjointSets, List[Edge]]:
    ds = DisjointSets()
    for key in vertices:
        ds.make_set(key)

    chosen: List[Edge] = []
    for edge in sorted(edges, key=sort_key):
        u = edge.orig.info
        v = edge.dest.info
        if not ds.connected(u, v):
            chosen.append(edge)
            ds.union_sets(u, v)
    return ds, chosen


def _component_of(
    ds: DisjointSets, chosen: List[Edge], source: VertexKey
) -> List[Edge]:
    return [e for e in chosen if ds.connected(e.orig.info, source)]


def _by_weight(edge: Edge) -> Tuple[float]:
    return (edge.weight,)


def kruskal_mst(
    graph: "Graph", source: VertexKey, source_first: bool = False
) -> List[Edge]:
    """Kruskal sweep biased towards ``source``.

    Edges are ordered by ascending weight, and edges whose origin is
    ``source`` win ties. With ``source_first`` the bias outranks weight: all
    edges leaving ``source`` are swept before any other edge. Accepted edges
    are those joining two different components. Only edges inside
    ``source``'s final component are returned.

    Args:
        graph: Graph to span.
        source: Key of the vertex the tree is grown from.
        source_first: Sweep every edge leaving ``source`` first, regardless
            of weight. This is the comparator of the classic source-biased
            ``kruskalMST``; use it when porting code that relies on that order.

    Returns:
        List of edge copies in acceptance order; empty if ``source`` is not in
        the graph.
    """
    vertices, edges = _snapshot(graph)
    origin = graph.find_vertex(source)

    def biased(edge: Edge) -> Tuple:
        not_from_source = edge.orig is not origin
        if source_first:
            return (not_from_source, edge.weight)
        return (edge.weight, not_from_source)

    ds, chosen = _sweep(vertices, edges, biased)
    if source not in ds:
        return []
    result = _component_of(ds, chosen, source)
    LOGGER.debug(
        "kruskal_mst(%r): %d of %d accepted edges in source component",
        source,
        len(result),
        len(chosen),
    )
    return result


def minimum_spanning_forest(graph: "Graph") -> List[Edge]:
    """Minimum spanning forest by plain Kruskal over every edge.

    Returns:
        List of edge copies in ascending weight order; one tree per connected
        component (``|V| - c`` edges for ``c`` components).
    """
    vertices, edges = _snapshot(graph)
    _, chosen = _sweep(vertices, edges, _by_weight)
    return chosen


def spanning_tree_from(graph: "Graph", source: VertexKey) -> List[Edge]:
    """Minimum spanning tree of the component containing ``source``.

    Args:
        graph: Graph to span.
        source: Key of a vertex in the component of interest.

    Returns:
        List of edge copies in ascending weight order; empty if ``source`` is
        not in the graph.
    """
    if graph.find_vertex(source) is None:
        return []
    vertices, edges = _snapshot(graph)
    ds, chosen = _sweep(vertices, edges, _by_weight)
    return _component_of(ds, chosen, source)
