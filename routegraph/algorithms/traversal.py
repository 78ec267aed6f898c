"""Depth-first and breadth-first traversals.

Both traversals follow ``adj`` in insertion order and report vertex keys in
visitation order. They reset the ``visited`` scratch flag of every vertex
before starting, so previous runs never leak into the result.
"""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING, Deque, Iterator, List

from routegraph.graph.edge import Edge
from routegraph.graph.vertex import Vertex, VertexKey

if TYPE_CHECKING:
    from routegraph.graph.digraph import Graph


def _clear_visited(graph: "Graph") -> None:
    for vertex in graph._vertex_set:
        vertex.visited = False


def _dfs_visit(start: Vertex, res: List[VertexKey]) -> None:
    """Append the pre-order of the DFS tree rooted at ``start`` to ``res``.

    An explicit stack of adjacency iterators replaces recursion; the order is
    the one a recursive visit would produce.
    """
    start.visited = True
    res.append(start.info)
    stack: List[Iterator[Edge]] = [iter(start.adj)]
    while stack:
        for edge in stack[-1]:
            w = edge.dest
            if not w.visited:
                w.visited = True
                res.append(w.info)
                stack.append(iter(w.adj))
                break
        else:
            stack.pop()


def dfs(graph: "Graph") -> List[VertexKey]:
    """Depth-first traversal of the whole graph.

    Roots are taken in vertex insertion order, skipping vertices already
    reached, so each vertex appears exactly once.

    Args:
        graph: Graph to traverse.

    Returns:
        List of vertex keys in DFS pre-order over the whole forest.
    """
    res: List[VertexKey] = []
    _clear_visited(graph)
    for vertex in graph._vertex_set:
        if not vertex.visited:
            _dfs_visit(vertex, res)
    return res


def dfs_from(graph: "Graph", source: VertexKey) -> List[VertexKey]:
    """Depth-first traversal of the tree rooted at ``source``.

    Args:
        graph: Graph to traverse.
        source: Key of the root vertex.

    Returns:
        List of reachable vertex keys in DFS pre-order; empty if ``source``
        is not in the graph.
    """
    res: List[VertexKey] = []
    s = graph.find_vertex(source)
    if s is None:
        return res
    _clear_visited(graph)
    _dfs_visit(s, res)
    return res


def bfs(graph: "Graph", source: VertexKey) -> List[VertexKey]:
    """Breadth-first traversal from ``source``.

    Args:
        graph: Graph to traverse.
        source: Key of the start vertex.

    Returns:
        List of reachable vertex keys in non-decreasing hop distance; empty
        if ``source`` is not in the graph.
    """
    res: List[VertexKey] = []
    s = graph.find_vertex(source)
    if s is None:
        return res
    _clear_visited(graph)

    queue: Deque[Vertex] = deque([s])
    s.visited = True
    while queue:
        v = queue.popleft()
        res.append(v.info)
        for edge in v.adj:
            w = edge.dest
            if not w.visited:
                queue.append(w)
                w.visited = True
    return res
