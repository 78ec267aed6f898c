"""Acyclicity check and topological ordering."""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING, Deque, Iterator, List, Tuple

from routegraph.graph.edge import Edge
from routegraph.graph.vertex import Vertex, VertexKey
from routegraph.logging import get_logger

if TYPE_CHECKING:
    from routegraph.graph.digraph import Graph

LOGGER = get_logger(__name__)


def _dfs_is_dag(start: Vertex) -> bool:
    # Three colours: not visited / visited+processing (on stack) / visited (done)
    start.visited = True
    start.processing = True
    stack: List[Tuple[Vertex, Iterator[Edge]]] = [(start, iter(start.adj))]
    while stack:
        v, edges = stack[-1]
        for edge in edges:
            w = edge.dest
            if w.processing:
                LOGGER.debug("Back edge %r -> %r closes a cycle", v.info, w.info)
                return False
            if not w.visited:
                w.visited = True
                w.processing = True
                stack.append((w, iter(w.adj)))
                break
        else:
            v.processing = False
            stack.pop()
    return True


def is_dag(graph: "Graph") -> bool:
    """Return True if the graph has no directed cycle.

    Self-loops count as cycles.
    """
    for vertex in graph._vertex_set:
        vertex.visited = False
        vertex.processing = False
    for vertex in graph._vertex_set:
        if not vertex.visited and not _dfs_is_dag(vertex):
            return False
    return True


def topsort(graph: "Graph") -> List[VertexKey]:
    """Topological order of all vertex keys using Kahn's algorithm.

    Zero-indegree vertices are queued in insertion order and processed FIFO,
    which makes the result deterministic for a given construction order.

    Args:
        graph: Graph to sort.

    Returns:
        List of every vertex key such that each edge ``u -> v`` has ``u``
        before ``v``; empty if the graph contains a cycle.
    """
    res: List[VertexKey] = []
    vertices = graph._vertex_set

    for vertex in vertices:
        vertex.indegree = 0
    for vertex in vertices:
        for edge in vertex.adj:
            edge.dest.indegree += 1

    queue: Deque[Vertex] = deque(v for v in vertices if v.indegree == 0)
    while queue:
        v = queue.popleft()
        res.append(v.info)
        for edge in v.adj:
            w = edge.dest
            w.indegree -= 1
            if w.indegree == 0:
                queue.append(w)

    if len(res) != len(vertices):
        LOGGER.debug(
            "Topological sort stopped after %d of %d vertices: graph has a cycle",
            len(res),
            len(vertices),
        )
        res.clear()
    return res
