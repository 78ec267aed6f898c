"""Graph vertex: owner of outgoing edges plus per-algorithm scratch state."""

from __future__ import annotations

from typing import Callable, Hashable, List, Optional, Protocol

from routegraph.graph.edge import Edge

VertexKey = Hashable


class QueueSlot(Protocol):
    """Capability required by an external mutable min-priority queue.

    The queue stores each item's heap position in ``queue_index`` and orders
    items with ``<``.
    """

    queue_index: int

    def __lt__(self, other: QueueSlot) -> bool: ...


class Vertex:
    """A vertex identified by a hashable key.

    Vertices are equal when their keys are equal and hash by key, so a vertex
    can stand in for its key in sets and dicts. Ordering (``<``) compares the
    ``dist`` scratch field only.

    Attributes:
        info: The caller-supplied key.
        adj: Outgoing edges in insertion order (owned by this vertex).
        incoming: Edges whose destination is this vertex (not owned).
        visited: Scratch flag used by DFS, BFS and the DAG check.
        processing: Scratch flag marking vertices on the DAG-check stack.
        indegree: Scratch counter used by topological sort.
        dist: Scratch distance (default 0.0).
        path: Scratch back-pointer edge.
    """

    def __init__(self, info: VertexKey) -> None:
        self.info = info
        self.adj: List[Edge] = []
        self.incoming: List[Edge] = []

        self.visited: bool = False
        self.processing: bool = False
        self.indegree: int = 0
        self.dist: float = 0.0
        self.path: Optional[Edge] = None
        self._queue_index: int = 0

    def __repr__(self) -> str:
        return f"Vertex({self.info!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vertex):
            return NotImplemented
        return self.info == other.info

    def __hash__(self) -> int:
        return hash(self.info)

    def __lt__(self, other: Vertex) -> bool:
        return self.dist < other.dist

    @property
    def queue_index(self) -> int:
        """Heap slot owned by an external mutable priority queue."""
        return self._queue_index

    @queue_index.setter
    def queue_index(self, value: int) -> None:
        self._queue_index = value

    #
    # Edge management
    #
    def add_edge(self, dest: Vertex, weight: float) -> Edge:
        """Append an outgoing edge to ``dest`` and register it as incoming there.

        Parallel edges are allowed.

        Args:
            dest: Destination vertex.
            weight: Edge weight.

        Returns:
            Edge: The new edge.
        """
        edge = Edge(self, dest, weight)
        self.adj.append(edge)
        dest.incoming.append(edge)
        return edge

    def remove_edge(self, key: VertexKey) -> bool:
        """Remove every outgoing edge whose destination has the given key.

        Args:
            key: Destination vertex key.

        Returns:
            bool: True if at least one edge was removed.
        """
        return self._remove_edges_where(lambda edge: edge.dest.info == key) > 0

    def _remove_edges_to(self, dest: Vertex) -> int:
        # Matches by identity; keys such as nan are not equal to themselves.
        return self._remove_edges_where(lambda edge: edge.dest is dest)

    def _remove_edges_where(self, match: Callable[[Edge], bool]) -> int:
        kept: List[Edge] = []
        removed: List[Edge] = []
        for edge in self.adj:
            if match(edge):
                removed.append(edge)
            else:
                kept.append(edge)
        self.adj = kept
        for edge in removed:
            self._delete_edge(edge)
        return len(removed)

    def remove_outgoing_edges(self) -> None:
        """Remove every outgoing edge of this vertex."""
        removed, self.adj = self.adj, []
        for edge in removed:
            self._delete_edge(edge)

    def _delete_edge(self, edge: Edge) -> None:
        # Caller has already taken the edge out of self.adj.
        dest = edge.dest
        dest.incoming = [e for e in dest.incoming if e is not edge]
        partner = edge.reverse
        if partner is not None and partner.reverse is edge:
            partner.reverse = None
        edge.reverse = None

    #
    # Accessors
    #
    def get_info(self) -> VertexKey:
        return self.info

    def get_adj(self) -> List[Edge]:
        return list(self.adj)

    def get_incoming(self) -> List[Edge]:
        return list(self.incoming)

    def is_visited(self) -> bool:
        return self.visited

    def is_processing(self) -> bool:
        return self.processing

    def get_indegree(self) -> int:
        return self.indegree

    def get_dist(self) -> float:
        return self.dist

    def get_path(self) -> Optional[Edge]:
        return self.path

    def set_info(self, info: VertexKey) -> None:
        # Changing the key of a vertex already in a graph breaks the key index.
        self.info = info

    def set_visited(self, visited: bool) -> None:
        self.visited = visited

    def set_processing(self, processing: bool) -> None:
        self.processing = processing

    def set_indegree(self, indegree: int) -> None:
        self.indegree = indegree

    def set_dist(self, dist: float) -> None:
        self.dist = dist

    def set_path(self, path: Optional[Edge]) -> None:
        self.path = path
