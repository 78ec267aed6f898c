"""Directed multigraph container with a key index.

`Graph` keeps two views of its vertices in lockstep: an ordered list (for
positional access and deterministic iteration) and a dict from key to vertex
(for O(1) lookup). Each vertex owns its outgoing edges; incoming lists and
reverse links are non-owning back-references.

Missing vertices or edges are reported through the return value (``False``,
``None``, an empty list or ``inf``), never by raising.
"""

from __future__ import annotations

from typing import Dict, Iterator, List, Optional

import numpy as np

from routegraph.algorithms import dag, mst, traversal, weights
from routegraph.config import GRAPH_CONFIG, GraphConfig
from routegraph.graph.edge import Edge
from routegraph.graph.matrix import ScratchMatrices
from routegraph.graph.validation import validate_graph
from routegraph.graph.vertex import Vertex, VertexKey
from routegraph.logging import get_logger

LOGGER = get_logger(__name__)

# Default for `Graph.dfs`: traverse every vertex
_WHOLE_GRAPH = object()


class Graph:
    """A directed multigraph over hashable vertex keys.

    Attributes:
        config: Behavioural switches; defaults to the global `GRAPH_CONFIG`.
        matrices: Lazily allocated all-pairs scratch matrices.
    """

    def __init__(self, config: Optional[GraphConfig] = None) -> None:
        self.config = config if config is not None else GRAPH_CONFIG
        self._vertex_set: List[Vertex] = []
        self._vertex_map: Dict[VertexKey, Vertex] = {}
        self.matrices = ScratchMatrices()

    def __len__(self) -> int:
        return len(self._vertex_set)

    def __contains__(self, key: VertexKey) -> bool:
        return key in self._vertex_map

    def __iter__(self) -> Iterator[VertexKey]:
        """Iterate over vertex keys in insertion order."""
        return iter([v.info for v in self._vertex_set])

    def __repr__(self) -> str:
        return f"Graph(vertices={len(self)}, edges={self.num_edges()})"

    def _after_mutation(self) -> None:
        if self.config.validate_on_mutation:
            validate_graph(self)

    #
    # Lookup
    #
    def find_vertex(self, key: VertexKey) -> Optional[Vertex]:
        """Return the vertex with the given key, or None."""
        return self._vertex_map.get(key)

    def find_vertex_idx(self, key: VertexKey) -> int:
        """Return the position of ``key`` in the vertex list, or -1.

        This is a linear scan; it gives the row/column of a vertex in the
        scratch matrices.
        """
        target = self._vertex_map.get(key)
        if target is None:
            return -1
        for idx, vertex in enumerate(self._vertex_set):
            if vertex is target:
                return idx
        return -1

    def get_num_vertex(self) -> int:
        return len(self._vertex_set)

    def num_edges(self) -> int:
        """Return the total number of edges, parallel edges included."""
        return sum(len(v.adj) for v in self._vertex_set)

    def get_vertex_set(self) -> List[Vertex]:
        """Return a snapshot of the vertices in insertion order."""
        return list(self._vertex_set)

    def get_vertex_map(self) -> Dict[VertexKey, Vertex]:
        """Return a snapshot of the key index."""
        return dict(self._vertex_map)

    #
    # Vertex management
    #
    def add_vertex(self, key: VertexKey) -> bool:
        """Add a vertex with the given key.

        Args:
            key: Hashable vertex key.

        Returns:
            bool: False if a vertex with this key already exists.
        """
        if key in self._vertex_map:
            return False
        vertex = Vertex(key)
        self._vertex_set.append(vertex)
        self._vertex_map[key] = vertex
        self._after_mutation()
        return True

    def remove_vertex(self, key: VertexKey) -> bool:
        """Remove a vertex together with all edges leaving or entering it.

        Args:
            key: Key of the vertex to remove.

        Returns:
            bool: False if no vertex has this key.
        """
        vertex = self._vertex_map.get(key)
        if vertex is None:
            return False

        vertex.remove_outgoing_edges()
        origins: Dict[int, Vertex] = {}
        for edge in vertex.incoming:
            origins.setdefault(id(edge.orig), edge.orig)
        for origin in origins.values():
            origin._remove_edges_to(vertex)

        self._vertex_set = [v for v in self._vertex_set if v is not vertex]
        del self._vertex_map[key]
        LOGGER.debug(
            "Removed vertex %r and edges from %d predecessor(s)", key, len(origins)
        )
        self._after_mutation()
        return True

    def reset_nodes(self) -> None:
        """Clear the ``visited`` flag of every vertex."""
        for vertex in self._vertex_set:
            vertex.visited = False

    #
    # Edge management
    #
    def add_edge(self, source: VertexKey, dest: VertexKey, weight: float) -> bool:
        """Add one directed edge ``source -> dest``.

        Returns:
            bool: False if either endpoint is missing.
        """
        v1 = self._vertex_map.get(source)
        v2 = self._vertex_map.get(dest)
        if v1 is None or v2 is None:
            return False
        v1.add_edge(v2, weight)
        self._after_mutation()
        return True

    def add_bidirectional_edge(
        self, source: VertexKey, dest: VertexKey, weight: float
    ) -> bool:
        """Add ``source -> dest`` and ``dest -> source`` as a reverse pair.

        Returns:
            bool: False if either endpoint is missing.
        """
        v1 = self._vertex_map.get(source)
        v2 = self._vertex_map.get(dest)
        if v1 is None or v2 is None:
            return False
        e1 = v1.add_edge(v2, weight)
        e2 = v2.add_edge(v1, weight)
        e1.set_reverse(e2)
        e2.set_reverse(e1)
        self._after_mutation()
        return True

    def remove_edge(self, source: VertexKey, dest: VertexKey) -> bool:
        """Remove every edge ``source -> dest``.

        Reverse partners of removed edges stay in the graph with their
        ``reverse`` link cleared.

        Returns:
            bool: False if either endpoint is missing or no such edge exists.
        """
        origin = self._vertex_map.get(source)
        target = self._vertex_map.get(dest)
        if origin is None or target is None:
            return False
        count = origin._remove_edges_to(target)
        if count == 0:
            return False
        LOGGER.debug("Removed %d edge(s) %r -> %r", count, source, dest)
        self._after_mutation()
        return True

    def edges(self) -> Iterator[Edge]:
        """Iterate over all edges, grouped by origin in vertex order."""
        for vertex in self._vertex_set:
            yield from list(vertex.adj)

    #
    # Scratch matrices
    #
    @property
    def dist_matrix(self) -> Optional[np.ndarray]:
        return self.matrices.dist_matrix

    @property
    def path_matrix(self) -> Optional[np.ndarray]:
        return self.matrices.path_matrix

    def allocate_matrices(self) -> None:
        """(Re)allocate the scratch matrices for the current vertex count."""
        self.matrices.allocate(len(self._vertex_set))

    #
    # Lifecycle
    #
    def clear(self) -> None:
        """Release the scratch matrices and remove every vertex and edge."""
        self.matrices.release()
        for vertex in self._vertex_set:
            vertex.remove_outgoing_edges()
        self._vertex_set = []
        self._vertex_map = {}
        self._after_mutation()

    def validate(self) -> None:
        """Check the structural invariants.

        Raises:
            GraphInvariantError: If any invariant is violated.
        """
        validate_graph(self)

    #
    # Algorithms
    #
    def dfs(self, source: VertexKey = _WHOLE_GRAPH) -> List[VertexKey]:
        """Depth-first pre-order from ``source``, or over the whole forest.

        Any hashable key, ``None`` included, is a valid ``source``.
        """
        if source is _WHOLE_GRAPH:
            return traversal.dfs(self)
        return traversal.dfs_from(self, source)

    def bfs(self, source: VertexKey) -> List[VertexKey]:
        return traversal.bfs(self, source)

    def is_dag(self) -> bool:
        return dag.is_dag(self)

    def topsort(self) -> List[VertexKey]:
        return dag.topsort(self)

    def kruskal_mst(
        self, source: VertexKey, source_first: bool = False
    ) -> List[Edge]:
        return mst.kruskal_mst(self, source, source_first)

    def minimum_spanning_forest(self) -> List[Edge]:
        return mst.minimum_spanning_forest(self)

    def spanning_tree_from(self, source: VertexKey) -> List[Edge]:
        return mst.spanning_tree_from(self, source)

    def get_edge_weight(self, source: VertexKey, dest: VertexKey) -> float:
        """Weight of the first ``source -> dest`` edge, or ``inf`` if none."""
        return weights.get_edge_weight(self, source, dest)
