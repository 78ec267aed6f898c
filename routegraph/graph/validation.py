"""Structural invariant checks for `Graph`.

The container keeps an ordered vertex list and a key index side by side and
links edges into two adjacency lists. These checks confirm that all of them
agree; they are used by tests and, when `GraphConfig.validate_on_mutation`
is set, after every mutation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Set

from routegraph.logging import get_logger

if TYPE_CHECKING:
    from routegraph.graph.digraph import Graph

LOGGER = get_logger(__name__)

_MAX_REPORTED = 10


class GraphInvariantError(AssertionError):
    """Raised when a graph's internal structures disagree."""

    def __init__(self, violations: List[str]) -> None:
        self.violations = list(violations)
        listed = "\n  - ".join(self.violations[:_MAX_REPORTED])
        suffix = (
            f"\n  ... and {len(self.violations) - _MAX_REPORTED} more"
            if len(self.violations) > _MAX_REPORTED
            else ""
        )
        super().__init__(
            f"Found {len(self.violations)} graph invariant violation(s):\n"
            f"  - {listed}{suffix}"
        )


def find_violations(graph: "Graph") -> List[str]:
    """Return a description of every broken invariant (empty when consistent).

    Args:
        graph: Graph to inspect.

    Returns:
        List[str]: One message per violation, in discovery order.
    """
    errors: List[str] = []
    vertices = graph._vertex_set
    index = graph._vertex_map

    # Vertex list and key index hold the same vertices; keys are unique
    seen_keys: Set = set()
    for vertex in vertices:
        if vertex.info in seen_keys:
            errors.append(f"Duplicate vertex key {vertex.info!r} in vertex set")
        seen_keys.add(vertex.info)
        if index.get(vertex.info) is not vertex:
            errors.append(f"Vertex {vertex.info!r} missing from key index")
    if len(index) != len(vertices):
        errors.append(
            f"Key index has {len(index)} entries, vertex set has {len(vertices)}"
        )
    for key, vertex in index.items():
        if vertex.info is not key and vertex.info != key:
            errors.append(f"Index key {key!r} maps to vertex {vertex.info!r}")

    members = {id(v) for v in vertices}
    for vertex in vertices:
        for edge in vertex.adj:
            label = f"{edge.orig.info!r}->{edge.dest.info!r}"
            if edge.orig is not vertex:
                errors.append(f"Edge {label} listed in adj of {vertex.info!r}")
            if id(edge.dest) not in members:
                errors.append(f"Edge {label} targets a vertex outside the graph")
            if not any(e is edge for e in edge.dest.incoming):
                errors.append(f"Edge {label} missing from destination incoming")
            partner = edge.reverse
            if partner is not None:
                if partner.reverse is not edge:
                    errors.append(f"Edge {label} reverse link is not mutual")
                if partner.orig is not edge.dest or partner.dest is not edge.orig:
                    errors.append(f"Edge {label} reverse has mismatched endpoints")
        for edge in vertex.incoming:
            if edge.dest is not vertex:
                errors.append(
                    f"Incoming edge {edge.orig.info!r}->{edge.dest.info!r} "
                    f"listed at {vertex.info!r}"
                )
            if id(edge.orig) not in members:
                errors.append(
                    f"Incoming edge at {vertex.info!r} originates outside the graph"
                )
            elif not any(e is edge for e in edge.orig.adj):
                errors.append(
                    f"Incoming edge {edge.orig.info!r}->{vertex.info!r} "
                    f"not owned by its origin"
                )
    return errors


def validate_graph(graph: "Graph") -> None:
    """Check every structural invariant of ``graph``.

    Args:
        graph: Graph to inspect.

    Raises:
        GraphInvariantError: If any invariant is violated. The message lists
            up to 10 violations.
    """
    errors = find_violations(graph)
    if errors:
        LOGGER.warning("Graph failed validation with %d violation(s)", len(errors))
        raise GraphInvariantError(errors)
