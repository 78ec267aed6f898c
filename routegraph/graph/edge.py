"""Directed edge between two vertices of a `Graph`.

An edge is owned by its origin vertex (it lives in ``orig.adj``) and is
referenced, without ownership, from ``dest.incoming``. Bidirectional links
are modelled as two edges pointing at each other through ``reverse``.
"""

from __future__ import annotations

import copy
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from routegraph.graph.vertex import Vertex


class Edge:
    """A weighted directed arc ``orig -> dest``.

    Edges compare by identity: two parallel edges with the same endpoints
    and weight are still distinct.

    Attributes:
        orig: Origin vertex.
        dest: Destination vertex.
        weight: Edge weight; can also be used as a capacity.
        flow: Flow value for flow-related problems (defaults to 0.0).
        selected: Auxiliary selection flag.
        reverse: Paired edge ``dest -> orig`` when the edge is bidirectional.
    """

    __slots__ = ("orig", "dest", "weight", "flow", "selected", "reverse")

    def __init__(self, orig: Vertex, dest: Vertex, weight: float) -> None:
        self.orig = orig
        self.dest = dest
        self.weight = float(weight)
        self.flow: float = 0.0
        self.selected: bool = False
        self.reverse: Optional[Edge] = None

    def __repr__(self) -> str:
        return (
            f"Edge({self.orig.info!r} -> {self.dest.info!r}, weight={self.weight})"
        )

    def get_orig(self) -> Vertex:
        return self.orig

    def get_dest(self) -> Vertex:
        return self.dest

    def get_weight(self) -> float:
        return self.weight

    def get_flow(self) -> float:
        return self.flow

    def is_selected(self) -> bool:
        return self.selected

    def get_reverse(self) -> Optional[Edge]:
        return self.reverse

    def set_flow(self, flow: float) -> None:
        self.flow = float(flow)

    def set_selected(self, selected: bool) -> None:
        self.selected = selected

    def set_reverse(self, reverse: Optional[Edge]) -> None:
        self.reverse = reverse

    def copy(self) -> Edge:
        """Return a shallow copy sharing endpoint and reverse references.

        The copy is detached: it is not listed in any adjacency list.
        """
        return copy.copy(self)
