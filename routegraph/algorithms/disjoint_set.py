"""Union-find over vertex keys, used by the spanning-tree sweeps."""

from __future__ import annotations

from typing import Dict, Hashable, List


def _same(a: Hashable, b: Hashable) -> bool:
    return a is b or a == b


class DisjointSets:
    """Disjoint-set forest with path compression and union by rank.

    Keys must be registered with `make_set` before use; `find_set` and
    `union_sets` raise `KeyError` for unknown keys.
    """

    def __init__(self) -> None:
        self.parent: Dict[Hashable, Hashable] = {}
        self.rank: Dict[Hashable, int] = {}

    def __contains__(self, item: Hashable) -> bool:
        return item in self.parent

    def make_set(self, item: Hashable) -> None:
        self.parent[item] = item
        self.rank[item] = 0

    def find_set(self, item: Hashable) -> Hashable:
        """Return the representative of ``item``'s set, compressing the path."""
        parent = self.parent
        root = item
        trail: List[Hashable] = []
        while not _same(parent[root], root):
            trail.append(root)
            root = parent[root]
        for node in trail:
            parent[node] = root
        return root

    def union_sets(self, set1: Hashable, set2: Hashable) -> None:
        """Merge the sets containing ``set1`` and ``set2``.

        The lower-rank root goes under the higher-rank one. On equal ranks
        the second root goes under the first and the first gains a rank.
        """
        root1 = self.find_set(set1)
        root2 = self.find_set(set2)
        if _same(root1, root2):
            return
        if self.rank[root1] > self.rank[root2]:
            self.parent[root2] = root1
        elif self.rank[root1] < self.rank[root2]:
            self.parent[root1] = root2
        else:
            self.parent[root2] = root1
            self.rank[root1] += 1

    def connected(self, a: Hashable, b: Hashable) -> bool:
        """Return True if ``a`` and ``b`` are in the same set."""
        return _same(self.find_set(a), self.find_set(b))
