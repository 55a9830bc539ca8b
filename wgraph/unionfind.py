"""Disjoint-set forest with union by rank and path compression."""

from __future__ import annotations


class UnionFind:
    """Disjoint sets over the elements ``0 .. size-1``."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("Size must not be negative.")
        self._parent = list(range(size))
        self._rank = [0] * size

    def _check(self, u: int) -> None:
        if not 0 <= u < len(self._parent):
            raise IndexError(f"Element {u} out of range.")

    def find(self, u: int) -> int:
        """Return the representative of the set holding ``u``."""
        self._check(u)
        parent = self._parent
        root = u
        while parent[root] != root:
            root = parent[root]
        while parent[u] != root:
            following = parent[u]
            parent[u] = root
            u = following
        return root

    def unite(self, u: int, v: int) -> None:
        """Merge the sets holding ``u`` and ``v``."""
        pu = self.find(u)
        pv = self.find(v)
        if pu == pv:
            return
        if self._rank[pu] < self._rank[pv]:
            self._parent[pu] = pv
        elif self._rank[pu] > self._rank[pv]:
            self._parent[pv] = pu
        else:
            self._parent[pu] = pv
            self._rank[pv] += 1

    def connected(self, u: int, v: int) -> bool:
        """Whether ``u`` and ``v`` are in the same set."""
        return self.find(u) == self.find(v)

    def __len__(self) -> int:
        return len(self._parent)