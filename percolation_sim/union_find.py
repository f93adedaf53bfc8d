"""Weighted quick-union with path compression over a NumPy-backed forest."""

from __future__ import annotations

import numpy as np


class UnionFind:
    """Disjoint sets over the site indices ``0 .. size - 1`` of a grid.

    Union is by component size and ``find`` halves the path it walks, so both
    operations run in amortized near-constant time.
    """

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"size must be non-negative, got {size}")
        self.parent = np.arange(size, dtype=np.int64)
        self._size = np.ones(size, dtype=np.int64)

    def find(self, site: int) -> int:
        parent = self.parent
        while parent[site] != site:
            parent[site] = parent[parent[site]]
            site = parent[site]
        return int(site)

    def union(self, a: int, b: int) -> bool:
        """Merge the components of ``a`` and ``b``; False if already merged."""
        root_a = self.find(a)
        root_b = self.find(b)
        if root_a == root_b:
            return False
        size = self._size
        if size[root_a] < size[root_b]:
            root_a, root_b = root_b, root_a
        self.parent[root_b] = root_a
        size[root_a] += size[root_b]
        return True


__all__ = ["UnionFind"]
