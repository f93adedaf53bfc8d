from __future__ import annotations

import operator

import numpy as np

from .union_find import UnionFind


class Percolation:
    """An n-by-n grid of sites, each either blocked or open.

    Sites are addressed with 1-indexed ``(row, col)`` pairs. An open site is
    full when a chain of open neighbours links it to an open site in the top
    row, and the system percolates when some bottom-row site is full.

    Connectivity to the top is answered from a cache holding the current root
    of every top-row site. There are no virtual top or bottom nodes, so two
    bottom-row sites can never be joined through a shared sink and report a
    spurious full state (backwash).
    """

    def __init__(self, n: int):
        """Create an n-by-n grid with every site blocked."""
        n = operator.index(n)
        if n <= 0:
            raise ValueError(f"grid size must be positive, got {n}")

        self._n = n
        self._sites = np.zeros(n * n, dtype=bool)
        self._union_find = UnionFind(n * n)
        self._opened_count = 0
        # Root of each top-row site, or the site's own index while it is blocked
        self._top_roots = np.arange(n, dtype=np.int64)
        self._percolates = False

    @property
    def n(self) -> int:
        """Grid dimension."""
        return self._n

    @property
    def open_fraction(self) -> float:
        """Share of sites that are open, in [0, 1]."""
        return self._opened_count / float(self._n * self._n)

    def open(self, row: int, col: int) -> None:
        """Open site (row, col) if it is not open already."""
        position = self._position(row, col)
        if self._sites[position]:
            return

        self._sites[position] = True
        self._opened_count += 1

        n = self._n
        linked = False
        for neighbor_row, neighbor_col in ((row - 1, col), (row + 1, col), (row, col - 1), (row, col + 1)):
            if not (1 <= neighbor_row <= n and 1 <= neighbor_col <= n):
                continue
            neighbor = n * (neighbor_row - 1) + (neighbor_col - 1)
            if self._sites[neighbor]:
                self._union_find.union(position, neighbor)
                linked = True

        if linked:
            self._refresh_top_roots()
        # A site opened without a union can only percolate on its own when n == 1
        if not self._percolates and (linked or n == 1):
            self._percolates = self._bottom_linked_to_top()

    def is_open(self, row: int, col: int) -> bool:
        return bool(self._sites[self._position(row, col)])

    def is_full(self, row: int, col: int) -> bool:
        """Is site (row, col) open and connected to an open top-row site?"""
        position = self._position(row, col)
        if not self._sites[position]:
            return False
        return position < self._n or self._linked_to_top(position)

    def number_of_open_sites(self) -> int:
        return self._opened_count

    def percolates(self) -> bool:
        """Does some open bottom-row site connect to the top row?

        Open sites never close, so the answer is recomputed only when an
        ``open`` merges components.
        """
        return self._percolates

    def _position(self, row: int, col: int) -> int:
        row = operator.index(row)
        col = operator.index(col)
        n = self._n
        if not (1 <= row <= n and 1 <= col <= n):
            raise IndexError(f"site ({row}, {col}) is outside the {n}x{n} grid")
        return n * (row - 1) + (col - 1)

    def _linked_to_top(self, position: int) -> bool:
        root = self._union_find.find(position)
        return bool(np.any(self._top_roots == root))

    def _bottom_linked_to_top(self) -> bool:
        n = self._n
        offset = n * (n - 1)
        bottom = np.flatnonzero(self._sites[offset:]) + offset
        if bottom.size == 0:
            return False
        find = self._union_find.find
        roots = np.fromiter((find(int(p)) for p in bottom), dtype=np.int64, count=bottom.size)
        return bool(np.isin(roots, self._top_roots).any())

    def _refresh_top_roots(self) -> None:
        find = self._union_find.find
        for i in range(self._n):
            self._top_roots[i] = find(i) if self._sites[i] else i

    def __repr__(self) -> str:
        return f"Percolation(n={self._n}, open={self._opened_count})"
