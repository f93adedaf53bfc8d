"""Tests for the percolation grid."""

import numpy as np
import pytest

from percolation_sim.grid import Percolation


class TestConstruction:
    """Tests for grid creation."""

    @pytest.mark.parametrize("n", [1, 2, 5, 10])
    def test_fresh_grid(self, n):
        grid = Percolation(n)

        assert grid.n == n
        assert grid.number_of_open_sites() == 0
        assert not grid.percolates()

    @pytest.mark.parametrize("n", [0, -1, -10])
    def test_non_positive_size_rejected(self, n):
        with pytest.raises(ValueError):
            Percolation(n)

    def test_non_integer_size_rejected(self):
        with pytest.raises(TypeError):
            Percolation(2.5)


class TestOpen:
    """Tests for opening sites."""

    def test_open_marks_site(self):
        grid = Percolation(3)
        grid.open(2, 3)

        assert grid.is_open(2, 3)
        assert not grid.is_open(3, 2)
        assert grid.number_of_open_sites() == 1

    def test_open_is_idempotent(self):
        grid = Percolation(4)
        grid.open(2, 2)
        grid.open(2, 2)

        assert grid.is_open(2, 2)
        assert grid.number_of_open_sites() == 1

    def test_open_count_is_monotone(self):
        grid = Percolation(5)
        rng = np.random.default_rng(0)
        previous = 0
        for _ in range(60):
            grid.open(int(rng.integers(1, 6)), int(rng.integers(1, 6)))
            current = grid.number_of_open_sites()
            assert current >= previous
            previous = current
        assert previous <= 25

    def test_open_fraction(self):
        grid = Percolation(2)
        grid.open(1, 1)

        assert grid.open_fraction == pytest.approx(0.25)


class TestOutOfRange:
    """Tests for coordinate validation."""

    @pytest.mark.parametrize("row,col", [(0, 1), (1, 0), (4, 1), (1, 4), (-1, 2)])
    def test_open_rejects(self, row, col):
        with pytest.raises(IndexError):
            Percolation(3).open(row, col)

    @pytest.mark.parametrize("row,col", [(0, 1), (1, 0), (4, 1), (1, 4)])
    def test_is_open_rejects(self, row, col):
        with pytest.raises(IndexError):
            Percolation(3).is_open(row, col)

    @pytest.mark.parametrize("row,col", [(0, 1), (1, 0), (4, 1), (1, 4)])
    def test_is_full_rejects(self, row, col):
        with pytest.raises(IndexError):
            Percolation(3).is_full(row, col)


class TestFullAndPercolates:
    """Tests for full-site detection and percolation."""

    def test_single_site(self):
        grid = Percolation(1)
        assert not grid.is_full(1, 1)

        grid.open(1, 1)

        assert grid.is_full(1, 1)
        assert grid.percolates()

    def test_top_row_site_is_full(self):
        grid = Percolation(3)
        grid.open(1, 2)

        assert grid.is_full(1, 2)
        assert not grid.percolates()

    def test_closed_site_is_not_full(self):
        grid = Percolation(3)
        grid.open(1, 1)

        assert not grid.is_full(2, 1)

    def test_left_column_percolates(self):
        grid = Percolation(2)
        grid.open(1, 1)
        grid.open(2, 1)
        grid.open(1, 2)

        assert grid.percolates()
        assert grid.number_of_open_sites() == 3
        assert not grid.is_open(2, 2)
        assert grid.is_full(2, 1)

    def test_open_order_does_not_matter(self):
        grid = Percolation(3)
        for row in (3, 1, 2):
            grid.open(row, 2)

        assert grid.percolates()
        assert grid.is_full(3, 2)

    def test_no_backwash_from_bottom_row(self):
        n = 5
        grid = Percolation(n)
        for col in range(1, n + 1):
            grid.open(n, col)

        assert not grid.percolates()
        assert not any(grid.is_full(n, col) for col in range(1, n + 1))

    def test_no_backwash_after_percolation(self):
        grid = Percolation(3)
        for row in range(1, 4):
            grid.open(row, 1)
        grid.open(3, 3)

        assert grid.percolates()
        assert grid.is_full(3, 1)
        assert not grid.is_full(3, 3)

    def test_joining_bottom_site_becomes_full(self):
        grid = Percolation(3)
        for row in range(1, 4):
            grid.open(row, 1)
        grid.open(3, 3)
        grid.open(3, 2)

        assert grid.is_full(3, 3)

    @pytest.mark.parametrize("n", [1, 2, 4, 7])
    def test_fully_open_grid(self, n):
        grid = Percolation(n)
        for row in range(1, n + 1):
            for col in range(1, n + 1):
                grid.open(row, col)

        assert grid.percolates()
        assert grid.number_of_open_sites() == n * n
        assert all(grid.is_full(row, col) for row in range(1, n + 1) for col in range(1, n + 1))

    def test_percolates_when_middle_site_closes_the_gap(self):
        grid = Percolation(3)
        grid.open(3, 2)
        grid.open(1, 2)
        assert not grid.percolates()

        grid.open(2, 2)

        assert grid.percolates()

    def test_percolation_survives_later_opens(self):
        grid = Percolation(3)
        for row in range(1, 4):
            grid.open(row, 3)
        grid.open(3, 1)
        grid.open(2, 1)

        assert grid.percolates()
        assert not grid.is_full(3, 1)

    def test_matches_full_bottom_row_scan(self):
        n = 8
        grid = Percolation(n)
        rng = np.random.default_rng(17)
        for _ in range(3 * n * n):
            grid.open(int(rng.integers(1, n + 1)), int(rng.integers(1, n + 1)))
            expected = any(grid.is_full(n, col) for col in range(1, n + 1))
            assert grid.percolates() == expected
