from __future__ import annotations

import pytest

from mocell.algorithm.neighborhood import Neighborhood
from mocell.core.candidate import Candidate
from mocell.foundation.exceptions import ContractViolationError


def test_square_grid_wraps_around_corner():
    grid = Neighborhood(9)
    assert (grid.rows, grid.cols) == (3, 3)
    assert grid.neighbor_indices(0, 4) == [6, 3, 1, 2]
    assert grid.neighbor_indices(0, 8) == [6, 3, 1, 2, 7, 8, 4, 5]


def test_centre_cell_has_all_eight_neighbours():
    grid = Neighborhood(9)
    assert grid.position(4) == (1, 1)
    assert sorted(grid.neighbor_indices(4, 8)) == [0, 1, 2, 3, 5, 6, 7, 8]


def test_short_last_row_never_leaves_the_population():
    grid = Neighborhood(10)
    assert (grid.rows, grid.cols) == (3, 4)
    assert grid.neighbor_indices(9, 4) == [5, 1, 8]
    assert grid.neighbor_indices(9, 8) == [5, 1, 8, 4, 0]


def test_tiny_populations():
    assert Neighborhood(1).neighbor_indices(0, 8) == []
    assert Neighborhood(2).neighbor_indices(0, 8) == [1]
    assert Neighborhood(2).neighbor_indices(1, 4) == [0]


def test_neighbour_sets_are_valid_for_many_sizes():
    for n in range(1, 40):
        grid = Neighborhood(n)
        for index in range(n):
            four = grid.neighbor_indices(index, 4)
            eight = grid.neighbor_indices(index, 8)
            for found in (four, eight):
                assert index not in found
                assert len(found) == len(set(found))
                assert all(0 <= slot < n for slot in found)
            assert len(four) <= 4 and len(eight) <= 8
            assert eight[: len(four)] == four


def test_neighbours_are_copies_of_population_members():
    population = [Candidate(variables=[0, 1], objectives=[float(i)], slot=i) for i in range(9)]
    grid = Neighborhood(9)
    found = grid.four_neighbors(population, 4)
    assert [c.slot for c in found] == grid.neighbor_indices(4, 4)
    assert all(c is not population[c.slot] for c in found)
    found[0].objectives[0] = -1.0
    assert population[found[0].slot].objectives[0] != -1.0
    assert len(grid.eight_neighbors(population, 4)) == 8


def test_invalid_requests():
    grid = Neighborhood(9)
    with pytest.raises(ContractViolationError):
        grid.neighbor_indices(9, 8)
    with pytest.raises(ContractViolationError):
        grid.neighbor_indices(0, 6)
    with pytest.raises(ContractViolationError):
        grid.neighbors([], 0)
    with pytest.raises(ContractViolationError):
        Neighborhood(0)
