"""Toroidal neighbourhood grid for the cellular population.

Slots are laid out row-major on a ``rows x cols`` mesh with
``cols = ceil(sqrt(N))`` and ``rows = ceil(N / cols)``. When ``N`` is not a
perfect rectangle the last row is short; horizontal moves then wrap inside
the short row and vertical moves wrap inside the column's own height, so no
index ``>= N`` is ever produced.
"""

from __future__ import annotations

import math
from typing import Sequence

from mocell.core.candidate import Candidate
from mocell.foundation.exceptions import ContractViolationError

# (row offset, column offset) in output order.
_ORTHOGONAL: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, 1), (0, -1))
_DIAGONAL: tuple[tuple[int, int], ...] = ((-1, 1), (-1, -1), (1, 1), (1, -1))


class Neighborhood:
    def __init__(self, pop_size: int) -> None:
        if pop_size <= 0:
            raise ContractViolationError(f"pop_size must be positive, got {pop_size}.")
        self.pop_size = int(pop_size)
        self.cols = int(math.ceil(math.sqrt(self.pop_size)))
        self.rows = int(math.ceil(self.pop_size / self.cols))
        self._cache: dict[int, list[list[int]]] = {}

    def _row_length(self, row: int) -> int:
        return min(self.cols, self.pop_size - row * self.cols)

    def _column_height(self, col: int) -> int:
        return (self.pop_size - col + self.cols - 1) // self.cols

    def position(self, index: int) -> tuple[int, int]:
        self._check_index(index)
        return divmod(index, self.cols)

    def _shift(self, row: int, col: int, d_row: int, d_col: int) -> int:
        # Horizontal move inside the current row, then vertical inside the new column.
        if d_col:
            col = (col + d_col) % self._row_length(row)
        if d_row:
            row = (row + d_row) % self._column_height(col)
        return row * self.cols + col

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self.pop_size:
            raise ContractViolationError(f"Slot {index} is outside the grid [0, {self.pop_size}).")

    def neighbor_indices(self, index: int, size: int = 8) -> list[int]:
        """Distinct neighbour slots of ``index`` (never ``index`` itself)."""
        if size not in (4, 8):
            raise ContractViolationError(f"Neighbourhood size must be 4 or 8, got {size}.")
        self._check_index(index)
        cached = self._cache.get(index)
        if cached is None:
            row, col = divmod(index, self.cols)
            cached = []
            for offsets in (_ORTHOGONAL, _DIAGONAL):
                found: list[int] = []
                for d_row, d_col in offsets:
                    found.append(self._shift(row, col, d_row, d_col))
                cached.append(found)
            self._cache[index] = cached
        raw = cached[0] if size == 4 else cached[0] + cached[1]
        seen = {index}
        out: list[int] = []
        for slot in raw:
            if slot not in seen:
                seen.add(slot)
                out.append(slot)
        return out

    def neighbors(self, population: Sequence[Candidate], index: int, size: int = 8) -> list[Candidate]:
        """Copies of the neighbours of ``index``; the caller may extend the list freely."""
        if len(population) != self.pop_size:
            raise ContractViolationError(
                f"Population has {len(population)} slots, grid expects {self.pop_size}."
            )
        return [population[slot].copy() for slot in self.neighbor_indices(index, size)]

    def four_neighbors(self, population: Sequence[Candidate], index: int) -> list[Candidate]:
        return self.neighbors(population, index, 4)

    def eight_neighbors(self, population: Sequence[Candidate], index: int) -> list[Candidate]:
        return self.neighbors(population, index, 8)


__all__ = ["Neighborhood"]
