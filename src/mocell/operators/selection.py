"""Mating selection over a local pool of candidates."""

from __future__ import annotations

from typing import Callable, Sequence

import numpy as np

from mocell.core.candidate import Candidate
from mocell.core.dominance import DominanceComparator
from mocell.foundation.exceptions import ContractViolationError

Comparator = Callable[[Candidate, Candidate], int]


def _check_pool(pool: Sequence[Candidate]) -> None:
    if len(pool) == 0:
        raise ContractViolationError("Cannot select from an empty pool.")


class BinaryTournament:
    """
    Binary tournament: two distinct pool members meet, the comparator decides,
    a fair coin breaks ties.
    """

    name = "tournament"

    def __init__(self, rng: np.random.Generator, comparator: Comparator | None = None) -> None:
        self.rng = rng
        self.comparator = comparator if comparator is not None else DominanceComparator()

    def __call__(self, pool: Sequence[Candidate]) -> Candidate:
        _check_pool(pool)
        if len(pool) == 1:
            return pool[0]
        i, j = self.rng.choice(len(pool), size=2, replace=False)
        first, second = pool[int(i)], pool[int(j)]
        flag = self.comparator(first, second)
        if flag == -1:
            return first
        if flag == 1:
            return second
        return first if self.rng.random() < 0.5 else second


class RandomSelection:
    """Uniform pick from the pool."""

    name = "random"

    def __init__(self, rng: np.random.Generator) -> None:
        self.rng = rng

    def __call__(self, pool: Sequence[Candidate]) -> Candidate:
        _check_pool(pool)
        return pool[int(self.rng.integers(0, len(pool)))]


__all__ = ["BinaryTournament", "RandomSelection"]
