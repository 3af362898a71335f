"""Non-dominated ranking over candidate lists."""

from __future__ import annotations

from typing import Sequence

from mocell.core.candidate import Candidate
from mocell.core.dominance import compare_dominance


def _fast_non_dominated_sort(candidates: Sequence[Candidate]) -> list[list[int]]:
    """
    Classic O(N^2) fast non-dominated sort.
    Returns a list of fronts, each a list of input indices in input order.
    """
    n = len(candidates)
    if n == 0:
        return []

    dominated_count = [0] * n
    dominates_set: list[list[int]] = [[] for _ in range(n)]
    for p in range(n):
        for q in range(p + 1, n):
            flag = compare_dominance(candidates[p], candidates[q])
            if flag == -1:
                dominates_set[p].append(q)
                dominated_count[q] += 1
            elif flag == 1:
                dominates_set[q].append(p)
                dominated_count[p] += 1

    fronts: list[list[int]] = []
    current = [i for i in range(n) if dominated_count[i] == 0]
    while current:
        fronts.append(current)
        released: list[int] = []
        for p in current:
            for q in dominates_set[p]:
                dominated_count[q] -= 1
                if dominated_count[q] == 0:
                    released.append(q)
        current = sorted(released)
    return fronts


class Ranking:
    """
    Split candidates into successive non-dominated fronts.

    Front 0 holds every candidate no other input dominates; front k holds the
    candidates dominated only by members of fronts ``0..k-1``. Each candidate's
    ``rank`` attribute is set to its front index.
    """

    def __init__(self, candidates: Sequence[Candidate]) -> None:
        self._candidates = list(candidates)
        index_fronts = _fast_non_dominated_sort(self._candidates)
        self.fronts: list[list[Candidate]] = []
        for level, front in enumerate(index_fronts):
            members = [self._candidates[i] for i in front]
            for member in members:
                member.rank = level
            self.fronts.append(members)

    @property
    def number_of_subfronts(self) -> int:
        return len(self.fronts)

    def subfront(self, k: int) -> list[Candidate]:
        return self.fronts[k]

    def __iter__(self):
        return iter(self.fronts)

    def __len__(self) -> int:
        return len(self.fronts)


__all__ = ["Ranking"]
