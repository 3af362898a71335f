from __future__ import annotations

import numpy as np

from mocell.core.dominance import compare_dominance
from mocell.core.ranking import Ranking


def test_simple_two_fronts(candidate_factory):
    a = candidate_factory([1.0, 4.0])
    b = candidate_factory([2.0, 2.0])
    c = candidate_factory([4.0, 1.0])
    d = candidate_factory([3.0, 3.0])
    e = candidate_factory([5.0, 5.0])
    ranking = Ranking([a, b, c, d, e])
    assert ranking.number_of_subfronts == 3
    assert ranking.subfront(0) == [a, b, c]
    assert ranking.subfront(1) == [d]
    assert ranking.subfront(2) == [e]
    assert [x.rank for x in (a, b, c, d, e)] == [0, 0, 0, 1, 2]


def test_empty_input_has_no_fronts():
    ranking = Ranking([])
    assert ranking.number_of_subfronts == 0
    assert list(ranking) == []


def test_infeasible_candidates_rank_behind_feasible(candidate_factory):
    good = candidate_factory([9.0, 9.0])
    bad = candidate_factory([0.0, 0.0], violation=1.0)
    ranking = Ranking([bad, good])
    assert ranking.subfront(0) == [good]
    assert ranking.subfront(1) == [bad]


def test_fronts_partition_input(candidate_factory):
    rng = np.random.default_rng(3)
    for _ in range(30):
        n = int(rng.integers(1, 40))
        m = int(rng.integers(2, 4))
        F = rng.integers(0, 6, size=(n, m)).astype(float)
        cands = [candidate_factory(row) for row in F]
        ranking = Ranking(cands)

        seen = [id(c) for front in ranking.fronts for c in front]
        assert sorted(seen) == sorted(id(c) for c in cands)

        for c in ranking.subfront(0):
            assert all(compare_dominance(other, c) != -1 for other in cands)

        for k in range(1, ranking.number_of_subfronts):
            later = [c for front in ranking.fronts[k:] for c in front]
            for c in ranking.subfront(k):
                assert any(compare_dominance(p, c) == -1 for p in ranking.subfront(k - 1))
                assert all(compare_dominance(p, c) != -1 for p in later)
