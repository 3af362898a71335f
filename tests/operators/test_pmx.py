from __future__ import annotations

import numpy as np
import pytest

from mocell.core.candidate import Candidate, check_permutation
from mocell.foundation.exceptions import ConfigurationError, ContractViolationError
from mocell.operators.permutation import PMXCrossover, pmx_children, pmx_crossover


def test_reference_exchange():
    c1, c2 = pmx_children([1, 2, 3, 4, 5], [5, 4, 3, 2, 1], 1, 3)
    assert c1.tolist() == [1, 4, 3, 2, 5]
    assert c2.tolist() == [5, 2, 3, 4, 1]


def test_cut_points_are_ordered():
    forward = pmx_children([1, 2, 3, 4, 5], [5, 4, 3, 2, 1], 1, 3)
    backward = pmx_children([1, 2, 3, 4, 5], [5, 4, 3, 2, 1], 3, 1)
    assert forward[0].tolist() == backward[0].tolist()
    assert forward[1].tolist() == backward[1].tolist()


def test_repair_follows_mapping_chains():
    p1 = [0, 1, 2, 3, 4, 5, 6, 7]
    p2 = [3, 7, 5, 1, 6, 0, 2, 4]
    c1, c2 = pmx_children(p1, p2, 3, 5)
    # segment 3..5 comes from the other parent
    assert c1[3:6].tolist() == [1, 6, 0]
    assert c2[3:6].tolist() == [3, 4, 5]
    assert c1.tolist() == [5, 3, 2, 1, 6, 0, 4, 7]
    assert c2.tolist() == [1, 7, 0, 3, 4, 5, 2, 6]
    check_permutation(c1)
    check_permutation(c2)


def test_children_are_permutations_for_every_cut_pair():
    rng = np.random.default_rng(2024)
    for length in range(2, 10):
        for _ in range(15):
            p1 = rng.permutation(length)
            p2 = rng.permutation(length)
            for lo in range(length):
                for hi in range(lo, length):
                    c1, c2 = pmx_children(p1, p2, lo, hi)
                    assert sorted(c1.tolist()) == list(range(length))
                    assert sorted(c2.tolist()) == list(range(length))
                    assert c1[lo : hi + 1].tolist() == p2[lo : hi + 1].tolist()
                    assert c2[lo : hi + 1].tolist() == p1[lo : hi + 1].tolist()


def test_probability_zero_returns_copies(rng):
    p1 = np.array([2, 0, 1, 3])
    p2 = np.array([3, 1, 0, 2])
    c1, c2 = pmx_crossover(p1, p2, 0.0, rng)
    assert c1.tolist() == p1.tolist()
    assert c2.tolist() == p2.tolist()
    c1[0] = 9
    assert p1[0] == 2


def test_probability_one_always_crosses_distinct_parents(rng):
    p1 = np.arange(6)
    p2 = p1[::-1].copy()
    changed = 0
    for _ in range(50):
        c1, _ = pmx_crossover(p1, p2, 1.0, rng)
        check_permutation(c1)
        changed += int(not np.array_equal(c1, p1))
    assert changed == 50


def test_candidate_operator_produces_fresh_unevaluated_children(rng):
    op = PMXCrossover(prob=1.0, rng=rng)
    a = Candidate(variables=[0, 1, 2, 3, 4], objectives=[1.0, 1.0], slot=3)
    b = Candidate(variables=[4, 3, 2, 1, 0], objectives=[2.0, 0.0], slot=4)
    for _ in range(30):
        c1, c2 = op(a, b)
        assert not c1.evaluated and not c2.evaluated
        assert c1.slot is None and c2.slot is None
        check_permutation(c1.variables)
        check_permutation(c2.variables)


@pytest.mark.parametrize(
    "p1, p2",
    [
        ([0, 1, 2], [0, 1]),
        ([0, 0, 1], [0, 1, 2]),
        ([0, 1, 2], [0, 1, 3]),
        ([0], [0]),
    ],
)
def test_invalid_parents_fail_fast(p1, p2):
    with pytest.raises(ContractViolationError):
        pmx_children(p1, p2, 0, 1)


def test_cut_points_out_of_range():
    with pytest.raises(ContractViolationError):
        pmx_children([0, 1, 2], [2, 1, 0], 0, 3)


def test_candidate_operator_requires_zero_based_permutations(rng):
    op = PMXCrossover(prob=1.0, rng=rng)
    a = Candidate(variables=[1, 2, 3])
    b = Candidate(variables=[3, 2, 1])
    with pytest.raises(ContractViolationError):
        op(a, b)


def test_probability_is_validated(rng):
    with pytest.raises(ConfigurationError):
        PMXCrossover(prob=1.5, rng=rng)
