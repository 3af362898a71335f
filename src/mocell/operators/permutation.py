from __future__ import annotations

from typing import Any, Sequence, TypeAlias

import numpy as np
from numpy.typing import NDArray

from mocell.core.candidate import Candidate, check_permutation
from mocell.foundation.exceptions import ConfigurationError, ContractViolationError

PermVec: TypeAlias = NDArray[np.integer[Any]]
PermPop: TypeAlias = NDArray[np.integer[Any]]
RNG: TypeAlias = np.random.Generator


def random_permutation_population(
    pop_size: int,
    n_var: int,
    rng: RNG,
) -> PermPop:
    """
    Generate a batch of random permutations using the random-keys method.
    """
    if pop_size <= 0 or n_var <= 0:
        raise ValueError("pop_size and n_var must be positive integers.")
    keys = rng.random((pop_size, n_var))
    return np.argsort(keys, axis=1).astype(np.int64, copy=False)


def _check_probability(prob: float, name: str = "probability") -> float:
    prob = float(prob)
    if not 0.0 <= prob <= 1.0:
        raise ConfigurationError(f"{name} must be in [0, 1], got {prob}.", details={name: prob})
    return prob


def _check_parent_pair(p1: np.ndarray, p2: np.ndarray) -> None:
    if p1.ndim != 1 or p2.ndim != 1:
        raise ContractViolationError("PMX parents must be one-dimensional vectors.")
    if p1.shape[0] != p2.shape[0]:
        raise ContractViolationError(
            f"PMX parents differ in length: {p1.shape[0]} vs {p2.shape[0]}.",
            details={"left": int(p1.shape[0]), "right": int(p2.shape[0])},
        )
    if p1.shape[0] < 2:
        raise ContractViolationError("PMX needs vectors of length >= 2.")
    if np.unique(p1).size != p1.size or not np.array_equal(np.sort(p1), np.sort(p2)):
        raise ContractViolationError("PMX parents are not permutations of the same values.")


def _two_cut_points(n: int, rng: RNG) -> tuple[int, int]:
    cut1 = int(rng.integers(0, n))
    cut2 = int(rng.integers(0, n))
    while cut2 == cut1:
        cut2 = int(rng.integers(0, n))
    if cut1 > cut2:
        cut1, cut2 = cut2, cut1
    return cut1, cut2


def _resolve(gene: int, mapping: dict[int, int], limit: int) -> int:
    steps = 0
    while gene in mapping:
        gene = mapping[gene]
        steps += 1
        if steps > limit:
            raise ContractViolationError("PMX repair did not converge; parents are not valid permutations.")
    return gene


def pmx_children(
    p1: Sequence[int] | PermVec,
    p2: Sequence[int] | PermVec,
    cut1: int,
    cut2: int,
) -> tuple[PermVec, PermVec]:
    """
    Partially matched crossover with fixed, inclusive cut points.

    The segment ``[lo, hi]`` is exchanged between the parents; every gene
    outside it is repaired by following the segment mapping until it lands on
    a value that is not mapped any further.
    """
    a = np.asarray(p1, dtype=np.int64)
    b = np.asarray(p2, dtype=np.int64)
    _check_parent_pair(a, b)
    n = a.shape[0]
    lo, hi = (int(cut1), int(cut2)) if cut1 <= cut2 else (int(cut2), int(cut1))
    if lo < 0 or hi >= n:
        raise ContractViolationError(f"Cut points ({cut1}, {cut2}) fall outside [0, {n - 1}].")

    c1 = a.copy()
    c2 = b.copy()
    map_a: dict[int, int] = {}
    map_b: dict[int, int] = {}
    for i in range(lo, hi + 1):
        c1[i] = b[i]
        c2[i] = a[i]
        map_a[int(b[i])] = int(a[i])
        map_b[int(a[i])] = int(b[i])

    for i in range(n):
        if lo <= i <= hi:
            continue
        c1[i] = _resolve(int(a[i]), map_a, n)
        c2[i] = _resolve(int(b[i]), map_b, n)
    return c1, c2


def pmx_crossover(
    p1: PermVec,
    p2: PermVec,
    prob: float,
    rng: RNG,
) -> tuple[PermVec, PermVec]:
    """Apply PMX with probability ``prob``; otherwise return copies of the parents."""
    prob = _check_probability(prob)
    a = np.asarray(p1, dtype=np.int64)
    b = np.asarray(p2, dtype=np.int64)
    _check_parent_pair(a, b)
    if rng.random() < prob:
        cut1, cut2 = _two_cut_points(a.shape[0], rng)
        return pmx_children(a, b, cut1, cut2)
    return a.copy(), b.copy()


def swap_mutation(x: PermVec, prob: float, rng: RNG) -> bool:
    """Swap two distinct positions of ``x`` in place with probability ``prob``."""
    prob = _check_probability(prob)
    n = x.shape[0]
    if n < 2 or prob <= 0.0:
        return False
    if rng.random() >= prob:
        return False
    first = int(rng.integers(0, n))
    second = int(rng.integers(0, n))
    while second == first:
        second = int(rng.integers(0, n))
    x[first], x[second] = x[second], x[first]
    return True


class PMXCrossover:
    """
    Candidate-level PMX operator.

    Both parents must carry permutations of ``0..n-1``. Offspring are new,
    unevaluated candidates without a grid slot.
    """

    name = "pmx"

    def __init__(self, prob: float, rng: RNG) -> None:
        self.prob = _check_probability(prob, "crossover probability")
        self.rng = rng

    def __call__(self, parent1: Candidate, parent2: Candidate) -> tuple[Candidate, Candidate]:
        check_permutation(parent1.variables, name="first parent")
        check_permutation(parent2.variables, name="second parent")
        v1, v2 = pmx_crossover(parent1.variables, parent2.variables, self.prob, self.rng)
        return Candidate(variables=v1), Candidate(variables=v2)


class SwapMutation:
    """Swap mutation on a candidate's permutation, applied in place."""

    name = "swap"

    def __init__(self, prob: float, rng: RNG) -> None:
        self.prob = _check_probability(prob, "mutation probability")
        self.rng = rng

    def __call__(self, candidate: Candidate) -> Candidate:
        swap_mutation(candidate.variables, self.prob, self.rng)
        return candidate


__all__ = [
    "random_permutation_population",
    "pmx_children",
    "pmx_crossover",
    "swap_mutation",
    "PMXCrossover",
    "SwapMutation",
]
