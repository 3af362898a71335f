"""Crowding-distance density estimation."""

from __future__ import annotations

from typing import Sequence

import numpy as np

from mocell.core.candidate import Candidate, stack_objectives
from mocell.foundation.exceptions import ContractViolationError


def crowding_distances(F: np.ndarray) -> np.ndarray:
    """
    Standard NSGA-style crowding distance for one front, higher is better.
    Boundary points of every objective get ``inf``.
    """
    F = np.asarray(F, dtype=float)
    if F.ndim != 2:
        raise ContractViolationError(f"F must be a 2D array (n, m), got shape {F.shape}.")
    n, m = F.shape
    if n == 0:
        return np.empty(0, dtype=float)
    if n <= 2:
        return np.full(n, np.inf)

    d = np.zeros(n, dtype=float)
    for j in range(m):
        order = np.argsort(F[:, j], kind="mergesort")
        sorted_vals = F[order, j]

        d[order[0]] = np.inf
        d[order[-1]] = np.inf

        span = sorted_vals[-1] - sorted_vals[0]
        if span <= 0.0:
            continue

        contrib = (sorted_vals[2:] - sorted_vals[:-2]) / span
        d[order[1:-1]] += contrib
    return d


def crowding_distance_assignment(front: Sequence[Candidate], n_obj: int) -> None:
    """Write the crowding distance of every member of *front* into ``candidate.crowding``."""
    if not front:
        return
    F = stack_objectives(front)
    if F.shape[1] != n_obj:
        raise ContractViolationError(f"Front has {F.shape[1]} objectives, expected {n_obj}.")
    for member, value in zip(front, crowding_distances(F)):
        member.crowding = float(value)


def crowding_sort_key(candidate: Candidate) -> tuple[float, float]:
    """Ascending key: lower rank first, then larger crowding first."""
    rank = candidate.rank if candidate.rank is not None else np.inf
    return (float(rank), -candidate.crowding)


def sort_by_rank_and_crowding(candidates: list[Candidate]) -> None:
    """Stable in-place sort, best first. The last element is the worst."""
    candidates.sort(key=crowding_sort_key)


__all__ = [
    "crowding_distances",
    "crowding_distance_assignment",
    "crowding_sort_key",
    "sort_by_rank_and_crowding",
]
