"""Pareto dominance with feasibility-first constraint handling (minimization)."""

from __future__ import annotations

import numpy as np

from mocell.core.candidate import Candidate
from mocell.foundation.exceptions import ContractViolationError


def _check_comparable(a: Candidate, b: Candidate) -> None:
    if a.objectives.shape != b.objectives.shape:
        raise ContractViolationError(
            f"Cannot compare objective vectors of length {a.n_obj} and {b.n_obj}.",
            details={"left": a.n_obj, "right": b.n_obj},
        )


def compare_objectives(fa: np.ndarray, fb: np.ndarray) -> int:
    """-1 if fa dominates fb, 1 if fb dominates fa, 0 otherwise."""
    a_better = bool(np.any(fa < fb))
    b_better = bool(np.any(fb < fa))
    if a_better and not b_better:
        return -1
    if b_better and not a_better:
        return 1
    return 0


def compare_dominance(a: Candidate, b: Candidate) -> int:
    """
    Compare two candidates.

    Returns -1 when ``a`` dominates ``b``, 1 when ``b`` dominates ``a`` and 0
    when neither does. A feasible candidate dominates an infeasible one; two
    infeasible candidates are ordered by violation before objectives are looked at.
    """
    _check_comparable(a, b)
    va = a.constraint_violation
    vb = b.constraint_violation
    if va > 0.0 or vb > 0.0:
        if va < vb:
            return -1
        if vb < va:
            return 1
    return compare_objectives(a.objectives, b.objectives)


def dominates(a: Candidate, b: Candidate) -> bool:
    return compare_dominance(a, b) == -1


def objectives_equal(a: Candidate, b: Candidate, tol: float = 0.0) -> bool:
    _check_comparable(a, b)
    if tol <= 0.0:
        return bool(np.array_equal(a.objectives, b.objectives))
    return bool(np.all(np.abs(a.objectives - b.objectives) <= tol))


class DominanceComparator:
    """Callable form of :func:`compare_dominance` for operators that take a comparator."""

    def __call__(self, a: Candidate, b: Candidate) -> int:
        return compare_dominance(a, b)

    def compare(self, a: Candidate, b: Candidate) -> int:
        return compare_dominance(a, b)


__all__ = [
    "compare_objectives",
    "compare_dominance",
    "dominates",
    "objectives_equal",
    "DominanceComparator",
]
