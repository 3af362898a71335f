"""Candidate solution container used by the cellular engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

import numpy as np

from mocell.foundation.exceptions import ContractViolationError


def _as_int_vector(values: Sequence[int] | np.ndarray) -> np.ndarray:
    arr = np.array(values, dtype=np.int64, copy=True)
    if arr.ndim != 1:
        raise ContractViolationError(f"Decision vector must be one-dimensional, got shape {arr.shape}.")
    return arr


@dataclass(eq=False)
class Candidate:
    """One search point: decision vector, evaluation data and grid position.

    ``slot`` is ``None`` while the candidate lives outside the population grid
    (fresh offspring, archive members). ``rank`` and ``crowding`` are scratch
    annotations written by ranking and density estimation.
    """

    variables: np.ndarray
    objectives: np.ndarray = field(default_factory=lambda: np.empty(0, dtype=float))
    constraint_violation: float = 0.0
    slot: int | None = None
    rank: int | None = None
    crowding: float = 0.0

    def __post_init__(self) -> None:
        self.variables = _as_int_vector(self.variables)
        self.objectives = np.array(self.objectives, dtype=float, copy=True).ravel()
        self.constraint_violation = float(self.constraint_violation)

    @property
    def n_var(self) -> int:
        return int(self.variables.shape[0])

    @property
    def n_obj(self) -> int:
        return int(self.objectives.shape[0])

    @property
    def evaluated(self) -> bool:
        return self.objectives.size > 0

    @property
    def feasible(self) -> bool:
        return self.constraint_violation <= 0.0

    def set_evaluation(self, objectives: Sequence[float] | np.ndarray, violation: float = 0.0) -> None:
        values = np.array(objectives, dtype=float, copy=True).ravel()
        if values.size == 0:
            raise ContractViolationError("Evaluation returned an empty objective vector.")
        if not np.all(np.isfinite(values)):
            raise ContractViolationError(f"Evaluation returned non-finite objectives: {values.tolist()}.")
        violation = float(violation)
        if violation < 0.0:
            raise ContractViolationError(f"Constraint violation must be >= 0, got {violation}.")
        self.objectives = values
        self.constraint_violation = violation

    def copy(self) -> "Candidate":
        return Candidate(
            variables=self.variables,
            objectives=self.objectives,
            constraint_violation=self.constraint_violation,
            slot=self.slot,
            rank=self.rank,
            crowding=self.crowding,
        )

    def detached(self) -> "Candidate":
        """Copy with no grid slot."""
        clone = self.copy()
        clone.slot = None
        return clone


def check_permutation(values: np.ndarray | Sequence[int], *, name: str = "vector") -> np.ndarray:
    """Validate that *values* is a permutation of ``0..n-1`` and return it as an array."""
    arr = np.asarray(values)
    if arr.ndim != 1:
        raise ContractViolationError(f"{name} must be one-dimensional, got shape {arr.shape}.")
    n = arr.shape[0]
    if n == 0:
        raise ContractViolationError(f"{name} is empty.")
    if not np.issubdtype(arr.dtype, np.integer):
        raise ContractViolationError(f"{name} must hold integers, got dtype {arr.dtype}.")
    if arr.min() < 0 or arr.max() >= n:
        raise ContractViolationError(f"{name} has values outside [0, {n}).")
    counts = np.bincount(arr, minlength=n)
    if np.any(counts != 1):
        missing = np.flatnonzero(counts == 0).tolist()
        repeated = np.flatnonzero(counts > 1).tolist()
        raise ContractViolationError(
            f"{name} is not a permutation of [0, {n}).",
            details={"missing": missing, "repeated": repeated},
        )
    return arr


def stack_objectives(candidates: Sequence[Candidate]) -> np.ndarray:
    if not candidates:
        return np.empty((0, 0), dtype=float)
    return np.vstack([c.objectives for c in candidates])


def stack_variables(candidates: Sequence[Candidate]) -> np.ndarray:
    if not candidates:
        return np.empty((0, 0), dtype=np.int64)
    return np.vstack([c.variables for c in candidates])


__all__ = ["Candidate", "check_permutation", "stack_objectives", "stack_variables"]
