from __future__ import annotations

import logging
from typing import Iterator

import numpy as np

from mocell.core.candidate import Candidate, stack_objectives, stack_variables
from mocell.core.crowding import crowding_distance_assignment
from mocell.core.dominance import compare_dominance, objectives_equal
from mocell.foundation.exceptions import ConfigurationError, ContractViolationError

_logger = logging.getLogger(__name__)


class CrowdingArchive:
    """
    Bounded external archive of mutually non-dominated candidates.

    Members are private copies kept in insertion order. When an insertion
    pushes the archive past ``capacity`` the member with the smallest crowding
    distance is evicted (the first one on ties) until the bound holds again.
    Minimization assumed.
    """

    def __init__(self, capacity: int, n_obj: int, *, objective_tolerance: float = 1e-10) -> None:
        self.capacity = int(capacity)
        if self.capacity <= 0:
            raise ConfigurationError(
                "archive capacity must be positive.",
                suggestion="Set archive_size to an integer >= 1",
                details={"capacity": capacity},
            )
        self.n_obj = int(n_obj)
        if self.n_obj <= 0:
            raise ConfigurationError("n_obj must be positive.", details={"n_obj": n_obj})
        if objective_tolerance < 0.0:
            raise ConfigurationError("objective_tolerance must be >= 0.")
        self._objective_tolerance = float(objective_tolerance)
        self._members: list[Candidate] = []
        self.total_inserted = 0
        self.total_evicted = 0

    def add(self, candidate: Candidate) -> bool:
        """Offer a copy of *candidate*. Returns True when the copy was stored."""
        if candidate.n_obj != self.n_obj:
            raise ContractViolationError(
                f"Candidate has {candidate.n_obj} objectives, archive expects {self.n_obj}."
            )
        incoming = candidate.detached()

        survivors: list[Candidate] = []
        for member in self._members:
            flag = compare_dominance(incoming, member)
            if flag == 1:
                return False
            if flag == 0 and objectives_equal(incoming, member, self._objective_tolerance):
                return False
            if flag != -1:
                survivors.append(member)

        self._members = survivors
        self._members.append(incoming)
        self.total_inserted += 1

        while len(self._members) > self.capacity:
            self._evict_most_crowded()
        return any(member is incoming for member in self._members)

    def _evict_most_crowded(self) -> None:
        crowding_distance_assignment(self._members, self.n_obj)
        distances = np.array([member.crowding for member in self._members], dtype=float)
        victim = int(np.argmin(distances))
        removed = self._members.pop(victim)
        self.total_evicted += 1
        _logger.debug("Archive full; evicted member with crowding %.6g", removed.crowding)

    def assign_crowding(self) -> None:
        """Recompute crowding distances of all members in place."""
        crowding_distance_assignment(self._members, self.n_obj)

    def sample(self, k: int) -> list[Candidate]:
        """Copies of up to ``k`` members in archive order."""
        if k < 0:
            raise ContractViolationError(f"sample size must be >= 0, got {k}.")
        return [member.copy() for member in self._members[:k]]

    def get(self, j: int) -> Candidate:
        return self._members[j]

    def members(self) -> list[Candidate]:
        return [member.copy() for member in self._members]

    def objectives(self) -> np.ndarray:
        if not self._members:
            return np.empty((0, self.n_obj), dtype=float)
        return stack_objectives(self._members)

    def variables(self) -> np.ndarray:
        return stack_variables(self._members)

    def violations(self) -> np.ndarray:
        return np.array([member.constraint_violation for member in self._members], dtype=float)

    def __len__(self) -> int:
        return len(self._members)

    def __iter__(self) -> Iterator[Candidate]:
        return iter(self._members)


__all__ = ["CrowdingArchive"]
