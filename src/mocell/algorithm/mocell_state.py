"""MOCell state container.

All mutable run data (grid, archive, evaluation counter, rng) lives here and
is handed explicitly to the helpers of :class:`mocell.algorithm.mocell.MOCell`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable

import numpy as np

from mocell.algorithm.neighborhood import Neighborhood
from mocell.archive.crowding_archive import CrowdingArchive
from mocell.core.candidate import Candidate, stack_objectives, stack_variables

RUNNING = "running"
DONE = "done"


@dataclass
class MOCellState:
    """State for one MOCell run.

    - population: grid of candidates, ``population[i].slot == i``
    - archive: bounded non-dominated archive (the run's output)
    - neighborhood: toroidal grid layout over ``pop_size`` slots
    - crossover_fn, mutation_fn, selection_fn: variation collaborators
    - evaluate_fn: problem evaluation callable
    """

    population: list[Candidate]
    archive: CrowdingArchive
    neighborhood: Neighborhood
    rng: np.random.Generator

    pop_size: int
    n_var: int
    n_obj: int
    neighborhood_size: int
    feedback: int
    max_evaluations: int

    crossover_fn: Any = None
    mutation_fn: Any = None
    selection_fn: Any = None
    evaluate_fn: Callable[[Candidate], Any] | None = None

    generation: int = 0
    n_eval: int = 0
    status: str = RUNNING

    replacements: dict[str, int] = field(
        default_factory=lambda: {"dominating": 0, "worst_neighbor": 0, "archive_only": 0, "discarded": 0}
    )

    @property
    def done(self) -> bool:
        return self.status == DONE


def build_mocell_result(state: MOCellState) -> dict[str, Any]:
    """Build final result dictionary from MOCell state.

    Parameters
    ----------
    state : MOCellState
        The algorithm state.

    Returns
    -------
    dict
        Result dictionary with the archive front (X, F, CV, candidates), the
        final population, and evaluation/generation counters.
    """
    archive = state.archive
    result: dict[str, Any] = {
        "X": archive.variables(),
        "F": archive.objectives(),
        "CV": archive.violations(),
        "archive": archive.members(),
        "evaluations": state.n_eval,
        "generations": state.generation,
        "status": state.status,
        "replacements": dict(state.replacements),
    }
    result["population"] = {
        "X": stack_variables(state.population),
        "F": stack_objectives(state.population),
    }
    return result


__all__ = ["MOCellState", "build_mocell_result", "RUNNING", "DONE"]
