"""MOCell: asynchronous cellular multi-objective genetic algorithm.

Variant that places a non-dominated offspring over the worst member of its
neighbourhood. The population lives on a toroidal grid; every cell mates
only with its neighbours, cells are visited in a fixed order and updated in
place, and an external crowding archive both collects the non-dominated
solutions and feeds some of them back into the grid after each generation.

Key Features:
    - Steady-state, in-place cell updates (asynchronous sweep)
    - 4 (von Neumann) or 8 (Moore) neighbourhoods on a toroidal mesh
    - Rank + crowding replacement of the worst neighbour
    - Bounded crowding archive with feedback into the population
    - Feasibility-first constraint handling
    - Step interface (initialize/step/should_terminate/result)

References:
    A. J. Nebro, J. J. Durillo, F. Luna, B. Dorronsoro and E. Alba, "MOCell:
    A Cellular Genetic Algorithm for Multiobjective Optimization,"
    International Journal of Intelligent Systems, vol. 24, no. 7, 2009.

Example:
    >>> from mocell import MOCell, MOCellConfig, TSPProblem
    >>> problem = TSPProblem(n_cities=12)
    >>> cfg = MOCellConfig.default(pop_size=49, n_var=problem.n_var, max_evaluations=5000)
    >>> result = MOCell(cfg).run(problem, seed=1)
    >>> result["F"].shape[1]
    2
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable, Mapping

import numpy as np

from mocell.algorithm.config import MOCellConfig, MOCellConfigData
from mocell.algorithm.mocell_state import DONE, RUNNING, MOCellState, build_mocell_result
from mocell.algorithm.neighborhood import Neighborhood
from mocell.archive.crowding_archive import CrowdingArchive
from mocell.core.candidate import Candidate, check_permutation
from mocell.core.crowding import crowding_distance_assignment, sort_by_rank_and_crowding
from mocell.core.dominance import compare_dominance
from mocell.core.ranking import Ranking
from mocell.foundation.encoding import normalize_encoding
from mocell.foundation.exceptions import ConfigurationError, ContractViolationError
from mocell.operators.permutation import random_permutation_population
from mocell.operators.registry import build_operator, check_encoding

if TYPE_CHECKING:
    from mocell.problem.types import ProblemProtocol

_logger = logging.getLogger(__name__)

SelectionFn = Callable[[list[Candidate]], Candidate]
MutationFn = Callable[[Candidate], "Candidate | None"]
GenerationCallback = Callable[[MOCellState], "bool | None"]


class MOCell:
    """
    Asynchronous cellular MOEA replacing the worst neighbour.

    Parameters
    ----------
    config : MOCellConfigData or mapping
        Algorithm configuration (see :class:`MOCellConfig`). A plain mapping
        is passed through :meth:`MOCellConfig.from_dict`.
    selection : callable, optional
        ``pool -> candidate``; replaces the configured selection operator.
    mutation : callable, optional
        ``candidate -> candidate | None`` (in place or returning a new one);
        replaces the configured mutation operator.
    """

    def __init__(
        self,
        config: MOCellConfigData | Mapping[str, Any],
        *,
        selection: SelectionFn | None = None,
        mutation: MutationFn | None = None,
    ) -> None:
        if isinstance(config, MOCellConfigData):
            self.cfg = config
        elif isinstance(config, Mapping):
            self.cfg = MOCellConfig.from_dict(config)
        else:
            raise ConfigurationError(f"Unsupported configuration object of type {type(config).__name__}.")
        self._selection = selection
        self._mutation = mutation
        self._problem: "ProblemProtocol | None" = None
        self._st: MOCellState | None = None

    @property
    def state(self) -> MOCellState | None:
        return self._st

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def run(
        self,
        problem: "ProblemProtocol",
        seed: int | None = None,
        *,
        rng: np.random.Generator | None = None,
        callback: GenerationCallback | None = None,
    ) -> dict[str, Any]:
        """
        Run MOCell until the evaluation budget is spent.

        ``callback`` is invoked with the state after every generation; a
        return value of ``True`` stops the run early.
        """
        st = self.initialize(problem, seed, rng=rng)
        _logger.info(
            "MOCell started: pop_size=%d, archive_size=%d, max_evaluations=%d, neighborhood=%d",
            st.pop_size,
            self.cfg.archive_size,
            st.max_evaluations,
            st.neighborhood_size,
        )
        while not self.should_terminate():
            self.step()
            if callback is not None and callback(st) is True:
                _logger.info("MOCell stopped by callback at generation %d", st.generation)
                st.status = DONE
                break
        _logger.info(
            "MOCell finished: %d generations, %d evaluations, %d archive members",
            st.generation,
            st.n_eval,
            len(st.archive),
        )
        return self.result()

    def initialize(
        self,
        problem: "ProblemProtocol",
        seed: int | None = None,
        *,
        rng: np.random.Generator | None = None,
    ) -> MOCellState:
        """Build operators, create and evaluate the initial grid."""
        encoding = normalize_encoding(getattr(problem, "encoding", None))
        check_encoding(self.cfg.crossover[0], encoding)
        n_var = int(problem.n_var)
        n_obj = int(problem.n_obj)
        if n_var < 2:
            raise ConfigurationError(f"Permutation problems need n_var >= 2, got {n_var}.")
        if n_obj <= 0:
            raise ConfigurationError(f"Problem must declare at least one objective, got n_obj={n_obj}.")

        if rng is None:
            rng = np.random.default_rng(seed)
        cfg = self.cfg

        crossover_name, crossover_params = cfg.crossover
        mutation_name, mutation_params = cfg.mutation
        selection_name, selection_params = cfg.selection
        crossover_fn = build_operator("crossover", crossover_name, crossover_params, rng)
        mutation_fn = self._mutation or build_operator("mutation", mutation_name, mutation_params, rng)
        selection_fn = self._selection or build_operator("selection", selection_name, selection_params, rng)

        self._problem = problem
        st = MOCellState(
            population=[],
            archive=CrowdingArchive(cfg.archive_size, n_obj),
            neighborhood=Neighborhood(cfg.pop_size),
            rng=rng,
            pop_size=cfg.pop_size,
            n_var=n_var,
            n_obj=n_obj,
            neighborhood_size=cfg.neighborhood,
            feedback=cfg.feedback,
            max_evaluations=cfg.max_evaluations,
            crossover_fn=crossover_fn,
            mutation_fn=mutation_fn,
            selection_fn=selection_fn,
            evaluate_fn=problem.evaluate,
        )
        self._st = st

        X0 = random_permutation_population(cfg.pop_size, n_var, rng)
        for slot, x in enumerate(X0):
            individual = Candidate(variables=x, slot=slot)
            _evaluate(st, individual)
            st.population.append(individual)

        if st.n_eval >= st.max_evaluations:
            st.status = DONE
        return st

    def step(self) -> MOCellState:
        """One generation: sweep every cell, then feed the archive back into the grid."""
        st = self._require_state()
        if st.done:
            return st
        for index in range(st.pop_size):
            _evolve_cell(st, index)
        _archive_feedback(st)
        st.generation += 1
        if st.n_eval >= st.max_evaluations:
            st.status = DONE
        _logger.debug(
            "generation=%d n_eval=%d archive=%d",
            st.generation,
            st.n_eval,
            len(st.archive),
        )
        return st

    def should_terminate(self) -> bool:
        return self._require_state().status != RUNNING

    def result(self) -> dict[str, Any]:
        return build_mocell_result(self._require_state())

    def _require_state(self) -> MOCellState:
        if self._st is None:
            raise RuntimeError("MOCell is not initialized; call initialize() or run() first.")
        return self._st


# ---------------------------------------------------------------------------
# MOCell helper functions
# ---------------------------------------------------------------------------


def _evaluate(st: MOCellState, candidate: Candidate) -> None:
    objectives, violation = st.evaluate_fn(candidate)
    objectives = np.asarray(objectives, dtype=float).ravel()
    if objectives.shape[0] != st.n_obj:
        raise ContractViolationError(
            f"Evaluation returned {objectives.shape[0]} objectives, problem declares {st.n_obj}."
        )
    candidate.set_evaluation(objectives, violation)
    st.n_eval += 1


def _breed(st: MOCellState, pool: list[Candidate]) -> Candidate:
    parent1 = st.selection_fn(pool)
    parent2 = st.selection_fn(pool)
    child = st.crossover_fn(parent1, parent2)[0]
    mutated = st.mutation_fn(child)
    if mutated is not None:
        child = mutated
    check_permutation(child.variables, name="offspring")
    child.slot = None
    return child


def _evolve_cell(st: MOCellState, index: int) -> None:
    resident = st.population[index].copy()
    pool = st.neighborhood.neighbors(st.population, index, st.neighborhood_size)
    pool.append(resident)

    child = _breed(st, pool)
    _evaluate(st, child)

    flag = compare_dominance(resident, child)
    if flag == 1:
        child.slot = index
        st.population[index] = child
        st.archive.add(child)
        st.replacements["dominating"] += 1
    elif flag == 0:
        pool.append(child)
        ranking = Ranking(pool)
        for front in ranking.fronts:
            crowding_distance_assignment(front, st.n_obj)
        sort_by_rank_and_crowding(pool)
        worst = pool[-1]
        if worst.slot is None:
            st.archive.add(child)
            st.replacements["archive_only"] += 1
        else:
            child.slot = worst.slot
            st.population[worst.slot] = child
            st.archive.add(child)
            st.replacements["worst_neighbor"] += 1
    else:
        st.replacements["discarded"] += 1


def _archive_feedback(st: MOCellState) -> None:
    st.archive.assign_crowding()
    for j in range(st.feedback):
        if len(st.archive) <= j:
            break
        r = int(st.rng.integers(0, st.pop_size))
        individual = st.archive.get(j).copy()
        individual.slot = r
        st.population[r] = individual


__all__ = ["MOCell"]
