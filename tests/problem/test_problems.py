from __future__ import annotations

import numpy as np
import pytest

from mocell.algorithm import MOCell, MOCellConfig
from mocell.core.candidate import Candidate
from mocell.foundation.encoding import Encoding
from mocell.foundation.exceptions import ContractViolationError
from mocell.problem import FunctionalProblem, TSPProblem


def test_plain_tuple_of_scalars_is_the_objective_vector():
    problem = FunctionalProblem(3, 2, lambda c: (1.0, 2.0))
    objectives, violation = problem.evaluate(Candidate(variables=[0, 1, 2]))
    assert list(objectives) == [1.0, 2.0]
    assert violation == 0.0


def test_objectives_with_violation_are_unpacked():
    problem = FunctionalProblem(3, 2, lambda c: ([1.0, 2.0], 0.5))
    objectives, violation = problem.evaluate(Candidate(variables=[0, 1, 2]))
    assert list(objectives) == [1.0, 2.0]
    assert violation == 0.5


def test_array_return_is_feasible():
    problem = FunctionalProblem(3, 1, lambda c: np.array([4.0]))
    objectives, violation = problem.evaluate(Candidate(variables=[0, 1, 2]))
    assert np.asarray(objectives).tolist() == [4.0]
    assert violation == 0.0
    assert problem.encoding is Encoding.PERMUTATION
    assert problem.name == "<lambda>"


def test_tuple_returning_callable_runs_end_to_end():
    problem = FunctionalProblem(5, 2, lambda c: (float(c.variables[0]), float(c.variables[1])))
    cfg = MOCellConfig.default(pop_size=9, n_var=5, max_evaluations=45)
    result = MOCell(cfg).run(problem, seed=0)
    assert result["evaluations"] == 45
    assert result["F"].shape[1] == 2
    assert np.all(result["CV"] == 0.0)


def test_tsp_objectives_on_a_unit_square():
    problem = TSPProblem(coordinates=[(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0)])
    objectives, violation = problem.evaluate(Candidate(variables=[0, 1, 2, 3]))
    assert objectives.tolist() == pytest.approx([4.0, 1.0])
    assert violation == 0.0
    crossed, _ = problem.evaluate(Candidate(variables=[0, 2, 1, 3]))
    assert crossed[0] == pytest.approx(2.0 + 2.0 * np.sqrt(2.0))
    assert crossed[1] == pytest.approx(np.sqrt(2.0))


def test_tsp_max_edge_reports_excess_as_violation():
    problem = TSPProblem(coordinates=[(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0)], max_edge=1.2)
    _, ok = problem.evaluate(Candidate(variables=[0, 1, 2, 3]))
    _, bad = problem.evaluate(Candidate(variables=[0, 2, 1, 3]))
    assert ok == 0.0
    assert bad == pytest.approx(2.0 * (np.sqrt(2.0) - 1.2))


def test_tsp_instances_and_route_checks():
    assert TSPProblem().n_var == 6
    circle = TSPProblem(n_cities=10)
    assert circle.n_var == 10 and circle.n_obj == 2
    with pytest.raises(ValueError):
        TSPProblem(n_cities=2)
    with pytest.raises(ContractViolationError):
        circle.edge_lengths(np.arange(9))
