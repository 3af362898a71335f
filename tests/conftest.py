from __future__ import annotations

from typing import Sequence

import numpy as np
import pytest

from mocell.core.candidate import Candidate


def make_candidate(
    objectives: Sequence[float],
    violation: float = 0.0,
    variables: Sequence[int] | None = None,
    slot: int | None = None,
) -> Candidate:
    if variables is None:
        variables = [0, 1]
    return Candidate(
        variables=np.asarray(variables),
        objectives=np.asarray(objectives, dtype=float),
        constraint_violation=violation,
        slot=slot,
    )


@pytest.fixture
def candidate_factory():
    return make_candidate


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(12345)
