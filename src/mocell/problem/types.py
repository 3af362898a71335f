from __future__ import annotations

from typing import Callable, Protocol, Sequence

import numpy as np

from mocell.core.candidate import Candidate
from mocell.foundation.encoding import Encoding, normalize_encoding

Evaluation = tuple[Sequence[float] | np.ndarray, float]


class ProblemProtocol(Protocol):
    n_var: int
    n_obj: int
    encoding: Encoding | str

    def evaluate(self, candidate: Candidate) -> Evaluation: ...


class FunctionalProblem:
    """
    Wrap a bare evaluation callable as a problem.

    ``fn`` receives a candidate and returns ``(objectives, violation)`` where
    ``objectives`` is itself a sequence. Any other return value, including a
    plain tuple of scalars, is the objective vector of a feasible candidate.
    """

    def __init__(
        self,
        n_var: int,
        n_obj: int,
        fn: Callable[[Candidate], Evaluation | Sequence[float] | np.ndarray],
        *,
        encoding: Encoding | str = Encoding.PERMUTATION,
        name: str | None = None,
    ) -> None:
        self.n_var = int(n_var)
        self.n_obj = int(n_obj)
        self.encoding = normalize_encoding(encoding)
        self.name = name or getattr(fn, "__name__", "function")
        self._fn = fn

    def evaluate(self, candidate: Candidate) -> Evaluation:
        out = self._fn(candidate)
        if isinstance(out, tuple) and len(out) == 2 and np.ndim(out[0]) == 1 and np.ndim(out[1]) == 0:
            objectives, violation = out
            return objectives, float(violation)
        return out, 0.0


__all__ = ["Evaluation", "ProblemProtocol", "FunctionalProblem"]
