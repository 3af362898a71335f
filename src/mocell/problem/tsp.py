# problem/tsp.py
from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np

from mocell.core.candidate import Candidate
from mocell.foundation.constraints import compute_violation
from mocell.foundation.encoding import Encoding
from mocell.foundation.exceptions import ContractViolationError


def _default_coordinates() -> np.ndarray:
    # Simple layout with a few asymmetric points to avoid symmetry degeneracy.
    return np.array(
        [
            (0.0, 0.0),
            (1.0, 0.0),
            (1.3, 0.8),
            (0.5, 1.5),
            (-0.3, 1.0),
            (-0.6, 0.2),
        ],
        dtype=float,
    )


def _circle_coordinates(n_cities: int) -> np.ndarray:
    if n_cities < 3:
        raise ValueError("TSP problems require at least 3 cities.")
    angles = np.linspace(0.0, 2.0 * math.pi, num=n_cities, endpoint=False)
    return np.stack([np.cos(angles), np.sin(angles)], axis=1)


class TSPProblem:
    """
    Toy multi-objective travelling salesman problem.
    Objective 1: total tour length (closed tour).
    Objective 2: maximum edge length in the tour (encourages balanced legs).

    With ``max_edge`` set, every edge longer than that bound adds its excess to
    the constraint violation.
    """

    def __init__(
        self,
        n_cities: int | None = None,
        coordinates: Sequence[Sequence[float]] | None = None,
        *,
        max_edge: float | None = None,
    ) -> None:
        if coordinates is not None:
            coords = np.asarray(coordinates, dtype=float)
        elif n_cities is not None:
            coords = _circle_coordinates(int(n_cities))
        else:
            coords = _default_coordinates()
        if coords.ndim != 2 or coords.shape[1] != 2:
            raise ValueError("Coordinates must be an array-like of shape (n_cities, 2).")
        self.coordinates = coords
        self.n_var = coords.shape[0]
        self.n_obj = 2
        self.max_edge = max_edge
        self.encoding = Encoding.PERMUTATION

    def edge_lengths(self, route: np.ndarray) -> np.ndarray:
        route = np.asarray(route, dtype=int)
        if route.ndim != 1 or route.shape[0] != self.n_var:
            raise ContractViolationError(f"Expected a route of length {self.n_var}, got shape {route.shape}.")
        paths = self.coordinates[route]
        closed = np.concatenate([paths, paths[:1]], axis=0)
        return np.linalg.norm(np.diff(closed, axis=0), axis=1)

    def evaluate(self, candidate: Candidate) -> tuple[np.ndarray, float]:
        edges = self.edge_lengths(candidate.variables)
        F = np.array([edges.sum(), edges.max()], dtype=float)
        violation = 0.0
        if self.max_edge is not None:
            violation = compute_violation(edges - float(self.max_edge))
        return F, violation


__all__ = ["TSPProblem"]
