"""
Utility helpers for constraint handling.
"""

from __future__ import annotations

import numpy as np


def compute_violation(G: np.ndarray | None) -> float:
    """Sum of positive parts of a single constraint vector; g<=0 is satisfied.

    ``None`` (unconstrained) yields ``0.0``.
    """
    if G is None:
        return 0.0
    values = np.asarray(G, dtype=float).ravel()
    if values.size == 0:
        return 0.0
    return float(np.sum(np.maximum(values, 0.0)))


def is_feasible(violation: float, *, eps: float = 0.0) -> bool:
    """
    Feasibility test on an aggregated violation value.

    *eps* is a feasibility tolerance: violations ``<= eps`` are treated as
    satisfied (default ``0.0``).
    """
    return float(violation) <= eps


__all__ = ["compute_violation", "is_feasible"]
