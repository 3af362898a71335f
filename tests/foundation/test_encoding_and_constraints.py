from __future__ import annotations

import numpy as np
import pytest

from mocell.foundation.constraints import compute_violation, is_feasible
from mocell.foundation.encoding import Encoding, normalize_encoding


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("permutation", Encoding.PERMUTATION),
        ("Perm", Encoding.PERMUTATION),
        ("continuous", Encoding.REAL),
        (" int ", Encoding.INTEGER),
        (Encoding.BINARY, Encoding.BINARY),
    ],
)
def test_normalize_encoding_aliases(raw, expected):
    assert normalize_encoding(raw) is expected


def test_normalize_encoding_defaults_and_errors():
    assert normalize_encoding(None) is Encoding.PERMUTATION
    assert normalize_encoding("", default=Encoding.REAL) is Encoding.REAL
    with pytest.raises(ValueError):
        normalize_encoding("graph")


def test_compute_violation_sums_positive_parts():
    assert compute_violation(np.array([-1.0, 0.5, 2.0])) == pytest.approx(2.5)
    assert compute_violation(np.array([-1.0, 0.0])) == 0.0
    assert compute_violation(None) == 0.0
    assert compute_violation(np.array([])) == 0.0


def test_is_feasible_tolerance():
    assert is_feasible(0.0)
    assert not is_feasible(1e-6)
    assert is_feasible(1e-6, eps=1e-5)
