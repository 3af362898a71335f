"""
Name-based lookup for the variation and selection operators.
"""

from __future__ import annotations

from typing import Any, Callable

import numpy as np

from mocell.foundation.encoding import Encoding
from mocell.foundation.exceptions import ConfigurationError, InvalidOperatorError, UnsupportedEncodingError
from mocell.operators.permutation import PMXCrossover, SwapMutation
from mocell.operators.selection import BinaryTournament, RandomSelection

_CROSSOVER: dict[str, Callable[..., Any]] = {
    "pmx": PMXCrossover,
    "partially_matched": PMXCrossover,
}

_MUTATION: dict[str, Callable[..., Any]] = {
    "swap": SwapMutation,
}

_SELECTION: dict[str, Callable[..., Any]] = {
    "tournament": BinaryTournament,
    "binary_tournament": BinaryTournament,
    "random": RandomSelection,
}

_KINDS: dict[str, dict[str, Callable[..., Any]]] = {
    "crossover": _CROSSOVER,
    "mutation": _MUTATION,
    "selection": _SELECTION,
}

# Encodings each variation operator is defined for.
_SUPPORTED_ENCODINGS: dict[str, tuple[Encoding, ...]] = {
    "pmx": (Encoding.PERMUTATION,),
    "partially_matched": (Encoding.PERMUTATION,),
    "swap": (Encoding.PERMUTATION,),
}


def available_operators(kind: str) -> list[str]:
    if kind not in _KINDS:
        raise ConfigurationError(f"Unknown operator kind '{kind}'.", details={"kind": kind})
    return sorted(_KINDS[kind])


def check_encoding(name: str, encoding: Encoding) -> None:
    """Raise if operator *name* cannot work on *encoding*."""
    supported = _SUPPORTED_ENCODINGS.get(name.lower())
    if supported is not None and encoding not in supported:
        raise UnsupportedEncodingError(encoding.value, name, [enc.value for enc in supported])


def build_operator(kind: str, name: str, params: dict[str, Any], rng: np.random.Generator) -> Any:
    """Instantiate operator ``name`` of the given kind with ``params`` and a shared rng."""
    table = _KINDS.get(kind)
    if table is None:
        raise ConfigurationError(f"Unknown operator kind '{kind}'.", details={"kind": kind})
    factory = table.get(name.lower())
    if factory is None:
        raise InvalidOperatorError(kind, name, available_operators(kind))
    try:
        return factory(rng=rng, **params)
    except TypeError as exc:
        raise ConfigurationError(
            f"Invalid parameters for {kind} operator '{name}': {sorted(params)}.",
            suggestion="Check the operator signature",
        ) from exc


__all__ = ["available_operators", "build_operator", "check_encoding"]
