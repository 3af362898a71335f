from __future__ import annotations

from enum import Enum


class Encoding(str, Enum):
    """Decision-variable representation carried by a problem."""

    PERMUTATION = "permutation"
    REAL = "real"
    BINARY = "binary"
    INTEGER = "integer"


ENCODINGS: tuple[Encoding, ...] = tuple(Encoding)

_ALIASES: dict[str, Encoding] = {
    "permutation": Encoding.PERMUTATION,
    "perm": Encoding.PERMUTATION,
    "continuous": Encoding.REAL,
    "float": Encoding.REAL,
    "real": Encoding.REAL,
    "binary": Encoding.BINARY,
    "integer": Encoding.INTEGER,
    "int": Encoding.INTEGER,
}


def normalize_encoding(value: str | Encoding | None, *, default: Encoding = Encoding.PERMUTATION) -> Encoding:
    """
    Normalize user/problem encoding strings to canonical encoding identifiers.

    Canonical encodings are: "permutation", "real", "binary", "integer".
    """
    if value is None:
        return default
    if isinstance(value, Encoding):
        return value
    key = value.strip().lower()
    if not key:
        return default
    normalized = _ALIASES.get(key)
    if normalized is None:
        expected = ", ".join(sorted(set(_ALIASES)))
        raise ValueError(f"Unknown encoding '{value}'. Expected one of: {expected}.")
    return normalized


__all__ = ["Encoding", "ENCODINGS", "normalize_encoding"]
