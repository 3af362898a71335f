"""Cross-cutting building blocks: errors, encodings, constraints and logging."""

from .constraints import compute_violation, is_feasible
from .encoding import ENCODINGS, Encoding, normalize_encoding
from .exceptions import (
    ConfigurationError,
    ContractViolationError,
    InvalidOperatorError,
    MissingConfigError,
    MOCellError,
    UnsupportedEncodingError,
)
from .logging import configure_mocell_logging

__all__ = [
    "compute_violation",
    "is_feasible",
    "Encoding",
    "ENCODINGS",
    "normalize_encoding",
    "MOCellError",
    "ConfigurationError",
    "ContractViolationError",
    "InvalidOperatorError",
    "MissingConfigError",
    "UnsupportedEncodingError",
    "configure_mocell_logging",
]
