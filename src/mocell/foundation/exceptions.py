"""
mocell exception hierarchy.

Provides user-friendly exceptions with helpful error messages and suggestions.
All mocell-specific exceptions inherit from MOCellError for easy catching.

Example:
    try:
        result = MOCell(config).run(problem, seed=1)
    except MOCellError as e:
        print(f"Optimization failed: {e}")
        print(f"Suggestion: {e.suggestion}")
"""

from __future__ import annotations

from typing import Any


class MOCellError(Exception):
    """
    Base exception for all mocell errors.

    Attributes:
        message: Human-readable error description
        suggestion: Optional suggestion for fixing the error
        details: Optional dict with additional context
    """

    def __init__(
        self,
        message: str,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the full error message with suggestion."""
        msg = self.message
        if self.suggestion:
            msg += f"\n\nSuggestion: {self.suggestion}"
        return msg


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(MOCellError):
    """Raised when configuration is invalid or incomplete."""

    pass


class MissingConfigError(ConfigurationError):
    """Raised when required configuration is missing."""

    def __init__(self, fields: list[str], config_class: str | None = None) -> None:
        joined = ", ".join(f"'{field}'" for field in fields)
        message = f"Missing required configuration: {joined}."
        suggestion = f"Add {joined} to your configuration"
        if config_class:
            suggestion += f" or use {config_class}.default() for sensible defaults"
        super().__init__(message, suggestion, {"fields": list(fields)})


class InvalidOperatorError(ConfigurationError):
    """Raised when an unknown operator is specified."""

    def __init__(
        self,
        operator_type: str,
        operator_name: str,
        available: list[str] | None = None,
    ) -> None:
        message = f"Unknown {operator_type} operator '{operator_name}'."
        suggestion = f"Available {operator_type} operators: {', '.join(available)}" if available else None
        super().__init__(
            message,
            suggestion,
            {"operator_type": operator_type, "operator_name": operator_name},
        )


class UnsupportedEncodingError(ConfigurationError):
    """Raised when an operator is paired with an encoding it cannot handle."""

    def __init__(self, encoding: str, operator_name: str, supported: list[str] | None = None) -> None:
        supported = supported or ["permutation"]
        message = f"Operator '{operator_name}' does not support '{encoding}' encoding."
        suggestion = f"Use a problem with one of these encodings: {', '.join(supported)}"
        super().__init__(
            message,
            suggestion,
            {"encoding": encoding, "operator": operator_name, "supported": supported},
        )


# =============================================================================
# Contract Errors
# =============================================================================


class ContractViolationError(MOCellError, ValueError):
    """Raised when an operation receives inputs that break its contract.

    Examples are objective vectors of different lengths, parents that are not
    permutations, or grid indices outside the population.
    """

    pass


__all__ = [
    "MOCellError",
    "ConfigurationError",
    "MissingConfigError",
    "InvalidOperatorError",
    "UnsupportedEncodingError",
    "ContractViolationError",
]
