"""
Exceptions for authentication configuration validation.

A rejected configuration is never transient: the data shape is wrong and
has to be fixed by the operator. None of these errors should be retried.
"""

from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Optional


class ConfigurationError(Exception):
    """
    Base exception for authentication configuration failures.
    """

    def __init__(self, message: str, error_code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or "configuration_error"

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for operator reports and logging."""
        return {
            "error_code": self.error_code,
            "message": self.message,
        }


@dataclass(frozen=True)
class Violation:
    """A single broken rule found while validating a configuration."""

    path: str
    """Dotted configuration path of the offending field (e.g. ``extractFrom.cookie``)."""

    kind: str
    """Machine-readable rule name (``missing``, ``string_type``, ``extra_forbidden``...)."""

    message: str

    value_type: Optional[str] = None
    """Class name of the rejected value, ``None`` when the field was absent."""

    def __str__(self) -> str:
        return f"{self.path or '<root>'}: {self.message}"


class ValidationError(ConfigurationError):
    """
    Exception raised when an authentication configuration breaks its rule set.

    Carries every violation found in the single validation pass. The caller
    is expected to stop loading the offending entry and report it.
    """

    def __init__(self, shape: str, violations: List[Violation]):
        details = "; ".join(str(v) for v in violations)
        super().__init__(f"Invalid {shape} configuration: {details}", "validation_failed")
        self.shape = shape
        self.violations = list(violations)

    @property
    def kinds(self) -> List[str]:
        """Violation kinds, in the order they were reported."""
        return [v.kind for v in self.violations]

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["shape"] = self.shape
        data["violations"] = [asdict(v) for v in self.violations]
        return data


class UnknownStrategyError(ConfigurationError):
    """
    Exception raised when no validator exists for a strategy kind.
    """

    def __init__(self, strategy: str, known: Optional[List[str]] = None):
        message = f"Unknown authentication strategy: {strategy!r}"
        if known:
            message += f" (expected one of {sorted(known)})"
        super().__init__(message, "unknown_strategy")
        self.strategy = strategy
