"""
Exception hierarchy for the validation engine.

Field failures and missing identifiers are NOT exceptions.  They come back
as data on a ValidationVerdict.  These exceptions cover configuration and
wiring faults only (bad rule files, unknown policies), and are raised at
startup rather than per request.
"""

from __future__ import annotations


class ValidationEngineError(Exception):
    """Base exception for all validation engine errors."""

    def __init__(
        self,
        message: str,
        *,
        path: str | None = None,
        details: dict | None = None,
    ) -> None:
        self.path = path
        self.details = details or {}
        super().__init__(message)


class RuleConfigurationError(ValidationEngineError):
    """A rule table could not be built from its configuration."""
    pass


class UnknownPolicyError(ValidationEngineError):
    """No identifier policy is registered under the requested name."""
    pass
