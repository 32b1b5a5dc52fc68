"""
PathValidator — applies a rule table to a nested document.

Evaluation order:
    1. Required identifiers, in policy order.  The first one missing ends
       the check with exactly one error; field rules do not run.
    2. Field rules, in table order.  A rule whose path resolves to ABSENT
       is skipped; otherwise its message is recorded when the predicate
       rejects the value.

Nothing here raises for bad input.  Every outcome is a ValidationVerdict.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from app.core.constants import VerdictKind
from app.core.logging import get_logger
from app.validation.document import is_absent, resolve_path
from app.validation.identifiers import ExtractedIdentifier
from app.validation.rules import RuleTable

logger = get_logger(__name__)


@dataclass(frozen=True)
class ValidationVerdict:
    """Outcome of validating one document."""

    ok: bool
    errors: tuple[str, ...] = ()
    kind: VerdictKind | None = None
    identifiers: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def passed(cls, identifiers: dict[str, Any]) -> ValidationVerdict:
        return cls(ok=True, identifiers=identifiers)

    @classmethod
    def missing_identifier(cls, message: str, identifiers: dict[str, Any]) -> ValidationVerdict:
        return cls(
            ok=False,
            errors=(message,),
            kind=VerdictKind.MISSING_IDENTIFIER,
            identifiers=identifiers,
        )

    @classmethod
    def field_failures(cls, errors: Sequence[str], identifiers: dict[str, Any]) -> ValidationVerdict:
        return cls(
            ok=False,
            errors=tuple(errors),
            kind=VerdictKind.FIELD_VALIDATION,
            identifiers=identifiers,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "ok": self.ok,
            "errors": list(self.errors),
            "kind": self.kind.value if self.kind else None,
            "identifiers": dict(self.identifiers),
        }


class PathValidator:
    """
    Validates documents against one immutable RuleTable.

    Usage::

        validator = PathValidator(build_rule_table("businessProfile"))
        verdict = validator.validate(body, USER_POLICY.extract(body))
    """

    def __init__(self, rules: RuleTable) -> None:
        self._rules = rules

    @property
    def rules(self) -> RuleTable:
        return self._rules

    @staticmethod
    def resolve_path(document: Any, path: str) -> Any:
        """Value at ``path`` in ``document``, or ABSENT."""
        return resolve_path(document, path)

    def check_fields(self, document: Any) -> list[str]:
        """Run every applicable field rule and return failing messages in table order."""
        errors: list[str] = []
        for rule in self._rules:
            value = resolve_path(document, rule.path)
            if is_absent(value):
                continue
            if not rule.predicate(value):
                errors.append(rule.message)
        return errors

    def validate(
        self,
        document: Any,
        identifiers: Sequence[ExtractedIdentifier] = (),
    ) -> ValidationVerdict:
        """Validate ``document`` once its required identifiers are confirmed present."""
        available = {
            extracted.identifier.key: extracted.value
            for extracted in identifiers
            if not extracted.missing
        }
        for extracted in identifiers:
            if extracted.missing:
                logger.debug(
                    "Required identifier missing",
                    identifier=extracted.identifier.key,
                )
                return ValidationVerdict.missing_identifier(
                    extracted.identifier.missing_message, available
                )

        errors = self.check_fields(document)
        if errors:
            return ValidationVerdict.field_failures(errors, available)
        return ValidationVerdict.passed(available)
