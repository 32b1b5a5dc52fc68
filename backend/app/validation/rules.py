"""
Rule tables — ordered, immutable field-path → predicate → message lists.

The built-in table covers the business profile (names, tax IDs, email and
two address blocks).  Paths in a table are written relative to a profile
root so the same rules can serve documents that nest the profile at
different places; ``build_rule_table(root)`` produces the rooted copy.

A replacement table can be loaded from a JSON file:

    [
        {"path": "companyName", "check": "non_empty",
         "message": "Company name should not be empty."},
        {"path": "taxIdentifiers.pan", "check": "pan",
         "message": "PAN should be 10 alphanumeric characters."}
    ]
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

from pydantic import BaseModel, Field, TypeAdapter, ValidationError, field_validator

from app.core.constants import CheckKind
from app.core.logging import get_logger
from app.validation.errors import RuleConfigurationError
from app.validation.predicates import Predicate, get_predicate

logger = get_logger(__name__)


# ═══════════════════════════════════════════════════════════
#  FieldRule / RuleTable
# ═══════════════════════════════════════════════════════════

@dataclass(frozen=True)
class FieldRule:
    """One check: the value at ``path`` must satisfy ``predicate``."""

    path: str
    predicate: Predicate
    message: str
    check: CheckKind | None = None

    @classmethod
    def of(cls, path: str, check: CheckKind | str, message: str) -> FieldRule:
        """Build a rule from a named check."""
        kind = CheckKind(check)
        return cls(path=path, predicate=get_predicate(kind), message=message, check=kind)

    def rooted(self, root: str) -> FieldRule:
        """Return a copy with ``root`` prefixed to the path."""
        if not root:
            return self
        return FieldRule(
            path=f"{root}.{self.path}",
            predicate=self.predicate,
            message=self.message,
            check=self.check,
        )


@dataclass(frozen=True)
class RuleTable:
    """Ordered rules.  Error messages are reported in this order."""

    rules: tuple[FieldRule, ...] = ()

    def __iter__(self) -> Iterator[FieldRule]:
        return iter(self.rules)

    def __len__(self) -> int:
        return len(self.rules)

    @property
    def paths(self) -> list[str]:
        return [rule.path for rule in self.rules]

    def rooted(self, root: str) -> RuleTable:
        return RuleTable(tuple(rule.rooted(root) for rule in self.rules))


# ═══════════════════════════════════════════════════════════
#  Built-in business profile table
# ═══════════════════════════════════════════════════════════

def _address_rules(block: str, label: str) -> list[FieldRule]:
    """Rules for one address block (line1, city, state, country, zip)."""
    rules = [
        FieldRule.of(f"{block}.{field}", CheckKind.NON_EMPTY, f"{label} {field} should not be empty.")
        for field in ("line1", "city", "state", "country")
    ]
    rules.append(
        FieldRule.of(
            f"{block}.zip",
            CheckKind.ZIP,
            f"{label} zip code should be a valid 5-digit numeric value.",
        )
    )
    return rules


BUSINESS_PROFILE_RULES = RuleTable((
    FieldRule.of("companyName", CheckKind.NON_EMPTY, "Company name should not be empty."),
    FieldRule.of("legalName", CheckKind.NON_EMPTY, "Legal name should not be empty."),
    FieldRule.of("taxIdentifiers.pan", CheckKind.PAN, "PAN should be 10 alphanumeric characters."),
    FieldRule.of("taxIdentifiers.ein", CheckKind.EIN, "EIN should be 8 digits."),
    FieldRule.of("email", CheckKind.EMAIL, "Email is invalid."),
    *_address_rules("businessAddress", "Business address"),
    *_address_rules("legalAddress", "Legal address"),
))


def build_rule_table(root: str = "businessProfile", base: RuleTable | None = None) -> RuleTable:
    """Root ``base`` (default: the business profile table) under ``root``."""
    return (BUSINESS_PROFILE_RULES if base is None else base).rooted(root)


# ═══════════════════════════════════════════════════════════
#  Loading from JSON
# ═══════════════════════════════════════════════════════════

class RuleSpec(BaseModel):
    """One rule as written in a rule file."""

    model_config = {"frozen": True, "extra": "forbid"}

    path: str = Field(..., min_length=1)
    check: CheckKind
    message: str = Field(..., min_length=1)

    @field_validator("path")
    @classmethod
    def _no_empty_segments(cls, value: str) -> str:
        if any(segment == "" for segment in value.split(".")):
            raise ValueError(f"path '{value}' has an empty segment")
        return value


_RULE_SPECS = TypeAdapter(list[RuleSpec])


def rule_table_from_specs(specs: list[RuleSpec]) -> RuleTable:
    return RuleTable(tuple(FieldRule.of(s.path, s.check, s.message) for s in specs))


def load_rule_table(path: str | Path) -> RuleTable:
    """
    Read a rule table from a JSON file.

    Raises:
        RuleConfigurationError: If the file is missing, is not valid JSON,
            or any rule is malformed (unknown check, empty path/message).
    """
    file_path = Path(path)
    try:
        raw = json.loads(file_path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise RuleConfigurationError(
            f"Cannot read rule file: {exc}", path=str(file_path)
        ) from exc
    except json.JSONDecodeError as exc:
        raise RuleConfigurationError(
            f"Rule file is not valid JSON: {exc}", path=str(file_path)
        ) from exc

    try:
        specs = _RULE_SPECS.validate_python(raw)
    except ValidationError as exc:
        raise RuleConfigurationError(
            f"Rule file has invalid rules ({exc.error_count()} errors)",
            path=str(file_path),
            details={"errors": [e["msg"] for e in exc.errors()]},
        ) from exc

    if not specs:
        raise RuleConfigurationError("Rule file defines no rules", path=str(file_path))

    table = rule_table_from_specs(specs)
    logger.info("Rule table loaded from file", path=str(file_path), rule_count=len(table))
    return table
