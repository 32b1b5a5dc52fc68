"""
Field-path validation engine.

Applies an ordered rule table (dotted path → predicate → message) to a
nested request document and returns a ValidationVerdict.  Required
identifiers are extracted by a pluggable IdentifierPolicy and checked
before any field rule runs.
"""

from app.validation.document import ABSENT, resolve_path
from app.validation.identifiers import IdentifierPolicy, RequiredIdentifier, get_policy
from app.validation.rules import BUSINESS_PROFILE_RULES, FieldRule, RuleTable, build_rule_table
from app.validation.service import ProfileValidationService, build_services
from app.validation.validator import PathValidator, ValidationVerdict

__all__ = [
    "ABSENT",
    "BUSINESS_PROFILE_RULES",
    "FieldRule",
    "IdentifierPolicy",
    "PathValidator",
    "ProfileValidationService",
    "RequiredIdentifier",
    "RuleTable",
    "ValidationVerdict",
    "build_rule_table",
    "build_services",
    "get_policy",
    "resolve_path",
]
