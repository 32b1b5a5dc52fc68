"""Shared constants and enums used across the application."""

from enum import StrEnum


class CheckKind(StrEnum):
    """Named field predicates a rule table can refer to."""

    NON_EMPTY = "non_empty"
    PAN = "pan"
    EIN = "ein"
    ZIP = "zip"
    EMAIL = "email"


class VerdictKind(StrEnum):
    """Why a verdict failed."""

    MISSING_IDENTIFIER = "missing_identifier"
    FIELD_VALIDATION = "field_validation"


class IdentifierSource(StrEnum):
    """Where a required identifier is read from on the request."""

    BODY = "body"
    HEADER = "header"


class PolicyName(StrEnum):
    """Built-in identifier extraction policies."""

    USER = "user"
    USER_PRODUCT = "user_product"


SUCCESS_MESSAGE = "User data is valid."
