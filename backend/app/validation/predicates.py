"""
Field predicates — format checks applied to a single present value.

Every predicate takes the resolved value and returns a bool.  Values that
are not strings fail every check.  Patterns are ASCII-only and matched
against the whole value.
"""

from __future__ import annotations

import re
from typing import Any, Callable

from app.core.constants import CheckKind

Predicate = Callable[[Any], bool]

PAN_PATTERN = re.compile(r"[A-Za-z0-9]{10}")
EIN_PATTERN = re.compile(r"[0-9]{8}")
ZIP_PATTERN = re.compile(r"[0-9]{5}")
EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")


def _matches(pattern: re.Pattern[str], value: Any) -> bool:
    return isinstance(value, str) and pattern.fullmatch(value) is not None


def is_non_empty(value: Any) -> bool:
    """True for a string with at least one non-whitespace character."""
    # str.strip() leaves the byte-order mark alone
    return isinstance(value, str) and value.replace("\ufeff", " ").strip() != ""


def is_pan(value: Any) -> bool:
    """PAN-style tax ID: exactly 10 ASCII letters or digits."""
    return _matches(PAN_PATTERN, value)


def is_ein(value: Any) -> bool:
    """EIN-style tax ID: exactly 8 ASCII digits."""
    return _matches(EIN_PATTERN, value)


def is_zip(value: Any) -> bool:
    """Postal code: exactly 5 ASCII digits, untrimmed."""
    return _matches(ZIP_PATTERN, value)


def is_email(value: Any) -> bool:
    # Shape only; no DNS or deliverability check
    return _matches(EMAIL_PATTERN, value)


PREDICATES: dict[CheckKind, Predicate] = {
    CheckKind.NON_EMPTY: is_non_empty,
    CheckKind.PAN: is_pan,
    CheckKind.EIN: is_ein,
    CheckKind.ZIP: is_zip,
    CheckKind.EMAIL: is_email,
}


def get_predicate(check: CheckKind | str) -> Predicate:
    """Look up the predicate registered for a check name."""
    return PREDICATES[CheckKind(check)]
