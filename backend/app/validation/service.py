"""
ProfileValidationService — one identifier policy paired with one validator.

Services are built once at startup from Settings (``build_services``) and
shared by every request; nothing on them is mutated afterwards.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from app.core.config import Settings
from app.core.constants import PolicyName
from app.core.logging import get_logger
from app.validation.identifiers import IdentifierPolicy, get_policy
from app.validation.rules import (
    BUSINESS_PROFILE_RULES,
    RuleTable,
    build_rule_table,
    load_rule_table,
)
from app.validation.validator import PathValidator, ValidationVerdict

logger = get_logger(__name__)


@dataclass(frozen=True)
class ProfileValidationService:
    """Extract identifiers with ``policy``, then validate with ``validator``."""

    policy: IdentifierPolicy
    validator: PathValidator

    def check(
        self,
        body: Any,
        headers: Mapping[str, str] | None = None,
    ) -> ValidationVerdict:
        identifiers = self.policy.extract(body, headers)
        verdict = self.validator.validate(body, identifiers)

        if verdict.ok:
            logger.info(
                "Profile validation passed",
                policy=self.policy.name,
                **verdict.identifiers,
            )
        else:
            logger.info(
                "Profile validation failed",
                policy=self.policy.name,
                kind=verdict.kind,
                error_count=len(verdict.errors),
                **verdict.identifiers,
            )
        return verdict


def build_service(
    policy_name: str,
    root: str,
    base: RuleTable = BUSINESS_PROFILE_RULES,
) -> ProfileValidationService:
    """Build a service for ``policy_name`` with ``base`` rooted at ``root``."""
    rules = build_rule_table(root, base=base)
    logger.debug(
        "Validation service built",
        policy=policy_name,
        root=root,
        rule_count=len(rules),
    )
    return ProfileValidationService(policy=get_policy(policy_name), validator=PathValidator(rules))


def build_services(settings: Settings) -> dict[str, ProfileValidationService]:
    """One service per built-in policy, keyed by policy name."""
    base = load_rule_table(settings.RULES_FILE) if settings.RULES_FILE else BUSINESS_PROFILE_RULES
    return {
        PolicyName.USER: build_service(PolicyName.USER, settings.PROFILE_ROOT, base),
        PolicyName.USER_PRODUCT: build_service(
            PolicyName.USER_PRODUCT, settings.PRODUCT_PROFILE_ROOT, base
        ),
    }
