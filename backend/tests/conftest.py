"""Shared pytest fixtures for the profile validation service."""

from __future__ import annotations

from typing import Any

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.core.constants import PolicyName
from app.main import create_app
from app.validation.rules import build_rule_table
from app.validation.service import ProfileValidationService, build_services
from app.validation.validator import PathValidator


@pytest.fixture
def settings() -> Settings:
    """Settings isolated from any .env file on the machine."""
    return Settings(_env_file=None, APP_ENV="test")


@pytest.fixture
def validator() -> PathValidator:
    """Validator over the built-in table rooted at ``businessProfile``."""
    return PathValidator(build_rule_table("businessProfile"))


@pytest.fixture
def services(settings: Settings) -> dict[str, ProfileValidationService]:
    return build_services(settings)


@pytest.fixture
def user_service(services: dict[str, ProfileValidationService]) -> ProfileValidationService:
    return services[PolicyName.USER]


@pytest.fixture
def product_service(services: dict[str, ProfileValidationService]) -> ProfileValidationService:
    return services[PolicyName.USER_PRODUCT]


@pytest.fixture
def client(settings: Settings) -> TestClient:
    """TestClient with the lifespan (logging setup) running."""
    with TestClient(create_app(settings)) as test_client:
        yield test_client


# ---------------------------------------------------------------------------
# Shared test data
# ---------------------------------------------------------------------------


def full_profile(**overrides: Any) -> dict[str, Any]:
    """A business profile where every built-in rule passes."""
    address = {
        "line1": "1 Market St",
        "city": "Springfield",
        "state": "IL",
        "country": "US",
        "zip": "62701",
    }
    profile: dict[str, Any] = {
        "companyName": "Acme",
        "legalName": "Acme Holdings LLC",
        "taxIdentifiers": {"pan": "ABCDE12345", "ein": "12345678"},
        "email": "billing@acme.example.com",
        "businessAddress": dict(address),
        "legalAddress": dict(address),
    }
    profile.update(overrides)
    return profile
