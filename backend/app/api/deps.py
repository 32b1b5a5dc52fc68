"""Shared dependencies for API routes."""

from __future__ import annotations

from fastapi import HTTPException, Request, status

from app.core.constants import PolicyName
from app.validation.service import ProfileValidationService


def _service_for(request: Request, policy: PolicyName) -> ProfileValidationService:
    services: dict[str, ProfileValidationService] = request.app.state.validation_services
    service = services.get(policy)
    if service is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=f"Validation policy '{policy}' is not configured",
        )
    return service


def get_user_validation_service(request: Request) -> ProfileValidationService:
    """Service for bodies that carry the user ID as ``id``."""
    return _service_for(request, PolicyName.USER)


def get_product_validation_service(request: Request) -> ProfileValidationService:
    """Service for bodies with ``userId`` plus a ``productId`` header."""
    return _service_for(request, PolicyName.USER_PRODUCT)
