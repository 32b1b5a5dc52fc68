"""
Business profile validation endpoints.

Both endpoints accept an arbitrary JSON body and answer with:
    - 200 {"message": ..., <ids>}      every present field passed
    - 400 {"errors": [...], <ids>}     one or more fields failed
    - 400 {"error": ..., <ids>}        a required identifier was missing
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends, Request, status
from fastapi.responses import JSONResponse

from app.api.deps import get_product_validation_service, get_user_validation_service
from app.api.schemas.validation import (
    ValidationErrorsResponse,
    ValidationSuccessResponse,
    verdict_to_body,
)
from app.validation.service import ProfileValidationService
from app.validation.validator import ValidationVerdict

router = APIRouter(tags=["Validation"])

_RESPONSES: dict[int | str, dict[str, Any]] = {
    status.HTTP_200_OK: {"model": ValidationSuccessResponse},
    status.HTTP_400_BAD_REQUEST: {
        "model": ValidationErrorsResponse,
        "description": "Field rules failed (or, with an ``error`` key, a required identifier was missing)",
    },
}


def _respond(verdict: ValidationVerdict) -> JSONResponse:
    status_code = status.HTTP_200_OK if verdict.ok else status.HTTP_400_BAD_REQUEST
    return JSONResponse(status_code=status_code, content=verdict_to_body(verdict))


@router.post("/user/validate", responses=_RESPONSES)
async def validate_user_profile(
    payload: Any = Body(default=None),
    service: ProfileValidationService = Depends(get_user_validation_service),
) -> JSONResponse:
    """Validate a profile whose user ID travels in the body as ``id``."""
    return _respond(service.check(payload))


@router.post("/product/validate", responses=_RESPONSES)
async def validate_product_profile(
    request: Request,
    payload: Any = Body(default=None),
    service: ProfileValidationService = Depends(get_product_validation_service),
) -> JSONResponse:
    """Validate a profile with body ``userId`` and a ``productId`` header."""
    return _respond(service.check(payload, request.headers))
