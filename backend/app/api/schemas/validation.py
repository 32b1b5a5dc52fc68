"""Profile validation response schemas."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from app.core.constants import SUCCESS_MESSAGE, VerdictKind
from app.validation.validator import ValidationVerdict


class _EchoesIdentifiers(BaseModel):
    """Identifier values (userId, productId, ...) ride along as extra keys."""

    model_config = {"extra": "allow"}


class ValidationSuccessResponse(_EchoesIdentifiers):
    """200 body: the profile passed every applicable rule."""

    message: str = SUCCESS_MESSAGE


class ValidationErrorsResponse(_EchoesIdentifiers):
    """400 body: one message per failing field, in rule order."""

    errors: list[str]


class MissingIdentifierResponse(_EchoesIdentifiers):
    """400 body: a required identifier was not supplied."""

    error: str


def verdict_to_body(verdict: ValidationVerdict) -> dict[str, Any]:
    """Render a verdict as the JSON body the client receives."""
    if verdict.ok:
        model: BaseModel = ValidationSuccessResponse(**verdict.identifiers)
    elif verdict.kind == VerdictKind.MISSING_IDENTIFIER:
        model = MissingIdentifierResponse(error=verdict.errors[0], **verdict.identifiers)
    else:
        model = ValidationErrorsResponse(errors=list(verdict.errors), **verdict.identifiers)
    return model.model_dump()
