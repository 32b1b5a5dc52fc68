"""API schema package."""

from app.api.schemas.validation import (
    MissingIdentifierResponse,
    ValidationErrorsResponse,
    ValidationSuccessResponse,
    verdict_to_body,
)

__all__ = [
    "MissingIdentifierResponse",
    "ValidationErrorsResponse",
    "ValidationSuccessResponse",
    "verdict_to_body",
]
