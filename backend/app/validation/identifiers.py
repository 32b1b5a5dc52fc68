"""
Required identifiers and the policies that extract them.

An IdentifierPolicy says which identifiers a request must carry and where
to find them: a body field, or a request header.  The validator only sees
the extracted values; it never touches the request itself.

Built-in policies:
    - "user":          body ``id``                        → userId
    - "user_product":  body ``userId`` + header ``productId`` → userId, productId
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from app.core.constants import IdentifierSource, PolicyName
from app.validation.errors import UnknownPolicyError


@dataclass(frozen=True)
class RequiredIdentifier:
    """
    One identifier a request must supply before field rules run.

    Args:
        key: Name used when echoing the value back, e.g. "userId".
        source: Where to read it from (body field or header).
        field: Body key or header name to read.
        missing_message: The single error reported when it is absent.
    """

    key: str
    source: IdentifierSource
    field: str
    missing_message: str

    def read(self, body: Any, headers: Mapping[str, str] | None) -> Any:
        """Pull the raw value from the request parts, or None."""
        if self.source == IdentifierSource.BODY:
            if isinstance(body, Mapping):
                return body.get(self.field)
            return None

        if not headers:
            return None
        # Header names are case-insensitive
        wanted = self.field.lower()
        for name, value in headers.items():
            if name.lower() == wanted:
                return value
        return None


@dataclass(frozen=True)
class ExtractedIdentifier:
    """A required identifier paired with the value found for it."""

    identifier: RequiredIdentifier
    value: Any = None

    @property
    def missing(self) -> bool:
        """None, False, "" and numeric zero/NaN are missing; [] and {} are not."""
        value = self.value
        if value is None or value is False or value == "":
            return True
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return value == 0 or value != value
        return False


@dataclass(frozen=True)
class IdentifierPolicy:
    """Ordered set of identifiers to extract from each request."""

    name: str
    identifiers: tuple[RequiredIdentifier, ...]

    def extract(
        self,
        body: Any,
        headers: Mapping[str, str] | None = None,
    ) -> tuple[ExtractedIdentifier, ...]:
        return tuple(
            ExtractedIdentifier(identifier=ident, value=ident.read(body, headers))
            for ident in self.identifiers
        )


USER_ID_MISSING = "User ID is missing in the request."
PRODUCT_ID_MISSING = "Product ID is missing in the request headers."

USER_POLICY = IdentifierPolicy(
    name=PolicyName.USER,
    identifiers=(
        RequiredIdentifier("userId", IdentifierSource.BODY, "id", USER_ID_MISSING),
    ),
)

USER_PRODUCT_POLICY = IdentifierPolicy(
    name=PolicyName.USER_PRODUCT,
    identifiers=(
        RequiredIdentifier("userId", IdentifierSource.BODY, "userId", USER_ID_MISSING),
        RequiredIdentifier("productId", IdentifierSource.HEADER, "productId", PRODUCT_ID_MISSING),
    ),
)

POLICY_REGISTRY: dict[str, IdentifierPolicy] = {
    PolicyName.USER: USER_POLICY,
    PolicyName.USER_PRODUCT: USER_PRODUCT_POLICY,
}


def get_policy(name: str) -> IdentifierPolicy:
    """
    Return the registered policy called ``name``.

    Raises:
        UnknownPolicyError: If no such policy exists.
    """
    try:
        return POLICY_REGISTRY[name]
    except KeyError:
        raise UnknownPolicyError(
            f"No identifier policy named '{name}'",
            details={"available": sorted(POLICY_REGISTRY)},
        ) from None
