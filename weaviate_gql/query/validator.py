"""
Validates builder state before a query is rendered for the wire.

Checks performed:
  1. Entity-bound operations (Get, Aggregate) name a non-blank class
  2. Operations without an entity (Explore) carry a near locator
  3. A near locator, when set, is one the operation accepts

Clause contents are never inspected -- the service is the source of truth
for field and argument legality.
"""
from __future__ import annotations

from typing import Any

from weaviate_gql.core.errors import MissingRequiredFieldError


def validate_query(query: Any) -> list[tuple[str, str]]:
    """Return ``(field, message)`` pairs for every violation (empty list = valid)."""
    errors: list[tuple[str, str]] = []
    operation: str = query.OPERATION

    if query.REQUIRES_ENTITY:
        class_name: str = query.class_name or ""
        if not class_name.strip():
            errors.append(("class_name", f"{operation}Query requires a class name."))

    allowed = ", ".join(kind.value for kind in query.ALLOWED_NEAR)
    if query.REQUIRES_NEAR and query.near is None:
        errors.append(("near", f"{operation}Query must contain one of: {allowed}"))
    elif query.near is not None and query.near.kind not in query.ALLOWED_NEAR:
        errors.append((
            "near",
            f"{operation}Query does not accept {query.near.kind.value}; use one of: {allowed}",
        ))

    return errors


def ensure_valid(query: Any) -> None:
    """Raise ``MissingRequiredFieldError`` for the first violation found."""
    errors = validate_query(query)
    if errors:
        field, message = errors[0]
        raise MissingRequiredFieldError(field, message)
