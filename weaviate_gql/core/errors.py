"""
Error taxonomy for query building, transport and response mapping.

Every failure surfaces as a ``WeaviateError`` subclass tagged with an
``ErrorKind``:

  build              -- builder state is invalid (raised before any I/O)
  serialization      -- a payload could not be encoded or a response decoded
  transport          -- the HTTP call itself failed (connect, timeout, TLS)
  unexpected_status  -- the service answered with a non-expected HTTP status
  service            -- HTTP 200, but the body carries GraphQL ``errors``

Callers can branch on ``err.kind`` or catch the concrete classes.
"""
from __future__ import annotations

from enum import Enum
from typing import Any

from weaviate_gql.core.utils import to_json_text


class ErrorKind(str, Enum):
    BUILD = "build"
    SERIALIZATION = "serialization"
    TRANSPORT = "transport"
    UNEXPECTED_STATUS = "unexpected_status"
    SERVICE = "service"


class WeaviateError(Exception):
    """Base class for every error raised by this package."""

    kind: ErrorKind = ErrorKind.BUILD
    retryable: bool = False


# ── Build / validation ───────────────────────────────────


class QueryBuildError(WeaviateError, ValueError):
    kind = ErrorKind.BUILD


class MissingRequiredFieldError(QueryBuildError):
    """A variant-specific required clause or field was never set."""

    def __init__(self, field: str, description: str):
        self.field = field
        self.description = description
        super().__init__(description)


class ConflictingClauseError(QueryBuildError):
    """Two mutually exclusive clauses were set on the same query."""

    def __init__(self, existing: str, attempted: str):
        self.existing = existing
        self.attempted = attempted
        super().__init__(
            f"Only one near filter may be set per query: "
            f"'{existing}' is already set, cannot add '{attempted}'."
        )


# ── Serialization ────────────────────────────────────────


class SerializationError(WeaviateError):
    kind = ErrorKind.SERIALIZATION


class MalformedResponseError(SerializationError):
    """Response body matched neither the success nor the error envelope."""

    def __init__(self, message: str, body: Any = None):
        self.body = body
        super().__init__(message)


# ── Transport ────────────────────────────────────────────


class TransportError(WeaviateError):
    kind = ErrorKind.TRANSPORT
    retryable = True


class UnexpectedStatusError(WeaviateError):
    kind = ErrorKind.UNEXPECTED_STATUS
    retryable = True

    def __init__(self, url: str, expected: int, actual: int, reason: str | None = None):
        self.url = url
        self.expected = expected
        self.actual = actual
        self.reason = reason
        message = f"Unexpected status code from URL {url}: expected {expected}, got {actual}."
        if reason:
            message += f" Reason: {reason!r}"
        super().__init__(message)


# ── In-band service errors ───────────────────────────────


class ServiceError(WeaviateError):
    """The service reported GraphQL errors inside a successful HTTP response."""

    kind = ErrorKind.SERVICE

    def __init__(self, errors: Any):
        self.errors = errors
        super().__init__(to_json_text(errors))

    @property
    def messages(self) -> list[str]:
        """The ``message`` entries of a standard GraphQL error list."""
        if not isinstance(self.errors, list):
            return []
        return [
            str(item["message"])
            for item in self.errors
            if isinstance(item, dict) and "message" in item
        ]
