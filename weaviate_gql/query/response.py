"""
Response envelopes and the unwrapper that maps them to results or errors.

The GraphQL endpoint answers with one of two shapes, frequently under
HTTP 200 in both cases:

  success  {"data": {"Get": <T>}}            (or Aggregate / Explore)
  error    {"errors": [{"message": ..., "locations": ..., "path": ...}]}

The shapes are told apart structurally: a body is only a success when the
operation key under ``data`` is present and non-null.
"""
from __future__ import annotations

import json
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from weaviate_gql.core.errors import MalformedResponseError, ServiceError

T = TypeVar("T")


def _reject_null(value: Any) -> Any:
    if value is None:
        raise ValueError("value must not be null")
    return value


# ── Success envelopes ────────────────────────────────────


class GetData(BaseModel, Generic[T]):
    model_config = ConfigDict(populate_by_name=True)

    get: T = Field(alias="Get")

    @field_validator("get", mode="before")
    @classmethod
    def reject_null(cls, value: Any) -> Any:
        return _reject_null(value)


class GetResponse(BaseModel, Generic[T]):
    data: GetData[T]


class AggregateData(BaseModel, Generic[T]):
    model_config = ConfigDict(populate_by_name=True)

    aggregate: T = Field(alias="Aggregate")

    @field_validator("aggregate", mode="before")
    @classmethod
    def reject_null(cls, value: Any) -> Any:
        return _reject_null(value)


class AggregateResponse(BaseModel, Generic[T]):
    data: AggregateData[T]


class ExploreData(BaseModel, Generic[T]):
    model_config = ConfigDict(populate_by_name=True)

    explore: T = Field(alias="Explore")

    @field_validator("explore", mode="before")
    @classmethod
    def reject_null(cls, value: Any) -> Any:
        return _reject_null(value)


class ExploreResponse(BaseModel, Generic[T]):
    data: ExploreData[T]


class RawResponse(BaseModel):
    data: dict[str, Any]


# ── Error envelope ───────────────────────────────────────


class ErrorResponse(BaseModel):
    errors: Any

    @field_validator("errors", mode="before")
    @classmethod
    def reject_null(cls, value: Any) -> Any:
        return _reject_null(value)


# operation name -> (envelope class, attribute on its ``data``)
_ENVELOPES: dict[str, tuple[type[BaseModel], str]] = {
    "Get": (GetResponse, "get"),
    "Aggregate": (AggregateResponse, "aggregate"),
    "Explore": (ExploreResponse, "explore"),
}


def decode_body(body: Any) -> Any:
    """Turn ``bytes`` / ``str`` bodies into JSON values; pass parsed values through."""
    if isinstance(body, (bytes, bytearray)):
        try:
            body = body.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise MalformedResponseError(f"Response body is not valid UTF-8: {exc}", body=bytes(body)) from exc
    if isinstance(body, str):
        try:
            return json.loads(body)
        except json.JSONDecodeError as exc:
            raise MalformedResponseError(f"Response body is not valid JSON: {exc}", body=body) from exc
    return body


def unwrap_response(body: Any, operation: str | None, model: Any = Any) -> Any:
    """Map a GraphQL response body to its payload or raise.

    Parameters
    ----------
    body : Any
        Parsed JSON value, or the raw ``str`` / ``bytes`` body.
    operation : str | None
        ``Get``, ``Aggregate`` or ``Explore``.  ``None`` unwraps to the
        whole ``data`` object (used for raw queries).
    model : type, optional
        Type the payload is validated into; ``Any`` returns the JSON as is.

    Raises
    ------
    ServiceError
        The body is an in-band GraphQL error envelope.
    MalformedResponseError
        The body matches neither envelope (or not ``model``).
    """
    payload = decode_body(body)

    if operation is None:
        envelope_cls: type[BaseModel] = RawResponse
        attr = None
    else:
        try:
            generic_cls, attr = _ENVELOPES[operation]
        except KeyError:
            raise ValueError(
                f"Unknown GraphQL operation '{operation}'. "
                f"Choose from: {', '.join(_ENVELOPES)}"
            ) from None
        envelope_cls = generic_cls[model]  # type: ignore[index]

    try:
        envelope = envelope_cls.model_validate(payload)
    except ValidationError as success_exc:
        try:
            error_envelope = ErrorResponse.model_validate(payload)
        except ValidationError:
            raise MalformedResponseError(
                f"Response matches neither the {operation or 'data'} success envelope "
                f"nor the error envelope ({success_exc.error_count()} validation errors).",
                body=payload,
            ) from success_exc
        raise ServiceError(error_envelope.errors) from None

    data = envelope.data  # type: ignore[attr-defined]
    return data if attr is None else getattr(data, attr)


def partial_errors(body: Any) -> list[Any]:
    """Non-empty ``errors`` list that accompanies a ``data`` object, else ``[]``."""
    if isinstance(body, dict) and body.get("data") is not None:
        errors = body.get("errors")
        if isinstance(errors, list) and errors:
            return errors
    return []
