"""
Single-request HTTP executor.

All GraphQL calls run through `post_json`, which:
  1. Encodes the payload to JSON (failures -> SerializationError)
  2. Sends exactly one request; nothing is retried
  3. Wraps httpx failures (connect, timeout, TLS) in TransportError
  4. Decodes the body as JSON, falling back to text
  5. Compares the status against the expected one (-> UnexpectedStatusError)
"""
from __future__ import annotations

import json
from typing import Any

import httpx

from weaviate_gql.core.errors import SerializationError, TransportError, UnexpectedStatusError
from weaviate_gql.core.logging import get_logger
from weaviate_gql.core.utils import timer, to_json_text, truncate

logger = get_logger(__name__)

_JSON_HEADERS = {"Content-Type": "application/json"}


def _encode(json_body: Any) -> str:
    try:
        return json.dumps(json_body)
    except (TypeError, ValueError) as exc:
        raise SerializationError(f"Request payload is not JSON-serialisable: {exc}") from exc


def _send(client: httpx.Client, method: str, url: str, json_body: Any = None) -> httpx.Response:
    content = _encode(json_body) if json_body is not None else None
    headers = _JSON_HEADERS if content is not None else None

    with timer() as t:
        try:
            response = client.request(method, url, content=content, headers=headers)
        except httpx.HTTPError as exc:
            raise TransportError(f"{method} {url} failed: {exc}") from exc

    logger.info("%s %s -> %d  (%d ms)", method, response.url, response.status_code, t["elapsed_ms"])
    return response


def parse_body(response: httpx.Response) -> Any:
    """JSON value of the body, or its text when it is not JSON."""
    if not response.content:
        return ""
    try:
        return response.json()
    except ValueError:
        return response.text


def _reason(body: Any) -> str | None:
    """Human-readable reason extracted from an error response body."""
    if body is None or body == "":
        return None
    if isinstance(body, dict):
        # REST-style {"error": [{"message": ...}]}
        items = body.get("error")
        if isinstance(items, list):
            messages = [str(i["message"]) for i in items if isinstance(i, dict) and "message" in i]
            if messages:
                return "; ".join(messages)
    if isinstance(body, str):
        return body
    return to_json_text(body)


def check_status(url: str, expected: int, actual: int, body: Any = None) -> None:
    """Raise UnexpectedStatusError unless *actual* equals *expected*."""
    if actual == expected:
        return
    reason = _reason(body)
    logger.debug("Unexpected status %d from %s: %s", actual, url, truncate(reason or ""))
    raise UnexpectedStatusError(url=url, expected=expected, actual=actual, reason=reason)


def execute(
    client: httpx.Client,
    method: str,
    url: str,
    json_body: Any = None,
) -> tuple[int, Any]:
    """Send one request and return ``(status_code, json_or_text)``."""
    response = _send(client, method, url, json_body)
    return response.status_code, parse_body(response)


def post_json(
    client: httpx.Client,
    url: str,
    payload: Any,
    expected_status: int = 200,
) -> Any:
    """POST *payload* as JSON and return the decoded body.

    Raises
    ------
    SerializationError
        If *payload* cannot be encoded.
    TransportError
        If the request could not be completed.
    UnexpectedStatusError
        If the status differs from *expected_status*.
    """
    response = _send(client, "POST", url, payload)
    body = parse_body(response)
    check_status(str(response.url), expected_status, response.status_code, body)
    return body
