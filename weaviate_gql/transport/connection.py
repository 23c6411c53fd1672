"""httpx client factory.

Pooled clients configured from Settings.  Callers that need a different
setup (other host, other credentials, a test double) can pass any
`httpx.Client` to `WeaviateClient` instead.
"""
from __future__ import annotations

import httpx

from weaviate_gql.core.config import Settings, get_settings
from weaviate_gql.core.logging import get_logger
from weaviate_gql.transport.auth import ApiKey, AuthSecret, build_auth_headers

logger = get_logger(__name__)


def auth_from_settings(settings: Settings) -> AuthSecret | None:
    """API key wins over bearer token when both are configured."""
    if settings.weaviate_api_key:
        return AuthSecret.api_key(settings.weaviate_api_key)
    if settings.weaviate_bearer_token:
        return AuthSecret.bearer_token(settings.weaviate_bearer_token)
    return None


def create_http_client(
    base_url: str | None = None,
    auth: AuthSecret | None = None,
    api_keys: list[ApiKey] | tuple[ApiKey, ...] = (),
    timeout: float | None = None,
    settings: Settings | None = None,
) -> httpx.Client:
    """Create a new pooled client; unset arguments fall back to Settings."""
    settings = settings or get_settings()
    if auth is None:
        auth = auth_from_settings(settings)

    headers = {"Accept": "application/json"}
    headers.update(build_auth_headers(auth, api_keys))

    client = httpx.Client(
        base_url=base_url or settings.weaviate_url,
        headers=headers,
        timeout=timeout if timeout is not None else settings.request_timeout_s,
    )
    logger.info(
        "HTTP client created  base_url=%s  auth=%s  extra_headers=%d",
        client.base_url, auth.scheme if auth else "none", len(api_keys),
    )
    return client

