"""
WeaviateClient -- entry point tying configuration, HTTP client and the
GraphQL query endpoint together.

    with WeaviateClient("http://localhost:8080") as client:
        rows = client.query.get(GetQuery.new("Article", ["title"]).with_limit(5))
"""
from __future__ import annotations

import httpx

from weaviate_gql.client.query_service import QueryService
from weaviate_gql.core.config import Settings, get_settings
from weaviate_gql.core.logging import get_logger
from weaviate_gql.transport.auth import ApiKey, AuthSecret
from weaviate_gql.transport.connection import create_http_client

logger = get_logger(__name__)


class WeaviateClient:
    def __init__(
        self,
        base_url: str | None = None,
        auth: AuthSecret | None = None,
        api_keys: list[ApiKey] | tuple[ApiKey, ...] = (),
        http_client: httpx.Client | None = None,
        timeout: float | None = None,
        settings: Settings | None = None,
    ):
        """
        Parameters
        ----------
        base_url : str, optional
            Service root, e.g. ``http://localhost:8080``.  Defaults to
            ``WEAVIATE_URL`` from the environment.
        auth : AuthSecret, optional
            ``Authorization`` credentials.  Defaults to the configured API
            key or bearer token.
        api_keys : list[ApiKey]
            Extra module headers such as ``X-OpenAI-Api-Key``.
        http_client : httpx.Client, optional
            Pre-built client to use instead of creating one.  The caller
            keeps ownership and must close it.  Cannot be combined with
            *base_url*; configure the client's own ``base_url`` instead.
        settings : Settings, optional
            Also supplies ``weaviate_graphql_path``, the path GraphQL
            requests are posted to.
        """
        settings = settings or get_settings()
        if http_client is not None and base_url is not None:
            raise ValueError("Pass either base_url or http_client, not both.")
        if base_url is not None and not base_url.startswith(("http://", "https://")):
            raise ValueError(f"base_url must start with http:// or https://, got {base_url!r}")

        self._owns_http = http_client is None
        self._http = http_client or create_http_client(
            base_url=base_url,
            auth=auth,
            api_keys=api_keys,
            timeout=timeout,
            settings=settings,
        )
        self.query = QueryService(self._http, settings.weaviate_graphql_path)

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> WeaviateClient:
        """Build a client entirely from environment / .env configuration."""
        return cls(settings=settings)

    @property
    def base_url(self) -> str:
        return str(self._http.base_url)

    def close(self) -> None:
        if self._owns_http:
            self._http.close()
            logger.debug("HTTP client closed  base_url=%s", self.base_url)

    def __enter__(self) -> WeaviateClient:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
