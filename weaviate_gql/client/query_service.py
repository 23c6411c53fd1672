"""
GraphQL query endpoint -- build -> POST -> unwrap.

Each call is one request/response cycle:
  1. The query is finalised (`as_payload`), so build errors surface
     before any network I/O
  2. The payload is POSTed to the GraphQL path; anything but HTTP 200 is
     an UnexpectedStatusError
  3. The body is unwrapped into the operation's payload, or a ServiceError
     when the service answered with GraphQL ``errors``
"""
from __future__ import annotations

from typing import Any

import httpx

from weaviate_gql.core.logging import get_logger
from weaviate_gql.core.utils import to_json_text, truncate
from weaviate_gql.query.aggregate import AggregateQuery
from weaviate_gql.query.explore import ExploreQuery
from weaviate_gql.query.get import GetQuery
from weaviate_gql.query.raw import RawQuery
from weaviate_gql.query.response import partial_errors, unwrap_response
from weaviate_gql.transport.executor import post_json

logger = get_logger(__name__)

DEFAULT_GRAPHQL_PATH = "/v1/graphql"


class QueryService:
    """GraphQL operations bound to one HTTP client."""

    def __init__(self, http_client: httpx.Client, graphql_path: str = DEFAULT_GRAPHQL_PATH):
        self._http = http_client
        self._path = graphql_path

    def get(self, query: GetQuery, model: Any = Any) -> Any:
        """Run a Get query and return ``data.Get`` (validated into *model* if given).

        Example
        -------
        >>> query = GetQuery.new("JeopardyQuestion", ["question", "answer"]).with_limit(1)
        >>> client.query.get(query)["JeopardyQuestion"][0]["answer"]
        'Jonah'
        """
        return self._run(query, GetQuery.OPERATION, model)

    def aggregate(self, query: AggregateQuery, model: Any = Any) -> Any:
        """Run an Aggregate query and return ``data.Aggregate``."""
        return self._run(query, AggregateQuery.OPERATION, model)

    def explore(self, query: ExploreQuery, model: Any = Any) -> Any:
        """Run an Explore query and return ``data.Explore``.

        Raises MissingRequiredFieldError without sending anything when the
        query has no near locator.
        """
        return self._run(query, ExploreQuery.OPERATION, model)

    def raw(self, query: RawQuery | str) -> dict[str, Any]:
        """Run a hand-written query and return the whole ``data`` object."""
        if isinstance(query, str):
            query = RawQuery.new(query)
        return self._run(query, None, Any)

    def _run(
        self,
        query: GetQuery | AggregateQuery | ExploreQuery | RawQuery,
        operation: str | None,
        model: Any,
    ) -> Any:
        payload = query.as_payload()
        label = operation or "raw"
        logger.info("GraphQL %s | query_len=%d", label, len(payload["query"]))
        logger.debug("GraphQL %s query:\n%s", label, payload["query"])

        body = post_json(self._http, self._path, payload)

        extra = partial_errors(body)
        if extra:
            logger.warning(
                "GraphQL %s returned data alongside %d error(s): %s",
                label, len(extra), truncate(to_json_text(extra)),
            )
        return unwrap_response(body, operation, model)
