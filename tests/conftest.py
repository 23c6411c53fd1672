"""
Shared fixtures -- an in-process fake of the Weaviate GraphQL endpoint.

The fake is a FastAPI app driven through ``TestClient`` (an httpx.Client),
so the real transport code path runs without a live service.
"""
from __future__ import annotations

from typing import Any

import pytest
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.testclient import TestClient

from weaviate_gql.client.weaviate_client import WeaviateClient


class FakeWeaviate:
    """Records every GraphQL payload and answers with a scripted reply."""

    def __init__(self) -> None:
        self.requests: list[dict[str, Any]] = []
        self.headers: list[dict[str, str]] = []
        self.status_code = 200
        self.body: Any = {"data": {}}
        self.app = FastAPI()

        @self.app.post("/v1/graphql")
        async def graphql(request: Request):
            self.requests.append(await request.json())
            self.headers.append(dict(request.headers))
            return JSONResponse(status_code=self.status_code, content=self.body)

    def reply(self, body: Any, status_code: int = 200) -> None:
        self.body = body
        self.status_code = status_code

    @property
    def last_query(self) -> str:
        return self.requests[-1]["query"]


@pytest.fixture
def fake_weaviate() -> FakeWeaviate:
    return FakeWeaviate()


@pytest.fixture
def client(fake_weaviate: FakeWeaviate):
    with TestClient(fake_weaviate.app) as http_client:
        yield WeaviateClient(http_client=http_client)
