"""
RawQuery -- a caller-written GraphQL document sent as-is.

Use it for anything the builders do not model.  The text is neither
validated nor reformatted.
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from weaviate_gql.query.renderer import wrap_payload


class RawQuery(BaseModel):
    model_config = ConfigDict(frozen=True)

    query: str

    @classmethod
    def new(cls, query: str) -> RawQuery:
        return cls(query=query)

    def build(self) -> RawQuery:
        return self

    def render(self) -> str:
        return self.query

    def as_payload(self) -> dict[str, str]:
        return wrap_payload(self.query)

    def __str__(self) -> str:
        return self.query
