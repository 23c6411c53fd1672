"""
ExploreQuery -- builder for cross-class ``{ Explore ... }`` queries.

Explore has no class to bind to, so a ``nearText`` or ``nearVector``
locator is mandatory; ``build()`` and ``as_payload()`` refuse a query
without one.
"""
from __future__ import annotations

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

from weaviate_gql.query.clauses import NearClause, NearKind, clause_line, merge_fields, set_near
from weaviate_gql.query.renderer import render_document, wrap_payload
from weaviate_gql.query.validator import ensure_valid


class ExploreQuery(BaseModel):
    model_config = ConfigDict(frozen=True)

    OPERATION: ClassVar[str] = "Explore"
    REQUIRES_ENTITY: ClassVar[bool] = False
    REQUIRES_NEAR: ClassVar[bool] = True
    ALLOWED_NEAR: ClassVar[tuple[NearKind, ...]] = (NearKind.TEXT, NearKind.VECTOR)

    properties: tuple[str, ...] = Field(default_factory=tuple)
    limit: int | None = None
    near: NearClause | None = None

    @classmethod
    def new(cls) -> ExploreQuery:
        return cls()

    def with_fields(self, fields: list[str] | tuple[str, ...]) -> ExploreQuery:
        """Append result fields, e.g. ``["beacon", "certainty", "className"]``."""
        return self.model_copy(update={"properties": merge_fields(self.properties, fields)})

    def with_limit(self, limit: int) -> ExploreQuery:
        return self.model_copy(update={"limit": limit})

    def with_near_text(self, near_text: str) -> ExploreQuery:
        return set_near(self, NearKind.TEXT, near_text)

    def with_near_vector(self, near_vector: str) -> ExploreQuery:
        return set_near(self, NearKind.VECTOR, near_vector)

    def build(self) -> ExploreQuery:
        ensure_valid(self)
        return self

    def clauses(self) -> list[str]:
        lines: list[str] = []
        if self.limit is not None:
            lines.append(clause_line("limit", self.limit))
        if self.near is not None:
            lines.append(self.near.render())
        return lines

    def render(self) -> str:
        body = [" ".join(self.properties)] if self.properties else []
        return render_document(self.OPERATION, None, self.clauses(), body)

    def as_payload(self) -> dict[str, str]:
        return wrap_payload(self.build().render())

    def __str__(self) -> str:
        return self.render()
