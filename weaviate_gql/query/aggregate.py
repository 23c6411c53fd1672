"""
AggregateQuery -- builder for ``{ Aggregate { <Class> ... } }`` queries.
"""
from __future__ import annotations

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

from weaviate_gql.query.clauses import (
    NearClause,
    NearKind,
    NearSetters,
    clause_line,
    merge_fields,
)
from weaviate_gql.query.renderer import render_document, wrap_payload
from weaviate_gql.query.validator import ensure_valid


class AggregateQuery(NearSetters, BaseModel):
    """Immutable description of an Aggregate query.

    Aggregations are requested as raw field selections, e.g.
    ``"wordCount { count mean maximum }"`` or ``"groupedBy { value path }"``
    together with ``with_group_by``.
    """

    model_config = ConfigDict(frozen=True)

    OPERATION: ClassVar[str] = "Aggregate"
    REQUIRES_ENTITY: ClassVar[bool] = True
    REQUIRES_NEAR: ClassVar[bool] = False
    ALLOWED_NEAR: ClassVar[tuple[NearKind, ...]] = tuple(NearKind)

    class_name: str
    properties: tuple[str, ...] = Field(default_factory=tuple)
    meta_count: bool = False
    where: str | None = None
    group_by: str | None = None
    near: NearClause | None = None
    object_limit: int | None = None
    tenant: str | None = None
    limit: int | None = None

    @classmethod
    def new(cls, class_name: str, properties: list[str] | tuple[str, ...] = ()) -> AggregateQuery:
        return cls(class_name=class_name, properties=merge_fields((), properties))

    def with_fields(self, fields: list[str] | tuple[str, ...]) -> AggregateQuery:
        """Append aggregation selections to the body (duplicates are skipped)."""
        return self.model_copy(update={"properties": merge_fields(self.properties, fields)})

    def with_meta_count(self) -> AggregateQuery:
        """Add ``meta { count }`` to the body."""
        return self.model_copy(update={"meta_count": True})

    def with_where(self, where: str) -> AggregateQuery:
        return self.model_copy(update={"where": where})

    def with_group_by(self, group_by: str) -> AggregateQuery:
        """Group the aggregation, e.g. ``'["inPublication"]'``.

        Usually paired with a ``groupedBy { value path }`` field.
        """
        return self.model_copy(update={"group_by": group_by})

    def with_object_limit(self, object_limit: int) -> AggregateQuery:
        """Cap the number of vector-search hits fed into the aggregation.

        Only meaningful together with a near locator.
        """
        return self.model_copy(update={"object_limit": object_limit})

    def with_tenant(self, tenant: str) -> AggregateQuery:
        return self.model_copy(update={"tenant": tenant})

    def with_limit(self, limit: int) -> AggregateQuery:
        return self.model_copy(update={"limit": limit})

    def build(self) -> AggregateQuery:
        ensure_valid(self)
        return self

    def clauses(self) -> list[str]:
        lines: list[str] = []
        if self.where is not None:
            lines.append(clause_line("where", self.where))
        if self.group_by is not None:
            lines.append(clause_line("groupBy", self.group_by))
        if self.near is not None:
            lines.append(self.near.render())
        if self.object_limit is not None:
            lines.append(clause_line("objectLimit", self.object_limit))
        if self.tenant is not None:
            lines.append(clause_line("tenant", self.tenant))
        if self.limit is not None:
            lines.append(clause_line("limit", self.limit))
        return lines

    def render(self) -> str:
        body: list[str] = []
        if self.meta_count:
            body.append("meta { count }")
        if self.properties:
            body.append(" ".join(self.properties))
        return render_document(self.OPERATION, self.class_name, self.clauses(), body)

    def as_payload(self) -> dict[str, str]:
        return wrap_payload(self.build().render())

    def __str__(self) -> str:
        return self.render()
