"""
GetQuery -- builder for ``{ Get { <Class> ... } }`` queries.

Every ``with_*`` call returns a new query; the receiver is left untouched,
so partially configured queries can be shared and extended freely::

    base = GetQuery.new("JeopardyQuestion", ["question", "answer"])
    first_page = base.with_limit(10)
    second_page = first_page.with_offset(10)
"""
from __future__ import annotations

from typing import ClassVar
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from weaviate_gql.query.clauses import (
    NearClause,
    NearKind,
    NearSetters,
    clause_line,
    merge_fields,
    quoted,
)
from weaviate_gql.query.renderer import nested_block, render_document, wrap_payload
from weaviate_gql.query.validator import ensure_valid


class GetQuery(NearSetters, BaseModel):
    """Immutable description of a Get query."""

    model_config = ConfigDict(frozen=True)

    OPERATION: ClassVar[str] = "Get"
    REQUIRES_ENTITY: ClassVar[bool] = True
    REQUIRES_NEAR: ClassVar[bool] = False
    ALLOWED_NEAR: ClassVar[tuple[NearKind, ...]] = tuple(NearKind)

    class_name: str
    properties: tuple[str, ...] = Field(default_factory=tuple)
    additional: tuple[str, ...] | None = None
    where: str | None = None
    limit: int | None = None
    offset: int | None = None
    after: str | None = None
    near: NearClause | None = None
    bm25: str | None = None
    hybrid: str | None = None
    group_by: str | None = None
    autocut: int | None = None
    sort: str | None = None
    ask: str | None = None
    tenant: str | None = None

    @classmethod
    def new(cls, class_name: str, properties: list[str] | tuple[str, ...] = ()) -> GetQuery:
        """Start a Get query for *class_name* requesting *properties*.

        *properties* may be empty when only ``_additional`` output is wanted.
        Cross-references are given as regular properties, e.g.
        ``"hasCategory { ... on JeopardyCategory { title } }"``.
        """
        return cls(class_name=class_name, properties=merge_fields((), properties))

    # ── Output selection ─────────────────────────────────

    def with_fields(self, fields: list[str] | tuple[str, ...]) -> GetQuery:
        """Append *fields* to the requested properties (duplicates are skipped)."""
        return self.model_copy(update={"properties": merge_fields(self.properties, fields)})

    def with_additional(self, additional: list[str] | tuple[str, ...]) -> GetQuery:
        """Request ``_additional`` properties such as ``id``, ``vector`` or ``distance``.

        These cannot be requested as regular properties.  Calling this again
        replaces the previous list.
        """
        return self.model_copy(update={"additional": tuple(additional)})

    # ── Clauses ──────────────────────────────────────────

    def with_where(self, where: str) -> GetQuery:
        return self.model_copy(update={"where": where})

    def with_limit(self, limit: int) -> GetQuery:
        return self.model_copy(update={"limit": limit})

    def with_offset(self, offset: int) -> GetQuery:
        return self.model_copy(update={"offset": offset})

    def with_after(self, after: UUID | str) -> GetQuery:
        """Cursor pagination: return objects after the object with id *after*."""
        return self.model_copy(update={"after": str(after)})

    def with_bm25(self, bm25: str) -> GetQuery:
        """Keyword search, e.g. ``'{query: "food"}'``."""
        return self.model_copy(update={"bm25": bm25})

    def with_hybrid(self, hybrid: str) -> GetQuery:
        """Weighted keyword + vector search, e.g. ``'{query: "food", alpha: 0.5}'``."""
        return self.model_copy(update={"hybrid": hybrid})

    def with_group_by(self, group_by: str) -> GetQuery:
        """Group results, e.g. ``'{path: ["hasCategory"], groups: 2, objectsPerGroup: 2}'``."""
        return self.model_copy(update={"group_by": group_by})

    def with_autocut(self, autocut: int) -> GetQuery:
        """Cut results after *autocut* jumps in distance (used with near/bm25/hybrid)."""
        return self.model_copy(update={"autocut": autocut})

    def with_sort(self, sort: str) -> GetQuery:
        """Sort by primitive properties; overrides the natural order of a vector search."""
        return self.model_copy(update={"sort": sort})

    def with_ask(self, ask: str) -> GetQuery:
        return self.model_copy(update={"ask": ask})

    def with_tenant(self, tenant: str) -> GetQuery:
        """Required on every query against a multi-tenant class.

        The value is emitted as given, so pass a GraphQL string literal,
        e.g. ``'"tenantA"'``.
        """
        return self.model_copy(update={"tenant": tenant})

    # ── Finalisation ─────────────────────────────────────

    def build(self) -> GetQuery:
        ensure_valid(self)
        return self

    def clauses(self) -> list[str]:
        """Formatted clause lines in their fixed render order."""
        lines: list[str] = []
        if self.where is not None:
            lines.append(clause_line("where", self.where))
        if self.limit is not None:
            lines.append(clause_line("limit", self.limit))
        if self.offset is not None:
            lines.append(clause_line("offset", self.offset))
        if self.near is not None:
            lines.append(self.near.render())
        if self.bm25 is not None:
            lines.append(clause_line("bm25", self.bm25))
        if self.hybrid is not None:
            lines.append(clause_line("hybrid", self.hybrid))
        if self.group_by is not None:
            lines.append(clause_line("groupBy", self.group_by))
        if self.after is not None:
            lines.append(clause_line("after", quoted(self.after)))
        if self.autocut is not None:
            lines.append(clause_line("autocut", self.autocut))
        if self.sort is not None:
            lines.append(clause_line("sort", self.sort))
        if self.ask is not None:
            lines.append(clause_line("ask", self.ask))
        if self.tenant is not None:
            lines.append(clause_line("tenant", self.tenant))
        return lines

    def render(self) -> str:
        body = list(self.properties)
        if self.additional is not None:
            body.extend(nested_block("_additional", self.additional))
        return render_document(self.OPERATION, self.class_name, self.clauses(), body)

    def as_payload(self) -> dict[str, str]:
        return wrap_payload(self.build().render())

    def __str__(self) -> str:
        return self.render()
