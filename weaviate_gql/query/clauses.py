"""
Clause model shared by the query builders.

Clause contents are opaque text supplied by the caller (e.g. the body of a
``where`` filter or ``nearVector`` argument) and are emitted verbatim.  The
near-locator family is modelled as a single tagged slot so a query can hold
at most one of them.
"""
from __future__ import annotations

import json
from enum import Enum
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict

from weaviate_gql.core.errors import ConflictingClauseError


class NearKind(str, Enum):
    """The closed family of similarity locators; values are GraphQL argument names."""

    TEXT = "nearText"
    VECTOR = "nearVector"
    OBJECT = "nearObject"
    IMAGE = "nearImage"
    AUDIO = "nearAudio"
    VIDEO = "nearVideo"
    THERMAL = "nearThermal"
    IMU = "nearIMU"
    DEPTH = "nearDepth"


class NearClause(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: NearKind
    value: str

    def render(self) -> str:
        return clause_line(self.kind.value, self.value)


def clause_line(name: str, value: Any) -> str:
    return f"{name}: {value}"


def quoted(value: Any) -> str:
    """Render a plain string value (cursor id) as a GraphQL string literal."""
    return json.dumps(str(value))


def merge_fields(existing: tuple[str, ...], new: list[str] | tuple[str, ...]) -> tuple[str, ...]:
    """Append *new* to *existing*, keeping first occurrence order and dropping duplicates."""
    merged = list(existing)
    for item in new:
        if item not in merged:
            merged.append(item)
    return tuple(merged)


Q = TypeVar("Q", bound=BaseModel)


def set_near(query: Q, kind: NearKind, value: str) -> Q:
    """Return a copy of *query* with its near slot set.

    Re-setting the same locator kind overwrites it.  Setting a different
    kind while one is already present raises ``ConflictingClauseError``.
    """
    current: NearClause | None = query.near
    if current is not None and current.kind is not kind:
        raise ConflictingClauseError(current.kind.value, kind.value)
    return query.model_copy(update={"near": NearClause(kind=kind, value=value)})


class NearSetters:
    """Mixin providing the nine ``with_near_*`` setters for entity-bound queries."""

    def with_near_text(self, near_text: str):
        return set_near(self, NearKind.TEXT, near_text)

    def with_near_vector(self, near_vector: str):
        return set_near(self, NearKind.VECTOR, near_vector)

    def with_near_object(self, near_object: str):
        return set_near(self, NearKind.OBJECT, near_object)

    def with_near_image(self, near_image: str):
        return set_near(self, NearKind.IMAGE, near_image)

    def with_near_audio(self, near_audio: str):
        return set_near(self, NearKind.AUDIO, near_audio)

    def with_near_video(self, near_video: str):
        return set_near(self, NearKind.VIDEO, near_video)

    def with_near_thermal(self, near_thermal: str):
        return set_near(self, NearKind.THERMAL, near_thermal)

    def with_near_imu(self, near_imu: str):
        return set_near(self, NearKind.IMU, near_imu)

    def with_near_depth(self, near_depth: str):
        return set_near(self, NearKind.DEPTH, near_depth)
