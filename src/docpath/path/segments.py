"""Typed path segments.

A path is an immutable tuple of segments read left to right from the document
root. Only ``KeySegment`` and ``IndexSegment`` are evaluated by the engine; the
remaining variants exist so query syntax can be represented and rejected
explicitly.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Annotated, Any, Literal, TypeAlias

from pydantic import BaseModel, ConfigDict, Field, StrictInt, TypeAdapter


class _Segment(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)


class KeySegment(_Segment):
    kind: Literal["key"] = "key"
    name: str


INDEX_MIN = -(2**31)
INDEX_MAX = 2**31 - 1


class IndexSegment(_Segment):
    kind: Literal["index"] = "index"
    index: Annotated[StrictInt, Field(ge=INDEX_MIN, le=INDEX_MAX)]


class WildcardSegment(_Segment):
    kind: Literal["wildcard"] = "wildcard"


class SliceSegment(_Segment):
    kind: Literal["slice"] = "slice"
    start: StrictInt | None = None
    stop: StrictInt | None = None
    step: StrictInt | None = None


class FilterSegment(_Segment):
    kind: Literal["filter"] = "filter"
    expression: str


class RecursiveDescentSegment(_Segment):
    kind: Literal["recursive"] = "recursive"
    name: str | None = None


PathSegment: TypeAlias = Annotated[
    KeySegment
    | IndexSegment
    | WildcardSegment
    | SliceSegment
    | FilterSegment
    | RecursiveDescentSegment,
    Field(discriminator="kind"),
]

Path: TypeAlias = tuple[PathSegment, ...]

ROOT: Path = ()

_PATH_ADAPTER: TypeAdapter[Path] = TypeAdapter(Path)


def is_literal(segment: PathSegment) -> bool:
    """Return whether ``segment`` addresses exactly one node."""

    return isinstance(segment, KeySegment | IndexSegment)


def load_path(payload: Sequence[dict[str, Any]]) -> Path:
    """Validate a JSON list of segment objects into a ``Path``."""

    return _PATH_ADAPTER.validate_python(tuple(payload))


def dump_path(path: Path) -> list[dict[str, Any]]:
    return [segment.model_dump(mode="json") for segment in path]


__all__ = [
    "INDEX_MAX",
    "INDEX_MIN",
    "ROOT",
    "FilterSegment",
    "IndexSegment",
    "KeySegment",
    "Path",
    "PathSegment",
    "RecursiveDescentSegment",
    "SliceSegment",
    "WildcardSegment",
    "dump_path",
    "is_literal",
    "load_path",
]
