"""Document value model."""

from __future__ import annotations

from enum import Enum
from typing import TypeAlias

JSONScalar: TypeAlias = str | int | float | bool | None
JSONValue: TypeAlias = JSONScalar | list["JSONValue"] | dict[str, "JSONValue"]
JSONContainer: TypeAlias = list[JSONValue] | dict[str, JSONValue]


class NodeKind(str, Enum):
    OBJECT = "object"
    ARRAY = "array"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"


def kind_of(value: object) -> NodeKind:
    """Classify ``value``; raises ``TypeError`` outside the JSON model."""

    match value:
        case None:
            return NodeKind.NULL
        case bool():
            return NodeKind.BOOLEAN
        case int() | float():
            return NodeKind.NUMBER
        case str():
            return NodeKind.STRING
        case list():
            return NodeKind.ARRAY
        case dict():
            return NodeKind.OBJECT
    raise TypeError(f"unsupported document value type {type(value).__name__}")


__all__ = ["JSONContainer", "JSONScalar", "JSONValue", "NodeKind", "kind_of"]
