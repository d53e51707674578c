from .arrays import (
    array_append,
    array_insert,
    array_length,
    array_pop,
    array_prepend,
    array_trim,
)
from .introspect import find_paths, iter_paths, object_keys
from .mutator import delete_value, exists, get_size, get_type, get_value, set_value
from .navigator import PathWalker, navigate, resolve_index
from .types import JSONScalar, JSONValue, NodeKind, kind_of

__all__ = [
    "JSONScalar",
    "JSONValue",
    "NodeKind",
    "PathWalker",
    "array_append",
    "array_insert",
    "array_length",
    "array_pop",
    "array_prepend",
    "array_trim",
    "delete_value",
    "exists",
    "find_paths",
    "get_size",
    "get_type",
    "get_value",
    "iter_paths",
    "kind_of",
    "navigate",
    "object_keys",
    "resolve_index",
    "set_value",
]
