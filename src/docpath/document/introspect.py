"""Whole-document traversal helpers."""

from __future__ import annotations

from collections.abc import Iterator
from typing import cast

from ..errors import TypeMismatchError
from ..path.format import format_path, is_addressable_key
from ..path.segments import IndexSegment, KeySegment, Path
from .mutator import get_value
from .navigator import describe
from .types import JSONValue, NodeKind, kind_of


def object_keys(document: JSONValue, path: Path) -> list[str]:
    node = get_value(document, path)
    kind = kind_of(node)
    if kind is not NodeKind.OBJECT:
        raise TypeMismatchError(describe(path), NodeKind.OBJECT.value, kind.value)
    return list(cast(dict[str, JSONValue], node))


def _walk(node: JSONValue, prefix: Path) -> Iterator[tuple[Path, JSONValue]]:
    yield prefix, node
    if isinstance(node, dict):
        for key, child in node.items():
            if not is_addressable_key(key):
                continue
            yield from _walk(child, (*prefix, KeySegment(name=key)))
    elif isinstance(node, list):
        for index, child in enumerate(node):
            yield from _walk(child, (*prefix, IndexSegment(index=index)))


def iter_paths(document: JSONValue) -> Iterator[str]:
    """Yield the path of every node below the root, parents first.

    Subtrees under keys no path string can address (see
    ``is_addressable_key``) are skipped.
    """

    for path, _ in _walk(document, ()):
        if path:
            yield format_path(path)


def find_paths(document: JSONValue, value: JSONValue) -> list[str]:
    """Return the paths of every node equal to ``value``.

    Equality also requires the same node kind, so ``1`` does not match
    ``true``. A match on the whole document is reported as ``""``, and
    matches under unaddressable keys are not reported.
    """

    kind = kind_of(value)
    return [
        format_path(path)
        for path, node in _walk(document, ())
        if kind_of(node) is kind and node == value
    ]


__all__ = ["find_paths", "iter_paths", "object_keys"]
