"""Array operations on the node a path designates."""

from __future__ import annotations

import copy
from typing import cast

from ..errors import IndexOutOfBoundsError, TypeMismatchError
from ..path.segments import Path
from ..runtime.logging import get_logger
from .mutator import get_value
from .navigator import PathWalker, describe, resolve_index
from .types import JSONValue, NodeKind, kind_of

logger = get_logger(__name__)


def _writable_array(walker: PathWalker) -> list[JSONValue]:
    """Walk to the target, turning ``null`` or ``{}`` into ``[]`` when allowed."""

    node = walker.target()
    kind = kind_of(node)
    if kind is NodeKind.ARRAY:
        return cast(list[JSONValue], node)
    if walker.create_path and (
        kind is NodeKind.NULL or (kind is NodeKind.OBJECT and not node)
    ):
        array: list[JSONValue] = []
        walker.replace(array)
        return array
    raise TypeMismatchError(describe(walker.path), NodeKind.ARRAY.value, kind.value)


def _existing_array(document: JSONValue, path: Path) -> list[JSONValue]:
    node = get_value(document, path)
    kind = kind_of(node)
    if kind is not NodeKind.ARRAY:
        raise TypeMismatchError(describe(path), NodeKind.ARRAY.value, kind.value)
    return cast(list[JSONValue], node)


def array_append(
    document: JSONValue,
    path: Path,
    value: JSONValue,
    *,
    create_path: bool = True,
) -> JSONValue:
    """Append ``value`` to the array at ``path`` and return the root."""

    walker = PathWalker(document, path, create_path=create_path)
    with walker.transaction():
        _writable_array(walker).append(copy.deepcopy(value))
    return walker.root


def array_prepend(
    document: JSONValue,
    path: Path,
    value: JSONValue,
    *,
    create_path: bool = True,
) -> JSONValue:
    walker = PathWalker(document, path, create_path=create_path)
    with walker.transaction():
        _writable_array(walker).insert(0, copy.deepcopy(value))
    return walker.root


def array_insert(
    document: JSONValue,
    path: Path,
    index: int,
    value: JSONValue,
    *,
    create_path: bool = True,
) -> JSONValue:
    """Insert ``value`` before position ``index`` and return the root.

    ``index`` may equal the array length, and ``-1`` also means "append".
    Other negative indices are rejected, unlike ``array_pop``.
    """

    walker = PathWalker(document, path, create_path=create_path)
    with walker.transaction():
        array = _writable_array(walker)
        length = len(array)
        position = length if index == -1 else index
        if not 0 <= position <= length:
            raise IndexOutOfBoundsError(index, length, describe(path))
        array.insert(position, copy.deepcopy(value))
    logger.debug("insert %s: at %d", describe(path), position)
    return walker.root


def array_pop(document: JSONValue, path: Path, index: int = -1) -> JSONValue:
    """Remove and return the element at ``index`` (default: the last one)."""

    array = _existing_array(document, path)
    length = len(array)
    if not array:
        raise IndexOutOfBoundsError(index, length, describe(path))
    resolved = resolve_index(index, length)
    if not 0 <= resolved < length:
        raise IndexOutOfBoundsError(index, length, describe(path))
    logger.debug("pop %s: index %d", describe(path), resolved)
    return array.pop(resolved)


def array_trim(document: JSONValue, path: Path, start: int, stop: int) -> int:
    """Keep only elements ``start..stop`` (inclusive) and return the new length.

    Negative bounds count from the end, out-of-range bounds are clamped, and
    an empty range empties the array.
    """

    array = _existing_array(document, path)
    length = len(array)
    first = max(resolve_index(start, length), 0)
    last = min(resolve_index(stop, length), length - 1)
    if first > last:
        array.clear()
    else:
        array[:] = array[first : last + 1]
    return len(array)


def array_length(document: JSONValue, path: Path) -> int:
    return len(_existing_array(document, path))


__all__ = [
    "array_append",
    "array_insert",
    "array_length",
    "array_pop",
    "array_prepend",
    "array_trim",
]
