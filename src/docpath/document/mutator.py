"""Read, write and introspect single locations inside a document.

Every function takes the document and a parsed ``Path``. Writes happen in
place; functions that may have to replace the root (because it is ``null`` or
because the root path was addressed) return the root to keep using.
"""

from __future__ import annotations

import copy
from typing import cast

from ..errors import (
    IndexOutOfBoundsError,
    InvalidPathError,
    PathNotFoundError,
    TypeMismatchError,
)
from ..path.segments import IndexSegment, KeySegment, Path
from ..runtime.logging import get_logger
from .navigator import PathWalker, describe, navigate, resolve_index
from .types import JSONValue, NodeKind, kind_of

logger = get_logger(__name__)


def get_value(document: JSONValue, path: Path) -> JSONValue:
    """Return the node at ``path``.

    The returned node is the live object inside ``document``, not a copy.
    Raises ``PathNotFoundError``, ``TypeMismatchError`` or
    ``IndexOutOfBoundsError`` without touching the document.
    """

    if not path:
        return document
    return navigate(document, path)


def set_value(
    document: JSONValue,
    path: Path,
    value: JSONValue,
    *,
    create_path: bool = True,
    overwrite: bool = True,
) -> JSONValue:
    """Write a deep copy of ``value`` at ``path`` and return the root.

    With ``create_path`` missing or ``null`` intermediate nodes become ``{}``
    or ``[]`` depending on the segment that follows them, and array indices
    past the end pad the array with ``null``. With ``overwrite`` disabled an
    existing key or in-bounds element is left as it is. If the write fails,
    every container created on the way is removed again.
    """

    value = copy.deepcopy(value)
    if not path:
        if overwrite or document is None:
            return value
        return document

    walker = PathWalker(document, path, create_path=create_path)
    with walker.transaction():
        parent = walker.parent()
        last = path[-1]
        if isinstance(last, KeySegment):
            obj = cast(dict[str, JSONValue], parent)
            if not overwrite and last.name in obj:
                logger.debug("set %s: kept existing value", describe(path))
                return walker.root
            obj[last.name] = value
        else:
            _set_element(
                cast(list[JSONValue], parent),
                path,
                cast(IndexSegment, last),
                value,
                create_path,
                overwrite,
            )

    if walker.created:
        logger.debug(
            "set %s: created %d container(s)",
            describe(path),
            walker.created,
            extra={"docpath_action_color": "green"},
        )
    return walker.root


def _set_element(
    array: list[JSONValue],
    path: Path,
    segment: IndexSegment,
    value: JSONValue,
    create_path: bool,
    overwrite: bool,
) -> None:
    index = segment.index
    length = len(array)
    resolved = resolve_index(index, length)
    if resolved < 0:
        raise IndexOutOfBoundsError(index, length, describe(path))
    if resolved < length:
        if overwrite:
            array[resolved] = value
        else:
            logger.debug("set %s: kept existing element", describe(path))
        return
    if not create_path:
        raise IndexOutOfBoundsError(index, length, describe(path))
    array.extend([None] * (resolved - length))
    array.append(value)


def delete_value(document: JSONValue, path: Path) -> None:
    """Remove the key or array element at ``path``.

    The root cannot be deleted through a path. A missing key and an index
    outside the array are both reported as ``PathNotFoundError``.
    """

    if not path:
        raise InvalidPathError("", "cannot delete the document root")

    parent = PathWalker(document, path).parent()
    last = path[-1]
    if isinstance(last, KeySegment):
        obj = cast(dict[str, JSONValue], parent)
        if last.name not in obj:
            raise PathNotFoundError(describe(path))
        del obj[last.name]
        return

    index = cast(IndexSegment, last).index
    array = cast(list[JSONValue], parent)
    length = len(array)
    resolved = resolve_index(index, length)
    if not 0 <= resolved < length:
        raise PathNotFoundError(
            describe(path), f"index {index} out of bounds for size {length}"
        )
    del array[resolved]


def exists(document: JSONValue, path: Path) -> bool:
    if not path:
        return document is not None
    try:
        navigate(document, path)
    except (PathNotFoundError, IndexOutOfBoundsError, TypeMismatchError):
        return False
    return True


def get_type(document: JSONValue, path: Path) -> NodeKind:
    return kind_of(get_value(document, path))


def get_size(document: JSONValue, path: Path) -> int:
    """Element count for containers, length for strings, 0 for null, else 1."""

    node = get_value(document, path)
    match kind_of(node):
        case NodeKind.OBJECT | NodeKind.ARRAY | NodeKind.STRING:
            return len(cast(str | list[JSONValue] | dict[str, JSONValue], node))
        case NodeKind.NULL:
            return 0
        case _:
            return 1


__all__ = [
    "delete_value",
    "exists",
    "get_size",
    "get_type",
    "get_value",
    "set_value",
]
