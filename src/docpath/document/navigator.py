"""Segment-by-segment navigation over an in-memory document.

``PathWalker`` is an owned cursor: it keeps the current node together with the
container slot that holds it, so a ``null`` node can be replaced by a fresh
container while walking. Every structural change made during the walk is
recorded in an undo log; ``transaction()`` rolls the log back when the
surrounding operation fails, so a failed write leaves the document as it was.
"""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from functools import partial
from typing import cast

from ..errors import (
    IndexOutOfBoundsError,
    PathNotFoundError,
    TypeMismatchError,
    UnsupportedSegmentError,
)
from ..path.format import format_path, format_segment
from ..path.segments import IndexSegment, KeySegment, Path, is_literal
from ..runtime.logging import get_logger
from .types import JSONContainer, JSONValue, NodeKind, kind_of

logger = get_logger(__name__)


def resolve_index(index: int, length: int) -> int:
    """Resolve a possibly negative ``index`` against ``length``."""

    return index + length if index < 0 else index


def describe(path: Path) -> str:
    return format_path(path) or "$"


def require_literal(path: Path) -> None:
    """Raise ``UnsupportedSegmentError`` for the first non-literal segment."""

    for segment in path:
        if not is_literal(segment):
            raise UnsupportedSegmentError(describe(path), format_segment(segment))


class PathWalker:
    """Cursor that walks ``path`` through ``document`` for a single operation."""

    def __init__(
        self,
        document: JSONValue,
        path: Path,
        *,
        create_path: bool = False,
    ) -> None:
        require_literal(path)
        self.root = document
        self.path = path
        self.create_path = create_path
        self.created = 0
        self._node: JSONValue = document
        self._container: JSONContainer | None = None
        self._accessor: str | int | None = None
        self._undo: list[Callable[[], object]] = []

    @property
    def node(self) -> JSONValue:
        return self._node

    def target(self) -> JSONValue:
        """Walk every segment and return the addressed node."""

        for position in range(len(self.path)):
            self._step(position)
        return self._node

    def parent(self) -> JSONContainer:
        """Walk all but the last segment and return the container it applies to."""

        if not self.path:
            raise ValueError("the root path has no parent")
        for position in range(len(self.path) - 1):
            self._step(position)
        return self._prepare(len(self.path) - 1)

    def replace(self, value: JSONValue) -> None:
        """Replace the current node in its slot, recording how to undo it."""

        if self._container is None:
            self._undo.append(partial(setattr, self, "root", self.root))
            self.root = value
        else:
            container = self._container
            accessor = self._accessor
            self._undo.append(
                partial(operator.setitem, container, accessor, container[accessor])  # type: ignore[index]
            )
            container[accessor] = value  # type: ignore[index]
        self._node = value

    def rollback(self) -> int:
        undone = len(self._undo)
        for undo in reversed(self._undo):
            undo()
        self._undo.clear()
        return undone

    @contextmanager
    def transaction(self) -> Iterator[PathWalker]:
        try:
            yield self
        except Exception:
            undone = self.rollback()
            if undone:
                logger.debug(
                    "rollback %s: undid %d change(s)",
                    describe(self.path),
                    undone,
                    extra={"docpath_action_color": "red"},
                )
            raise

    def _prepare(self, position: int) -> JSONContainer:
        """Ensure the current node is the container ``path[position]`` needs."""

        segment = self.path[position]
        expected = NodeKind.OBJECT if isinstance(segment, KeySegment) else NodeKind.ARRAY
        node = self._node
        actual = kind_of(node)
        if actual is expected:
            return cast(JSONContainer, node)
        if actual is not NodeKind.NULL:
            raise TypeMismatchError(
                describe(self.path[:position]), expected.value, actual.value
            )
        if not self.create_path:
            raise PathNotFoundError(describe(self.path[:position]), "node is null")

        container: JSONContainer = {} if expected is NodeKind.OBJECT else []
        self.replace(container)
        self.created += 1
        return container

    def _step(self, position: int) -> None:
        container = self._prepare(position)
        segment = self.path[position]

        if isinstance(segment, KeySegment):
            obj = cast(dict[str, JSONValue], container)
            name = segment.name
            if name not in obj:
                if not self.create_path:
                    raise PathNotFoundError(describe(self.path[: position + 1]))
                obj[name] = None
                self._undo.append(partial(obj.pop, name))
            self._container, self._accessor, self._node = obj, name, obj[name]
            return

        requested = cast(IndexSegment, segment).index
        array = cast(list[JSONValue], container)
        length = len(array)
        index = resolve_index(requested, length)
        if index < 0 or (index >= length and not self.create_path):
            raise IndexOutOfBoundsError(
                requested, length, describe(self.path[: position + 1])
            )
        if index >= length:
            array.extend([None] * (index + 1 - length))
            self._undo.append(partial(operator.delitem, array, slice(length, None)))
        self._container, self._accessor, self._node = array, index, array[index]


def navigate(document: JSONValue, path: Path) -> JSONValue:
    """Read-only walk from the root to the node ``path`` designates."""

    return PathWalker(document, path).target()


__all__ = [
    "PathWalker",
    "describe",
    "navigate",
    "require_literal",
    "resolve_index",
]
