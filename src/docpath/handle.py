"""String-path facade over a single in-memory document.

``JsonDocument`` is what a storage client holds between reading a value from
the key-value store and writing it back: it owns the parsed root, accepts
user-supplied path strings and routes the ``$`` / ``.`` shorthands to
whole-document operations.
"""

from __future__ import annotations

import json
from collections.abc import Iterator
from typing import Any

from . import patch as patching
from .config import DOCPATH_CONFIG
from .document import arrays, introspect, mutator
from .document.types import JSONValue, NodeKind
from .options import SetOptions
from .patch import MergeStrategy, PatchOperation
from .path.parser import is_root_path, parse_path
from .path.segments import Path

ROOT_PATH = "$"


def _segments(path: str) -> Path:
    if is_root_path(path):
        return ()
    return parse_path(path)


class JsonDocument:
    def __init__(self, root: JSONValue = None, *, options: SetOptions | None = None) -> None:
        self.root = root
        self.options = options if options is not None else DOCPATH_CONFIG.set_options()

    @classmethod
    def from_json(cls, payload: str | bytes, *, options: SetOptions | None = None) -> JsonDocument:
        return cls(json.loads(payload), options=options)

    def to_json(self) -> str:
        return json.dumps(self.root, separators=(",", ":"), ensure_ascii=False)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.root!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JsonDocument):
            return NotImplemented
        return self.root == other.root

    __hash__ = None  # type: ignore[assignment]

    def get(self, path: str = ROOT_PATH) -> JSONValue:
        return mutator.get_value(self.root, _segments(path))

    def set(
        self,
        path: str,
        value: JSONValue,
        *,
        options: SetOptions | None = None,
    ) -> None:
        options = options if options is not None else self.options
        self.root = mutator.set_value(
            self.root,
            _segments(path),
            value,
            create_path=options.create_path,
            overwrite=options.overwrite,
        )

    def delete(self, path: str) -> None:
        """Delete the node at ``path``; the root shorthand resets the document."""

        if is_root_path(path):
            self.root = None
            return
        mutator.delete_value(self.root, parse_path(path))

    def exists(self, path: str = ROOT_PATH) -> bool:
        return mutator.exists(self.root, _segments(path))

    def type(self, path: str = ROOT_PATH) -> NodeKind:
        return mutator.get_type(self.root, _segments(path))

    def size(self, path: str = ROOT_PATH) -> int:
        return mutator.get_size(self.root, _segments(path))

    def keys(self, path: str = ROOT_PATH) -> list[str]:
        return introspect.object_keys(self.root, _segments(path))

    def paths(self) -> Iterator[str]:
        return introspect.iter_paths(self.root)

    def find(self, value: JSONValue) -> list[str]:
        return introspect.find_paths(self.root, value)

    def append(self, path: str, value: JSONValue) -> None:
        self.root = arrays.array_append(
            self.root, _segments(path), value, create_path=self.options.create_path
        )

    def prepend(self, path: str, value: JSONValue) -> None:
        self.root = arrays.array_prepend(
            self.root, _segments(path), value, create_path=self.options.create_path
        )

    def insert(self, path: str, index: int, value: JSONValue) -> None:
        self.root = arrays.array_insert(
            self.root,
            _segments(path),
            index,
            value,
            create_path=self.options.create_path,
        )

    def pop(self, path: str, index: int = -1) -> JSONValue:
        return arrays.array_pop(self.root, _segments(path), index)

    def trim(self, path: str, start: int, stop: int) -> int:
        return arrays.array_trim(self.root, _segments(path), start, stop)

    def length(self, path: str) -> int:
        return arrays.array_length(self.root, _segments(path))

    def patch(self, operations: list[PatchOperation]) -> None:
        self.root = patching.apply_patch(self.root, operations)

    def diff(self, other: JsonDocument | JSONValue) -> list[PatchOperation]:
        target = other.root if isinstance(other, JsonDocument) else other
        return patching.diff(self.root, target)

    def merge(self, patch: Any, *, strategy: MergeStrategy) -> None:
        self.root = patching.merge(self.root, patch, strategy=strategy)


__all__ = ["ROOT_PATH", "JsonDocument"]
