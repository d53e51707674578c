"""RFC 6902 patch, diff and merge for whole documents.

Patching and diffing delegate to ``jsonpatch``; only the ``patch`` and
``overwrite`` merge strategies are implemented.
"""

from __future__ import annotations

import copy
from enum import Enum
from typing import Any

import jsonpatch
import jsonpointer

from .document.types import JSONValue
from .errors import MergeStrategyNotImplementedError, PatchError
from .runtime.logging import get_logger

logger = get_logger(__name__)

PatchOperation = dict[str, Any]


class MergeStrategy(str, Enum):
    SHALLOW = "shallow"
    DEEP = "deep"
    OVERWRITE = "overwrite"
    APPEND = "append"
    PATCH = "patch"


def apply_patch(document: JSONValue, operations: list[PatchOperation]) -> JSONValue:
    """Apply RFC 6902 ``operations`` and return the patched copy.

    ``document`` itself is never modified, so a failing operation leaves it
    intact.
    """

    if not isinstance(operations, list):
        raise PatchError("a JSON patch must be a list of operations")
    try:
        patched = jsonpatch.apply_patch(document, operations, in_place=False)
    except (jsonpatch.JsonPatchException, jsonpointer.JsonPointerException) as exc:
        raise PatchError(str(exc)) from exc
    logger.debug("patch: applied %d operation(s)", len(operations))
    return patched


def diff(old: JSONValue, new: JSONValue) -> list[PatchOperation]:
    """Return the operations that turn ``old`` into ``new``."""

    return list(jsonpatch.make_patch(old, new).patch)


def merge(document: JSONValue, patch: Any, *, strategy: MergeStrategy) -> JSONValue:
    """Merge ``patch`` into ``document`` and return the resulting root.

    ``overwrite`` updates object keys in place (nested objects are replaced,
    not merged) and replaces the document when either side is not an object.
    """

    match strategy:
        case MergeStrategy.PATCH:
            return apply_patch(document, patch)
        case MergeStrategy.OVERWRITE:
            if isinstance(document, dict) and isinstance(patch, dict):
                document.update(copy.deepcopy(patch))
                return document
            return copy.deepcopy(patch)
    raise MergeStrategyNotImplementedError(strategy.value)


__all__ = ["MergeStrategy", "PatchOperation", "apply_patch", "diff", "merge"]
