"""Error taxonomy for path parsing and document navigation."""

from __future__ import annotations

from enum import IntEnum


class ErrorCode(IntEnum):
    INVALID_PATH = 1001
    PATH_NOT_FOUND = 1002
    TYPE_MISMATCH = 1003
    INDEX_OUT_OF_BOUNDS = 6002
    PATCH_FAILED = 6003
    NOT_IMPLEMENTED = 9001


class DocpathError(Exception):
    """Base class for every error raised by docpath."""

    code: ErrorCode

    def __init__(self, message: str, code: ErrorCode) -> None:
        super().__init__(message)
        self.code = code


class InvalidPathError(DocpathError):
    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Invalid path {path!r}: {reason}", ErrorCode.INVALID_PATH)
        self.path = path
        self.reason = reason


class UnsupportedSegmentError(InvalidPathError):
    """Raised when a path holds a segment the engine cannot evaluate."""

    def __init__(self, path: str, segment: str) -> None:
        super().__init__(path, f"segment {segment} is not supported")
        self.segment = segment


class PathNotFoundError(DocpathError):
    def __init__(self, path: str, detail: str | None = None) -> None:
        message = f"Path not found: {path!r}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message, ErrorCode.PATH_NOT_FOUND)
        self.path = path
        self.detail = detail


class TypeMismatchError(DocpathError):
    def __init__(self, path: str, expected: str, actual: str) -> None:
        super().__init__(
            f"Type mismatch at {path!r}: expected {expected}, got {actual}",
            ErrorCode.TYPE_MISMATCH,
        )
        self.path = path
        self.expected = expected
        self.actual = actual


class IndexOutOfBoundsError(DocpathError):
    """Index outside an array, reported with the index as written."""

    def __init__(self, index: int, length: int, path: str | None = None) -> None:
        message = f"Index out of bounds: index {index} on array of size {length}"
        if path is not None:
            message = f"{message} at {path!r}"
        super().__init__(message, ErrorCode.INDEX_OUT_OF_BOUNDS)
        self.index = index
        self.length = length
        self.path = path


class PatchError(DocpathError):
    def __init__(self, message: str) -> None:
        super().__init__(f"Patch failed: {message}", ErrorCode.PATCH_FAILED)


class MergeStrategyNotImplementedError(DocpathError, NotImplementedError):
    def __init__(self, strategy: str) -> None:
        super().__init__(
            f"merge strategy {strategy!r} is not implemented",
            ErrorCode.NOT_IMPLEMENTED,
        )
        self.strategy = strategy


__all__ = [
    "DocpathError",
    "ErrorCode",
    "IndexOutOfBoundsError",
    "InvalidPathError",
    "MergeStrategyNotImplementedError",
    "PatchError",
    "PathNotFoundError",
    "TypeMismatchError",
    "UnsupportedSegmentError",
]
