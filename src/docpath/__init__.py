"""
docpath: address and mutate locations inside JSON-like documents.

Path strings such as ``user.address.city`` or ``items[-1]`` are parsed into
typed segments and evaluated client-side against an in-memory document.
This package uses a src-layout. Import the package as `docpath`.
"""

from importlib.metadata import version

__version__ = version("docpath")

from .config import DOCPATH_CONFIG, DocpathConfig
from .document import (
    JSONValue,
    NodeKind,
    array_append,
    array_insert,
    array_length,
    array_pop,
    array_prepend,
    array_trim,
    delete_value,
    exists,
    find_paths,
    get_size,
    get_type,
    get_value,
    iter_paths,
    kind_of,
    object_keys,
    set_value,
)
from .errors import (
    DocpathError,
    ErrorCode,
    IndexOutOfBoundsError,
    InvalidPathError,
    MergeStrategyNotImplementedError,
    PatchError,
    PathNotFoundError,
    TypeMismatchError,
    UnsupportedSegmentError,
)
from .handle import JsonDocument
from .options import SetOptions
from .patch import MergeStrategy, apply_patch, diff, merge
from .path import (
    IndexSegment,
    KeySegment,
    Path,
    PathSegment,
    format_path,
    is_root_path,
    is_valid_path,
    normalize_path,
    parse_path,
)
from .runtime import configure_logging, get_logger

__all__ = [
    "__version__",
    "DOCPATH_CONFIG",
    "DocpathConfig",
    "DocpathError",
    "ErrorCode",
    "IndexOutOfBoundsError",
    "IndexSegment",
    "InvalidPathError",
    "JSONValue",
    "JsonDocument",
    "KeySegment",
    "MergeStrategy",
    "MergeStrategyNotImplementedError",
    "NodeKind",
    "PatchError",
    "Path",
    "PathNotFoundError",
    "PathSegment",
    "SetOptions",
    "TypeMismatchError",
    "UnsupportedSegmentError",
    "apply_patch",
    "array_append",
    "array_insert",
    "array_length",
    "array_pop",
    "array_prepend",
    "array_trim",
    "configure_logging",
    "delete_value",
    "diff",
    "exists",
    "find_paths",
    "format_path",
    "get_logger",
    "get_size",
    "get_type",
    "get_value",
    "is_root_path",
    "is_valid_path",
    "iter_paths",
    "kind_of",
    "merge",
    "normalize_path",
    "object_keys",
    "parse_path",
    "set_value",
]
