from .format import format_path, format_segment, is_addressable_key, quote_key
from .parser import ROOT_TOKENS, is_root_path, is_valid_path, normalize_path, parse_path
from .segments import (
    INDEX_MAX,
    INDEX_MIN,
    ROOT,
    FilterSegment,
    IndexSegment,
    KeySegment,
    Path,
    PathSegment,
    RecursiveDescentSegment,
    SliceSegment,
    WildcardSegment,
    dump_path,
    is_literal,
    load_path,
)

__all__ = [
    "INDEX_MAX",
    "INDEX_MIN",
    "ROOT",
    "ROOT_TOKENS",
    "FilterSegment",
    "IndexSegment",
    "KeySegment",
    "Path",
    "PathSegment",
    "RecursiveDescentSegment",
    "SliceSegment",
    "WildcardSegment",
    "dump_path",
    "format_path",
    "format_segment",
    "is_addressable_key",
    "is_literal",
    "is_root_path",
    "is_valid_path",
    "load_path",
    "normalize_path",
    "parse_path",
    "quote_key",
]
