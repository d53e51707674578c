"""Render parsed paths back to path strings."""

from __future__ import annotations

from .segments import (
    FilterSegment,
    IndexSegment,
    KeySegment,
    Path,
    PathSegment,
    RecursiveDescentSegment,
    SliceSegment,
    WildcardSegment,
)

_BARE_KEY_FORBIDDEN = frozenset(".[]'\"")


def is_addressable_key(name: str) -> bool:
    """Return whether some path string parses to ``KeySegment(name=name)``.

    The grammar has no escapes, so the empty key and keys holding both quote
    characters cannot be written.
    """

    return bool(name) and not ("'" in name and '"' in name)


def quote_key(name: str) -> str:
    """Return ``name`` as a bare key when possible, else bracket-quoted.

    Keys rejected by ``is_addressable_key`` are still rendered, for messages,
    but the result does not parse back.
    """

    if name and name == name.strip() and not _BARE_KEY_FORBIDDEN & set(name):
        return name
    quote = '"' if "'" in name else "'"
    return f"[{quote}{name}{quote}]"


def _format_slice(segment: SliceSegment) -> str:
    parts = [
        "" if segment.start is None else str(segment.start),
        "" if segment.stop is None else str(segment.stop),
    ]
    if segment.step is not None:
        parts.append(str(segment.step))
    return f"[{':'.join(parts)}]"


def format_segment(segment: PathSegment) -> str:
    match segment:
        case KeySegment(name=name):
            return quote_key(name)
        case IndexSegment(index=index):
            return f"[{index}]"
        case WildcardSegment():
            return "[*]"
        case SliceSegment():
            return _format_slice(segment)
        case FilterSegment(expression=expression):
            return f"[?({expression})]"
        case RecursiveDescentSegment(name=name):
            return f"..{name or '*'}"
    raise TypeError(f"unexpected path segment {segment!r}")


def format_path(path: Path) -> str:
    """Render ``path`` as a string that ``parse_path`` maps back to ``path``
    when every key is addressable (see ``is_addressable_key``).

    Keys are joined with ``.`` unless they are rendered in brackets; the root
    path renders as the empty string.
    """

    rendered = ""
    for segment in path:
        text = format_segment(segment)
        if rendered and isinstance(segment, KeySegment) and not text.startswith("["):
            rendered += "."
        rendered += text
    return rendered


__all__ = ["format_path", "format_segment", "is_addressable_key", "quote_key"]
