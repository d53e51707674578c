"""Parser for dot/bracket path strings.

Supported syntax::

    user.address.city
    items[0].name
    items[-1]
    meta['key.with.dots']
    ["quoted root key"][2]

Only literal keys and literal integer indices are produced. The root
shorthand tokens ``$`` and ``.`` belong to the calling convention and are
recognised by ``is_root_path``, not by ``parse_path``.
"""

from __future__ import annotations

import re

from ..errors import InvalidPathError
from .segments import INDEX_MAX, INDEX_MIN, IndexSegment, KeySegment, Path, PathSegment

ROOT_TOKENS = frozenset({"$", "."})

_INDEX_RE = re.compile(r"[+-]?\d+")
_QUOTES = ("'", '"')


class _PathScanner:
    def __init__(self, path: str) -> None:
        self.path = path
        self.text = path.strip()
        self.pos = 0
        self.segments: list[PathSegment] = []

    def fail(self, reason: str) -> InvalidPathError:
        return InvalidPathError(self.path, reason)

    def scan(self) -> Path:
        text = self.text
        if text.startswith("."):
            raise self.fail("path cannot start with '.'")

        while self.pos < len(text):
            char = text[self.pos]
            if char == ".":
                self._scan_separator()
            elif char == "[":
                self._scan_bracket()
            elif char == "]":
                raise self.fail("unmatched ']'")
            else:
                self._scan_bare_key()
        return tuple(self.segments)

    def _scan_separator(self) -> None:
        text = self.text
        following = self.pos + 1
        if following >= len(text):
            raise self.fail("path cannot end with '.'")
        if text[following] == ".":
            raise self.fail("path cannot contain '..'")
        if text[following] == "[":
            raise self.fail("'[' cannot immediately follow '.'")
        self.pos = following
        self._scan_bare_key()

    def _scan_bare_key(self) -> None:
        text = self.text
        end = self.pos
        while end < len(text) and text[end] not in ".[]":
            end += 1
        if end == self.pos:
            raise self.fail("unmatched ']'")
        self.segments.append(KeySegment(name=text[self.pos : end]))
        self.pos = end

    def _scan_bracket(self) -> None:
        text = self.text
        start = self.pos + 1
        while start < len(text) and text[start].isspace():
            start += 1
        if start < len(text) and text[start] in _QUOTES:
            self._scan_quoted_key(start)
            return

        close = text.find("]", self.pos)
        if close == -1:
            raise self.fail("unmatched '['")
        content = text[self.pos + 1 : close].strip()
        if not content:
            raise self.fail("empty brackets '[]' are not allowed")
        if not _INDEX_RE.fullmatch(content):
            raise self.fail(
                f"bracket content {content!r} is neither a quoted key nor an integer index"
            )
        index = int(content)
        if not INDEX_MIN <= index <= INDEX_MAX:
            raise self.fail(f"array index {content} is out of range")
        self.segments.append(IndexSegment(index=index))
        self.pos = close + 1

    def _scan_quoted_key(self, quote_pos: int) -> None:
        text = self.text
        quote = text[quote_pos]
        end_quote = text.find(quote, quote_pos + 1)
        if end_quote == -1:
            raise self.fail("unmatched '['")
        close = end_quote + 1
        while close < len(text) and text[close].isspace():
            close += 1
        if close >= len(text):
            raise self.fail("unmatched '['")
        if text[close] != "]":
            raise self.fail(f"unexpected {text[close]!r} after quoted key")
        name = text[quote_pos + 1 : end_quote]
        if not name:
            raise self.fail("empty quoted key is not allowed")
        self.segments.append(KeySegment(name=name))
        self.pos = close + 1


def parse_path(path: str) -> Path:
    """Parse ``path`` into segments, raising ``InvalidPathError`` if malformed.

    The empty string parses to the root path ``()``.
    """

    return _PathScanner(path).scan()


def is_valid_path(path: str) -> bool:
    try:
        parse_path(path)
    except InvalidPathError:
        return False
    return True


def normalize_path(path: str) -> str:
    """Validate ``path`` and return it unchanged.

    No canonical form is produced: ``a['b']`` and ``a.b`` stay distinct
    strings even though they parse to the same segments.
    """

    parse_path(path)
    return path


def is_root_path(path: str) -> bool:
    """Return whether ``path`` is one of the whole-document shorthands."""

    return path.strip() in ROOT_TOKENS


__all__ = [
    "ROOT_TOKENS",
    "is_root_path",
    "is_valid_path",
    "normalize_path",
    "parse_path",
]
