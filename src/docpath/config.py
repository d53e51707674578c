"""Process-wide settings read from ``DOCPATH_*`` environment variables."""

from __future__ import annotations

import os

from .options import SetOptions

_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off"})


def _env_flag(name: str, *, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"{name} must be a boolean flag, got {raw!r}")


class DocpathConfig:
    def __init__(self) -> None:
        self.log_level = os.getenv("DOCPATH_LOG_LEVEL", "WARNING").strip().upper()
        self.rich_logging = _env_flag("DOCPATH_RICH_LOGGING", default=True)
        self.create_path = _env_flag("DOCPATH_CREATE_PATH", default=True)
        self.overwrite = _env_flag("DOCPATH_OVERWRITE", default=True)

    def set_options(self) -> SetOptions:
        """Default write policy for ``JsonDocument.set``."""

        return SetOptions(create_path=self.create_path, overwrite=self.overwrite)


DOCPATH_CONFIG = DocpathConfig()


__all__ = ["DOCPATH_CONFIG", "DocpathConfig"]
