"""Logging setup for docpath.

The engine logs through the standard ``logging`` module under the
``docpath`` logger. ``configure_logging`` attaches a rich console handler to
that logger once; records may carry a ``docpath_action_color`` attribute that
colours the leading action word (``set``, ``pop``, ``rollback``...).
"""

from __future__ import annotations

import datetime
import logging
from pathlib import Path

from rich.console import Console
from rich.text import Text

from ..config import DOCPATH_CONFIG

LOGGER_NAME = "docpath"

_LEVEL_STYLES = {
    "DEBUG": "dim",
    "INFO": "cyan",
    "WARNING": "yellow",
    "ERROR": "bold red",
    "CRITICAL": "bold red",
}


def get_logger(name: str | None = None) -> logging.Logger:
    if name is None or name == LOGGER_NAME:
        return logging.getLogger(LOGGER_NAME)
    if not name.startswith(f"{LOGGER_NAME}."):
        name = f"{LOGGER_NAME}.{name}"
    return logging.getLogger(name)


class _DocpathRichConsoleHandler(logging.Handler):
    def __init__(self, level: int = logging.NOTSET) -> None:
        super().__init__(level)
        self._console = Console(stderr=True)

    @staticmethod
    def _format_location(record: logging.LogRecord) -> str:
        return f"[{Path(record.pathname).name}:{record.lineno}]"

    @staticmethod
    def _format_message_text(record: logging.LogRecord) -> Text:
        message = record.getMessage()
        text = Text(message)
        color = getattr(record, "docpath_action_color", None)
        if color:
            action_end = message.find(" ")
            if action_end == -1:
                action_end = len(message)
            text.stylize(color, 0, action_end)
        return text

    def emit(self, record: logging.LogRecord) -> None:
        try:
            timestamp = datetime.datetime.fromtimestamp(record.created).strftime(
                "%H:%M:%S"
            )
            line = Text.assemble(
                (timestamp, "dim"),
                " ",
                (f"[{record.levelname}]", _LEVEL_STYLES.get(record.levelname, "")),
                " ",
                (self._format_location(record), "dim"),
                " ",
                self._format_message_text(record),
            )
            self._console.print(line, soft_wrap=True, highlight=False)
        except Exception:
            self.handleError(record)


def _is_docpath_handler(handler: logging.Handler) -> bool:
    return getattr(handler, "_docpath_handler", False)


def configure_logging(level: int | str | None = None) -> logging.Logger:
    """Attach the console handler to the ``docpath`` logger (once) and set its level."""

    logger = get_logger()
    logger.setLevel(level if level is not None else DOCPATH_CONFIG.log_level)
    if any(_is_docpath_handler(h) for h in logger.handlers):
        return logger

    if DOCPATH_CONFIG.rich_logging:
        handler: logging.Handler = _DocpathRichConsoleHandler()
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
        )
    handler._docpath_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    return logger


__all__ = ["LOGGER_NAME", "configure_logging", "get_logger"]
