import logging
from collections.abc import Iterator

import pytest

from docpath.config import DOCPATH_CONFIG
from docpath.document import array_pop, set_value
from docpath.errors import IndexOutOfBoundsError
from docpath.path import parse_path
from docpath.runtime.logging import (
    LOGGER_NAME,
    _DocpathRichConsoleHandler,
    configure_logging,
    get_logger,
)


@pytest.fixture
def clean_logger() -> Iterator[logging.Logger]:
    logger = logging.getLogger(LOGGER_NAME)
    handlers = list(logger.handlers)
    level = logger.level
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)


def _docpath_handlers(logger: logging.Logger) -> list[logging.Handler]:
    return [h for h in logger.handlers if getattr(h, "_docpath_handler", False)]


def test_get_logger_nests_under_package_logger() -> None:
    assert get_logger().name == "docpath"
    assert get_logger("docpath").name == "docpath"
    assert get_logger("docpath.document").name == "docpath.document"
    assert get_logger("client").name == "docpath.client"


def test_configure_logging_rich_handler_is_idempotent(docpath_env, clean_logger) -> None:
    configure_logging()
    configure_logging()

    handlers = _docpath_handlers(clean_logger)
    assert len(handlers) == 1
    assert isinstance(handlers[0], _DocpathRichConsoleHandler)
    assert clean_logger.level == logging.DEBUG


def test_configure_logging_plain_handler(docpath_env, clean_logger) -> None:
    DOCPATH_CONFIG.rich_logging = False

    configure_logging("INFO")

    handlers = _docpath_handlers(clean_logger)
    assert len(handlers) == 1
    assert not isinstance(handlers[0], _DocpathRichConsoleHandler)
    assert clean_logger.level == logging.INFO


def test_failed_write_logs_rollback(caplog) -> None:
    caplog.set_level(logging.DEBUG, logger=LOGGER_NAME)

    with pytest.raises(IndexOutOfBoundsError):
        set_value({}, parse_path("a.b[-1]"), 1)

    records = [r for r in caplog.records if r.getMessage().startswith("rollback")]
    assert len(records) == 1
    assert records[0].getMessage() == "rollback a.b[-1]: undid 4 change(s)"
    assert records[0].docpath_action_color == "red"


def test_created_containers_are_logged(caplog) -> None:
    caplog.set_level(logging.DEBUG, logger=LOGGER_NAME)

    set_value({}, parse_path("a.b"), 1)
    array_pop({"x": [1]}, parse_path("x"))

    messages = [r.getMessage() for r in caplog.records]
    assert "set a.b: created 1 container(s)" in messages
    assert "pop x: index 0" in messages


def test_rich_console_colors_only_action_token() -> None:
    record = logging.LogRecord(
        name="docpath.document.mutator",
        level=logging.DEBUG,
        pathname=__file__,
        lineno=1,
        msg="set %s: created %d container(s)",
        args=("a.b", 1),
        exc_info=None,
    )
    record.docpath_action_color = "green"

    text = _DocpathRichConsoleHandler._format_message_text(record)
    assert text.plain == "set a.b: created 1 container(s)"
    assert len(text.spans) == 1
    span = text.spans[0]
    assert span.start == 0
    assert span.end == len("set")
    assert str(span.style) == "green"


def test_rich_console_leaves_uncolored_records_plain() -> None:
    record = logging.LogRecord(
        name="docpath",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="hello",
        args=(),
        exc_info=None,
    )

    assert _DocpathRichConsoleHandler._format_message_text(record).spans == []


def test_rich_console_wraps_location_in_brackets() -> None:
    record = logging.LogRecord(
        name="docpath",
        level=logging.INFO,
        pathname=__file__,
        lineno=123,
        msg="hello",
        args=(),
        exc_info=None,
    )
    assert _DocpathRichConsoleHandler._format_location(record) == "[test_logger.py:123]"
