"""Tests for setup_logging."""

import logging

import pytest

from meetup_api.app.core.logging_config import (
    CONSOLE_HANDLER,
    FILE_HANDLER,
    UVICORN_LOGGERS,
    setup_logging,
)


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    level = root.level
    yield root
    for handler in list(root.handlers):
        if handler.get_name() in (CONSOLE_HANDLER, FILE_HANDLER):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


def own_handlers(root):
    return [h.get_name() for h in root.handlers if h.get_name() in (CONSOLE_HANDLER, FILE_HANDLER)]


def test_sets_level(root_logger):
    setup_logging("debug")
    assert root_logger.level == logging.DEBUG
    setup_logging("nonsense")
    assert root_logger.level == logging.INFO


def test_console_handler_added_once(root_logger):
    setup_logging()
    setup_logging()
    assert own_handlers(root_logger) == [CONSOLE_HANDLER]


def test_writes_log_file(root_logger, tmp_path):
    logfile = tmp_path / "meetup_api.log"
    setup_logging("INFO", str(logfile))
    logging.getLogger("meetup_api.test").info("hello from the service")
    for handler in root_logger.handlers:
        handler.flush()
    assert "[INFO] meetup_api.test: hello from the service" in logfile.read_text(encoding="utf-8")


def test_uvicorn_loggers_propagate(root_logger):
    access = logging.getLogger("uvicorn.access")
    access.addHandler(logging.NullHandler())
    access.propagate = False
    setup_logging()
    for name in UVICORN_LOGGERS:
        assert logging.getLogger(name).handlers == []
        assert logging.getLogger(name).propagate is True
