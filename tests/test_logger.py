# File: tests/test_logger.py
import logging

import pytest

from site_rag.logger import LOGGER_NAME, configure, init_logging


@pytest.fixture(autouse=True)
def restore_logging():
    yield
    init_logging()


def test_file_handler_receives_records(tmp_path):
    log_file = tmp_path / "site_rag.log"
    lg = configure(level="INFO", log_file=log_file, log_format="%(levelname)s %(message)s")
    lg.info("Ingesting %s", "https://example.com/")
    for handler in lg.handlers:
        handler.flush()

    assert lg.name == LOGGER_NAME
    assert len(lg.handlers) == 2
    assert "INFO Ingesting https://example.com/" in log_file.read_text(encoding="utf-8")


def test_sdk_loggers_quiet_unless_debug():
    configure(level="INFO")
    assert logging.getLogger("httpx").level == logging.WARNING
    configure(level="DEBUG")
    assert logging.getLogger("httpx").level == logging.DEBUG


def test_replace_handlers_false_appends():
    configure(level="INFO")
    lg = configure(level="INFO", replace_handlers=False)
    assert len(lg.handlers) == 2
