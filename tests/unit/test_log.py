"""Tests for logging utilities."""

import json
import logging

import pytest

from translit.models import Ending
from translit.utils.log import JSONFormatter, log_with_context, setup_logging


@pytest.fixture
def restore_root_logger():
    """Keep setup_logging from leaking handlers into other tests."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_json_formatter_keeps_cyrillic():
    record = logging.LogRecord("translit", logging.INFO, __file__, 1, "Юлия -> Yuliya", None, None)
    record.extra_fields = {"schema": "wikipedia"}

    data = json.loads(JSONFormatter().format(record))

    assert data["message"] == "Юлия -> Yuliya"
    assert data["schema"] == "wikipedia"
    assert data["level"] == "INFO"
    assert data["timestamp"].endswith("Z")
    assert "Юлия" in JSONFormatter().format(record)


def test_setup_logging_writes_json_file(temp_dir, restore_root_logger):
    log_file = temp_dir / "logs" / "translit.log"
    logger = setup_logging(level="DEBUG", format_type="pretty", log_file=log_file)

    log_with_context(logger, "info", "Loaded schema", schema="wikipedia")
    for handler in logger.handlers:
        handler.flush()

    lines = log_file.read_text(encoding="utf-8").splitlines()
    record = json.loads(lines[-1])
    assert record["message"] == "Loaded schema"
    assert record["schema"] == "wikipedia"


def test_setup_logging_rejects_unknown_format(restore_root_logger):
    with pytest.raises(ValueError):
        setup_logging(format_type="xml")


def test_log_with_context_expands_dataclasses(temp_dir, restore_root_logger):
    log_file = temp_dir / "translit.log"
    logger = setup_logging(level="INFO", log_file=log_file)

    log_with_context(logger, "info", "Checked", ending=Ending(translation="y", start=5))
    for handler in logger.handlers:
        handler.flush()

    record = json.loads(log_file.read_text(encoding="utf-8").splitlines()[-1])
    assert record["ending"] == {"translation": "y", "start": 5}
