"""Pytest fixtures for translit tests."""

import json
import logging
import tempfile
from pathlib import Path

import pytest

from translit.models import Schema
from translit.repository import RULES_DIR, SchemaRepository


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def test_logger() -> logging.Logger:
    """Create a test logger."""
    logger = logging.getLogger("translit_test")
    logger.setLevel(logging.DEBUG)
    return logger


@pytest.fixture
def repository(test_logger):
    """Repository of bundled schemas only."""
    return SchemaRepository(logger=test_logger)


@pytest.fixture
def wikipedia(repository):
    """Bundled Wikipedia Cyrillic-to-Latin schema."""
    return repository.load("wikipedia")


@pytest.fixture
def context_schema():
    """Hand-built schema with all four rule tables populated."""
    return Schema(
        name="context",
        description="Rule precedence fixture",
        mapping={"a": "1", "b": "2", "c": "3", "n": "n"},
        prev_mapping={"ca": "p"},
        next_mapping={"ab": "x", "n": "ng"},
        ending_mapping={"q": "one", "zq": "two", "zw": "three"},
    )


@pytest.fixture
def sample_definition():
    """Minimal valid schema definition record."""
    return {
        "name": "sample",
        "description": "Sample schema",
        "url": "https://example.org/sample",
        "mapping": {"а": "a", "б": "b"},
        "samples": [["аб", "ab"]],
    }


@pytest.fixture
def rules_dir(temp_dir, sample_definition):
    """Directory holding one user-supplied definition."""
    directory = temp_dir / "rules"
    directory.mkdir()
    with (directory / "sample.json").open("w", encoding="utf-8") as f:
        json.dump(sample_definition, f, ensure_ascii=False)
    return directory


@pytest.fixture
def bundled_rules_dir():
    """Path to bundled rule definitions."""
    return RULES_DIR
