"""Pytest configuration and shared fixtures for the book2html test suite."""

import logging
from pathlib import Path

import pytest


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - parser, pipeline and serializer together")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture
def book_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Provide an empty working directory with no configuration files.

    Yields
    ------
    Path
        Directory that is also the current working directory.

    """
    monkeypatch.chdir(tmp_path)
    for key in ("BOOK2HTML_CURLY_QUOTES", "BOOK2HTML_BASE_PATH", "BOOK2HTML_HEADER_LINKS", "BOOK2HTML_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    return tmp_path


@pytest.fixture
def chapter_source() -> str:
    """Markdown source exercising links, quotes and code fences."""
    return (
        "# 'Getting' started\n"
        "\n"
        "Read [the intro](intro.md#why) and \"the rest\".\n"
        "\n"
        "```rust, no_run\n"
        "let s = \"it's\";\n"
        "```\n"
    )


@pytest.fixture
def restore_package_logger():
    """Restore the book2html logger after a test reconfigures it.

    ``configure_logging`` replaces the package logger's handlers and stops
    propagation, which would otherwise leak into later tests.
    """
    package_logger = logging.getLogger("book2html")
    handlers = package_logger.handlers[:]
    level = package_logger.level
    propagate = package_logger.propagate
    yield package_logger
    for handler in package_logger.handlers:
        if handler not in handlers:
            handler.close()
    package_logger.handlers[:] = handlers
    package_logger.setLevel(level)
    package_logger.propagate = propagate
