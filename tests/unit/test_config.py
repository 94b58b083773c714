#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_config.py
"""Unit tests for configuration loading and discovery.

Tests cover:
- Reading [output.html] from book.toml
- Reading [tool.book2html] from pyproject.toml
- Error reporting for missing, malformed and invalid files
- Searching parent directories for a configuration file

"""

from pathlib import Path

import pytest

from book2html.config import discover_config_file, load_config
from book2html.exceptions import ConfigurationError


def _write(path: Path, content: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


@pytest.mark.unit
class TestLoadBookToml:
    """Tests for loading book.toml files."""

    def test_known_keys_are_loaded(self, tmp_path):
        """Test kebab-case keys map onto render option names."""
        path = _write(
            tmp_path / "book.toml",
            '[book]\ntitle = "Example"\n\n[output.html]\ncurly-quotes = true\nsite-base = "guide"\n',
        )
        assert load_config(path) == {"curly_quotes": True, "base_path": "guide"}

    def test_other_html_keys_are_ignored(self, tmp_path):
        """Test unrelated HTML output settings do not cause errors."""
        path = _write(
            tmp_path / "book.toml",
            '[output.html]\ndefault-theme = "light"\nadditional-css = ["x.css"]\nheader-links = true\n',
        )
        assert load_config(path) == {"header_links": True}

    def test_missing_section(self, tmp_path):
        """Test a book without an HTML section configures nothing."""
        path = _write(tmp_path / "book.toml", '[book]\ntitle = "Example"\n')
        assert load_config(path) == {}

    def test_section_must_be_a_table(self, tmp_path):
        """Test a scalar where a table is expected is an error."""
        path = _write(tmp_path / "book.toml", '[output]\nhtml = "yes"\n')
        with pytest.raises(ConfigurationError, match="must be a table") as exc_info:
            load_config(path)
        assert exc_info.value.config_path == str(path)

    def test_invalid_toml(self, tmp_path):
        """Test syntax errors are reported with the original error attached."""
        path = _write(tmp_path / "book.toml", "[output.html\ncurly-quotes = \n")
        with pytest.raises(ConfigurationError, match="Invalid TOML") as exc_info:
            load_config(path)
        assert exc_info.value.original_error is not None

    def test_missing_file(self, tmp_path):
        """Test a missing file is a configuration error."""
        with pytest.raises(ConfigurationError, match="not found"):
            load_config(tmp_path / "nope.toml")


@pytest.mark.unit
class TestLoadPyproject:
    """Tests for loading pyproject.toml files."""

    def test_tool_section(self, tmp_path):
        """Test the [tool.book2html] table is read."""
        path = _write(
            tmp_path / "pyproject.toml",
            '[project]\nname = "x"\n\n[tool.book2html]\nbase-path = "part1"\nheader-links = true\n',
        )
        assert load_config(path) == {"base_path": "part1", "header_links": True}

    def test_unknown_key(self, tmp_path):
        """Test the tool table only accepts render options."""
        path = _write(tmp_path / "pyproject.toml", "[tool.book2html]\nsmart-dashes = true\n")
        with pytest.raises(ConfigurationError, match="smart-dashes"):
            load_config(path)

    def test_no_tool_section(self, tmp_path):
        """Test a pyproject without the tool table configures nothing."""
        path = _write(tmp_path / "pyproject.toml", '[project]\nname = "x"\n')
        assert load_config(path) == {}


@pytest.mark.unit
class TestDiscoverConfigFile:
    """Tests for discover_config_file."""

    def test_nothing_found(self, tmp_path):
        """Test None is returned when no directory has a usable file."""
        start = tmp_path / "a" / "b"
        start.mkdir(parents=True)
        assert discover_config_file(start) is None

    def test_book_toml_in_parent(self, tmp_path):
        """Test the search walks up to the book root."""
        book = _write(tmp_path / "book.toml", "[output.html]\n")
        start = tmp_path / "src" / "part1"
        start.mkdir(parents=True)
        assert discover_config_file(start) == book.resolve()

    def test_book_toml_wins_over_pyproject(self, tmp_path):
        """Test book.toml is preferred within the same directory."""
        book = _write(tmp_path / "book.toml", "[output.html]\n")
        _write(tmp_path / "pyproject.toml", "[tool.book2html]\ncurly-quotes = true\n")
        assert discover_config_file(tmp_path) == book.resolve()

    def test_pyproject_needs_tool_section(self, tmp_path):
        """Test a pyproject without the tool table is skipped."""
        outer = _write(tmp_path / "pyproject.toml", "[tool.book2html]\ncurly-quotes = true\n")
        _write(tmp_path / "docs" / "pyproject.toml", '[project]\nname = "x"\n')
        assert discover_config_file(tmp_path / "docs") == outer.resolve()

    def test_broken_pyproject_is_skipped(self, tmp_path):
        """Test an unparsable pyproject does not stop the search."""
        book = _write(tmp_path / "book.toml", "[output.html]\n")
        _write(tmp_path / "inner" / "pyproject.toml", "[tool.book2html\n")
        assert discover_config_file(tmp_path / "inner") == book.resolve()
