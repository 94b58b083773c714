#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Configuration file discovery and loading for book2html.

Two sources are understood:

- a book's ``book.toml``, from which the ``[output.html]`` table is read.
  Only the keys book2html knows are taken; the many other keys an HTML
  book configuration carries (themes, search, ...) are ignored.
- a ``pyproject.toml`` with a ``[tool.book2html]`` table. Every key there
  must be a render option.

Keys are written in kebab-case in both files and returned in snake_case,
ready for ``RenderOptions.from_mapping``.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]
from typing import Any, Dict, Optional

from book2html.constants import BOOK_CONFIG_FILENAME, PYPROJECT_FILENAME
from book2html.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

# Keys of book.toml's [output.html] table and the render options they set
BOOK_HTML_KEYS = {
    "curly-quotes": "curly_quotes",
    "base-path": "base_path",
    "site-base": "base_path",
    "header-links": "header_links",
}

TOOL_KEYS = {
    "curly-quotes": "curly_quotes",
    "base-path": "base_path",
    "header-links": "header_links",
}


def _read_toml(path: Path) -> Dict[str, Any]:
    """Read a TOML file, translating failures into ConfigurationError."""
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(f"Invalid TOML in {path}: {e}", config_path=str(path), original_error=e) from e
    except OSError as e:
        raise ConfigurationError(f"Cannot read config file {path}: {e}", config_path=str(path), original_error=e) from e


def _table(data: Dict[str, Any], keys: tuple[str, ...], path: Path) -> Dict[str, Any]:
    """Walk nested tables, returning an empty dict when any level is missing."""
    current: Any = data
    for key in keys:
        if not isinstance(current, dict) or key not in current:
            return {}
        current = current[key]

    if not isinstance(current, dict):
        dotted = ".".join(keys)
        raise ConfigurationError(
            f"[{dotted}] section in {path} must be a table, got {type(current).__name__}", config_path=str(path)
        )
    return current


def _load_book_html_section(path: Path) -> Dict[str, Any]:
    """Load render options from the [output.html] table of a book.toml."""
    section = _table(_read_toml(path), ("output", "html"), path)

    config: Dict[str, Any] = {}
    for key, value in section.items():
        option = BOOK_HTML_KEYS.get(key)
        if option is None:
            logger.debug("Ignoring [output.html] key %r in %s", key, path)
            continue
        config[option] = value
    return config


def _load_pyproject_section(path: Path) -> Dict[str, Any]:
    """Load render options from the [tool.book2html] table of a pyproject.toml."""
    section = _table(_read_toml(path), ("tool", "book2html"), path)

    config: Dict[str, Any] = {}
    for key, value in section.items():
        option = TOOL_KEYS.get(key)
        if option is None:
            raise ConfigurationError(f"Unknown key {key!r} in [tool.book2html] of {path}", config_path=str(path))
        config[option] = value
    return config


def load_config(config_path: str | Path) -> Dict[str, Any]:
    """Load render options from a configuration file.

    Parameters
    ----------
    config_path : str or Path
        A ``book.toml``, a ``pyproject.toml`` or any other TOML file laid
        out like one of them

    Returns
    -------
    dict
        Render option names mapped to configured values

    Raises
    ------
    ConfigurationError
        If the file is missing, is not valid TOML, or holds invalid sections

    """
    path = Path(config_path)
    if not path.is_file():
        raise ConfigurationError(f"Config file not found: {path}", config_path=str(path))

    if path.name == PYPROJECT_FILENAME:
        config = _load_pyproject_section(path)
    else:
        config = _load_book_html_section(path)

    logger.debug("Loaded %d option(s) from %s", len(config), path)
    return config


def discover_config_file(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find the nearest configuration file, searching parent directories.

    In each directory a ``book.toml`` wins over a ``pyproject.toml``, and a
    ``pyproject.toml`` only counts when it has a ``[tool.book2html]`` table.

    Parameters
    ----------
    start_dir : Path, optional
        Directory to start from, defaults to the current working directory

    Returns
    -------
    Path or None
        The configuration file found, or None

    """
    current = (start_dir or Path.cwd()).resolve()

    while True:
        book_path = current / BOOK_CONFIG_FILENAME
        if book_path.is_file():
            return book_path

        pyproject_path = current / PYPROJECT_FILENAME
        if pyproject_path.is_file():
            try:
                if _table(_read_toml(pyproject_path), ("tool", "book2html"), pyproject_path):
                    return pyproject_path
            except ConfigurationError as e:
                logger.debug("Skipping unusable %s: %s", pyproject_path, e)

        parent = current.parent
        if parent == current:
            return None
        current = parent


__all__ = ["load_config", "discover_config_file"]
