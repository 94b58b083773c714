#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/book2html/cli.py
"""Command-line interface for book2html.

Renders one markdown chapter to an HTML fragment, ready to be placed into a
page template.

Examples
--------
Render to stdout:
    $ book2html chapter_1.md

Render a nested chapter with curly quotes into a file:
    $ book2html guide/install.md --base-path guide --curly-quotes -o install.html

Read from stdin:
    $ cat chapter.md | book2html -

Use environment variables for defaults:
    $ export BOOK2HTML_CURLY_QUOTES=true
    $ book2html chapter.md

Settings are resolved in this order: command line flags, then
``BOOK2HTML_*`` environment variables, then the configuration file given
with ``--config`` or discovered next to the current directory (``book.toml``
``[output.html]`` or ``pyproject.toml`` ``[tool.book2html]``).
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from book2html import render
from book2html.config import discover_config_file, load_config
from book2html.constants import DEFAULT_LOG_LEVEL, ENV_VAR_PREFIX
from book2html.exceptions import Book2HtmlError, InputError, OutputWriteError
from book2html.logging_utils import configure_logging, log_exception_chain
from book2html.options import RenderOptions

logger = logging.getLogger(__name__)

RENDER_OPTION_DESTS = ("curly_quotes", "base_path", "header_links")

TRUE_VALUES = ("true", "1", "yes", "on")


def get_env_var_value(key: str) -> Optional[str]:
    """Get environment variable with BOOK2HTML_ prefix.

    Parameters
    ----------
    key : str
        The parameter name (e.g., 'curly_quotes', 'base_path')

    Returns
    -------
    Optional[str]
        Environment variable value or None if not set
    """
    env_key = f"{ENV_VAR_PREFIX}{key.upper().replace('-', '_')}"
    return os.environ.get(env_key)


def apply_env_vars_to_parser(parser: argparse.ArgumentParser) -> None:
    """Apply environment variables as defaults to parser arguments.

    CLI arguments still take precedence over environment variables.

    Parameters
    ----------
    parser : argparse.ArgumentParser
        The argument parser to modify
    """
    for action in parser._actions:
        if not action.dest or action.dest in ("help", "version", "input"):
            continue

        env_value = get_env_var_value(action.dest)
        if env_value is None:
            continue

        if isinstance(action, argparse.BooleanOptionalAction) or action.__class__.__name__ == "_StoreTrueAction":
            action.default = env_value.lower() in TRUE_VALUES
        elif action.choices:
            if env_value in action.choices:
                action.default = env_value
            else:
                logger.warning(
                    f"Invalid choice for {ENV_VAR_PREFIX}{action.dest.upper()}: {env_value}. "
                    f"Choices: {list(action.choices)}"
                )
        else:
            action.default = env_value


def _get_version() -> str:
    """Get the version of the book2html package."""
    from book2html import __version__

    return __version__


def create_parser() -> argparse.ArgumentParser:
    """Create the command line argument parser."""
    parser = argparse.ArgumentParser(
        prog="book2html",
        description="Render a book chapter's markdown into an HTML fragment.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("input", help="Markdown file to render, or '-' to read stdin")
    parser.add_argument("-o", "--out", help="Write HTML to this file instead of stdout")
    parser.add_argument(
        "--curly-quotes",
        dest="curly_quotes",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Convert straight quotes to curly quotes outside code",
    )
    parser.add_argument(
        "--base-path",
        dest="base_path",
        default=None,
        help="Output-relative prefix for rewritten relative links",
    )
    parser.add_argument(
        "--header-links",
        dest="header_links",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Add ids and self-links to headings",
    )
    parser.add_argument("--config", help="Configuration file (book.toml or pyproject.toml)")
    parser.add_argument(
        "--log-level",
        dest="log_level",
        default=DEFAULT_LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: %(default)s)",
    )
    parser.add_argument("--log-file", dest="log_file", help="Also write log output to this file")
    parser.add_argument("--trace", action="store_true", help="Include timestamps and logger names in log output")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_get_version()}")

    apply_env_vars_to_parser(parser)
    return parser


def build_render_options(args: argparse.Namespace) -> RenderOptions:
    """Merge command line values over configuration file values.

    Parameters
    ----------
    args : argparse.Namespace
        Parsed arguments; ``None`` means "not given"

    Returns
    -------
    RenderOptions
        The resolved options

    """
    values: Dict[str, Any] = {}

    config_path = Path(args.config) if args.config else discover_config_file()
    if config_path is not None:
        logger.info("Using configuration from %s", config_path)
        values.update(load_config(config_path))

    for dest in RENDER_OPTION_DESTS:
        value = getattr(args, dest)
        if value is not None:
            values[dest] = value

    return RenderOptions.from_mapping(values)


def read_input(source: str) -> str:
    """Read markdown from a file path, or from stdin for ``-``."""
    if source == "-":
        return sys.stdin.read()

    path = Path(source)
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        raise InputError(f"Cannot read input file {path}: {e}", input_path=str(path), original_error=e) from e
    except UnicodeDecodeError as e:
        raise InputError(f"Input file {path} is not valid UTF-8", input_path=str(path), original_error=e) from e


def main(argv: Optional[List[str]] = None) -> int:
    """Run the command line tool.

    Parameters
    ----------
    argv : list of str, optional
        Arguments, defaults to ``sys.argv[1:]``

    Returns
    -------
    int
        Process exit code: 0 on success, 1 on a book2html error

    """
    parser = create_parser()
    args = parser.parse_args(argv)

    configure_logging(args.log_level, log_file=args.log_file, trace_mode=args.trace)

    try:
        options = build_render_options(args)
        html = render(read_input(args.input), options)

        if args.out:
            out_path = Path(args.out)
            try:
                out_path.write_text(html, encoding="utf-8")
            except OSError as e:
                raise OutputWriteError(
                    f"Cannot write output file {out_path}: {e}", output_path=str(out_path), original_error=e
                ) from e
            logger.info("Wrote %s", out_path)
        else:
            sys.stdout.write(html)
    except Book2HtmlError as e:
        log_exception_chain(e, logger)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
