#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/book2html/pipeline.py
"""Markdown to HTML rendering pipeline.

This module wires the pieces together:

- the mistune parser, with the table, footnotes, strikethrough and task list
  plugins and nothing else,
- the event transform stages, chained lazily in a fixed order (fence info
  cleanup, then link rewriting, then quote curling),
- the mistune HTML serializer, reached through ``BookHtmlRenderer``.

Every call builds its own parser and its own quote converter, so rendering
different chapters from different threads needs no coordination.

Examples
--------
Plain rendering:

    >>> render_markdown("[next](chapter_2.md)")
    '<p><a href="chapter_2.html">next</a></p>\\n'

A chapter rendered into a subdirectory, with curly quotes:

    >>> render_markdown_with_base("'Hi' [back](index.md#top)", True, "part1")
    '<p>‘Hi’ <a href="part1/index.html#top">back</a></p>\\n'

"""

from __future__ import annotations

import logging
from functools import partial
from typing import Iterable, Iterator

import mistune

from book2html.constants import ENV_RENDER_OPTIONS, MARKDOWN_PLUGINS
from book2html.events import Event
from book2html.options import RenderOptions
from book2html.renderer import BookHtmlRenderer
from book2html.transforms import QuoteConverter, adjust_links, clean_codeblock_headers

logger = logging.getLogger(__name__)


def transform_events(events: Iterable[Event], options: RenderOptions) -> Iterator[Event]:
    """Chain the transform stages over a render event stream.

    Nothing is evaluated until the returned iterator is consumed, and each
    event passes through all stages before the next one is read.

    Parameters
    ----------
    events : iterable of Event
        Flattened parser output
    options : RenderOptions
        Supplies the quote flag and the link base path

    Returns
    -------
    iterator of Event
        The transformed stream, with the same nesting as the input

    """
    converter = QuoteConverter(options.curly_quotes)

    stream: Iterator[Event] = map(clean_codeblock_headers, events)
    stream = map(partial(adjust_links, base=options.base_path), stream)
    stream = map(converter.convert, stream)
    return stream


def new_markdown_parser() -> mistune.Markdown:
    """Create a mistune parser wired to the book transform pipeline.

    Returns
    -------
    mistune.Markdown
        A parser using ``BookHtmlRenderer`` and exactly the table,
        footnotes, strikethrough and task list plugins

    """
    return mistune.create_markdown(
        escape=False,
        renderer=BookHtmlRenderer(transform=transform_events),
        plugins=list(MARKDOWN_PLUGINS),
    )


def render(text: str, options: RenderOptions | None = None) -> str:
    """Render markdown to an HTML fragment.

    Parameters
    ----------
    text : str
        Markdown source of one chapter
    options : RenderOptions, optional
        Rendering options; the defaults keep quotes straight and use no
        base path

    Returns
    -------
    str
        The HTML fragment, without any page shell

    """
    options = options or RenderOptions()
    logger.debug(
        "Rendering %d characters (curly_quotes=%s, base_path=%r, header_links=%s)",
        len(text),
        options.curly_quotes,
        options.base_path,
        options.header_links,
    )

    md = new_markdown_parser()
    state = md.block.state_cls()
    state.env[ENV_RENDER_OPTIONS] = options

    html, _ = md.parse(text, state)
    return html  # type: ignore[return-value]


def render_markdown(text: str, curly_quotes: bool = False) -> str:
    """Render markdown to HTML with relative links kept in the same directory."""
    return render_markdown_with_base(text, curly_quotes, "")


def render_markdown_with_base(text: str, curly_quotes: bool, base: str) -> str:
    """Render markdown to HTML, prefixing rewritten relative links with ``base``.

    Parameters
    ----------
    text : str
        Markdown source
    curly_quotes : bool
        Convert straight quotes to curly quotes outside code
    base : str
        Output-relative path prefix for relative links, ``""`` for none

    Returns
    -------
    str
        The HTML fragment

    """
    return render(text, RenderOptions(curly_quotes=curly_quotes, base_path=base))


__all__ = [
    "transform_events",
    "new_markdown_parser",
    "render",
    "render_markdown",
    "render_markdown_with_base",
]
