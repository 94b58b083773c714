#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/book2html/transforms/quotes.py
"""Straight to curly quote conversion.

``convert_quotes_to_curly`` works on one text run. A quote opens when the
character before it is whitespace and closes otherwise. The start of a run
counts as whitespace, and the run boundary resets that state: a quote right
after ``*emphasis*`` starts a new run and is therefore treated as opening.

``QuoteConverter`` applies the conversion to the text events of a render
stream and suspends it between the start and end of a code block. Inline
code spans are leaf events and are never converted.
"""

from __future__ import annotations

import logging

from book2html.constants import (
    LEFT_DOUBLE_QUOTE,
    LEFT_SINGLE_QUOTE,
    RIGHT_DOUBLE_QUOTE,
    RIGHT_SINGLE_QUOTE,
)
from book2html.events import CODE_BLOCK, TEXT, Event

logger = logging.getLogger(__name__)


def convert_quotes_to_curly(original_text: str) -> str:
    """Replace straight quotes in one text run with curly quotes.

    Parameters
    ----------
    original_text : str
        A single text run

    Returns
    -------
    str
        The text with ``'`` and ``"`` replaced by their opening or closing
        curly forms; every other character is unchanged

    Examples
    --------
        >>> convert_quotes_to_curly("'one', \\"two\\"")
        '‘one’, “two”'

    """
    # The start of the run counts as whitespace
    preceded_by_whitespace = True
    converted = []

    for ch in original_text:
        if ch == "'":
            converted.append(LEFT_SINGLE_QUOTE if preceded_by_whitespace else RIGHT_SINGLE_QUOTE)
        elif ch == '"':
            converted.append(LEFT_DOUBLE_QUOTE if preceded_by_whitespace else RIGHT_DOUBLE_QUOTE)
        else:
            converted.append(ch)
        preceded_by_whitespace = ch.isspace()

    return "".join(converted)


class QuoteConverter:
    """Stateful curly quote stage for one render event stream.

    Parameters
    ----------
    enabled : bool
        When false the converter returns every event unchanged.

    Examples
    --------
        >>> converter = QuoteConverter(enabled=True)
        >>> converted = map(converter.convert, events)  # doctest: +SKIP

    """

    def __init__(self, enabled: bool):
        """Create a converter positioned outside any code block."""
        self.enabled = enabled
        self.convert_text = True

    def convert(self, event: Event) -> Event:
        if not self.enabled:
            return event

        if event.is_start(CODE_BLOCK):
            logger.debug("Suspending quote conversion inside code block")
            self.convert_text = False
            return event
        if event.is_end(CODE_BLOCK):
            self.convert_text = True
            return event
        if event.kind == TEXT and self.convert_text:
            return event.with_token({**event.token, "raw": convert_quotes_to_curly(event.token["raw"])})
        return event


__all__ = ["convert_quotes_to_curly", "QuoteConverter"]
