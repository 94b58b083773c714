#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/book2html/transforms/codeblocks.py
"""Code fence info string cleanup.

The serializer turns a fence's info string into the ``class`` attribute of
the ``<code>`` element (``rust,no_run`` becomes ``language-rust,no_run``).
Whitespace inside the info string would split it into several classes, so
it is removed before the block reaches the serializer.
"""

from __future__ import annotations

from book2html.events import CODE_BLOCK, Event


def clean_codeblock_info(info: str) -> str:
    """Remove every whitespace character from a fence info string.

    Parameters
    ----------
    info : str
        Raw info string, e.g. ``"rust,    no_run , ,property_3"``

    Returns
    -------
    str
        The info string with whitespace removed and all other characters,
        commas included, kept in order

    Examples
    --------
        >>> clean_codeblock_info("rust,    no_run,,,should_panic , ,property_3")
        'rust,no_run,,,should_panic,,property_3'

    """
    return "".join(ch for ch in info if not ch.isspace())


def clean_codeblock_headers(event: Event) -> Event:
    """Normalize the info string carried by a code block's start event.

    End events keep the info string exactly as parsed.
    """
    if not event.is_start(CODE_BLOCK):
        return event

    attrs = event.token.get("attrs")
    if not attrs or attrs.get("info") is None:
        return event

    return event.with_token({**event.token, "attrs": {**attrs, "info": clean_codeblock_info(attrs["info"])}})


__all__ = ["clean_codeblock_info", "clean_codeblock_headers"]
