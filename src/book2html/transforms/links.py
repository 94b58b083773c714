#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/book2html/transforms/links.py
"""Cross-document link rewriting.

Chapters link to each other by their markdown source names
(``[see](other.md#section)``). In the rendered book those targets are HTML
files, possibly in a different directory, so every relative link and image
destination is rewritten:

- destinations with a URI scheme (``https:``, ``mailto:``) are left alone,
- other destinations are prefixed with ``base + "/"`` when a base is given,
- a ``.md`` extension right before the optional ``#fragment`` becomes
  ``.html``.

Examples
--------
    >>> adjust_link_destination("intro.md#setup", "")
    'intro.html#setup'
    >>> adjust_link_destination("img/cover.png", "guide")
    'guide/img/cover.png'
    >>> adjust_link_destination("https://example.com/a.md", "guide")
    'https://example.com/a.md'

"""

from __future__ import annotations

import logging

from book2html.constants import HTML_EXTENSION, MD_LINK_PATTERN, SCHEME_LINK_PATTERN
from book2html.events import IMAGE, LINK, Event

logger = logging.getLogger(__name__)


def adjust_link_destination(dest: str, base: str) -> str:
    """Rewrite one link destination relative to ``base``.

    Parameters
    ----------
    dest : str
        Destination as written in the markdown source
    base : str
        Output-relative directory of the rendered chapter, or ``""``

    Returns
    -------
    str
        The rewritten destination. Destinations with a URI scheme are
        returned unchanged.

    """
    # Don't touch links with a scheme like `https`
    if SCHEME_LINK_PATTERN.match(dest):
        return dest

    fixed = f"{base}/" if base else ""

    match = MD_LINK_PATTERN.fullmatch(dest)
    if match:
        fixed += match.group("link") + HTML_EXTENSION + (match.group("anchor") or "")
    else:
        fixed += dest
    return fixed


def adjust_links(event: Event, base: str) -> Event:
    """Rewrite the destination of link and image start events.

    Only ``attrs["url"]`` changes; the title, the reference label and the
    link text pass through as they are. Every other event is returned
    unchanged.
    """
    if not (event.is_start(LINK) or event.is_start(IMAGE)):
        return event

    attrs = event.token.get("attrs") or {}
    dest = attrs.get("url")
    if dest is None:
        return event

    fixed = adjust_link_destination(dest, base)
    if fixed != dest:
        logger.debug("Rewrote %s destination %r -> %r", event.type, dest, fixed)
    return event.with_token({**event.token, "attrs": {**attrs, "url": fixed}})


__all__ = ["adjust_link_destination", "adjust_links"]
