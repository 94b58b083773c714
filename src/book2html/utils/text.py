#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/book2html/utils/text.py
"""Text processing utilities for rendered chapters.

This module derives HTML anchor ids from heading content.

Functions
---------
normalize_id : Turn arbitrary text into a whitespace-free HTML id
id_from_content : Derive a heading id from rendered heading content
unique_id_from_content : Derive a heading id that is unique within a chapter

Examples
--------
Heading ids:

    >>> id_from_content("## Method-call expressions")
    'method-call-expressions'
    >>> id_from_content("## <code>Code</code> title")
    'code-title'

Repeated headings:

    >>> seen = {}
    >>> unique_id_from_content("Example", seen)
    'example'
    >>> unique_id_from_content("Example", seen)
    'example-1'

"""

from __future__ import annotations

from book2html.constants import ANCHOR_STRIPPED_MARKUP


def normalize_id(content: str) -> str:
    """Convert text to a valid HTML element id.

    Alphanumeric characters from any script, ``_`` and ``-`` are kept and
    lowercased, whitespace becomes ``-`` and everything else (punctuation,
    symbols, emoji) is dropped.

    Parameters
    ----------
    content : str
        Text to normalize

    Returns
    -------
    str
        The normalized id, possibly empty

    Examples
    --------
        >>> normalize_id("Method-call 🐙 expressions")
        'method-call--expressions'
        >>> normalize_id("中文")
        '中文'

    """
    normalized = []
    for ch in content:
        if ch.isalnum() or ch in "_-":
            normalized.append(ch.lower())
        elif ch.isspace():
            normalized.append("-")
    return "".join(normalized)


def id_from_content(content: str) -> str:
    """Generate an anchor id from heading content.

    The content may already be rendered, so emphasis, strong and code tags
    and the common HTML entity escapes are removed first. Leading ``#``
    heading markers and surrounding whitespace are trimmed before the rest
    is passed through ``normalize_id``.

    Parameters
    ----------
    content : str
        Heading text, raw or rendered to inline HTML

    Returns
    -------
    str
        The anchor id

    """
    for markup in ANCHOR_STRIPPED_MARKUP:
        content = content.replace(markup, "")

    # Remove spaces and hashes indicating a header
    trimmed = content.strip().lstrip("#").strip()

    return normalize_id(trimmed)


def unique_id_from_content(content: str, id_counter: dict[str, int]) -> str:
    """Generate an anchor id that has not been handed out for this chapter.

    The first heading producing a given id keeps it; later ones get ``-1``,
    ``-2`` and so on appended.

    Parameters
    ----------
    content : str
        Heading text, raw or rendered to inline HTML
    id_counter : dict[str, int]
        Occurrence counts per base id, mutated in place. Use one dict per
        rendered chapter.

    Returns
    -------
    str
        The unique anchor id

    """
    base_id = id_from_content(content)
    count = id_counter.get(base_id, 0)
    id_counter[base_id] = count + 1

    if count == 0:
        return base_id
    return f"{base_id}-{count}"


__all__ = [
    "normalize_id",
    "id_from_content",
    "unique_id_from_content",
]
