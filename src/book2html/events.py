#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/book2html/events.py
"""Render events: a flat, lazy view of mistune's token tree.

mistune hands its renderer a tree of token dicts. The transform stages work
on a flat stream instead, where every container token is bracketed by a
``START`` and an ``END`` event, text runs are ``TEXT`` events and all other
tokens are ``LEAF`` events. Fenced and indented code blocks are containers
too: their body is a single ``TEXT`` event, so stages that act on text see
code and can decide to skip it.

``iter_events`` flattens and ``build_tokens`` reassembles. Both are
generators, so a top-level block is handed to the serializer as soon as its
``END`` event has passed through every stage.

Examples
--------
    >>> tokens = [{"type": "paragraph", "children": [{"type": "text", "raw": "hi"}]}]
    >>> [event.kind for event in iter_events(tokens)]
    ['start', 'text', 'end']
    >>> list(build_tokens(iter_events(tokens))) == tokens
    True

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Literal

from book2html.exceptions import EventStreamError


Token = dict[str, Any]
EventKind = Literal["start", "end", "text", "leaf"]

START: EventKind = "start"
END: EventKind = "end"
TEXT: EventKind = "text"
LEAF: EventKind = "leaf"

CODE_BLOCK = "block_code"
LINK = "link"
IMAGE = "image"


@dataclass(frozen=True)
class Event:
    """One unit of the render event stream.

    Parameters
    ----------
    kind : {"start", "end", "text", "leaf"}
        Position of the event relative to its token
    token : dict
        The mistune token. For ``START`` events of containers the
        ``children`` key is ignored when the tree is rebuilt, and for code
        blocks ``raw`` is ignored in favor of the enclosed ``TEXT`` event.

    """

    kind: EventKind
    token: Token

    @property
    def type(self) -> str:
        """Token type, e.g. ``"link"`` or ``"block_code"``."""
        return self.token["type"]

    def is_start(self, token_type: str) -> bool:
        return self.kind == START and self.type == token_type

    def is_end(self, token_type: str) -> bool:
        return self.kind == END and self.type == token_type

    def with_token(self, token: Token) -> Event:
        """Return an event of the same kind carrying ``token``."""
        return Event(self.kind, token)


def text_event(raw: str) -> Event:
    return Event(TEXT, {"type": "text", "raw": raw})


def iter_events(tokens: Iterable[Token]) -> Iterator[Event]:
    """Flatten a mistune token tree into render events, in document order.

    Parameters
    ----------
    tokens : iterable of dict
        Fully inline-parsed mistune tokens, as passed to a renderer

    Yields
    ------
    Event
        ``START``/``END`` around containers and code blocks, ``TEXT`` for
        text runs and code block bodies, ``LEAF`` for everything else.

    """
    for token in tokens:
        token_type = token["type"]
        if token_type == "text":
            yield Event(TEXT, token)
        elif token_type == CODE_BLOCK:
            yield Event(START, token)
            if token.get("raw"):
                yield text_event(token["raw"])
            yield Event(END, token)
        elif "children" in token:
            yield Event(START, token)
            yield from iter_events(token["children"])
            yield Event(END, token)
        else:
            yield Event(LEAF, token)


def build_tokens(events: Iterable[Event]) -> Iterator[Token]:
    """Reassemble a token tree from a render event stream.

    The token carried by each ``START`` event becomes the rebuilt node, so
    payload changes made to start events survive while the payload of the
    matching ``END`` event is only checked for its type.

    Parameters
    ----------
    events : iterable of Event
        A well-nested event stream

    Yields
    ------
    dict
        Top-level tokens, each one as soon as it is complete

    Raises
    ------
    EventStreamError
        If an ``END`` event has no open container of the same type, or the
        stream finishes with containers still open.

    """
    stack: list[tuple[Token, list[Token]]] = []

    for event in events:
        if event.kind == START:
            stack.append((event.token, []))
            continue

        if event.kind == END:
            if not stack:
                raise EventStreamError(f"End of '{event.type}' without a matching start", token_type=event.type)
            token, children = stack.pop()
            if token["type"] != event.type:
                raise EventStreamError(
                    f"End of '{event.type}' while '{token['type']}' is open", token_type=event.type
                )
            if token["type"] == CODE_BLOCK:
                node = {**token, "raw": "".join(child["raw"] for child in children)}
            else:
                node = {**token, "children": children}
        else:
            node = event.token

        if stack:
            stack[-1][1].append(node)
        else:
            yield node

    if stack:
        open_types = ", ".join(token["type"] for token, _ in stack)
        raise EventStreamError(f"Event stream ended with open containers: {open_types}", token_type=stack[-1][0]["type"])


__all__ = [
    "Event",
    "EventKind",
    "Token",
    "START",
    "END",
    "TEXT",
    "LEAF",
    "CODE_BLOCK",
    "LINK",
    "IMAGE",
    "iter_events",
    "build_tokens",
    "text_event",
]
