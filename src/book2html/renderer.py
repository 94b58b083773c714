#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/book2html/renderer.py
"""HTML serializer hook point for the transform pipeline.

mistune passes the renderer the complete token sequence of a document (and,
in a second call, the footnote section). ``BookHtmlRenderer`` intercepts that
call, runs the tokens through the event transform stages and only then lets
mistune's ``HTMLRenderer`` serialize them. Everything about the HTML itself
is left to mistune, apart from optional heading permalinks.

Rendering options travel in the parse state's ``env`` rather than on the
renderer, so one renderer instance never carries state from one chapter to
the next.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable

from mistune import BlockState, HTMLRenderer

from book2html.constants import ENV_HEADING_IDS, ENV_RENDER_OPTIONS
from book2html.events import Event, build_tokens, iter_events
from book2html.options import RenderOptions
from book2html.utils.text import unique_id_from_content

logger = logging.getLogger(__name__)

EventTransform = Callable[[Iterable[Event], RenderOptions], Iterable[Event]]


class BookHtmlRenderer(HTMLRenderer):
    """mistune HTML renderer that applies the book transform pipeline.

    Parameters
    ----------
    transform : callable, optional
        Called with the flattened event stream and the render options,
        returns the transformed stream. Without one the events are
        serialized unchanged.
    escape : bool, default False
        Escape raw HTML found in the markdown. Books embed raw HTML on
        purpose, so it passes through by default.

    """

    def __init__(self, transform: EventTransform | None = None, escape: bool = False):
        """Initialize the renderer with its event transform."""
        super().__init__(escape=escape)
        self.transform = transform

    def __call__(self, tokens: Iterable[dict[str, Any]], state: BlockState) -> str:
        events: Iterable[Event] = iter_events(tokens)
        if self.transform is not None:
            events = self.transform(events, render_options_for(state))
        return self.render_tokens(build_tokens(events), state)

    def render_token(self, token: dict[str, Any], state: BlockState) -> str:
        if token["type"] == "heading" and render_options_for(state).header_links:
            return self._render_linked_heading(token, state)
        return super().render_token(token, state)

    def _render_linked_heading(self, token: dict[str, Any], state: BlockState) -> str:
        """Render a heading with an id and a self-link around its content."""
        text = self.render_tokens(token["children"], state)
        level = token["attrs"]["level"]
        id_counter = state.env.setdefault(ENV_HEADING_IDS, {})
        anchor = unique_id_from_content(text, id_counter)
        logger.debug("Heading id %r for level %d heading", anchor, level)

        tag = f"h{level}"
        return f'<{tag} id="{anchor}"><a class="header" href="#{anchor}">{text}</a></{tag}>\n'


def render_options_for(state: BlockState) -> RenderOptions:
    """Return the render options stored in a parse state, or the defaults."""
    options = state.env.get(ENV_RENDER_OPTIONS)
    if options is None:
        return RenderOptions()
    return options


__all__ = ["BookHtmlRenderer", "render_options_for"]
