"""book2html - render a book's markdown chapters into HTML fragments.

Between the mistune markdown parser and its HTML serializer, book2html runs
an event stream transform pipeline that prepares chapter source for a static
site:

- relative links and images pointing at ``.md`` chapters are rewritten to the
  matching ``.html`` pages, optionally under a base path,
- code fence info strings are cleaned so they become stable CSS classes,
- straight quotes become curly quotes everywhere except in code,
- headings can be given stable, collision-free permalink ids.

Examples
--------
Render a chapter:

    >>> from book2html import render_markdown
    >>> render_markdown("See [setup](setup.md#install).")
    '<p>See <a href="setup.html#install">setup</a>.</p>\\n'

Render with options:

    >>> from book2html import RenderOptions, render
    >>> html = render(text, RenderOptions(curly_quotes=True, base_path="guide"))  # doctest: +SKIP

Derive a heading id:

    >>> from book2html import id_from_content
    >>> id_from_content("## Method-call expressions")
    'method-call-expressions'

See Also
--------
book2html.pipeline : parser and transform wiring
book2html.transforms : the individual transform stages

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# Check Python version before any imports
import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "book2html requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "0.1.0"

from book2html.exceptions import (  # noqa: E402
    Book2HtmlError,
    ConfigurationError,
    EventStreamError,
    InputError,
    OutputWriteError,
    ValidationError,
)
from book2html.options import RenderOptions  # noqa: E402
from book2html.pipeline import (  # noqa: E402
    new_markdown_parser,
    render,
    render_markdown,
    render_markdown_with_base,
    transform_events,
)
from book2html.utils.text import (  # noqa: E402
    id_from_content,
    normalize_id,
    unique_id_from_content,
)

__all__ = [
    "__version__",
    "render",
    "render_markdown",
    "render_markdown_with_base",
    "new_markdown_parser",
    "transform_events",
    "RenderOptions",
    "id_from_content",
    "normalize_id",
    "unique_id_from_content",
    "Book2HtmlError",
    "ValidationError",
    "ConfigurationError",
    "EventStreamError",
    "InputError",
    "OutputWriteError",
]
