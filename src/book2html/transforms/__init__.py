#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/book2html/transforms/__init__.py
"""Event stream transform stages.

Each stage maps one render event to one render event:

- ``clean_codeblock_headers`` strips whitespace from fence info strings
- ``adjust_links`` rewrites relative link and image destinations
- ``QuoteConverter.convert`` curls quotes outside code blocks

See ``book2html.pipeline.transform_events`` for how they are chained.
"""

from book2html.transforms.codeblocks import clean_codeblock_headers, clean_codeblock_info
from book2html.transforms.links import adjust_link_destination, adjust_links
from book2html.transforms.quotes import QuoteConverter, convert_quotes_to_curly

__all__ = [
    "clean_codeblock_headers",
    "clean_codeblock_info",
    "adjust_link_destination",
    "adjust_links",
    "QuoteConverter",
    "convert_quotes_to_curly",
]
