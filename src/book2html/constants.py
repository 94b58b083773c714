#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the book2html library.

Compiled patterns live here so they are built once at import time and shared
read-only by every render call. A malformed pattern therefore fails when the
package is imported, never in the middle of a render.

Constants are organized by category:
1. Parser Configuration - mistune plugins and parse env keys
2. Link Rewriting - scheme and markdown-link patterns
3. Typography - curly quote glyphs
4. Anchors - markup stripped before deriving heading ids
5. Configuration Files - discovery names and sections
"""

from __future__ import annotations

import re

# =============================================================================
# Parser Configuration
# =============================================================================

# The only extensions enabled on top of CommonMark
MARKDOWN_PLUGINS: tuple[str, ...] = ("table", "footnotes", "strikethrough", "task_lists")

# Keys stored in mistune's per-parse BlockState.env
ENV_RENDER_OPTIONS = "book2html_render_options"
ENV_HEADING_IDS = "book2html_heading_ids"

# =============================================================================
# Link Rewriting
# =============================================================================

# A URI scheme: a letter, then letters, digits, "+", "-" or ".", then a colon
SCHEME_LINK_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*:")

# A path whose extension is ".md", optionally followed by a "#fragment"
MD_LINK_PATTERN = re.compile(r"(?P<link>[^#]*)\.md(?P<anchor>#.*)?", re.DOTALL)

MARKDOWN_EXTENSION = ".md"
HTML_EXTENSION = ".html"

# =============================================================================
# Typography
# =============================================================================

LEFT_SINGLE_QUOTE = "‘"
RIGHT_SINGLE_QUOTE = "’"
LEFT_DOUBLE_QUOTE = "“"
RIGHT_DOUBLE_QUOTE = "”"

# =============================================================================
# Anchors
# =============================================================================

# Inline markup and entity escapes removed verbatim from heading content
ANCHOR_STRIPPED_MARKUP: tuple[str, ...] = (
    "<em>",
    "</em>",
    "<code>",
    "</code>",
    "<strong>",
    "</strong>",
    "&lt;",
    "&gt;",
    "&amp;",
    "&#39;",
    "&quot;",
)

# =============================================================================
# Configuration Files
# =============================================================================

BOOK_CONFIG_FILENAME = "book.toml"
PYPROJECT_FILENAME = "pyproject.toml"
ENV_VAR_PREFIX = "BOOK2HTML_"

DEFAULT_LOG_LEVEL = "WARNING"
