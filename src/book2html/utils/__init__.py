#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Utility functions for book2html."""

from book2html.utils.text import (
    id_from_content,
    normalize_id,
    unique_id_from_content,
)

__all__ = [
    "id_from_content",
    "normalize_id",
    "unique_id_from_content",
]
