#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/book2html/options.py
"""Rendering options for the book2html pipeline.

Options are immutable: a render call reads them, never writes them, so a
single instance can be shared between threads rendering different chapters.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, fields, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from book2html.exceptions import ValidationError


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class RenderOptions(CloneFrozenMixin):
    """Options controlling one markdown-to-HTML render.

    Parameters
    ----------
    curly_quotes : bool, default False
        Convert straight quotes in text to typographic curly quotes.
        Code blocks and inline code are never converted.
    base_path : str, default ""
        Output-relative prefix for rewritten relative links and images.
        An empty string means the chapter renders into the same directory
        as its link targets.
    header_links : bool, default False
        Give every heading an ``id`` derived from its text and wrap its
        content in a self-link.

    Examples
    --------
        >>> options = RenderOptions(curly_quotes=True)
        >>> nested = options.create_updated(base_path="guide")

    """

    curly_quotes: bool = field(
        default=False,
        metadata={"help": "Convert straight quotes to curly quotes outside code", "importance": "core"},
    )
    base_path: str = field(
        default="",
        metadata={"help": "Prefix applied to rewritten relative link destinations", "importance": "core"},
    )
    header_links: bool = field(
        default=False,
        metadata={"help": "Add id attributes and self-links to headings", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate option types.

        Raises
        ------
        ValidationError
            If ``base_path`` is not a string or a flag is not a boolean.

        """
        if not isinstance(self.base_path, str):
            raise ValidationError(
                f"base_path must be a string, got {type(self.base_path).__name__}",
                parameter_name="base_path",
                parameter_value=self.base_path,
            )
        for name in ("curly_quotes", "header_links"):
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise ValidationError(
                    f"{name} must be a boolean, got {type(value).__name__}",
                    parameter_name=name,
                    parameter_value=value,
                )

    @classmethod
    def from_mapping(cls, values: dict[str, Any]) -> RenderOptions:
        """Build options from a plain mapping, ignoring ``None`` values.

        Parameters
        ----------
        values : dict
            Field names mapped to values, e.g. from a config file

        Returns
        -------
        RenderOptions
            Options with the given fields set

        Raises
        ------
        ValidationError
            If the mapping names a field that does not exist.

        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(values) - known)
        if unknown:
            raise ValidationError(
                f"Unknown render option(s): {', '.join(unknown)}",
                parameter_name=unknown[0],
                parameter_value=values[unknown[0]],
            )
        return cls(**{key: value for key, value in values.items() if value is not None})


__all__ = ["CloneFrozenMixin", "RenderOptions"]
