#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for the outline renderer."""

from __future__ import annotations

from dataclasses import dataclass, field

from html2doc.options.base import BaseRendererOptions


@dataclass(frozen=True)
class OutlineRendererOptions(BaseRendererOptions):
    """Configuration options for rendering a document tree as a text outline.

    Parameters
    ----------
    indent : str, default "  "
        String repeated once per nesting level.
    show_empty : bool, default True
        Whether paragraphs without content (list markers, rules) are listed.

    """

    indent: str = field(default="  ", metadata={"help": "Indentation unit per nesting level"})
    show_empty: bool = field(default=True, metadata={"help": "List paragraphs that have no inline content"})
