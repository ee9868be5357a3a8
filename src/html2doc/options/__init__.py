#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for html2doc converters and renderers.

Each converter and renderer has its own frozen Options dataclass. Use
``create_updated`` to derive a modified copy.
"""

from __future__ import annotations

from html2doc.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from html2doc.options.html import HtmlOptions
from html2doc.options.outline import OutlineRendererOptions

__all__ = [
    "BaseParserOptions",
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "HtmlOptions",
    "OutlineRendererOptions",
]
