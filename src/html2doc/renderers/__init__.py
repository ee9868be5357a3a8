#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/html2doc/renderers/__init__.py
"""Renderers turning document trees into inspectable text.

Available renderers:
- OutlineRenderer: indented text outline, one object per line

JSON output is produced by ``html2doc.document.serialization``.
"""

from html2doc.renderers.outline import OutlineRenderer

__all__ = ["OutlineRenderer"]
