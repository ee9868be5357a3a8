#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2doc/document/__init__.py
"""Document object model that HTML is converted into.

The module consists of:

- nodes: document object classes and their enums
- visitors: visitor base class for traversal
- serialization: dict/JSON serialization of document trees

Examples
--------
    >>> from html2doc.document import Document, TextFormat
    >>> doc = Document()
    >>> paragraph = doc.add_section().add_paragraph("Hello ")
    >>> paragraph.add_formatted_text(TextFormat.BOLD, "World")

"""

from __future__ import annotations

from html2doc.document.nodes import (
    Document,
    DocumentContainer,
    DocumentContext,
    DocumentObject,
    FormattedText,
    Hyperlink,
    HyperlinkType,
    InlineObject,
    LineBreak,
    ListInfo,
    ListType,
    Paragraph,
    ParagraphAlignment,
    ParagraphFormat,
    Section,
    Text,
    TextFormat,
)
from html2doc.document.serialization import document_to_dict, document_to_json
from html2doc.document.visitors import DocumentVisitor

__all__ = [
    "Document",
    "DocumentContainer",
    "DocumentContext",
    "DocumentObject",
    "DocumentVisitor",
    "FormattedText",
    "Hyperlink",
    "HyperlinkType",
    "InlineObject",
    "LineBreak",
    "ListInfo",
    "ListType",
    "Paragraph",
    "ParagraphAlignment",
    "ParagraphFormat",
    "Section",
    "Text",
    "TextFormat",
    "document_to_dict",
    "document_to_json",
]
