#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2doc/document/serialization.py
"""JSON serialization for document trees.

Converts a document tree into plain dicts and lists so it can be dumped as
JSON for inspection, snapshot tests or handing to a layout process.

Examples
--------
    >>> from html2doc.document import Document
    >>> from html2doc.document.serialization import document_to_json
    >>> doc = Document()
    >>> doc.add_section().add_paragraph("Hello")
    >>> print(document_to_json(doc, indent=2))

"""

from __future__ import annotations

import json
from typing import Any

from html2doc.document.nodes import (
    Document,
    DocumentObject,
    FormattedText,
    Hyperlink,
    LineBreak,
    Paragraph,
    Section,
    Text,
    TextFormat,
)
from html2doc.document.visitors import DocumentVisitor

# Flags in a stable order for serialized output
_FORMAT_FLAGS = (TextFormat.BOLD, TextFormat.ITALIC, TextFormat.UNDERLINE, TextFormat.NO_UNDERLINE)


def format_flag_names(text_format: TextFormat) -> list[str]:
    """Return the names of the flags set in ``text_format``, in a stable order."""
    return [flag.name.lower() for flag in _FORMAT_FLAGS if flag & text_format and flag.name]


class _DictBuilder(DocumentVisitor):
    """Visitor producing JSON-compatible dicts."""

    def visit_document(self, node: Document) -> dict[str, Any]:
        return {
            "node_type": "Document",
            "metadata": dict(node.metadata),
            "sections": [section.accept(self) for section in node.sections],
        }

    def visit_section(self, node: Section) -> dict[str, Any]:
        return {"node_type": "Section", "paragraphs": [p.accept(self) for p in node.paragraphs]}

    def visit_paragraph(self, node: Paragraph) -> dict[str, Any]:
        result: dict[str, Any] = {"node_type": "Paragraph", "style": node.style}
        if node.format.alignment is not None:
            result["alignment"] = node.format.alignment.value
        list_info = node.format.list_info
        if list_info.list_type is not None:
            result["list_info"] = {
                "list_type": list_info.list_type.value,
                "continue_previous_list": list_info.continue_previous_list,
            }
        result["content"] = [item.accept(self) for item in node.content]
        return result

    def visit_formatted_text(self, node: FormattedText) -> dict[str, Any]:
        result: dict[str, Any] = {"node_type": "FormattedText", "format": format_flag_names(node.format)}
        if node.style:
            result["style"] = node.style
        result["content"] = [item.accept(self) for item in node.content]
        return result

    def visit_hyperlink(self, node: Hyperlink) -> dict[str, Any]:
        return {
            "node_type": "Hyperlink",
            "url": node.url,
            "link_type": node.link_type.value,
            "content": [item.accept(self) for item in node.content],
        }

    def visit_text(self, node: Text) -> dict[str, Any]:
        return {"node_type": "Text", "content": node.content}

    def visit_line_break(self, node: LineBreak) -> dict[str, Any]:
        return {"node_type": "LineBreak"}


def document_to_dict(node: DocumentObject) -> dict[str, Any]:
    """Convert a document object (and everything it owns) to a dict.

    Parameters
    ----------
    node : DocumentObject
        Any object of the document tree

    Returns
    -------
    dict
        JSON-compatible representation

    """
    return node.accept(_DictBuilder())


def document_to_json(node: DocumentObject, indent: int | None = None) -> str:
    """Serialize a document object to a JSON string.

    Parameters
    ----------
    node : DocumentObject
        Any object of the document tree
    indent : int or None, default None
        JSON indentation

    Returns
    -------
    str
        JSON text

    """
    return json.dumps(document_to_dict(node), indent=indent, ensure_ascii=False)
