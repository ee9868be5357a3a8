#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2doc/renderers/outline.py
"""Text outline rendering of document trees.

This module provides the OutlineRenderer class, which renders a document
tree as an indented outline with one line per object. It is meant for
inspecting conversion results on the command line and in tests:

    Section
      Paragraph [Heading1]
        "Title"
      Paragraph [UnorderedList] {BulletList1}
        FormattedText [BOLD]
          "item"

"""

from __future__ import annotations

from html2doc.document.nodes import (
    Document,
    DocumentObject,
    FormattedText,
    Hyperlink,
    LineBreak,
    Paragraph,
    Section,
    Text,
)
from html2doc.document.serialization import format_flag_names
from html2doc.document.visitors import DocumentVisitor
from html2doc.exceptions import InvalidOptionsError
from html2doc.options.outline import OutlineRendererOptions


class OutlineRenderer(DocumentVisitor):
    """Render document objects as an indented text outline.

    Parameters
    ----------
    options : OutlineRendererOptions or None, default = None
        Outline rendering options

    Examples
    --------
        >>> from html2doc.api import convert_html
        >>> doc = convert_html("<p>Hello <strong>World</strong></p>")
        >>> print(OutlineRenderer().render_to_string(doc))
        Document
          Section
            Paragraph
              "Hello "
              FormattedText [BOLD]
                "World"

    """

    def __init__(self, options: OutlineRendererOptions | None = None):
        if options is not None and not isinstance(options, OutlineRendererOptions):
            raise InvalidOptionsError(
                converter_name="outline",
                expected_type=OutlineRendererOptions,
                received_type=type(options),
            )
        self.options: OutlineRendererOptions = options or OutlineRendererOptions()
        self._lines: list[str] = []
        self._depth = 0

    def render_to_string(self, node: DocumentObject) -> str:
        """Render ``node`` and everything below it.

        Parameters
        ----------
        node : DocumentObject
            Any document object; usually a Document or Section

        Returns
        -------
        str
            Outline, one object per line

        """
        self._lines = []
        self._depth = 0
        node.accept(self)
        return "\n".join(self._lines)

    def _emit(self, line: str) -> None:
        self._lines.append(f"{self.options.indent * self._depth}{line}")

    def _visit_children(self, children: list) -> None:
        self._depth += 1
        for child in children:
            child.accept(self)
        self._depth -= 1

    def visit_document(self, node: Document) -> None:
        self._emit("Document")
        self._visit_children(node.sections)

    def visit_section(self, node: Section) -> None:
        self._emit("Section")
        paragraphs = node.paragraphs
        if not self.options.show_empty:
            paragraphs = [p for p in paragraphs if not p.is_empty]
        self._visit_children(paragraphs)

    def visit_paragraph(self, node: Paragraph) -> None:
        """Emit ``Paragraph [style] (alignment) {list type, continued}``."""
        parts = ["Paragraph"]
        if node.style:
            parts.append(f"[{node.style}]")
        if node.format.alignment is not None:
            parts.append(f"({node.format.alignment.value})")
        list_info = node.format.list_info
        if list_info.list_type is not None:
            suffix = ", continued" if list_info.continue_previous_list else ""
            parts.append(f"{{{list_info.list_type.value}{suffix}}}")
        self._emit(" ".join(parts))
        self._visit_children(node.content)

    def visit_formatted_text(self, node: FormattedText) -> None:
        parts = ["FormattedText"]
        flags = format_flag_names(node.format)
        if flags:
            parts.append(f"[{'|'.join(flag.upper() for flag in flags)}]")
        if node.style:
            parts.append(node.style)
        self._emit(" ".join(parts))
        self._visit_children(node.content)

    def visit_hyperlink(self, node: Hyperlink) -> None:
        self._emit(f"Hyperlink -> {node.url}" if node.url else "Hyperlink")
        self._visit_children(node.content)

    def visit_text(self, node: Text) -> None:
        self._emit(f'"{node.content}"')

    def visit_line_break(self, node: LineBreak) -> None:
        self._emit("LineBreak")
