#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2doc/document/visitors.py
"""Visitor pattern implementation for document tree traversal.

Visitors separate algorithms (rendering, serialization, inspection) from
the document object classes themselves.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from html2doc.document.nodes import (
    Document,
    FormattedText,
    Hyperlink,
    LineBreak,
    Paragraph,
    Section,
    Text,
)


class DocumentVisitor(ABC):
    """Abstract base class for document tree visitors.

    Subclasses implement a ``visit_*`` method per object type. Container
    visits are responsible for visiting their own children.

    Examples
    --------
    Count text runs:

        >>> class TextCounter(DocumentVisitor):
        ...     def __init__(self):
        ...         self.count = 0
        ...     def visit_text(self, node):
        ...         self.count += 1
        ...     # remaining visit_* methods recurse into children

    """

    @abstractmethod
    def visit_document(self, node: Document) -> Any:
        """Visit a Document."""
        pass

    @abstractmethod
    def visit_section(self, node: Section) -> Any:
        """Visit a Section."""
        pass

    @abstractmethod
    def visit_paragraph(self, node: Paragraph) -> Any:
        """Visit a Paragraph."""
        pass

    @abstractmethod
    def visit_formatted_text(self, node: FormattedText) -> Any:
        """Visit a FormattedText run."""
        pass

    @abstractmethod
    def visit_hyperlink(self, node: Hyperlink) -> Any:
        """Visit a Hyperlink."""
        pass

    @abstractmethod
    def visit_text(self, node: Text) -> Any:
        """Visit a Text run."""
        pass

    @abstractmethod
    def visit_line_break(self, node: LineBreak) -> Any:
        """Visit a LineBreak."""
        pass
