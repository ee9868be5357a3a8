#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2doc/document/nodes.py
"""Document object model for print-oriented output.

This module defines the hierarchical document model that HTML markup is
converted into. The model is shaped for later layout and rendering (for
example to PDF): block containers own paragraphs, paragraphs carry a style
name, alignment and list metadata, and inline content is made of text runs,
formatted runs, hyperlinks and line breaks.

Object Hierarchy
----------------
    Document
      Section (block container)
        Paragraph (style, format, inline content)
          Text, LineBreak
          FormattedText (format flags, style, nestable inline content)
          Hyperlink (target url, inline content)

Every object keeps a back-reference to the object that owns it, so an
inline run can always find its paragraph and a paragraph its section.
Objects compare by identity: two paragraphs with the same text are still
different paragraphs.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum, Flag, auto
from typing import Any, Optional, Union

from html2doc.exceptions import ValidationError


class ParagraphAlignment(Enum):
    """Horizontal alignment of a paragraph."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"
    JUSTIFY = "justify"


class TextFormat(Flag):
    """Format flags of an inline run.

    ``UNDERLINE`` and ``NO_UNDERLINE`` are mutually exclusive; applying one
    clears the other.
    """

    NONE = 0
    BOLD = auto()
    ITALIC = auto()
    UNDERLINE = auto()
    NO_UNDERLINE = auto()


class ListType(Enum):
    """Bullet and numbering layouts understood by the rendering layer."""

    BULLET_LIST_1 = "BulletList1"
    BULLET_LIST_2 = "BulletList2"
    BULLET_LIST_3 = "BulletList3"
    NUMBER_LIST_1 = "NumberList1"
    NUMBER_LIST_2 = "NumberList2"
    NUMBER_LIST_3 = "NumberList3"


class HyperlinkType(Enum):
    """Kind of target a hyperlink points to."""

    WEB = "web"
    LOCAL = "local"
    FILE = "file"


@dataclass
class ListInfo:
    """List metadata of a paragraph.

    Parameters
    ----------
    list_type : ListType or None, default None
        Bullet or numbering layout; None for paragraphs outside lists
    continue_previous_list : bool, default False
        Whether numbering/bulleting continues the preceding list paragraph's
        sequence instead of starting a new one

    """

    list_type: Optional[ListType] = None
    continue_previous_list: bool = False


@dataclass
class ParagraphFormat:
    """Direct formatting of a paragraph.

    Parameters
    ----------
    alignment : ParagraphAlignment or None, default None
        Explicit alignment; None means the paragraph style decides
    list_info : ListInfo
        List metadata

    """

    alignment: Optional[ParagraphAlignment] = None
    list_info: ListInfo = field(default_factory=ListInfo)


class DocumentObject(ABC):
    """Base class for all document objects.

    All objects support the visitor pattern and know the object that owns
    them through ``parent``.
    """

    parent: Optional[DocumentObject]

    @abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this object.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods

        Returns
        -------
        Any
            Result from the visitor's processing

        """
        pass

    @property
    def section(self) -> Optional[Section]:
        """Return the section that (transitively) owns this object, if any."""
        current: Optional[DocumentObject] = self
        while current is not None:
            if isinstance(current, Section):
                return current
            current = current.parent
        return None

    @property
    def paragraph(self) -> Optional[Paragraph]:
        """Return the paragraph that (transitively) owns this object, if any."""
        current: Optional[DocumentObject] = self
        while current is not None:
            if isinstance(current, Paragraph):
                return current
            current = current.parent
        return None


# ============================================================================
# Inline Objects
# ============================================================================


@dataclass(eq=False)
class Text(DocumentObject):
    """Literal run of decoded text.

    Parameters
    ----------
    content : str
        The text

    """

    content: str = ""
    parent: Optional[DocumentObject] = field(default=None, repr=False)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_text``."""
        return visitor.visit_text(self)


@dataclass(eq=False)
class LineBreak(DocumentObject):
    """Hard line break inside a paragraph or inline run."""

    parent: Optional[DocumentObject] = field(default=None, repr=False)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_line_break``."""
        return visitor.visit_line_break(self)


class InlineContainerMixin:
    """Shared operations for objects that hold inline content.

    Paragraphs, formatted runs and hyperlinks all accept text, formatted
    runs and line breaks; only paragraphs and formatted runs accept
    hyperlinks.
    """

    content: list[InlineObject]

    def _append(self, obj: InlineObject) -> InlineObject:
        obj.parent = self  # type: ignore[assignment]
        self.content.append(obj)
        return obj

    def add_text(self, text: str) -> Text:
        """Append a text run and return it.

        Parameters
        ----------
        text : str
            Decoded text to append

        Returns
        -------
        Text
            The appended run

        """
        return self._append(Text(content=text))  # type: ignore[return-value]

    def add_formatted_text(self, text_format: TextFormat = TextFormat.NONE, text: str | None = None) -> FormattedText:
        """Append a formatted inline run and return it.

        Parameters
        ----------
        text_format : TextFormat, default TextFormat.NONE
            Initial format flags of the run
        text : str or None, default None
            Optional initial text of the run

        Returns
        -------
        FormattedText
            The appended run

        """
        run = FormattedText(format=text_format)
        self._append(run)
        if text:
            run.add_text(text)
        return run

    def add_line_break(self) -> LineBreak:
        """Append a line break and return it."""
        return self._append(LineBreak())  # type: ignore[return-value]

    def get_text(self) -> str:
        """Return the concatenated text of all nested content.

        Line breaks contribute a newline character.
        """
        parts: list[str] = []
        for item in self.content:
            if isinstance(item, Text):
                parts.append(item.content)
            elif isinstance(item, LineBreak):
                parts.append("\n")
            else:
                parts.append(item.get_text())
        return "".join(parts)


class HyperlinkHostMixin:
    """Adds hyperlink creation to inline containers that may hold links."""

    def add_hyperlink(self, url: str, link_type: HyperlinkType = HyperlinkType.WEB) -> Hyperlink:
        """Append a hyperlink and return it.

        Parameters
        ----------
        url : str
            Link target; may be empty
        link_type : HyperlinkType, default HyperlinkType.WEB
            Kind of target

        Returns
        -------
        Hyperlink
            The appended hyperlink

        """
        link = Hyperlink(url=url, link_type=link_type)
        return self._append(link)  # type: ignore[attr-defined,no-any-return]


@dataclass(eq=False)
class FormattedText(HyperlinkHostMixin, InlineContainerMixin, DocumentObject):
    """Inline run carrying format flags and an optional style name.

    Formatted runs nest: a run inside a bold run inherits boldness when
    rendered.

    Parameters
    ----------
    format : TextFormat, default TextFormat.NONE
        Format flags set directly on this run
    style : str or None, default None
        Character style name
    content : list of InlineObject, default empty list
        Nested inline content

    """

    format: TextFormat = TextFormat.NONE
    style: Optional[str] = None
    content: list[InlineObject] = field(default_factory=list)
    parent: Optional[DocumentObject] = field(default=None, repr=False)

    def apply_format(self, text_format: TextFormat) -> FormattedText:
        """Add format flags to this run and return it.

        Applying ``UNDERLINE`` clears ``NO_UNDERLINE`` and vice versa.
        """
        if text_format & TextFormat.UNDERLINE:
            self.format &= ~TextFormat.NO_UNDERLINE
        if text_format & TextFormat.NO_UNDERLINE:
            self.format &= ~TextFormat.UNDERLINE
        self.format |= text_format
        return self

    @property
    def bold(self) -> bool:
        return bool(self.format & TextFormat.BOLD)

    @property
    def italic(self) -> bool:
        return bool(self.format & TextFormat.ITALIC)

    @property
    def underline(self) -> bool:
        return bool(self.format & TextFormat.UNDERLINE)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_formatted_text``."""
        return visitor.visit_formatted_text(self)


@dataclass(eq=False)
class Hyperlink(InlineContainerMixin, DocumentObject):
    """Inline container rendered as a clickable link.

    Parameters
    ----------
    url : str
        Link target
    link_type : HyperlinkType, default HyperlinkType.WEB
        Kind of target
    content : list of InlineObject, default empty list
        Link content

    """

    url: str = ""
    link_type: HyperlinkType = HyperlinkType.WEB
    content: list[InlineObject] = field(default_factory=list)
    parent: Optional[DocumentObject] = field(default=None, repr=False)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_hyperlink``."""
        return visitor.visit_hyperlink(self)


InlineObject = Union[Text, LineBreak, FormattedText, Hyperlink]


# ============================================================================
# Block Objects
# ============================================================================


@dataclass(eq=False)
class Paragraph(HyperlinkHostMixin, InlineContainerMixin, DocumentObject):
    """Block container holding inline content.

    Parameters
    ----------
    style : str or None, default None
        Paragraph style name (e.g. ``"Heading1"``, ``"ListStart"``)
    format : ParagraphFormat
        Direct formatting: alignment and list metadata
    content : list of InlineObject, default empty list
        Inline content

    """

    style: Optional[str] = None
    format: ParagraphFormat = field(default_factory=ParagraphFormat)
    content: list[InlineObject] = field(default_factory=list)
    parent: Optional[DocumentObject] = field(default=None, repr=False)

    def set_style(self, style: str) -> Paragraph:
        """Set the style name and return the paragraph for chaining.

        Parameters
        ----------
        style : str
            Non-empty style name

        Returns
        -------
        Paragraph
            This paragraph

        Raises
        ------
        ValidationError
            If style is empty or None

        """
        if not style:
            raise ValidationError("Paragraph style must be a non-empty string", parameter_name="style")
        self.style = style
        return self

    @property
    def is_empty(self) -> bool:
        return not self.content

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_paragraph``."""
        return visitor.visit_paragraph(self)


@dataclass(eq=False)
class Section(DocumentObject):
    """Block-level container owning a sequence of paragraphs.

    Parameters
    ----------
    paragraphs : list of Paragraph, default empty list
        Paragraphs in document order

    """

    paragraphs: list[Paragraph] = field(default_factory=list)
    parent: Optional[DocumentObject] = field(default=None, repr=False)

    def add_paragraph(self, text: str | None = None) -> Paragraph:
        """Append a new paragraph and return it.

        Parameters
        ----------
        text : str or None, default None
            Optional initial text

        Returns
        -------
        Paragraph
            The appended paragraph

        """
        paragraph = Paragraph(parent=self)
        self.paragraphs.append(paragraph)
        if text:
            paragraph.add_text(text)
        return paragraph

    @property
    def last_paragraph(self) -> Optional[Paragraph]:
        return self.paragraphs[-1] if self.paragraphs else None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_section``."""
        return visitor.visit_section(self)


@dataclass(eq=False)
class Document(DocumentObject):
    """Root of a document tree.

    Parameters
    ----------
    sections : list of Section, default empty list
        Sections in document order
    metadata : dict, default empty dict
        Document-level metadata (title, author, ...)

    """

    sections: list[Section] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    parent: Optional[DocumentObject] = field(default=None, repr=False)

    def add_section(self) -> Section:
        """Append a new section and return it."""
        section = Section(parent=self)
        self.sections.append(section)
        return section

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_document``."""
        return visitor.visit_document(self)


DocumentContext = Union[Section, Paragraph, FormattedText, Hyperlink]
"""Objects the converter may attach new content to during a walk."""

DocumentContainer = Union[Section, Paragraph]
"""Objects a conversion may be started against."""
