"""The major exported API functions for HTML conversion."""

#  Copyright (c) 2025 Tom Villani, Ph.D.
# src/html2doc/api.py
import logging
from typing import Any, Optional, Union, overload

from html2doc.document.nodes import Document, Paragraph, Section
from html2doc.exceptions import ValidationError
from html2doc.options.html import HtmlOptions
from html2doc.parsers.base import Converter
from html2doc.parsers.html import HtmlConverter
from html2doc.progress import ProgressCallback

logger = logging.getLogger(__name__)


def add(container: Union[Section, Paragraph], contents: str, converter: Optional[Converter]) -> None:
    """Convert ``contents`` with ``converter`` and insert the result into ``container``.

    Parameters
    ----------
    container : Section or Paragraph
        Insertion point
    contents : str
        Source markup
    converter : Converter
        Object whose ``convert(contents)`` returns the insertion action

    Raises
    ------
    ValidationError
        If contents are empty or no converter is given

    """
    if not contents:
        raise ValidationError("Contents must be a non-empty string", parameter_name="contents")
    if converter is None:
        raise ValidationError("A converter is required", parameter_name="converter")

    action = converter.convert(contents)
    action(container)


@overload
def add_html(container: Section, html: Optional[str], converter: Optional[Converter] = None) -> Optional[Section]: ...


@overload
def add_html(container: Paragraph, html: Optional[str], converter: Optional[Converter] = None) -> Paragraph: ...


def add_html(
    container: Union[Section, Paragraph], html: Optional[str], converter: Optional[Converter] = None
) -> Optional[Union[Section, Paragraph]]:
    """Append HTML content to a section or paragraph.

    Parameters
    ----------
    container : Section or Paragraph
        Insertion point
    html : str or None
        HTML fragment
    converter : Converter or None, default None
        Converter to use; a default HtmlConverter when omitted

    Returns
    -------
    Section, Paragraph or None
        The container, for chaining. For a section, empty markup is a no-op
        that returns None.

    Raises
    ------
    ValidationError
        If the container is neither a Section nor a Paragraph, or if
        ``html`` is empty and the container is a Paragraph

    Examples
    --------
        >>> section = Document().add_section()
        >>> add_html(section, "<h1>Title</h1><p>Body</p>")

    """
    if isinstance(container, Section):
        if not html:
            logger.debug("Empty HTML for section, nothing added")
            return None
    elif isinstance(container, Paragraph):
        if not html:
            raise ValidationError("HTML contents must be a non-empty string", parameter_name="html")
    else:
        raise ValidationError(
            f"Container must be a Section or Paragraph, got {type(container).__name__}",
            parameter_name="container",
            parameter_value=container,
        )

    add(container, html, converter or HtmlConverter())
    return container


def convert_html(
    html: str,
    options: Optional[HtmlOptions] = None,
    progress_callback: Optional[ProgressCallback] = None,
    **kwargs: Any,
) -> Document:
    """Convert an HTML fragment into a new single-section document.

    Parameters
    ----------
    html : str
        HTML fragment
    options : HtmlOptions or None, default None
        Conversion options
    progress_callback : ProgressCallback or None, default None
        Optional callback for progress events
    **kwargs
        Individual HtmlOptions fields overriding ``options``

    Returns
    -------
    Document
        Document with one section holding the converted content

    Raises
    ------
    ValidationError
        If ``html`` is empty
    ConversionError
        If a handler cannot attach a node to its context

    Examples
    --------
        >>> doc = convert_html("<ul><li>A</li><li>B</li></ul>")
        >>> [p.style for p in doc.sections[0].paragraphs]
        ['ListStart', 'UnorderedList', 'UnorderedList', 'ListEnd']

    """
    options = options or HtmlOptions()
    if kwargs:
        options = options.create_updated(**kwargs)

    converter = HtmlConverter(options, progress_callback=progress_callback)
    action = converter.convert(html)

    document = Document()
    action(document.add_section())
    return document
