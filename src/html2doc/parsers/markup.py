#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2doc/parsers/markup.py
"""Markup tree access on top of BeautifulSoup.

The conversion engine only needs a handful of facts about a node: its name,
its attributes, its siblings, its children and its text. This module parses
markup into a BeautifulSoup tree and answers those questions, so handlers
never touch BeautifulSoup directly.

Node names follow the DOM ``nodeName`` convention: elements report their
lowercase tag name, text reports ``#text``, comments ``#comment`` and so on.
Entities are decoded by the parser, so text and attribute values are
already plain strings.

BeautifulSoup is imported where it is used, so that a missing install is
reported as a DependencyError by ``parse_markup``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from bs4 import BeautifulSoup
    from bs4.element import PageElement, Tag

from html2doc.constants import (
    CDATA_NODE,
    COMMENT_NODE,
    DECLARATION_NODE,
    DEFAULT_HTML_PARSER,
    DEPS_HTML,
    DEPS_HTML_PARSER_BACKENDS,
    DOCTYPE_NODE,
    PROCESSING_INSTRUCTION_NODE,
    TEXT_NODE,
)
from html2doc.exceptions import DependencyError
from html2doc.utils.decorators import check_dependencies, requires_dependencies

logger = logging.getLogger(__name__)


@requires_dependencies("html", DEPS_HTML)
def parse_markup(markup: str, html_parser: str = DEFAULT_HTML_PARSER) -> BeautifulSoup:
    """Parse a markup string into a BeautifulSoup tree.

    Multi-valued attributes such as ``class`` are kept as the original
    string.

    Parameters
    ----------
    markup : str
        HTML fragment or document
    html_parser : str, default "html.parser"
        BeautifulSoup parser backend

    Returns
    -------
    BeautifulSoup
        Root of the parsed tree

    Raises
    ------
    DependencyError
        If BeautifulSoup or the parser backend is not installed

    """
    from bs4 import BeautifulSoup
    from bs4.exceptions import FeatureNotFound

    check_dependencies("html", DEPS_HTML_PARSER_BACKENDS.get(html_parser, []))

    try:
        soup = BeautifulSoup(markup, html_parser, multi_valued_attributes=None)
    except FeatureNotFound as e:
        raise DependencyError(
            converter_name="html",
            missing_packages=[(html_parser, "")],
            message=f"BeautifulSoup parser backend not found: {html_parser!r}",
        ) from e

    logger.debug("Parsed %d characters of markup with %s", len(markup), html_parser)
    return soup


def _is_tag(node: object) -> bool:
    from bs4.element import Tag

    return isinstance(node, Tag)


def node_name(node: PageElement) -> str:
    """Return the DOM-style name of a node.

    Parameters
    ----------
    node : PageElement
        Any node of a parsed tree

    Returns
    -------
    str
        Lowercase tag name for elements, ``#text`` for text and another
        ``#``-prefixed kind for comments, CDATA, doctypes and the like

    """
    from bs4.element import CData, Comment, Declaration, Doctype, ProcessingInstruction, Tag

    if isinstance(node, Tag):
        return node.name.lower()
    # Checked in order; Doctype is a Declaration subclass in some bs4 versions
    string_kinds = (
        (Comment, COMMENT_NODE),
        (CData, CDATA_NODE),
        (Doctype, DOCTYPE_NODE),
        (Declaration, DECLARATION_NODE),
        (ProcessingInstruction, PROCESSING_INSTRUCTION_NODE),
    )
    for kind, name in string_kinds:
        if isinstance(node, kind):
            return name
    return TEXT_NODE


def is_text_node(node: Optional[PageElement]) -> bool:
    return node is not None and node_name(node) == TEXT_NODE


def get_attribute(node: PageElement, name: str, default: Optional[str] = None) -> Optional[str]:
    """Return an attribute value of an element, or ``default``.

    Non-elements have no attributes.
    """
    if not _is_tag(node):
        return default
    value = node.get(name)
    if value is None:
        return default
    if isinstance(value, list):
        return " ".join(value)
    return value


def child_nodes(node: PageElement) -> list[PageElement]:
    """Return the direct children of a node, text nodes included."""
    if _is_tag(node):
        return list(node.children)
    return []


def has_child_nodes(node: PageElement) -> bool:
    return _is_tag(node) and bool(node.contents)


def previous_sibling(node: PageElement) -> Optional[PageElement]:
    return node.previous_sibling


def next_sibling(node: PageElement) -> Optional[PageElement]:
    return node.next_sibling


def parent_name(node: PageElement) -> Optional[str]:
    """Return the name of the parent element, or None at the root."""
    from bs4 import BeautifulSoup

    parent = node.parent
    if parent is None or isinstance(parent, BeautifulSoup):
        return None
    return node_name(parent)


def element_children(node: Optional[PageElement], name: str) -> list[Tag]:
    """Return the direct child elements of ``node`` called ``name``."""
    if not _is_tag(node):
        return []
    return [child for child in node.children if _is_tag(child) and child.name.lower() == name]


def inner_text(node: PageElement) -> str:
    """Return the decoded text of a node and all of its descendants."""
    if _is_tag(node):
        return node.get_text()
    return str(node)
