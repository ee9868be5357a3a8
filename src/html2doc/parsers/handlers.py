#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2doc/parsers/handlers.py
"""Default node handlers for the HTML converter.

Every handler has the signature ``(node, context) -> context``: it receives
a markup node and the current insertion context, attaches whatever the
node stands for to the document tree, and returns the object the node's
children should be attached to.

Block elements (headings, paragraphs, rules, list items) append paragraphs
to a section. Inline elements (strong, em, span, links, text) append to the
current paragraph, run or link, creating a paragraph first when the context
is a bare section.

"""

from __future__ import annotations

import logging
from functools import partial
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from bs4.element import PageElement

from html2doc.constants import (
    DEFAULT_COLOR_CLASS,
    HEADING_STYLE_PREFIX,
    HEADING_TAGS,
    LINE_BREAK_TAG,
    LIST_CONTAINER_TAGS,
    LIST_ITEM_TAG,
    NBSP,
    ORDERED_LIST_TAG,
    PARAGRAPH_TAGS,
    SPAN_TAG,
    STYLE_HORIZONTAL_RULE,
    STYLE_LIST_END,
    STYLE_LIST_START,
    STYLE_ORDERED_LIST,
    STYLE_UNORDERED_LIST,
    TEXT_LINE_BREAK_CHARS,
    TEXT_NODE,
)
from html2doc.document.nodes import (
    DocumentContext,
    FormattedText,
    Hyperlink,
    HyperlinkType,
    ListType,
    Paragraph,
    Section,
    TextFormat,
)
from html2doc.exceptions import HandlerContractError
from html2doc.options.html import HtmlOptions
from html2doc.parsers.context import (
    describe,
    inline_host,
    link_host,
    nearest_paragraph,
    owning_section,
    require_section,
)
from html2doc.parsers.markup import (
    element_children,
    get_attribute,
    inner_text,
    next_sibling,
    node_name,
    parent_name,
)
from html2doc.parsers.registry import NodeHandler
from html2doc.utils.styles import apply_alignment

logger = logging.getLogger(__name__)

# Inline formatting tags and the flag each one sets
FORMAT_TAGS: dict[str, TextFormat] = {
    "strong": TextFormat.BOLD,
    "bold": TextFormat.BOLD,
    "b": TextFormat.BOLD,
    "i": TextFormat.ITALIC,
    "em": TextFormat.ITALIC,
    "u": TextFormat.UNDERLINE,
}


# ============================================================================
# Block Elements
# ============================================================================


def add_heading(node: PageElement, context: DocumentContext) -> DocumentContext:
    """Append a ``Heading<N>`` paragraph; requires a Section context."""
    tag = node_name(node)
    section = require_section(context, tag)
    return section.add_paragraph().set_style(f"{HEADING_STYLE_PREFIX}{tag[1]}")


def add_paragraph(node: PageElement, context: DocumentContext) -> DocumentContext:
    """Append a paragraph to the nearest section, honoring ``text-align``.

    Parameters
    ----------
    node : PageElement
        A ``p`` or ``div`` element
    context : DocumentContext
        Current insertion context; a paragraph context resolves to the
        section that owns it

    Returns
    -------
    Paragraph
        The new paragraph

    """
    section = owning_section(context, node_name(node))
    paragraph = section.add_paragraph()
    return apply_alignment(paragraph, get_attribute(node, "style"))


def add_horizontal_rule(node: PageElement, context: DocumentContext) -> DocumentContext:
    section = owning_section(context, node_name(node))
    return section.add_paragraph().set_style(STYLE_HORIZONTAL_RULE)


def add_list_item(node: PageElement, context: DocumentContext) -> DocumentContext:
    """Append the paragraph of a list item, bracketing the list with markers.

    The first ``li`` child of a list element is preceded by a ``ListStart``
    paragraph and the last one followed by a ``ListEnd`` paragraph. Only the
    first item starts a new sequence; every later item continues it. No
    counter is kept: first and last are decided by identity against the
    parent's ``li`` children each time.

    Parameters
    ----------
    node : PageElement
        An ``li`` element
    context : DocumentContext
        A Section, or a Paragraph whose section receives the items

    Returns
    -------
    Paragraph
        The item paragraph, which receives the item's content

    """
    ordered = parent_name(node) == ORDERED_LIST_TAG
    siblings = element_children(node.parent, LIST_ITEM_TAG)
    is_first = bool(siblings) and siblings[0] is node
    is_last = bool(siblings) and siblings[-1] is node

    section = owning_section(context, LIST_ITEM_TAG)

    if is_first:
        section.add_paragraph().set_style(STYLE_LIST_START)
        logger.debug("List start (%s, %d items)", "ordered" if ordered else "unordered", len(siblings))

    item = section.add_paragraph().set_style(STYLE_ORDERED_LIST if ordered else STYLE_UNORDERED_LIST)
    item.format.list_info.continue_previous_list = not is_first
    item.format.list_info.list_type = ListType.NUMBER_LIST_1 if ordered else ListType.BULLET_LIST_1

    if is_last:
        section.add_paragraph().set_style(STYLE_LIST_END)
        logger.debug("List end")

    return item


# ============================================================================
# Inline Elements
# ============================================================================


def add_formatted_text(node: PageElement, context: DocumentContext, text_format: TextFormat) -> DocumentContext:
    """Apply ``text_format`` to the current run, or start a new run with it."""
    if isinstance(context, FormattedText):
        return context.apply_format(text_format)
    return inline_host(context, node_name(node)).add_formatted_text(text_format)


def add_hyperlink(node: PageElement, context: DocumentContext) -> DocumentContext:
    host = link_host(context, node_name(node))
    return host.add_hyperlink(get_attribute(node, "href", "") or "", HyperlinkType.WEB)


def add_span(
    node: PageElement, context: DocumentContext, default_color_class: str = DEFAULT_COLOR_CLASS
) -> DocumentContext:
    """Start a run without underline, carrying the span's class as its style.

    A span holding nothing but a non-breaking space is ignored.
    """
    if inner_text(node) == NBSP:
        return context

    run = inline_host(context, node_name(node)).add_formatted_text(TextFormat.NO_UNDERLINE)
    css_class = get_attribute(node, "class")
    if css_class and css_class != default_color_class:
        run.style = css_class
    return run


def add_line_break(node: PageElement, context: DocumentContext) -> DocumentContext:
    """Append a line break unless it would only produce empty space.

    Suppressed as the last child of its parent and right before a list.
    Directly inside a section a break needs a paragraph to live in, and
    one is only created when the next sibling is not another ``br``. Inside
    a link the break goes to the paragraph owning the link.
    """
    following = next_sibling(node)
    if following is None:
        logger.debug("Suppressed trailing <br>")
        return context
    following_name = node_name(following)
    if following_name in LIST_CONTAINER_TAGS:
        logger.debug("Suppressed <br> before <%s>", following_name)
        return context

    if isinstance(context, (FormattedText, Paragraph)):
        context.add_line_break()
        return context
    if isinstance(context, Section):
        if following_name == LINE_BREAK_TAG:
            return context
        paragraph = context.add_paragraph()
        paragraph.add_line_break()
        return paragraph
    if isinstance(context, Hyperlink) and context.paragraph is not None:
        context.paragraph.add_line_break()
        return context.paragraph

    raise HandlerContractError(
        f"<{LINE_BREAK_TAG}> handler cannot attach to {describe(context)}",
        tag=LINE_BREAK_TAG,
        context_type=describe(context),
    )


def add_text(node: PageElement, context: DocumentContext) -> DocumentContext:
    """Append decoded text, skipping whitespace-only nodes.

    Carriage returns and line feeds are removed; other whitespace is kept.
    Inside a run or link the text joins it, otherwise it goes into the
    current paragraph or a new one.
    """
    text = inner_text(node)
    for char in TEXT_LINE_BREAK_CHARS:
        text = text.replace(char, "")

    if not text.strip():
        return context

    if isinstance(context, (FormattedText, Hyperlink)):
        context.add_text(text)
        return context

    paragraph = nearest_paragraph(context, TEXT_NODE)
    paragraph.add_text(text)
    return paragraph


def build_default_handlers(options: Optional[HtmlOptions] = None) -> dict[str, NodeHandler]:
    """Return the default node name to handler mapping.

    Parameters
    ----------
    options : HtmlOptions or None, default None
        Options whose handler settings (the default color class) are bound
        into the handlers

    Returns
    -------
    dict of str to NodeHandler
        Fresh mapping, safe to modify

    """
    options = options or HtmlOptions()
    handlers: dict[str, NodeHandler] = {}

    for tag in sorted(HEADING_TAGS):
        handlers[tag] = add_heading
    for tag in sorted(PARAGRAPH_TAGS):
        handlers[tag] = add_paragraph
    for tag, text_format in FORMAT_TAGS.items():
        handlers[tag] = partial(add_formatted_text, text_format=text_format)

    handlers["a"] = add_hyperlink
    handlers[SPAN_TAG] = partial(add_span, default_color_class=options.default_color_class)
    handlers["hr"] = add_horizontal_rule
    handlers[LINE_BREAK_TAG] = add_line_break
    handlers[LIST_ITEM_TAG] = add_list_item
    handlers[TEXT_NODE] = add_text
    return handlers
