#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2doc/parsers/context.py
"""Insertion context resolution for the HTML tree walker.

During a walk exactly one document object is "current": the object new
content attaches to. It is always one of Section, Paragraph, FormattedText
or Hyperlink (``DocumentContext``). Handlers never cast the context
themselves; they ask one of the resolvers below for the kind of object
they need, and an incompatible context raises HandlerContractError.

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Union

if TYPE_CHECKING:
    from bs4.element import PageElement

from html2doc.document.nodes import (
    DocumentContainer,
    DocumentContext,
    FormattedText,
    Hyperlink,
    Paragraph,
    Section,
)
from html2doc.exceptions import HandlerContractError

InlineHost = Union[Paragraph, FormattedText, Hyperlink]
LinkHost = Union[Paragraph, FormattedText]


@dataclass
class WalkState:
    """One-step history threaded through a single level of the tree walk.

    Parameters
    ----------
    container : Section or Paragraph
        Target the conversion was started against; handlers fall back to it
        while no context is set
    context : DocumentContext or None, default None
        Current insertion context of this level
    previous_result : DocumentContext or None, default None
        What the handler of the previous handled sibling returned
    previous_node : PageElement or None, default None
        Previous sibling of the node being processed
    depth : int, default 0
        Nesting depth of this level

    """

    container: DocumentContainer
    context: Optional[DocumentContext] = None
    previous_result: Optional[DocumentContext] = None
    previous_node: Optional[PageElement] = None
    depth: int = 0

    @property
    def target(self) -> DocumentContext:
        """Return the context handlers receive: the current one or the container."""
        return self.context if self.context is not None else self.container

    def descend(self, context: Optional[DocumentContext]) -> WalkState:
        """Return the state for the children of the node being processed."""
        return WalkState(container=self.container, context=context, depth=self.depth + 1)


def describe(context: object) -> str:
    return type(context).__name__


def _violation(tag: str, context: object, expected: str) -> HandlerContractError:
    return HandlerContractError(
        f"<{tag}> handler requires {expected} context, got {describe(context)}",
        tag=tag,
        context_type=describe(context),
    )


def require_section(context: object, tag: str) -> Section:
    """Return the context when it is a Section.

    Raises
    ------
    HandlerContractError
        For every other context kind

    """
    if isinstance(context, Section):
        return context
    raise _violation(tag, context, "a Section")


def owning_section(context: object, tag: str) -> Section:
    """Return the Section a block element should be appended to.

    A Section is used as is; a Paragraph resolves to the section owning it.

    Raises
    ------
    HandlerContractError
        For inline contexts and for paragraphs not attached to a section

    """
    if isinstance(context, Section):
        return context
    if isinstance(context, Paragraph):
        section = context.section
        if section is None:
            raise HandlerContractError(
                f"<{tag}> handler requires a paragraph attached to a section",
                tag=tag,
                context_type=describe(context),
            )
        return section
    raise _violation(tag, context, "a Section or Paragraph")


def nearest_paragraph(context: object, tag: str) -> Paragraph:
    """Return the context when it is a Paragraph, or a new paragraph on a Section.

    Raises
    ------
    HandlerContractError
        For inline contexts

    """
    if isinstance(context, Paragraph):
        return context
    if isinstance(context, Section):
        return context.add_paragraph()
    raise _violation(tag, context, "a Section or Paragraph")


def inline_host(context: object, tag: str) -> InlineHost:
    """Return the object an inline run should be appended to.

    Paragraphs, formatted runs and hyperlinks host inline content
    themselves; a Section gets a new paragraph.
    """
    if isinstance(context, (Paragraph, FormattedText, Hyperlink)):
        return context
    if isinstance(context, Section):
        return context.add_paragraph()
    raise _violation(tag, context, "a Section, Paragraph, FormattedText or Hyperlink")


def link_host(context: object, tag: str) -> LinkHost:
    """Return the object a hyperlink should be appended to.

    Links do not nest: inside a Hyperlink the link is appended to whatever
    owns that hyperlink.
    """
    if isinstance(context, Hyperlink):
        context = context.parent
    host = inline_host(context, tag)
    if isinstance(host, Hyperlink):
        raise _violation(tag, context, "a Section, Paragraph or FormattedText")
    return host
