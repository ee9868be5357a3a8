#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2doc/parsers/html.py
"""HTML to document tree converter.

This module converts an HTML fragment into document objects inserted into
an existing Section or Paragraph. The markup is parsed with BeautifulSoup
and walked recursively; each node is dispatched by name to a handler from
a mutable registry, and whatever a handler returns becomes the insertion
context of the node's children.

Nodes without a handler are transparent: their children are converted as
if they were children of the enclosing element.

"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable, Optional

if TYPE_CHECKING:
    from bs4 import BeautifulSoup
    from bs4.element import PageElement

from html2doc.document.nodes import DocumentContainer, Paragraph, Section
from html2doc.exceptions import ConversionDepthError, HandlerContractError, ValidationError
from html2doc.options.html import HtmlOptions
from html2doc.parsers.base import BaseConverter, InsertAction
from html2doc.parsers.context import WalkState, describe
from html2doc.parsers.handlers import build_default_handlers
from html2doc.parsers.markup import (
    child_nodes,
    has_child_nodes,
    is_text_node,
    node_name,
    parse_markup,
    previous_sibling,
)
from html2doc.parsers.registry import NodeHandlerRegistry
from html2doc.progress import ProgressCallback
from html2doc.utils.decorators import debug_timer

logger = logging.getLogger(__name__)


class HtmlConverter(BaseConverter):
    """Convert HTML markup into document objects.

    Parameters
    ----------
    options : HtmlOptions or None, default = None
        Conversion options
    progress_callback : ProgressCallback or None, default = None
        Optional callback receiving ``started``/``finished`` events
    node_handlers : NodeHandlerRegistry or None, default = None
        Handler registry to use; the default handler set when omitted

    Examples
    --------
        >>> from html2doc.document import Document
        >>> section = Document().add_section()
        >>> converter = HtmlConverter()
        >>> converter.convert("<p>Hello <strong>World</strong></p>")(section)

    """

    def __init__(
        self,
        options: HtmlOptions | None = None,
        progress_callback: Optional[ProgressCallback] = None,
        node_handlers: Optional[NodeHandlerRegistry] = None,
    ):
        BaseConverter._validate_options_type(options, HtmlOptions, "html")
        options = options or HtmlOptions()
        super().__init__(options, progress_callback)
        self.options: HtmlOptions = options
        if node_handlers is None:
            node_handlers = NodeHandlerRegistry(build_default_handlers(options))
        self._node_handlers = node_handlers

    @property
    def node_handlers(self) -> NodeHandlerRegistry:
        """Handler registry consulted during conversion; may be modified between conversions."""
        return self._node_handlers

    def convert(self, contents: str) -> InsertAction:
        """Parse ``contents`` and return the action inserting it into a container.

        Parameters
        ----------
        contents : str
            HTML fragment

        Returns
        -------
        callable
            Action taking a Section or Paragraph. Calling it converts the
            parsed markup into that container.

        Raises
        ------
        ValidationError
            If contents are None or empty
        DependencyError
            If the configured parser backend is not installed

        """
        if not contents:
            raise ValidationError("HTML contents must be a non-empty string", parameter_name="html")

        soup = parse_markup(contents, self.options.html_parser)

        def insert(container: DocumentContainer) -> None:
            self.convert_tree(soup, container)

        return insert

    def convert_tree(self, soup: BeautifulSoup, container: DocumentContainer) -> None:
        """Convert an already parsed tree into ``container``.

        Parameters
        ----------
        soup : BeautifulSoup
            Parsed markup
        container : Section or Paragraph
            Insertion point

        Raises
        ------
        ValidationError
            If container is None or not a Section/Paragraph
        HandlerContractError
            If a handler receives a context it cannot work with
        ConversionDepthError
            If the markup nests deeper than ``max_nesting_depth``

        """
        if container is None:
            raise ValidationError("Target container must not be None", parameter_name="section")
        if not isinstance(container, (Section, Paragraph)):
            raise ValidationError(
                f"Target container must be a Section or Paragraph, got {describe(container)}",
                parameter_name="section",
                parameter_value=container,
            )

        self._emit_progress("started", "Converting HTML fragment", current=0, total=1)
        with debug_timer(logger, "HTML tree walk"):
            self._walk(child_nodes(soup), WalkState(container=container))
        self._emit_progress("finished", "HTML conversion completed", current=1, total=1)

    def _walk(self, nodes: Iterable[PageElement], state: WalkState) -> None:
        """Convert sibling ``nodes`` with the insertion context held by ``state``.

        A handled node receives ``state.target`` and its result becomes the
        context of its children. When a handled node directly follows a
        text node whose sibling handler produced a paragraph, that paragraph
        becomes the current context, so text and inline markup interleaved
        with it continue the same paragraph.
        """
        if state.depth > self.options.max_nesting_depth:
            raise ConversionDepthError(state.depth, self.options.max_nesting_depth)

        for node in nodes:
            name = node_name(node)
            state.previous_node = previous_sibling(node)
            handler = self._node_handlers.get(name)

            if handler is None:
                if has_child_nodes(node):
                    logger.debug("No handler for <%s>, converting its children in place", name)
                    self._walk(child_nodes(node), state.descend(state.context))
                continue

            if is_text_node(state.previous_node) and isinstance(state.previous_result, Paragraph):
                state.context = state.previous_result

            result = handler(node, state.target)
            if result is None:
                raise HandlerContractError(
                    f"Handler for {name!r} returned no context", tag=name, context_type=describe(state.target)
                )

            if has_child_nodes(node):
                self._walk(child_nodes(node), state.descend(result))

            state.previous_result = result
