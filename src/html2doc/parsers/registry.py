#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2doc/parsers/registry.py
"""Node handler registry for the HTML converter.

The registry maps a node name (a lowercase tag name such as ``"p"`` or a
``#``-prefixed node kind such as ``"#text"``) to a handler with the signature
``(node, context) -> context``. Names without a handler are walked through
transparently by the converter.

Examples
--------
Render ``<blockquote>`` as an indented paragraph style:

    >>> from html2doc.parsers.context import owning_section
    >>> def add_quote(node, context):
    ...     return owning_section(context, "blockquote").add_paragraph().set_style("Quote")
    >>> converter = HtmlConverter()
    >>> converter.node_handlers.register("blockquote", add_quote)

"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Callable, Iterator, Mapping, Optional

if TYPE_CHECKING:
    from bs4.element import PageElement

from html2doc.document.nodes import DocumentContext
from html2doc.exceptions import RegistryError

logger = logging.getLogger(__name__)

NodeHandler = Callable[["PageElement", DocumentContext], DocumentContext]

_TAG_PATTERN = re.compile(r"^[a-z][a-z0-9_:\-]*$")
_NODE_KIND_PATTERN = re.compile(r"^#[a-z][a-z\-]*$")


class NodeHandlerRegistry:
    """Mutable mapping of node names to handlers.

    Parameters
    ----------
    handlers : mapping of str to NodeHandler, optional
        Initial entries; each is validated like a ``register`` call

    """

    def __init__(self, handlers: Optional[Mapping[str, NodeHandler]] = None) -> None:
        self._handlers: dict[str, NodeHandler] = {}
        for tag, handler in (handlers or {}).items():
            self.register(tag, handler)

    @staticmethod
    def normalize_tag(tag: str) -> str:
        """Validate a registry key and return its normalized (lowercase) form.

        Parameters
        ----------
        tag : str
            Tag name or ``#`` node kind

        Returns
        -------
        str
            Stripped, lowercased key

        Raises
        ------
        RegistryError
            If the key is not a string, is empty or is not a valid name

        """
        if not isinstance(tag, str):
            raise RegistryError(f"Handler key must be a string, got {type(tag).__name__}")
        key = tag.strip().lower()
        if not key:
            raise RegistryError("Handler key must not be empty", tag=tag)
        if not (_TAG_PATTERN.match(key) or _NODE_KIND_PATTERN.match(key)):
            raise RegistryError(f"Invalid handler key: {tag!r}", tag=tag)
        return key

    def register(self, tag: str, handler: NodeHandler, replace: bool = False) -> None:
        """Register a handler for a node name.

        Parameters
        ----------
        tag : str
            Tag name or ``#`` node kind
        handler : NodeHandler
            Callable taking ``(node, context)`` and returning the new context
        replace : bool, default False
            Whether an existing handler may be replaced

        Raises
        ------
        RegistryError
            If the key is invalid, the handler is not callable, or a handler
            is already registered and ``replace`` is False

        """
        key = self.normalize_tag(tag)
        if not callable(handler):
            raise RegistryError(f"Handler for {key!r} must be callable", tag=key)
        if key in self._handlers and not replace:
            raise RegistryError(f"A handler for {key!r} is already registered", tag=key)
        self._handlers[key] = handler
        logger.debug("Registered node handler for %s", key)

    def unregister(self, tag: str) -> NodeHandler:
        """Remove and return the handler of a node name.

        Raises
        ------
        RegistryError
            If no handler is registered for the name

        """
        key = self.normalize_tag(tag)
        try:
            handler = self._handlers.pop(key)
        except KeyError as e:
            raise RegistryError(f"No handler registered for {key!r}", tag=key) from e
        logger.debug("Removed node handler for %s", key)
        return handler

    def get(self, tag: str) -> Optional[NodeHandler]:
        """Return the handler for an already normalized node name, or None."""
        return self._handlers.get(tag)

    def tags(self) -> list[str]:
        return sorted(self._handlers)

    def copy(self) -> NodeHandlerRegistry:
        """Return an independent registry with the same entries."""
        clone = NodeHandlerRegistry()
        clone._handlers = dict(self._handlers)
        return clone

    def __contains__(self, tag: object) -> bool:
        return isinstance(tag, str) and tag.strip().lower() in self._handlers

    def __getitem__(self, tag: str) -> NodeHandler:
        key = self.normalize_tag(tag)
        try:
            return self._handlers[key]
        except KeyError as e:
            raise RegistryError(f"No handler registered for {key!r}", tag=key) from e

    def __setitem__(self, tag: str, handler: NodeHandler) -> None:
        self.register(tag, handler, replace=True)

    def __delitem__(self, tag: str) -> None:
        self.unregister(tag)

    def __iter__(self) -> Iterator[str]:
        return iter(self._handlers)

    def __len__(self) -> int:
        return len(self._handlers)

    def __repr__(self) -> str:
        return f"NodeHandlerRegistry({', '.join(self.tags())})"
