#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2doc/parsers/__init__.py
"""Markup converters and their node handler machinery."""

from __future__ import annotations

from html2doc.parsers.base import BaseConverter, Converter, InsertAction
from html2doc.parsers.context import WalkState
from html2doc.parsers.handlers import build_default_handlers
from html2doc.parsers.html import HtmlConverter
from html2doc.parsers.registry import NodeHandler, NodeHandlerRegistry

__all__ = [
    "BaseConverter",
    "Converter",
    "HtmlConverter",
    "InsertAction",
    "NodeHandler",
    "NodeHandlerRegistry",
    "WalkState",
    "build_default_handlers",
]
