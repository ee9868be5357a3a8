#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for html2doc.

This module centralizes the style names, tag names, reserved markers and
default configuration values used across the converter.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. Node Kinds and Tags - names the walker and handlers dispatch on
3. Paragraph Styles - style names emitted into the document model
4. Conversion Defaults - option defaults
5. Dependencies - package requirements checked at runtime
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

HtmlParser = Literal["html.parser", "html5lib", "lxml"]
OutputFormat = Literal["outline", "json"]

HTML_PARSERS: tuple[str, ...] = ("html.parser", "html5lib", "lxml")
OUTPUT_FORMATS: tuple[str, ...] = ("outline", "json")

# =============================================================================
# Node Kinds and Tags
# =============================================================================

# Distinguished names for non-element nodes, mirroring the DOM nodeName values
TEXT_NODE = "#text"
COMMENT_NODE = "#comment"
CDATA_NODE = "#cdata-section"
DOCTYPE_NODE = "#doctype"
PROCESSING_INSTRUCTION_NODE = "#processing-instruction"
DECLARATION_NODE = "#declaration"

HEADING_TAGS = frozenset({"h1", "h2", "h3", "h4", "h5", "h6"})
PARAGRAPH_TAGS = frozenset({"p", "div"})
LIST_CONTAINER_TAGS = frozenset({"ul", "ol"})
ORDERED_LIST_TAG = "ol"
LIST_ITEM_TAG = "li"
LINE_BREAK_TAG = "br"
SPAN_TAG = "span"

# Inner text of a span that only holds a non-breaking space (decoded &nbsp;)
NBSP = "\u00a0"

# Removed from text nodes before the whitespace check
TEXT_LINE_BREAK_CHARS = "\r\n"

# =============================================================================
# Paragraph Styles
# =============================================================================

HEADING_STYLE_PREFIX = "Heading"
STYLE_HORIZONTAL_RULE = "HorizontalRule"
STYLE_LIST_START = "ListStart"
STYLE_LIST_END = "ListEnd"
STYLE_UNORDERED_LIST = "UnorderedList"
STYLE_ORDERED_LIST = "OrderedList"

# =============================================================================
# Conversion Defaults
# =============================================================================

DEFAULT_HTML_PARSER: HtmlParser = "html.parser"
DEFAULT_MAX_NESTING_DEPTH = 256

# CSS class written by some editors for plain black text; never used as a style name
DEFAULT_COLOR_CLASS = "style_color_0_0_0"

DEFAULT_OUTPUT_FORMAT: OutputFormat = "outline"
DEFAULT_LOG_LEVEL = "WARNING"

# Environment variables read by the CLI for default values
ENV_PREFIX = "HTML2DOC_"

# =============================================================================
# Dependencies
# =============================================================================

# (install_name, import_name, version_spec)
DEPS_HTML = [("beautifulsoup4", "bs4", ">=4.12.0")]
DEPS_HTML_PARSER_BACKENDS = {
    "html.parser": [],
    "html5lib": [("html5lib", "html5lib", "")],
    "lxml": [("lxml", "lxml", "")],
}
