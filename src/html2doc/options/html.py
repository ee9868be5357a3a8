#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for HTML conversion.

This module defines the options controlling how markup is parsed and how
the default node handlers behave.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from html2doc.constants import DEFAULT_COLOR_CLASS, DEFAULT_HTML_PARSER, HTML_PARSERS, HtmlParser
from html2doc.options.base import BaseParserOptions


# src/html2doc/options/html.py
@dataclass(frozen=True)
class HtmlOptions(BaseParserOptions):
    """Configuration options for HTML-to-document conversion.

    Parameters
    ----------
    html_parser : {"html.parser", "html5lib", "lxml"}, default "html.parser"
        BeautifulSoup parser backend. ``html5lib`` and ``lxml`` wrap fragments
        in ``<html>``/``<body>``; those tags have no handler and are walked
        through transparently.
    default_color_class : str, default "style_color_0_0_0"
        CSS class marking plain black text. A ``span`` carrying exactly this
        class does not pass it on as a style name.
    max_nesting_depth : int, default 256
        Inherited from BaseParserOptions.

    Examples
    --------
    Use the standards-compliant parser:
        >>> options = HtmlOptions(html_parser="html5lib")

    Allow deeper markup:
        >>> options = HtmlOptions().create_updated(max_nesting_depth=1024)

    """

    html_parser: HtmlParser = field(
        default=DEFAULT_HTML_PARSER,
        metadata={
            "help": (
                "BeautifulSoup parser to use: 'html.parser' (built-in), "
                "'html5lib' (standards-compliant, slower), 'lxml' (fast, requires C library)"
            ),
            "choices": list(HTML_PARSERS),
        },
    )
    default_color_class: str = field(
        default=DEFAULT_COLOR_CLASS,
        metadata={"help": "CSS class for default black text that is never used as a span style"},
    )

    def __post_init__(self) -> None:
        """Validate field values.

        Raises
        ------
        ValueError
            If the parser backend is unknown or a numeric field is out of range.

        """
        super().__post_init__()

        if self.html_parser not in HTML_PARSERS:
            raise ValueError(f"html_parser must be one of {', '.join(HTML_PARSERS)}, got {self.html_parser!r}")
