"""html2doc - convert HTML fragments into a print-oriented document model.

html2doc takes HTML as produced by rich text editors and appends it to a
document tree made of sections, paragraphs, formatted runs, hyperlinks and
line breaks. The tree is shaped for later layout (for example to PDF).

Conversion walks the parsed markup recursively. Every node is dispatched by
name to a handler from a mutable registry; the object a handler returns
becomes the insertion point of the node's children. Tags without a handler
are transparent.

Key Features
------------
- Headings, paragraphs, horizontal rules and bulleted/numbered lists
- Bold, italic and underline runs, styled spans and hyperlinks
- ``text-align`` alignment from inline styles
- Replaceable and extensible node handlers
- Outline and JSON views of the resulting document

Requirements
------------
- Python 3.10+
- beautifulsoup4 (optionally lxml or html5lib as parser backends)

Examples
--------
Convert into a new document:

    >>> from html2doc import convert_html
    >>> doc = convert_html("<h1>Title</h1><p>Hello <strong>World</strong></p>")

Append to an existing section:

    >>> from html2doc import Document, add_html
    >>> section = Document().add_section()
    >>> add_html(section, "<ul><li>A</li><li>B</li></ul>")

Register a custom handler:

    >>> from html2doc import HtmlConverter
    >>> converter = HtmlConverter()
    >>> converter.node_handlers.register("blockquote", my_quote_handler)
    >>> add_html(section, "<blockquote>Quoted</blockquote>", converter)

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# Check Python version before any imports
import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "html2doc requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from html2doc.api import add, add_html, convert_html  # noqa: E402
from html2doc.document import (  # noqa: E402
    Document,
    FormattedText,
    Hyperlink,
    LineBreak,
    Paragraph,
    ParagraphAlignment,
    Section,
    Text,
    TextFormat,
    document_to_dict,
    document_to_json,
)
from html2doc.exceptions import (  # noqa: E402
    ConversionDepthError,
    ConversionError,
    DependencyError,
    HandlerContractError,
    Html2DocError,
    RegistryError,
    ValidationError,
)
from html2doc.options import HtmlOptions  # noqa: E402
from html2doc.parsers import HtmlConverter, NodeHandlerRegistry  # noqa: E402
from html2doc.renderers import OutlineRenderer  # noqa: E402

__all__ = [
    "__version__",
    "add",
    "add_html",
    "convert_html",
    "Document",
    "FormattedText",
    "Hyperlink",
    "LineBreak",
    "Paragraph",
    "ParagraphAlignment",
    "Section",
    "Text",
    "TextFormat",
    "document_to_dict",
    "document_to_json",
    "ConversionDepthError",
    "ConversionError",
    "DependencyError",
    "HandlerContractError",
    "Html2DocError",
    "RegistryError",
    "ValidationError",
    "HtmlOptions",
    "HtmlConverter",
    "NodeHandlerRegistry",
    "OutlineRenderer",
]
