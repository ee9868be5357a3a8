"""Command-line interface for the html2doc conversion library.

This module provides a small CLI that converts an HTML fragment into a
fresh document and prints the result as a text outline or as JSON. It is
mostly useful for checking how markup maps onto the document model.

Environment Variable Support
----------------------------
Some options take their defaults from environment variables
(``HTML2DOC_PARSER``, ``HTML2DOC_MAX_DEPTH``, ``HTML2DOC_LOG_LEVEL``).
CLI arguments always override environment variables.

Examples
--------
Convert a file::

    $ html2doc fragment.html

Read from stdin and print JSON::

    $ echo "<p>Hello <b>World</b></p>" | html2doc --format json

Use rich formatting::

    $ html2doc fragment.html --rich

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.
# src/html2doc/cli/__init__.py
import argparse
import logging
import os
import sys
from typing import Optional

from html2doc import __version__
from html2doc.api import convert_html
from html2doc.cli.output import print_rich_outline, should_use_rich_output
from html2doc.constants import (
    DEFAULT_HTML_PARSER,
    DEFAULT_LOG_LEVEL,
    DEFAULT_MAX_NESTING_DEPTH,
    DEFAULT_OUTPUT_FORMAT,
    ENV_PREFIX,
    HTML_PARSERS,
    OUTPUT_FORMATS,
)
from html2doc.document.serialization import document_to_json
from html2doc.exceptions import Html2DocError, ValidationError
from html2doc.logging_utils import configure_logging
from html2doc.options.html import HtmlOptions
from html2doc.options.outline import OutlineRendererOptions
from html2doc.renderers.outline import OutlineRenderer

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 2
EXIT_FILE_ERROR = 3

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def _env_default(name: str, fallback: str) -> str:
    return os.environ.get(f"{ENV_PREFIX}{name}", fallback)


def positive_int(value: str) -> int:
    """Argparse type accepting integers greater than zero."""
    try:
        number = int(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value!r}") from e
    if number <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value!r}")
    return number


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser, with defaults taken from the environment."""
    parser = argparse.ArgumentParser(
        prog="html2doc",
        description="Convert an HTML fragment into a print document tree and show the result.",
    )
    parser.add_argument("input", nargs="?", default="-", help="HTML file to convert ('-' or omitted reads stdin)")
    parser.add_argument(
        "--format",
        choices=OUTPUT_FORMATS,
        default=DEFAULT_OUTPUT_FORMAT,
        help="Output format (default: %(default)s)",
    )
    parser.add_argument(
        "--parser",
        choices=HTML_PARSERS,
        default=_env_default("PARSER", DEFAULT_HTML_PARSER),
        help="BeautifulSoup parser backend (env: HTML2DOC_PARSER, default: %(default)s)",
    )
    parser.add_argument(
        "--max-depth",
        type=positive_int,
        default=_env_default("MAX_DEPTH", str(DEFAULT_MAX_NESTING_DEPTH)),
        help="Maximum markup nesting depth (env: HTML2DOC_MAX_DEPTH, default: %(default)s)",
    )
    parser.add_argument(
        "--rich",
        action="store_true",
        help="Enable rich terminal output (automatically disabled when output is piped)",
    )
    parser.add_argument("--force-rich", action="store_true", help="Use rich output even when output is piped")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=_env_default("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        help="Logging level (env: HTML2DOC_LOG_LEVEL, default: %(default)s)",
    )
    parser.add_argument("--log-file", type=str, help="Also write log output to this file")
    parser.add_argument("--trace", action="store_true", help="Verbose DEBUG logging with timestamps")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _read_input(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, encoding="utf-8") as f:
        return f.read()


def main(args: Optional[list[str]] = None) -> int:
    """Execute the CLI and return the process exit code."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    # argparse converts string defaults with ``type`` but never checks them against ``choices``
    if parsed_args.parser not in HTML_PARSERS:
        parser.error(f"{ENV_PREFIX}PARSER: invalid choice {parsed_args.parser!r}")

    configure_logging(parsed_args.log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)

    try:
        html = _read_input(parsed_args.input)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: cannot read {parsed_args.input}: {e}", file=sys.stderr)
        return EXIT_FILE_ERROR

    options = HtmlOptions(html_parser=parsed_args.parser, max_nesting_depth=parsed_args.max_depth)

    try:
        document = convert_html(html, options)
    except ValidationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR
    except Html2DocError as e:
        logger.debug("Conversion failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    if parsed_args.format == "json":
        print(document_to_json(document, indent=2))
        return EXIT_SUCCESS

    renderer_options = OutlineRendererOptions()
    outline = OutlineRenderer(renderer_options).render_to_string(document)
    if should_use_rich_output(parsed_args):
        print_rich_outline(outline, renderer_options.indent)
    else:
        if parsed_args.rich:
            logger.info("Rich output unavailable, printing plain outline")
        print(outline)
    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
