#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2doc/utils/__init__.py
"""Utility modules for the html2doc package.

This package contains style parsing helpers, dependency checks and timing
utilities shared by converters and the CLI.
"""

from html2doc.utils.styles import apply_alignment, extract_text_align, parse_text_alignment

__all__ = [
    "apply_alignment",
    "extract_text_align",
    "parse_text_alignment",
]
