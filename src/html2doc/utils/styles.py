#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2doc/utils/styles.py
"""Inline style attribute helpers.

Only the ``text-align`` declaration is understood; there is no cascade and
no specificity handling.
"""

from __future__ import annotations

from html2doc.document.nodes import Paragraph, ParagraphAlignment

TEXT_ALIGN_DECLARATION = "text-align:"

_ALIGNMENTS = {
    "left": ParagraphAlignment.LEFT,
    "center": ParagraphAlignment.CENTER,
    "right": ParagraphAlignment.RIGHT,
    "justify": ParagraphAlignment.JUSTIFY,
}


def extract_text_align(style: str | None) -> str | None:
    """Return the raw ``text-align`` value of an inline style string.

    The declaration name is matched case-insensitively. The value runs from
    after the colon to the next ``;`` or the end of the string and is
    trimmed and lowercased.

    Parameters
    ----------
    style : str or None
        Contents of a ``style`` attribute

    Returns
    -------
    str or None
        The declared value, or None when there is no declaration

    """
    if not style:
        return None

    normalized = style.strip().lower()
    start = normalized.find(TEXT_ALIGN_DECLARATION)
    if start == -1:
        return None

    start += len(TEXT_ALIGN_DECLARATION)
    end = normalized.find(";", start)
    if end == -1:
        end = len(normalized)
    return normalized[start:end].strip()


def parse_text_alignment(style: str | None) -> ParagraphAlignment | None:
    """Map the ``text-align`` declaration of a style string to an alignment.

    Parameters
    ----------
    style : str or None
        Contents of a ``style`` attribute

    Returns
    -------
    ParagraphAlignment or None
        The alignment, or None when the declaration is absent or its value
        is not one of left, center, right or justify

    Examples
    --------
        >>> parse_text_alignment("color: red; text-align: center;")
        <ParagraphAlignment.CENTER: 'center'>
        >>> parse_text_alignment("text-align: middle") is None
        True

    """
    value = extract_text_align(style)
    if value is None:
        return None
    return _ALIGNMENTS.get(value)


def apply_alignment(paragraph: Paragraph, style: str | None) -> Paragraph:
    """Set the paragraph alignment from a style string when one is declared.

    Unknown or absent values leave the current alignment untouched.
    """
    alignment = parse_text_alignment(style)
    if alignment is not None:
        paragraph.format.alignment = alignment
    return paragraph
