#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_outline_renderer.py
"""Unit tests for the outline renderer."""

import pytest

from html2doc.api import convert_html
from html2doc.exceptions import InvalidOptionsError
from html2doc.options import HtmlOptions, OutlineRendererOptions
from html2doc.renderers import OutlineRenderer


@pytest.mark.unit
class TestOutlineRenderer:
    """Tests for outline rendering."""

    def test_paragraph_with_bold(self) -> None:
        doc = convert_html("<p>Hello <strong>World</strong></p>")

        assert OutlineRenderer().render_to_string(doc) == (
            "Document\n"
            "  Section\n"
            "    Paragraph\n"
            '      "Hello "\n'
            "      FormattedText [BOLD]\n"
            '        "World"'
        )

    def test_list_and_alignment(self) -> None:
        doc = convert_html('<ul><li>A</li><li style="text-align:right">B</li></ul><p style="text-align:center">c</p>')

        lines = OutlineRenderer().render_to_string(doc.sections[0]).splitlines()
        assert lines == [
            "Section",
            "  Paragraph [ListStart]",
            "  Paragraph [UnorderedList] {BulletList1}",
            '    "A"',
            "  Paragraph [UnorderedList] {BulletList1, continued}",
            '    "B"',
            "  Paragraph [ListEnd]",
            "  Paragraph (center)",
            '    "c"',
        ]

    def test_links_spans_and_breaks(self) -> None:
        doc = convert_html('<p><a href="u">x</a><br><span class="hl">y</span></p>')

        lines = OutlineRenderer(OutlineRendererOptions(indent="-")).render_to_string(doc.sections[0]).splitlines()
        assert lines == [
            "Section",
            "-Paragraph",
            "--Hyperlink -> u",
            '---"x"',
            "--LineBreak",
            "--FormattedText [NO_UNDERLINE] hl",
            '---"y"',
        ]

    def test_hide_empty_paragraphs(self) -> None:
        doc = convert_html("<p>a</p><hr><p>b</p>")

        outline = OutlineRenderer(OutlineRendererOptions(show_empty=False)).render_to_string(doc)
        assert "HorizontalRule" not in outline
        assert outline.count("Paragraph") == 2

    def test_wrong_options_type(self) -> None:
        with pytest.raises(InvalidOptionsError):
            OutlineRenderer(HtmlOptions())  # type: ignore[arg-type]
