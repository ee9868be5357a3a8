#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_html_converter.py
"""Unit tests for the HTML to document converter.

Tests cover:
- Block elements (headings, paragraphs, rules)
- Inline formatting, spans and hyperlinks
- Lists and their start/end markers
- Line break suppression rules
- Context continuation between text and inline siblings
- Transparent handling of unregistered tags
- Error handling and the nesting depth guard

"""

from dataclasses import fields

import pytest

from html2doc.document import (
    Document,
    FormattedText,
    Hyperlink,
    LineBreak,
    ListType,
    Paragraph,
    ParagraphAlignment,
    Text,
    TextFormat,
)
from html2doc.exceptions import (
    ConversionDepthError,
    HandlerContractError,
    InvalidOptionsError,
    ValidationError,
)
from html2doc.options import HtmlOptions, OutlineRendererOptions
from html2doc.parsers.context import WalkState
from html2doc.parsers.html import HtmlConverter
from html2doc.parsers.registry import NodeHandlerRegistry


def styles(section):
    return [p.style for p in section.paragraphs]


@pytest.mark.unit
class TestBlockElements:
    """Tests for headings, paragraphs and horizontal rules."""

    def test_headings_h1_to_h6(self, convert) -> None:
        """Test that every heading level maps to its Heading<N> style."""
        section = convert("<h1>H1</h1><h2>H2</h2><h3>H3</h3><h4>H4</h4><h5>H5</h5><h6>H6</h6>")

        assert styles(section) == [f"Heading{i}" for i in range(1, 7)]
        assert [p.get_text() for p in section.paragraphs] == [f"H{i}" for i in range(1, 7)]

    def test_simple_paragraph(self, convert) -> None:
        section = convert("<p>Hello world</p>")

        assert len(section.paragraphs) == 1
        paragraph = section.paragraphs[0]
        assert paragraph.style is None
        assert len(paragraph.content) == 1
        assert isinstance(paragraph.content[0], Text)
        assert paragraph.content[0].content == "Hello world"

    def test_div_creates_paragraph(self, convert) -> None:
        section = convert("<div>First</div><div>Second</div>")

        assert [p.get_text() for p in section.paragraphs] == ["First", "Second"]

    def test_horizontal_rule(self, convert) -> None:
        """Test that hr becomes its own styled paragraph."""
        section = convert("<p>Before</p><hr><p>After</p>")

        assert styles(section) == [None, "HorizontalRule", None]
        assert section.paragraphs[1].is_empty

    def test_paragraph_alignment(self, convert) -> None:
        section = convert(
            '<p style="text-align: center;">a</p>'
            '<div style="TEXT-ALIGN:right">b</div>'
            '<p style="color: red; text-align: justify">c</p>'
            '<p style="text-align: middle">d</p>'
            "<p>e</p>"
        )

        assert [p.format.alignment for p in section.paragraphs] == [
            ParagraphAlignment.CENTER,
            ParagraphAlignment.RIGHT,
            ParagraphAlignment.JUSTIFY,
            None,
            None,
        ]

    def test_nested_paragraph_goes_to_owning_section(self, convert) -> None:
        """Test that a paragraph inside a paragraph is appended to the section."""
        section = convert("<div>Outer<p>Inner</p></div>")

        assert [p.get_text() for p in section.paragraphs] == ["Outer", "Inner"]


@pytest.mark.unit
class TestInlineElements:
    """Tests for formatted runs, spans, links and text."""

    def test_paragraph_with_bold_run(self, convert) -> None:
        """Test the canonical paragraph with a strong child."""
        section = convert("<p>Hello <strong>World</strong></p>")

        assert len(section.paragraphs) == 1
        content = section.paragraphs[0].content
        assert len(content) == 2
        assert isinstance(content[0], Text)
        assert content[0].content == "Hello "
        assert isinstance(content[1], FormattedText)
        assert content[1].format == TextFormat.BOLD
        assert content[1].get_text() == "World"

    @pytest.mark.parametrize(
        "tag,expected",
        [
            ("strong", TextFormat.BOLD),
            ("bold", TextFormat.BOLD),
            ("b", TextFormat.BOLD),
            ("i", TextFormat.ITALIC),
            ("em", TextFormat.ITALIC),
            ("u", TextFormat.UNDERLINE),
        ],
    )
    def test_format_tags(self, convert, tag, expected) -> None:
        section = convert(f"<p><{tag}>x</{tag}></p>")

        run = section.paragraphs[0].content[0]
        assert isinstance(run, FormattedText)
        assert run.format == expected

    def test_nested_formats_merge_into_one_run(self, convert) -> None:
        """Test that a format tag inside a run adds its flag to that run."""
        section = convert("<p><b><i>x</i></b></p>")

        content = section.paragraphs[0].content
        assert len(content) == 1
        assert content[0].format == TextFormat.BOLD | TextFormat.ITALIC
        assert content[0].get_text() == "x"

    def test_inline_at_section_level_creates_paragraph(self, convert) -> None:
        section = convert("<em>loose</em>")

        assert len(section.paragraphs) == 1
        assert section.paragraphs[0].content[0].italic

    def test_span_with_class_sets_style(self, convert) -> None:
        section = convert('<p><span class="highlight">x</span></p>')

        run = section.paragraphs[0].content[0]
        assert isinstance(run, FormattedText)
        assert run.format == TextFormat.NO_UNDERLINE
        assert run.style == "highlight"

    def test_span_with_default_color_class_has_no_style(self, convert) -> None:
        section = convert('<p><span class="style_color_0_0_0">x</span><span>y</span></p>')

        assert [run.style for run in section.paragraphs[0].content] == [None, None]

    def test_span_default_color_class_is_configurable(self, section) -> None:
        converter = HtmlConverter(HtmlOptions(default_color_class="plain"))
        converter.convert('<p><span class="plain">x</span><span class="style_color_0_0_0">y</span></p>')(section)

        assert [run.style for run in section.paragraphs[0].content] == [None, "style_color_0_0_0"]

    def test_span_with_only_nbsp_produces_nothing(self, convert) -> None:
        section = convert("<span>&nbsp;</span>")

        assert section.paragraphs == []

    def test_hyperlink(self, convert) -> None:
        section = convert('<p>See <a href="https://example.com">the site</a></p>')

        content = section.paragraphs[0].content
        assert isinstance(content[1], Hyperlink)
        assert content[1].url == "https://example.com"
        assert content[1].get_text() == "the site"

    def test_hyperlink_without_href(self, convert) -> None:
        section = convert("<p><a>anchor</a></p>")

        assert section.paragraphs[0].content[0].url == ""

    def test_formatting_inside_hyperlink(self, convert) -> None:
        section = convert('<p><a href="u"><b>bold link</b></a></p>')

        link = section.paragraphs[0].content[0]
        assert isinstance(link, Hyperlink)
        assert isinstance(link.content[0], FormattedText)
        assert link.content[0].bold

    def test_entities_are_decoded(self, convert) -> None:
        section = convert("<p>Fish &amp; Chips &lt;3</p>")

        assert section.paragraphs[0].get_text() == "Fish & Chips <3"

    @pytest.mark.parametrize(
        "markup,expected",
        [
            ("<p>Fish &amp;amp; Chips</p>", "Fish &amp; Chips"),
            ("<p>Write &amp;lt;br&amp;gt; for a break</p>", "Write &lt;br&gt; for a break"),
            (
                "<p>https://x.org/?a=1&amp;region=us&amp;section=2</p>",
                "https://x.org/?a=1&region=us&section=2",
            ),
        ],
    )
    def test_entities_are_decoded_once(self, convert, markup, expected) -> None:
        """Test that escaped entity text keeps its literal form."""
        section = convert(markup)

        assert section.paragraphs[0].get_text() == expected

    def test_line_feeds_removed_but_spaces_kept(self, convert) -> None:
        section = convert("<p>Hello\r\nWorld  again</p>")

        assert section.paragraphs[0].get_text() == "HelloWorld  again"

    def test_whitespace_only_text_is_ignored(self, convert) -> None:
        section = convert("<p>A</p>\n   \n<p>B</p>\n")

        assert [p.get_text() for p in section.paragraphs] == ["A", "B"]

    def test_comments_are_skipped(self, convert) -> None:
        section = convert("<p>A<!-- note -->B</p>")

        assert section.paragraphs[0].get_text() == "AB"


@pytest.mark.unit
class TestLists:
    """Tests for list item paragraphs and list markers."""

    def test_unordered_list(self, convert) -> None:
        section = convert("<ul><li>A</li><li>B</li></ul>")

        assert styles(section) == ["ListStart", "UnorderedList", "UnorderedList", "ListEnd"]
        first, second = section.paragraphs[1], section.paragraphs[2]
        assert first.get_text() == "A"
        assert first.format.list_info.list_type == ListType.BULLET_LIST_1
        assert first.format.list_info.continue_previous_list is False
        assert second.get_text() == "B"
        assert second.format.list_info.continue_previous_list is True

    def test_ordered_list(self, convert) -> None:
        section = convert("<ol><li>One</li><li>Two</li><li>Three</li></ol>")

        assert styles(section) == ["ListStart", "OrderedList", "OrderedList", "OrderedList", "ListEnd"]
        items = section.paragraphs[1:4]
        assert all(p.format.list_info.list_type == ListType.NUMBER_LIST_1 for p in items)
        assert [p.format.list_info.continue_previous_list for p in items] == [False, True, True]

    def test_single_item_list_has_both_markers(self, convert) -> None:
        section = convert("<ul><li>Only</li></ul>")

        assert styles(section) == ["ListStart", "UnorderedList", "ListEnd"]

    def test_whitespace_between_items(self, convert) -> None:
        section = convert("<ul>\n  <li>A</li>\n  <li>B</li>\n</ul>")

        assert styles(section) == ["ListStart", "UnorderedList", "UnorderedList", "ListEnd"]

    def test_each_list_is_bracketed(self, convert) -> None:
        section = convert("<ul><li>A</li></ul><ol><li>B</li></ol>")

        assert styles(section) == ["ListStart", "UnorderedList", "ListEnd", "ListStart", "OrderedList", "ListEnd"]

    def test_nested_list_items_go_to_section(self, convert) -> None:
        """Test that a nested list is bracketed on its own after the outer item."""
        section = convert("<ul><li>A<ul><li>B</li></ul></li></ul>")

        assert styles(section) == ["ListStart", "UnorderedList", "ListEnd", "ListStart", "UnorderedList", "ListEnd"]
        assert section.paragraphs[1].get_text() == "A"
        assert section.paragraphs[4].get_text() == "B"

    def test_formatted_item_content(self, convert) -> None:
        section = convert("<ul><li><b>Bold</b> item</li></ul>")

        item = section.paragraphs[1]
        assert item.content[0].bold
        assert item.get_text() == "Bold item"


@pytest.mark.unit
class TestLineBreaks:
    """Tests for line break placement and suppression."""

    def test_break_between_text(self, convert) -> None:
        section = convert("<p>One<br>Two</p>")

        content = section.paragraphs[0].content
        assert [type(item) for item in content] == [Text, LineBreak, Text]

    def test_trailing_break_is_suppressed(self, convert) -> None:
        section = convert("<p>Line<br></p>")

        assert [type(item) for item in section.paragraphs[0].content] == [Text]

    def test_break_before_list_is_suppressed(self, convert) -> None:
        section = convert("<p>Items<br><ul><li>A</li></ul></p>")

        assert [type(item) for item in section.paragraphs[0].content] == [Text]
        assert styles(section)[1:] == ["ListStart", "UnorderedList", "ListEnd"]

    def test_break_inside_run(self, convert) -> None:
        section = convert("<p><b>One<br>Two</b></p>")

        run = section.paragraphs[0].content[0]
        assert [type(item) for item in run.content] == [Text, LineBreak, Text]

    def test_break_inside_link_goes_to_paragraph(self, convert) -> None:
        section = convert('<p><a href="https://x.org">Go<br>now</a></p>')

        paragraph = section.paragraphs[0]
        link = paragraph.content[0]
        assert isinstance(link, Hyperlink)
        assert [type(item) for item in paragraph.content] == [Hyperlink, LineBreak]
        assert not any(isinstance(item, LineBreak) for item in link.content)
        assert link.get_text() == "Gonow"

    def test_breaks_between_blocks(self, convert) -> None:
        """Test that consecutive section-level breaks produce one break paragraph."""
        section = convert("<p>A</p><br><br><p>B</p>")

        assert len(section.paragraphs) == 3
        middle = section.paragraphs[1]
        assert [type(item) for item in middle.content] == [LineBreak]


@pytest.mark.unit
class TestContextContinuation:
    """Tests for the text/inline sibling continuation rule."""

    def test_inline_after_text_joins_paragraph(self, convert) -> None:
        section = convert("Hello <b>World</b> and more")

        assert len(section.paragraphs) == 1
        paragraph = section.paragraphs[0]
        assert paragraph.get_text() == "Hello World and more"
        assert isinstance(paragraph.content[1], FormattedText)

    def test_text_after_block_starts_new_paragraph(self, convert) -> None:
        section = convert("<p>Block</p>tail")

        assert [p.get_text() for p in section.paragraphs] == ["Block", "tail"]

    def test_paragraph_target(self, section) -> None:
        """Test converting into an existing paragraph."""
        paragraph = section.add_paragraph("Start ")
        HtmlConverter().convert("<b>bold</b> end")(paragraph)

        assert len(section.paragraphs) == 1
        assert paragraph.get_text() == "Start bold end"
        assert paragraph.content[1].bold

    def test_block_into_paragraph_target_uses_section(self, section) -> None:
        paragraph = section.add_paragraph("Start")
        HtmlConverter().convert("<p>Next</p>")(paragraph)

        assert [p.get_text() for p in section.paragraphs] == ["Start", "Next"]


@pytest.mark.unit
class TestTransparentTags:
    """Tests for tags without a registered handler."""

    def test_unknown_wrapper_is_transparent(self, convert) -> None:
        section = convert("<section><article><p>Inside</p></article></section>")

        assert [p.get_text() for p in section.paragraphs] == ["Inside"]

    def test_table_cells_become_paragraphs(self, convert) -> None:
        section = convert("<table><tr><td>a</td><td>b</td></tr></table>")

        assert [p.get_text() for p in section.paragraphs] == ["a", "b"]

    def test_unregistered_inline_text_stays_in_paragraph(self, section) -> None:
        converter = HtmlConverter()
        converter.node_handlers.unregister("strong")
        converter.convert("<p>Hello <strong>World</strong></p>")(section)

        paragraph = section.paragraphs[0]
        assert [type(item) for item in paragraph.content] == [Text, Text]
        assert paragraph.get_text() == "Hello World"

    def test_markup_without_known_tags(self, convert) -> None:
        section = convert("<foo>alpha</foo>\n<bar> </bar><baz>beta</baz>")

        texts = [p.get_text() for p in section.paragraphs]
        assert texts == ["alpha", "beta"]
        assert all(not p.is_empty for p in section.paragraphs)


@pytest.mark.unit
class TestCustomHandlers:
    """Tests for caller-supplied handlers."""

    def test_register_new_tag(self, section) -> None:
        def add_quote(node, context):
            return context.add_paragraph().set_style("Quote")

        converter = HtmlConverter()
        converter.node_handlers.register("blockquote", add_quote)
        converter.convert("<blockquote>Quoted</blockquote>")(section)

        assert styles(section) == ["Quote"]
        assert section.paragraphs[0].get_text() == "Quoted"

    def test_replace_default_handler(self, section) -> None:
        def add_title(node, context):
            return context.add_paragraph().set_style("Title")

        converter = HtmlConverter()
        converter.node_handlers["h1"] = add_title
        converter.convert("<h1>Doc</h1>")(section)

        assert styles(section) == ["Title"]

    def test_registry_change_applies_to_pending_action(self, section) -> None:
        """Test that handlers are looked up when the action runs."""
        converter = HtmlConverter()
        action = converter.convert("<h1>Doc</h1>")
        converter.node_handlers.unregister("h1")
        action(section)

        assert styles(section) == [None]

    def test_injected_registry(self, section) -> None:
        registry = NodeHandlerRegistry({"#text": lambda node, context: context.add_paragraph(str(node))})
        HtmlConverter(node_handlers=registry).convert("<p>x</p><h1>y</h1>")(section)

        assert [p.get_text() for p in section.paragraphs] == ["x", "y"]

    def test_handler_returning_none(self, section) -> None:
        converter = HtmlConverter()
        converter.node_handlers["p"] = lambda node, context: None

        with pytest.raises(HandlerContractError) as exc_info:
            converter.convert("<p>x</p>")(section)
        assert exc_info.value.tag == "p"


@pytest.mark.unit
class TestErrors:
    """Tests for argument validation and handler contract violations."""

    @pytest.mark.parametrize("html", ["", None])
    def test_empty_markup(self, converter, html) -> None:
        with pytest.raises(ValidationError):
            converter.convert(html)

    def test_missing_container(self, converter) -> None:
        action = converter.convert("<p>x</p>")

        with pytest.raises(ValidationError) as exc_info:
            action(None)
        assert exc_info.value.parameter_name == "section"

    def test_invalid_container(self, converter) -> None:
        action = converter.convert("<p>x</p>")

        with pytest.raises(ValidationError):
            action(Document())

    def test_wrong_options_type(self) -> None:
        with pytest.raises(InvalidOptionsError):
            HtmlConverter(OutlineRendererOptions())

    def test_heading_into_paragraph(self, section) -> None:
        paragraph = section.add_paragraph()

        with pytest.raises(HandlerContractError) as exc_info:
            HtmlConverter().convert("<h2>Title</h2>")(paragraph)
        assert exc_info.value.tag == "h2"
        assert exc_info.value.context_type == "Paragraph"

    def test_heading_after_text(self, convert) -> None:
        with pytest.raises(HandlerContractError):
            convert("Intro<h1>Title</h1>")

    def test_block_inside_inline_run(self, convert) -> None:
        with pytest.raises(HandlerContractError) as exc_info:
            convert("<b><p>x</p></b>")
        assert exc_info.value.context_type == "FormattedText"

    def test_partial_output_is_kept(self, convert, section) -> None:
        with pytest.raises(HandlerContractError):
            convert("<p>kept</p><b><h1>x</h1></b>")

        assert section.paragraphs[0].get_text() == "kept"


@pytest.mark.unit
class TestWalkState:
    """Tests for the per-level walk record."""

    def test_fields(self) -> None:
        assert [f.name for f in fields(WalkState)] == [
            "container",
            "context",
            "previous_result",
            "previous_node",
            "depth",
        ]

    def test_descend_starts_fresh_history(self, section) -> None:
        paragraph = section.add_paragraph()
        state = WalkState(container=section, previous_result=paragraph, previous_node=object(), depth=2)

        child = state.descend(paragraph)

        assert child.container is section
        assert child.target is paragraph
        assert child.previous_result is None
        assert child.previous_node is None
        assert child.depth == 3


@pytest.mark.unit
class TestDepthGuard:
    """Tests for the nesting depth limit."""

    def test_deep_markup_raises(self, section) -> None:
        converter = HtmlConverter(HtmlOptions(max_nesting_depth=3))
        html = "<div>" * 10 + "x" + "</div>" * 10

        with pytest.raises(ConversionDepthError) as exc_info:
            converter.convert(html)(section)
        assert exc_info.value.max_depth == 3

    def test_markup_within_limit(self, section) -> None:
        converter = HtmlConverter(HtmlOptions(max_nesting_depth=3))
        converter.convert("<div><div>x</div></div>")(section)

        assert section.paragraphs[-1].get_text() == "x"


@pytest.mark.unit
class TestProgress:
    """Tests for progress events."""

    def test_started_and_finished(self, section) -> None:
        events = []
        HtmlConverter(progress_callback=events.append).convert("<p>x</p>")(section)

        assert [event.event_type for event in events] == ["started", "finished"]

    def test_failing_callback_does_not_stop_conversion(self, section) -> None:
        def explode(event):
            raise RuntimeError("boom")

        HtmlConverter(progress_callback=explode).convert("<p>x</p>")(section)

        assert section.paragraphs[0].get_text() == "x"

    def test_parsing_is_eager(self, section) -> None:
        """Test that no events are emitted before the action runs."""
        events = []
        action = HtmlConverter(progress_callback=events.append).convert("<p>x</p>")

        assert events == []
        action(section)
        assert isinstance(section.paragraphs[0], Paragraph)
