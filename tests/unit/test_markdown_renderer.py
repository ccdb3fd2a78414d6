#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_markdown_renderer.py
"""Unit tests for MarkdownRenderer.

Tests cover:
- Rendering every node kind to Markdown
- The codelab and qwiklabs flavors and per-option overrides
- Block separation driven by the line-start cursor
- Raw HTML output for grids and infoboxes

"""

import pytest

from labrender.ast import (
    ButtonNode,
    CodeNode,
    GridCell,
    GridNode,
    HeaderNode,
    ImageNode,
    ImportNode,
    InfoboxNode,
    ItemsListNode,
    ListNode,
    SurveyGroup,
    SurveyNode,
    TextNode,
    URLNode,
    YouTubeNode,
)
from labrender.options import HtmlRendererOptions, MarkdownRendererOptions
from labrender.renderers import MarkdownRenderer
from labrender.renderers.markdown import indent_lines


def render(nodes, env="", **options):
    """Render nodes with MarkdownRendererOptions built from keyword arguments."""
    renderer = MarkdownRenderer(MarkdownRendererOptions(**options))
    return renderer.render_to_string(nodes, env)


@pytest.mark.unit
class TestBasicRendering:
    """Tests for basic node rendering."""

    def test_render_empty_sequence(self):
        """Test rendering no nodes produces no output."""
        assert render([]) == ""

    def test_render_plain_text(self):
        """Test plain text is written verbatim."""
        assert render([TextNode(value="Hello world")]) == "Hello world"

    def test_adjacent_text_runs_are_concatenated(self):
        """Test inline runs are not separated."""
        assert render([TextNode(value="Hello "), TextNode(value="world")]) == "Hello world"

    def test_markdown_characters_are_not_escaped(self):
        """Test text values pass through unchanged."""
        assert render([TextNode(value="a_b *c* <d>")]) == "a_b *c* <d>"


@pytest.mark.unit
class TestTextStyles:
    """Tests for bold, italic and code markers."""

    def test_bold(self):
        """Test bold uses double underscores."""
        assert render([TextNode(value="hello", bold=True)]) == "__hello__"

    def test_code(self):
        """Test code uses backticks."""
        assert render([TextNode(value="ls", code=True)]) == "`ls`"

    def test_italic_codelab_is_padded(self):
        """Test codelab italics carry an outer space on each side."""
        assert render([TextNode(value="hi", italic=True)]) == " *hi* "

    def test_italic_qwiklabs_is_tight(self):
        """Test qwiklabs italics have no padding."""
        assert render([TextNode(value="hi", italic=True)], flavor="qwiklabs") == "*hi*"

    def test_italic_padding_override(self):
        """Test italic padding can be overridden independently of the flavor."""
        assert render([TextNode(value="hi", italic=True)], italic_padding=False) == "*hi*"

    def test_marker_nesting_order(self):
        """Test markers open bold, italic, code and close in reverse."""
        node = TextNode(value="x", bold=True, italic=True, code=True)
        assert render([node]) == "__ *`x`* __"
        assert render([node], flavor="qwiklabs") == "__*`x`*__"


@pytest.mark.unit
class TestImagesLinksButtons:
    """Tests for images, links and buttons."""

    def test_image_uses_base_name_as_alt(self):
        """Test image alt text is the last path segment."""
        assert render([ImageNode(src="img/a/pic.png")]) == "![pic.png](img/a/pic.png)"

    def test_image_after_text_gets_space(self):
        """Test an image following text is separated by one space."""
        result = render([TextNode(value="See"), ImageNode(src="pic.png")])
        assert result == "See ![pic.png](pic.png)"

    def test_image_trailing_slash_and_empty_source(self):
        """Test alt text for directory-like and empty sources."""
        assert render([ImageNode(src="https://x.test/dir/")]) == "![dir](https://x.test/dir/)"
        assert render([ImageNode(src="")]) == "![.]()"

    def test_link(self):
        """Test a link renders as [text](url) separated from preceding text."""
        result = render([TextNode(value="Go"), URLNode(content=[TextNode(value="here")], url="http://x")])
        assert result == "Go [here](http://x)"

    def test_link_without_url_is_plain_text(self):
        """Test a URL node without a URL emits only its text."""
        result = render([TextNode(value="Go"), URLNode(content=[TextNode(value="here")])])
        assert result == "Go here"

    def test_link_text_ignores_non_text_children(self):
        """Test only text children contribute to link text."""
        node = URLNode(content=[TextNode(value="a", bold=True), ImageNode(src="i.png"), TextNode(value="b")], url="u")
        assert render([node]) == "[ab](u)"

    def test_link_wrapping_button_renders_button(self):
        """Test a button inside a link becomes an anchor to the link's URL."""
        node = URLNode(content=[ButtonNode(content=[TextNode(value="Download")])], url="http://x/f.zip")
        assert render([node]) == (
            '<a class="codelabs-downloadbutton" href="http://x/f.zip" target="_blank">Download</a>'
        )

    def test_standalone_button_points_nowhere(self):
        """Test a button outside a link gets href="#"."""
        node = ButtonNode(content=[TextNode(value="Go")], colored=True)
        assert render([node]) == '<a class="codelabs-downloadbutton" href="#" target="_blank">Go</a>'

    def test_button_class_option(self):
        """Test the button class is configurable."""
        node = ButtonNode(content=[TextNode(value="Go")])
        assert render([node], button_class="btn") == '<a class="btn" href="#" target="_blank">Go</a>'


@pytest.mark.unit
class TestCodeRendering:
    """Tests for code blocks and terminal transcripts."""

    def test_terminal_codelab_is_indented(self):
        """Test codelab terminal transcripts are indented line by line."""
        assert render([CodeNode(value="a\nb", term=True)]) == "\n    a\n    b\n"

    def test_terminal_trailing_newline_not_indented(self):
        """Test a trailing newline does not produce an indented empty line."""
        assert render([CodeNode(value="ls\n", term=True)]) == "\n    ls\n\n"

    def test_fenced_code_codelab(self):
        """Test non-terminal code is fenced with its language."""
        assert render([CodeNode(value="print(1)", lang="python")]) == "\n```python\nprint(1)\n```\n"

    def test_fenced_code_with_trailing_newline(self):
        """Test no extra newline is added before the closing fence."""
        assert render([CodeNode(value="x\n")]) == "\n```\nx\n```\n"

    def test_empty_fenced_code_has_no_blank_line(self):
        """Test an empty value leaves the cursor at the line start."""
        assert render([CodeNode(value="")]) == "\n```\n```\n"

    def test_fenced_code_qwiklabs_is_padded(self):
        """Test qwiklabs adds a blank line before the fence."""
        result = render([CodeNode(value="print(1)", lang="python")], flavor="qwiklabs")
        assert result == "\n\n```python\nprint(1)\n```\n"

    def test_terminal_qwiklabs_is_fenced_as_bash(self):
        """Test qwiklabs fences terminal transcripts tagged as bash."""
        result = render([CodeNode(value="ls", lang="sh", term=True)], flavor="qwiklabs")
        assert result == "\n\n```bash\nls\n```\n"

    def test_terminal_fence_keeps_language_when_unset(self):
        """Test fenced terminals keep their own tag when no terminal language is set."""
        result = render([CodeNode(value="ls", lang="sh", term=True)], terminal_code_style="fence")
        assert result == "\n```sh\nls\n```\n"

    def test_code_after_text_starts_new_block(self):
        """Test a code block is separated from preceding text by a blank line."""
        result = render([TextNode(value="Run:"), CodeNode(value="x")])
        assert result == "Run:\n\n```\nx\n```\n"

    def test_indent_lines(self):
        """Test the terminal indentation helper."""
        assert indent_lines("a\nb") == "    a\n    b"
        assert indent_lines("a\n") == "    a\n"
        assert indent_lines("") == ""
        assert indent_lines("\n\n") == "    \n    \n"


@pytest.mark.unit
class TestHeaderRendering:
    """Tests for header rendering."""

    def test_codelab_header_is_one_deeper(self):
        """Test codelab headers use level + 1 hashes."""
        assert render([HeaderNode(content=[TextNode(value="Intro")], level=1)]) == "\n## Intro\n"

    def test_qwiklabs_header_uses_level(self):
        """Test qwiklabs headers use exactly level hashes."""
        result = render([HeaderNode(content=[TextNode(value="Intro")], level=1)], flavor="qwiklabs")
        assert result == "\n# Intro\n"

    def test_heading_offset_override(self):
        """Test the heading offset is configurable."""
        result = render([HeaderNode(content=[TextNode(value="Intro")], level=1)], heading_level_offset=2)
        assert result == "\n### Intro\n"

    def test_text_after_header(self):
        """Test text following a header starts on the next line."""
        result = render([HeaderNode(content=[TextNode(value="Intro")], level=1), TextNode(value="hello")])
        assert result == "\n## Intro\nhello"

    def test_consecutive_headers_one_blank_line(self):
        """Test consecutive blocks are separated by exactly one blank line."""
        nodes = [HeaderNode(content=[TextNode(value="A")], level=1), HeaderNode(content=[TextNode(value="B")], level=1)]
        assert render(nodes) == "\n## A\n\n## B\n"
        assert "\n\n\n" not in render(nodes)


@pytest.mark.unit
class TestListRendering:
    """Tests for generic lists and item lists."""

    def test_block_list_starts_new_block(self):
        """Test a block list is separated from preceding text."""
        result = render([TextNode(value="a"), ListNode(nodes=[TextNode(value="b")], block=True)])
        assert result == "a\n\nb\n"

    def test_inline_list_continues_line(self):
        """Test a non-block list continues the current line and ends it."""
        result = render([TextNode(value="a"), ListNode(nodes=[TextNode(value="b")])])
        assert result == "ab\n"

    def test_block_false_is_not_block(self):
        """Test an explicit block=False behaves like an unset flag."""
        result = render([TextNode(value="a"), ListNode(nodes=[TextNode(value="b")], block=False)])
        assert result == "ab\n"

    def test_numbered_items_from_start(self):
        """Test a plain list with a positive start is numbered from start."""
        items = [[TextNode(value="a")], [TextNode(value="b")], [TextNode(value="c")]]
        result = render([ItemsListNode(items=items, start=5)])
        assert result == "\n5. a\n6. b\n7. c\n"

    def test_zero_start_uses_bullets(self):
        """Test a plain list with start 0 is bulleted."""
        items = [[TextNode(value="a")], [TextNode(value="b")]]
        assert render([ItemsListNode(items=items)]) == "\n* a\n* b\n"

    def test_ordered_kind_numbers_like_plain(self):
        """Test the ordered kind numbers its items from start."""
        items = [[TextNode(value="a")], [TextNode(value="b")]]
        assert render([ItemsListNode(items=items, kind="ordered", start=2)]) == "\n2. a\n3. b\n"

    @pytest.mark.parametrize("kind", ["checklist", "faq"])
    def test_styled_kinds_use_bullets(self, kind):
        """Test checklist and FAQ lists are bulleted even with a start."""
        items = [[TextNode(value="a")]]
        assert render([ItemsListNode(items=items, kind=kind, start=3)]) == "\n* a\n"

    def test_item_ending_in_newline_is_not_doubled(self):
        """Test an item that already ends a line gets no extra newline."""
        items = [[ListNode(nodes=[TextNode(value="a")])], [TextNode(value="b")]]
        assert render([ItemsListNode(items=items)]) == "\n* a\n* b\n"


@pytest.mark.unit
class TestRawHtmlBlocks:
    """Tests for grids and infoboxes emitted as raw HTML."""

    def test_grid_spans(self):
        """Test every cell carries colspan and rowspan, defaulting to 1."""
        grid = GridNode(
            rows=[
                [GridCell(content=[TextNode(value="a")], colspan=2)],
                [GridCell(content=[TextNode(value="b")]), GridCell(content=[TextNode(value="c")])],
            ]
        )
        assert render([grid]) == (
            "\n<table>\n"
            '<tr><td colspan="2" rowspan="1">a</td></tr>\n'
            '<tr><td colspan="1" rowspan="1">b</td><td colspan="1" rowspan="1">c</td></tr>\n'
            "</table>"
        )

    def test_grid_cell_content_is_html(self):
        """Test cell content goes through the HTML renderer."""
        grid = GridNode(rows=[[GridCell(content=[TextNode(value="a&b", bold=True)])]])
        assert '<td colspan="1" rowspan="1"><strong>a&amp;b</strong></td>' in render([grid])

    def test_grid_cell_code_uses_html_options(self):
        """Test nested HTML rendering honors html_options."""
        grid = GridNode(rows=[[GridCell(content=[CodeNode(value="x", term=True)])]])
        result = render([grid], html_options=HtmlRendererOptions(code_block_class="code"))
        assert '<pre class="code">x</pre>\n</td>' in result

    def test_text_after_grid_starts_new_line(self):
        """Test the cursor sees the table's closing tag."""
        grid = GridNode(rows=[[GridCell(content=[TextNode(value="a")])]])
        result = render([grid, HeaderNode(content=[TextNode(value="Next")], level=1)])
        assert result.endswith("</table>\n\n## Next\n")

    def test_infobox(self):
        """Test an infobox becomes a classed div with HTML content."""
        node = InfoboxNode(content=[TextNode(value="Careful", bold=True)], kind="warning")
        assert render([node]) == '\n<div class="codelabs-infobox codelabs-infobox-warning"><strong>Careful</strong></div>'

    def test_infobox_kind_is_escaped(self):
        """Test the kind is HTML-escaped inside the class attribute."""
        node = InfoboxNode(content=[TextNode(value="x")], kind='a"b')
        assert 'codelabs-infobox-a&quot;b"' in render([node])

    def test_infobox_class_prefix_option(self):
        """Test the infobox class prefix is configurable."""
        node = InfoboxNode(content=[TextNode(value="x")], kind="special")
        assert render([node], infobox_class_prefix="box") == '\n<div class="box box-special">x</div>'

    def test_custom_html_writer(self):
        """Test grids and infoboxes delegate to an injected content writer."""
        calls = []

        def html_writer(sink, env, nodes):
            calls.append((env, list(nodes)))
            sink.write("HTML")

        content = [TextNode(value="x")]
        renderer = MarkdownRenderer(html_writer=html_writer)
        result = renderer.render_to_string([InfoboxNode(content=content, kind="k")], env="web")
        assert result == '\n<div class="codelabs-infobox codelabs-infobox-k">HTML</div>'
        assert calls == [("web", content)]


@pytest.mark.unit
class TestImportsAndPlaceholders:
    """Tests for imports, surveys and videos."""

    def test_import_renders_children(self):
        """Test an import renders its fragment's children."""
        node = ImportNode(content=ListNode(nodes=[TextNode(value="x"), TextNode(value="y")]), url="frag.md")
        assert render([node]) == "xy"

    def test_empty_import_emits_nothing(self):
        """Test an empty import produces no output."""
        assert render([TextNode(value="a"), ImportNode(), TextNode(value="b")]) == "ab"

    def test_survey_and_youtube_emit_nothing(self):
        """Test surveys and videos have no Markdown output."""
        nodes = [
            TextNode(value="a"),
            SurveyNode(survey_id="s1", groups=[SurveyGroup(name="q", options=["yes", "no"])]),
            YouTubeNode(video_id="dQw4w9WgXcQ"),
            TextNode(value="b"),
        ]
        assert render(nodes) == "ab"

    def test_unknown_objects_are_skipped(self):
        """Test non-node entries in a sequence are ignored."""
        assert render([TextNode(value="a"), "junk", None, TextNode(value="b")]) == "ab"


@pytest.mark.unit
class TestLineStartCursor:
    """Tests for the line-start cursor."""

    def test_initially_at_line_start(self):
        """Test a fresh renderer is at line start."""
        assert MarkdownRenderer().at_line_start is True

    def test_cursor_follows_last_character(self):
        """Test the cursor reflects the last character written."""
        renderer = MarkdownRenderer()
        renderer.render_to_string([TextNode(value="x")])
        assert renderer.at_line_start is False
        renderer.render_to_string([TextNode(value="x\n")])
        assert renderer.at_line_start is True

    def test_empty_write_keeps_cursor(self):
        """Test empty text does not move the cursor."""
        renderer = MarkdownRenderer()
        renderer.render_to_string([TextNode(value="x"), TextNode(value="")])
        assert renderer.at_line_start is False

    def test_state_resets_between_calls(self):
        """Test each render call starts at line start."""
        renderer = MarkdownRenderer()
        renderer.render_to_string([TextNode(value="x")])
        assert renderer.render_to_string([ImageNode(src="a.png")]) == "![a.png](a.png)"
