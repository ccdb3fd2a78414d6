#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/labrender/renderers/markdown.py
"""Markdown rendering from codelab node trees.

This module provides the MarkdownRenderer class which converts nodes to
Markdown text. The renderer supports two house styles (flavors) that differ
in italic padding, heading depth and terminal transcript formatting.

Markdown has no native construct for grids and infoboxes, so those nodes
are emitted as raw HTML. Their contents are rendered by a nested HTML
content writer that writes back through this renderer, which keeps the
line-start cursor and the sticky write error consistent across both
formats.

"""

from __future__ import annotations

import logging
from functools import partial
from typing import Sequence

from labrender.ast.nodes import (
    ButtonNode,
    CodeNode,
    GridNode,
    HeaderNode,
    ImageNode,
    ImportNode,
    InfoboxNode,
    ItemsListNode,
    ListNode,
    Node,
    SurveyNode,
    TextNode,
    URLNode,
    YouTubeNode,
)
from labrender.ast.utils import base_name, text_values
from labrender.ast.visitors import NodeVisitor
from labrender.constants import (
    BUTTON_FALLBACK_HREF,
    BUTTON_LINK_TARGET,
    CODE_FENCE,
    MARKDOWN_BULLET,
    NEWLINE,
    TERMINAL_INDENT,
)
from labrender.options.markdown import MarkdownRendererOptions
from labrender.renderers.base import BaseRenderer, HtmlContentWriter
from labrender.renderers.html import write_html
from labrender.utils.html_utils import escape_html
from labrender.utils.io_utils import TextSink

logger = logging.getLogger(__name__)


def indent_lines(text: str, prefix: str = TERMINAL_INDENT) -> str:
    """Prefix every line of ``text``.

    A trailing newline does not open a new (prefixed) line.

    Examples
    --------
    >>> indent_lines("a\\nb")
    '    a\\n    b'
    >>> indent_lines("a\\n")
    '    a\\n'

    """
    lines = text.split(NEWLINE)
    indented = [prefix + line for line in lines[:-1]]
    indented.append(prefix + lines[-1] if lines[-1] else "")
    return NEWLINE.join(indented)


class MarkdownRenderer(NodeVisitor, BaseRenderer):
    """Render codelab nodes to Markdown text.

    The renderer tracks whether the last character written was a newline.
    Block separation is driven entirely by this cursor: ``_new_block``
    guarantees one blank line before a block, ``_space`` keeps inline
    elements from running into preceding text.

    Parameters
    ----------
    options : MarkdownRendererOptions or None, default = None
        Markdown formatting options
    html_writer : callable or None, default = None
        Content renderer ``(sink, env, nodes)`` used for grid cells and
        infobox bodies. Defaults to :func:`~labrender.renderers.html.write_html`
        configured with ``options.html_options``.

    Examples
    --------
    >>> from labrender.ast import HeaderNode, TextNode
    >>> renderer = MarkdownRenderer()
    >>> renderer.render_to_string([HeaderNode(content=[TextNode(value="Intro")], level=1)])
    '\\n## Intro\\n'

    """

    def __init__(self, options: MarkdownRendererOptions | None = None, html_writer: HtmlContentWriter | None = None):
        """Initialize the Markdown renderer with options."""
        BaseRenderer._validate_options_type(options, MarkdownRendererOptions, "markdown")
        options = options or MarkdownRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: MarkdownRendererOptions = options
        self._html_writer: HtmlContentWriter = html_writer or partial(write_html, options=options.html_options)
        self._line_start = True

    @property
    def at_line_start(self) -> bool:
        """Whether the last character written was a newline (True before any output)."""
        return self._line_start

    def _reset_state(self) -> None:
        # Output opens at a line start: a leading block gets "\n", not "\n\n".
        self._line_start = True

    def write(self, text: str) -> int:
        """Write text and update the line-start cursor.

        Empty writes leave the cursor unchanged.

        """
        if self._error is None and text:
            self._line_start = text.endswith(NEWLINE)
        return super().write(text)

    def _space(self) -> None:
        if not self._line_start:
            self.write(" ")

    def _end_line(self) -> None:
        if not self._line_start:
            self.write(NEWLINE)

    def _new_block(self) -> None:
        self._end_line()
        self.write(NEWLINE)

    def _write_html(self, nodes: Sequence[Node]) -> None:
        if self._error is not None:
            return
        logger.debug("Delegating %d node(s) to the HTML content writer", len(nodes))
        self._html_writer(self, self.env, nodes)

    def visit_text(self, node: TextNode) -> None:
        """Render a TextNode with bold, italic and code markers.

        Markers open in the order bold, italic, code and close in reverse.

        """
        if self.options.italic_padding:
            italic_open, italic_close = " *", "* "
        else:
            italic_open, italic_close = "*", "*"

        if node.bold:
            self.write("__")
        if node.italic:
            self.write(italic_open)
        if node.code:
            self.write("`")
        self.write(node.value)
        if node.code:
            self.write("`")
        if node.italic:
            self.write(italic_close)
        if node.bold:
            self.write("__")

    def visit_image(self, node: ImageNode) -> None:
        """Render an ImageNode as ``![alt](src)`` with the source's base name as alt text."""
        self._space()
        self.write(f"![{base_name(node.src)}]({node.src})")

    def visit_url(self, node: URLNode) -> None:
        """Render a URLNode as an inline link.

        A link wrapping a button is rendered as the button itself, pointing
        at the link's URL. A link without a URL degrades to its plain text.

        """
        for child in node.content:
            if isinstance(child, ButtonNode):
                self._button(child, node.url)
                return

        self._space()
        if node.url:
            self.write("[")
        self.write(text_values(node.content))
        if node.url:
            self.write(f"]({node.url})")

    def visit_button(self, node: ButtonNode) -> None:
        """Render a standalone ButtonNode as an anchor pointing nowhere."""
        self._button(node, "")

    def _button(self, node: ButtonNode, url: str) -> None:
        self._space()
        href = url or BUTTON_FALLBACK_HREF
        self.write(f'<a class="{self.options.button_class}" href="{href}" target="{BUTTON_LINK_TARGET}">')
        self.write(text_values(node.content))
        self.write("</a>")

    def visit_code(self, node: CodeNode) -> None:
        """Render a CodeNode as an indented transcript or a fenced block.

        Terminal transcripts are indented line by line when the terminal
        style is ``indent``; everything else is fenced.

        """
        self._new_block()

        if node.term and self.options.terminal_code_style == "indent":
            self.write(indent_lines(node.value))
            self.write(NEWLINE)
            return

        if self.options.code_block_padding:
            self.write(NEWLINE)

        lang = node.lang
        if node.term and self.options.terminal_code_language:
            lang = self.options.terminal_code_language

        self.write(f"{CODE_FENCE}{lang}{NEWLINE}")
        self.write(node.value)
        self._end_line()
        self.write(CODE_FENCE)
        self.write(NEWLINE)

    def visit_list(self, node: ListNode) -> None:
        """Render a ListNode's children, opening a new block when it is block-level."""
        if node.is_block:
            self._new_block()
        self.render_nodes(node.nodes)
        self._end_line()

    def visit_items_list(self, node: ItemsListNode) -> None:
        """Render an ItemsListNode as a bulleted or numbered list.

        Items are numbered from ``start`` when the list is plain or ordered
        and ``start`` is positive; otherwise every item gets a ``* `` bullet.

        """
        self._new_block()
        for i, item in enumerate(node.items):
            if node.numbered:
                self.write(f"{node.start + i}. ")
            else:
                self.write(MARKDOWN_BULLET)
            self.render_nodes(item)
            self._end_line()

    def visit_grid(self, node: GridNode) -> None:
        """Render a GridNode as a raw HTML table."""
        self._new_block()
        self.write("<table>\n")
        for row in node.rows:
            self.write("<tr>")
            for cell in row:
                self.write(f'<td colspan="{cell.colspan}" rowspan="{cell.rowspan}">')
                self._write_html(cell.content)
                self.write("</td>")
            self.write("</tr>\n")
        self.write("</table>")

    def visit_infobox(self, node: InfoboxNode) -> None:
        """Render an InfoboxNode as a raw HTML ``<div>`` tagged with its kind."""
        self._new_block()
        prefix = self.options.infobox_class_prefix
        self.write(f'<div class="{prefix} {prefix}-{escape_html(node.kind)}">')
        self._write_html(node.content)
        self.write("</div>")

    def visit_header(self, node: HeaderNode) -> None:
        """Render a HeaderNode as an ATX heading."""
        self._new_block()
        self.write("#" * (node.level + self.options.heading_level_offset))
        self.write(" ")
        self.render_nodes(node.content)
        self._end_line()

    def visit_import(self, node: ImportNode) -> None:
        """Render the imported fragment's children inline; empty imports emit nothing."""
        if node.content.is_empty():
            return
        self.render_nodes(node.content.nodes)

    def visit_survey(self, node: SurveyNode) -> None:
        """Surveys have no Markdown representation and are skipped."""
        logger.debug("Survey %r has no Markdown form, skipping", node.survey_id)

    def visit_youtube(self, node: YouTubeNode) -> None:
        """Embedded videos have no Markdown representation and are skipped."""
        logger.debug("YouTube video %r has no Markdown form, skipping", node.video_id)


def write_markdown(
    sink: TextSink,
    env: str,
    nodes: Sequence[Node],
    options: MarkdownRendererOptions | None = None,
) -> None:
    """Render nodes as Markdown to an open sink.

    Parameters
    ----------
    sink : TextSink
        Destination stream
    env : str
        Target environment; empty renders every node
    nodes : sequence of Node
        Nodes to render
    options : MarkdownRendererOptions or None, default = None
        Markdown formatting options

    Raises
    ------
    OutputWriteError
        If a write to the sink fails

    """
    MarkdownRenderer(options).write_nodes(sink, nodes, env)
