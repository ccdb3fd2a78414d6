#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/labrender/renderers/html.py
"""HTML rendering from codelab node trees.

This module provides the HtmlRenderer class which converts nodes to an HTML
fragment. The fragment carries no document wrapper; it is meant to be
embedded in a page or spliced into Markdown output (see
:func:`write_html`, which the Markdown renderer uses for table cells and
infobox bodies).

Block-level nodes are followed by a newline so consecutive blocks land on
separate lines. Text content and attribute values are HTML-escaped.

"""

from __future__ import annotations

import logging
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
from labrender.ast.visitors import NodeVisitor
from labrender.constants import NEWLINE
from labrender.options.html import HtmlRendererOptions
from labrender.renderers.base import BaseRenderer
from labrender.utils.html_utils import escape_html, format_attr, text_to_html
from labrender.utils.io_utils import TextSink

logger = logging.getLogger(__name__)

# Item-list and header kinds that map straight onto a CSS class
_CLASSED_KINDS = ("checklist", "faq")


class HtmlRenderer(NodeVisitor, BaseRenderer):
    """Render codelab nodes to an HTML fragment.

    Parameters
    ----------
    options : HtmlRendererOptions or None, default = None
        HTML formatting options

    Examples
    --------
    >>> from labrender.ast import HeaderNode, TextNode
    >>> renderer = HtmlRenderer()
    >>> renderer.render_to_string([HeaderNode(content=[TextNode(value="Intro")], level=0)])
    '<h1>Intro</h1>\\n'

    """

    def __init__(self, options: HtmlRendererOptions | None = None):
        """Initialize the HTML renderer with options."""
        BaseRenderer._validate_options_type(options, HtmlRendererOptions, "html")
        options = options or HtmlRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: HtmlRendererOptions = options

    def visit_text(self, node: TextNode) -> None:
        """Render a TextNode; embedded newlines become ``<br>``."""
        if node.bold:
            self.write("<strong>")
        if node.italic:
            self.write("<em>")
        if node.code:
            self.write("<code>")
        self.write(text_to_html(node.value))
        if node.code:
            self.write("</code>")
        if node.italic:
            self.write("</em>")
        if node.bold:
            self.write("</strong>")

    def visit_image(self, node: ImageNode) -> None:
        """Render an ImageNode as ``<img>``, constraining its width when requested."""
        self.write("<img")
        if node.max_width > 0:
            self.write(f' style="max-width: {node.max_width:.2f}px"')
        self.write(format_attr("src", node.src))
        self.write(">")

    def visit_url(self, node: URLNode) -> None:
        """Render a URLNode as an anchor wrapping its children."""
        self.write("<a")
        if node.url:
            self.write(format_attr("href", node.url))
        if node.name:
            self.write(format_attr("name", node.name))
        if node.target:
            self.write(format_attr("target", node.target))
        self.write(">")
        self.render_nodes(node.content)
        self.write("</a>")

    def visit_button(self, node: ButtonNode) -> None:
        """Render a ButtonNode as ``<button>``.

        Colored buttons get the configured button class, raised buttons the
        bare ``raised`` attribute, download buttons a leading icon.

        """
        self.write("<button")
        if node.colored:
            self.write(format_attr("class", self.options.button_class))
        if node.raised:
            self.write(" raised")
        self.write(">")
        if node.download:
            self.write(self.options.download_icon)
        self.render_nodes(node.content)
        self.write("</button>")

    def visit_code(self, node: CodeNode) -> None:
        """Render a CodeNode as a ``<pre>`` block.

        Non-terminal code is additionally wrapped in ``<code>``, tagged with
        its language when one is set.

        """
        self.write(f'<pre class="{escape_html(self.options.code_block_class)}">')
        if not node.term:
            self.write("<code")
            if node.lang:
                self.write(format_attr("language", node.lang))
                self.write(format_attr("class", node.lang))
            self.write(">")
        self.write(escape_html(node.value))
        if not node.term:
            self.write("</code>")
        self.write("</pre>")
        self.write(NEWLINE)

    def visit_list(self, node: ListNode) -> None:
        """Render a ListNode, wrapped in a paragraph when block-level."""
        self._list(node)
        self.write(NEWLINE)

    def _list(self, node: ListNode) -> None:
        if node.is_block:
            self.write("<p>")
        self.render_nodes(node.nodes)
        if node.is_block:
            self.write("</p>")

    def visit_items_list(self, node: ItemsListNode) -> None:
        """Render an ItemsListNode as ``<ul>`` or ``<ol>``.

        Checklists and FAQs are styled by class. Other lists carry their
        numbering type and start as attributes.

        """
        tag = "ol" if node.numbered else "ul"
        self.write(f"<{tag}")
        if node.kind in _CLASSED_KINDS:
            self.write(format_attr("class", node.kind))
        else:
            if node.list_type:
                self.write(format_attr("type", node.list_type))
            if node.start > 0:
                self.write(f' start="{node.start}"')
        self.write(">\n")
        for item in node.items:
            self.write("<li>")
            self.render_nodes(item)
            self.write("</li>\n")
        self.write(f"</{tag}>")
        self.write(NEWLINE)

    def visit_grid(self, node: GridNode) -> None:
        """Render a GridNode as a table with explicit cell spans."""
        self.write("<table>\n")
        for row in node.rows:
            self.write("<tr>")
            for cell in row:
                self.write(f'<td colspan="{cell.colspan}" rowspan="{cell.rowspan}">')
                self.render_nodes(cell.content)
                self.write("</td>")
            self.write("</tr>\n")
        self.write("</table>")
        self.write(NEWLINE)

    def visit_infobox(self, node: InfoboxNode) -> None:
        """Render an InfoboxNode as an ``<aside>`` classed by its kind."""
        self.write(f"<aside{format_attr('class', node.kind)}>")
        self.render_nodes(node.content)
        self.write("</aside>")
        self.write(NEWLINE)

    def visit_header(self, node: HeaderNode) -> None:
        """Render a HeaderNode as ``<hN>`` where N is its level plus one."""
        tag = f"h{node.level + 1}"
        self.write(f"<{tag}")
        if node.kind in _CLASSED_KINDS:
            self.write(format_attr("class", node.kind))
        self.write(">")
        self.render_nodes(node.content)
        self.write(f"</{tag}>")
        self.write(NEWLINE)

    def visit_import(self, node: ImportNode) -> None:
        """Render the imported fragment as a list; empty imports emit nothing."""
        if node.content.is_empty():
            return
        self._list(node.content)
        self.write(NEWLINE)

    def visit_survey(self, node: SurveyNode) -> None:
        """Surveys are placeholders; only the block separator is written."""
        logger.debug("Survey %r is not rendered to HTML", node.survey_id)
        self.write(NEWLINE)

    def visit_youtube(self, node: YouTubeNode) -> None:
        """Embedded videos are placeholders; only the block separator is written."""
        logger.debug("YouTube video %r is not rendered to HTML", node.video_id)
        self.write(NEWLINE)


def write_html(
    sink: TextSink,
    env: str,
    nodes: Sequence[Node],
    options: HtmlRendererOptions | None = None,
) -> None:
    """Render nodes as an HTML fragment to an open sink.

    This is the content writer the Markdown renderer delegates to for
    grids and infoboxes. It may be handed any object with a ``write(str)``
    method, including another renderer.

    Parameters
    ----------
    sink : TextSink
        Destination stream
    env : str
        Target environment; empty renders every node
    nodes : sequence of Node
        Nodes to render
    options : HtmlRendererOptions or None, default = None
        HTML formatting options

    Raises
    ------
    OutputWriteError
        If a write to the sink fails

    """
    HtmlRenderer(options).write_nodes(sink, nodes, env)
