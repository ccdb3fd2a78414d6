#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/labrender/renderers/__init__.py
"""Renderers for converting codelab node trees to output formats.

Available renderers:
- MarkdownRenderer: Render to Markdown text, in the codelab or qwiklabs flavor
- HtmlRenderer: Render to an HTML fragment

The module-level ``write_markdown`` and ``write_html`` functions render
straight to an open stream. ``write_html`` is also the content writer the
Markdown renderer uses for grid cells and infobox bodies.

Examples
--------
    >>> from labrender.ast import TextNode
    >>> from labrender.renderers import MarkdownRenderer
    >>> from labrender.options import MarkdownRendererOptions
    >>> renderer = MarkdownRenderer(MarkdownRendererOptions(flavor="qwiklabs"))
    >>> renderer.render_to_string([TextNode(value="hi", italic=True)])
    '*hi*'

"""

from labrender.renderers.base import BaseRenderer, HtmlContentWriter
from labrender.renderers.html import HtmlRenderer, write_html
from labrender.renderers.markdown import MarkdownRenderer, write_markdown

__all__ = [
    "BaseRenderer",
    "HtmlContentWriter",
    "HtmlRenderer",
    "MarkdownRenderer",
    "write_html",
    "write_markdown",
]
