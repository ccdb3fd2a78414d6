#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Renderer option classes.

Examples
--------
    >>> from labrender.options import MarkdownRendererOptions
    >>> opts = MarkdownRendererOptions(flavor="qwiklabs")
    >>> opts.heading_level_offset
    0
    >>> opts.create_updated(heading_level_offset=1).heading_level_offset
    1

"""

from labrender.options.base import UNSET, BaseRendererOptions, CloneFrozenMixin
from labrender.options.html import HtmlRendererOptions
from labrender.options.markdown import MarkdownRendererOptions, get_flavor_defaults

__all__ = [
    "UNSET",
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "HtmlRendererOptions",
    "MarkdownRendererOptions",
    "get_flavor_defaults",
]
