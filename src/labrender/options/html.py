#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for HTML rendering.

This module defines options for rendering node trees as HTML fragments.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from labrender.constants import DEFAULT_CODE_BLOCK_CLASS, DEFAULT_DOWNLOAD_ICON
from labrender.options.base import BaseRendererOptions


@dataclass(frozen=True)
class HtmlRendererOptions(BaseRendererOptions):
    """Configuration options for node-to-HTML rendering.

    Parameters
    ----------
    code_block_class : str, default "prettyprint"
        CSS class of the ``<pre>`` element wrapping code blocks
    download_icon : str, default material-icons download glyph
        Raw markup inserted before the label of download buttons

    """

    code_block_class: str = field(
        default=DEFAULT_CODE_BLOCK_CLASS,
        metadata={"help": "CSS class of <pre> elements wrapping code", "importance": "advanced"},
    )
    download_icon: str = field(
        default=DEFAULT_DOWNLOAD_ICON,
        metadata={"help": "Raw markup placed before download button labels", "importance": "advanced"},
    )
