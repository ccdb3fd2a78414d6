#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for Markdown rendering.

This module defines options for Markdown output with flavor support.
"""
# src/labrender/options/markdown.py


from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from labrender.constants import (
    DEFAULT_FLAVOR,
    DEFAULT_INFOBOX_CLASS_PREFIX,
    FlavorType,
    TerminalCodeStyle,
)
from labrender.options.base import UNSET, BaseRendererOptions
from labrender.options.html import HtmlRendererOptions
from labrender.utils.flavors import get_flavor, list_flavors


@dataclass(frozen=True)
class MarkdownRendererOptions(BaseRendererOptions):
    r"""Markdown rendering options for converting nodes to Markdown text.

    Fields left unset take the defaults of the selected flavor in
    ``__post_init__``, so ``MarkdownRendererOptions(flavor="qwiklabs")``
    yields the complete Qwiklabs house style while any single behavior can
    still be overridden.

    Parameters
    ----------
    flavor : {"codelab", "qwiklabs"}, default "codelab"
        Markdown house style supplying the defaults below.
    heading_level_offset : int, default per flavor (codelab 1, qwiklabs 0)
        Added to a header's level to size its ``#`` run.
    italic_padding : bool, default per flavor (codelab True, qwiklabs False)
        Emit `` *text* `` with an outer space on each side instead of ``*text*``.
    terminal_code_style : {"indent", "fence"}, default per flavor
        How terminal transcripts are formatted.
    terminal_code_language : str, default per flavor (codelab "", qwiklabs "bash")
        Language tag for fenced terminal transcripts; empty keeps the node's tag.
    code_block_padding : bool, default per flavor (codelab False, qwiklabs True)
        Emit an extra blank line before fenced code blocks.
    infobox_class_prefix : str, default "codelabs-infobox"
        CSS class of the raw HTML container emitted for infoboxes; the
        infobox kind is appended as ``<prefix>-<kind>``.
    html_options : HtmlRendererOptions or None, default None
        Options for the nested HTML renderer used for table cells and
        infobox bodies.

    """

    flavor: FlavorType = field(
        default=DEFAULT_FLAVOR,
        metadata={
            "help": "Markdown flavor/house style to use for output",
            "choices": ["codelab", "qwiklabs"],
            "importance": "core",
        },
    )
    heading_level_offset: int | Any = field(
        default=UNSET,
        metadata={"help": "Added to header levels to size the # run", "type": int, "importance": "core"},
    )
    italic_padding: bool | Any = field(
        default=UNSET,
        metadata={"help": "Pad italic markers with an outer space", "importance": "advanced"},
    )
    terminal_code_style: TerminalCodeStyle | Any = field(
        default=UNSET,
        metadata={
            "help": "How terminal transcripts are formatted",
            "choices": ["indent", "fence"],
            "importance": "core",
        },
    )
    terminal_code_language: str | Any = field(
        default=UNSET,
        metadata={"help": "Language tag for fenced terminal transcripts", "importance": "core"},
    )
    code_block_padding: bool | Any = field(
        default=UNSET,
        metadata={"help": "Emit an extra blank line before fenced code blocks", "importance": "advanced"},
    )
    infobox_class_prefix: str = field(
        default=DEFAULT_INFOBOX_CLASS_PREFIX,
        metadata={"help": "CSS class prefix for infobox containers", "importance": "advanced"},
    )
    html_options: HtmlRendererOptions | None = field(
        default=None,
        metadata={"help": "Options for HTML embedded in Markdown (tables, infoboxes)", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Apply flavor defaults and validate.

        Raises
        ------
        ValueError
            If the flavor is unknown or a field value is outside its valid range.

        """
        super().__post_init__()

        if self.flavor not in list_flavors():
            raise ValueError(f"Unknown markdown flavor: {self.flavor!r} (expected one of: {', '.join(list_flavors())})")

        # Apply flavor defaults for any fields that are still unset
        for name, value in get_flavor_defaults(self.flavor).items():
            if getattr(self, name) is UNSET:
                object.__setattr__(self, name, value)

        if self.heading_level_offset < 0:
            raise ValueError(f"heading_level_offset must be >= 0, got {self.heading_level_offset}")
        if self.terminal_code_style not in ("indent", "fence"):
            raise ValueError(f"terminal_code_style must be 'indent' or 'fence', got {self.terminal_code_style!r}")


def get_flavor_defaults(flavor: FlavorType) -> dict[str, Any]:
    """Get default option values for a markdown flavor.

    Parameters
    ----------
    flavor : FlavorType
        The markdown flavor to get defaults for.

    Returns
    -------
    dict[str, Any]
        Default values keyed by option field name.

    Examples
    --------
    >>> get_flavor_defaults("qwiklabs")["heading_level_offset"]
    0
    >>> get_flavor_defaults("codelab")["terminal_code_style"]
    'indent'

    """
    flavor_obj = get_flavor(flavor)
    return {
        "heading_level_offset": flavor_obj.heading_level_offset(),
        "italic_padding": flavor_obj.pads_italic(),
        "terminal_code_style": flavor_obj.terminal_code_style(),
        "terminal_code_language": flavor_obj.terminal_code_language(),
        "code_block_padding": flavor_obj.pads_code_blocks(),
    }
