#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/labrender/constants.py
"""Constants and type aliases shared across labrender.

This module centralizes default values for renderer options, the literal
types used by node kinds and option fields, and the fixed markup fragments
emitted by both backends.

"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

FlavorType = Literal["codelab", "qwiklabs"]
TargetFormat = Literal["markdown", "html"]
TerminalCodeStyle = Literal["indent", "fence"]
ItemsListKind = Literal["plain", "ordered", "checklist", "faq"]
HeaderKind = Literal["plain", "checklist", "faq"]

# =============================================================================
# Markup fragments
# =============================================================================

NEWLINE = "\n"
TERMINAL_INDENT = "    "
CODE_FENCE = "```"
MARKDOWN_BULLET = "* "
HTML_LINE_BREAK = "<br>"
BUTTON_FALLBACK_HREF = "#"
BUTTON_LINK_TARGET = "_blank"

# =============================================================================
# Renderer Defaults
# =============================================================================

DEFAULT_FLAVOR: FlavorType = "codelab"
DEFAULT_BUTTON_CLASS = "codelabs-downloadbutton"
DEFAULT_INFOBOX_CLASS_PREFIX = "codelabs-infobox"
DEFAULT_CODE_BLOCK_CLASS = "prettyprint"
DEFAULT_DOWNLOAD_ICON = '<i class="material-icons">file_download</i>'
DEFAULT_TARGET_FORMAT: TargetFormat = "markdown"

# =============================================================================
# Serialization
# =============================================================================

SCHEMA_VERSION = 1
