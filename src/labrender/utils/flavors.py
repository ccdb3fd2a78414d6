#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/labrender/utils/flavors.py
"""Markdown flavor definitions.

Codelab Markdown is consumed by two deployments with slightly different
house styles. Each flavor bundles the defaults for one of them; the
renderer options can still override any single behavior.

Supported Flavors
-----------------
- Codelab: headings one notch below the document title (level + 1),
  padded italics, terminal transcripts as indented blocks
- Qwiklabs: headings sized to the level exactly to match an external style
  guide, bare italics, terminal transcripts as ``bash`` fences

"""

from __future__ import annotations

from abc import ABC, abstractmethod

from labrender.constants import FlavorType, TerminalCodeStyle


class MarkdownFlavor(ABC):
    """Abstract base class for Markdown flavors."""

    @property
    @abstractmethod
    def name(self) -> FlavorType:
        """Get the flavor name.

        Returns
        -------
        str
            Flavor identifier used in options

        """
        pass

    @abstractmethod
    def heading_level_offset(self) -> int:
        """Number added to a header's level to size its ``#`` run.

        Returns
        -------
        int
            Offset applied to HeaderNode.level

        """
        pass

    @abstractmethod
    def pads_italic(self) -> bool:
        """Check if italic markers are padded with an outer space.

        Returns
        -------
        bool
            True to emit `` *text* `` instead of ``*text*``

        """
        pass

    @abstractmethod
    def terminal_code_style(self) -> TerminalCodeStyle:
        """Get how terminal transcripts are formatted.

        Returns
        -------
        {"indent", "fence"}
            ``indent`` for a 4-space indented blob, ``fence`` for a fenced block

        """
        pass

    @abstractmethod
    def terminal_code_language(self) -> str:
        """Get the language tag given to fenced terminal transcripts.

        Returns
        -------
        str
            Language tag, or empty string to keep the node's own tag

        """
        pass

    @abstractmethod
    def pads_code_blocks(self) -> bool:
        """Check if an extra blank line precedes fenced code blocks.

        Returns
        -------
        bool
            True to emit one more newline after opening the block

        """
        pass


class CodelabFlavor(MarkdownFlavor):
    """Default codelab house style."""

    @property
    def name(self) -> FlavorType:
        """Get the flavor name."""
        return "codelab"

    def heading_level_offset(self) -> int:
        """Level 0 renders as ``##``; ``#`` is reserved for the title."""
        return 1

    def pads_italic(self) -> bool:
        """Pad italics so markers never touch neighboring punctuation."""
        return True

    def terminal_code_style(self) -> TerminalCodeStyle:
        """Indent terminal transcripts."""
        return "indent"

    def terminal_code_language(self) -> str:
        """Keep the node's language tag."""
        return ""

    def pads_code_blocks(self) -> bool:
        """No extra blank line before fences."""
        return False


class QwiklabsFlavor(MarkdownFlavor):
    """Qwiklabs style-guide flavor.

    Headings map level 0 to ``#``, matching labs authored against the
    external style guide rather than nesting below the lab title.
    """

    @property
    def name(self) -> FlavorType:
        """Get the flavor name."""
        return "qwiklabs"

    def heading_level_offset(self) -> int:
        """Headings are sized to their level exactly."""
        return 0

    def pads_italic(self) -> bool:
        """Bare italic markers."""
        return False

    def terminal_code_style(self) -> TerminalCodeStyle:
        """Fence terminal transcripts."""
        return "fence"

    def terminal_code_language(self) -> str:
        """Terminal fences are tagged as shell code."""
        return "bash"

    def pads_code_blocks(self) -> bool:
        """One extra blank line before fences."""
        return True


_FLAVORS: dict[str, MarkdownFlavor] = {
    "codelab": CodelabFlavor(),
    "qwiklabs": QwiklabsFlavor(),
}


def get_flavor(flavor_name: str) -> MarkdownFlavor:
    """Get flavor instance from string name.

    Parameters
    ----------
    flavor_name : str
        Flavor name ("codelab" or "qwiklabs")

    Returns
    -------
    MarkdownFlavor
        Flavor instance

    Raises
    ------
    ValueError
        If the flavor name is unknown

    """
    try:
        return _FLAVORS[flavor_name]
    except KeyError:
        raise ValueError(f"Unknown markdown flavor: {flavor_name!r} (expected one of: {', '.join(_FLAVORS)})") from None


def list_flavors() -> list[str]:
    """Return the registered flavor names."""
    return list(_FLAVORS)
