"""HTML-related utility helpers."""

from __future__ import annotations

from html import escape as _html_escape

from labrender.constants import HTML_LINE_BREAK


def escape_html(text: str, *, enabled: bool = True) -> str:
    """Escape HTML special characters when enabled."""
    if not enabled:
        return text
    return _html_escape(text)


def text_to_html(text: str) -> str:
    """Escape ``text`` and turn embedded newlines into line-break tags."""
    return escape_html(text).replace("\n", HTML_LINE_BREAK)


def format_attr(name: str, value: str) -> str:
    """Format a single escaped ``name="value"`` attribute with a leading space."""
    return f' {name}="{escape_html(value)}"'
