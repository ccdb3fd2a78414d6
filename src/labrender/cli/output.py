"""Utility functions for cli output."""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/labrender/cli/output.py
from __future__ import annotations

import argparse
import sys
from typing import TextIO

from rich.console import Console
from rich.markdown import Markdown
from rich.syntax import Syntax

DEFAULT_CODE_THEME = "monokai"


def should_use_rich_output(args: argparse.Namespace, stream: TextIO | None = None) -> bool:
    """Determine if Rich output should be used based on TTY and args.

    Parameters
    ----------
    args : argparse.Namespace
        Parsed command line arguments
    stream : optional, default None
        Uses sys.stdout unless otherwise specified.

    Returns
    -------
    bool
        True if Rich output should be used

    Notes
    -----
    Rich output is used when the --rich flag is set, nothing is being
    written to an output file, and either --force-rich is set or the
    stream is a TTY.

    """
    if not getattr(args, "rich", False) or getattr(args, "output", None):
        return False

    if getattr(args, "force_rich", False):
        return True

    target = stream or sys.stdout
    isatty = getattr(target, "isatty", None)
    if callable(isatty):
        try:
            return bool(isatty())
        except ValueError:
            # closed stream
            return False
    return False


def print_rich(text: str, target_format: str, console: Console | None = None, code_theme: str = DEFAULT_CODE_THEME) -> None:
    """Pretty-print rendered output to the terminal.

    Markdown is rendered with Rich's Markdown renderer; HTML is shown
    syntax-highlighted.

    Parameters
    ----------
    text : str
        Rendered output
    target_format : str
        Format the text was rendered in ("markdown" or "html")
    console : Console, optional
        Console to print to; a stdout console is created when omitted
    code_theme : str, default "monokai"
        Pygments theme for code and HTML highlighting

    """
    console = console or Console()
    if target_format == "markdown":
        console.print(Markdown(text, code_theme=code_theme))
    else:
        console.print(Syntax(text, target_format, theme=code_theme, word_wrap=True))
