#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Argument parser and exit codes for the labrender command-line tool."""

from __future__ import annotations

import argparse
from typing import Any, get_args

from labrender.constants import DEFAULT_TARGET_FORMAT, FlavorType, TargetFormat, TerminalCodeStyle
from labrender.exceptions import FormatError, RenderingError, ValidationError

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_FORMAT_ERROR = 5
EXIT_RENDERING_ERROR = 7


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the ``labrender`` command.

    Returns
    -------
    argparse.ArgumentParser
        Configured parser

    """
    from labrender import __version__

    parser = argparse.ArgumentParser(
        prog="labrender",
        description="Render a serialized codelab node tree to Markdown or HTML.",
        epilog=(
            "Examples:\n"
            "  labrender lab.json\n"
            "  labrender lab.yaml -f html -e web -o lab.html\n"
            "  labrender lab.json --flavor qwiklabs --rich\n"
            "  cat lab.json | labrender -"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("input", help="JSON or YAML node document ('-' reads JSON or YAML from stdin)")
    parser.add_argument("--version", "-V", action="version", version=f"labrender {__version__}")

    input_group = parser.add_argument_group("input")
    input_group.add_argument(
        "--lenient",
        action="store_true",
        help="Skip unknown or malformed nodes in the input instead of failing",
    )

    output_group = parser.add_argument_group("output")
    output_group.add_argument(
        "--format",
        "-f",
        dest="target_format",
        choices=list(get_args(TargetFormat)),
        default=DEFAULT_TARGET_FORMAT,
        help=f"Output format (default: {DEFAULT_TARGET_FORMAT})",
    )
    output_group.add_argument(
        "--env",
        "-e",
        default="",
        metavar="ENV",
        help="Target environment; nodes labeled for other environments are skipped",
    )
    output_group.add_argument("--out", "-o", dest="output", metavar="PATH", help="Write output to PATH instead of stdout")
    output_group.add_argument(
        "--list-environments",
        action="store_true",
        help="Print the environment labels used in the document and exit",
    )
    output_group.add_argument("--rich", action="store_true", help="Pretty-print output to the terminal with Rich")
    output_group.add_argument(
        "--force-rich",
        action="store_true",
        help="Use Rich formatting even when stdout is not a terminal",
    )

    markdown_group = parser.add_argument_group("markdown options")
    markdown_group.add_argument(
        "--flavor",
        choices=list(get_args(FlavorType)),
        default=argparse.SUPPRESS,
        help="Markdown house style (default: codelab)",
    )
    markdown_group.add_argument(
        "--heading-offset",
        dest="heading_level_offset",
        type=_non_negative_int,
        default=argparse.SUPPRESS,
        metavar="N",
        help="Added to header levels to size the # run (default: per flavor)",
    )
    markdown_group.add_argument(
        "--terminal-style",
        dest="terminal_code_style",
        choices=list(get_args(TerminalCodeStyle)),
        default=argparse.SUPPRESS,
        help="How terminal transcripts are formatted (default: per flavor)",
    )
    markdown_group.add_argument(
        "--terminal-language",
        dest="terminal_code_language",
        default=argparse.SUPPRESS,
        metavar="LANG",
        help="Language tag for fenced terminal transcripts (default: per flavor)",
    )

    logging_group = parser.add_argument_group("logging")
    logging_group.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Set logging level for debugging (default: WARNING). Overrides --verbose if both are specified.",
    )
    logging_group.add_argument("--log-file", type=str, metavar="PATH", help="Also write log records to PATH")
    logging_group.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    logging_group.add_argument(
        "--trace",
        action="store_true",
        help="Debug logging with timestamps and logger names",
    )
    return parser


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected a non-negative integer, got {value!r}") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"expected a non-negative integer, got {number}")
    return number


MARKDOWN_OPTION_DESTS = ("flavor", "heading_level_offset", "terminal_code_style", "terminal_code_language")


def markdown_option_kwargs(args: argparse.Namespace) -> dict[str, Any]:
    """Collect the Markdown options given explicitly on the command line.

    Options left out keep their flavor defaults.
    """
    return {name: getattr(args, name) for name in MARKDOWN_OPTION_DESTS if hasattr(args, name)}


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map to an exit code

    Returns
    -------
    int
        The appropriate exit code for the exception type

    """
    if isinstance(exception, ValidationError):
        return EXIT_VALIDATION_ERROR

    if isinstance(exception, FormatError):
        return EXIT_FORMAT_ERROR

    if isinstance(exception, RenderingError):
        return EXIT_RENDERING_ERROR

    if isinstance(exception, OSError):
        return EXIT_FILE_ERROR

    return EXIT_ERROR
