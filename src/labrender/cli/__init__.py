#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/labrender/cli/__init__.py
"""Command-line interface for labrender.

The tool reads a serialized node tree (JSON, or YAML via PyYAML) and
renders it to Markdown or HTML for one target environment.

Examples
--------
Render to Markdown on stdout::

    $ labrender lab.json

Render the web variant to an HTML file::

    $ labrender lab.yaml --format html --env web -o lab.html

Use the Qwiklabs house style with rich formatting::

    $ labrender lab.json --flavor qwiklabs --rich

"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

import yaml

from labrender.api import from_nodes
from labrender.ast.nodes import Node
from labrender.ast.serialization import dicts_to_nodes
from labrender.ast.utils import collect_environments
from labrender.cli.builder import (
    EXIT_FILE_ERROR,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
    create_parser,
    get_exit_code_for_exception,
    markdown_option_kwargs,
)
from labrender.cli.output import print_rich, should_use_rich_output
from labrender.exceptions import LabRenderError, ValidationError
from labrender.logging_utils import configure_logging
from labrender.options.base import BaseRendererOptions
from labrender.options.markdown import MarkdownRendererOptions

logger = logging.getLogger(__name__)

YAML_SUFFIXES = (".yaml", ".yml")

__all__ = ["create_parser", "load_nodes", "main"]


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    """Set up logging level based on command-line arguments.

    Parameters
    ----------
    parsed_args : argparse.Namespace
        Parsed command-line arguments

    """
    # --trace takes highest precedence, then --verbose, then --log-level
    if parsed_args.trace:
        log_level = logging.DEBUG
    elif parsed_args.verbose and parsed_args.log_level == "WARNING":
        log_level = logging.DEBUG
    else:
        log_level = getattr(logging, parsed_args.log_level.upper())

    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def _decode_document(text: str, source: str) -> Any:
    # YAML is a superset of JSON, so stdin is read with the YAML loader
    if source == "-" or Path(source).suffix.lower() in YAML_SUFFIXES:
        return yaml.safe_load(text)
    return json.loads(text)


def load_nodes(source: str, strict_mode: bool = True) -> list[Node]:
    """Load a node document from a file path or ``-`` (stdin).

    Parameters
    ----------
    source : str
        Path to a JSON or YAML file, or ``-`` for stdin
    strict_mode : bool, default True
        Fail on unknown or malformed nodes instead of skipping them

    Returns
    -------
    list of Node
        Top-level node sequence

    Raises
    ------
    OSError
        If the file cannot be read
    ValidationError
        If the document cannot be decoded or does not describe nodes

    """
    if source == "-":
        text = sys.stdin.read()
    else:
        text = Path(source).read_text(encoding="utf-8")

    try:
        data = _decode_document(text, source)
        return dicts_to_nodes(data, strict_mode=strict_mode)
    except (ValueError, TypeError, yaml.YAMLError) as e:
        raise ValidationError(
            f"Invalid node document {source}: {e}",
            parameter_name="input",
            parameter_value=source,
            original_error=e,
        ) from e


def _build_renderer_options(args: argparse.Namespace) -> BaseRendererOptions | None:
    if args.target_format != "markdown":
        ignored = markdown_option_kwargs(args)
        if ignored:
            logger.warning("Ignoring Markdown options for %s output: %s", args.target_format, sorted(ignored))
        return None
    try:
        return MarkdownRendererOptions(**markdown_option_kwargs(args))
    except ValueError as e:
        raise ValidationError(str(e), original_error=e) from e


def main(argv: list[str] | None = None) -> int:
    """Run the labrender command.

    Parameters
    ----------
    argv : list of str, optional
        Command-line arguments (defaults to ``sys.argv[1:]``)

    Returns
    -------
    int
        Process exit code

    """
    parser = create_parser()
    args = parser.parse_args(argv)
    _setup_logging_level(args)

    try:
        nodes = load_nodes(args.input, strict_mode=not args.lenient)
    except OSError as e:
        print(f"Error: cannot read {args.input}: {e}", file=sys.stderr)
        return EXIT_FILE_ERROR
    except ValidationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    logger.debug("Loaded %d top-level node(s) from %s", len(nodes), args.input)

    if args.list_environments:
        for label in collect_environments(nodes):
            print(label)
        return EXIT_SUCCESS

    try:
        options = _build_renderer_options(args)
        if args.output:
            from_nodes(nodes, args.target_format, args.output, env=args.env, renderer_options=options)
            logger.info("Wrote %s output to %s", args.target_format, args.output)
        elif should_use_rich_output(args):
            text = from_nodes(nodes, args.target_format, env=args.env, renderer_options=options)
            print_rich(text or "", args.target_format)
        else:
            from_nodes(nodes, args.target_format, sys.stdout, env=args.env, renderer_options=options)
            sys.stdout.flush()
    except LabRenderError as e:
        print(f"Error: {e}", file=sys.stderr)
        return get_exit_code_for_exception(e)
    except Exception as e:
        logger.debug("Unexpected error", exc_info=True)
        print(f"Unexpected error: {e}", file=sys.stderr)
        return get_exit_code_for_exception(e)

    return EXIT_SUCCESS
