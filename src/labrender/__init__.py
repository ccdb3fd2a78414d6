"""labrender - Render codelab document trees to Markdown and HTML.

labrender takes an already-parsed tutorial document (a sequence of typed
nodes: text runs, links, buttons, code blocks, lists, tables, callouts,
headings and imported fragments) and writes it out as Markdown or as an
HTML fragment.

Every node can be labeled with the environments it belongs to. Rendering
for a target environment skips nodes labeled for other environments, so a
single source tree yields per-environment variants.

Key Features
------------
- Markdown output in two house styles ("codelab" and "qwiklabs")
- HTML fragment output for embedding in a page
- Tables and callouts rendered as raw HTML inside Markdown
- Incremental writes to any stream, with fail-fast write errors
- JSON/YAML node documents and a command-line tool

Examples
--------
    >>> from labrender import to_markdown, to_html
    >>> from labrender.ast import HeaderNode, TextNode
    >>> nodes = [HeaderNode(content=[TextNode(value="Intro")], level=0), TextNode(value="hello", bold=True)]
    >>> to_html(nodes)
    '<h1>Intro</h1>\\n<strong>hello</strong>'

See Also
--------
labrender.ast : Node definitions and serialization
labrender.renderers : Markdown and HTML renderers

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# Check Python version before any imports
import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "labrender requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from labrender.api import from_nodes, to_html, to_markdown  # noqa: E402
from labrender.exceptions import (  # noqa: E402
    FormatError,
    InvalidOptionsError,
    LabRenderError,
    OutputWriteError,
    RenderingError,
    ValidationError,
)
from labrender.options import BaseRendererOptions, HtmlRendererOptions, MarkdownRendererOptions  # noqa: E402

__all__ = [
    "__version__",
    "from_nodes",
    "to_html",
    "to_markdown",
    "BaseRendererOptions",
    "HtmlRendererOptions",
    "MarkdownRendererOptions",
    "LabRenderError",
    "ValidationError",
    "InvalidOptionsError",
    "FormatError",
    "RenderingError",
    "OutputWriteError",
]
