#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/labrender/api.py
"""High-level rendering API.

These functions are the main entry points of the library. They pick the
renderer for a target format, build its options from keyword arguments when
needed, and either return the rendered text or write it to an output.

"""

from __future__ import annotations

import logging
from dataclasses import fields
from typing import Any, Optional, Sequence, Union, get_args

from labrender.ast.nodes import Node
from labrender.constants import TargetFormat
from labrender.exceptions import FormatError
from labrender.options.base import BaseRendererOptions
from labrender.options.html import HtmlRendererOptions
from labrender.options.markdown import MarkdownRendererOptions
from labrender.renderers.base import BaseRenderer
from labrender.renderers.html import HtmlRenderer
from labrender.renderers.markdown import MarkdownRenderer
from labrender.utils.io_utils import OutputTarget

logger = logging.getLogger(__name__)

_RENDERERS: dict[str, tuple[type[BaseRenderer], type[BaseRendererOptions]]] = {
    "markdown": (MarkdownRenderer, MarkdownRendererOptions),
    "html": (HtmlRenderer, HtmlRendererOptions),
}


def _create_renderer_options_from_kwargs(
    options_class: type[BaseRendererOptions],
    **kwargs: Any,
) -> BaseRendererOptions:
    """Create an options object from keyword arguments, ignoring unknown names."""
    option_names = [field.name for field in fields(options_class)]
    valid_kwargs = {k: v for k, v in kwargs.items() if k in option_names}
    missing = [k for k in kwargs if k not in valid_kwargs]
    if missing:
        logger.debug("Skipping unknown renderer options: %s", missing)
    return options_class(**valid_kwargs)


def from_nodes(
    nodes: Sequence[Node],
    target_format: TargetFormat = "markdown",
    output: Union[OutputTarget, None] = None,
    *,
    env: str = "",
    renderer_options: Optional[BaseRendererOptions] = None,
    **kwargs: Any,
) -> Union[str, None]:
    """Render a node sequence to a target format.

    Parameters
    ----------
    nodes : sequence of Node
        Nodes to render, in document order
    target_format : {"markdown", "html"}, default "markdown"
        Output format
    output : str, Path, IO[bytes], IO[str], or None, optional
        Output destination. If None, the rendered text is returned.
    env : str, default ""
        Target environment. Nodes labeled for other environments are
        skipped; an empty environment renders everything.
    renderer_options : BaseRendererOptions, optional
        Options for the target format's renderer
    kwargs : Any
        Renderer options that override ``renderer_options``

    Returns
    -------
    str or None
        The rendered text when ``output`` is None, otherwise None

    Raises
    ------
    FormatError
        If ``target_format`` is not supported
    InvalidOptionsError
        If ``renderer_options`` do not belong to the target format
    OutputWriteError
        If writing to ``output`` fails

    Examples
    --------
    >>> from labrender.ast import HeaderNode, TextNode
    >>> nodes = [HeaderNode(content=[TextNode(value="Intro")], level=0), TextNode(value="hello", bold=True)]
    >>> from_nodes(nodes, "html")
    '<h1>Intro</h1>\\n<strong>hello</strong>'

    """
    if target_format not in _RENDERERS:
        raise FormatError(target_format=target_format, supported_formats=list(get_args(TargetFormat)))

    renderer_class, options_class = _RENDERERS[target_format]

    final_options: Optional[BaseRendererOptions]
    if kwargs and renderer_options:
        final_options = renderer_options.create_updated(**kwargs)
    elif kwargs:
        final_options = _create_renderer_options_from_kwargs(options_class, **kwargs)
    else:
        final_options = renderer_options

    renderer = renderer_class(final_options)  # type: ignore[call-arg]
    logger.debug("Rendering %d node(s) to %s (env=%r)", len(nodes), target_format, env)

    if output is None:
        return renderer.render_to_string(nodes, env)
    renderer.render(nodes, output, env)
    return None


def to_markdown(
    nodes: Sequence[Node],
    env: str = "",
    options: Optional[MarkdownRendererOptions] = None,
    **kwargs: Any,
) -> str:
    """Render nodes to a Markdown string.

    Parameters
    ----------
    nodes : sequence of Node
        Nodes to render
    env : str, default ""
        Target environment
    options : MarkdownRendererOptions, optional
        Markdown options
    kwargs : Any
        Markdown options that override ``options`` (e.g. ``flavor="qwiklabs"``)

    Returns
    -------
    str
        Markdown text

    """
    result = from_nodes(nodes, "markdown", env=env, renderer_options=options, **kwargs)
    assert result is not None
    return result


def to_html(
    nodes: Sequence[Node],
    env: str = "",
    options: Optional[HtmlRendererOptions] = None,
    **kwargs: Any,
) -> str:
    """Render nodes to an HTML fragment.

    Parameters
    ----------
    nodes : sequence of Node
        Nodes to render
    env : str, default ""
        Target environment
    options : HtmlRendererOptions, optional
        HTML options
    kwargs : Any
        HTML options that override ``options``

    Returns
    -------
    str
        HTML fragment

    """
    result = from_nodes(nodes, "html", env=env, renderer_options=options, **kwargs)
    assert result is not None
    return result
