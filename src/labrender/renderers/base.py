#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/labrender/renderers/base.py
"""Base classes for node renderers.

This module defines the abstract base class shared by the Markdown and HTML
renderers. A renderer is a stateful writer: during a render call it owns the
output sink, the target environment and a sticky write error.

Write failures are sticky. The first failing write is recorded and every
later write in the same call becomes a no-op; the dispatch loop notices the
recorded error before and after each node and raises it, so the render call
fails fast with :class:`~labrender.exceptions.OutputWriteError`. Output
written before the failure stays in the sink.

"""

from __future__ import annotations

import logging
from abc import ABC
from io import StringIO
from typing import Callable, Iterable, Sequence

from labrender.ast.nodes import Node
from labrender.ast.utils import matches_env
from labrender.exceptions import InvalidOptionsError, OutputWriteError
from labrender.options.base import BaseRendererOptions
from labrender.utils.io_utils import OutputTarget, TextSink, as_text_sink, describe_sink, open_sink

logger = logging.getLogger(__name__)

HtmlContentWriter = Callable[[TextSink, str, Sequence[Node]], None]
"""Signature of a reusable content renderer: ``(sink, env, nodes) -> None``."""


class BaseRenderer(ABC):
    """Abstract base class for all node renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    Attributes
    ----------
    env : str
        Target environment of the current render call; empty renders every node

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options
        self.env = ""
        self._sink: TextSink | None = None
        self._sink_name = ""
        self._error: OutputWriteError | None = None

    @property
    def error(self) -> OutputWriteError | None:
        """The sticky write error of the current or last render call."""
        return self._error

    def render(self, nodes: Sequence[Node], output: OutputTarget, env: str = "") -> None:
        """Render nodes to a file path or stream.

        Parameters
        ----------
        nodes : sequence of Node
            Nodes to render
        output : str, Path, IO[bytes], or IO[str]
            Output destination. Paths are opened (and closed) here; streams
            are written to and left open.
        env : str, default ""
            Target environment

        Raises
        ------
        OutputWriteError
            If the output cannot be opened or written

        """
        try:
            with open_sink(output) as sink:
                self.write_nodes(sink, nodes, env)
        except OSError as exc:
            raise OutputWriteError(str(output), original_error=exc) from exc

    def render_to_string(self, nodes: Sequence[Node], env: str = "") -> str:
        """Render nodes to a string.

        Parameters
        ----------
        nodes : sequence of Node
            Nodes to render
        env : str, default ""
            Target environment

        Returns
        -------
        str
            Rendered output

        """
        buffer = StringIO()
        self.write_nodes(buffer, nodes, env)
        return buffer.getvalue()

    def write_nodes(self, sink: TextSink, nodes: Sequence[Node], env: str = "") -> None:
        """Render nodes incrementally to an open sink.

        Parameters
        ----------
        sink : TextSink
            Text or binary stream, or any object with a ``write(str)`` method
        nodes : sequence of Node
            Nodes to render
        env : str, default ""
            Target environment

        Raises
        ------
        OutputWriteError
            If a write to the sink fails

        """
        self._sink = as_text_sink(sink)
        self._sink_name = describe_sink(sink)
        self._error = None
        self.env = env
        self._reset_state()
        try:
            self.render_nodes(nodes)
        finally:
            self._sink = None

    def _reset_state(self) -> None:
        """Reset per-call writer state. Subclasses extend this."""
        pass

    def write(self, text: str) -> int:
        """Write text to the sink unless a previous write failed.

        The renderer itself satisfies the sink protocol, so it can be handed
        to a nested renderer that splices its output into this one.

        Parameters
        ----------
        text : str
            Text to write

        Returns
        -------
        int
            Number of characters accepted (0 once the writer has failed)

        """
        if self._error is not None or not text:
            return 0
        if self._sink is None:
            raise RuntimeError(f"{type(self).__name__}.write() called outside of a render call")
        try:
            self._sink.write(text)
        except (OSError, ValueError) as exc:
            self._error = OutputWriteError(self._sink_name, original_error=exc)
            logger.debug("Write to %s failed, suppressing further output: %s", self._sink_name, exc)
            return 0
        return len(text)

    def render_nodes(self, nodes: Iterable[Node]) -> None:
        """Dispatch each node in order, skipping nodes outside the environment.

        A skipped node's children are never inspected. The sticky error is
        checked before and after every node so that a failed write aborts
        the remaining sequence at every nesting level.

        Parameters
        ----------
        nodes : iterable of Node
            Nodes to render

        Raises
        ------
        OutputWriteError
            As soon as a write has failed

        """
        for node in nodes:
            self._raise_if_failed()
            if not isinstance(node, Node):
                logger.debug("Skipping unsupported object of type %s", type(node).__name__)
                continue
            if not matches_env(node.env, self.env):
                logger.debug("Skipping %s: environment %r not in %s", type(node).__name__, self.env, node.env)
                continue
            node.accept(self)
            self._raise_if_failed()

    def _raise_if_failed(self) -> None:
        if self._error is not None:
            raise self._error

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Parameters
        ----------
        options : BaseRendererOptions or None
            The options object to validate
        expected_type : type
            The expected options class type
        renderer_name : str
            Name of the renderer (for error messages)

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                renderer_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )
