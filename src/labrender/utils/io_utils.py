#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/labrender/utils/io_utils.py
"""I/O utilities for handling output sinks.

Renderers write incrementally to a caller-supplied sink. This module turns
the destinations a caller may hand over (a file path, a text stream or a
binary stream) into a single text-writing interface.

"""

from __future__ import annotations

import io
from contextlib import contextmanager
from io import BytesIO, StringIO
from pathlib import Path
from typing import IO, Iterator, Protocol, Union, cast


class TextSink(Protocol):
    """Anything with a ``write(str)`` method."""

    def write(self, text: str, /) -> object: ...


OutputTarget = Union[str, Path, IO[bytes], IO[str], TextSink]


class BinarySinkAdapter:
    """Expose a binary stream as a text sink, encoding with UTF-8.

    Parameters
    ----------
    stream : IO[bytes]
        Binary destination
    encoding : str, default "utf-8"
        Encoding applied to every write

    """

    def __init__(self, stream: IO[bytes], encoding: str = "utf-8"):
        self.stream = stream
        self.encoding = encoding

    def write(self, text: str) -> int:
        """Encode ``text`` and write it to the wrapped stream."""
        self.stream.write(text.encode(self.encoding))
        return len(text)

    def __repr__(self) -> str:
        return f"BinarySinkAdapter({self.stream!r})"


def is_binary_stream(output: object) -> bool:
    """Detect whether a file-like object expects bytes.

    Parameters
    ----------
    output : object
        File-like object

    Returns
    -------
    bool
        True for binary streams

    """
    # Check concrete types first (most reliable)
    if isinstance(output, BytesIO):
        return True
    if isinstance(output, StringIO):
        return False
    # Check io module base classes (robust for standard streams)
    if isinstance(output, io.TextIOBase):
        return False
    if isinstance(output, (io.BufferedIOBase, io.RawIOBase)):
        return True
    # Check mode attribute (fallback for file objects)
    mode = getattr(output, "mode", "")
    return isinstance(mode, str) and "b" in mode


def as_text_sink(output: object) -> TextSink:
    """Wrap a file-like object so it accepts ``str`` writes.

    Raises
    ------
    TypeError
        If the object has no ``write`` method

    """
    if not hasattr(output, "write"):
        raise TypeError(f"Unsupported output type: {type(output)}")
    if is_binary_stream(output):
        return BinarySinkAdapter(cast(IO[bytes], output))
    return cast(TextSink, output)


def describe_sink(output: object) -> str:
    """Return a short human-readable name for a sink, used in error messages."""
    if isinstance(output, BinarySinkAdapter):
        output = output.stream
    name = getattr(output, "name", None)
    if isinstance(name, str):
        return name
    return type(output).__name__


@contextmanager
def open_sink(output: OutputTarget) -> Iterator[TextSink]:
    """Open an output destination as a text sink.

    Paths are opened for writing (UTF-8) and closed on exit; streams are
    wrapped but left open for the caller to manage.

    Parameters
    ----------
    output : str, Path, IO[bytes], IO[str]
        Output destination

    Yields
    ------
    TextSink
        Object accepting ``str`` writes

    """
    if isinstance(output, (str, Path)):
        with open(output, "w", encoding="utf-8", newline="") as handle:
            yield handle
        return
    yield as_text_sink(output)


__all__ = [
    "BinarySinkAdapter",
    "OutputTarget",
    "TextSink",
    "as_text_sink",
    "describe_sink",
    "is_binary_stream",
    "open_sink",
]
