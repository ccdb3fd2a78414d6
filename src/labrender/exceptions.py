#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the labrender library.

This module defines the exception classes raised while configuring and
running the renderers. They carry more context than generic built-ins and
share a single root so callers can catch every library error at once.

Exception Hierarchy
-------------------
- LabRenderError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class for a renderer)

  - FormatError (unknown target format)

  - RenderingError (output generation failures)
    - OutputWriteError (sink write failures)

"""

from typing import Any


class LabRenderError(Exception):
    """Base exception class for all labrender-specific errors.

    Parameters
    ----------
    message : str
        What went wrong
    original_error : Exception, optional
        Lower-level exception being wrapped

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        Lower-level exception, or None

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Store the message and the wrapped cause."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(LabRenderError):
    """Raised when input data or options are rejected.

    Parameters
    ----------
    message : str
        Why the value was rejected
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The rejected value
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Record which parameter failed validation."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidOptionsError(ValidationError):
    """Exception raised when a renderer receives the wrong options class.

    For example, passing ``HtmlRendererOptions`` to the Markdown renderer.

    Parameters
    ----------
    renderer_name : str
        Name of the renderer that received invalid options
    expected_type : type
        Options class the renderer accepts
    received_type : type
        Options class that was passed in
    message : str, optional
        Overrides the generated message

    """

    def __init__(
        self,
        renderer_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Build a message naming both option classes."""
        if message is None:
            message = (
                f"{renderer_name} expected options of type '{expected_type.__name__}' "
                f"but received '{received_type.__name__}'."
            )
        super().__init__(
            message, parameter_name="options", parameter_value=received_type, original_error=original_error
        )
        self.renderer_name = renderer_name
        self.expected_type = expected_type
        self.received_type = received_type


class FormatError(LabRenderError):
    """Exception raised when an unknown target format is requested.

    Parameters
    ----------
    target_format : str
        The format name that was requested
    supported_formats : list of str, optional
        Formats that are available

    """

    def __init__(self, target_format: str, supported_formats: list[str] | None = None):
        """List the supported formats in the message."""
        message = f"Unsupported target format: {target_format!r}"
        if supported_formats:
            message += f" (expected one of: {', '.join(supported_formats)})"
        super().__init__(message)
        self.target_format = target_format
        self.supported_formats = supported_formats or []


class RenderingError(LabRenderError):
    """Raised when producing output fails.

    Parameters
    ----------
    message : str
        What failed while producing output
    rendering_stage : str, optional
        Short tag for the failing step, e.g. "sink_write"
    original_error : Exception, optional
        Lower-level exception being wrapped

    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        """Record the stage that failed."""
        super().__init__(message, original_error)
        self.rendering_stage = rendering_stage


class OutputWriteError(RenderingError):
    """Exception raised when writing to the output sink fails.

    Once raised by a renderer the error is sticky: the renderer stops
    writing and every later write attempt in the same call is a no-op.

    Parameters
    ----------
    sink_name : str
        Description of the sink that failed (file name or stream repr)
    message : str, optional
        Overrides the generated message
    original_error : Exception, optional
        The original exception raised by the sink

    """

    def __init__(self, sink_name: str, message: str | None = None, original_error: Exception | None = None):
        """Describe the failed sink and its cause."""
        if message is None:
            message = f"Failed to write output to {sink_name}"
            if original_error is not None:
                message += f": {original_error}"
        super().__init__(message, rendering_stage="sink_write", original_error=original_error)
        self.sink_name = sink_name
