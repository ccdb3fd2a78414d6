"""Base classes for renderer options.

This module defines the foundation classes for the format-specific options
used by the Markdown and HTML renderers.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from labrender.constants import DEFAULT_BUTTON_CLASS

UNSET = object()


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Base class for all renderer options.

    Parameters
    ----------
    button_class : str, default "codelabs-downloadbutton"
        CSS class given to rendered buttons

    Notes
    -----
    Subclasses should define format-specific rendering options as frozen dataclass fields.
    The target environment is not an option; it is passed to each render call.

    """

    button_class: str = field(
        default=DEFAULT_BUTTON_CLASS,
        metadata={"help": "CSS class given to rendered buttons", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate base renderer options.

        Raises
        ------
        ValueError
            If any field value is invalid.

        """
        if not self.button_class.strip():
            raise ValueError("button_class must not be empty")
