#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/labrender/ast/nodes.py
"""Node classes for codelab document trees.

This module defines the closed set of node kinds that make up an
already-parsed codelab document. The tree is produced upstream (for example
by a word-processor export parser) and consumed read-only by the renderers.

Node Hierarchy
--------------
All nodes inherit from the base Node class and support the visitor pattern.
Every node carries an ``env`` tuple of environment labels that restricts it
to specific target deployments; an empty tuple means "always emit".

Inline nodes:
    - TextNode, ImageNode, URLNode, ButtonNode

Block-level nodes:
    - CodeNode, ListNode, ItemsListNode, GridNode, InfoboxNode
    - HeaderNode, ImportNode

Placeholders (no output in either backend):
    - SurveyNode, YouTubeNode

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Iterable

from labrender.constants import HeaderKind, ItemsListKind


class Node(ABC):
    """Base class for all document nodes.

    Parameters
    ----------
    env : tuple of str, default = ()
        Environment labels gating the node. Labels are kept sorted so that
        matching can use a binary search.

    """

    env: tuple[str, ...]

    def __post_init__(self) -> None:
        """Normalize environment labels to a sorted tuple."""
        self.env = _sorted_labels(self.env)

    @abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods

        Returns
        -------
        Any
            Result from the visitor's processing

        """
        pass


def _sorted_labels(labels: Iterable[str]) -> tuple[str, ...]:
    if isinstance(labels, str):
        labels = (labels,)
    return tuple(sorted(set(labels)))


# ============================================================================
# Inline Nodes
# ============================================================================


@dataclass
class TextNode(Node):
    """A run of text with optional styling.

    Parameters
    ----------
    value : str
        Literal text
    bold : bool, default = False
        Render with strong emphasis
    italic : bool, default = False
        Render with emphasis
    code : bool, default = False
        Render as inline code
    env : tuple of str, default = ()
        Environment labels

    """

    value: str
    bold: bool = False
    italic: bool = False
    code: bool = False
    env: tuple[str, ...] = ()

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this text node."""
        return visitor.visit_text(self)


@dataclass
class ImageNode(Node):
    """An image reference.

    Parameters
    ----------
    src : str
        Image URL or path
    max_width : float, default = 0.0
        Maximum display width in pixels; 0 means unconstrained
    env : tuple of str, default = ()
        Environment labels

    """

    src: str
    max_width: float = 0.0
    env: tuple[str, ...] = ()

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this image node."""
        return visitor.visit_image(self)


@dataclass
class URLNode(Node):
    """A hyperlink or named anchor.

    Parameters
    ----------
    content : list of Node, default = empty list
        Link content, commonly a single TextNode or a ButtonNode
    url : str, default = ""
        Destination URL
    name : str, default = ""
        Anchor name
    target : str, default = ""
        Link target (e.g. ``_blank``)
    env : tuple of str, default = ()
        Environment labels

    """

    content: list[Node] = field(default_factory=list)
    url: str = ""
    name: str = ""
    target: str = ""
    env: tuple[str, ...] = ()

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this URL node."""
        return visitor.visit_url(self)


@dataclass
class ButtonNode(Node):
    """A call-to-action button.

    Parameters
    ----------
    content : list of Node, default = empty list
        Button label content
    colored : bool, default = False
        Use the highlighted button style
    raised : bool, default = False
        Use the raised button style
    download : bool, default = False
        Show a download icon before the label
    env : tuple of str, default = ()
        Environment labels

    """

    content: list[Node] = field(default_factory=list)
    colored: bool = False
    raised: bool = False
    download: bool = False
    env: tuple[str, ...] = ()

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this button node."""
        return visitor.visit_button(self)


# ============================================================================
# Block-level Nodes
# ============================================================================


@dataclass
class CodeNode(Node):
    """A code snippet or terminal transcript.

    Parameters
    ----------
    value : str
        Literal code text
    lang : str, default = ""
        Language tag
    term : bool, default = False
        Whether the snippet is a terminal/shell transcript
    env : tuple of str, default = ()
        Environment labels

    """

    value: str
    lang: str = ""
    term: bool = False
    env: tuple[str, ...] = ()

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this code node."""
        return visitor.visit_code(self)


@dataclass
class ListNode(Node):
    """A sequence of nodes, optionally set apart as its own paragraph.

    Parameters
    ----------
    nodes : list of Node, default = empty list
        Child nodes
    block : bool or None, default = None
        Block-level marker assigned by the producer. Only ``True`` makes
        the list block-level; ``None`` (unset) and ``False`` render inline.
    env : tuple of str, default = ()
        Environment labels

    """

    nodes: list[Node] = field(default_factory=list)
    block: bool | None = None
    env: tuple[str, ...] = ()

    @property
    def is_block(self) -> bool:
        """Whether the list should be separated from its neighbors."""
        return self.block is True

    def is_empty(self) -> bool:
        """Return True when the list has no children."""
        return not self.nodes

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this list node."""
        return visitor.visit_list(self)


@dataclass
class ItemsListNode(Node):
    """A bulleted, numbered, checklist or FAQ list.

    Parameters
    ----------
    items : list of list of Node, default = empty list
        One child-node sequence per list item
    kind : {"plain", "ordered", "checklist", "faq"}, default = "plain"
        List kind
    start : int, default = 0
        First ordinal; numbering applies only to plain/ordered lists
        with a positive start
    list_type : str, default = ""
        Ordered-list type hint (e.g. ``"a"`` or ``"I"``) for HTML output
    env : tuple of str, default = ()
        Environment labels

    """

    items: list[list[Node]] = field(default_factory=list)
    kind: ItemsListKind = "plain"
    start: int = 0
    list_type: str = ""
    env: tuple[str, ...] = ()

    @property
    def numbered(self) -> bool:
        """Whether items carry ordinals instead of bullet markers."""
        return self.kind in ("plain", "ordered") and self.start > 0

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this items list node."""
        return visitor.visit_items_list(self)


@dataclass
class GridCell:
    """A single table cell.

    Parameters
    ----------
    content : list of Node, default = empty list
        Cell content
    colspan : int, default = 1
        Number of columns spanned
    rowspan : int, default = 1
        Number of rows spanned

    """

    content: list[Node] = field(default_factory=list)
    colspan: int = 1
    rowspan: int = 1


@dataclass
class GridNode(Node):
    """A table laid out as rows of cells.

    Parameters
    ----------
    rows : list of list of GridCell, default = empty list
        Table rows
    env : tuple of str, default = ()
        Environment labels

    """

    rows: list[list[GridCell]] = field(default_factory=list)
    env: tuple[str, ...] = ()

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this grid node."""
        return visitor.visit_grid(self)


@dataclass
class InfoboxNode(Node):
    """A callout box.

    Parameters
    ----------
    content : list of Node, default = empty list
        Box content
    kind : str, default = ""
        Styling hook such as ``"positive"`` or ``"warning"``
    env : tuple of str, default = ()
        Environment labels

    """

    content: list[Node] = field(default_factory=list)
    kind: str = ""
    env: tuple[str, ...] = ()

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this infobox node."""
        return visitor.visit_infobox(self)


@dataclass
class HeaderNode(Node):
    """A section heading.

    Parameters
    ----------
    content : list of Node, default = empty list
        Heading content
    level : int, default = 0
        Nesting level, 0 being the top-most heading below the title
    kind : {"plain", "checklist", "faq"}, default = "plain"
        Semantic sub-kind; only used by the HTML backend
    env : tuple of str, default = ()
        Environment labels

    """

    content: list[Node] = field(default_factory=list)
    level: int = 0
    kind: HeaderKind = "plain"
    env: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Validate the heading level and normalize labels."""
        super().__post_init__()
        if self.level < 0:
            raise ValueError(f"Header level must be >= 0, got {self.level}")

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this header node."""
        return visitor.visit_header(self)


@dataclass
class ImportNode(Node):
    """Transcluded content resolved upstream.

    Parameters
    ----------
    content : ListNode, default = empty ListNode
        The resolved content, rendered in place
    url : str, default = ""
        Where the content was imported from (informational)
    env : tuple of str, default = ()
        Environment labels

    """

    content: ListNode = field(default_factory=ListNode)
    url: str = ""
    env: tuple[str, ...] = ()

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this import node."""
        return visitor.visit_import(self)


# ============================================================================
# Placeholder Nodes
# ============================================================================


@dataclass
class SurveyGroup:
    """A single survey question and its answer options."""

    name: str
    options: list[str] = field(default_factory=list)


@dataclass
class SurveyNode(Node):
    """An embedded survey. Neither backend renders surveys yet.

    Parameters
    ----------
    survey_id : str
        Survey identifier
    groups : list of SurveyGroup, default = empty list
        Questions
    env : tuple of str, default = ()
        Environment labels

    """

    survey_id: str
    groups: list[SurveyGroup] = field(default_factory=list)
    env: tuple[str, ...] = ()

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this survey node."""
        return visitor.visit_survey(self)


@dataclass
class YouTubeNode(Node):
    """An embedded YouTube video. Neither backend renders videos yet.

    Parameters
    ----------
    video_id : str
        YouTube video identifier
    env : tuple of str, default = ()
        Environment labels

    """

    video_id: str
    env: tuple[str, ...] = ()

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this YouTube node."""
        return visitor.visit_youtube(self)


def get_node_children(node: Node) -> list[Node]:
    """Get the direct children of a node in document order.

    Grid cells and list items are flattened into a single sequence.

    Parameters
    ----------
    node : Node
        Node to inspect

    Returns
    -------
    list of Node
        Direct child nodes (empty for leaf nodes)

    """
    if isinstance(node, ListNode):
        return list(node.nodes)
    if isinstance(node, ImportNode):
        return list(node.content.nodes)
    if isinstance(node, ItemsListNode):
        return [child for item in node.items for child in item]
    if isinstance(node, GridNode):
        return [child for row in node.rows for cell in row for child in cell.content]
    if isinstance(node, (URLNode, ButtonNode, InfoboxNode, HeaderNode)):
        return list(node.content)
    return []
