#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/labrender/ast/visitors.py
"""Visitor pattern implementation for node traversal.

Every backend implements one ``visit_*`` method per node kind. All of them
are abstract, so a renderer that forgets a kind fails at instantiation
rather than silently dropping content; kinds a backend does not support
are ignored through an explicit no-op method.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from labrender.ast.nodes import (
    ButtonNode,
    CodeNode,
    GridNode,
    HeaderNode,
    ImageNode,
    ImportNode,
    InfoboxNode,
    ItemsListNode,
    ListNode,
    SurveyNode,
    TextNode,
    URLNode,
    YouTubeNode,
)


class NodeVisitor(ABC):
    """Abstract base class for node visitors.

    Examples
    --------
    A visitor that counts text characters:

        >>> class TextCounter(NodeVisitor):
        ...     def __init__(self):
        ...         self.count = 0
        ...
        ...     def visit_text(self, node):
        ...         self.count += len(node.value)
        ...
        ...     # remaining visit_* methods return None

    """

    @abstractmethod
    def visit_text(self, node: TextNode) -> Any:
        """Visit a TextNode."""
        pass

    @abstractmethod
    def visit_image(self, node: ImageNode) -> Any:
        """Visit an ImageNode."""
        pass

    @abstractmethod
    def visit_url(self, node: URLNode) -> Any:
        """Visit a URLNode."""
        pass

    @abstractmethod
    def visit_button(self, node: ButtonNode) -> Any:
        """Visit a ButtonNode."""
        pass

    @abstractmethod
    def visit_code(self, node: CodeNode) -> Any:
        """Visit a CodeNode."""
        pass

    @abstractmethod
    def visit_list(self, node: ListNode) -> Any:
        """Visit a ListNode."""
        pass

    @abstractmethod
    def visit_items_list(self, node: ItemsListNode) -> Any:
        """Visit an ItemsListNode."""
        pass

    @abstractmethod
    def visit_grid(self, node: GridNode) -> Any:
        """Visit a GridNode."""
        pass

    @abstractmethod
    def visit_infobox(self, node: InfoboxNode) -> Any:
        """Visit an InfoboxNode."""
        pass

    @abstractmethod
    def visit_header(self, node: HeaderNode) -> Any:
        """Visit a HeaderNode."""
        pass

    @abstractmethod
    def visit_import(self, node: ImportNode) -> Any:
        """Visit an ImportNode."""
        pass

    @abstractmethod
    def visit_survey(self, node: SurveyNode) -> Any:
        """Visit a SurveyNode."""
        pass

    @abstractmethod
    def visit_youtube(self, node: YouTubeNode) -> Any:
        """Visit a YouTubeNode."""
        pass
