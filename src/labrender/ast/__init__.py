#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/labrender/ast/__init__.py
"""Document tree module.

The module consists of several components:

- nodes: node classes representing a parsed codelab document
- utils: environment matching and tree helpers
- visitors: visitor base class used by the renderers
- serialization: JSON serialization and deserialization of node trees

Examples
--------
Basic usage:

    >>> from labrender.ast import HeaderNode, TextNode
    >>> from labrender.renderers.markdown import MarkdownRenderer
    >>>
    >>> nodes = [
    ...     HeaderNode(level=0, content=[TextNode("Intro")]),
    ...     TextNode("hello", bold=True),
    ... ]
    >>> markdown = MarkdownRenderer().render_to_string(nodes)

"""

from __future__ import annotations

from labrender.ast.nodes import (
    ButtonNode,
    CodeNode,
    GridCell,
    GridNode,
    HeaderNode,
    ImageNode,
    ImportNode,
    InfoboxNode,
    ItemsListNode,
    ListNode,
    Node,
    SurveyGroup,
    SurveyNode,
    TextNode,
    URLNode,
    YouTubeNode,
    get_node_children,
)
from labrender.ast.serialization import dict_to_node, json_to_nodes, node_to_dict, nodes_to_json
from labrender.ast.utils import collect_environments, iter_nodes, matches_env
from labrender.ast.visitors import NodeVisitor

__all__ = [
    "ButtonNode",
    "CodeNode",
    "GridCell",
    "GridNode",
    "HeaderNode",
    "ImageNode",
    "ImportNode",
    "InfoboxNode",
    "ItemsListNode",
    "ListNode",
    "Node",
    "NodeVisitor",
    "SurveyGroup",
    "SurveyNode",
    "TextNode",
    "URLNode",
    "YouTubeNode",
    "collect_environments",
    "dict_to_node",
    "get_node_children",
    "iter_nodes",
    "json_to_nodes",
    "matches_env",
    "node_to_dict",
    "nodes_to_json",
]
