#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/labrender/ast/utils.py
"""Utility functions for working with document nodes.

Functions
---------
matches_env : Decide whether a node's environment labels admit a target
text_values : Concatenate the literal values of TextNode children
base_name : Final path segment of an image source
iter_nodes : Depth-first walk over a node sequence
collect_environments : All environment labels used in a tree

Examples
--------
Filter by environment:

    >>> from labrender.ast.utils import matches_env
    >>> matches_env(("cloud", "web"), "web")
    True
    >>> matches_env(("cloud",), "web")
    False
    >>> matches_env(("cloud",), "")
    True

"""

from __future__ import annotations

from bisect import bisect_left
from typing import Iterator, Sequence

from labrender.ast.nodes import Node, TextNode, get_node_children


def matches_env(labels: Sequence[str], env: str) -> bool:
    """Check whether a node with ``labels`` is emitted for target ``env``.

    An empty label set or an empty target environment always matches.
    Otherwise ``env`` must be one of the labels exactly; there is no
    prefix or partial matching.

    Parameters
    ----------
    labels : sequence of str
        The node's environment labels, sorted ascending
    env : str
        The renderer's target environment

    Returns
    -------
    bool
        True if the node should be rendered

    """
    if not labels or not env:
        return True
    i = bisect_left(labels, env)
    return i < len(labels) and labels[i] == env


def text_values(nodes: Sequence[Node]) -> str:
    """Join the literal values of the TextNode entries of ``nodes``.

    Non-text nodes are dropped; styling flags and environment labels are
    ignored.

    """
    return "".join(n.value for n in nodes if isinstance(n, TextNode))


def base_name(src: str) -> str:
    """Return the last slash-separated element of ``src``.

    Trailing slashes are removed first. An empty source yields ``"."`` and
    a source made only of slashes yields ``"/"``.

    Examples
    --------
    >>> base_name("img/diagram.png")
    'diagram.png'
    >>> base_name("https://example.com/a/b/")
    'b'

    """
    if not src:
        return "."
    stripped = src.rstrip("/")
    if not stripped:
        return "/"
    return stripped.rsplit("/", 1)[-1]


def iter_nodes(nodes: Sequence[Node]) -> Iterator[Node]:
    """Yield every node of ``nodes`` and their descendants, depth first."""
    for node in nodes:
        yield node
        yield from iter_nodes(get_node_children(node))


def collect_environments(nodes: Sequence[Node]) -> list[str]:
    """Collect the distinct environment labels used anywhere in ``nodes``.

    Returns
    -------
    list of str
        Sorted labels

    """
    labels: set[str] = set()
    for node in iter_nodes(nodes):
        labels.update(node.env)
    return sorted(labels)
