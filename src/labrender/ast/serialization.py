#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/labrender/ast/serialization.py
"""JSON serialization and deserialization for document nodes.

Node trees are normally handed to the renderers in-process. The JSON form
lets the command-line tool and tests load trees from files.

The document envelope is::

    {"schema_version": 1, "nodes": [{"node_type": "Header", ...}, ...]}

A bare JSON list of node objects is accepted as well.

Examples
--------
    >>> from labrender.ast import TextNode
    >>> from labrender.ast.serialization import nodes_to_json, json_to_nodes
    >>> text = nodes_to_json([TextNode("hello", bold=True)])
    >>> json_to_nodes(text)[0].bold
    True

"""

from __future__ import annotations

import json
import logging
from typing import Any, Callable

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
)
from labrender.constants import SCHEMA_VERSION

logger = logging.getLogger(__name__)


def _with_env(result: dict[str, Any], node: Node) -> dict[str, Any]:
    if node.env:
        result["env"] = list(node.env)
    return result


def _serialize_content(nodes: list[Node]) -> list[dict[str, Any]]:
    return [node_to_dict(n) for n in nodes]


def _serialize_text(node: TextNode) -> dict[str, Any]:
    result: dict[str, Any] = {"node_type": "Text", "value": node.value}
    for flag in ("bold", "italic", "code"):
        if getattr(node, flag):
            result[flag] = True
    return _with_env(result, node)


def _serialize_image(node: ImageNode) -> dict[str, Any]:
    result: dict[str, Any] = {"node_type": "Image", "src": node.src}
    if node.max_width:
        result["max_width"] = node.max_width
    return _with_env(result, node)


def _serialize_url(node: URLNode) -> dict[str, Any]:
    result: dict[str, Any] = {"node_type": "URL", "content": _serialize_content(node.content)}
    for attr in ("url", "name", "target"):
        value = getattr(node, attr)
        if value:
            result[attr] = value
    return _with_env(result, node)


def _serialize_button(node: ButtonNode) -> dict[str, Any]:
    result: dict[str, Any] = {"node_type": "Button", "content": _serialize_content(node.content)}
    for flag in ("colored", "raised", "download"):
        if getattr(node, flag):
            result[flag] = True
    return _with_env(result, node)


def _serialize_code(node: CodeNode) -> dict[str, Any]:
    result: dict[str, Any] = {"node_type": "Code", "value": node.value}
    if node.lang:
        result["lang"] = node.lang
    if node.term:
        result["term"] = True
    return _with_env(result, node)


def _serialize_list(node: ListNode) -> dict[str, Any]:
    result: dict[str, Any] = {"node_type": "List", "nodes": _serialize_content(node.nodes)}
    if node.block is not None:
        result["block"] = node.block
    return _with_env(result, node)


def _serialize_items_list(node: ItemsListNode) -> dict[str, Any]:
    result: dict[str, Any] = {
        "node_type": "ItemsList",
        "items": [_serialize_content(item) for item in node.items],
        "kind": node.kind,
    }
    if node.start:
        result["start"] = node.start
    if node.list_type:
        result["list_type"] = node.list_type
    return _with_env(result, node)


def _serialize_grid(node: GridNode) -> dict[str, Any]:
    rows = [
        [{"content": _serialize_content(c.content), "colspan": c.colspan, "rowspan": c.rowspan} for c in row]
        for row in node.rows
    ]
    return _with_env({"node_type": "Grid", "rows": rows}, node)


def _serialize_infobox(node: InfoboxNode) -> dict[str, Any]:
    result = {"node_type": "Infobox", "kind": node.kind, "content": _serialize_content(node.content)}
    return _with_env(result, node)


def _serialize_header(node: HeaderNode) -> dict[str, Any]:
    result = {
        "node_type": "Header",
        "level": node.level,
        "kind": node.kind,
        "content": _serialize_content(node.content),
    }
    return _with_env(result, node)


def _serialize_import(node: ImportNode) -> dict[str, Any]:
    result: dict[str, Any] = {"node_type": "Import", "content": _serialize_content(node.content.nodes)}
    if node.content.block is not None:
        result["block"] = node.content.block
    if node.url:
        result["url"] = node.url
    return _with_env(result, node)


def _serialize_survey(node: SurveyNode) -> dict[str, Any]:
    groups = [{"name": g.name, "options": list(g.options)} for g in node.groups]
    return _with_env({"node_type": "Survey", "survey_id": node.survey_id, "groups": groups}, node)


def _serialize_youtube(node: YouTubeNode) -> dict[str, Any]:
    return _with_env({"node_type": "YouTube", "video_id": node.video_id}, node)


# Dispatch table mapping node types to their serialization functions
_SERIALIZATION_DISPATCH: dict[type, Callable[[Any], dict[str, Any]]] = {
    TextNode: _serialize_text,
    ImageNode: _serialize_image,
    URLNode: _serialize_url,
    ButtonNode: _serialize_button,
    CodeNode: _serialize_code,
    ListNode: _serialize_list,
    ItemsListNode: _serialize_items_list,
    GridNode: _serialize_grid,
    InfoboxNode: _serialize_infobox,
    HeaderNode: _serialize_header,
    ImportNode: _serialize_import,
    SurveyNode: _serialize_survey,
    YouTubeNode: _serialize_youtube,
}


def node_to_dict(node: Node) -> dict[str, Any]:
    """Convert a node to a dictionary representation.

    Parameters
    ----------
    node : Node
        The node to convert

    Returns
    -------
    dict
        Dictionary representation of the node

    Raises
    ------
    ValueError
        If the node type has no serializer

    Examples
    --------
    >>> node_to_dict(TextNode("Hello", env=("web",)))
    {'node_type': 'Text', 'value': 'Hello', 'env': ['web']}

    """
    serializer = _SERIALIZATION_DISPATCH.get(type(node))
    if serializer:
        return serializer(node)

    raise ValueError(f"Unknown node type for serialization: {type(node).__name__}")


# Helper functions for deserialization
def _require(data: dict[str, Any], key: str) -> Any:
    try:
        return data[key]
    except KeyError:
        raise ValueError(f"{data.get('node_type')} node is missing required field '{key}'") from None


def _env(data: dict[str, Any]) -> tuple[str, ...]:
    labels = data.get("env") or ()
    if isinstance(labels, str):
        return (labels,)
    return tuple(labels)


class _Deserializer:
    """Recursive dict-to-node conversion sharing one strictness setting."""

    def __init__(self, strict_mode: bool):
        self.strict_mode = strict_mode
        self._dispatch: dict[str, Callable[[dict[str, Any]], Node]] = {
            "Text": self._text,
            "Image": self._image,
            "URL": self._url,
            "Button": self._button,
            "Code": self._code,
            "List": self._list,
            "ItemsList": self._items_list,
            "Grid": self._grid,
            "Infobox": self._infobox,
            "Header": self._header,
            "Import": self._import,
            "Survey": self._survey,
            "YouTube": self._youtube,
        }

    def convert(self, data: Any) -> Node | None:
        if not isinstance(data, dict):
            return self._reject(f"Expected a node object, got {type(data).__name__}")

        node_type = data.get("node_type")
        if not node_type or not isinstance(node_type, str):
            return self._reject("Dictionary must contain 'node_type' field")

        deserializer = self._dispatch.get(node_type)
        if not deserializer:
            return self._reject(f"Unknown node type: {node_type}")

        try:
            return deserializer(data)
        except (ValueError, TypeError, AttributeError) as e:
            return self._reject(f"Malformed {node_type} node: {e}")

    def convert_all(self, items: list[Any] | None) -> list[Node]:
        nodes = []
        for item in self._sequence(items, "node list"):
            node = self.convert(item)
            if node is not None:
                nodes.append(node)
        return nodes

    def _sequence(self, value: Any, what: str) -> list[Any]:
        if value is None:
            return []
        if not isinstance(value, list):
            self._reject(f"Expected a {what}, got {type(value).__name__}")
            return []
        return value

    def _objects(self, value: Any, what: str) -> list[dict[str, Any]]:
        objects = []
        for item in self._sequence(value, f"list of {what}s"):
            if isinstance(item, dict):
                objects.append(item)
            else:
                self._reject(f"Expected a {what} object, got {type(item).__name__}")
        return objects

    def _reject(self, message: str) -> None:
        if self.strict_mode:
            raise ValueError(message)
        logger.warning("%s, skipping", message)
        return None

    def _text(self, data: dict[str, Any]) -> Node:
        return TextNode(
            value=_require(data, "value"),
            bold=bool(data.get("bold", False)),
            italic=bool(data.get("italic", False)),
            code=bool(data.get("code", False)),
            env=_env(data),
        )

    def _image(self, data: dict[str, Any]) -> Node:
        return ImageNode(src=_require(data, "src"), max_width=float(data.get("max_width", 0.0)), env=_env(data))

    def _url(self, data: dict[str, Any]) -> Node:
        return URLNode(
            content=self.convert_all(data.get("content")),
            url=data.get("url", ""),
            name=data.get("name", ""),
            target=data.get("target", ""),
            env=_env(data),
        )

    def _button(self, data: dict[str, Any]) -> Node:
        return ButtonNode(
            content=self.convert_all(data.get("content")),
            colored=bool(data.get("colored", False)),
            raised=bool(data.get("raised", False)),
            download=bool(data.get("download", False)),
            env=_env(data),
        )

    def _code(self, data: dict[str, Any]) -> Node:
        return CodeNode(
            value=_require(data, "value"),
            lang=data.get("lang", ""),
            term=bool(data.get("term", False)),
            env=_env(data),
        )

    def _list(self, data: dict[str, Any]) -> Node:
        return ListNode(nodes=self.convert_all(data.get("nodes")), block=data.get("block"), env=_env(data))

    def _items_list(self, data: dict[str, Any]) -> Node:
        return ItemsListNode(
            items=[self.convert_all(item) for item in self._sequence(data.get("items"), "list of items")],
            kind=data.get("kind", "plain"),
            start=int(data.get("start", 0)),
            list_type=data.get("list_type", ""),
            env=_env(data),
        )

    def _grid(self, data: dict[str, Any]) -> Node:
        rows = [
            [
                GridCell(
                    content=self.convert_all(cell.get("content")),
                    colspan=int(cell.get("colspan", 1)),
                    rowspan=int(cell.get("rowspan", 1)),
                )
                for cell in self._objects(row, "grid cell")
            ]
            for row in self._sequence(data.get("rows"), "list of rows")
        ]
        return GridNode(rows=rows, env=_env(data))

    def _infobox(self, data: dict[str, Any]) -> Node:
        return InfoboxNode(content=self.convert_all(data.get("content")), kind=data.get("kind", ""), env=_env(data))

    def _header(self, data: dict[str, Any]) -> Node:
        return HeaderNode(
            content=self.convert_all(data.get("content")),
            level=int(data.get("level", 0)),
            kind=data.get("kind", "plain"),
            env=_env(data),
        )

    def _import(self, data: dict[str, Any]) -> Node:
        content = ListNode(nodes=self.convert_all(data.get("content")), block=data.get("block"))
        return ImportNode(content=content, url=data.get("url", ""), env=_env(data))

    def _survey(self, data: dict[str, Any]) -> Node:
        groups = [
            SurveyGroup(name=g.get("name", ""), options=list(g.get("options") or []))
            for g in self._objects(data.get("groups"), "survey group")
        ]
        return SurveyNode(survey_id=_require(data, "survey_id"), groups=groups, env=_env(data))

    def _youtube(self, data: dict[str, Any]) -> Node:
        return YouTubeNode(video_id=_require(data, "video_id"), env=_env(data))


def dict_to_node(data: dict[str, Any], strict_mode: bool = True) -> Node | None:
    """Convert a dictionary representation back to a node.

    Parameters
    ----------
    data : dict
        Dictionary representation of a node
    strict_mode : bool, default True
        If True, raise ValueError on unknown or malformed nodes.
        If False, log a warning and drop them (returns None at the top level).

    Returns
    -------
    Node or None
        Reconstructed node

    Raises
    ------
    ValueError
        If the dictionary is malformed and strict_mode is True

    """
    return _Deserializer(strict_mode).convert(data)


def dicts_to_nodes(data: Any, strict_mode: bool = True) -> list[Node]:
    """Convert a decoded document (envelope dict or bare list) to nodes.

    Parameters
    ----------
    data : dict or list
        Decoded JSON/YAML document
    strict_mode : bool, default True
        See :func:`dict_to_node`

    Returns
    -------
    list of Node
        Top-level node sequence

    Raises
    ------
    ValueError
        If the document shape or schema version is unsupported

    """
    if isinstance(data, dict):
        schema_version = data.get("schema_version", SCHEMA_VERSION)
        if not isinstance(schema_version, int):
            raise ValueError(f"Schema version must be an integer, got {type(schema_version).__name__}")
        if schema_version != SCHEMA_VERSION:
            raise ValueError(
                f"Unsupported schema version: {schema_version}. "
                f"This version of labrender supports schema version {SCHEMA_VERSION} only."
            )
        data = data.get("nodes")
    if not isinstance(data, list):
        raise ValueError("Document must be a list of nodes or an object with a 'nodes' list")
    return _Deserializer(strict_mode).convert_all(data)


def nodes_to_json(nodes: list[Node], indent: int | None = None) -> str:
    """Serialize a node sequence to a versioned JSON document.

    Parameters
    ----------
    nodes : list of Node
        Nodes to serialize
    indent : int or None, default = None
        Number of spaces for indentation (None for compact format)

    Returns
    -------
    str
        JSON string

    """
    document = {"schema_version": SCHEMA_VERSION, "nodes": [node_to_dict(n) for n in nodes]}
    return json.dumps(document, indent=indent, ensure_ascii=False)


def json_to_nodes(json_str: str, strict_mode: bool = True) -> list[Node]:
    """Deserialize a JSON document to a node sequence.

    Raises
    ------
    ValueError
        If the document is malformed (json.JSONDecodeError is a ValueError)

    """
    return dicts_to_nodes(json.loads(json_str), strict_mode=strict_mode)


__all__ = [
    "dict_to_node",
    "dicts_to_nodes",
    "json_to_nodes",
    "node_to_dict",
    "nodes_to_json",
]
