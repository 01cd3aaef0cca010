"""AST serialization: JSON round-trip for chatmark nodes.

Converts typed nodes to/from JSON-compatible dicts. Useful for:
- Handing a parsed message to a UI adapter in another process
- Storing parsed chat history next to the raw text
- Debugging and inspection

All output is deterministic (sorted keys) for cache-key stability.

Example:
    from chatmark import parse
    from chatmark.serialization import to_json, from_json

    doc = parse("# Hello **World**")
    json_str = to_json(doc)
    restored = from_json(json_str)
    assert doc == restored

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

import json
from dataclasses import fields
from typing import Any

from chatmark.location import SourceLocation
from chatmark.nodes import (
    Blockquote,
    Bold,
    Code,
    CodeBlock,
    Document,
    Heading,
    HorizontalRule,
    Italic,
    Link,
    List,
    ListItem,
    Node,
    Paragraph,
    Spacer,
    Table,
    TableCell,
    TableRow,
    Text,
)

# Registry of node type names to classes for deserialization
_NODE_TYPES: dict[str, type[Node]] = {
    cls.__name__: cls
    for cls in (
        Document,
        Heading,
        Paragraph,
        CodeBlock,
        List,
        ListItem,
        Table,
        TableRow,
        TableCell,
        Blockquote,
        HorizontalRule,
        Spacer,
        Text,
        Bold,
        Italic,
        Code,
        Link,
    )
}


def to_dict(node: Node) -> dict[str, Any]:
    """Convert a node to a JSON-compatible dict.

    Includes a ``_type`` discriminator field for deserialization.
    Recursively serializes child nodes and SourceLocation objects.

    Args:
        node: Any chatmark node.

    Returns:
        Dict with ``_type`` and all node fields.

    """
    result: dict[str, Any] = {"_type": type(node).__name__}

    for f in fields(node):
        result[f.name] = _serialize_value(getattr(node, f.name))

    return result


def _serialize_value(value: Any) -> Any:
    """Serialize a single field value."""
    if isinstance(value, Node):
        return to_dict(value)
    if isinstance(value, SourceLocation):
        return {
            "_type": "SourceLocation",
            "lineno": value.lineno,
            "end_lineno": value.end_lineno,
        }
    if isinstance(value, tuple):
        return [_serialize_value(item) for item in value]
    # Primitives: str, int, bool, None
    return value


def from_dict(data: dict[str, Any]) -> Node:
    """Reconstruct a typed node from a dict.

    Uses the ``_type`` discriminator to determine the node class.
    Recursively deserializes child nodes and SourceLocation objects.

    Args:
        data: Dict with ``_type`` and node fields (as produced by to_dict).

    Returns:
        Typed node (frozen dataclass).

    Raises:
        ValueError: If ``_type`` is missing or unknown, or a required
            field is missing.

    """
    type_name = data.get("_type")
    if type_name is None:
        msg = "Missing '_type' field in serialized node"
        raise ValueError(msg)

    node_cls = _NODE_TYPES.get(type_name)
    if node_cls is None:
        msg = f"Unknown node type: {type_name!r}"
        raise ValueError(msg)

    kwargs: dict[str, Any] = {}
    for f in fields(node_cls):
        if f.name in data:
            kwargs[f.name] = _deserialize_value(data[f.name])

    try:
        return node_cls(**kwargs)
    except TypeError as e:
        msg = f"Invalid fields for {type_name}: {e}"
        raise ValueError(msg) from e


def _deserialize_value(value: Any) -> Any:
    """Deserialize a single field value."""
    if isinstance(value, dict):
        type_name = value.get("_type")
        if type_name == "SourceLocation":
            return SourceLocation(
                lineno=value["lineno"],
                end_lineno=value.get("end_lineno"),
            )
        if type_name is not None:
            return from_dict(value)
        return value
    if isinstance(value, list):
        return tuple(_deserialize_value(item) for item in value)
    return value


def to_json(doc: Document, *, indent: int | None = None) -> str:
    """Serialize a Document to a JSON string.

    Output is deterministic (sorted keys) for cache-key stability.

    Args:
        doc: Document to serialize.
        indent: JSON indentation level (None for compact).

    Returns:
        JSON string.

    """
    return json.dumps(to_dict(doc), sort_keys=True, indent=indent, ensure_ascii=False)


def from_json(data: str) -> Document:
    """Deserialize a Document from a JSON string.

    Args:
        data: JSON string (as produced by to_json).

    Returns:
        Document node.

    Raises:
        ValueError: If the JSON is malformed or doesn't represent a Document.

    """
    raw = json.loads(data)
    if not isinstance(raw, dict):
        msg = f"Expected a JSON object, got {type(raw).__name__}"
        raise ValueError(msg)
    node = from_dict(raw)
    if not isinstance(node, Document):
        msg = f"Expected Document, got {type(node).__name__}"
        raise ValueError(msg)
    return node
