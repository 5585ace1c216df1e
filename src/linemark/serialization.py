"""Document serialization: JSON round-trip for linemark nodes.

Converts block nodes and text fragments to/from JSON-compatible dicts.
Useful for caching parsed documents to disk and for debugging.

All output is deterministic (sorted keys) for cache-key stability.

Example:
    from linemark import parse
    from linemark.serialization import to_json, from_json

    doc = parse("# Hello **World**")
    assert from_json(to_json(doc)) == doc

Thread Safety:
    All functions are pure, safe to call from any thread.

"""

import json
from dataclasses import fields
from functools import reduce
from operator import or_
from typing import Any

from linemark.location import SourceLocation
from linemark.nodes import (
    CodeBlock,
    Document,
    Heading,
    Image,
    LineBreak,
    Link,
    ListItem,
    ListKind,
    Node,
    Paragraph,
    Rule,
    Style,
    StyledRun,
    TextFragment,
)

# Registry of type names to classes for deserialization
_NODE_TYPES: dict[str, type] = {
    "Document": Document,
    "Heading": Heading,
    "Paragraph": Paragraph,
    "ListItem": ListItem,
    "CodeBlock": CodeBlock,
    "LineBreak": LineBreak,
    "Rule": Rule,
    "StyledRun": StyledRun,
    "Link": Link,
    "Image": Image,
}

_FRAGMENT_TYPES = (StyledRun, Link, Image)


def to_dict(node: Node | TextFragment) -> dict[str, Any]:
    """Convert a node or text fragment to a JSON-compatible dict.

    Includes a ``_type`` discriminator field for deserialization.

    Args:
        node: Any linemark block node, Document, or text fragment.

    Returns:
        Dict with ``_type`` and all fields.

    """
    result: dict[str, Any] = {"_type": type(node).__name__}

    for f in fields(node):
        result[f.name] = _serialize_value(getattr(node, f.name))

    return result


def _serialize_value(value: Any) -> Any:
    """Serialize a single field value."""
    if isinstance(value, (Node, *_FRAGMENT_TYPES)):
        return to_dict(value)
    if isinstance(value, SourceLocation):
        return {
            "_type": "SourceLocation",
            "lineno": value.lineno,
            "col_offset": value.col_offset,
            "offset": value.offset,
            "end_offset": value.end_offset,
            "end_lineno": value.end_lineno,
            "end_col_offset": value.end_col_offset,
            "source_file": value.source_file,
        }
    if isinstance(value, Style):
        return sorted(member.name for member in value)
    if isinstance(value, ListKind):
        return value.name
    if isinstance(value, tuple):
        return [_serialize_value(item) for item in value]
    # Primitives: str, int, bool, None
    return value


def from_dict(data: dict[str, Any]) -> Node | TextFragment:
    """Reconstruct a typed node or fragment from a dict.

    Args:
        data: Dict with ``_type`` and fields (as produced by to_dict).

    Returns:
        Typed node (frozen dataclass).

    Raises:
        ValueError: If ``_type`` is missing or unknown.

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
        if f.name not in data:
            continue
        kwargs[f.name] = _deserialize_value(data[f.name], f.name)

    return node_cls(**kwargs)


def _deserialize_value(value: Any, field_name: str = "") -> Any:
    """Deserialize a single field value."""
    if field_name == "style":
        return reduce(or_, (Style[name] for name in value), Style.NORMAL)
    if field_name == "kind":
        return ListKind[value]
    if isinstance(value, dict):
        type_name = value.get("_type")
        if type_name == "SourceLocation":
            return SourceLocation(
                lineno=value["lineno"],
                col_offset=value["col_offset"],
                offset=value.get("offset", 0),
                end_offset=value.get("end_offset", 0),
                end_lineno=value.get("end_lineno"),
                end_col_offset=value.get("end_col_offset"),
                source_file=value.get("source_file"),
            )
        if type_name is not None:
            return from_dict(value)
        return value
    if isinstance(value, list):
        return tuple(_deserialize_value(item) for item in value)
    return value


def to_json(doc: Document, *, indent: int | None = None) -> str:
    """Serialize a Document to a JSON string.

    Args:
        doc: Document to serialize.
        indent: JSON indentation level (None for compact).

    Returns:
        JSON string.

    """
    return json.dumps(to_dict(doc), sort_keys=True, indent=indent)


def from_json(data: str) -> Document:
    """Deserialize a Document from a JSON string.

    Raises:
        ValueError: If the JSON doesn't represent a Document.

    """
    node = from_dict(json.loads(data))
    if not isinstance(node, Document):
        msg = f"Expected Document, got {type(node).__name__}"
        raise ValueError(msg)
    return node
