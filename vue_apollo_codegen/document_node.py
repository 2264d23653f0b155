"""Serialize graphql-core ASTs into the graphql-js DocumentNode JSON shape."""

import json
from enum import Enum

from graphql import Node

# source offsets are not part of the emitted documents
_SKIPPED_KEYS = {"loc"}

# legacy fragment variables have no graphql-js counterpart
_SKIPPED_KEYS_BY_KIND = {"fragment_definition": {"variable_definitions"}}


def _camel(key: str) -> str:
    head, *rest = key.split("_")
    return head + "".join(part.capitalize() for part in rest)


def _kind(node: Node) -> str:
    return "".join(part.capitalize() for part in node.kind.split("_"))


def node_to_dict(node: Node) -> dict:
    result = {"kind": _kind(node)}
    skipped = _SKIPPED_KEYS | _SKIPPED_KEYS_BY_KIND.get(node.kind, set())
    for key in node.keys:
        if key in skipped:
            continue
        value = _convert(getattr(node, key, None))
        if value is not None:
            result[_camel(key)] = value
    return result


def _convert(value):
    if isinstance(value, Node):
        return node_to_dict(value)
    if isinstance(value, (list, tuple)):
        return [_convert(item) for item in value]
    if isinstance(value, Enum):
        return value.value
    return value


def document_node(definitions) -> dict:
    """A `{"kind": "Document", ...}` mapping holding the given definitions."""
    return {"kind": "Document", "definitions": [node_to_dict(d) for d in definitions]}


def dump_document_node(definitions) -> str:
    return json.dumps(document_node(definitions), separators=(",", ":"))
