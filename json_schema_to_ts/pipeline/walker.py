"""
In-place pre-order traversal of a JSON Schema tree.

The walker is shared by the normalizer and the reference encoder. It calls
the visitor on a node before descending into its children, so a visitor may
rewrite ``properties`` or ``items`` and the walk follows the rewritten shape.
"""

from __future__ import annotations

from typing import Any

from .schema_types import SchemaNode, SchemaPath, Visitor

# Combinators hold alternative shapes for the same position in the document
COMBINATOR_KEYS = ("oneOf", "anyOf", "allOf")


def fold_properties(properties: list[Any]) -> dict[str, Any]:
    """Turn a list of named property schemas into a ``properties`` mapping.

    Mock.js ``toJSONSchema`` emits ``properties`` as a list where each entry
    carries its own ``name``; JSON Schema expects a mapping.
    """
    folded: dict[str, Any] = {}
    for prop in properties:
        if isinstance(prop, dict):
            folded[prop.get("name")] = prop
    return folded


def traverse_json_schema(
    node: SchemaNode,
    visitor: Visitor,
    current_path: SchemaPath | None = None,
) -> SchemaNode:
    """
    Walk a schema tree in place, calling ``visitor(node, path)`` on every node.

    Args:
        node: The schema node to walk. Anything that is not a dict is returned
            unchanged.
        visitor: Callable mutating the node it receives. Its return value is
            ignored.
        current_path: Path of ``node`` from the root. Property names and
            array indices are appended on descent into ``properties`` and
            ``items``; ``oneOf``/``anyOf``/``allOf`` members share the path
            of their parent.

    Returns:
        The same node object
    """
    if not isinstance(node, dict):
        return node

    if current_path is None:
        current_path = []

    if isinstance(node.get("properties"), list):
        node["properties"] = fold_properties(node["properties"])

    visitor(node, current_path)

    properties = node.get("properties")
    if isinstance(properties, dict):
        for key, prop in list(properties.items()):
            traverse_json_schema(prop, visitor, [*current_path, key])

    items = node.get("items")
    if items is not None:
        if not isinstance(items, list):
            items = [items]
        for index, item in enumerate(items):
            traverse_json_schema(item, visitor, [*current_path, index])

    for key in COMBINATOR_KEYS:
        members = node.get(key)
        if isinstance(members, list):
            for member in members:
                traverse_json_schema(member, visitor, current_path)

    return node
