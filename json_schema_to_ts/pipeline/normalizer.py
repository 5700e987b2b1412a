"""
Normalization of JSON Schema documents exported by YApi.

YApi schemas carry Java-flavoured type names (``Long``, ``BigDecimal``),
swagger ``$ref`` leftovers, tuple-style ``items`` and property names with
stray whitespace. The normalizer rewrites each node in place so the result
only uses canonical JSON Schema type names and clean property names.
Running it twice gives the same tree as running it once.
"""

from __future__ import annotations

import copy as copy_module
import json
from collections.abc import Mapping
from typing import Any

from .schema_types import SchemaNode, SchemaPath, TypeMapping
from .walker import traverse_json_schema

# Keys are lower-case
BUILTIN_TYPE_MAPPING: TypeMapping = {
    "byte": "integer",
    "short": "integer",
    "int": "integer",
    "long": "integer",
    "float": "number",
    "double": "number",
    "bigdecimal": "number",
    "char": "string",
    "void": "null",
}


def build_type_mapping(custom_type_mapping: Mapping[str, str] | None = None) -> TypeMapping:
    """Merge the built-in table with caller entries, whose keys are case-folded."""
    mapping = dict(BUILTIN_TYPE_MAPPING)
    if custom_type_mapping:
        mapping.update({key.lower(): value for key, value in custom_type_mapping.items()})
    return mapping


def canonicalize_type_name(type_name: Any, type_mapping: TypeMapping) -> Any:
    """Lower-case a type name and map it; non-string values pass through."""
    if not isinstance(type_name, str):
        return type_name
    type_name = type_name.lower()
    return type_mapping.get(type_name, type_name)


class TypeNormalizer:
    """Visitor canonicalizing a single schema node.

    Meant to be run through :func:`traverse_json_schema`, which takes care of
    reaching every node.
    """

    def __init__(self, custom_type_mapping: Mapping[str, str] | None = None):
        self.type_mapping = build_type_mapping(custom_type_mapping)

    def __call__(self, node: SchemaNode, path: SchemaPath) -> SchemaNode:
        node.pop("$ref", None)
        node.pop("$$ref", None)

        if node.get("type"):
            self._normalize_type(node)

        # Tuple typing is not supported: arrays are homogeneous and use the first item shape
        items = node.get("items")
        if node.get("type") == "array" and isinstance(items, list) and items:
            node["items"] = items[0]

        properties = node.get("properties")
        if isinstance(properties, dict):
            node["properties"] = {self._strip(key): value for key, value in properties.items()}
            if isinstance(node.get("required"), list):
                node["required"] = [self._strip(name) for name in node["required"]]

        return node

    def _normalize_type(self, node: SchemaNode) -> None:
        type_value = node["type"]
        if isinstance(type_value, list):
            node["type"] = [canonicalize_type_name(t, self.type_mapping) for t in type_value]
        else:
            node["type"] = canonicalize_type_name(type_value, self.type_mapping)

    @staticmethod
    def _strip(name: Any) -> Any:
        return name.strip() if isinstance(name, str) else name


def process_json_schema(
    schema: SchemaNode,
    custom_type_mapping: Mapping[str, str] | None = None,
    *,
    copy: bool = False,
) -> SchemaNode:
    """
    Normalize a schema tree.

    Args:
        schema: The parsed schema document
        custom_type_mapping: Extra source type names (any case) mapped to
            canonical JSON Schema type names. They override the built-ins.
        copy: Work on a deep copy and leave ``schema`` untouched. By default
            the tree is rewritten in place.

    Returns:
        The normalized tree (``schema`` itself unless ``copy`` is set)
    """
    if copy:
        schema = copy_module.deepcopy(schema)
    return traverse_json_schema(schema, TypeNormalizer(custom_type_mapping))


def json_schema_string_to_json_schema(
    text: str,
    custom_type_mapping: Mapping[str, str] | None = None,
) -> SchemaNode:
    """
    Parse schema text and normalize it.

    Raises:
        json.JSONDecodeError: If the text is not valid JSON
    """
    return process_json_schema(json.loads(text), custom_type_mapping)
