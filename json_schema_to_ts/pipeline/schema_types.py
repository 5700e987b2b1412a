"""
Type definitions for raw JSON Schema nodes as exported by YApi.

Schema nodes stay plain dicts so they can be fed to ``json`` and to the
compiler unchanged; the TypedDict only documents the keys the pipeline reads
or writes.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypedDict, Union

SchemaNode = TypedDict(
    "SchemaNode",
    {
        "type": Union[str, list[str]],
        "properties": dict[str, "SchemaNode"],
        "items": Union["SchemaNode", list["SchemaNode"]],
        "required": list[str],
        "oneOf": list["SchemaNode"],
        "anyOf": list["SchemaNode"],
        "allOf": list["SchemaNode"],
        "title": str,
        "description": str,
        "default": Any,
        "minItems": int,
        "maxItems": int,
        "additionalProperties": Union[bool, "SchemaNode"],
        "enum": list[Any],
        "const": Any,
        "id": str,
        # Name of a property when ``properties`` comes as a list (Mock.js output)
        "name": str,
        # Leftovers from swagger imports, always discarded
        "$ref": str,
        "$$ref": str,
        # Non-standard marker for the untyped schema
        "__is_any__": bool,
        # Consumed by the compiler: literal TypeScript type to emit verbatim
        "tsType": str,
        "tsEnumNames": list[str],
    },
    total=False,
)

# A path segment is a property name or an array index
PathSegment = Union[str, int]

SchemaPath = list[PathSegment]

Visitor = Callable[[SchemaNode, SchemaPath], Any]

# Lower-cased source type name -> canonical JSON Schema type name
TypeMapping = dict[str, str]
