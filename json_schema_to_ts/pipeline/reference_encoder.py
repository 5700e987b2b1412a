"""
Preparation of a normalized schema for the TypeScript compiler.

Besides dropping the keys that would mislead the compiler, the encoder
resolves type references written by schema authors: a ``title`` (or, for
YApi versions without a title field, a ``description``) of the form
``&relative/path`` makes the node an alias of the type found at that path,
relative to the node itself, inside the root type.
"""

from __future__ import annotations

import copy as copy_module
import logging
import re

from ..utils import to_unix_path
from .schema_types import SchemaNode, SchemaPath
from .type_expression import TypeExpression
from .walker import traverse_json_schema

logger = logging.getLogger(__name__)

REFERENCE_SIGIL = "&"

_SCHEME_PREFIX = re.compile(r"^[a-z]+:", re.IGNORECASE)

# Keys the compiler would use for naming, narrowing or unsupported constraints
STRIPPED_KEYS = ("title", "id", "minItems", "maxItems", "default")


def resolve_reference_path(current_path: SchemaPath, relative_path: str) -> list[str]:
    """
    Resolve a reference path against the path of the node declaring it.

    Args:
        current_path: Path of the node carrying the reference. Its segments
            are property names or indices and are kept as they are, even
            when a property is named ``.`` or ``..``.
        relative_path: The reference without its sigil, ``/``-separated.
            ``.`` and ``..`` segments are honoured here; ``..`` never climbs
            above the root.

    Returns:
        The absolute path as a list of segments
    """
    segments = [str(segment) for segment in current_path]
    relative_path = _SCHEME_PREFIX.sub("", to_unix_path(relative_path))
    for part in relative_path.split("/"):
        if part in ("", "."):
            continue
        if part == "..":
            if segments:
                segments.pop()
        else:
            segments.append(part)
    return segments


class ReferenceEncoder:
    """Visitor rewriting a schema node for the compiler.

    Args:
        type_name: Name of the root type references are resolved against
    """

    def __init__(self, type_name: str):
        self.type_name = type_name

    def __call__(self, node: SchemaNode, path: SchemaPath) -> SchemaNode:
        ref_value = node.get("title")
        if ref_value is None:
            ref_value = node.get("description")

        if isinstance(ref_value, str) and ref_value.startswith(REFERENCE_SIGIL):
            segments = resolve_reference_path(path, ref_value[len(REFERENCE_SIGIL) :])
            node["tsType"] = TypeExpression.from_path(self.type_name, segments).render()
            logger.debug("Resolved reference %r at /%s to %s", ref_value, "/".join(map(str, path)), node["tsType"])

        for key in STRIPPED_KEYS:
            node.pop(key, None)

        # Closed objects: keys outside the schema are not part of the contract
        if node.get("type") == "object":
            node["additionalProperties"] = False

        return node


def json_schema_to_jstt_json_schema(
    schema: SchemaNode,
    type_name: str,
    *,
    copy: bool = True,
) -> SchemaNode:
    """
    Encode a normalized schema for the compiler.

    Args:
        schema: A schema already run through the normalizer
        type_name: Root type name used in reference expressions
        copy: Encode a deep copy (the default). Pass ``False`` only for a tree
            nobody else holds, since encoding is destructive.

    Returns:
        The encoded tree
    """
    if copy:
        schema = copy_module.deepcopy(schema)
    if isinstance(schema, dict):
        # Keeps the compiler from turning it into a doc comment on the whole type
        schema.pop("description", None)
    return traverse_json_schema(schema, ReferenceEncoder(type_name))
