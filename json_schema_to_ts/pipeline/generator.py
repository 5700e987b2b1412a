"""
Type synthesis front-end.

Turns a normalized schema into a single named TypeScript declaration:

1. Empty schema: an empty interface
2. ``__is_any__`` schema: an alias of ``any``
3. Otherwise: reference encoding on a private copy, compilation under a
   placeholder root name, then substitution of the real name
"""

from __future__ import annotations

import inspect
import logging

from .compiler import SchemaCompiler, TypeScriptCompiler
from .config import CompilerOptions
from .reference_encoder import json_schema_to_jstt_json_schema
from .schema_types import SchemaNode

logger = logging.getLogger(__name__)

# Compilers rewrite the root name (casing, invalid characters); an all-caps
# name made of letters only survives unchanged and is swapped back afterwards.
PLACEHOLDER_TYPE_NAME = "THISISAFAKETYPENAME"

JSTT_OPTIONS = CompilerOptions(
    banner_comment="",
    declare_externally_referenced=True,
    enable_const_enums=True,
    strict_index_signatures=False,
    format=False,
)


async def json_schema_to_type(
    schema: SchemaNode | None,
    type_name: str,
    compiler: SchemaCompiler | None = None,
) -> str:
    """
    Generate a TypeScript declaration for a normalized schema.

    Args:
        schema: Output of the normalizer. When it carries ``__is_any__`` the
            marker is removed from it.
        type_name: Name of the declared type
        compiler: Schema compiler to use, a :class:`TypeScriptCompiler` by
            default. Its ``compile`` may return the source or an awaitable.

    Returns:
        The declaration, without surrounding whitespace
    """
    if not schema:
        return f"export interface {type_name} {{}}"

    if schema.get("__is_any__"):
        del schema["__is_any__"]
        return f"export type {type_name} = any"

    if compiler is None:
        compiler = TypeScriptCompiler(reserved_names=[type_name])

    encoded = json_schema_to_jstt_json_schema(schema, type_name, copy=True) or {}
    code = compiler.compile(encoded, PLACEHOLDER_TYPE_NAME, JSTT_OPTIONS)
    if inspect.isawaitable(code):
        code = await code

    logger.debug("Substituting %s with %s in compiled output", PLACEHOLDER_TYPE_NAME, type_name)
    return code.replace(PLACEHOLDER_TYPE_NAME, type_name).strip()
