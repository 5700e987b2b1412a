"""
Pipeline - JSON Schema to TypeScript declaration generator.

1. Walker: in-place pre-order traversal shared by the passes below
2. Normalizer: canonical type names, clean property names, homogeneous arrays
3. Reference encoder: resolves ``&path`` aliases, strips misleading keys
4. Compiler: renders the encoded schema as TypeScript source
5. Generator: front-end running 3 and 4 and naming the result
"""

from __future__ import annotations

from .compiler import SchemaCompiler, TypeScriptCompiler
from .config import CompilerOptions, OutputConfig, OutputMode, TypeGenConfig
from .errors import AcquisitionError, OutputValidationError, TypeGenError
from .generator import JSTT_OPTIONS, PLACEHOLDER_TYPE_NAME, json_schema_to_type
from .normalizer import (
    BUILTIN_TYPE_MAPPING,
    TypeNormalizer,
    json_schema_string_to_json_schema,
    process_json_schema,
)
from .reference_encoder import ReferenceEncoder, json_schema_to_jstt_json_schema, resolve_reference_path
from .type_expression import TypeExpression
from .walker import traverse_json_schema
from .writer import AtomicWriter

__all__ = [
    "AcquisitionError",
    "AtomicWriter",
    "BUILTIN_TYPE_MAPPING",
    "CompilerOptions",
    "JSTT_OPTIONS",
    "OutputConfig",
    "OutputMode",
    "OutputValidationError",
    "PLACEHOLDER_TYPE_NAME",
    "ReferenceEncoder",
    "SchemaCompiler",
    "TypeExpression",
    "TypeGenConfig",
    "TypeGenError",
    "TypeNormalizer",
    "TypeScriptCompiler",
    "json_schema_string_to_json_schema",
    "json_schema_to_jstt_json_schema",
    "json_schema_to_type",
    "process_json_schema",
    "resolve_reference_path",
    "traverse_json_schema",
]
