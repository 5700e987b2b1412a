"""JSON Schema to TypeScript

Generates TypeScript declarations from the JSON Schemas YApi stores for
API requests and responses: type-name normalization, ``&path`` type
references and a jinja2-based TypeScript compiler.
"""

__version__ = "0.3.0"

from .acquisition import InterfaceDefinition, generate_interface_declarations, parse_interface_response
from .pipeline import (
    AcquisitionError,
    CompilerOptions,
    OutputConfig,
    OutputMode,
    TypeGenConfig,
    TypeGenError,
    TypeScriptCompiler,
    json_schema_string_to_json_schema,
    json_schema_to_jstt_json_schema,
    json_schema_to_type,
    process_json_schema,
    traverse_json_schema,
)

__all__ = [
    "AcquisitionError",
    "CompilerOptions",
    "InterfaceDefinition",
    "OutputConfig",
    "OutputMode",
    "TypeGenConfig",
    "TypeGenError",
    "TypeScriptCompiler",
    "generate_interface_declarations",
    "json_schema_string_to_json_schema",
    "json_schema_to_jstt_json_schema",
    "json_schema_to_type",
    "parse_interface_response",
    "process_json_schema",
    "traverse_json_schema",
]
