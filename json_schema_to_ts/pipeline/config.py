"""
Configuration for the JSON Schema to TypeScript pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class OutputMode(str, Enum):
    """Output mode for file generation.

    Controls behavior when the output file already exists.
    """

    ERROR_IF_EXISTS = "error"  # Default: raise error if file exists
    FORCE = "force"  # Overwrite


@dataclass
class OutputConfig:
    """Configuration for output file handling.

    Attributes:
        mode: How to handle existing output files
        validate_before_write: Whether to sanity-check the declarations before writing
    """

    mode: OutputMode = OutputMode.ERROR_IF_EXISTS
    validate_before_write: bool = True


@dataclass
class CompilerOptions:
    """Options understood by schema compilers."""

    # Comment placed at the top of the generated source (empty = none)
    banner_comment: str = (
        "/* eslint-disable */\n"
        "/**\n"
        " * This file was automatically generated by json_schema_to_ts.\n"
        " * DO NOT MODIFY IT BY HAND.\n"
        " */"
    )

    # Declare types referenced by the root (named enums) in the same output
    declare_externally_referenced: bool = True

    # Emit named enums as `const enum`
    enable_const_enums: bool = True

    # Add `| undefined` to index signature value types
    strict_index_signatures: bool = False

    # Run the output through a formatter
    format: bool = True

    # Indentation unit for members
    indent: str = "  "


@dataclass
class TypeGenConfig:
    """Configuration options for type generation."""

    # Source type name (any case) -> canonical JSON Schema type name
    custom_type_mapping: dict[str, str] = field(default_factory=dict)

    # Add a comment with the generating command line at the top of the output
    add_generation_comment: bool = False

    output: OutputConfig = field(default_factory=OutputConfig)

    @staticmethod
    def from_dict(d: dict) -> TypeGenConfig:
        """Create a config from a dictionary."""
        config = TypeGenConfig()
        for k, v in d.items():
            if k == "output":
                output = OutputConfig()
                for ok, ov in v.items():
                    if hasattr(output, ok):
                        setattr(output, ok, OutputMode(ov) if ok == "mode" else ov)
                config.output = output
            elif hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "custom_type_mapping": self.custom_type_mapping,
            "add_generation_comment": self.add_generation_comment,
            "output": {
                "mode": self.output.mode.value,
                "validate_before_write": self.output.validate_before_write,
            },
        }
