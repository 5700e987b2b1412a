"""
TypeScript compiler.

Generates TypeScript declarations from schemas prepared by the reference
encoder, following json-schema-to-typescript conventions: ``tsType`` is
emitted verbatim and ``tsEnumNames`` turns an ``enum`` into a named enum.
"""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import jinja2

from ...utils import to_safe_identifier
from ..config import CompilerOptions
from ..formatters import Formatter, PrettierFormatter
from ..type_expression import quote_key
from .base import SchemaCompiler

logger = logging.getLogger(__name__)

_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")

_COMBINATOR_JOINS = (("oneOf", " | "), ("anyOf", " | "), ("allOf", " & "))


class TypeScriptCompiler(SchemaCompiler):
    """Schema compiler producing TypeScript interfaces and type aliases."""

    # Type mapping from schema types to TypeScript types
    TYPE_MAP = {
        "string": "string",
        "integer": "number",
        "number": "number",
        "boolean": "boolean",
        "null": "null",
        "any": "any",
    }

    # Template directory name
    TEMPLATE_LANG = "typescript"

    # File extension
    FILE_EXTENSION = "ts"

    def __init__(self, formatter: Formatter | None = None, reserved_names: Iterable[str] = ()):
        """
        Initialize the compiler.

        Args:
            formatter: Formatter used when ``options.format`` is set
            reserved_names: Names enum declarations must not take, such as
                the real root name when compiling under a placeholder
        """
        self.formatter = formatter or PrettierFormatter()
        self.reserved_names = set(reserved_names)
        self.options = CompilerOptions()
        self._declarations: list[str] = []
        self._declared_names: set[str] = set()
        self._setup_templates()

    def _setup_templates(self) -> None:
        """Set up Jinja2 templates."""
        template_dir = Path(__file__).parent.parent.parent / "templates" / self.TEMPLATE_LANG
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(template_dir)),
            lstrip_blocks=True,
            trim_blocks=True,
        )
        self.file_template = self.jinja_env.get_template(f"file.{self.FILE_EXTENSION}.jinja2")
        self.interface_template = self.jinja_env.get_template(f"interface.{self.FILE_EXTENSION}.jinja2")
        self.type_alias_template = self.jinja_env.get_template(f"type_alias.{self.FILE_EXTENSION}.jinja2")
        self.enum_template = self.jinja_env.get_template(f"enum.{self.FILE_EXTENSION}.jinja2")

    def compile(
        self,
        schema: dict[str, Any],
        name: str,
        options: CompilerOptions | None = None,
    ) -> str:
        """Generate TypeScript source declaring ``name`` from ``schema``."""
        self.options = options or CompilerOptions()
        # Reset declaration tracking
        self._declarations = []
        root_name = to_safe_identifier(name)
        self._declared_names = {root_name, *self.reserved_names}

        declarations = [self._render_root(schema, root_name)]
        if self.options.declare_externally_referenced:
            declarations.extend(self._declarations)

        code = self.file_template.render(
            banner_comment=self.options.banner_comment,
            declarations=declarations,
        )
        if self.options.format:
            code = self.formatter.format(code, self.options)
        return code

    def _render_root(self, schema: Any, name: str) -> str:
        comment = self._render_comment(schema.get("description"), "") if isinstance(schema, dict) else ""
        if self._is_interface(schema):
            return self.interface_template.render(
                name=name,
                body=self._render_object(schema, 0),
                comment=comment,
            )
        return self.type_alias_template.render(
            name=name,
            type=self._render_type(schema, 0, name),
            comment=comment,
        )

    def _is_interface(self, schema: Any) -> bool:
        """Whether the root can be declared as an interface rather than a type alias."""
        if not isinstance(schema, dict):
            return False
        if schema.get("__is_any__"):
            return False
        if any(key in schema for key in ("tsType", "enum", "const", "oneOf", "anyOf", "allOf")):
            return False
        if "type" in schema:
            return schema["type"] == "object"
        return "properties" in schema

    def _render_type(self, schema: Any, depth: int, hint: Any) -> str:
        """
        Translate a schema node into a TypeScript type expression.

        Args:
            schema: The schema node
            depth: Nesting depth of the enclosing object, for indentation
            hint: Name used for declarations derived from this node (the
                property key, or the root name)
        """
        if not isinstance(schema, dict):
            return "unknown"
        if "tsType" in schema:
            return schema["tsType"]
        if schema.get("__is_any__"):
            return "any"
        if "const" in schema:
            return self._literal(schema["const"])
        if "enum" in schema:
            return self._render_enum(schema, hint)

        parts = []
        if any(key in schema for key in ("type", "properties", "items")):
            parts.append(self._render_structural(schema, depth, hint))
        for key, separator in _COMBINATOR_JOINS:
            members = schema.get(key)
            if isinstance(members, list) and members:
                parts.append(self._join([self._render_type(m, depth, hint) for m in members], separator))

        if not parts:
            return "unknown"
        return self._join(parts, " & ")

    def _render_structural(self, schema: dict[str, Any], depth: int, hint: Any) -> str:
        type_value = schema.get("type")
        if type_value is None:
            type_names = ["object"] if "properties" in schema else ["array"]
        elif isinstance(type_value, list):
            type_names = type_value
        else:
            type_names = [type_value]
        return self._join([self._render_type_name(t, schema, depth, hint) for t in type_names], " | ")

    def _render_type_name(self, type_name: Any, schema: dict[str, Any], depth: int, hint: Any) -> str:
        if type_name == "object":
            return self._render_object(schema, depth)
        if type_name == "array":
            return self._render_array(schema, depth, hint)
        if isinstance(type_name, str) and type_name in self.TYPE_MAP:
            return self.TYPE_MAP[type_name]
        logger.warning("Unknown schema type %r, emitting unknown", type_name)
        return "unknown"

    def _render_array(self, schema: dict[str, Any], depth: int, hint: Any) -> str:
        items = schema.get("items")
        if isinstance(items, list):
            if not items:
                return "unknown[]"
            return "[" + ", ".join(self._render_type(item, depth, hint) for item in items) + "]"
        if not isinstance(items, dict):
            return "unknown[]"
        return self._parenthesize(self._render_type(items, depth, hint)) + "[]"

    def _render_object(self, schema: dict[str, Any], depth: int) -> str:
        indent = self.options.indent * (depth + 1)
        members = []

        properties = schema.get("properties")
        if not isinstance(properties, dict):
            properties = {}
        required = schema.get("required")
        required = {name for name in required if isinstance(name, str)} if isinstance(required, list) else set()

        for key, prop in properties.items():
            if isinstance(prop, dict):
                comment = self._render_comment(prop.get("description"), indent)
                if comment:
                    members.append(comment)
            optional = "" if key in required else "?"
            members.append(f"{indent}{self._render_key(key)}{optional}: {self._render_type(prop, depth + 1, key)};")

        additional = schema.get("additionalProperties", True)
        if additional is not False:
            value_type = self._render_type(additional, depth + 1, None) if isinstance(additional, dict) else "unknown"
            if self.options.strict_index_signatures:
                value_type += " | undefined"
            members.append(f"{indent}[k: string]: {value_type};")

        if not members:
            return "{}"
        return "{\n" + "\n".join(members) + "\n" + self.options.indent * depth + "}"

    def _render_enum(self, schema: dict[str, Any], hint: Any) -> str:
        values = schema["enum"] if isinstance(schema["enum"], list) else []
        names = schema.get("tsEnumNames")
        if values and isinstance(names, list) and len(names) == len(values):
            return self._declare_enum(hint, names, values)
        if not values:
            return "never"
        return self._join([self._literal(value) for value in values], " | ")

    def _declare_enum(self, hint: Any, names: list[Any], values: list[Any]) -> str:
        """Declare a named enum and return the name to reference it by."""
        base_name = to_safe_identifier(str(hint) if hint is not None else "Enum")
        enum_name = base_name
        counter = 1
        while enum_name in self._declared_names:
            counter += 1
            enum_name = f"{base_name}{counter}"
        self._declared_names.add(enum_name)

        members = [f"{self._render_key(str(member))} = {self._literal(value)}" for member, value in zip(names, values)]
        self._declarations.append(
            self.enum_template.render(
                name=enum_name,
                members=members,
                indent=self.options.indent,
                is_const=self.options.enable_const_enums,
            )
        )
        return enum_name

    def _render_comment(self, text: Any, indent: str) -> str:
        """Render a description as a JSDoc block."""
        if not isinstance(text, str) or not text.strip():
            return ""
        lines = text.replace("*/", "*\\/").splitlines()
        body = [f"{indent} * {line}".rstrip() for line in lines]
        return "\n".join([f"{indent}/**", *body, f"{indent} */"])

    def _render_key(self, key: Any) -> str:
        key = str(key)
        return key if _IDENTIFIER.match(key) else quote_key(key)

    def _literal(self, value: Any) -> str:
        return json.dumps(value, ensure_ascii=False)

    def _join(self, types: list[str], separator: str) -> str:
        """Join member types, dropping duplicates and wrapping composite members."""
        unique = list(dict.fromkeys(types))
        if not unique:
            return "unknown"
        if len(unique) == 1:
            return unique[0]
        return separator.join(self._parenthesize(t) for t in unique)

    def _parenthesize(self, type_str: str) -> str:
        return f"({type_str})" if is_composite_type(type_str) else type_str


def is_composite_type(type_str: str) -> bool:
    """Whether a type expression has a top-level union or intersection."""
    depth = 0
    quote = None
    escaped = False
    for char in type_str:
        if quote:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == quote:
                quote = None
            continue
        if char in "\"'":
            quote = char
        elif char in "([{<":
            depth += 1
        elif char in ")]}>":
            depth -= 1
        elif char in "|&" and depth == 0:
            return True
    return False
