"""
Handling of YApi interface payloads.

Fetching is left to the caller (browser session, curl, exported file); this
module takes the decoded body of ``GET /api/interface/get`` and turns the
request and response schemas it carries into TypeScript declarations.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .pipeline.compiler import SchemaCompiler
from .pipeline.errors import AcquisitionError
from .pipeline.generator import json_schema_to_type
from .pipeline.normalizer import json_schema_string_to_json_schema
from .pipeline.schema_types import SchemaNode
from .utils import to_pascal_case

logger = logging.getLogger(__name__)

DEFAULT_ERROR_MESSAGE = "Please log in first"

# Rich-text editor residue YApi leaves inside schema text
_SCHEMA_TEXT_ARTEFACTS = re.compile(r"注释\\n\\t|<p>", re.IGNORECASE)


@dataclass
class InterfaceDefinition:
    """The parts of a YApi interface used for type generation."""

    path: str = ""
    title: str = ""
    req_body_other: str = ""  # Request body JSON Schema text
    res_body: str = ""  # Response body JSON Schema text

    @property
    def type_name(self) -> str:
        """Base type name derived from the interface path."""
        return to_pascal_case(self.path) or "Interface"


def clean_schema_text(text: str) -> str:
    """Remove editor artefacts from schema text."""
    return _SCHEMA_TEXT_ARTEFACTS.sub("", text)


def parse_interface_response(payload: Mapping[str, Any]) -> InterfaceDefinition:
    """
    Extract the interface definition from a YApi API response.

    Args:
        payload: Decoded JSON body of the interface lookup

    Returns:
        The interface definition with cleaned schema texts

    Raises:
        AcquisitionError: If YApi reports a failure (``errcode`` other than 0).
            The message is YApi's ``errmsg``.
    """
    if payload.get("errcode") != 0:
        raise AcquisitionError(payload.get("errmsg") or DEFAULT_ERROR_MESSAGE)

    data = payload.get("data") or {}
    interface = InterfaceDefinition(
        path=data.get("path") or "",
        title=data.get("title") or "",
        req_body_other=clean_schema_text(data.get("req_body_other") or ""),
        res_body=clean_schema_text(data.get("res_body") or ""),
    )
    logger.debug("Loaded interface %s (%s)", interface.path, interface.title)
    return interface


def load_schema_text(text: str, custom_type_mapping: Mapping[str, str] | None = None) -> SchemaNode:
    """Parse and normalize schema text; blank text is an empty schema."""
    if not text.strip():
        return {}
    return json_schema_string_to_json_schema(text, custom_type_mapping)


async def generate_interface_declarations(
    interface: InterfaceDefinition,
    custom_type_mapping: Mapping[str, str] | None = None,
    compiler: SchemaCompiler | None = None,
    type_name: str | None = None,
) -> str:
    """
    Generate the request and response declarations of an interface.

    The types are named ``<Base>Request`` and ``<Base>Response``, where the
    base is ``type_name`` or, by default, the PascalCase interface path.
    """
    base_name = type_name or interface.type_name
    request = await json_schema_to_type(
        load_schema_text(interface.req_body_other, custom_type_mapping),
        f"{base_name}Request",
        compiler,
    )
    response = await json_schema_to_type(
        load_schema_text(interface.res_body, custom_type_mapping),
        f"{base_name}Response",
        compiler,
    )
    return f"{request}\n\n{response}"
