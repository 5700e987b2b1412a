"""
Base class for schema compilers.

Defines the interface the type synthesis front-end relies on.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Awaitable
from typing import Any

from ..config import CompilerOptions


class SchemaCompiler(ABC):
    """Abstract base class for schema-to-source compilers."""

    @abstractmethod
    def compile(
        self,
        schema: dict[str, Any],
        name: str,
        options: CompilerOptions | None = None,
    ) -> str | Awaitable[str]:
        """
        Compile a schema into source text declaring one root type.

        Args:
            schema: Schema prepared by the reference encoder
            name: Root type name. Implementations may rewrite it (casing,
                invalid characters), which is why callers pass a placeholder.
            options: Compiler options

        Returns:
            Generated source text, or an awaitable resolving to it
        """
