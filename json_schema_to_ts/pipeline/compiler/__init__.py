"""
Schema compilers turning encoded schemas into TypeScript source.
"""

from __future__ import annotations

from .base import SchemaCompiler
from .typescript_compiler import TypeScriptCompiler

__all__ = [
    "SchemaCompiler",
    "TypeScriptCompiler",
]
