"""
Post-processing formatters for generated declarations.
"""

from __future__ import annotations

from .base import Formatter
from .prettier_formatter import PrettierFormatter

__all__ = [
    "Formatter",
    "PrettierFormatter",
]
