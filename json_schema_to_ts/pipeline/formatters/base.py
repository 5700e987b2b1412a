"""
Base class for code formatters.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..config import CompilerOptions


class Formatter(ABC):
    """Abstract base class for code formatters."""

    @abstractmethod
    def format(self, code: str, options: CompilerOptions) -> str:
        """
        Format the given code.

        Args:
            code: The source code to format
            options: Compiler options (indentation is taken from them)

        Returns:
            Formatted code
        """

    @abstractmethod
    def is_available(self) -> bool:
        """
        Check if the formatter is available (tool installed).

        Returns:
            True if the formatter can be used
        """
