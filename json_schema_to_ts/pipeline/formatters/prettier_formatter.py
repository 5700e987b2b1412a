"""
Prettier formatter for TypeScript declarations.
"""

from __future__ import annotations

import logging
import subprocess

from ..config import CompilerOptions
from .base import Formatter

logger = logging.getLogger(__name__)


class PrettierFormatter(Formatter):
    """Formatter using the prettier command line tool."""

    def __init__(self, executable: str = "prettier"):
        self.executable = executable
        self._available = None

    def is_available(self) -> bool:
        """Check if prettier is installed."""
        if self._available is None:
            try:
                result = subprocess.run(
                    [self.executable, "--version"],
                    capture_output=True,
                    text=True,
                    timeout=5,
                )
                self._available = result.returncode == 0
            except (subprocess.SubprocessError, FileNotFoundError):
                self._available = False
        return self._available

    def format(self, code: str, options: CompilerOptions) -> str:
        """
        Format TypeScript code using prettier.

        Args:
            code: TypeScript source code to format
            options: Compiler options

        Returns:
            Formatted code, or the input unchanged when prettier is missing or fails
        """
        if not self.is_available():
            logger.debug("prettier not available, leaving output unformatted")
            return code

        cmd = [self.executable, "--parser", "typescript", "--stdin-filepath", "types.ts"]
        if options.indent == "\t":
            cmd.append("--use-tabs")
        else:
            cmd.extend(["--tab-width", str(len(options.indent))])

        try:
            result = subprocess.run(
                cmd,
                input=code,
                capture_output=True,
                text=True,
                timeout=30,
            )
        except subprocess.SubprocessError as e:
            logger.warning("prettier failed: %s", e)
            return code

        if result.returncode == 0:
            return result.stdout
        logger.warning("prettier failed: %s", result.stderr.strip())
        return code
