"""
Prettier formatter for TypeScript code.
"""

from __future__ import annotations

import logging
import subprocess

from ..config import FormatterConfig
from ..exceptions import FormatterError
from .base import Formatter

logger = logging.getLogger(__name__)


def _to_flag(name: str) -> str:
    """Convert an option name to a prettier flag ("trailing_comma" / "trailingComma" -> "--trailing-comma")."""
    kebab = "".join(f"-{c.lower()}" if c.isupper() else c for c in name).replace("_", "-")
    return f"--{kebab.lstrip('-')}"


def build_prettier_command(config: FormatterConfig) -> list[str]:
    """Build the prettier command line for the given configuration."""
    cmd = [config.executable, "--stdin-filepath", "model.ts", "--parser", config.parser]

    if config.single_quote:
        cmd.append("--single-quote")

    if config.print_width:
        cmd.extend(["--print-width", str(config.print_width)])

    if config.tab_width:
        cmd.extend(["--tab-width", str(config.tab_width)])

    for name, value in config.options.items():
        flag = _to_flag(name)
        if value is True:
            cmd.append(flag)
        elif value is False or value is None:
            continue
        else:
            cmd.extend([flag, str(value)])

    return cmd


class PrettierFormatter(Formatter):
    """Formatter using prettier for TypeScript code."""

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
                    timeout=10,
                )
                self._available = result.returncode == 0
            except (subprocess.SubprocessError, FileNotFoundError):
                self._available = False
        return self._available

    def format(self, code: str, config: FormatterConfig) -> str:
        """
        Format TypeScript code using prettier.

        Args:
            code: TypeScript source code to format
            config: Formatter configuration

        Returns:
            Formatted code, or the input unchanged if prettier is not installed

        Raises:
            FormatterError: If prettier rejects the code
        """
        if not self.is_available():
            logger.debug("prettier not found, leaving generated code unformatted")
            return code

        cmd = build_prettier_command(config)
        cmd[0] = self.executable

        try:
            result = subprocess.run(
                cmd,
                input=code,
                capture_output=True,
                text=True,
                timeout=30,
            )
        except subprocess.SubprocessError as e:
            raise FormatterError(f"prettier failed: {e}") from e

        if result.returncode != 0:
            raise FormatterError(result.stderr.strip() or f"prettier exited with code {result.returncode}")
        return result.stdout
