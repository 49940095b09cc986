"""
Base class for code formatters.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..config import FormatterConfig


class Formatter(ABC):
    """Abstract base class for code formatters."""

    @abstractmethod
    def format(self, code: str, config: FormatterConfig) -> str:
        """
        Format the given code.

        Args:
            code: The source code to format
            config: Formatter configuration

        Returns:
            Formatted code

        Raises:
            FormatterError: If the code cannot be parsed by the formatter
        """

    @abstractmethod
    def is_available(self) -> bool:
        """
        Check if the formatter is available (dependencies installed).

        Returns:
            True if the formatter can be used
        """


class PassthroughFormatter(Formatter):
    """Leaves code untouched. Used when formatting is disabled."""

    def format(self, code: str, config: FormatterConfig) -> str:
        return code

    def is_available(self) -> bool:
        return True
