"""
Post-processing formatters for generated code.
"""

from __future__ import annotations

from .base import Formatter, PassthroughFormatter
from .prettier_formatter import PrettierFormatter

__all__ = [
    "Formatter",
    "PassthroughFormatter",
    "PrettierFormatter",
]
