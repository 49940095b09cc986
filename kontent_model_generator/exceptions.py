"""
Exceptions raised by the model generator.
"""

from __future__ import annotations


class KontentModelGeneratorError(Exception):
    """Base class for all model generator errors."""


class InvalidNameResolverError(KontentModelGeneratorError, ValueError):
    """Raised when a named resolver matches none of the built-in strategies."""

    def __init__(self, name_resolver: str, available: list[str]):
        self.name_resolver = name_resolver
        self.available = list(available)
        super().__init__(f"Invalid name resolver '{name_resolver}'. Available options are: {', '.join(self.available)}")


class FormatterError(KontentModelGeneratorError):
    """Raised when the formatter rejects the generated code."""


class FileWriteError(KontentModelGeneratorError, OSError):
    """Raised when a generated file cannot be written."""


class FilenameCollisionError(KontentModelGeneratorError):
    """Raised when two content types map to the same output file."""

    def __init__(self, filename: str, first: str, second: str):
        self.filename = filename
        self.first = first
        self.second = second
        super().__init__(f"Content types '{first}' and '{second}' both generate '{filename}'")


class SchemaSourceError(KontentModelGeneratorError):
    """Raised when content types cannot be loaded or fetched."""


class UnsupportedElementKindWarning(UserWarning):
    """Emitted when an element kind has no declared type mapping."""

    def __init__(self, kind: str, element_codename: str = ""):
        self.kind = kind
        self.element_codename = element_codename
        super().__init__(f"Unsupported element type '{kind}'")
