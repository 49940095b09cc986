"""Kontent Model Generator

Generates strongly-typed TypeScript models from Kontent content types,
for use with the Kontent delivery SDK.
"""

__version__ = "1.0.0"

from .config import CollisionPolicy, FormatterConfig, GeneratorConfig
from .exceptions import (
    FileWriteError,
    FilenameCollisionError,
    FormatterError,
    InvalidNameResolverError,
    KontentModelGeneratorError,
    SchemaSourceError,
    UnsupportedElementKindWarning,
)
from .generator import ModelGenerator, generate_models
from .models import ContentTypeSchema, ElementKind, ElementSchema, GeneratedFile
from .name_resolvers import NameResolver, NameResolverType

__all__ = [
    "ModelGenerator",
    "generate_models",
    "GeneratorConfig",
    "FormatterConfig",
    "CollisionPolicy",
    "ContentTypeSchema",
    "ElementSchema",
    "ElementKind",
    "GeneratedFile",
    "NameResolver",
    "NameResolverType",
    "KontentModelGeneratorError",
    "InvalidNameResolverError",
    "FormatterError",
    "FileWriteError",
    "FilenameCollisionError",
    "SchemaSourceError",
    "UnsupportedElementKindWarning",
]
