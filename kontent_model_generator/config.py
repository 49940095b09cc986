"""
Configuration for the model generator.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .name_resolvers import NameResolver

DEFAULT_SDK_PACKAGE = "@kentico/kontent-delivery"


class CollisionPolicy(str, Enum):
    """What to do when two content types produce the same filename."""

    ERROR = "error"  # Default: raise before the second file is written
    OVERWRITE = "overwrite"  # Warn and let the last content type win


@dataclass
class FormatterConfig:
    """Configuration for the post-processing formatter.

    Everything except ``enabled`` is handed to the formatter untouched.
    """

    # Whether formatting is enabled
    enabled: bool = False

    # Formatter executable
    executable: str = "prettier"

    # Prettier parser for the generated code
    parser: str = "typescript"

    # Use single quotes instead of double quotes
    single_quote: bool = True

    # Line length (None = formatter default)
    print_width: int | None = None

    # Indentation width (None = formatter default)
    tab_width: int | None = None

    # Extra options, rendered as --kebab-case flags
    options: dict[str, Any] = field(default_factory=dict)

    @staticmethod
    def from_dict(d: dict) -> FormatterConfig:
        config = FormatterConfig()
        for k, v in d.items():
            if hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        return {
            "enabled": self.enabled,
            "executable": self.executable,
            "parser": self.parser,
            "single_quote": self.single_quote,
            "print_width": self.print_width,
            "tab_width": self.tab_width,
            "options": dict(self.options),
        }


@dataclass
class GeneratorConfig:
    """Configuration options for model generation."""

    # Include the generation time in the file header
    add_timestamp: bool = False

    # Built-in name resolver ("camelCase", "pascalCase", "snakeCase"), None = keep codenames
    name_resolver: str | None = None

    # Caller-supplied resolver, overrides name_resolver when set
    custom_name_resolver: NameResolver | None = None

    # Directory the generated files are written to
    output_dir: str = "."

    # Package the element types are imported from
    sdk_package: str = DEFAULT_SDK_PACKAGE

    # Namespace holding the element types (e.g. "Elements"), empty = named imports
    elements_namespace: str = ""

    # Handling of content types that map to the same file
    on_filename_collision: CollisionPolicy = CollisionPolicy.ERROR

    # Formatter configuration
    formatter: FormatterConfig = field(default_factory=FormatterConfig)

    @staticmethod
    def from_dict(d: dict) -> GeneratorConfig:
        """Create a config from a dictionary."""
        config = GeneratorConfig()
        for k, v in d.items():
            if k == "formatter" and isinstance(v, dict):
                config.formatter = FormatterConfig.from_dict(v)
            elif k == "on_filename_collision":
                config.on_filename_collision = CollisionPolicy(v)
            elif hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary. The custom resolver is not included."""
        return {
            "add_timestamp": self.add_timestamp,
            "name_resolver": self.name_resolver,
            "output_dir": self.output_dir,
            "sdk_package": self.sdk_package,
            "elements_namespace": self.elements_namespace,
            "on_filename_collision": self.on_filename_collision.value,
            "formatter": self.formatter.to_dict(),
        }
