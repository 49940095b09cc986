"""
Generates TypeScript models for content types.

Each content type becomes one ``<codename>.ts`` file declaring a type of the
form ``IContentItem<{ ... }>`` with one property per element:

1. Resolve the declared type name (PascalCase of the type codename)
2. Resolve a property name per element (name resolver)
3. Map each element kind to the SDK element type
4. Render the declaration with the jinja2 template
5. Format the result and hand it to the writer
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from datetime import datetime, timezone
from pathlib import Path

import jinja2

from . import __version__
from .config import CollisionPolicy, GeneratorConfig
from .element_types import CONTENT_ITEM_TYPE, import_name, map_element_kind
from .exceptions import FilenameCollisionError
from .formatters import Formatter, PassthroughFormatter, PrettierFormatter
from .models import ContentTypeSchema, GeneratedFile
from .name_resolvers import PropertyNameResolution
from .notifications import ClickNotifier, Notifier
from .utils import to_pascal_case
from .writer import FileWriter

CURRENT_DIR = Path(__file__).parent.resolve().absolute()

GENERATOR_NAME = "kontent-model-generator"
MODEL_FILE_EXTENSION = ".ts"

logger = logging.getLogger(__name__)


class ModelGenerator:
    def __init__(
        self,
        config: GeneratorConfig | None = None,
        formatter: Formatter | None = None,
        writer: FileWriter | None = None,
        notifier: Notifier | None = None,
        clock: Callable[[], datetime] | None = None,
    ):
        """
        Initialize the generator.

        Args:
            config: Generation options
            formatter: Formatter for rendered code; defaults to prettier when
                formatting is enabled in the config, otherwise no formatting
            writer: Destination for generated files
            notifier: Sink for progress lines and warnings
            clock: Source of the generation timestamp
        """
        self.config = config or GeneratorConfig()
        if formatter is None:
            if self.config.formatter.enabled:
                formatter = PrettierFormatter(self.config.formatter.executable)
            else:
                formatter = PassthroughFormatter()
        self.formatter = formatter
        self.writer = writer or FileWriter()
        self.notifier = notifier or ClickNotifier()
        self.clock = clock or (lambda: datetime.now(timezone.utc))
        self.name_resolution = PropertyNameResolution(
            name_resolver=self.config.name_resolver,
            custom_name_resolver=self.config.custom_name_resolver,
        )
        self.jinja_env = jinja2.Environment(lstrip_blocks=True, trim_blocks=True, keep_trailing_newline=True)
        self.model_template = self.jinja_env.from_string((CURRENT_DIR / "templates" / "model.ts.jinja2").read_text(encoding="utf-8"))

    def generate_models(self, schemas: Iterable[ContentTypeSchema]) -> list[GeneratedFile]:
        """
        Generate and write one model file per content type, in input order.

        Args:
            schemas: Content types to generate models for

        Returns:
            The generated files, in the order they were written

        Raises:
            InvalidNameResolverError: If the named resolver is not a built-in one
            FilenameCollisionError: If two content types share a filename and
                the collision policy is "error"
            FormatterError: If the formatter rejects the generated code
            FileWriteError: If a file cannot be written
        """
        if self.config.custom_name_resolver is not None:
            self.notifier.info("Using 'custom' name resolver for content type elements")
        elif self.config.name_resolver:
            self.notifier.info(f"Using '{self.config.name_resolver}' name resolver for content type elements")

        output_dir = Path(self.config.output_dir)
        seen: dict[str, str] = {}
        files = []
        for schema in schemas:
            filename = self.get_model_filename(schema)
            self._check_collision(filename, schema, seen)

            generated = self.generate_model(schema)
            self.writer.write(output_dir / generated.filename, generated.content)
            self.notifier.progress(generated.filename, schema.name)
            files.append(generated)

        logger.debug("Generated %d model(s) in %s", len(files), output_dir)
        return files

    def generate_model(self, schema: ContentTypeSchema) -> GeneratedFile:
        """Render and format the model for a single content type without writing it."""
        type_name = self.get_type_name(schema)
        code = self.get_model_code(schema)
        return GeneratedFile(
            filename=self.get_model_filename(schema),
            content=self.formatter.format(code, self.config.formatter),
            type_codename=schema.codename,
            type_name=type_name,
        )

    def get_model_code(self, schema: ContentTypeSchema) -> str:
        """Render the unformatted declaration for a content type."""
        element_lines, element_types = self._get_elements(schema)
        return self.model_template.render(
            imports=self._get_imports(element_types),
            sdk_package=self.config.sdk_package,
            generation_note=self.get_generation_note(),
            type_name=self.get_type_name(schema),
            content_item_type=CONTENT_ITEM_TYPE,
            element_lines=element_lines,
        )

    def get_element_lines(self, schema: ContentTypeSchema) -> list[str]:
        """One ``propertyName: ElementType;`` line per element, in element order."""
        return self._get_elements(schema)[0]

    def _get_elements(self, schema: ContentTypeSchema) -> tuple[list[str], list[str]]:
        lines = []
        types = []
        for element in schema.elements:
            property_name = self.name_resolution.resolve(schema.codename, element.codename)
            type_name = map_element_kind(element.kind, self.notifier, element.codename)
            lines.append(f"{property_name}: {self._qualify(type_name)};")
            types.append(type_name)
        return lines, types

    def _qualify(self, type_name: str) -> str:
        if self.config.elements_namespace and type_name:
            return f"{self.config.elements_namespace}.{type_name}"
        return type_name

    def _get_imports(self, element_types: list[str]) -> list[str]:
        if self.config.elements_namespace:
            return [CONTENT_ITEM_TYPE, self.config.elements_namespace]
        used = {import_name(t) for t in element_types if t}
        used.discard(CONTENT_ITEM_TYPE)
        return [CONTENT_ITEM_TYPE, *sorted(used)]

    def get_generation_note(self) -> list[str]:
        """Header comment lines, with the generation time when timestamps are enabled."""
        source = f"'{GENERATOR_NAME}@{__version__}'"
        if self.config.add_timestamp:
            timestamp = self.clock().isoformat(timespec="seconds")
            first = f"This file has been auto-generated by {source} on '{timestamp}'."
        else:
            first = f"This file has been auto-generated by {source}."
        return [first, f"Tip: You can replace '{CONTENT_ITEM_TYPE}' with your own base type."]

    @staticmethod
    def get_type_name(schema: ContentTypeSchema) -> str:
        return to_pascal_case(schema.codename)

    @staticmethod
    def get_model_filename(schema: ContentTypeSchema) -> str:
        return f"{schema.codename}{MODEL_FILE_EXTENSION}"

    def _check_collision(self, filename: str, schema: ContentTypeSchema, seen: dict[str, str]) -> None:
        # Compare case-insensitively, output may land on a case-insensitive filesystem
        key = filename.casefold()
        previous = seen.get(key)
        seen[key] = schema.codename
        if previous is None:
            return
        error = FilenameCollisionError(filename, previous, schema.codename)
        if self.config.on_filename_collision == CollisionPolicy.ERROR:
            raise error
        self.notifier.warn(UserWarning(f"{error}, overwriting"))


def generate_models(
    schemas: Iterable[ContentTypeSchema],
    config: GeneratorConfig | None = None,
    *,
    formatter: Formatter | None = None,
    writer: FileWriter | None = None,
    notifier: Notifier | None = None,
) -> list[GeneratedFile]:
    """Generate and write models for the given content types. See ModelGenerator.generate_models."""
    generator = ModelGenerator(config, formatter=formatter, writer=writer, notifier=notifier)
    return generator.generate_models(schemas)
