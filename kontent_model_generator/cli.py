import importlib
import importlib.util
import json
import logging
import sys
from pathlib import Path

import click

from .config import GeneratorConfig
from .exceptions import KontentModelGeneratorError
from .generator import ModelGenerator
from .schema_source import DEFAULT_DELIVERY_URL, DeliveryClient, load_content_types


def _import_resolver_module(module_ref: str):
    if module_ref.endswith(".py"):
        path = Path(module_ref).resolve()
        spec = importlib.util.spec_from_file_location(path.stem, path)
        if spec is None or spec.loader is None:
            raise ImportError(f"cannot import {path}")
        module = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(module)
        return module

    # The console script does not put the working directory on sys.path
    cwd = str(Path.cwd())
    if cwd not in sys.path:
        sys.path.insert(0, cwd)
    return importlib.import_module(module_ref)


def load_custom_name_resolver(path: str):
    """Load a resolver given as "package.module:function" or "path/to/file.py:function"."""
    module_ref, _, attr = path.rpartition(":")
    if not module_ref or not attr:
        raise click.BadParameter(f"expected 'module:function', got '{path}'", param_hint="--custom-name-resolver")
    try:
        module = _import_resolver_module(module_ref)
        resolver = getattr(module, attr)
    except (ImportError, AttributeError, OSError) as e:
        raise click.BadParameter(f"cannot load '{path}': {e}", param_hint="--custom-name-resolver") from e
    if not callable(resolver):
        raise click.BadParameter(f"'{path}' is not callable", param_hint="--custom-name-resolver")
    return resolver


@click.command()
@click.option("--project-id", "-p", default=None, type=str, help="Project to fetch content types from")
@click.option("--secure-access-key", "-k", default=None, type=str, help="Key for projects with secure access enabled")
@click.option("--base-url", default=DEFAULT_DELIVERY_URL, show_default=True, type=str)
@click.option("--types-file", "-t", default=None, type=click.Path(exists=True, dir_okay=False, resolve_path=True), help="Read content types from a JSON file instead of the API")
@click.option("--config", "-c", default=None, type=click.Path(exists=True, dir_okay=False, resolve_path=True))
@click.option("--add-timestamp/--no-add-timestamp", default=None, help="Include the generation time in file headers")
@click.option("--name-resolver", "-r", default=None, type=str, help="camelCase, pascalCase or snakeCase")
@click.option("--custom-name-resolver", default=None, type=str, help="Resolver function as module:function")
@click.option("--output-dir", "-o", default=None, type=click.Path(file_okay=False, resolve_path=True))
@click.option("--format/--no-format", "format_code", default=None, help="Format the output with prettier")
@click.option("--verbose", "-v", is_flag=True, default=False)
def kontent_generate(
    project_id,
    secure_access_key,
    base_url,
    types_file,
    config,
    add_timestamp,
    name_resolver,
    custom_name_resolver,
    output_dir,
    format_code,
    verbose,
):
    """Generate TypeScript models for the content types of a Kontent project."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)

    if (project_id is None) == (types_file is None):
        raise click.UsageError("Provide exactly one of --project-id or --types-file")

    if config is not None:
        with open(config) as f:
            config = GeneratorConfig.from_dict(json.load(f))
    else:
        config = GeneratorConfig()
        config.formatter.enabled = True

    # CLI flags override the config file
    if add_timestamp is not None:
        config.add_timestamp = add_timestamp
    if name_resolver is not None:
        config.name_resolver = name_resolver
    if custom_name_resolver is not None:
        config.custom_name_resolver = load_custom_name_resolver(custom_name_resolver)
    if output_dir is not None:
        config.output_dir = output_dir
    if format_code is not None:
        config.formatter.enabled = format_code

    try:
        if types_file is not None:
            types = load_content_types(types_file)
        else:
            types = DeliveryClient(project_id, secure_access_key, base_url=base_url).list_content_types()

        ModelGenerator(config).generate_models(types)
    except KontentModelGeneratorError as e:
        raise click.ClickException(str(e)) from e
