import json
import sys

import pytest
from click.testing import CliRunner

from kontent_model_generator.cli import kontent_generate

from .conftest import TEST_DATA

TYPES_FILE = str(TEST_DATA / "content_types.json")


@pytest.fixture
def runner():
    return CliRunner()


def test_generate_from_types_file(runner, tmp_path):
    result = runner.invoke(
        kontent_generate,
        ["--types-file", TYPES_FILE, "--output-dir", str(tmp_path), "--name-resolver", "camelCase", "--no-format"],
    )
    assert result.exit_code == 0, result.output
    assert sorted(p.name for p in tmp_path.iterdir()) == ["article.ts", "coffee.ts"]
    assert "Using 'camelCase' name resolver for content type elements" in result.output
    assert "article.ts (Article)" in result.output
    assert result.output.index("article.ts (Article)") < result.output.index("coffee.ts (Coffee)")

    article = (tmp_path / "article.ts").read_text(encoding="utf-8")
    assert "    postDate: DateTimeElement;\n" in article
    assert "    relatedArticles: LinkedItemsElement<IContentItem>;\n" in article


def test_invalid_name_resolver(runner, tmp_path):
    result = runner.invoke(
        kontent_generate,
        ["--types-file", TYPES_FILE, "--output-dir", str(tmp_path), "--name-resolver", "kebabCase", "--no-format"],
    )
    assert result.exit_code == 1
    assert "Invalid name resolver 'kebabCase'. Available options are: camelCase, pascalCase, snakeCase" in result.output
    assert list(tmp_path.iterdir()) == []


def test_custom_name_resolver(runner, tmp_path):
    result = runner.invoke(
        kontent_generate,
        [
            "--types-file",
            TYPES_FILE,
            "--output-dir",
            str(tmp_path),
            "--name-resolver",
            "pascalCase",
            "--custom-name-resolver",
            "kontent_model_generator.tests.custom_resolvers:prefixed",
            "--no-format",
        ],
    )
    assert result.exit_code == 0, result.output
    assert "    coffee_price: NumberElement;\n" in (tmp_path / "coffee.ts").read_text(encoding="utf-8")


@pytest.mark.parametrize(
    "path",
    [
        "no_colon",
        "kontent_model_generator.tests.custom_resolvers:missing",
        "kontent_model_generator.tests.custom_resolvers:NOT_CALLABLE",
    ],
)
def test_bad_custom_name_resolver(runner, tmp_path, path):
    result = runner.invoke(
        kontent_generate,
        ["--types-file", TYPES_FILE, "--output-dir", str(tmp_path), "--custom-name-resolver", path, "--no-format"],
    )
    assert result.exit_code == 2
    assert "--custom-name-resolver" in result.output


def test_requires_exactly_one_source(runner):
    assert runner.invoke(kontent_generate, []).exit_code == 2
    assert runner.invoke(kontent_generate, ["--types-file", TYPES_FILE, "--project-id", "p"]).exit_code == 2


def test_config_file_with_flag_override(runner, tmp_path):
    out = tmp_path / "out"
    config_path = tmp_path / "config.json"
    config_path.write_text(
        json.dumps({"name_resolver": "snakeCase", "output_dir": str(out), "formatter": {"enabled": False}}),
        encoding="utf-8",
    )
    result = runner.invoke(
        kontent_generate,
        ["--types-file", TYPES_FILE, "--config", str(config_path), "--name-resolver", "pascalCase"],
    )
    assert result.exit_code == 0, result.output
    assert "    ProductName: TextElement;\n" in (out / "coffee.ts").read_text(encoding="utf-8")


def test_timestamp_flag(runner, tmp_path):
    result = runner.invoke(
        kontent_generate,
        ["--types-file", TYPES_FILE, "--output-dir", str(tmp_path), "--add-timestamp", "--no-format"],
    )
    assert result.exit_code == 0, result.output
    assert "' on '" in (tmp_path / "coffee.ts").read_text(encoding="utf-8")


def _write_resolver_module(directory, name):
    (directory / f"{name}.py").write_text(
        "def upper(type_codename, element_codename):\n    return element_codename.upper()\n",
        encoding="utf-8",
    )


def test_custom_name_resolver_from_working_directory(runner, tmp_path, monkeypatch):
    monkeypatch.setattr(sys, "path", list(sys.path))
    monkeypatch.chdir(tmp_path)
    _write_resolver_module(tmp_path, "project_resolvers")

    result = runner.invoke(
        kontent_generate,
        ["--types-file", TYPES_FILE, "--no-format", "--custom-name-resolver", "project_resolvers:upper"],
    )
    assert result.exit_code == 0, result.output
    assert "    PRICE: NumberElement;\n" in (tmp_path / "coffee.ts").read_text(encoding="utf-8")


def test_custom_name_resolver_from_file_path(runner, tmp_path):
    resolver_dir = tmp_path / "scripts"
    resolver_dir.mkdir()
    _write_resolver_module(resolver_dir, "file_resolvers")
    out = tmp_path / "out"

    result = runner.invoke(
        kontent_generate,
        [
            "--types-file",
            TYPES_FILE,
            "--output-dir",
            str(out),
            "--no-format",
            "--custom-name-resolver",
            f"{resolver_dir / 'file_resolvers.py'}:upper",
        ],
    )
    assert result.exit_code == 0, result.output
    assert "    PRODUCT_NAME: TextElement;\n" in (out / "coffee.ts").read_text(encoding="utf-8")


def test_custom_name_resolver_missing_file(runner, tmp_path):
    result = runner.invoke(
        kontent_generate,
        ["--types-file", TYPES_FILE, "--output-dir", str(tmp_path), "--no-format", "--custom-name-resolver", f"{tmp_path / 'missing.py'}:upper"],
    )
    assert result.exit_code == 2
    assert "cannot load" in result.output
