from __future__ import annotations

from pathlib import Path

import pytest

from kontent_model_generator.config import GeneratorConfig
from kontent_model_generator.models import ContentTypeSchema, ElementSchema
from kontent_model_generator.notifications import Notifier

TEST_DATA = Path(__file__).parent / "test_data"


class RecordingNotifier(Notifier):
    """Collects notifications instead of printing them."""

    def __init__(self):
        self.messages: list[str] = []
        self.progress_lines: list[tuple[str, str]] = []
        self.warnings: list[Warning] = []

    def info(self, message: str) -> None:
        self.messages.append(message)

    def progress(self, filename: str, type_name: str) -> None:
        self.progress_lines.append((filename, type_name))

    def warn(self, warning: Warning) -> None:
        self.warnings.append(warning)


class RecordingWriter:
    """Keeps written files in memory."""

    def __init__(self):
        self.files: dict[str, str] = {}
        self.order: list[str] = []

    def write(self, path, content: str) -> None:
        self.files[Path(path).name] = content
        self.order.append(Path(path).name)


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def writer():
    return RecordingWriter()


@pytest.fixture
def config():
    return GeneratorConfig()


@pytest.fixture
def article():
    return ContentTypeSchema(
        codename="article",
        name="Article",
        elements=(
            ElementSchema("Title", "text"),
            ElementSchema("body_text", "rich_text"),
        ),
    )
