"""
Content type schemas consumed by the generator and the files it produces.

The schemas mirror the shape returned by the Kontent Delivery API
``/types`` endpoint, reduced to what code generation needs.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ElementKind(str, Enum):
    """Element type tags known to the delivery SDK."""

    TEXT = "text"
    NUMBER = "number"
    LINKED_ITEMS = "modular_content"
    ASSET = "asset"
    DATE_TIME = "date_time"
    RICH_TEXT = "rich_text"
    MULTIPLE_CHOICE = "multiple_choice"
    URL_SLUG = "url_slug"
    TAXONOMY = "taxonomy"
    CUSTOM = "custom"


@dataclass(frozen=True)
class ElementSchema:
    """A single typed element of a content type.

    ``kind`` is kept as a plain string so that element types added to the
    service later still load; unknown kinds are reported at generation time.
    """

    codename: str
    kind: str
    name: str = ""

    @staticmethod
    def from_dict(d: dict[str, Any], codename: str | None = None) -> ElementSchema:
        """Create an element from its JSON representation."""
        kind = d.get("type", d.get("kind", ""))
        return ElementSchema(
            codename=codename if codename is not None else d["codename"],
            kind=kind.value if isinstance(kind, ElementKind) else str(kind),
            name=d.get("name", ""),
        )


@dataclass(frozen=True)
class ContentTypeSchema:
    """A content type and its elements, in declaration order."""

    codename: str
    elements: tuple[ElementSchema, ...] = field(default_factory=tuple)
    name: str = ""

    def __post_init__(self):
        object.__setattr__(self, "elements", tuple(self.elements))
        if not self.name:
            object.__setattr__(self, "name", self.codename)

    @staticmethod
    def from_dict(d: dict[str, Any]) -> ContentTypeSchema:
        """
        Create a content type from its JSON representation.

        Accepts the Delivery API shape, where ``system`` holds the codename and
        ``elements`` maps element codenames to element objects, as well as a
        flat shape with a top-level ``codename`` and an ``elements`` list.

        Args:
            d: Decoded JSON object

        Returns:
            The content type schema
        """
        system = d.get("system", d)
        raw_elements = d.get("elements", [])
        if isinstance(raw_elements, dict):
            elements = [ElementSchema.from_dict(e, codename=c) for c, e in raw_elements.items()]
        else:
            elements = [ElementSchema.from_dict(e) for e in raw_elements]
        return ContentTypeSchema(
            codename=system["codename"],
            elements=tuple(elements),
            name=system.get("name", ""),
        )


@dataclass(frozen=True)
class GeneratedFile:
    """Rendered source for one content type."""

    filename: str
    content: str
    type_codename: str = ""
    type_name: str = ""
