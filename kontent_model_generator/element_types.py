"""
Mapping from element kind tags to the element types declared by the delivery SDK.
"""

from __future__ import annotations

from .exceptions import UnsupportedElementKindWarning
from .models import ElementKind
from .notifications import Notifier

CONTENT_ITEM_TYPE = "IContentItem"


def _normalize_kind(kind: str) -> str:
    # "rich_text", "RICH_TEXT" and "RichText" all denote the same kind
    return kind.replace("_", "").replace("-", "").lower()


ELEMENT_TYPE_NAMES: dict[str, str] = {
    _normalize_kind(ElementKind.TEXT.value): "TextElement",
    _normalize_kind(ElementKind.NUMBER.value): "NumberElement",
    _normalize_kind(ElementKind.LINKED_ITEMS.value): f"LinkedItemsElement<{CONTENT_ITEM_TYPE}>",
    _normalize_kind("linked_items"): f"LinkedItemsElement<{CONTENT_ITEM_TYPE}>",
    _normalize_kind(ElementKind.ASSET.value): "AssetsElement",
    _normalize_kind(ElementKind.DATE_TIME.value): "DateTimeElement",
    _normalize_kind(ElementKind.RICH_TEXT.value): "RichTextElement",
    _normalize_kind(ElementKind.MULTIPLE_CHOICE.value): "MultipleChoiceElement",
    _normalize_kind(ElementKind.URL_SLUG.value): "UrlSlugElement",
    _normalize_kind(ElementKind.TAXONOMY.value): "TaxonomyElement",
    _normalize_kind(ElementKind.CUSTOM.value): "CustomElement",
}


def map_element_kind(kind: str, notifier: Notifier | None = None, element_codename: str = "") -> str:
    """
    Return the declared type name for an element kind.

    Unknown kinds are not an error: a single UnsupportedElementKindWarning is
    sent to the notifier and an empty type name is returned.

    Args:
        kind: Element kind tag, compared case-insensitively
        notifier: Sink for the unsupported-kind warning
        element_codename: Codename of the element, for the warning

    Returns:
        Declared type name, or "" for unsupported kinds
    """
    type_name = ELEMENT_TYPE_NAMES.get(_normalize_kind(kind))
    if type_name is None:
        if notifier is not None:
            notifier.warn(UnsupportedElementKindWarning(kind, element_codename))
        return ""
    return type_name


def import_name(type_name: str) -> str:
    """Name to import for a declared type ("LinkedItemsElement<IContentItem>" -> "LinkedItemsElement")."""
    return type_name.split("<", 1)[0]
