"""
Case conversion helpers for generated identifiers.
"""

import re

# Regex pattern to split text into words, handling camelCase and acronym boundaries
_WORD_PATTERN = re.compile(r"[A-Z]+(?![a-z])|[A-Z]?[a-z]+|[0-9]+")


def _normalize_separators(text: str) -> str:
    """Normalize separators (underscores, hyphens) to spaces."""
    return text.replace("_", " ").replace("-", " ")


def split_words(text: str) -> list[str]:
    """Split text into words on separators, case changes and digit runs.

    Examples:
        "body_text" -> ["body", "text"]
        "bodyText" -> ["body", "Text"]
        "URLSlug" -> ["URL", "Slug"]
        "first 3 rows" -> ["first", "3", "rows"]
    """
    return _WORD_PATTERN.findall(_normalize_separators(text))


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


def to_pascal_case(text: str) -> str:
    """Convert snake_case, camelCase, or space-separated text to PascalCase.

    Examples:
        "first_name" -> "FirstName"
        "FIRST_NAME" -> "FirstName"
        "actionTemplate" -> "ActionTemplate"
        "first 3 rows" -> "First3Rows"
    """
    return "".join(_capitalize(word) for word in split_words(text))


def to_camel_case(text: str) -> str:
    """Convert text to camelCase ("body_text" -> "bodyText")."""
    words = split_words(text)
    if not words:
        return ""
    return words[0].lower() + "".join(_capitalize(word) for word in words[1:])


def to_snake_case(text: str) -> str:
    """Convert text to snake_case ("bodyText" -> "body_text")."""
    return "_".join(word.lower() for word in split_words(text))
