import pytest

from kontent_model_generator.exceptions import InvalidNameResolverError
from kontent_model_generator.name_resolvers import (
    NameResolverType,
    PropertyNameResolution,
    camel_case_name_resolver,
    get_name_resolver,
    pascal_case_name_resolver,
    snake_case_name_resolver,
)
from kontent_model_generator.utils import split_words, to_pascal_case


@pytest.mark.parametrize(
    "codename,expected",
    [
        ("body_text", "bodyText"),
        ("Title", "title"),
        ("url-slug", "urlSlug"),
        ("relatedArticles", "relatedArticles"),
        ("URLPattern", "urlPattern"),
        ("teaser_image_2", "teaserImage2"),
    ],
)
def test_camel_case(codename, expected):
    assert camel_case_name_resolver("article", codename) == expected


@pytest.mark.parametrize(
    "codename,expected",
    [
        ("body_text", "BodyText"),
        ("title", "Title"),
        ("relatedArticles", "RelatedArticles"),
        ("FIRST_NAME", "FirstName"),
    ],
)
def test_pascal_case(codename, expected):
    assert pascal_case_name_resolver("article", codename) == expected


@pytest.mark.parametrize(
    "codename,expected",
    [
        ("bodyText", "body_text"),
        ("Title", "title"),
        ("URLPattern", "url_pattern"),
        ("already_snake", "already_snake"),
    ],
)
def test_snake_case(codename, expected):
    assert snake_case_name_resolver("article", codename) == expected


def test_split_words_handles_acronyms():
    assert split_words("URLSlug") == ["URL", "Slug"]
    assert split_words("first 3 rows") == ["first", "3", "rows"]


def test_declaration_name_convention():
    assert to_pascal_case("article") == "Article"
    assert to_pascal_case("hero_unit") == "HeroUnit"
    assert to_pascal_case("") == ""


def test_get_name_resolver_accepts_enum_and_string():
    assert get_name_resolver(NameResolverType.SNAKE_CASE) is snake_case_name_resolver
    assert get_name_resolver("camelCase") is camel_case_name_resolver


def test_invalid_name_resolver_lists_options():
    with pytest.raises(InvalidNameResolverError) as exc_info:
        get_name_resolver("kebabCase")
    assert exc_info.value.name_resolver == "kebabCase"
    assert str(exc_info.value) == "Invalid name resolver 'kebabCase'. Available options are: camelCase, pascalCase, snakeCase"


class TestPropertyNameResolution:
    @pytest.mark.parametrize("codename", ["Title", "body_text", "MixedCase_name", "x"])
    def test_identity_without_resolver(self, codename):
        assert PropertyNameResolution().resolve("article", codename) == codename

    def test_named_resolver(self):
        assert PropertyNameResolution("pascalCase").resolve("article", "body_text") == "BodyText"

    def test_custom_resolver_wins_over_named(self):
        calls = []

        def custom(type_codename, element_codename):
            calls.append((type_codename, element_codename))
            return f"{type_codename}__{element_codename}"

        resolution = PropertyNameResolution("camelCase", custom)
        assert resolution.resolve("article", "body_text") == "article__body_text"
        assert resolution.resolve("article", "Title") == "article__Title"
        assert calls == [("article", "body_text"), ("article", "Title")]

    def test_custom_resolver_wins_over_invalid_named(self):
        resolution = PropertyNameResolution("kebabCase", lambda t, e: e.upper())
        assert resolution.resolve("article", "title") == "TITLE"

    def test_invalid_named_resolver_fails_lazily(self):
        resolution = PropertyNameResolution("kebabCase")
        with pytest.raises(InvalidNameResolverError):
            resolution.resolve("article", "title")
