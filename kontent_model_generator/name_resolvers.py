"""
Property name resolution strategies.

A name resolver maps ``(type_codename, element_codename)`` to the property
name used in generated code. Three named strategies are built in; callers
may also pass their own function, which then wins over any named strategy.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from functools import cached_property

from .exceptions import InvalidNameResolverError
from .utils import to_camel_case, to_pascal_case, to_snake_case

NameResolver = Callable[[str, str], str]


class NameResolverType(str, Enum):
    """Identifiers of the built-in name resolvers."""

    CAMEL_CASE = "camelCase"
    PASCAL_CASE = "pascalCase"
    SNAKE_CASE = "snakeCase"


def identity_name_resolver(type_codename: str, element_codename: str) -> str:
    return element_codename


def camel_case_name_resolver(type_codename: str, element_codename: str) -> str:
    return to_camel_case(element_codename)


def pascal_case_name_resolver(type_codename: str, element_codename: str) -> str:
    return to_pascal_case(element_codename)


def snake_case_name_resolver(type_codename: str, element_codename: str) -> str:
    return to_snake_case(element_codename)


NAME_RESOLVERS: dict[str, NameResolver] = {
    NameResolverType.CAMEL_CASE.value: camel_case_name_resolver,
    NameResolverType.PASCAL_CASE.value: pascal_case_name_resolver,
    NameResolverType.SNAKE_CASE.value: snake_case_name_resolver,
}


def get_name_resolver(name_resolver: str | NameResolverType) -> NameResolver:
    """
    Look up a built-in name resolver by identifier.

    Raises:
        InvalidNameResolverError: If the identifier is not a built-in resolver
    """
    key = name_resolver.value if isinstance(name_resolver, NameResolverType) else name_resolver
    try:
        return NAME_RESOLVERS[key]
    except KeyError:
        raise InvalidNameResolverError(key, list(NAME_RESOLVERS)) from None


class PropertyNameResolution:
    """Picks the name resolution strategy for one generation run.

    The custom resolver takes precedence over the named one. The choice is
    made on the first call to :meth:`resolve` and reused afterwards, so an
    invalid named resolver only fails once a property name is needed.
    """

    def __init__(
        self,
        name_resolver: str | NameResolverType | None = None,
        custom_name_resolver: NameResolver | None = None,
    ):
        self.name_resolver = name_resolver
        self.custom_name_resolver = custom_name_resolver

    @cached_property
    def strategy(self) -> NameResolver:
        if self.custom_name_resolver is not None:
            return self.custom_name_resolver
        if not self.name_resolver:
            return identity_name_resolver
        return get_name_resolver(self.name_resolver)

    def resolve(self, type_codename: str, element_codename: str) -> str:
        return self.strategy(type_codename, element_codename)
