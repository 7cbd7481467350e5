"""Dependency injection wiring.

Config, domain services and use cases are always real; persistence is
swappable so unit tests run against in-memory repositories.
"""

from collections.abc import Collection

from forum.util.di.application import ProdApplicationProvider
from forum.util.di.base import Component, ProviderBase
from forum.util.di.core import ProdConfigProvider
from forum.util.di.domain import ProdDomainProvider
from forum.util.di.infrastructure import PersistenceProvider, ProdPersistenceProvider

PROVIDERS: list[type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
]


def get_provider(base: type[ProviderBase], use_mock: bool = False) -> type[ProviderBase]:
    """Provider class to instantiate for ``base``."""
    return base.implementation(use_mock)


def swappable_components() -> set[Component]:
    """Names of the components that currently have a mock registered."""
    return {
        base.__mock_component__
        for base in PROVIDERS
        if base.__mock_component__ and base.is_swappable()
    }


def build_providers(mocked: Collection[Component] = ()) -> list[ProviderBase]:
    """Instantiate every provider, using mocks for the ``mocked`` components."""
    return [
        get_provider(base, use_mock=base.__mock_component__ in mocked)()
        for base in PROVIDERS
    ]


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "build_providers",
    "get_provider",
    "swappable_components",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
