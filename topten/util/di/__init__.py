"""Dependency injection module."""

from typing import Type

from topten.util.di.application import ProdApplicationProvider
from topten.util.di.base import Component, ProviderBase, get_provider
from topten.util.di.core import ProdConfigProvider
from topten.util.di.domain import ProdDomainProvider
from topten.util.di.infrastructure import (
    IdentityProvider,
    PersistenceProvider,
    ProdIdentityProvider,
    ProdPersistenceProvider,
)

# Config, domain and application providers are fixed. Persistence and
# identity are swapped for mocks in tests.
PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
    IdentityProvider,
]


def mockable_components() -> set[Component]:
    """Names of the components that have a mock implementation."""
    return {
        base.__mock_component__
        for base in PROVIDERS
        if base.__mock_component__ and base.__subclasses__()
    }


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "mockable_components",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "IdentityProvider",
    "PersistenceProvider",
    "ProdIdentityProvider",
    "ProdPersistenceProvider",
]
