"""Dependency injection wiring."""

from typing import Type

from ident.util.di.application import ProdApplicationProvider
from ident.util.di.base import Component, ProviderBase
from ident.util.di.core import ProdConfigProvider
from ident.util.di.domain import ProdDomainProvider
from ident.util.di.infrastructure import (
    EmailProvider,
    PersistenceProvider,
    ProdEmailProvider,
    ProdPersistenceProvider,
)

# Order does not matter to dishka; grouped for readability
PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    EmailProvider,
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve a provider entry to the class to instantiate.

    Args:
        base: Entry of ``PROVIDERS``
        use_mock: Pick the test implementation of a mockable component

    Returns:
        ``base`` itself for concrete providers, otherwise the subclass whose
        ``__is_mock__`` matches ``use_mock``

    Raises:
        ValueError: If the component has no such implementation
    """
    implementations = base.__subclasses__()
    if not implementations:
        return base

    for impl in implementations:
        if impl.__is_mock__ == use_mock:
            return impl

    kind = "mock" if use_mock else "production"
    raise ValueError(
        f"No {kind} implementation for {base.__mock_component__ or base.__name__}"
    )


__all__ = [
    "Component",
    "EmailProvider",
    "PROVIDERS",
    "PersistenceProvider",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdEmailProvider",
    "ProdPersistenceProvider",
    "ProviderBase",
    "get_provider",
]
