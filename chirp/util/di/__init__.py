"""Dependency injection wiring.

PROVIDERS lists one entry per concern. Entries with subclasses are
swappable components (see ``ProviderBase.__mock_component__``); the rest are
used directly by every container.
"""

from chirp.util.di.base import Component, ProviderBase
from chirp.util.di.core import ProdConfigProvider
from chirp.util.di.domain import ProdDomainProvider
from chirp.util.di.infrastructure import (
    AccountsProvider,
    PersistenceProvider,
    ProdAccountsProvider,
    ProdPersistenceProvider,
)

PROVIDERS: list[type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    AccountsProvider,
    PersistenceProvider,
]


def get_provider(
    base: type[ProviderBase], use_mock: bool = False
) -> type[ProviderBase]:
    """Pick the implementation of a provider entry.

    Args:
        base: Entry from PROVIDERS
        use_mock: Select the test implementation of a swappable component

    Returns:
        Provider class to instantiate

    Raises:
        ValueError: If the component has no implementation of that kind
    """
    implementations = base.__subclasses__()
    if not implementations:
        return base

    for impl in implementations:
        if impl.__is_mock__ == use_mock:
            return impl

    kind = "mock" if use_mock else "production"
    raise ValueError(f"No {kind} implementation for {base.__mock_component__}")


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "AccountsProvider",
    "PersistenceProvider",
    "ProdAccountsProvider",
    "ProdPersistenceProvider",
]
