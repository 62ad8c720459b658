"""Infrastructure providers."""

# Import bases
from .accounts import AccountsProvider
from .persistence import PersistenceProvider

# Import implementations (needed for __subclasses__())
from .accounts import ProdAccountsProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401

__all__ = [
    "AccountsProvider",
    "PersistenceProvider",
    "ProdAccountsProvider",
    "ProdPersistenceProvider",
]
