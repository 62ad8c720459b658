"""Mock providers for testing."""

from .accounts import MockAccountsProvider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "MockAccountsProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
