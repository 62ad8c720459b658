"""Persistence infrastructure providers."""

from dishka import Scope, provide
from google.cloud.firestore import AsyncClient

from chirp.config import Settings
from chirp.domain.repository import PostRepository
from chirp.persistence.database import create_client
from chirp.persistence.repository import FirestorePostRepository
from chirp.util.di.base import ProviderBase


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using Firestore."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_client(self, settings: Settings) -> AsyncClient:
        """Provide Firestore client."""
        return create_client(settings)

    @provide(scope=Scope.REQUEST)
    def get_post_repository(
        self, client: AsyncClient, settings: Settings
    ) -> PostRepository:
        """Provide Post repository."""
        return FirestorePostRepository(client, settings)
