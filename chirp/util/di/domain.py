"""Domain layer DI providers."""

from dishka import Scope, provide

from chirp.domain.repository import PostRepository
from chirp.domain.service import AccountsClient, PostService
from chirp.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with the repository lifecycle.
    """

    scope = Scope.REQUEST

    @provide
    def get_post_service(
        self, post_repository: PostRepository, accounts_client: AccountsClient
    ) -> PostService:
        """Provide post domain service."""
        return PostService(
            post_repository=post_repository, accounts_client=accounts_client
        )
