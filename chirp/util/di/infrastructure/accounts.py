"""Accounts service infrastructure providers."""

from dishka import Scope, provide

from chirp.adapter.accounts import HttpAccountsClient
from chirp.config import Settings
from chirp.domain.service import AccountsClient
from chirp.util.di.base import ProviderBase


class AccountsProvider(ProviderBase):
    """Accounts component base."""

    __mock_component__ = "accounts"


class ProdAccountsProvider(AccountsProvider):
    """Production accounts provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_accounts_client(self, settings: Settings) -> AccountsClient:
        """Provide HTTP accounts client.

        Raises:
            ValueError: If the accounts service URL is not configured
        """
        if not settings.accounts.base_url:
            raise ValueError("Accounts service base URL must be configured")

        return HttpAccountsClient(
            base_url=settings.accounts.base_url,
            timeout=settings.accounts.timeout,
        )
