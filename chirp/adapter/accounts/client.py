"""Accounts service client implementation.

The accounts service answers one question for posts: is this
username/password pair valid?

    POST {base_url}/accounts/authorize
    {"username": "...", "password": "..."}

    200 {"authorized": true|false}
    401/403 when the pair is rejected outright
"""

import httpx
import logfire

from chirp.adapter.error import AccountsServiceError
from chirp.domain.service.accounts import AccountsClient

REJECTED_STATUS_CODES = {401, 403}


class HttpAccountsClient(AccountsClient):
    """Accounts client talking to the accounts service over HTTP."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize accounts client.

        Args:
            base_url: Root URL of the accounts service
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport
        self.authorize_url = f"{self.base_url}/accounts/authorize"

    async def is_authorized(self, username: str, password: str) -> bool:
        """Ask the accounts service to check a username/password pair.

        Raises:
            AccountsServiceError: If the service is unreachable or answers
                with an unexpected status or body
        """
        try:
            async with httpx.AsyncClient(transport=self.transport) as client:
                response = await client.post(
                    self.authorize_url,
                    json={"username": username, "password": password},
                    timeout=self.timeout,
                )
        except httpx.HTTPError as e:
            logfire.error("Accounts service HTTP error", error=str(e))
            raise AccountsServiceError(f"HTTP error during authorization: {e}")

        if response.status_code in REJECTED_STATUS_CODES:
            logfire.info(
                "Credentials rejected",
                username=username,
                status_code=response.status_code,
            )
            return False

        if response.status_code != 200:
            logfire.error(
                "Accounts service authorization failed",
                status_code=response.status_code,
                error=response.text,
            )
            raise AccountsServiceError(
                f"Authorization request failed: {response.status_code}"
            )

        try:
            authorized = response.json()["authorized"]
        except (ValueError, KeyError, TypeError):
            raise AccountsServiceError("Malformed authorization response")

        return authorized is True


class MockAccountsClient(AccountsClient):
    """Mock accounts client for testing.

    Keeps a username -> password table in memory.
    """

    def __init__(self, accounts: dict[str, str] | None = None):
        """Initialize mock client.

        Args:
            accounts: Initial username -> password table
        """
        self.accounts: dict[str, str] = dict(accounts or {})

    def register(self, username: str, password: str) -> None:
        """Add or replace an account."""
        self.accounts[username] = password

    async def is_authorized(self, username: str, password: str) -> bool:
        """Check the pair against the in-memory table."""
        return username in self.accounts and self.accounts[username] == password
