"""Accounts collaborator interface."""


class AccountsClient:
    """Generic accounts service interface.

    The accounts service owns usernames, passwords and their hashing policy.
    Posts only ask it whether a username/password pair is valid.
    """

    async def is_authorized(self, username: str, password: str) -> bool:
        """Check a username/password pair.

        Args:
            username: Account username
            password: Plain password as presented by the caller

        Returns:
            True if the pair is valid, False otherwise
        """
        raise NotImplementedError
