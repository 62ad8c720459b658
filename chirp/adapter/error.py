"""Infrastructure layer errors."""


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class AccountsServiceError(AdapterError):
    """The accounts service failed to answer an authorization check."""

    pass
