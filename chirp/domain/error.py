"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error.

    Carries every message collected while validating a payload.
    """

    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__("; ".join(errors) or "Invalid payload")


class AuthorizationError(DomainError):
    """Raised when credentials are invalid or lack ownership of a resource."""

    def __init__(self, action: str, username: str):
        self.action = action
        self.username = username
        super().__init__(f"User {username} is not authorized to {action}")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
