"""Domain value objects for Chirp.

Value objects are immutable and defined by their values, not identity.
"""

from pydantic import Field, SecretStr

from chirp.domain.value.common import ValueObject


class Credentials(ValueObject):
    """Username and password pair presented for every authorization check.

    The password is kept as a secret so it never shows up in reprs or logs.
    """

    username: str = Field(min_length=1, max_length=255)
    password: SecretStr

    @classmethod
    def of(cls, username: str, password: str) -> "Credentials":
        """Build credentials from plain strings."""
        return cls(username=username, password=SecretStr(password))
