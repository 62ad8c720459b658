"""Application configuration."""

from typing import Literal

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict


class FirestoreSettings(BaseModel):
    """Document store configuration."""

    # Google Cloud project; may be left unset when talking to the emulator
    project: str | None = None
    database: str = "(default)"
    collection: str = "Post"

    # e.g. "localhost:8080"; when set, the client connects to the emulator
    emulator_host: str | None = None


class AccountsSettings(BaseModel):
    """Accounts service configuration."""

    base_url: str = "http://localhost:8001"

    # Seconds to wait for the accounts service before giving up
    timeout: float = 10.0


class ObservabilitySettings(BaseModel):
    """Observability configuration for Logfire."""

    # Logfire API token (optional - if not set, logs only go to console)
    # Can be set via OBSERVABILITY__LOGFIRE_TOKEN env var
    logfire_token: str | None = None

    # Whether to send telemetry to Logfire cloud
    # If None, will auto-determine: sends if token is present, otherwise console-only
    send_to_logfire: bool | None = None


class Settings(BaseSettings):
    """Application settings.

    Set environment variables to override, using "__" for nested values:

        ENVIRONMENT=production
        FIRESTORE__PROJECT=chirp-prod
        FIRESTORE__COLLECTION=Post
        ACCOUNTS__BASE_URL=https://accounts.internal
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",  # Allows FIRESTORE__PROJECT syntax
    )

    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False

    # Nested settings
    firestore: FirestoreSettings = FirestoreSettings()
    accounts: AccountsSettings = AccountsSettings()
    observability: ObservabilitySettings = ObservabilitySettings()
