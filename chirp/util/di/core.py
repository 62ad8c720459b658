"""Settings provider."""

from dishka import Scope, provide

from chirp.config import Settings
from chirp.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Loads Settings once per container. Shared by tests and production."""

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Read settings from the environment and .env."""
        return Settings()
