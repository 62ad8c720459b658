"""Dependency injection container."""

from dishka import AsyncContainer, make_async_container

from chirp.config import Settings
from chirp.util.di import PROVIDERS, get_provider
from chirp.util.logging import setup_logging
from chirp.util.observability import configure_logfire, instrument_httpx


def create_container() -> AsyncContainer:
    """Build production container (all prod implementations).

    Settings are loaded from environment variables automatically.

    Returns:
        Configured DI container with production providers
    """
    provider_instances = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    return make_async_container(*provider_instances)


def bootstrap(settings: Settings | None = None) -> AsyncContainer:
    """Configure logging and observability, then build the container.

    The upstream service calls this once at startup and opens a request
    scope per incoming request:

        container = bootstrap()
        async with container() as request_container:
            posts = await request_container.get(PostService)

    Args:
        settings: Application settings (loaded from environment if omitted)

    Returns:
        Production DI container
    """
    settings = settings or Settings()
    setup_logging(settings)
    configure_logfire(settings)

    # Logfire must be configured before instrumentation
    instrument_httpx()

    return create_container()
