"""Document store client management.

Provides the async Firestore client used by the repositories.
"""

import os
from collections.abc import Iterator
from contextlib import contextmanager

from google.cloud.firestore import AsyncClient

from chirp.config import Settings
from chirp.util.error import ConfigurationError

EMULATOR_ENV_VAR = "FIRESTORE_EMULATOR_HOST"
EMULATOR_PROJECT = "chirp-local"


@contextmanager
def _emulator_env(host: str | None) -> Iterator[None]:
    """Expose the emulator host to the client library while it is built.

    The client reads the variable once in its constructor. The previous
    value is restored on exit, so the process environment is left as found.
    """
    if not host or os.environ.get(EMULATOR_ENV_VAR):
        yield
        return

    os.environ[EMULATOR_ENV_VAR] = host
    try:
        yield
    finally:
        del os.environ[EMULATOR_ENV_VAR]


def create_client(settings: Settings) -> AsyncClient:
    """Create async Firestore client.

    When an emulator host is configured, either through settings or the
    FIRESTORE_EMULATOR_HOST variable, the client talks to the emulator and a
    placeholder project is used if none is set. The variable wins over the
    setting when both are present.

    Args:
        settings: Application settings with Firestore configuration

    Returns:
        Configured async client

    Raises:
        ConfigurationError: If no project is configured outside the emulator
    """
    firestore = settings.firestore
    project = firestore.project
    emulated = bool(firestore.emulator_host or os.environ.get(EMULATOR_ENV_VAR))

    if not project:
        if emulated:
            project = EMULATOR_PROJECT
        elif settings.environment == "production":
            raise ConfigurationError("FIRESTORE__PROJECT must be set in production")

    with _emulator_env(firestore.emulator_host):
        return AsyncClient(project=project, database=firestore.database)
