"""Test container builder with selective unmocking."""

from dishka import AsyncContainer, make_async_container

from chirp.util.di import PROVIDERS, Component, ProviderBase, get_provider


def _mockable() -> list[type[ProviderBase]]:
    return [p for p in PROVIDERS if p.__subclasses__()]


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Build a container where every component is mocked unless unmocked.

    Args:
        unmock: Components to use production implementations for

    Returns:
        Configured test container

    Raises:
        ValueError: If a component is unknown or needs another one unmocked

    Examples:
        # Unit tests: in-memory store, mock accounts
        container = build_test_container()

        # Integration tests: Firestore emulator, mock accounts
        container = build_test_container(unmock={"persistence"})
    """
    unmock = unmock or set()
    _validate_unmock(unmock)

    providers = []
    for base in PROVIDERS:
        component = base.__mock_component__
        use_mock = bool(base.__subclasses__()) and component not in unmock
        providers.append(get_provider(base, use_mock=use_mock)())

    return make_async_container(*providers)


def _validate_unmock(unmock: set[Component]) -> None:
    known = {p.__mock_component__ for p in _mockable()}
    unknown = unmock - known
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")

    for base in _mockable():
        if base.__mock_component__ not in unmock:
            continue
        missing = base.__depends_on__ - unmock
        if missing:
            raise ValueError(
                f"Component '{base.__mock_component__}' requires {set(missing)} "
                "to be unmocked"
            )
