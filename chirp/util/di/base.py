"""Base classes for dependency injection providers."""

from typing import ClassVar, Literal

from dishka import Provider

# Swappable infrastructure components
Component = Literal["accounts", "persistence"]


class ProviderBase(Provider):
    """Base for all DI providers.

    Attributes:
        __mock_component__: Component this provider belongs to, None when the
            provider has no mock counterpart
        __is_mock__: Whether this is the test implementation
        __depends_on__: Components that must also be real when this one is
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
    __depends_on__: ClassVar[frozenset[Component]] = frozenset()
