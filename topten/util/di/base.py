"""Base classes for dependency injection providers."""

from typing import ClassVar, Literal, Type

from dishka import Provider

Component = Literal["persistence", "identity"]


class ProviderBase(Provider):
    """Base for every provider in the container.

    A provider class with subclasses is a swappable component: exactly one
    subclass is the production implementation and tests may register a mock
    one (``__is_mock__ = True``).

    Attributes:
        __mock_component__: Name tests use to pick the real implementation
        __is_mock__: Whether this is a mock implementation
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False


def get_provider(base: Type[ProviderBase], use_mock: bool = False) -> Type[ProviderBase]:
    """Pick the implementation of a provider.

    Args:
        base: Provider registered in the container
        use_mock: Pick the mock implementation of a swappable component

    Returns:
        ``base`` itself when nothing subclasses it, otherwise the matching
        subclass (not instantiated)

    Raises:
        ValueError: If no subclass matches
    """
    implementations = base.__subclasses__()
    if not implementations:
        return base

    for impl in implementations:
        if impl.__is_mock__ == use_mock:
            return impl

    kind = "mock" if use_mock else "production"
    raise ValueError(f"No {kind} implementation for {base.__mock_component__ or base.__name__}")
