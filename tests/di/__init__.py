"""Mock providers for testing."""

from .identity import MockIdentityProvider, MockIdentityResolver
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "MockIdentityProvider",
    "MockIdentityResolver",
    "MockPersistenceProvider",
    "build_test_container",
]
