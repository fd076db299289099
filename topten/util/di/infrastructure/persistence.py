"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire

from topten.config import Settings
from topten.domain.repository import KeyValueStore, TopTenListRepository
from topten.persistence.database import create_engine
from topten.persistence.repository import KeyValueTopTenListRepository
from topten.persistence.store import (
    FileKeyValueStore,
    InMemoryKeyValueStore,
    SqlKeyValueStore,
)
from topten.util.di.base import ProviderBase
from topten.util.error import ConfigurationError
from topten.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider, store chosen by ``STORAGE__BACKEND``."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_store(self, settings: Settings) -> AsyncIterator[KeyValueStore]:
        """Provide the key-value store for the application's lifetime.

        The store is closed (and pending writes flushed) when the container
        closes.
        """
        storage = settings.storage
        store: KeyValueStore
        if storage.backend == "memory":
            store = InMemoryKeyValueStore()
        elif storage.backend == "file":
            store = FileKeyValueStore(
                storage.file_path, flush_delay=storage.flush_delay_ms / 1000
            )
        elif storage.backend == "sql":
            engine = create_engine(storage, echo=settings.debug)
            instrument_sqlalchemy(engine)
            store = SqlKeyValueStore(engine)
            if storage.create_schema:
                await store.create_schema()
        else:
            raise ConfigurationError(f"Unknown storage backend: {storage.backend}")

        logfire.info("Key-value store opened", backend=storage.backend)
        try:
            yield store
        finally:
            await store.close()

    @provide(scope=Scope.APP)
    def get_list_repository(self, store: KeyValueStore) -> TopTenListRepository:
        """Provide TopTenList repository."""
        return KeyValueTopTenListRepository(store)
